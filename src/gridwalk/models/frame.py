"""
Frame Models
============

Typed results of decoding one HDLC frame.

These models are the interface between the frame codec and the
scanner. Only the scanner inspects them; the move engine sees
commands, never frames.
"""

from dataclasses import dataclass
from enum import Enum


class FrameType(str, Enum):
    """
    Frame classification derived from the control byte.
    
    Attributes:
        DATA: Information frame carrying a payload
        ACK: Supervisory receive-ready frame
        NACK: Any other supervisory frame (reject, not ready, ...)
    """
    
    DATA = "DATA"
    ACK = "ACK"
    NACK = "NACK"


@dataclass(frozen=True, slots=True)
class FrameControl:
    """
    Decoded control field.
    
    Attributes:
        frame_type: Data or supervisory classification
        sequence_no: Send sequence number for DATA, receive sequence
            number for ACK/NACK (0-7)
    """
    
    frame_type: FrameType
    sequence_no: int
    
    @property
    def is_data(self) -> bool:
        return self.frame_type == FrameType.DATA


@dataclass(frozen=True, slots=True)
class DecodedFrame:
    """
    A validated frame.
    
    Attributes:
        control: Decoded control field
        payload: Unescaped payload with address, control and FCS removed
    """
    
    control: FrameControl
    payload: bytes
    
    def __repr__(self) -> str:
        """Compact repr that doesn't dump the full payload."""
        return (
            f"DecodedFrame(type={self.control.frame_type.value}, "
            f"seq={self.control.sequence_no}, "
            f"payload_len={len(self.payload)})"
        )
