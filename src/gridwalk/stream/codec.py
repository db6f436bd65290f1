"""
Frame Codec
===========

HDLC asynchronous framing, compatible with yahdlc.

This is the ONLY place in the codebase that unescapes frames or checks
frame check sequences. The scanner hands it one delimited byte range at
a time and gets back a DecodedFrame or an exception.

Frame Layout (between flags, before escaping):
    +---------+---------+-------------+-----------+
    | address | control | payload ... | FCS (LE)  |
    |  0xFF   | 1 byte  | 0..n bytes  | 2 bytes   |
    +---------+---------+-------------+-----------+

    - Flag sequence 0x7E delimits frames
    - 0x7E and 0x7D inside a frame are sent as 0x7D, byte ^ 0x20
    - FCS is the one's complement of a reflected CRC-16 (poly 0x8408,
      init 0xFFFF); over a valid frame the running FCS ends at 0xF0B8

Control Byte:
    bit 0 == 0 -> DATA, send sequence number in bits 1-3
    bit 0 == 1 -> supervisory, type in bits 2-3 (0 = ACK, else NACK),
                  receive sequence number in bits 5-7

Design Rules:
    - Fails fast: every malformed frame raises a FrameDecodeError
    - Does NOT interpret payloads
"""

import logging
from typing import Iterable, Tuple

from gridwalk.errors import (
    FrameCheckSequenceError,
    FrameTooShortError,
    NoMessageError,
)
from gridwalk.models.frame import DecodedFrame, FrameControl, FrameType


logger = logging.getLogger(__name__)


FLAG_SEQUENCE = 0x7E
CONTROL_ESCAPE = 0x7D
ESCAPE_MASK = 0x20
ALL_STATION_ADDR = 0xFF

FCS_INIT_VALUE = 0xFFFF
FCS_GOOD_VALUE = 0xF0B8
FCS_POLYNOMIAL = 0x8408

# address + control + 2 FCS bytes
MIN_FRAME_BODY = 4

# Control byte bit positions
_S_OR_U = 0
_SEND_SEQ_NO = 1
_S_FRAME_TYPE = 2
_POLL = 4
_RECV_SEQ_NO = 5

# Supervisory frame types
_RECEIVE_READY = 0
_REJECT = 2


def _build_fcs_table() -> Tuple[int, ...]:
    """Precompute the 256-entry lookup table for the reflected CRC-16."""
    table = []
    for byte in range(256):
        value = byte
        for _ in range(8):
            if value & 1:
                value = (value >> 1) ^ FCS_POLYNOMIAL
            else:
                value >>= 1
        table.append(value)
    return tuple(table)


_FCS_TABLE = _build_fcs_table()


def fcs16(data: Iterable[int], fcs: int = FCS_INIT_VALUE) -> int:
    """
    Run the frame check sequence over data.

    Args:
        data: Bytes to accumulate
        fcs: Starting value (FCS_INIT_VALUE for a fresh frame)

    Returns:
        Updated 16-bit FCS
    """
    for byte in data:
        fcs = (fcs >> 8) ^ _FCS_TABLE[(fcs ^ byte) & 0xFF]
    return fcs


def decode_control(value: int) -> FrameControl:
    """Classify a control byte."""
    if value & (1 << _S_OR_U):
        frame_type = (
            FrameType.ACK
            if ((value >> _S_FRAME_TYPE) & 0x3) == _RECEIVE_READY
            else FrameType.NACK
        )
        return FrameControl(frame_type=frame_type, sequence_no=(value >> _RECV_SEQ_NO) & 0x7)

    return FrameControl(frame_type=FrameType.DATA, sequence_no=(value >> _SEND_SEQ_NO) & 0x7)


def encode_control(control: FrameControl) -> int:
    """Build a control byte. DATA frames carry the poll bit, as yahdlc does."""
    seq = control.sequence_no & 0x7
    if control.frame_type == FrameType.DATA:
        return (seq << _SEND_SEQ_NO) | (1 << _POLL)
    if control.frame_type == FrameType.ACK:
        return (seq << _RECV_SEQ_NO) | (1 << _S_OR_U)
    return (seq << _RECV_SEQ_NO) | (_REJECT << _S_FRAME_TYPE) | (1 << _S_OR_U)


def _unescape(raw: bytes) -> bytearray:
    body = bytearray()
    escaped = False
    for byte in raw:
        if escaped:
            body.append(byte ^ ESCAPE_MASK)
            escaped = False
        elif byte == CONTROL_ESCAPE:
            escaped = True
        else:
            body.append(byte)
    return body


def decode_frame(data: bytes) -> DecodedFrame:
    """
    Decode one flag-delimited frame.

    Repeated leading flags are skipped; the opening flag is the last
    flag of the leading run and the closing flag is the next one after
    it. Bytes before the opening flag are ignored.

    Args:
        data: Byte range containing an opening and a closing flag

    Returns:
        DecodedFrame with control field and payload

    Raises:
        NoMessageError: No matching pair of flags
        FrameTooShortError: Fewer than 4 bytes between the flags
        FrameCheckSequenceError: FCS mismatch
    """
    start = data.find(FLAG_SEQUENCE)
    if start < 0:
        raise NoMessageError("no opening flag sequence in frame data")

    while start + 1 < len(data) and data[start + 1] == FLAG_SEQUENCE:
        start += 1

    end = data.find(FLAG_SEQUENCE, start + 1)
    if end < 0:
        raise NoMessageError(
            f"no closing flag sequence after opening flag at offset {start}"
        )

    body = _unescape(data[start + 1:end])

    if len(body) < MIN_FRAME_BODY:
        raise FrameTooShortError(
            f"frame body is {len(body)} bytes, expected at least {MIN_FRAME_BODY}"
        )

    fcs = fcs16(body)
    if fcs != FCS_GOOD_VALUE:
        raise FrameCheckSequenceError(
            f"frame check sequence mismatch (residue 0x{fcs:04X}, "
            f"expected 0x{FCS_GOOD_VALUE:04X})"
        )

    frame = DecodedFrame(
        control=decode_control(body[1]),
        payload=bytes(body[2:-2]),
    )
    logger.debug(f"Decoded {frame!r}")
    return frame


def encode_frame(
    payload: bytes = b"",
    frame_type: FrameType = FrameType.DATA,
    sequence_no: int = 0,
) -> bytes:
    """
    Build a complete frame including both flag sequences.

    Args:
        payload: Payload bytes (ignored by receivers for ACK/NACK)
        frame_type: Frame classification
        sequence_no: Sequence number (0-7)

    Returns:
        Escaped frame bytes, starting and ending with FLAG_SEQUENCE
    """
    control = encode_control(FrameControl(frame_type=frame_type, sequence_no=sequence_no))
    body = bytearray([ALL_STATION_ADDR, control])
    body.extend(payload)

    fcs = fcs16(body) ^ 0xFFFF
    body.append(fcs & 0xFF)
    body.append((fcs >> 8) & 0xFF)

    out = bytearray([FLAG_SEQUENCE])
    for byte in body:
        if byte in (FLAG_SEQUENCE, CONTROL_ESCAPE):
            out.append(CONTROL_ESCAPE)
            out.append(byte ^ ESCAPE_MASK)
        else:
            out.append(byte)
    out.append(FLAG_SEQUENCE)
    return bytes(out)


def encode_transmission(frames: Iterable[bytes]) -> bytes:
    """
    Concatenate complete frames back to back.

    The scanner skips exactly one byte after every closing flag; with
    back-to-back frames that byte is the next frame's opening flag.
    """
    return b"".join(frames)
