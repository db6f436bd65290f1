"""
Test Configuration
==================

Pytest fixtures and test configuration for GridWalk.
"""

from typing import Iterable, Union

import pytest

from gridwalk.models.frame import FrameType
from gridwalk.stream.codec import encode_frame, encode_transmission


FrameSpec = Union[int, FrameType]


def build_transmission(items: Iterable[FrameSpec]) -> bytes:
    """
    Build a transmission from a compact description.
    
    Each int becomes a DATA frame carrying that single byte; each
    FrameType.ACK / FrameType.NACK becomes a supervisory frame.
    Sequence numbers count up per frame type, like a real sender.
    """
    frames = []
    send_seq = 0
    recv_seq = 0
    for item in items:
        if isinstance(item, FrameType):
            frames.append(encode_frame(frame_type=item, sequence_no=recv_seq))
            recv_seq = (recv_seq + 1) % 8
        else:
            frames.append(encode_frame(bytes([int(item)]), sequence_no=send_seq))
            send_seq = (send_seq + 1) % 8
    return encode_transmission(frames)


@pytest.fixture
def make_transmission():
    """Provide the transmission builder."""
    return build_transmission


@pytest.fixture
def transmission_file(tmp_path):
    """Write a transmission to a temporary file and return its path."""
    
    def _write(items: Iterable[FrameSpec], name: str = "transmission.bin"):
        path = tmp_path / name
        path.write_bytes(build_transmission(items))
        return path
    
    return _write
