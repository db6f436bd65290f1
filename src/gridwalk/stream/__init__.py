"""
Stream Module
=============

Transmission ingestion: loading, frame decoding and scanning.

This module provides the ingestion layer for GridWalk:
    - load_transmission: Reads the recorded buffer from disk
    - decode_frame / encode_frame: HDLC frame codec
    - FrameScanner: Lazy iterator of commands over a buffer

Example:
    from gridwalk.stream import FrameScanner, load_transmission
    
    data = load_transmission("transmission.bin")
    for command in FrameScanner(data):
        process(command)
"""

from gridwalk.stream.codec import (
    FLAG_SEQUENCE,
    decode_frame,
    encode_frame,
    encode_transmission,
)
from gridwalk.stream.scanner import FrameScanner, ScannerMetrics
from gridwalk.stream.source import load_transmission


__all__ = [
    "FLAG_SEQUENCE",
    "decode_frame",
    "encode_frame",
    "encode_transmission",
    "FrameScanner",
    "ScannerMetrics",
    "load_transmission",
]
