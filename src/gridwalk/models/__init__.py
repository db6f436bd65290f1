"""
Data Models
===========

Typed values passed through the GridWalk pipeline.

Models:
    Frames:
        - FrameType: DATA / ACK / NACK classification
        - FrameControl: Decoded control field
        - DecodedFrame: Validated frame with payload
    
    Commands:
        - Direction: Recognized movement directions
        - Command: One payload byte (recognized or not)
    
    Position:
        - Grid: Rectangular bounds
        - Position: Immutable (x, y)
    
    Output:
        - RunReport: Final position plus counters
"""

from gridwalk.models.command import Command, Direction, UP, DOWN, RIGHT, LEFT
from gridwalk.models.frame import DecodedFrame, FrameControl, FrameType
from gridwalk.models.position import DEFAULT_GRID, START_POSITION, Grid, Position
from gridwalk.models.output import EngineReport, PositionReport, RunReport, ScannerReport

__all__ = [
    # Frames
    "FrameType",
    "FrameControl",
    "DecodedFrame",
    # Commands
    "Direction",
    "Command",
    "UP",
    "DOWN",
    "RIGHT",
    "LEFT",
    # Position
    "Grid",
    "Position",
    "DEFAULT_GRID",
    "START_POSITION",
    # Output
    "PositionReport",
    "ScannerReport",
    "EngineReport",
    "RunReport",
]
