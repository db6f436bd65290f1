"""
Command Models
==============

Movement commands decoded from data frame payloads.

A command wraps exactly one payload byte. Known byte values map to a
Direction; any other value is an unrecognized command, which is a legal
no-op when applied but still takes part in debouncing.

Byte Mapping:
    1 -> UP     (y - 1)
    2 -> DOWN   (y + 1)
    3 -> RIGHT  (x + 1)
    4 -> LEFT   (x - 1)
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class Direction(IntEnum):
    """
    Recognized movement directions, keyed by their wire byte.
    
    Attributes:
        UP: Move one row towards y = 0
        DOWN: Move one row away from y = 0
        RIGHT: Move one column away from x = 0
        LEFT: Move one column towards x = 0
    """
    
    UP = 1
    DOWN = 2
    RIGHT = 3
    LEFT = 4


@dataclass(frozen=True, slots=True)
class Command:
    """
    A single decoded command.
    
    Two commands are equal if and only if their bytes are equal, so
    unrecognized bytes still form runs of identical commands.
    
    Attributes:
        code: First payload byte of the data frame (0-255)
    """
    
    code: int
    
    def __post_init__(self) -> None:
        """Validate invariants."""
        if not 0 <= self.code <= 0xFF:
            raise ValueError("code must be a single byte (0-255)")
    
    @classmethod
    def from_direction(cls, direction: Direction) -> "Command":
        """Build the command carrying a known direction."""
        return cls(int(direction))
    
    @property
    def direction(self) -> Optional[Direction]:
        """Direction for this command, or None when unrecognized."""
        try:
            return Direction(self.code)
        except ValueError:
            return None
    
    @property
    def is_recognized(self) -> bool:
        return self.direction is not None
    
    def __repr__(self) -> str:
        direction = self.direction
        if direction is None:
            return f"Command(code=0x{self.code:02X}, unrecognized)"
        return f"Command({direction.name})"


# Convenience singletons for the four recognized commands
UP = Command.from_direction(Direction.UP)
DOWN = Command.from_direction(Direction.DOWN)
RIGHT = Command.from_direction(Direction.RIGHT)
LEFT = Command.from_direction(Direction.LEFT)
