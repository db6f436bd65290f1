"""
Position Models
===============

Grid bounds and the player position.

Coordinate system (default 5x5 grid):

     --- --- --- --- ---
    |0,0|   |   |   |4,0|
     --- --- --- --- ---
    |   |   |   |   |   |
     --- --- --- --- ---
    |   |   |   |   |   |
     --- --- --- --- ---
    |   |   |   |   |   |
     --- --- --- --- ---
    |0,4|   |   |   |4,4|
     --- --- --- --- ---

Rules:
    - A Position is immutable; moving produces a new Position
    - Coordinates always stay inside the grid (inclusive bounds)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Grid:
    """
    Rectangular grid bounds.
    
    Attributes:
        width: Number of columns (x in [0, width - 1])
        height: Number of rows (y in [0, height - 1])
    """
    
    width: int = 5
    height: int = 5
    
    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("grid dimensions must be >= 1")
    
    @property
    def max_x(self) -> int:
        return self.width - 1
    
    @property
    def max_y(self) -> int:
        return self.height - 1
    
    def contains(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies inside the grid."""
        return 0 <= x <= self.max_x and 0 <= y <= self.max_y


DEFAULT_GRID = Grid()


@dataclass(frozen=True, slots=True)
class Position:
    """
    Player position on the grid.
    
    Attributes:
        x: Column, 0 is the left edge
        y: Row, 0 is the top edge
    """
    
    x: int
    y: int
    
    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


# The player starts in the bottom-left corner
START_POSITION = Position(x=0, y=4)
