"""
Move Application
================

Grid-clamped movement.

Leaving the grid is an illegal move, handled by saturation: the
coordinate is pinned at the edge and the command is still considered
consumed. Clamping never wraps and never rejects.

Rules:
    UP    -> y = clamp(y - 1)
    DOWN  -> y = clamp(y + 1)
    RIGHT -> x = clamp(x + 1)
    LEFT  -> x = clamp(x - 1)
    unrecognized -> no-op
"""

from gridwalk.models.command import Command, Direction
from gridwalk.models.position import DEFAULT_GRID, Grid, Position


def clamp(value: int, minimum: int, maximum: int) -> int:
    """Saturate value into [minimum, maximum]."""
    return max(minimum, min(value, maximum))


def apply_move(
    position: Position,
    command: Command,
    grid: Grid = DEFAULT_GRID,
) -> Position:
    """
    Apply one command to a position.
    
    Args:
        position: Current position (inside grid)
        command: Command to apply
        grid: Grid bounds to clamp against
        
    Returns:
        New position; the same position for unrecognized commands
        or moves blocked by an edge
    """
    direction = command.direction
    x, y = position.x, position.y
    
    if direction == Direction.UP:
        y = clamp(y - 1, 0, grid.max_y)
    elif direction == Direction.DOWN:
        y = clamp(y + 1, 0, grid.max_y)
    elif direction == Direction.RIGHT:
        x = clamp(x + 1, 0, grid.max_x)
    elif direction == Direction.LEFT:
        x = clamp(x - 1, 0, grid.max_x)
    else:
        return position
    
    return Position(x=x, y=y)
