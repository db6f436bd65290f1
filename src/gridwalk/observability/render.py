"""
Grid Rendering
==============

Text rendering of the player position for trace output.

Each cell is two characters wide so the grid looks roughly square in
a terminal. The player cell is drawn as "xx", every other cell as
"██". Example for (0, 4) on the default grid:

    ██████████
    ██████████
    ██████████
    ██████████
    xx████████

PURELY DESCRIPTIVE. Rendering never influences the replay.
"""

from gridwalk.models.position import DEFAULT_GRID, Grid, Position


EMPTY_CELL = "██"
PLAYER_CELL = "xx"


def render_grid(position: Position, grid: Grid = DEFAULT_GRID) -> str:
    """
    Render the grid with the player marked.
    
    Args:
        position: Player position (inside grid)
        grid: Grid bounds
        
    Returns:
        Multi-line string, one line per row, no trailing newline
    """
    rows = []
    for y in range(grid.height):
        cells = [
            PLAYER_CELL if (x, y) == (position.x, position.y) else EMPTY_CELL
            for x in range(grid.width)
        ]
        rows.append("".join(cells))
    return "\n".join(rows)
