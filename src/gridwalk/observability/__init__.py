"""
Observability Module
====================

Descriptive output for humans. Nothing here influences the replay.

Components:
    - render_grid: Text rendering of the position, used by --trace
"""

from gridwalk.observability.render import EMPTY_CELL, PLAYER_CELL, render_grid

__all__ = [
    "EMPTY_CELL",
    "PLAYER_CELL",
    "render_grid",
]
