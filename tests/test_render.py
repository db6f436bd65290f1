"""
Grid Rendering Tests
====================
"""

from gridwalk.models.position import Grid, Position
from gridwalk.observability.render import render_grid


class TestRenderGrid:
    """Tests for trace rendering."""
    
    def test_start_position(self):
        expected = "\n".join([
            "██████████",
            "██████████",
            "██████████",
            "██████████",
            "xx████████",
        ])
        assert render_grid(Position(0, 4)) == expected
    
    def test_top_right_corner(self):
        rows = render_grid(Position(4, 0)).split("\n")
        assert rows[0] == "████████xx"
        assert all("xx" not in row for row in rows[1:])
    
    def test_custom_grid_shape(self):
        rows = render_grid(Position(1, 1), Grid(width=2, height=3)).split("\n")
        assert rows == ["████", "██xx", "████"]
