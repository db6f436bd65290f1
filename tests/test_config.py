"""
Configuration Tests
===================

YAML loading, environment overrides and validation.
"""

import pytest
from pydantic import ValidationError

from gridwalk.config import Settings, load_config
from gridwalk.models.position import Grid, Position


ENV_VARS = [
    "GRIDWALK_INPUT_PATH",
    "GRIDWALK_GRID_WIDTH",
    "GRIDWALK_GRID_HEIGHT",
    "GRIDWALK_OUTPUT_FORMAT",
    "GRIDWALK_TRACE",
    "GRIDWALK_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure no GRIDWALK_* variable leaks into these tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    """Tests for default settings."""
    
    def test_defaults_without_file(self, tmp_path):
        settings = load_config(str(tmp_path / "missing.yaml"))
        
        assert settings.input.path == "transmission.bin"
        assert settings.grid.to_grid() == Grid(width=5, height=5)
        assert settings.grid.start_position() == Position(0, 4)
        assert settings.output.format == "text"
        assert settings.output.trace is False
        assert settings.logging.level == "INFO"
    
    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == Settings()


class TestYamlLoading:
    """Tests for YAML config files."""
    
    def test_values_from_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "input:\n"
            "  path: recorded.bin\n"
            "grid:\n"
            "  width: 8\n"
            "  height: 6\n"
            "  start_x: 3\n"
            "  start_y: 5\n"
            "output:\n"
            "  format: json\n"
            "  trace: true\n"
        )
        
        settings = load_config(str(path))
        
        assert settings.input.path == "recorded.bin"
        assert settings.grid.to_grid() == Grid(width=8, height=6)
        assert settings.grid.start_position() == Position(3, 5)
        assert settings.output.format == "json"
        assert settings.output.trace is True
    
    def test_start_outside_grid_is_invalid(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("grid:\n  width: 3\n  height: 3\n")
        
        with pytest.raises(ValidationError):
            load_config(str(path))
    
    def test_unknown_output_format_is_invalid(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("output:\n  format: xml\n")
        
        with pytest.raises(ValidationError):
            load_config(str(path))


class TestEnvironmentOverrides:
    """Tests for GRIDWALK_* environment variables."""
    
    def test_env_beats_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("input:\n  path: from_file.bin\n")
        monkeypatch.setenv("GRIDWALK_INPUT_PATH", "from_env.bin")
        
        assert load_config(str(path)).input.path == "from_env.bin"
    
    def test_grid_and_output_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GRIDWALK_GRID_WIDTH", "7")
        monkeypatch.setenv("GRIDWALK_GRID_HEIGHT", "9")
        monkeypatch.setenv("GRIDWALK_OUTPUT_FORMAT", "json")
        monkeypatch.setenv("GRIDWALK_LOG_LEVEL", "DEBUG")
        
        settings = load_config(str(tmp_path / "missing.yaml"))
        
        assert settings.grid.to_grid() == Grid(width=7, height=9)
        assert settings.output.format == "json"
        assert settings.logging.level == "DEBUG"
    
    @pytest.mark.parametrize("value, expected", [("1", True), ("true", True), ("off", False)])
    def test_trace_flag(self, tmp_path, monkeypatch, value, expected):
        monkeypatch.setenv("GRIDWALK_TRACE", value)
        assert load_config(str(tmp_path / "missing.yaml")).output.trace is expected
    
    @pytest.mark.parametrize("name", ["GRIDWALK_GRID_WIDTH", "GRIDWALK_GRID_HEIGHT"])
    def test_non_numeric_grid_size_is_invalid(self, tmp_path, monkeypatch, name):
        monkeypatch.setenv(name, "abc")
        with pytest.raises(ValidationError):
            load_config(str(tmp_path / "missing.yaml"))
    
    def test_unparseable_trace_flag_is_invalid(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GRIDWALK_TRACE", "maybe")
        with pytest.raises(ValidationError):
            load_config(str(tmp_path / "missing.yaml"))
