"""
GridWalk Configuration
======================

This module handles configuration loading for GridWalk.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Command line flags are applied on top of the loaded settings by main.py.

Environment Variable Mapping:
    GRIDWALK_INPUT_PATH    -> input.path
    GRIDWALK_GRID_WIDTH    -> grid.width
    GRIDWALK_GRID_HEIGHT   -> grid.height
    GRIDWALK_OUTPUT_FORMAT -> output.format
    GRIDWALK_TRACE         -> output.trace
    GRIDWALK_LOG_LEVEL     -> logging.level

Example:
    from gridwalk.config import load_config

    settings = load_config()
    print(settings.input.path)
    print(settings.grid.to_grid())
"""

import os
import logging
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, model_validator

from gridwalk.models.position import Grid, Position


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class InputConfig(BaseModel):
    """Transmission input configuration."""

    path: str = Field(
        default="transmission.bin",
        description="Path to the recorded transmission",
    )


class GridConfig(BaseModel):
    """Grid bounds and starting position."""

    width: int = Field(default=5, ge=1, description="Number of columns")
    height: int = Field(default=5, ge=1, description="Number of rows")
    start_x: int = Field(default=0, ge=0, description="Starting column")
    start_y: int = Field(default=4, ge=0, description="Starting row")

    @model_validator(mode="after")
    def _start_inside_grid(self) -> "GridConfig":
        if self.start_x >= self.width or self.start_y >= self.height:
            raise ValueError(
                f"start ({self.start_x}, {self.start_y}) is outside the "
                f"{self.width}x{self.height} grid"
            )
        return self

    def to_grid(self) -> Grid:
        return Grid(width=self.width, height=self.height)

    def start_position(self) -> Position:
        return Position(x=self.start_x, y=self.start_y)


class OutputConfig(BaseModel):
    """Result reporting configuration."""

    format: Literal["text", "json"] = Field(
        default="text",
        description="Result format: 'text' or 'json'",
    )
    trace: bool = Field(
        default=False,
        description="Print the grid after every applied move",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for GridWalk.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    input: InputConfig = Field(default_factory=InputConfig)
    grid: GridConfig = Field(default_factory=GridConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to config.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration
    """
    # Find config file
    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    # Load from YAML if exists
    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.debug("No config file found, using defaults and environment variables")

    # Apply environment variable overrides
    _apply_env_overrides(config_data)

    # Build settings object
    settings = Settings.model_validate(config_data)

    return settings


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Input settings
    if env_path := os.environ.get("GRIDWALK_INPUT_PATH"):
        config_data.setdefault("input", {})["path"] = env_path

    # Grid settings (raw strings, coerced by pydantic)
    if env_width := os.environ.get("GRIDWALK_GRID_WIDTH"):
        config_data.setdefault("grid", {})["width"] = env_width
    if env_height := os.environ.get("GRIDWALK_GRID_HEIGHT"):
        config_data.setdefault("grid", {})["height"] = env_height

    # Output settings
    if env_format := os.environ.get("GRIDWALK_OUTPUT_FORMAT"):
        config_data.setdefault("output", {})["format"] = env_format
    if env_trace := os.environ.get("GRIDWALK_TRACE"):
        config_data.setdefault("output", {})["trace"] = env_trace

    # Logging settings
    if env_log := os.environ.get("GRIDWALK_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings. Logs go to stderr."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

