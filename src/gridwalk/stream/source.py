"""
Transmission Source
===================

Loads the transmission buffer from disk.

The whole file is read into memory up front; scanning never touches
the filesystem again.
"""

import logging
from pathlib import Path
from typing import Union

from gridwalk.errors import InputLoadError


logger = logging.getLogger(__name__)


def load_transmission(path: Union[str, Path]) -> bytes:
    """
    Read a transmission file.

    Args:
        path: Location of the recorded transmission

    Returns:
        The raw buffer

    Raises:
        InputLoadError: If the path is missing, is not a file, or
            cannot be read
    """
    path = Path(path)

    if not path.exists():
        raise InputLoadError(f"Transmission file not found: {path}")
    if not path.is_file():
        raise InputLoadError(f"Transmission path is not a file: {path}")

    try:
        data = path.read_bytes()
    except OSError as e:
        raise InputLoadError(f"Could not read transmission {path}: {e}") from e

    logger.info(f"Loaded transmission from {path} ({len(data)} bytes)")
    return data
