"""
Engine Module
=============

Deterministic replay of commands onto a clamped grid position.

This module implements the core replay logic:
    - movement.py: Grid-clamped move application
    - delay_queue.py: Three-slot delay ring with run-of-three discard
    - move_engine.py: Owns queue + position, flushes at end of stream

Key Design Decisions:
    - Every command is applied one step late
    - Runs of three identical commands never reach the position
    - The end-of-stream flush applies leftovers without debouncing
"""

from gridwalk.engine.delay_queue import DELAY_SLOTS, DelayQueue
from gridwalk.engine.move_engine import EngineMetrics, MoveEngine, MoveObserver
from gridwalk.engine.movement import apply_move, clamp

__all__ = [
    "DELAY_SLOTS",
    "DelayQueue",
    "EngineMetrics",
    "MoveEngine",
    "MoveObserver",
    "apply_move",
    "clamp",
]
