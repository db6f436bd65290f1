"""
Move Engine
===========

Replays commands against a clamped grid position.

The engine owns the delay queue and the position exclusively. Commands
are pushed in one at a time; a command only reaches the position when
a later command pushes it out of the queue, or when the stream ends
and the queue is flushed.

Lifecycle:
    START -> step()* -> finish() -> FINISHED

    After finish() the position is final and further commands are
    rejected.
"""

import logging
from typing import Callable, Iterable, Optional

from gridwalk.engine.delay_queue import DelayQueue
from gridwalk.engine.movement import apply_move
from gridwalk.models.command import Command
from gridwalk.models.output import EngineReport
from gridwalk.models.position import DEFAULT_GRID, START_POSITION, Grid, Position


logger = logging.getLogger(__name__)


# Called with (applied command, position after the move)
MoveObserver = Callable[[Command, Position], None]


class EngineMetrics:
    """Metrics for MoveEngine observability."""

    __slots__ = (
        "commands_ingested",
        "moves_applied",
        "unrecognized_applied",
        "triples_discarded",
        "moves_flushed",
    )

    def __init__(self) -> None:
        self.commands_ingested: int = 0
        self.moves_applied: int = 0
        self.unrecognized_applied: int = 0
        self.triples_discarded: int = 0
        self.moves_flushed: int = 0

    def to_dict(self) -> dict:
        """Export metrics as dict."""
        return {
            "commands_ingested": self.commands_ingested,
            "moves_applied": self.moves_applied,
            "unrecognized_applied": self.unrecognized_applied,
            "triples_discarded": self.triples_discarded,
            "moves_flushed": self.moves_flushed,
        }

    def to_report(self) -> EngineReport:
        return EngineReport(**self.to_dict())


class MoveEngine:
    """
    Delayed-debounce replay of a command sequence.

    Attributes:
        grid: Grid bounds
        position: Current position (final after finish())
        finished: Whether the queue has been flushed
        metrics: Operational counters

    Example:
        engine = MoveEngine()
        final = engine.run(FrameScanner(data))
        print(final)  # (2, 4)
    """

    def __init__(
        self,
        grid: Grid = DEFAULT_GRID,
        start: Position = START_POSITION,
        on_move: Optional[MoveObserver] = None,
    ) -> None:
        """
        Initialize move engine.

        Args:
            grid: Grid bounds to clamp against
            start: Initial position, must lie inside the grid
            on_move: Optional callback invoked after every applied move
        """
        if not grid.contains(start.x, start.y):
            raise ValueError(f"start position {start} is outside the {grid.width}x{grid.height} grid")

        self.grid = grid
        self._position = start
        self._queue = DelayQueue()
        self._on_move = on_move
        self._finished: bool = False
        self.metrics = EngineMetrics()

    @property
    def position(self) -> Position:
        return self._position

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def queue(self) -> DelayQueue:
        """Pending commands (read-only use)."""
        return self._queue

    def step(self, command: Command) -> Optional[Command]:
        """
        Ingest one command.

        Args:
            command: Next command from the scanner

        Returns:
            The previously queued command applied during this step,
            or None if nothing was due

        Raises:
            RuntimeError: If the engine has already been finished
        """
        if self._finished:
            raise RuntimeError("MoveEngine already finished; no further commands accepted")

        self.metrics.commands_ingested += 1
        due = self._queue.ingest(command)
        self.metrics.triples_discarded = self._queue.triples_discarded

        if due is not None:
            self._apply(due)
        return due

    def finish(self) -> Position:
        """
        Flush the delay queue and return the final position.

        Calling finish() again returns the same position.
        """
        if self._finished:
            return self._position

        for command in self._queue.flush():
            self._apply(command)
            self.metrics.moves_flushed += 1

        self._finished = True
        logger.info(
            f"MoveEngine finished at {self._position}: "
            f"{self.metrics.commands_ingested} commands, "
            f"{self.metrics.moves_applied} applied, "
            f"{self.metrics.triples_discarded} triples discarded"
        )
        return self._position

    def run(self, commands: Iterable[Command]) -> Position:
        """Consume commands until exhausted, then flush."""
        for command in commands:
            self.step(command)
        return self.finish()

    def _apply(self, command: Command) -> None:
        self._position = apply_move(self._position, command, self.grid)
        self.metrics.moves_applied += 1
        if not command.is_recognized:
            self.metrics.unrecognized_applied += 1

        logger.debug(f"Applied {command!r} -> {self._position}")
        if self._on_move is not None:
            self._on_move(command, self._position)
