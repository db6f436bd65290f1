"""
GridWalk Main Application
=========================

Command line entry point: replay a recorded transmission and report
where the player ends up.

Pipeline:
    load_transmission -> FrameScanner -> MoveEngine -> RunReport

Any GridWalkError (missing input, malformed frame) aborts the run.
Nothing is printed on stdout in that case and the exit status is 1.

Usage:
    gridwalk transmission.bin
    gridwalk transmission.bin --format json
    gridwalk --trace --log-level DEBUG
    python -m gridwalk --config config.yaml
"""

import argparse
import logging
import sys
from typing import List, Optional

from gridwalk.config import Settings, load_config, setup_logging
from gridwalk.engine import MoveEngine, MoveObserver
from gridwalk.errors import GridWalkError
from gridwalk.models.command import Command
from gridwalk.models.output import PositionReport, RunReport
from gridwalk.models.position import DEFAULT_GRID, START_POSITION, Grid, Position
from gridwalk.observability import render_grid
from gridwalk.stream import FrameScanner, load_transmission


logger = logging.getLogger(__name__)


# =============================================================================
# Pipeline
# =============================================================================

def run(
    data: bytes,
    grid: Grid = DEFAULT_GRID,
    start: Position = START_POSITION,
    on_move: Optional[MoveObserver] = None,
) -> RunReport:
    """
    Replay a transmission buffer.

    Args:
        data: Raw transmission bytes
        grid: Grid bounds
        start: Initial position
        on_move: Optional callback after every applied move

    Returns:
        RunReport with the final position and counters

    Raises:
        FrameDecodeError: A frame in the buffer is malformed
    """
    scanner = FrameScanner(data)
    engine = MoveEngine(grid=grid, start=start, on_move=on_move)

    final = engine.run(scanner)

    return RunReport(
        position=PositionReport.from_position(final),
        scanner=scanner.metrics.to_report(),
        engine=engine.metrics.to_report(),
    )


def format_report(report: RunReport, output_format: str = "text") -> str:
    """Render a report for stdout."""
    if output_format == "json":
        return report.model_dump_json(indent=2)
    return f"Player position is at ({report.position.x}, {report.position.y})"


def _trace_printer(grid: Grid) -> MoveObserver:
    """Build a move observer that prints the grid to stderr after every move."""

    def _print(command: Command, position: Position) -> None:
        print(f"{command!r} -> {position}", file=sys.stderr)
        print(render_grid(position, grid), file=sys.stderr)
        print(file=sys.stderr)

    return _print


# =============================================================================
# Command Line
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridwalk",
        description="Replay HDLC-framed movement commands on a bounded grid",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Transmission file (default: input.path from config)",
    )
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default=None,
        help="Result format (default: output.format from config)",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Print the grid after every applied move",
    )
    parser.add_argument("--log-level", default=None, help="Override logging.level")
    return parser


def _apply_cli_overrides(base: Settings, args: argparse.Namespace) -> Settings:
    """Apply command line flags on top of loaded settings."""
    update = {}
    if args.input:
        update["input"] = base.input.model_copy(update={"path": args.input})
    if args.format:
        update["output"] = base.output.model_copy(update={"format": args.format})
    if args.trace:
        output = update.get("output", base.output)
        update["output"] = output.model_copy(update={"trace": True})
    if args.log_level:
        update["logging"] = base.logging.model_copy(update={"level": args.log_level})
    return base.model_copy(update=update)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line interface.

    Returns:
        Process exit status (0 on success, 1 on any fatal error)
    """
    args = build_parser().parse_args(argv)

    base = load_config(args.config)
    config = _apply_cli_overrides(base, args)
    setup_logging(config)

    grid = config.grid.to_grid()
    on_move = _trace_printer(grid) if config.output.trace else None

    try:
        data = load_transmission(config.input.path)
        report = run(
            data,
            grid=grid,
            start=config.grid.start_position(),
            on_move=on_move,
        )
    except GridWalkError as e:
        logger.error(f"Run aborted: {e}")
        return 1

    print(format_report(report, config.output.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
