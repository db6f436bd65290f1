"""
GridWalk
========

Replays HDLC-framed movement commands against a bounded 2D grid.

A recorded transmission is scanned frame by frame. Each data frame
carries one movement command; acknowledgement frames are skipped. The
commands are replayed one step late through a three-slot delay queue
that drops runs of three identical commands, and every move is clamped
to the grid.

Components:
    - stream: Transmission loading, HDLC frame codec, frame scanner
    - engine: Delay queue, move application, move engine
    - observability: Grid rendering for trace output
    - models: Commands, frames, positions and the run report

Example:
    from gridwalk.main import run
    from gridwalk.stream import load_transmission
    
    report = run(load_transmission("transmission.bin"))
    print(report.position)
"""

__version__ = "0.1.0"
__author__ = "GridWalk Project"

__all__ = [
    "__version__",
]
