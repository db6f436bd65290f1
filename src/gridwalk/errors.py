"""
Error Types
===========

Exception hierarchy shared by the GridWalk pipeline.

Every failure in this system is fatal: decode failures and missing input
abort the run without producing a partial position. Conditions that are
tolerated (clamped moves, unrecognized command bytes, non-data frames)
never raise.
"""


class GridWalkError(Exception):
    """Base class for all fatal GridWalk errors."""
    pass


class FrameDecodeError(GridWalkError):
    """Raised when a delimited byte range cannot be decoded into a frame."""
    pass


class NoMessageError(FrameDecodeError):
    """The data did not contain a matching pair of flag sequences."""
    pass


class FrameTooShortError(FrameDecodeError):
    """The frame is shorter than address + control + frame check sequence."""
    pass


class FrameCheckSequenceError(FrameDecodeError):
    """The frame check sequence did not match the frame contents."""
    pass


class InputLoadError(GridWalkError):
    """Raised when the transmission buffer cannot be loaded."""
    pass
