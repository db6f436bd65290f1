"""
Frame Scanner
=============

Pull-based iterator that turns a transmission buffer into commands.

The scanner walks the buffer looking for flag sequences. Each time it
finds one, the byte range since the previous frame boundary goes to the
frame codec. Data frames produce one command (their first payload byte);
supervisory frames are skipped and never reach the consumer.

Cursor Rules:
    - start = 0, end = 1: the first byte is the opening flag of the
      first frame, so the search for a closing flag begins one byte in
    - After a closing flag at index e: start = e + 1, end = e + 2.
      Exactly one byte is skipped, because it is the opening flag of
      the next frame
    - Trailing bytes with no closing flag are ignored

Design Rules:
    - Lazy: at most one command is materialized per call
    - Not restartable: scan again with a fresh FrameScanner
    - A decode failure propagates; there is no recovery or retry
"""

import logging
from typing import Callable, Iterator, Optional

from gridwalk.models.command import Command
from gridwalk.models.frame import DecodedFrame, FrameType
from gridwalk.models.output import ScannerReport
from gridwalk.stream.codec import FLAG_SEQUENCE, decode_frame


logger = logging.getLogger(__name__)


FrameDecoder = Callable[[bytes], DecodedFrame]


class ScannerMetrics:
    """Metrics for FrameScanner observability."""

    __slots__ = (
        "frames_decoded",
        "data_frames",
        "ack_frames",
        "nack_frames",
        "empty_data_frames",
        "commands_emitted",
    )

    def __init__(self) -> None:
        self.frames_decoded: int = 0
        self.data_frames: int = 0
        self.ack_frames: int = 0
        self.nack_frames: int = 0
        self.empty_data_frames: int = 0
        self.commands_emitted: int = 0

    def to_dict(self) -> dict:
        """Export metrics as dict."""
        return {
            "frames_decoded": self.frames_decoded,
            "data_frames": self.data_frames,
            "ack_frames": self.ack_frames,
            "nack_frames": self.nack_frames,
            "empty_data_frames": self.empty_data_frames,
            "commands_emitted": self.commands_emitted,
        }

    def to_report(self) -> ScannerReport:
        return ScannerReport(**self.to_dict())


class FrameScanner:
    """
    Iterator over the commands carried by a transmission buffer.

    Attributes:
        exhausted: Whether the end of the buffer has been reached
        metrics: Frame counters

    Example:
        scanner = FrameScanner(data)

        for command in scanner:
            engine.step(command)

        # Or pull explicitly
        command = scanner.next_command()  # None once exhausted
    """

    def __init__(
        self,
        data: bytes,
        decoder: FrameDecoder = decode_frame,
    ) -> None:
        """
        Initialize frame scanner.

        Args:
            data: Transmission buffer (read only)
            decoder: Frame codec, turns a delimited range into a frame
                and raises FrameDecodeError on malformed data
        """
        self._data = data
        self._decoder = decoder
        self._start: int = 0
        self._end: int = 1
        self._exhausted: bool = False
        self.metrics = ScannerMetrics()

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> Iterator[Command]:
        return self

    def __next__(self) -> Command:
        command = self.next_command()
        if command is None:
            raise StopIteration
        return command

    def next_command(self) -> Optional[Command]:
        """
        Scan forward to the next data frame.

        Returns:
            The next command, or None once the buffer is exhausted.
            Calls after exhaustion keep returning None.

        Raises:
            FrameDecodeError: The codec rejected a delimited range
        """
        data = self._data

        while self._end < len(data):
            if data[self._end] != FLAG_SEQUENCE:
                self._end += 1
                continue

            frame = self._decoder(data[self._start:self._end + 1])
            self.metrics.frames_decoded += 1
            self._start = self._end + 1
            self._end += 2

            command = self._accept(frame)
            if command is not None:
                return command

        if not self._exhausted:
            self._exhausted = True
            logger.info(
                f"Scanner exhausted after {len(data)} bytes: "
                f"{self.metrics.commands_emitted} commands, "
                f"{self.metrics.frames_decoded} frames"
            )
        return None

    def _accept(self, frame: DecodedFrame) -> Optional[Command]:
        """Turn a decoded frame into a command, or None to keep scanning."""
        frame_type = frame.control.frame_type

        if frame_type == FrameType.ACK:
            self.metrics.ack_frames += 1
            return None
        if frame_type == FrameType.NACK:
            self.metrics.nack_frames += 1
            return None

        self.metrics.data_frames += 1
        if not frame.payload:
            self.metrics.empty_data_frames += 1
            logger.warning(
                f"Skipping DATA frame with empty payload "
                f"(seq={frame.control.sequence_no})"
            )
            return None

        command = Command(frame.payload[0])
        self.metrics.commands_emitted += 1
        logger.debug(f"Scanned {command!r} (seq={frame.control.sequence_no})")
        return command
