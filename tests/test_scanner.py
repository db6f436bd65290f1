"""
Frame Scanner Tests
===================

Delimiter scanning, non-data frame skipping and terminal behavior.
"""

import logging

import pytest

from gridwalk.errors import FrameDecodeError, NoMessageError
from gridwalk.models.command import DOWN, LEFT, RIGHT, UP, Command
from gridwalk.models.frame import FrameType
from gridwalk.stream.codec import decode_frame, encode_frame
from gridwalk.stream.scanner import FrameScanner


class TestScannerExhaustion:
    """Tests for buffers that carry no commands."""
    
    @pytest.mark.parametrize("data", [b"", b"\x7e", b"\x01\x02\x03\x04"])
    def test_no_delimited_frames(self, data):
        scanner = FrameScanner(data)
        assert list(scanner) == []
        assert scanner.exhausted
    
    def test_terminal_state_is_idempotent(self, make_transmission):
        scanner = FrameScanner(make_transmission([1]))
        assert scanner.next_command() == UP
        assert scanner.next_command() is None
        assert scanner.next_command() is None
        assert scanner.exhausted
        with pytest.raises(StopIteration):
            next(scanner)
    
    def test_trailing_unterminated_data_is_ignored(self, make_transmission):
        data = make_transmission([1, 3]) + encode_frame(b"\x02")[:-1]
        assert list(FrameScanner(data)) == [UP, RIGHT]


class TestScannerCommands:
    """Tests for command extraction."""
    
    def test_commands_in_order(self, make_transmission):
        data = make_transmission([1, 2, 3, 4])
        assert list(FrameScanner(data)) == [UP, DOWN, RIGHT, LEFT]
    
    def test_unrecognized_byte_is_a_command(self, make_transmission):
        commands = list(FrameScanner(make_transmission([9])))
        assert commands == [Command(9)]
        assert not commands[0].is_recognized
    
    def test_only_first_payload_byte_is_used(self):
        data = encode_frame(b"\x03\x01\x01")
        assert list(FrameScanner(data)) == [RIGHT]
    
    def test_supervisory_frames_are_skipped(self, make_transmission):
        data = make_transmission([1, FrameType.ACK, 3, FrameType.NACK, FrameType.ACK, 4])
        scanner = FrameScanner(data)
        
        assert list(scanner) == [UP, RIGHT, LEFT]
        assert scanner.metrics.frames_decoded == 6
        assert scanner.metrics.data_frames == 3
        assert scanner.metrics.ack_frames == 2
        assert scanner.metrics.nack_frames == 1
        assert scanner.metrics.commands_emitted == 3
    
    def test_empty_data_frame_is_skipped(self, make_transmission, caplog):
        data = make_transmission([1]) + encode_frame(b"") + make_transmission([2])
        scanner = FrameScanner(data)
        
        with caplog.at_level(logging.WARNING, logger="gridwalk.stream.scanner"):
            assert list(scanner) == [UP, DOWN]
        
        assert scanner.metrics.empty_data_frames == 1
        assert scanner.metrics.data_frames == 3
        assert "empty payload" in caplog.text
    
    def test_lazy_one_frame_per_command(self, make_transmission):
        """Only the frames needed for the next command are decoded."""
        calls = []
        
        def spy(data: bytes):
            calls.append(data)
            return decode_frame(data)
        
        scanner = FrameScanner(make_transmission([1, FrameType.ACK, 2, 3]), decoder=spy)
        
        assert scanner.next_command() == UP
        assert len(calls) == 1
        assert scanner.next_command() == DOWN
        assert len(calls) == 3


class TestScannerFailures:
    """Tests for fatal decode failures."""
    
    def test_corrupted_frame_aborts(self, make_transmission):
        data = bytearray(make_transmission([1, 2]))
        # Payload byte of the second frame
        second = data.index(0x7E, 1) + 1
        data[second + 3] ^= 0xFF
        
        scanner = FrameScanner(bytes(data))
        assert scanner.next_command() == UP
        with pytest.raises(FrameDecodeError):
            scanner.next_command()
    
    def test_shared_flag_between_frames_is_rejected(self):
        """Frames must not share a single flag; one byte after a flag is skipped."""
        data = encode_frame(b"\x01") + encode_frame(b"\x02")[1:]
        scanner = FrameScanner(data)
        
        assert scanner.next_command() == UP
        with pytest.raises(NoMessageError):
            scanner.next_command()
    
    def test_leading_garbage_is_rejected(self):
        """The first byte is a frame boundary; a non-flag byte there breaks the first range."""
        scanner = FrameScanner(b"\x00" + encode_frame(b"\x01"))
        
        with pytest.raises(NoMessageError):
            scanner.next_command()
