"""
Delay Queue
===========

Three-slot ring that delays every command by one step and drops runs
of three identical commands.

Step Semantics (per ingested command):
    1. Ingest: the oldest slot (at the cursor) is read before it is
       overwritten; if non-empty it is now due for application
    2. Store: the new command takes that slot
    3. Debounce: if all three slots hold the same command, all three
       are cleared and none of them is ever applied
    4. Advance: cursor = (cursor + 1) % 3

Because the due command is taken out before the new one is stored,
a triple clear can never touch a command that was already applied.

Run Lengths (identical commands in a row):
    3 -> all discarded
    4 -> one applied
    5 -> two applied
    6 -> all discarded (two runs of three)
"""

import logging
from typing import List, Optional, Tuple

from gridwalk.models.command import Command


logger = logging.getLogger(__name__)


DELAY_SLOTS = 3


class DelayQueue:
    """
    Fixed-capacity ring of pending commands.
    
    Attributes:
        triples_discarded: Number of runs cleared so far
        
    Example:
        queue = DelayQueue()
        
        for command in commands:
            due = queue.ingest(command)
            if due is not None:
                apply(due)
        
        for command in queue.flush():
            apply(command)
    """
    
    def __init__(self) -> None:
        self._slots: List[Optional[Command]] = [None] * DELAY_SLOTS
        self._cursor: int = 0
        self._triples_discarded: int = 0
    
    @property
    def triples_discarded(self) -> int:
        return self._triples_discarded
    
    def __len__(self) -> int:
        """Number of non-empty slots."""
        return sum(1 for slot in self._slots if slot is not None)
    
    def snapshot(self) -> Tuple[Optional[Command], ...]:
        """Slots in ring order, oldest first (None for empty slots)."""
        return tuple(
            self._slots[(self._cursor + i) % DELAY_SLOTS]
            for i in range(DELAY_SLOTS)
        )
    
    def ingest(self, command: Command) -> Optional[Command]:
        """
        Push a command through the ring.
        
        Args:
            command: Newly received command
            
        Returns:
            The command that is now due for application, or None
        """
        due = self._slots[self._cursor]
        self._slots[self._cursor] = command
        
        if self._is_triple():
            self._slots = [None] * DELAY_SLOTS
            self._triples_discarded += 1
            logger.debug(f"Discarded run of three {command!r}")
        
        self._cursor = (self._cursor + 1) % DELAY_SLOTS
        return due
    
    def flush(self) -> List[Command]:
        """
        Drain the ring at end of stream.
        
        No triple check is performed.
        
        Returns:
            Remaining commands, oldest first, empties skipped
        """
        remaining = [command for command in self.snapshot() if command is not None]
        self._slots = [None] * DELAY_SLOTS
        self._cursor = 0
        return remaining
    
    def _is_triple(self) -> bool:
        first = self._slots[0]
        return first is not None and all(slot == first for slot in self._slots[1:])
