"""Doubly linked recency order over arena slots.

The list is bounded by the head and tail sentinels, so every splice is a
fixed number of index rewrites with no empty-list special cases. The head
side holds the most recently touched entry.
"""

import logging
from typing import Generic, Iterator, Optional, TypeVar

from .arena import DETACHED, HEAD, TAIL, EntryArena

K = TypeVar("K")
V = TypeVar("V")

trace_log = logging.getLogger("recency.trace")


class RecencyList(Generic[K, V]):
    """Recency ordering for entries stored in an ``EntryArena``.

    Not synchronized; callers hold the cache guard around every mutation.

    Args:
        arena: Storage whose slots this list links together
        trace: Emit a DEBUG line on ``recency.trace`` for each operation
    """

    def __init__(self, arena: EntryArena[K, V], trace: bool = False):
        self._arena = arena
        self._count = 0
        self.trace = trace

    def insert_at_head(self, index: int) -> None:
        """Splice a detached entry right after the head sentinel."""
        entry = self._arena[index]
        if entry.prev != DETACHED or entry.next != DETACHED:
            raise ValueError(f"slot {index} is already linked")

        head = self._arena[HEAD]
        first = head.next
        entry.prev = HEAD
        entry.next = first
        self._arena[first].prev = index
        head.next = index
        self._count += 1

        if self.trace:
            trace_log.debug(f"Add to head {entry!r}")

    def unlink(self, index: int) -> None:
        """Remove an entry from its current position."""
        entry = self._arena[index]
        if entry.prev == DETACHED:
            raise ValueError(f"slot {index} is not linked")

        self._arena[entry.prev].next = entry.next
        self._arena[entry.next].prev = entry.prev
        entry.prev = DETACHED
        entry.next = DETACHED
        self._count -= 1

        if self.trace:
            trace_log.debug(f"Remove node {entry!r}")

    def move_to_head(self, index: int) -> bool:
        """Reposition an entry as most recently touched.

        Returns:
            False if the entry was already head-adjacent, True if it moved.
        """
        if self._arena[HEAD].next == index:
            if self.trace:
                trace_log.debug(f"Already at head {self._arena[index]!r}")
            return False

        if self.trace:
            trace_log.debug(f"Move to head {self._arena[index]!r}")
        self.unlink(index)
        self.insert_at_head(index)
        return True

    def evict_tail(self) -> Optional[int]:
        """Unlink and return the least recently touched entry, if any."""
        last = self._arena[TAIL].prev
        if last == HEAD:
            return None
        self.unlink(last)
        return last

    def peek_head(self) -> Optional[int]:
        first = self._arena[HEAD].next
        return None if first == TAIL else first

    def peek_tail(self) -> Optional[int]:
        last = self._arena[TAIL].prev
        return None if last == HEAD else last

    def reset(self) -> None:
        self._count = 0

    def __iter__(self) -> Iterator[int]:
        """Yield slot indices from most to least recently touched."""
        index = self._arena[HEAD].next
        while index != TAIL:
            yield index
            index = self._arena[index].next

    def __len__(self) -> int:
        return self._count
