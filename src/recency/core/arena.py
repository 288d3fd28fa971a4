"""Flat entry storage for the recency list.

Entries live in a growable list and refer to their neighbours by integer
index instead of by object reference. Vacated slots are kept on a free list
and reused by later allocations.
"""

from typing import Generic, List, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")

HEAD = 0
TAIL = 1
DETACHED = -1


class Entry(Generic[K, V]):
    """A single cached record and its recency links."""

    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: Optional[K] = None, value: Optional[V] = None):
        self.key = key
        self.value = value
        self.prev = DETACHED
        self.next = DETACHED

    def __repr__(self) -> str:
        return f"Entry[key={self.key!r}, value={self.value!r}]"


class EntryArena(Generic[K, V]):
    """Slot storage for entries, with the two sentinels at fixed indices."""

    def __init__(self) -> None:
        head: Entry[K, V] = Entry()
        tail: Entry[K, V] = Entry()
        head.next = TAIL
        tail.prev = HEAD
        self._slots: List[Entry[K, V]] = [head, tail]
        self._free: List[int] = []

    def allocate(self, key: K, value: V) -> int:
        """Store a new detached entry and return its index."""
        if self._free:
            index = self._free.pop()
            entry = self._slots[index]
            entry.key = key
            entry.value = value
            entry.prev = DETACHED
            entry.next = DETACHED
            return index

        self._slots.append(Entry(key, value))
        return len(self._slots) - 1

    def release(self, index: int) -> None:
        """Vacate a slot so a later allocation can reuse it."""
        if index in (HEAD, TAIL):
            raise ValueError("sentinel slots cannot be released")
        entry = self._slots[index]
        entry.key = None
        entry.value = None
        entry.prev = DETACHED
        entry.next = DETACHED
        self._free.append(index)

    def clear(self) -> None:
        """Drop every non-sentinel slot and relink the sentinels."""
        del self._slots[2:]
        self._free.clear()
        self._slots[HEAD].next = TAIL
        self._slots[TAIL].prev = HEAD

    @property
    def free_slots(self) -> int:
        return len(self._free)

    def __getitem__(self, index: int) -> Entry[K, V]:
        return self._slots[index]

    def __len__(self) -> int:
        """Number of allocated slots, sentinels excluded."""
        return len(self._slots) - 2 - len(self._free)

    def __repr__(self) -> str:
        return f"EntryArena[slots={len(self._slots) - 2}, free={len(self._free)}]"
