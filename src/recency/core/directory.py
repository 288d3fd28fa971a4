"""Key to arena-index mapping for O(1) lookup independent of recency order."""

from typing import Dict, Generic, Hashable, Iterator, Optional, TypeVar

K = TypeVar("K", bound=Hashable)


class Directory(Generic[K]):
    """Index from key to the arena slot holding its entry.

    ``lookup`` may be called without holding the cache guard. Mutations must
    happen under the same guard as the paired recency list change.
    """

    def __init__(self) -> None:
        self._index: Dict[K, int] = {}

    def lookup(self, key: K) -> Optional[int]:
        return self._index.get(key)

    def insert(self, key: K, index: int) -> None:
        self._index[key] = index

    def remove(self, key: K) -> Optional[int]:
        return self._index.pop(key, None)

    def clear(self) -> None:
        self._index.clear()

    def keys(self) -> Iterator[K]:
        return iter(list(self._index))

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._index)
