"""A binary min-heap whose entries track their own positions."""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, List, Optional


class HeapInterface:
    """Ordering and position bookkeeping for heap entries.

    Entries are ordered by ``key(entry)``; positions are kept in a dict.
    Subclasses may override any method, for example to store positions in a
    mesh property instead.
    """

    def __init__(self, key: Optional[Callable[[Any], Any]] = None) -> None:
        self._key = key if key is not None else (lambda h: h)
        self._positions: Dict[Hashable, int] = {}

    def less(self, a: Any, b: Any) -> bool:
        """Return True if entry a orders before entry b."""
        return self._key(a) < self._key(b)

    def greater(self, a: Any, b: Any) -> bool:
        """Return True if entry a orders after entry b."""
        return self._key(a) > self._key(b)

    def get_heap_position(self, h: Any) -> int:
        """Return the position of an entry, or -1 if it is not in the heap."""
        return self._positions.get(h, -1)

    def set_heap_position(self, h: Any, pos: int) -> None:
        """Record the position of an entry (-1 means not in the heap)."""
        self._positions[h] = pos


class Heap:
    """Min-heap that keeps each entry's position in a HeapInterface."""

    def __init__(self, interface: Optional[HeapInterface] = None) -> None:
        self.interface = interface if interface is not None else HeapInterface()
        self._entries: List[Any] = []

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def empty(self) -> bool:
        """Return True if the heap holds no entries."""
        return not self._entries

    def reserve(self, n: int) -> None:
        """Hint the expected number of entries; lists grow on demand."""

    def reset_heap_position(self, h: Any) -> None:
        """Mark an entry as not being in the heap."""
        self.interface.set_heap_position(h, -1)

    def is_stored(self, h: Any) -> bool:
        """Return True if the entry is in the heap."""
        return self.interface.get_heap_position(h) != -1

    def insert(self, h: Any) -> None:
        """Insert an entry."""
        self._entries.append(h)
        self._upheap(len(self._entries) - 1)

    def front(self) -> Any:
        """Return the smallest entry without removing it."""
        if not self._entries:
            raise IndexError("front of an empty heap")
        return self._entries[0]

    def pop_front(self) -> None:
        """Remove the smallest entry."""
        if not self._entries:
            raise IndexError("pop from an empty heap")
        self.interface.set_heap_position(self._entries[0], -1)
        last = self._entries.pop()
        if self._entries:
            self._set(0, last)
            self._downheap(0)

    def _position(self, h: Any) -> int:
        pos = self.interface.get_heap_position(h)
        if pos < 0 or pos >= len(self._entries):
            raise ValueError(f"entry {h!r} is not stored in the heap")
        return pos

    def remove(self, h: Any) -> None:
        """Remove an arbitrary entry."""
        pos = self._position(h)
        self.interface.set_heap_position(h, -1)
        last = self._entries.pop()
        if pos < len(self._entries):
            self._set(pos, last)
            self._downheap(pos)
            self._upheap(pos)

    def update(self, h: Any) -> None:
        """Restore the heap order after the key of an entry changed."""
        pos = self._position(h)
        self._downheap(pos)
        self._upheap(pos)

    def check(self) -> bool:
        """Return True if every parent orders no later than its children."""
        entries = self._entries
        size = len(entries)
        return not any(
            self.interface.greater(entries[i], entries[child])
            for i in range(size)
            for child in (2 * i + 1, 2 * i + 2)
            if child < size
        )

    def _set(self, idx: int, h: Any) -> None:
        self._entries[idx] = h
        self.interface.set_heap_position(h, idx)

    def _upheap(self, idx: int) -> None:
        entries = self._entries
        h = entries[idx]
        while idx > 0:
            parent = (idx - 1) >> 1
            if not self.interface.less(h, entries[parent]):
                break
            self._set(idx, entries[parent])
            idx = parent
        self._set(idx, h)

    def _downheap(self, idx: int) -> None:
        entries = self._entries
        h = entries[idx]
        size = len(entries)
        while True:
            child = 2 * idx + 1
            if child >= size:
                break
            if child + 1 < size and self.interface.less(entries[child + 1], entries[child]):
                child += 1
            if self.interface.less(h, entries[child]):
                break
            self._set(idx, entries[child])
            idx = child
        self._set(idx, h)