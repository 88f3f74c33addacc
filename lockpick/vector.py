"""Growable array with explicit capacity management."""

from typing import Any, Iterator, List

GROW_FACTOR = 2
REDUCE_FACTOR = 2
REDUCE_THR_LOAD = 4
MIN_CAPACITY = 1


class Vector:
    """A dynamic array that grows by doubling and shrinks when sparsely used."""

    def __init__(self, capacity: int = 0) -> None:
        self._items: List[Any] = []
        self._capacity = max(capacity, MIN_CAPACITY)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"

    @property
    def capacity(self) -> int:
        """Number of entries the vector holds before it must grow."""
        return self._capacity

    def append(self, entry: Any) -> None:
        """Add ``entry`` at the end, doubling capacity when full."""
        if len(self._items) == self._capacity:
            self._capacity *= GROW_FACTOR
        self._items.append(entry)

    def _maybe_shrink(self) -> None:
        size = len(self._items)
        if max(size, MIN_CAPACITY) * REDUCE_THR_LOAD < self._capacity:
            self._capacity = max(size * REDUCE_FACTOR, MIN_CAPACITY)

    def pop(self) -> Any:
        """Remove and return the last entry."""
        if not self._items:
            raise IndexError("Vector is empty")
        entry = self._items.pop()
        self._maybe_shrink()
        return entry

    def back(self) -> Any:
        """Return the last entry."""
        if not self._items:
            raise IndexError("Vector is empty")
        return self._items[-1]

    def clear(self) -> None:
        """Remove all entries and reset capacity to the minimum."""
        self._items.clear()
        self._capacity = MIN_CAPACITY

    def reserve(self, new_capacity: int) -> None:
        """Set capacity to ``new_capacity``, which must hold every entry."""
        if new_capacity <= 0:
            raise ValueError(
                f"New capacity must be greater than zero, got: {new_capacity}"
            )
        if len(self._items) > new_capacity:
            raise ValueError(
                f"New capacity ({new_capacity}) must be greater than "
                f"current vector size ({len(self._items)})"
            )
        self._capacity = new_capacity

    def remove_at(self, index: int) -> None:
        """Remove the entry at ``index``, shifting later entries down."""
        if not 0 <= index < len(self._items):
            raise IndexError(
                f"Index must be less than vector size, got: {index}"
            )
        del self._items[index]
        self._maybe_shrink()