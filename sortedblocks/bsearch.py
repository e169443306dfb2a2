"""Binary search over sorted sequences and a bounded, always-sorted array."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Any

Comparator = Callable[[Any, Any], int]


class CapacityError(Exception):
    """Raised when an insertion would exceed a container's element limit."""


def binary_search(items: Sequence[Any], target: Any, cmp: Comparator) -> int:
    """Search ``items``, sorted according to ``cmp``, for ``target``.

    ``cmp(item, target)`` must return a negative number, zero or a positive
    number when ``item`` sorts before, equal to or after ``target``.

    Returns the index of a matching item.  When there is none, returns
    ``-(insertion_point + 1)``, so ``-result - 1`` is where ``target`` would
    be inserted to keep ``items`` sorted.
    """
    start, end = 0, len(items)
    while start < end:
        mid = (start + end) // 2
        order = cmp(items[mid], target)
        if order == 0:
            return mid
        if order > 0:
            end = mid
        else:
            start = mid + 1
    return -(start + 1)


def _cmp_fields(a: Sequence[Any], b: Sequence[Any], width: int) -> int:
    left = tuple(a[:width])
    right = tuple(b[:width])
    return (left > right) - (left < right)


def cmp_int(a: Sequence[int], b: Sequence[int]) -> int:
    """Order two records by their first field."""
    return _cmp_fields(a, b, 1)


def cmp_2int(a: Sequence[int], b: Sequence[int]) -> int:
    """Order two records by their first two fields, lexicographically."""
    return _cmp_fields(a, b, 2)


def cmp_3int(a: Sequence[int], b: Sequence[int]) -> int:
    """Order two records by their first three fields, lexicographically."""
    return _cmp_fields(a, b, 3)


def cmp_int64(a: Sequence[int], b: Sequence[int]) -> int:
    """Order two records by their first (64-bit) field."""
    return _cmp_fields(a, b, 1)


def cmp_2int64(a: Sequence[int], b: Sequence[int]) -> int:
    """Order two records by their first two (64-bit) fields."""
    return _cmp_fields(a, b, 2)


class SortedArray:
    """A sorted array of at most ``limit`` items, ordered by ``cmp``.

    Items that compare equal are stored once: putting an equal item replaces
    the stored one.  ``limit`` may be ``None`` for an unbounded array.
    """

    def __init__(self, limit: int | None, cmp: Comparator) -> None:
        if limit is not None and limit < 0:
            raise ValueError("limit must not be negative")
        self.limit = limit
        self.cmp = cmp
        self._items: list[Any] = []

    def put(self, item: Any) -> int:
        """Insert ``item``, or replace the equal item; return its position."""
        pos = binary_search(self._items, item, self.cmp)
        if pos >= 0:
            self._items[pos] = item
            return pos
        return self.put_at(-pos - 1, item)

    def put_at(self, pos: int, item: Any) -> int:
        """Insert ``item`` at ``pos`` without searching; return ``pos``."""
        if self.limit is not None and (len(self._items) + 1 > self.limit or pos >= self.limit):
            raise CapacityError(f"array is limited to {self.limit} items")
        if not 0 <= pos <= len(self._items):
            raise IndexError(f"insert position {pos} out of range")
        self._items.insert(pos, item)
        return pos

    def get(self, key: Any) -> Any | None:
        """Return the stored item equal to ``key``, or ``None``."""
        pos = binary_search(self._items, key, self.cmp)
        return self._items[pos] if pos >= 0 else None

    def get_pos(self, key: Any) -> int:
        """Return the position of ``key``, or ``-(insertion_point + 1)``."""
        return binary_search(self._items, key, self.cmp)

    def remove(self, key: Any) -> int:
        """Remove the item equal to ``key`` and return the position it had."""
        pos = binary_search(self._items, key, self.cmp)
        if pos < 0:
            raise KeyError(key)
        del self._items[pos]
        return pos

    def remove_at(self, pos: int) -> Any:
        """Remove and return the item at ``pos``."""
        if not 0 <= pos < len(self._items):
            raise IndexError(f"position {pos} out of range")
        return self._items.pop(pos)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int | slice) -> Any:
        return self._items[index]

    def __repr__(self) -> str:
        return f"SortedArray(limit={self.limit!r}, items={self._items!r})"