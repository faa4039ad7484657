"""Binary min-heap keyed by integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class HeapItem:
    """A key with the data stored under it."""

    key: int
    data: Any = None


class Heap:
    """Min-heap: :meth:`pop` returns the item with the smallest key.

    For max-heap use, negate keys when adding and negate them back after
    popping.
    """

    def __init__(self, max_size: int | None = None) -> None:
        if max_size is not None and max_size < 0:
            raise ValueError("max_size must not be negative")
        self._max_size = max_size
        self._items: list[HeapItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        """Remove all items."""
        self._items.clear()

    def add(self, key: int, data: Any = None) -> None:
        """Insert ``data`` under ``key``; raise OverflowError when full."""
        items = self._items
        if self._max_size is not None and len(items) >= self._max_size:
            raise OverflowError("heap is full")
        item = HeapItem(key, data)
        items.append(item)
        i = len(items) - 1
        while i > 0:
            parent = (i - 1) // 2
            if not key < items[parent].key:
                break
            items[i] = items[parent]
            i = parent
        items[i] = item

    def peek(self) -> HeapItem:
        """Return the smallest item without removing it."""
        if not self._items:
            raise IndexError("peek from empty heap")
        return self._items[0]

    def pop(self) -> HeapItem:
        """Remove and return the smallest item."""
        items = self._items
        if not items:
            raise IndexError("pop from empty heap")
        top = items[0]
        last = items.pop()
        n = len(items)
        if n == 0:
            return top
        i, child = 0, 1
        while child < n:
            if child + 1 < n and items[child].key > items[child + 1].key:
                child += 1
            if last.key <= items[child].key:
                break
            items[i] = items[child]
            i = child
            child = 2 * i + 1
        items[i] = last
        return top