"""Dynamic array with an optional size limit and unordered deletion."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class Array(Generic[T]):
    """Sequence of items kept in insertion order.

    With ``max_size`` set, :meth:`add` raises :class:`OverflowError` once the
    array holds that many items; removing an item makes room again.
    """

    def __init__(self, items: Iterable[T] = (), max_size: int | None = None) -> None:
        if max_size is not None and max_size < 0:
            raise ValueError("max_size must not be negative")
        self._max_size = max_size
        self._items: list[T] = list(items)
        if max_size is not None and len(self._items) > max_size:
            raise ValueError("more initial items than max_size allows")

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Array):
            return self._items == other._items
        return NotImplemented

    def add(self, item: T) -> None:
        """Append ``item``; raise OverflowError when the array is full."""
        if self._max_size is not None and len(self._items) >= self._max_size:
            raise OverflowError("array is full")
        self._items.append(item)

    def delete(self, index: int) -> None:
        """Remove the item at ``index``, keeping the order of the rest."""
        del self._items[range(len(self._items))[index]]

    def delete_unordered(self, index: int) -> None:
        """Remove the item at ``index`` by moving the last item into its place.

        Faster than :meth:`delete`, but the insertion order is not kept:
        ``[a, b, c, d, e, f]`` with index 2 becomes ``[a, b, f, d, e]``.
        """
        idx = range(len(self._items))[index]
        last = self._items.pop()
        if idx < len(self._items):
            self._items[idx] = last

    def delete_last(self) -> None:
        """Remove the last item."""
        if not self._items:
            raise IndexError("delete from empty array")
        self._items.pop()

    def clear(self) -> None:
        """Remove all items."""
        self._items.clear()

    def sort(self, key: Callable[[T], Any] | None = None) -> None:
        """Sort the items in place, optionally by ``key``."""
        self._items.sort(key=key)

    def last(self) -> T:
        """Return the last item."""
        if not self._items:
            raise IndexError("last of empty array")
        return self._items[-1]