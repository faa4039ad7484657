"""Circular doubly linked list of caller-owned nodes.

A :class:`ListNode` belongs to at most one list at a time.  Adding a node
that is already in a list first removes it from there, so the same node is
never linked twice.
"""

from __future__ import annotations

from typing import Any, Iterator


class ListNode:
    """A list node carrying an arbitrary ``value``."""

    __slots__ = ("value", "_next", "_prev")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self._next: ListNode = self
        self._prev: ListNode = self

    @property
    def linked(self) -> bool:
        """True while the node is part of a list."""
        return self._next is not self

    def _unlink(self) -> None:
        self._prev._next = self._next
        self._next._prev = self._prev
        self._next = self
        self._prev = self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class LinkedList:
    """Doubly linked list with O(1) insertion and removal of known nodes.

    Iteration yields nodes and allows removing the node just yielded.
    """

    def __init__(self) -> None:
        self._root = ListNode()

    def is_empty(self) -> bool:
        return self._root._next is self._root

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __iter__(self) -> Iterator[ListNode]:
        root = self._root
        node = root._next
        while node is not root:
            following = node._next
            yield node
            node = following

    def __reversed__(self) -> Iterator[ListNode]:
        root = self._root
        node = root._prev
        while node is not root:
            preceding = node._prev
            yield node
            node = preceding

    def head(self) -> ListNode | None:
        """Return the first node, or None if the list is empty."""
        return None if self.is_empty() else self._root._next

    def tail(self) -> ListNode | None:
        """Return the last node, or None if the list is empty."""
        return None if self.is_empty() else self._root._prev

    def _insert_between(self, node: ListNode, prev: ListNode, nxt: ListNode) -> None:
        prev._next = node
        node._prev = prev
        node._next = nxt
        nxt._prev = node

    def add_head(self, node: ListNode) -> None:
        """Insert ``node`` at the front, moving it if already linked."""
        node._unlink()
        self._insert_between(node, self._root, self._root._next)

    def add_tail(self, node: ListNode) -> None:
        """Append ``node`` at the end, moving it if already linked."""
        node._unlink()
        self._insert_between(node, self._root._prev, self._root)

    def pop_head(self) -> ListNode:
        """Remove and return the first node."""
        if self.is_empty():
            raise IndexError("pop from empty list")
        node = self._root._next
        node._unlink()
        return node

    def pop_tail(self) -> ListNode:
        """Remove and return the last node."""
        if self.is_empty():
            raise IndexError("pop from empty list")
        node = self._root._prev
        node._unlink()
        return node

    def add_after(self, prev: ListNode, node: ListNode) -> None:
        """Insert ``node`` right after ``prev``."""
        if node is prev:
            raise ValueError("cannot insert a node next to itself")
        node._unlink()
        self._insert_between(node, prev, prev._next)

    def add_before(self, next_node: ListNode, node: ListNode) -> None:
        """Insert ``node`` right before ``next_node``."""
        if node is next_node:
            raise ValueError("cannot insert a node next to itself")
        node._unlink()
        self._insert_between(node, next_node._prev, next_node)

    def remove(self, node: ListNode) -> None:
        """Unlink ``node``; a node that is not linked is left as it is."""
        node._unlink()

    def clear(self) -> None:
        """Unlink every node."""
        for node in self:
            node._unlink()