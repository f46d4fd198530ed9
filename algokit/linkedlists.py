"""Circular and singly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("data", "link")

    def __init__(self, data: T, link: Optional["_Node[T]"] = None) -> None:
        self.data = data
        self.link = link


class CircularList(Generic[T]):
    """A circular singly linked list tracked by its tail node."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.add_to_end(item)

    def _add_to_empty(self, data: T) -> _Node[T]:
        node: _Node[T] = _Node(data)
        node.link = node
        self._tail = node
        return node

    def add_to_beginning(self, data: T) -> None:
        """Insert ``data`` before the first element."""
        if self._tail is None:
            self._add_to_empty(data)
        else:
            self._tail.link = _Node(data, self._tail.link)
        self._size += 1

    def add_to_end(self, data: T) -> None:
        """Insert ``data`` after the last element."""
        if self._tail is None:
            self._add_to_empty(data)
        else:
            node = _Node(data, self._tail.link)
            self._tail.link = node
            self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[T]:
        """Walk once round the list, starting from the first element."""
        if self._tail is None:
            return
        head = self._tail.link
        node = head
        while True:
            assert node is not None
            yield node.data
            node = node.link
            if node is head:
                break

    def __len__(self) -> int:
        return self._size


class SinglyLinkedList(Generic[T]):
    """A singly linked list that grows at its end."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._last: Optional[_Node[T]] = None
        for item in items:
            self.append(item)

    def append(self, value: T) -> None:
        """Add ``value`` at the end of the list."""
        node: _Node[T] = _Node(value)
        if self._last is None:
            self._head = node
        else:
            self._last.link = node
        self._last = node

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        previous: Optional[_Node[T]] = None
        current = self._head
        self._last = current
        while current is not None:
            current.link, previous, current = previous, current, current.link
        self._head = previous

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.link

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"