"""Self-balancing AVL binary search tree."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


class _Node:
    __slots__ = ("value", "left", "right", "height")

    def __init__(self, value: int) -> None:
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.height = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: Optional[_Node], value: int) -> _Node:
    if node is None:
        return _Node(value)
    if value > node.value:
        node.right = _insert(node.right, value)
    else:
        node.left = _insert(node.left, value)
    return _rebalance(node)


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: Optional[_Node], value: int) -> tuple[Optional[_Node], bool]:
    if node is None:
        return None, False
    if value > node.value:
        node.right, removed = _delete(node.right, value)
    elif value < node.value:
        node.left, removed = _delete(node.left, value)
    else:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        successor = _min_node(node.right)
        node.value = successor.value
        node.right, removed = _delete(node.right, successor.value)
    return _rebalance(node), removed


def _inorder(node: Optional[_Node]) -> Iterator[int]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.value
    yield from _inorder(node.right)


class AVLTree:
    """An AVL tree of integers; equal values are kept and go to the left."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def insert(self, value: int) -> None:
        """Add ``value`` to the tree, rebalancing as needed."""
        self._root = _insert(self._root, value)
        self._size += 1

    def delete(self, value: int) -> bool:
        """Remove one occurrence of ``value``; return True if it was present."""
        self._root, removed = _delete(self._root, value)
        if removed:
            self._size -= 1
        return removed

    def inorder(self) -> list[int]:
        """Return the values in ascending order."""
        return list(_inorder(self._root))

    def height(self) -> int:
        """Return the height of the tree; an empty tree has height 0."""
        return _height(self._root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.right if value > node.value else node.left  # type: ignore[operator]
        return False