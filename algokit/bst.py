"""Unbalanced binary search tree with the three depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


class _Node:
    __slots__ = ("key", "left", "right")

    def __init__(self, key: int) -> None:
        self.key = key
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


def _insert(node: Optional[_Node], key: int) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    else:
        node.right = _insert(node.right, key)
    return node


def _delete(node: Optional[_Node], key: int) -> tuple[Optional[_Node], bool]:
    if node is None:
        return None, False
    if key < node.key:
        node.left, removed = _delete(node.left, key)
        return node, removed
    if key > node.key:
        node.right, removed = _delete(node.right, key)
        return node, removed
    if node.left is None:
        return node.right, True
    if node.right is None:
        return node.left, True
    successor = node.right
    while successor.left is not None:
        successor = successor.left
    node.key = successor.key
    node.right, _ = _delete(node.right, successor.key)
    return node, True


def _inorder(node: Optional[_Node]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.key
        yield from _inorder(node.right)


def _preorder(node: Optional[_Node]) -> Iterator[int]:
    if node is not None:
        yield node.key
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[_Node]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.key


class BinarySearchTree:
    """A binary search tree of integers; equal keys go to the right."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, key: int) -> None:
        """Add ``key`` to the tree."""
        self._root = _insert(self._root, key)

    def delete(self, key: int) -> bool:
        """Remove one node holding ``key``; return True if one was found."""
        self._root, removed = _delete(self._root, key)
        return removed

    def search(self, value: int) -> bool:
        """Return True if ``value`` is stored in the tree."""
        node = self._root
        while node is not None:
            if node.key == value:
                return True
            node = node.left if value < node.key else node.right
        return False

    def inorder(self) -> list[int]:
        """Return the keys in left, root, right order."""
        return list(_inorder(self._root))

    def preorder(self) -> list[int]:
        """Return the keys in root, left, right order."""
        return list(_preorder(self._root))

    def postorder(self) -> list[int]:
        """Return the keys in left, right, root order."""
        return list(_postorder(self._root))

    def __contains__(self, value: object) -> bool:
        return self.search(value)  # type: ignore[arg-type]