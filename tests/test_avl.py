import math
import random

from algokit.avl import AVLTree


def _build(values):
    tree = AVLTree()
    for value in values:
        tree.insert(value)
    return tree


def test_sequential_inserts_are_sorted():
    values = [1, 2, 3, 4, 5, 6, 7]
    tree = _build(values)
    assert tree.inorder() == values


def test_sequential_inserts_stay_balanced():
    tree = _build([1, 2, 3, 4, 5, 6, 7])
    assert tree.height() == 3


def test_deletes_from_source_example():
    tree = _build([1, 2, 3, 4, 5, 6, 7])
    for value in (4, 1, 7):
        assert tree.delete(value) is True
    assert tree.inorder() == [2, 3, 5, 6]
    assert len(tree) == 4


def test_delete_missing_value():
    tree = _build([3, 1, 2])
    assert tree.delete(99) is False
    assert tree.inorder() == [1, 2, 3]


def test_empty_tree():
    tree = AVLTree()
    assert tree.height() == 0
    assert tree.inorder() == []
    assert tree.delete(1) is False


def test_height_is_logarithmic_for_sorted_input():
    n = 1000
    tree = _build(range(n))
    assert tree.height() <= 1.45 * math.log2(n + 2)


def test_random_inserts_and_deletes_match_multiset():
    rng = random.Random(1234)
    values = [rng.randrange(50) for _ in range(300)]
    tree = _build(values)
    remaining = list(values)
    for value in values[::3]:
        assert tree.delete(value) is True
        remaining.remove(value)
    assert tree.inorder() == sorted(remaining)
    assert len(tree) == len(remaining)
    assert tree.height() <= 1.45 * math.log2(len(remaining) + 2)


def test_contains():
    tree = _build([10, 20, 30])
    assert 20 in tree
    assert 25 not in tree