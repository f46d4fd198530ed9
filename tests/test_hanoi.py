import pytest

from algokit.hanoi import format_move, hanoi_moves


@pytest.mark.parametrize("n", [1, 2, 3, 5])
def test_move_count(n):
    assert len(list(hanoi_moves(n, "A", "C", "B"))) == 2**n - 1


@pytest.mark.parametrize("n", [1, 3, 4])
def test_moves_are_legal_and_complete(n):
    pegs = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    for disk, src, dst in hanoi_moves(n, "A", "C", "B"):
        assert pegs[src][-1] == disk
        pegs[src].pop()
        assert not pegs[dst] or pegs[dst][-1] > disk
        pegs[dst].append(disk)
    assert pegs["C"] == list(range(n, 0, -1))
    assert pegs["A"] == [] and pegs["B"] == []


def test_single_disk():
    assert list(hanoi_moves(1, "A", "C", "B")) == [(1, "A", "C")]


def test_zero_disks_raises():
    with pytest.raises(ValueError):
        list(hanoi_moves(0, "A", "C", "B"))


def test_format_move():
    assert format_move(2, "A", "C") == "Move disk 2 from peg A to peg C"