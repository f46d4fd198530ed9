import io

import pytest

from algokit.cli import main
from algokit.hanoi import format_move, hanoi_moves


@pytest.mark.parametrize("disks", [1, 2, 4])
def test_hanoi_prints_every_move(disks, capsys):
    assert main(["hanoi", str(disks)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2**disks - 1
    assert lines == [format_move(*m) for m in hanoi_moves(disks, "A", "C", "B")]


def test_hanoi_rejects_zero_disks():
    with pytest.raises(SystemExit) as info:
        main(["hanoi", "0"])
    assert info.value.code == 2


def test_missing_command_is_an_error():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_guess_win(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("10\n50\n42\n"))
    assert main(["guess", "--secret", "42"]) == 0
    out = capsys.readouterr().out
    assert "You Won! Your number is matched." in out
    assert "Your Number is smaller." in out
    assert "Your Number is Greater." in out


def test_guess_lose(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n2\n"))
    assert main(["guess", "--secret", "42", "--moves", "2"]) == 0
    out = capsys.readouterr().out
    assert "Sorry You Lose. Try Again for the next time." in out
    assert "The Number that computer guessed was 42" in out
    assert "You Won!" not in out


def test_guess_skips_non_numbers(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n42\n"))
    assert main(["guess", "--secret", "42", "--moves", "1"]) == 0
    out = capsys.readouterr().out
    assert "Please enter a whole number." in out
    assert "You Won!" in out


def test_guess_end_of_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["guess", "--secret", "42"]) == 1


def test_guess_rejects_zero_moves():
    with pytest.raises(SystemExit) as info:
        main(["guess", "--moves", "0"])
    assert info.value.code == 2