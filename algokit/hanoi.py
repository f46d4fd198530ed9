"""Tower of Hanoi move generation."""

from __future__ import annotations

from collections.abc import Iterator


def hanoi_moves(
    num: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> Iterator[tuple[int, str, str]]:
    """Yield ``(disk, from_peg, to_peg)`` moves that shift ``num`` disks to ``target``."""
    if num < 1:
        raise ValueError("number of disks must be at least 1")
    if num == 1:
        yield 1, source, target
        return
    yield from hanoi_moves(num - 1, source, auxiliary, target)
    yield num, source, target
    yield from hanoi_moves(num - 1, auxiliary, target, source)


def format_move(disk: int, source: str, target: str) -> str:
    """Describe one move as a line of text."""
    return f"Move disk {disk} from peg {source} to peg {target}"