"""Non-preemptive first-come first-served CPU scheduling."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Process:
    """A process with its arrival time and CPU burst length."""

    arrival: int
    burst: int


@dataclass(frozen=True)
class ProcessStats:
    """Turnaround and waiting time of the process numbered ``number`` (from 1)."""

    number: int
    turnaround: int
    waiting: int


def schedule(processes: Iterable[Process]) -> list[ProcessStats]:
    """Run ``processes`` in the given order and report each one's times."""
    stats = []
    clock = 0
    for number, process in enumerate(processes, start=1):
        turnaround = clock + process.burst - process.arrival
        stats.append(ProcessStats(number, turnaround, turnaround - process.burst))
        clock += process.burst
    return stats


def _trunc_div(total: int, count: int) -> int:
    quotient = abs(total) // count
    return -quotient if total < 0 else quotient


def averages(stats: Sequence[ProcessStats]) -> tuple[int, int]:
    """Return the integer average turnaround and waiting times."""
    if not stats:
        raise ValueError("averages() needs at least one process")
    count = len(stats)
    return (
        _trunc_div(sum(s.turnaround for s in stats), count),
        _trunc_div(sum(s.waiting for s in stats), count),
    )