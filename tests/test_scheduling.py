import pytest

from algokit.scheduling import Process, ProcessStats, averages, schedule


def test_schedule_example():
    stats = schedule([Process(0, 5), Process(1, 3)])
    assert stats == [ProcessStats(1, 5, 0), ProcessStats(2, 7, 4)]
    assert averages(stats) == (6, 2)


def test_waiting_is_turnaround_minus_burst():
    processes = [Process(0, 4), Process(2, 6), Process(3, 1), Process(5, 2)]
    stats = schedule(processes)
    assert [s.number for s in stats] == [1, 2, 3, 4]
    for process, s in zip(processes, stats):
        assert s.waiting == s.turnaround - process.burst


def test_first_process_waits_only_for_arrival():
    stats = schedule([Process(0, 9), Process(0, 1)])
    assert stats[0].turnaround == 9
    assert stats[0].waiting == 0
    assert stats[1].waiting == 9


def test_empty_schedule():
    assert schedule([]) == []
    with pytest.raises(ValueError):
        averages([])