import pytest

from cpusched.process import GanttSlot, Process, ScheduleResult


def test_initial_bookkeeping_follows_inputs():
    p = Process(pid=1, arrival_time=3, burst_time=9, io_start_times=[2], io_durations=[4])
    assert p.original_arrival_time == 3
    assert p.remaining_time == 9
    assert p.total_io_time == 4
    assert p.io_num == 1
    assert p.io_index == 0


def test_mismatched_io_lists_rejected():
    with pytest.raises(ValueError):
        Process(pid=1, arrival_time=0, burst_time=9, io_start_times=[2, 4], io_durations=[1])


def test_too_many_io_events_rejected():
    with pytest.raises(ValueError):
        Process(
            pid=1,
            arrival_time=0,
            burst_time=20,
            io_start_times=[1, 2, 3, 4, 5],
            io_durations=[1, 1, 1, 1, 1],
        )


@pytest.mark.parametrize("starts", [[3, 3], [4, 2], [0], [9]])
def test_bad_io_starts_rejected(starts):
    with pytest.raises(ValueError):
        Process(pid=1, arrival_time=0, burst_time=9, io_start_times=starts, io_durations=[1] * len(starts))


def test_negative_burst_rejected():
    with pytest.raises(ValueError):
        Process(pid=1, arrival_time=0, burst_time=-1)


def test_copy_is_independent():
    p = Process(pid=2, arrival_time=0, burst_time=6, io_start_times=[2], io_durations=[1])
    p.remaining_time = 4
    clone = p.copy()
    assert clone == p
    clone.io_durations.append(5)
    clone.remaining_time = 0
    assert p.io_durations == [1]
    assert p.remaining_time == 4


def _finished(pid, waiting, turnaround):
    p = Process(pid=pid, arrival_time=0, burst_time=2)
    p.waiting_time = waiting
    p.turnaround_time = turnaround
    return p


def test_averages():
    result = ScheduleResult(
        processes=[_finished(1, 5, 7), _finished(2, 5, 7)],
        charts=[[GanttSlot(0, 1)]],
    )
    assert result.average_waiting() == 5.0
    assert result.average_turnaround() == 7.0
    assert result.cpu_utilization is None


def test_averages_without_processes_raise():
    result = ScheduleResult(processes=[], charts=[[]])
    with pytest.raises(ValueError):
        result.average_waiting()
    with pytest.raises(ValueError):
        result.average_turnaround()