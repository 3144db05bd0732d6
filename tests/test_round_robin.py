import pytest

from cpusched.fcfs import run_fcfs
from cpusched.process import Process
from cpusched.round_robin import run_mlq, run_priority_rr, run_rr


def _workload():
    return [
        Process(1, 0, 7, priority=2, io_start_times=[2, 5], io_durations=[3, 1]),
        Process(2, 1, 5, priority=1),
        Process(3, 3, 9, priority=3, io_start_times=[1], io_durations=[4]),
        Process(4, 12, 4, priority=0, io_start_times=[2], io_durations=[2]),
        Process(5, 30, 3, priority=2),
    ]


def _check_invariants(original, result):
    by_pid = {p.pid: p for p in result.processes}
    assert sorted(by_pid) == sorted(p.pid for p in original)
    slots = result.charts[0]
    times = [s.time for s in slots]
    assert times == sorted(set(times))
    for source in original:
        done = by_pid[source.pid]
        own = [s.time for s in slots if s.pid == source.pid]
        assert len(own) == source.burst_time
        assert min(own) >= source.arrival_time
        assert done.remaining_time == 0
        assert done.io_index == source.io_num
        assert done.finish_time == max(own) + 1
        assert done.turnaround_time == done.finish_time - source.arrival_time
        assert done.waiting_time == (
            done.turnaround_time - source.burst_time - source.total_io_time
        )
        assert done.waiting_time >= 0


@pytest.mark.parametrize(
    "scheduler", [run_rr, run_priority_rr, run_mlq], ids=["rr", "priority_rr", "mlq"]
)
@pytest.mark.parametrize("quantum", [1, 2, 4])
def test_invariants_hold(scheduler, quantum):
    original = _workload()
    _check_invariants(original, scheduler(original, quantum))


@pytest.mark.parametrize("scheduler", [run_rr, run_priority_rr, run_mlq])
def test_input_is_not_modified(scheduler):
    original = _workload()
    scheduler(original, 2)
    for proc in original:
        assert proc.remaining_time == proc.burst_time
        assert proc.io_index == 0
        assert proc.arrival_time == proc.original_arrival_time


@pytest.mark.parametrize("scheduler", [run_rr, run_priority_rr, run_mlq])
@pytest.mark.parametrize("quantum", [0, -3])
def test_non_positive_quantum_is_rejected(scheduler, quantum):
    with pytest.raises(ValueError):
        scheduler(_workload(), quantum)


def test_rr_alternates_by_quantum():
    result = run_rr([Process(1, 0, 5), Process(2, 0, 5)], 2)
    assert [s.pid for s in result.charts[0]] == [1, 1, 2, 2, 1, 1, 2, 2, 1, 2]


def test_rr_with_large_quantum_matches_fcfs():
    procs = [Process(1, 0, 3), Process(2, 1, 4), Process(3, 2, 2)]
    rr = run_rr(procs, 100)
    fcfs = run_fcfs(procs)
    summary = lambda r: {p.pid: (p.waiting_time, p.turnaround_time) for p in r.processes}
    assert summary(rr) == summary(fcfs)
    assert [s.pid for s in rr.charts[0]] == [s.pid for s in fcfs.charts[0]]


def test_rr_leaves_cpu_for_io_and_returns():
    proc = Process(1, 0, 4, io_start_times=[2], io_durations=[3])
    result = run_rr([proc], 4)
    assert [s.time for s in result.charts[0]] == [0, 1, 5, 6]
    done = result.processes[0]
    assert done.turnaround_time == proc.burst_time + proc.total_io_time


def test_priority_rr_serves_lower_number_first():
    procs = [Process(1, 0, 3, priority=5), Process(2, 0, 3, priority=1)]
    result = run_priority_rr(procs, 2)
    assert [s.pid for s in result.charts[0]] == [2] * 3 + [1] * 3


def test_priority_rr_with_equal_priorities_matches_rr():
    procs = [
        Process(pid, arrival, burst, priority=4)
        for pid, arrival, burst in [(1, 0, 6), (2, 1, 3), (3, 2, 5)]
    ]
    plain = run_rr(procs, 2)
    prio = run_priority_rr(procs, 2)
    assert prio.charts == plain.charts
    assert [(p.pid, p.waiting_time) for p in prio.processes] == [
        (p.pid, p.waiting_time) for p in plain.processes
    ]


def test_mlq_level_zero_goes_before_level_one():
    result = run_mlq([Process(1, 0, 4), Process(3, 0, 4)], 2)
    assert [s.pid for s in result.charts[0]][:4] == [3] * 4


def test_mlq_level_two_is_not_preempted():
    result = run_mlq([Process(2, 0, 6), Process(1, 1, 2)], 2)
    assert [s.pid for s in result.charts[0]] == [2] * 6 + [1] * 2


def test_mlq_level_one_yields_to_level_zero_between_slices():
    result = run_mlq([Process(1, 0, 6), Process(3, 3, 2)], 2)
    assert [s.pid for s in result.charts[0]] == [1, 1, 1, 1, 3, 3, 1, 1]