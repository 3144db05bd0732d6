from collections import Counter

from cpusched.fcfs import run_fcfs
from cpusched.gantt import build_segments
from cpusched.process import Process


def _mixed():
    return [
        Process(pid=1, arrival_time=0, burst_time=8, io_start_times=[2, 5], io_durations=[3, 1]),
        Process(pid=2, arrival_time=1, burst_time=5),
        Process(pid=3, arrival_time=4, burst_time=6, io_start_times=[1], io_durations=[4]),
        Process(pid=4, arrival_time=10, burst_time=3),
    ]


def test_single_process_runs_on_arrival():
    result = run_fcfs([Process(pid=1, arrival_time=3, burst_time=4)])
    (proc,) = result.processes
    assert proc.start_time == 3
    assert proc.finish_time - proc.start_time == 4
    assert proc.waiting_time == 0
    slots = result.charts[0]
    assert len(slots) == 4
    assert slots[0].time == 3


def test_input_is_not_mutated():
    procs = _mixed()
    run_fcfs(procs)
    assert [p.remaining_time for p in procs] == [8, 5, 6, 3]
    assert all(p.io_index == 0 for p in procs)


def test_invariants_with_io():
    result = run_fcfs(_mixed())
    assert len(result.processes) == 4
    for p in result.processes:
        assert p.remaining_time == 0
        assert p.io_index == p.io_num
        assert p.turnaround_time == p.finish_time - p.original_arrival_time
        assert p.waiting_time == p.turnaround_time - p.burst_time - p.total_io_time
        assert p.waiting_time >= 0
        assert p.start_time >= p.original_arrival_time


def test_chart_accounts_for_every_burst_unit():
    procs = _mixed()
    result = run_fcfs(procs)
    slots = result.charts[0]
    counts = Counter(slot.pid for slot in slots)
    assert counts == {p.pid: p.burst_time for p in procs}
    times = [slot.time for slot in slots]
    assert times == sorted(set(times))


def test_served_in_arrival_order_without_io():
    procs = [
        Process(pid=1, arrival_time=5, burst_time=2),
        Process(pid=2, arrival_time=0, burst_time=3),
        Process(pid=3, arrival_time=2, burst_time=1),
    ]
    result = run_fcfs(procs)
    by_arrival = sorted(result.processes, key=lambda p: p.original_arrival_time)
    starts = [p.start_time for p in by_arrival]
    assert starts == sorted(starts)
    assert [p.pid for p in result.processes] == [p.pid for p in by_arrival]
    for earlier, later in zip(by_arrival, by_arrival[1:]):
        assert later.start_time >= earlier.finish_time


def test_io_leaves_idle_gap_of_io_length():
    proc = Process(pid=1, arrival_time=0, burst_time=4, io_start_times=[2], io_durations=[3])
    result = run_fcfs([proc])
    segments = build_segments(result.charts[0])
    assert [s.pid for s in segments] == [1, None, 1]
    idle = segments[1]
    assert idle.start == 2
    assert idle.end - idle.start == 3
    assert result.processes[0].waiting_time == 0


def test_no_processes():
    result = run_fcfs([])
    assert result.processes == []
    assert result.charts == [[]]