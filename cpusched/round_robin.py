"""Round-robin, priority round-robin and multilevel queue scheduling."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Callable, Iterable
from enum import Enum, auto

from .process import GanttSlot, Process, ScheduleResult

MLQ_LEVELS = 3
MLQ_ROUND_ROBIN_LEVEL = 1


class _Outcome(Enum):
    FINISHED = auto()
    BLOCKED = auto()
    PREEMPTED = auto()


def _check_quantum(time_quantum: int) -> None:
    if time_quantum <= 0:
        raise ValueError("time quantum must be positive")


def _cpu_until_io(proc: Process) -> int:
    """CPU time left before the next I/O event, or before completion."""
    if proc.io_index < proc.io_num:
        return proc.io_start_times[proc.io_index] - proc.burst_time + proc.remaining_time
    return proc.remaining_time


def _run_slice(
    proc: Process, now: int, limit: int | None, slots: list[GanttSlot]
) -> tuple[int, _Outcome]:
    """Run ``proc`` from ``now`` for at most ``limit`` units, stopping at I/O.

    With ``limit`` None the process runs for its whole next CPU burst.
    Returns the time used and why the process left the CPU.
    """
    if proc.burst_time == proc.remaining_time:
        proc.start_time = now
    until_io = _cpu_until_io(proc)
    run = until_io if limit is None else min(limit, until_io)
    proc.remaining_time -= run
    end = now + run
    slots.extend(GanttSlot(time=t, pid=proc.pid) for t in range(now, end))

    if proc.remaining_time == 0:
        proc.finish_time = end
        proc.turnaround_time = end - proc.original_arrival_time
        proc.waiting_time = proc.turnaround_time - proc.burst_time - proc.total_io_time
        return run, _Outcome.FINISHED

    index = proc.io_index
    if index < proc.io_num and proc.io_start_times[index] == proc.burst_time - proc.remaining_time:
        proc.arrival_time = end + proc.io_durations[index]
        proc.io_index += 1
        return run, _Outcome.BLOCKED
    return run, _Outcome.PREEMPTED


def _queued_round_robin(
    processes: Iterable[Process],
    time_quantum: int,
    level_of: Callable[[Process], int],
) -> ScheduleResult:
    """Round robin over several ready queues, lowest level served first."""
    _check_quantum(time_quantum)
    procs = [p.copy() for p in processes]
    queues: defaultdict[int, deque[Process]] = defaultdict(deque)
    queued: set[int] = set()
    slots: list[GanttSlot] = []
    now = 0
    total_left = sum(p.burst_time for p in procs)

    while total_left > 0:
        for proc in procs:
            if proc.arrival_time <= now and id(proc) not in queued:
                queued.add(id(proc))
                queues[level_of(proc)].append(proc)

        level = min((lvl for lvl, queue in queues.items() if queue), default=None)
        if level is None:
            now = min(p.arrival_time for p in procs if id(p) not in queued)
            continue

        proc = queues[level].popleft()
        run, outcome = _run_slice(proc, now, time_quantum, slots)
        if outcome is _Outcome.BLOCKED:
            queued.discard(id(proc))
        elif outcome is _Outcome.PREEMPTED:
            queues[level].append(proc)
        now += run
        total_left -= run

    return ScheduleResult(processes=procs, charts=[slots])


def run_rr(processes: Iterable[Process], time_quantum: int) -> ScheduleResult:
    """Plain round robin with the given time quantum."""
    return _queued_round_robin(processes, time_quantum, lambda p: 0)


def run_priority_rr(processes: Iterable[Process], time_quantum: int) -> ScheduleResult:
    """Round robin within each priority; lower priority numbers go first."""
    return _queued_round_robin(processes, time_quantum, lambda p: p.priority)


def run_mlq(processes: Iterable[Process], time_quantum: int) -> ScheduleResult:
    """Multilevel queue: a process's queue is its pid modulo three.

    Queues 0 and 2 run each CPU burst to its end; queue 1 is round robin.
    A lower queue always goes before a higher one.
    """
    _check_quantum(time_quantum)
    procs = sorted((p.copy() for p in processes), key=lambda p: p.arrival_time)
    for proc in procs:
        proc.level = proc.pid % MLQ_LEVELS
    queues: list[deque[Process]] = [deque() for _ in range(MLQ_LEVELS)]
    queued: set[int] = set()
    slots: list[GanttSlot] = []
    now = 0
    total_left = sum(p.burst_time for p in procs)

    while total_left > 0:
        for proc in procs:
            if now >= proc.arrival_time and id(proc) not in queued and proc.remaining_time > 0:
                queued.add(id(proc))
                queues[proc.level].append(proc)

        level = next((lvl for lvl, queue in enumerate(queues) if queue), None)
        if level is None:
            now = min(
                p.arrival_time for p in procs if id(p) not in queued and p.remaining_time > 0
            )
            continue

        proc = queues[level].popleft()
        limit = time_quantum if level == MLQ_ROUND_ROBIN_LEVEL else None
        run, outcome = _run_slice(proc, now, limit, slots)
        if outcome is _Outcome.BLOCKED:
            queued.discard(id(proc))
        elif outcome is _Outcome.PREEMPTED:
            queues[level].append(proc)
        now += run
        total_left -= run

    return ScheduleResult(processes=procs, charts=[slots])