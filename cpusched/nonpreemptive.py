"""Non-preemptive schedulers that run a process until its next I/O or its end."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .process import GanttSlot, Process, ScheduleResult

_NO_IO_AHEAD = 999

SortKey = Callable[[Process], tuple[int, int]]


def _run_nonpreemptive(processes: Iterable[Process], key: SortKey) -> ScheduleResult:
    """Run copies of ``processes``, always picking the best ready one by ``key``.

    The chosen process keeps the CPU for its whole next CPU burst: up to its
    next I/O event, or to completion when no I/O is left.
    """
    procs = [p.copy() for p in processes]
    slots: list[GanttSlot] = []
    current_time = 0
    total_left = sum(p.burst_time for p in procs)

    while total_left > 0:
        procs.sort(key=key)
        pending = [p for p in procs if p.remaining_time > 0]
        ready = [p for p in pending if p.arrival_time <= current_time]
        if not ready:
            current_time = min(p.arrival_time for p in pending)
            ready = [p for p in pending if p.arrival_time <= current_time]
        proc = ready[0]

        if proc.io_index == 0:
            proc.start_time = current_time

        if proc.io_index == proc.io_num:
            run = proc.remaining_time
            proc.finish_time = current_time + run
            proc.turnaround_time = proc.finish_time - proc.original_arrival_time
            proc.waiting_time = proc.turnaround_time - proc.total_io_time - proc.burst_time
            slots.extend(GanttSlot(time=t, pid=proc.pid) for t in range(current_time, proc.finish_time))
            total_left -= run
            current_time = proc.finish_time
            proc.remaining_time = 0
        else:
            index = proc.io_index
            seg_start = proc.io_start_times[index - 1] if index > 0 else 0
            run = proc.io_start_times[index] - seg_start
            slots.extend(
                GanttSlot(time=t, pid=proc.pid) for t in range(current_time, current_time + run)
            )
            proc.remaining_time -= run
            total_left -= run
            current_time += run
            proc.io_index += 1
            proc.arrival_time = current_time + proc.io_durations[index]

    return ScheduleResult(processes=procs, charts=[slots])


def _time_to_next_io(proc: Process) -> int:
    if proc.io_index < proc.io_num:
        return proc.io_start_times[proc.io_index] - proc.burst_time + proc.remaining_time
    return _NO_IO_AHEAD


def run_sjf_np(processes: Iterable[Process]) -> ScheduleResult:
    """Shortest remaining job first, without preemption."""
    return _run_nonpreemptive(processes, lambda p: (p.remaining_time, p.arrival_time))


def run_ljf_np(processes: Iterable[Process]) -> ScheduleResult:
    """Longest remaining job first, without preemption."""
    return _run_nonpreemptive(processes, lambda p: (-p.remaining_time, p.arrival_time))


def run_priority_np(processes: Iterable[Process]) -> ScheduleResult:
    """Lowest priority number first, without preemption."""
    return _run_nonpreemptive(processes, lambda p: (p.priority, p.arrival_time))


def run_priority_io_np(processes: Iterable[Process]) -> ScheduleResult:
    """Process with the most I/O events still ahead first, without preemption."""
    return _run_nonpreemptive(
        processes, lambda p: (-(p.io_num - p.io_index), p.arrival_time)
    )


def run_sif_np(processes: Iterable[Process]) -> ScheduleResult:
    """Process closest to its next I/O event first, without preemption."""
    return _run_nonpreemptive(processes, lambda p: (_time_to_next_io(p), p.arrival_time))