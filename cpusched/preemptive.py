"""Preemptive schedulers that re-decide at every unit of CPU time."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .process import GanttSlot, Process, ScheduleResult

SortKey = Callable[[Process], tuple[int, int]]
DispatchHook = Callable[[Process, list[Process]], None]


def _run_preemptive(
    processes: Iterable[Process],
    key: SortKey,
    on_dispatch: DispatchHook | None = None,
) -> tuple[list[Process], list[GanttSlot], int]:
    """Give one time unit at a time to the best ready process by ``key``.

    Returns the final process states, the chart and the time at which the
    last unit of work ended.
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

        if on_dispatch is not None:
            on_dispatch(proc, ready)

        if proc.burst_time == proc.remaining_time:
            proc.start_time = current_time
        proc.remaining_time -= 1
        if proc.remaining_time == 0:
            proc.finish_time = current_time + 1
            proc.turnaround_time = proc.finish_time - proc.original_arrival_time
            proc.waiting_time = proc.turnaround_time - proc.burst_time - proc.total_io_time

        index = proc.io_index
        if index < proc.io_num and proc.burst_time - proc.remaining_time == proc.io_start_times[index]:
            proc.arrival_time = current_time + proc.io_durations[index] + 1
            proc.io_index += 1

        slots.append(GanttSlot(time=current_time, pid=proc.pid))
        current_time += 1
        total_left -= 1

    return procs, slots, current_time


def _result(processes: Iterable[Process], key: SortKey) -> ScheduleResult:
    procs, slots, _ = _run_preemptive(processes, key)
    return ScheduleResult(processes=procs, charts=[slots])


def _real_time_result(processes: Iterable[Process], key: SortKey) -> ScheduleResult:
    procs, slots, end_time = _run_preemptive(processes, key)
    busy = sum(p.burst_time for p in procs)
    utilization = busy * 100 / end_time if end_time else 0.0
    return ScheduleResult(processes=procs, charts=[slots], cpu_utilization=utilization)


def run_sjf_p(processes: Iterable[Process]) -> ScheduleResult:
    """Shortest remaining time first, with preemption."""
    return _result(processes, lambda p: (p.remaining_time, p.arrival_time))


def run_ljf_p(processes: Iterable[Process]) -> ScheduleResult:
    """Longest remaining time first, with preemption."""
    return _result(processes, lambda p: (-p.remaining_time, p.arrival_time))


def run_priority_p(processes: Iterable[Process]) -> ScheduleResult:
    """Lowest priority number first, with preemption."""
    return _result(processes, lambda p: (p.priority, p.arrival_time))


def run_priority_update(processes: Iterable[Process], alpha: int, beta: int) -> ScheduleResult:
    """Preemptive priority scheduling with dynamic priorities.

    At every time unit the running process has its priority number lowered
    by ``alpha`` and every other ready process by ``beta``.
    """

    def age(chosen: Process, ready: list[Process]) -> None:
        for proc in ready:
            proc.priority -= alpha if proc is chosen else beta

    procs, slots, _ = _run_preemptive(
        processes, lambda p: (p.priority, p.arrival_time), on_dispatch=age
    )
    return ScheduleResult(processes=procs, charts=[slots])


def run_rm(processes: Iterable[Process]) -> ScheduleResult:
    """Rate monotonic: shortest period (deadline minus first arrival) first."""
    return _real_time_result(
        processes, lambda p: (p.deadline - p.original_arrival_time, p.arrival_time)
    )


def run_edf(processes: Iterable[Process]) -> ScheduleResult:
    """Earliest deadline first."""
    return _real_time_result(processes, lambda p: (p.deadline, p.arrival_time))