"""First-come, first-served scheduling on two CPUs."""

from __future__ import annotations

from collections.abc import Iterable

from .process import GanttSlot, Process, ScheduleResult

CPU_COUNT = 2


def _run_one_unit(proc: Process, now: int) -> bool:
    """Give ``proc`` one unit of CPU time; return True if it leaves the CPU."""
    if proc.burst_time == proc.remaining_time:
        proc.start_time = now
    proc.remaining_time -= 1
    leaves = False
    if proc.remaining_time == 0:
        proc.finish_time = now + 1
        proc.turnaround_time = proc.finish_time - proc.original_arrival_time
        proc.waiting_time = proc.turnaround_time - proc.burst_time - proc.total_io_time
        leaves = True
    index = proc.io_index
    if index < proc.io_num and proc.burst_time - proc.remaining_time == proc.io_start_times[index]:
        proc.arrival_time = now + proc.io_durations[index] + 1
        proc.io_index += 1
        leaves = True
    return leaves


def run_double_fcfs(processes: Iterable[Process]) -> ScheduleResult:
    """Schedule copies of ``processes`` on two CPUs in order of arrival.

    An idle CPU takes the earliest-arrived ready process that the other CPU
    is not running; a process keeps its CPU until its next I/O or its end.
    The result holds one chart per CPU and the processes in input order.
    """
    procs = [p.copy() for p in processes]
    by_arrival = list(procs)
    charts: list[list[GanttSlot]] = [[] for _ in range(CPU_COUNT)]
    running: list[Process | None] = [None] * CPU_COUNT
    now = 0
    total_left = sum(p.burst_time for p in procs)

    while total_left > 0:
        by_arrival.sort(key=lambda p: p.arrival_time)
        for cpu in range(CPU_COUNT):
            if running[cpu] is not None:
                continue
            busy = [p for p in running if p is not None]
            running[cpu] = next(
                (
                    p
                    for p in by_arrival
                    if p.arrival_time <= now
                    and p.remaining_time > 0
                    and all(p is not other for other in busy)
                ),
                None,
            )

        if all(proc is None for proc in running):
            now = min(p.arrival_time for p in procs if p.remaining_time > 0)
            continue

        for cpu, proc in enumerate(running):
            if proc is None:
                continue
            if _run_one_unit(proc, now):
                running[cpu] = None
            charts[cpu].append(GanttSlot(time=now, pid=proc.pid))
            total_left -= 1
        now += 1

    return ScheduleResult(processes=procs, charts=charts)