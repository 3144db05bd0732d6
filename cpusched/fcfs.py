"""First-come, first-served scheduling with I/O bursts."""

from __future__ import annotations

from collections.abc import Iterable

from .process import GanttSlot, Process, ScheduleResult


def _log(slots: list[GanttSlot], pid: int, start: int, end: int) -> None:
    slots.extend(GanttSlot(time=t, pid=pid) for t in range(start, end))


def run_fcfs(processes: Iterable[Process]) -> ScheduleResult:
    """Schedule copies of ``processes`` in order of arrival.

    A process runs until its next I/O event or its end, then re-arrives
    once its I/O has completed.
    """
    procs = [p.copy() for p in processes]
    slots: list[GanttSlot] = []
    current_time = 0
    total_left = sum(p.burst_time for p in procs)

    while total_left > 0:
        procs.sort(key=lambda p: p.arrival_time)
        proc = next(p for p in procs if p.remaining_time > 0)
        current_time = max(current_time, proc.arrival_time)

        if proc.io_num == 0:
            proc.start_time = current_time
            proc.finish_time = current_time + proc.burst_time
            proc.waiting_time = proc.start_time - proc.original_arrival_time
            proc.turnaround_time = proc.waiting_time + proc.burst_time
            total_left -= proc.remaining_time
            proc.remaining_time = 0
            _log(slots, proc.pid, proc.start_time, proc.finish_time)
            current_time += proc.burst_time
        elif proc.io_index == proc.io_num:
            run = proc.remaining_time
            proc.finish_time = current_time + run
            proc.turnaround_time = proc.finish_time - proc.original_arrival_time
            proc.waiting_time = proc.turnaround_time - proc.burst_time - proc.total_io_time
            total_left -= run
            _log(slots, proc.pid, current_time, current_time + run)
            current_time += run
            proc.remaining_time = 0
        else:
            index = proc.io_index
            if index == 0:
                proc.start_time = current_time
                run = proc.io_start_times[0]
            else:
                run = proc.io_start_times[index] - proc.io_start_times[index - 1]
            _log(slots, proc.pid, current_time, current_time + run)
            proc.arrival_time = current_time + run + proc.io_durations[index]
            proc.remaining_time -= run
            total_left -= run
            proc.io_index += 1
            current_time += run

    return ScheduleResult(processes=procs, charts=[slots])