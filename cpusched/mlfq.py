"""Multilevel feedback queue scheduling with demotion and aging."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable

from .process import GanttSlot, Process, ScheduleResult
from .round_robin import _Outcome, _run_slice

QUANTA = (2, 4)
LEVELS = 3
AGING_LIMIT = 9


def _age(
    queues: list[deque[Process]],
    waited: defaultdict[int, int],
    running: Process,
    elapsed: int,
) -> None:
    """Charge ``elapsed`` to waiting processes and promote long waiters."""
    for source, target in ((1, 0), (2, 1)):
        for _ in range(len(queues[source])):
            proc = queues[source].popleft()
            waited[id(proc)] += elapsed
            if waited[id(proc)] > AGING_LIMIT and proc is not running:
                waited[id(proc)] = 0
                proc.level -= 1
                queues[target].append(proc)
            else:
                queues[source].append(proc)
    waited[id(running)] = 0


def run_mlfq(processes: Iterable[Process]) -> ScheduleResult:
    """Three-level feedback queue.

    Levels 0 and 1 are round robin with quanta of 2 and 4; a process that
    uses its whole quantum drops a level. Level 2 runs each CPU burst to
    its end. A process waiting in level 1 or 2 for more than 9 units of
    CPU time given to others is moved up a level.
    """
    procs = sorted((p.copy() for p in processes), key=lambda p: p.arrival_time)
    for proc in procs:
        proc.level = 0
    queues: list[deque[Process]] = [deque() for _ in range(LEVELS)]
    queued: set[int] = set()
    waited: defaultdict[int, int] = defaultdict(int)
    slots: list[GanttSlot] = []
    now = 0
    total_left = sum(p.burst_time for p in procs)

    while total_left > 0:
        for proc in procs:
            if proc.arrival_time <= now and id(proc) not in queued:
                queued.add(id(proc))
                queues[proc.level].append(proc)

        level = next((lvl for lvl, queue in enumerate(queues) if queue), None)
        if level is None:
            now = min(p.arrival_time for p in procs if id(p) not in queued)
            continue

        proc = queues[level].popleft()
        if level < len(QUANTA):
            quantum = QUANTA[level]
            run, outcome = _run_slice(proc, now, quantum, slots)
            if outcome is _Outcome.BLOCKED:
                queued.discard(id(proc))
                if run == quantum:
                    proc.level += 1
            elif outcome is _Outcome.PREEMPTED:
                if run == quantum:
                    proc.level += 1
                queues[proc.level].append(proc)
        else:
            run, outcome = _run_slice(proc, now, None, slots)
            if outcome is _Outcome.BLOCKED:
                queued.discard(id(proc))
        now += run
        total_left -= run
        _age(queues, waited, proc, run)

    return ScheduleResult(processes=procs, charts=[slots])