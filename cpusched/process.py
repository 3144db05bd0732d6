"""Process description, Gantt slots and the result of a scheduling run."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field

MAX_IO_EVENTS = 4


@dataclass
class Process:
    """A simulated process with optional I/O bursts and per-run bookkeeping.

    ``io_start_times`` are offsets, measured in CPU time already consumed,
    at which the process leaves the CPU for the matching ``io_durations``.
    """

    pid: int
    arrival_time: int
    burst_time: int
    priority: int = 0
    deadline: int = 0
    io_start_times: list[int] = field(default_factory=list)
    io_durations: list[int] = field(default_factory=list)

    original_arrival_time: int = field(default=0, init=False)
    remaining_time: int = field(default=0, init=False)
    total_io_time: int = field(default=0, init=False)
    io_index: int = field(default=0, init=False)
    start_time: int = field(default=0, init=False)
    finish_time: int = field(default=0, init=False)
    waiting_time: int = field(default=0, init=False)
    turnaround_time: int = field(default=0, init=False)
    level: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.io_start_times = list(self.io_start_times)
        self.io_durations = list(self.io_durations)
        if self.burst_time < 0:
            raise ValueError(f"P{self.pid}: burst time must not be negative")
        if len(self.io_start_times) != len(self.io_durations):
            raise ValueError(f"P{self.pid}: every I/O start needs a duration")
        if len(self.io_start_times) > MAX_IO_EVENTS:
            raise ValueError(f"P{self.pid}: at most {MAX_IO_EVENTS} I/O events are allowed")
        previous = 0
        for start in self.io_start_times:
            if start <= previous or start >= self.burst_time:
                raise ValueError(
                    f"P{self.pid}: I/O start times must increase and lie inside the burst"
                )
            previous = start
        if any(duration < 0 for duration in self.io_durations):
            raise ValueError(f"P{self.pid}: I/O durations must not be negative")
        self.original_arrival_time = self.arrival_time
        self.remaining_time = self.burst_time
        self.total_io_time = sum(self.io_durations)

    @property
    def io_num(self) -> int:
        """Number of I/O events of this process."""
        return len(self.io_start_times)

    def copy(self) -> Process:
        """Return an independent copy, bookkeeping state included."""
        return _copy.deepcopy(self)


@dataclass(frozen=True)
class GanttSlot:
    """One unit of CPU time given to a process."""

    time: int
    pid: int


@dataclass
class ScheduleResult:
    """Outcome of a scheduling run: final process states and Gantt charts."""

    processes: list[Process]
    charts: list[list[GanttSlot]]
    cpu_utilization: float | None = None

    def _require_processes(self) -> int:
        if not self.processes:
            raise ValueError("no processes were scheduled")
        return len(self.processes)

    def average_waiting(self) -> float:
        count = self._require_processes()
        return sum(p.waiting_time for p in self.processes) / count

    def average_turnaround(self) -> float:
        count = self._require_processes()
        return sum(p.turnaround_time for p in self.processes) / count