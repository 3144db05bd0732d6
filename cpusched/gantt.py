"""Gantt chart segmentation and text rendering of scheduling results."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .process import GanttSlot, ScheduleResult


@dataclass(frozen=True)
class Segment:
    """A run of consecutive time on the chart; ``pid`` is None when idle."""

    pid: int | None
    start: int
    end: int

    @property
    def is_idle(self) -> bool:
        return self.pid is None

    @property
    def label(self) -> str:
        return "Idle" if self.pid is None else f"P{self.pid}"


def build_segments(slots: Iterable[GanttSlot]) -> list[Segment]:
    """Merge per-unit slots into segments, inserting idle gaps."""
    starts: list[tuple[int | None, int]] = []
    prev_time = -1
    for slot in slots:
        if not starts:
            if slot.time > 0:
                starts.append((None, 0))
            starts.append((slot.pid, slot.time))
        else:
            if slot.time > prev_time + 1 and starts[-1][0] is not None:
                starts.append((None, prev_time + 1))
            if slot.pid != starts[-1][0]:
                starts.append((slot.pid, slot.time))
        prev_time = slot.time
    ends = [start for _, start in starts[1:]] + [prev_time + 1]
    return [Segment(pid, start, end) for (pid, start), end in zip(starts, ends)]


def render_gantt(slots: Iterable[GanttSlot]) -> str:
    """Render a chart as a labelled bar line followed by a time line."""
    segments = build_segments(slots)
    bar = "".join(f"|{segment.label:>5}" for segment in segments) + "|"
    boundaries = [segment.start for segment in segments]
    boundaries.append(segments[-1].end if segments else 0)
    first, *rest = boundaries
    times = str(first) + "".join(f"{t:6d}" for t in rest)
    return f"\n[Gantt Chart]\n{bar}\n{times}\n\n"


def format_report(result: ScheduleResult) -> str:
    """Render the charts, per-process figures and averages of a run."""
    parts = [render_gantt(chart) for chart in result.charts]
    parts.append("\n[Results]\n")
    parts.extend(
        f"P{p.pid}: Waiting = {p.waiting_time}, Turnaround = {p.turnaround_time}\n"
        for p in result.processes
    )
    parts.append(f"\nAverage Waiting Time: {result.average_waiting():.2f}\n")
    parts.append(f"Average Turnaround Time: {result.average_turnaround():.2f}\n")
    if result.cpu_utilization is not None:
        parts.append(f"CPU Utilized Rate: {result.cpu_utilization:.2f}%\n")
    return "".join(parts)