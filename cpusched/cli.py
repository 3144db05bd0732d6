"""Command line driver: generate processes and run every scheduler on them."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Sequence
from dataclasses import replace
from functools import partial

from .double_fcfs import run_double_fcfs
from .fcfs import run_fcfs
from .gantt import format_report
from .mlfq import run_mlfq
from .nonpreemptive import (
    run_ljf_np,
    run_priority_io_np,
    run_priority_np,
    run_sif_np,
    run_sjf_np,
)
from .preemptive import (
    run_edf,
    run_ljf_p,
    run_priority_p,
    run_priority_update,
    run_rm,
    run_sjf_p,
)
from .process import MAX_IO_EVENTS, Process, ScheduleResult
from .round_robin import run_mlq, run_priority_rr, run_rr

FIXED_SEED = 1234
DEFAULT_TQ = 4
DEFAULT_ALPHA = 2
DEFAULT_BETA = 1
REAL_TIME_COPIES = 3

Scheduler = Callable[[list[Process]], ScheduleResult]

ALGORITHMS: tuple[tuple[str, Scheduler], ...] = (
    ("FCFS", run_fcfs),
    ("SJF_np", run_sjf_np),
    ("SJF_p", run_sjf_p),
    ("LJF_np", run_ljf_np),
    ("LJF_p", run_ljf_p),
    ("Priority_np", run_priority_np),
    ("Priority_p", run_priority_p),
    ("RR", partial(run_rr, time_quantum=DEFAULT_TQ)),
    ("MLQ", partial(run_mlq, time_quantum=DEFAULT_TQ)),
    ("MLFQ", run_mlfq),
    ("Priority_RR", partial(run_priority_rr, time_quantum=DEFAULT_TQ)),
    ("Priority_Update", partial(run_priority_update, alpha=DEFAULT_ALPHA, beta=DEFAULT_BETA)),
    ("Priority_io_num", run_priority_io_np),
    ("Shortest IO First", run_sif_np),
    ("Double_FCFS", run_double_fcfs),
)


def _random_io(burst: int, rng: random.Random) -> tuple[list[int], list[int]]:
    starts: list[int] = []
    durations: list[int] = []
    io_point = 1
    for _ in range(rng.randint(0, MAX_IO_EVENTS)):
        if io_point >= burst - 1:
            break
        starts.append(io_point)
        durations.append(rng.randint(1, 5))
        io_point += rng.randint(1, 4)
    return starts, durations


def _make_process(
    pid: int, arrival: int, burst: int, priority: int, rng: random.Random
) -> Process:
    deadline = arrival + burst + rng.randint(10, 20)
    starts, durations = _random_io(burst, rng)
    return Process(
        pid=pid,
        arrival_time=arrival,
        burst_time=burst,
        priority=priority,
        deadline=deadline,
        io_start_times=starts,
        io_durations=durations,
    )


def generate_processes(count: int, rng: random.Random) -> list[Process]:
    """Create ``count`` random processes with pids 1..count."""
    processes = []
    for pid in range(1, count + 1):
        arrival = rng.randint(0, 10)
        burst = rng.randint(5, 20)
        priority = rng.randint(0, 10)
        processes.append(_make_process(pid, arrival, burst, priority, rng))
    return processes


def make_real_time_set(processes: Sequence[Process]) -> list[Process]:
    """Build six periodic jobs from the first two processes.

    Each of the two is repeated three times, one period apart, where the
    period is its original deadline; pids of repeats go up by two.
    """
    if len(processes) < 2:
        raise ValueError("the real-time set needs at least two processes")
    base = processes[:2]
    periods = [p.deadline for p in base]
    jobs = []
    for copy_number in range(REAL_TIME_COPIES):
        for proc, period in zip(base, periods):
            shift = period * copy_number
            jobs.append(
                replace(
                    proc,
                    pid=proc.pid + 2 * copy_number,
                    arrival_time=proc.original_arrival_time + shift,
                    deadline=proc.deadline + shift,
                )
            )
    return jobs


def run_all(processes: Sequence[Process]) -> list[tuple[str, ScheduleResult]]:
    """Run every general-purpose scheduler on the same processes."""
    return [(name, scheduler(list(processes))) for name, scheduler in ALGORITHMS]


def _describe(proc: Process) -> str:
    lines = [
        f"[P{proc.pid}] Arrival: {proc.arrival_time}, Burst: {proc.burst_time}, "
        f"Priority: {proc.priority}, Deadline: {proc.deadline}"
    ]
    lines.extend(
        f"  IO #{number}: Start at {start}, Duration {duration}"
        for number, (start, duration) in enumerate(
            zip(proc.io_start_times, proc.io_durations), start=1
        )
    )
    return "\n".join(lines)


def _prompt_int(prompt: str) -> int:
    return int(input(prompt).strip())


def _read_processes(count: int, rng: random.Random) -> list[Process]:
    processes = []
    for pid in range(1, count + 1):
        print(f"[P{pid}]Generate. Arrival time, Burst time, Priority.")
        fields = input().split()
        if len(fields) != 3:
            raise ValueError("expected arrival time, burst time and priority")
        arrival, burst, priority = (int(value) for value in fields)
        processes.append(_make_process(pid, arrival, burst, priority, rng))
    return processes


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cpusched", description="Compare CPU scheduling algorithms."
    )
    parser.add_argument("-n", "--count", type=int, help="number of processes")
    parser.add_argument(
        "--manual", action="store_true", help="enter arrival, burst and priority by hand"
    )
    parser.add_argument("--seed", type=int, default=FIXED_SEED, help="random seed")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Generate processes, run every scheduler and print the reports."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    try:
        if args.count is not None:
            count = args.count
        else:
            count = _prompt_int("Number of Processes(Recommended : more than 2): ")
        if count < 2:
            raise ValueError("at least 2 processes are required")
        manual = args.manual
        if args.count is None and not manual:
            print("Random generation: 1\nManually Generate :2")
            manual = _prompt_int("") != 1
        processes = _read_processes(count, rng) if manual else generate_processes(count, rng)
    except (ValueError, EOFError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for proc in processes:
        print(_describe(proc))

    for name, result in run_all(processes):
        print(f"\n=== Algorithm: {name} ===")
        print(f">> START Algorithm {name} (n={count})")
        print(format_report(result), end="")
        print(f"<< END   Algorithm {name}")

    jobs = make_real_time_set(processes)
    print("\n=== Real-Time Scheduling ===")
    print("\n-- Rate Monotonic (RM) --")
    print(format_report(run_rm(jobs)), end="")
    print("\n-- Earliest Deadline First (EDF) --")
    print(format_report(run_edf(jobs)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())