# cpusched

A CPU scheduling simulator. It runs the same set of processes through many
scheduling algorithms and reports, for each, a Gantt chart, every process's
waiting and turnaround time, and the averages. Processes may leave the CPU for
I/O bursts part way through their CPU time and come back when the I/O is done.

## Algorithms

| Function | Module | Policy |
| --- | --- | --- |
| `run_fcfs` | `cpusched.fcfs` | First-come, first-served |
| `run_sjf_np`, `run_ljf_np` | `cpusched.nonpreemptive` | Shortest / longest remaining job first |
| `run_priority_np` | `cpusched.nonpreemptive` | Lowest priority number first |
| `run_priority_io_np` | `cpusched.nonpreemptive` | Most I/O events still ahead first |
| `run_sif_np` | `cpusched.nonpreemptive` | Closest to its next I/O event first |
| `run_sjf_p`, `run_ljf_p` | `cpusched.preemptive` | Shortest / longest remaining time, preemptive |
| `run_priority_p` | `cpusched.preemptive` | Priority, preemptive |
| `run_priority_update(processes, alpha, beta)` | `cpusched.preemptive` | Priority with dynamic priorities: each time unit the running process's number drops by `alpha`, every other ready process's by `beta` |
| `run_rm`, `run_edf` | `cpusched.preemptive` | Rate monotonic and earliest deadline first; also report CPU utilisation |
| `run_rr(processes, time_quantum)` | `cpusched.round_robin` | Round robin |
| `run_priority_rr(processes, time_quantum)` | `cpusched.round_robin` | Round robin within each priority |
| `run_mlq(processes, time_quantum)` | `cpusched.round_robin` | Multilevel queue; queue is pid modulo 3, queue 1 is round robin |
| `run_mlfq` | `cpusched.mlfq` | Three-level feedback queue (quanta 2 and 4, then run to the next I/O), with demotion and aging |
| `run_double_fcfs` | `cpusched.double_fcfs` | FCFS on two CPUs, one chart per CPU |

Non-preemptive schedulers keep a process on the CPU until its next I/O event
or its end; preemptive ones decide again at every unit of time. A time quantum
that is not positive raises `ValueError`.

## Command line

```
cpusched
```

Without options the command asks for the number of processes (at least 2),
then whether to generate them at random or to type in the arrival time, burst
time and priority of each one. Options:

- `-n`, `--count N` — number of processes; with this option and without
  `--manual` the processes are generated at random without asking.
- `--manual` — enter arrival, burst and priority by hand.
- `--seed S` — random seed (default 1234, so runs are repeatable).

Deadlines and I/O events are always generated at random, also for processes
entered by hand. The command prints each process, runs every algorithm in the
table above except `run_rm` and `run_edf` (time quantum 4, aging `alpha=2`,
`beta=1`), and finishes with rate monotonic and earliest deadline first on a
periodic set of six jobs built from the first two processes. Bad input prints
an error and exits with status 1.

## Library use

```python
from cpusched.process import Process
from cpusched.fcfs import run_fcfs
from cpusched.gantt import format_report

procs = [
    Process(pid=1, arrival_time=0, burst_time=5),
    Process(pid=2, arrival_time=2, burst_time=6,
            io_start_times=[3], io_durations=[2]),
]
result = run_fcfs(procs)
print(format_report(result))
print(result.average_waiting(), result.average_turnaround())
```

`Process` checks its input: at most four I/O events, start times strictly
increasing and inside the burst, no negative burst or I/O durations;
anything else raises `ValueError`.

Each `run_*` function works on copies and leaves the processes it is given
unchanged. It returns a `ScheduleResult` with the finished processes, a list
of charts (lists of `GanttSlot`, one per CPU) and, for `run_rm` and `run_edf`,
`cpu_utilization` as a percentage.

In `cpusched.gantt`, `build_segments` merges slots into `Segment`s (idle gaps
have `pid` None), `render_gantt` draws one chart as text, and `format_report`
renders a whole result.

`cpusched.cli` also offers `generate_processes(count, rng)`,
`make_real_time_set(processes)` and `run_all(processes)` for use from code.

## What it does not do

Reports are only printed; nothing is saved to files, and there is no way to
load a process set from a file or to choose single algorithms from the
command line.

## Tests

```
pip install -e ".[test]"
pytest
```