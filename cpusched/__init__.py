"""Simulate CPU scheduling algorithms, with I/O bursts, and report Gantt charts and timings."""

__version__ = "0.1.0"