"""CPU scheduling simulators: FCFS, SJF, priority and round robin."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

IDLE = "*"


@dataclass(frozen=True)
class Process:
    """A process with its arrival time, CPU burst and priority (1 is highest)."""

    name: str
    arrival: int
    burst: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.burst < 1:
            raise ValueError(f"process {self.name} needs a CPU burst of at least 1")


@dataclass(frozen=True)
class GanttSlot:
    """One stretch of CPU time given to a process, or to IDLE."""

    name: str
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


Step = tuple[tuple[Process, int], ...]


@dataclass(frozen=True)
class Schedule:
    """Result of a scheduling run.

    ``processes`` and ``completion`` are aligned; ``steps`` holds, after every
    scheduling decision, each process with its remaining burst.
    """

    processes: tuple[Process, ...]
    completion: tuple[int, ...]
    slots: tuple[GanttSlot, ...]
    steps: tuple[Step, ...]
    with_priority: bool = False

    @property
    def turnaround(self) -> tuple[int, ...]:
        return tuple(done - p.arrival for p, done in zip(self.processes, self.completion))

    @property
    def waiting(self) -> tuple[int, ...]:
        return tuple(tat - p.burst for p, tat in zip(self.processes, self.turnaround))

    @property
    def average_turnaround(self) -> float:
        return sum(self.turnaround) / len(self.processes)

    @property
    def average_waiting(self) -> float:
        return sum(self.waiting) / len(self.processes)


@dataclass
class _Job:
    process: Process
    remaining: int
    completion: int = 0

    def ready(self, time: int) -> bool:
        return self.process.arrival <= time and self.remaining > 0


def _jobs(processes: Iterable[Process]) -> list[_Job]:
    ordered = sorted(processes, key=lambda process: process.arrival)
    if not ordered:
        raise ValueError("at least one process is required")
    return [_Job(process, process.burst) for process in ordered]


def _snapshot(jobs: Iterable[_Job]) -> Step:
    return tuple((job.process, job.remaining) for job in jobs)


def _finish(jobs: Sequence[_Job], slots, steps, with_priority: bool) -> Schedule:
    return Schedule(
        processes=tuple(job.process for job in jobs),
        completion=tuple(job.completion for job in jobs),
        slots=tuple(slots),
        steps=tuple(steps),
        with_priority=with_priority,
    )


def _simulate(
    processes: Iterable[Process],
    choose: Callable[[list[_Job]], _Job],
    preemptive: bool,
    with_priority: bool,
) -> Schedule:
    jobs = _jobs(processes)
    time = 0
    pending = len(jobs)
    slots: list[GanttSlot] = []
    steps: list[Step] = []
    while pending:
        ready = [job for job in jobs if job.ready(time)]
        if not ready:
            slots.append(GanttSlot(IDLE, time, time + 1))
            time += 1
        else:
            job = choose(ready)
            run = 1 if preemptive else job.remaining
            slots.append(GanttSlot(job.process.name, time, time + run))
            time += run
            job.remaining -= run
            job.completion = time
            if job.remaining == 0:
                pending -= 1
        steps.append(_snapshot(jobs))
    return _finish(jobs, slots, steps, with_priority)


def fcfs(processes: Iterable[Process]) -> Schedule:
    """First come, first served: run the earliest arrived process to completion."""
    return _simulate(processes, lambda ready: ready[0], False, False)


def sjf(processes: Iterable[Process], preemptive: bool = False) -> Schedule:
    """Shortest job first; preemptive mode re-decides after every time unit."""
    return _simulate(
        processes, lambda ready: min(ready, key=lambda job: job.remaining), preemptive, False
    )


def priority(processes: Iterable[Process], preemptive: bool = False) -> Schedule:
    """Lowest priority number first; preemptive mode re-decides after every time unit."""
    return _simulate(
        processes, lambda ready: min(ready, key=lambda job: job.process.priority), preemptive, True
    )


def round_robin(processes: Iterable[Process], quantum: int) -> Schedule:
    """Round robin with the given time quantum over a queue ordered by arrival."""
    if quantum < 1:
        raise ValueError("time quantum must be at least 1")
    queue = deque(_jobs(processes))
    time = 0
    pending = len(queue)
    slots: list[GanttSlot] = []
    steps: list[Step] = []
    while pending:
        if not any(job.ready(time) for job in queue):
            slots.append(GanttSlot(IDLE, time, time + 1))
            time += 1
        else:
            while not queue[0].ready(time):
                queue.rotate(-1)
            job = queue[0]
            run = min(job.remaining, quantum)
            slots.append(GanttSlot(job.process.name, time, time + run))
            time += run
            job.remaining -= run
            job.completion = time
            if job.remaining == 0:
                pending -= 1
            queue.rotate(-1)
        steps.append(_snapshot(queue))
    return _finish(list(queue), slots, steps, False)


def merge_gantt(slots: Iterable[GanttSlot]) -> list[GanttSlot]:
    """Join consecutive slots that belong to the same name."""
    merged: list[GanttSlot] = []
    for slot in slots:
        if merged and merged[-1].name == slot.name:
            merged[-1] = GanttSlot(slot.name, merged[-1].start, slot.end)
        else:
            merged.append(slot)
    return merged


def format_gantt(slots: Iterable[GanttSlot]) -> str:
    """Render a one-line Gantt chart such as ``0-A-2-B--5``."""
    merged = merge_gantt(slots)
    if not merged:
        return ""
    parts = [str(merged[0].start)]
    for slot in merged:
        length = slot.length
        parts.append("-" * (length // 2) + slot.name + "-" * ((length + 1) // 2) + str(slot.end))
    return "".join(parts)


def format_report(schedule: Schedule) -> str:
    """Render per-process times and the averages."""
    if schedule.with_priority:
        lines = ["pname\tat\tbt\tp\ttct\ttat\twt"]
    else:
        lines = ["pname\tat\tbt\tct\ttat\twt"]
    for process, done, tat, wt in zip(
        schedule.processes, schedule.completion, schedule.turnaround, schedule.waiting
    ):
        cells = [process.name, process.arrival, process.burst]
        if schedule.with_priority:
            cells.append(process.priority)
        cells += [done, tat, wt]
        lines.append("\t".join(map(str, cells)))
    lines.append(
        f"Avg TAT={schedule.average_turnaround:f}\tAvg WT={schedule.average_waiting:f}"
    )
    return "\n".join(lines) + "\n"


def _format_step(step: Step, with_priority: bool) -> str:
    lines = ["pname\tat\tbt\tp" if with_priority else "pname\tat\tbt"]
    for process, remaining in step:
        cells = [process.name, process.arrival, remaining]
        if with_priority:
            cells.append(process.priority)
        lines.append("\t".join(map(str, cells)))
    return "\n".join(lines) + "\n"


def _read_processes(with_priority: bool) -> list[Process]:
    count = int(input("Enter no.of process:"))
    processes = []
    for _ in range(count):
        name = input("Enter process name:").strip()
        arrival = int(input("Enter arrival time:"))
        burst = int(input("Enter first CPU burst time:"))
        rank = int(input("Enter priority:")) if with_priority else 0
        processes.append(Process(name, arrival, burst, rank))
    return processes


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ossim-schedule", description="Simulate CPU scheduling.")
    parser.add_argument("algorithm", choices=["fcfs", "sjf", "priority", "rr"])
    parser.add_argument("-p", "--preemptive", action="store_true", help="preempt every time unit")
    parser.add_argument("-q", "--quantum", type=int, help="time slice for round robin")
    args = parser.parse_args(argv)

    with_priority = args.algorithm == "priority"
    try:
        processes = _read_processes(with_priority)
        if args.algorithm == "rr":
            quantum = args.quantum if args.quantum is not None else int(input("Enter time slice:"))
            schedule = round_robin(processes, quantum)
        elif args.algorithm == "fcfs":
            schedule = fcfs(processes)
        elif args.algorithm == "sjf":
            schedule = sjf(processes, args.preemptive)
        else:
            schedule = priority(processes, args.preemptive)
    except ValueError as error:
        parser.error(str(error))

    for step in schedule.steps:
        print(_format_step(step, with_priority), end="")
    print(format_report(schedule), end="")
    print(format_gantt(schedule.slots))
    return 0