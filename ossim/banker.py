"""Banker's algorithm: safety check and resource requests."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


class ExceedsClaimError(ValueError):
    """A request asks for more than the process's remaining maximum claim."""


class MustWaitError(RuntimeError):
    """A request asks for more than is currently available."""


def _letter(index: int) -> str:
    return chr(ord("A") + index)


@dataclass
class BankerState:
    """Resource totals plus per-process allocation and maximum claims."""

    total: list[int]
    allocation: list[list[int]]
    maximum: list[list[int]]

    def __post_init__(self) -> None:
        self.total = list(self.total)
        self.allocation = [list(row) for row in self.allocation]
        self.maximum = [list(row) for row in self.maximum]
        if len(self.allocation) != len(self.maximum):
            raise ValueError("allocation and maximum must cover the same processes")
        width = len(self.total)
        if any(len(row) != width for row in self.allocation + self.maximum):
            raise ValueError("every row needs one entry per resource type")

    @property
    def processes(self) -> int:
        return len(self.allocation)

    @property
    def resources(self) -> int:
        return len(self.total)

    def available(self) -> list[int]:
        return [
            total - sum(row[column] for row in self.allocation)
            for column, total in enumerate(self.total)
        ]

    def need(self) -> list[list[int]]:
        return [
            [claim - held for claim, held in zip(claims, holding)]
            for claims, holding in zip(self.maximum, self.allocation)
        ]

    def _safety_steps(self) -> Iterator[tuple[int, tuple[bool, ...], tuple[int, ...]]]:
        need = self.need()
        work = self.available()
        finish = [False] * self.processes
        start = 0
        while (process := self._next_runnable(need, work, finish, start)) is not None:
            finish[process] = True
            work = [w + held for w, held in zip(work, self.allocation[process])]
            yield process, tuple(finish), tuple(work)
            start = (process + 1) % self.processes

    def _next_runnable(self, need, work, finish, start) -> int | None:
        for offset in range(self.processes):
            process = (start + offset) % self.processes
            if not finish[process] and all(n <= w for n, w in zip(need[process], work)):
                return process
        return None

    def safe_sequence(self) -> list[int] | None:
        """Return a safe order of processes, or None if the state is unsafe."""
        order = [process for process, _, _ in self._safety_steps()]
        return order if len(order) == self.processes else None

    def request(self, process: int, request: Sequence[int]) -> list[int] | None:
        """Grant a request and return the resulting safe sequence (None if unsafe)."""
        if not 0 <= process < self.processes:
            raise ValueError(f"no process P{process}")
        request = list(request)
        if len(request) != self.resources:
            raise ValueError("request needs one entry per resource type")
        if any(r > n for r, n in zip(request, self.need()[process])):
            raise ExceedsClaimError(f"Process P{process} has exceeded its maximum claim")
        if any(r > a for r, a in zip(request, self.available())):
            raise MustWaitError(f"Process P{process} must wait.")
        self.allocation[process] = [
            held + asked for held, asked in zip(self.allocation[process], request)
        ]
        return self.safe_sequence()

    def format_table(self) -> str:
        """Render allocation, maximum, need and available as a table."""
        letters = "".join(f"{_letter(j):>3}" for j in range(self.resources))
        lines = ["\tAllocation\tMax\tNeed", "\t" + (letters + "\t") * 3]
        for index, (held, claim, need) in enumerate(zip(self.allocation, self.maximum, self.need())):
            cells = ["".join(f"{value:3d}" for value in row) for row in (held, claim, need)]
            lines.append(f"P{index}\t" + "\t".join(cells))
        lines.append("Available")
        lines.append(letters)
        lines.append("".join(f"{value:3d}" for value in self.available()))
        return "\n".join(lines) + "\n"


def _format_safety(state: BankerState) -> str:
    lines = []
    order = []
    for process, finish, work in state._safety_steps():
        order.append(process)
        lines.append(f"Process P{process} resource granted.")
        lines.append("finish(" + ",".join(str(int(done)) for done in finish) + ")")
        lines.append("work(" + ",".join(map(str, work)) + ")")
    if len(order) == state.processes:
        lines.append("System is in safe state.")
        lines.append("Safe sequence:" + "".join(f"P{process} " for process in order))
    else:
        lines.append("System is not in safe state.")
    return "\n".join(lines) + "\n"


def _read_matrix(processes: int, resources: int) -> list[list[int]]:
    matrix = []
    for process in range(processes):
        print(f"P{process}:")
        matrix.append([int(input(f"{_letter(j)}:")) for j in range(resources)])
    return matrix


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ossim-banker", description="Run the banker's algorithm.")
    parser.parse_args(argv)

    processes = int(input("Enter no.of process:"))
    resources = int(input("Enter no.of resource types:"))
    print("Enter total no.of resources of each resource type:")
    total = [int(input(f"{_letter(j)}:")) for j in range(resources)]
    print("Enter no.of allocated resources of each resource type by each process:")
    allocation = _read_matrix(processes, resources)
    print("Enter no.of maximum resources of each resource type by each process:")
    maximum = _read_matrix(processes, resources)

    state = BankerState(total, allocation, maximum)
    print(state.format_table(), end="")
    print(_format_safety(state), end="")

    process = int(input("Enter process no:"))
    print(f"Enter resource request of process P{process}")
    request = [int(input(f"{_letter(j)}:")) for j in range(resources)]
    try:
        state.request(process, request)
    except (ExceedsClaimError, MustWaitError, ValueError) as error:
        print(error)
        return 0
    print(state.format_table(), end="")
    print(_format_safety(state), end="")
    return 0