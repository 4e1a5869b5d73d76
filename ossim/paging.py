"""Demand-paging simulators: FIFO, LRU, LFU and MFU page replacement."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

Frames = tuple["int | None", ...]


@dataclass(frozen=True)
class PagingResult:
    """Outcome of a paging simulation.

    ``snapshots`` has one entry per reference: the frame contents right after
    a page fault, or ``None`` when the reference was a hit.
    """

    references: tuple[int, ...]
    frame_count: int
    snapshots: tuple["Frames | None", ...]

    @property
    def faults(self) -> int:
        return sum(snapshot is not None for snapshot in self.snapshots)


def _prepare(references: Iterable[int], frames: int) -> tuple[int, ...]:
    if frames < 1:
        raise ValueError("at least one frame is required")
    return tuple(int(page) for page in references)


def fifo(references: Iterable[int], frames: int) -> PagingResult:
    """Replace the page that has been resident the longest."""
    refs = _prepare(references, frames)
    memory: list[int | None] = [None] * frames
    pointer = 0
    snapshots: list[Frames | None] = []
    for page in refs:
        if page in memory:
            snapshots.append(None)
            continue
        memory[pointer] = page
        pointer = (pointer + 1) % frames
        snapshots.append(tuple(memory))
    return PagingResult(refs, frames, tuple(snapshots))


def lru(references: Iterable[int], frames: int) -> PagingResult:
    """Replace the page whose last use lies furthest in the past."""
    refs = _prepare(references, frames)
    memory: list[int | None] = [None] * frames
    last_used = [0] * frames
    filled = 0
    snapshots: list[Frames | None] = []
    for time, page in enumerate(refs):
        if page in memory:
            last_used[memory.index(page)] = time
            snapshots.append(None)
            continue
        if filled < frames:
            slot = filled
            filled += 1
        else:
            slot = min(range(frames), key=last_used.__getitem__)
        memory[slot] = page
        last_used[slot] = time
        snapshots.append(tuple(memory))
    return PagingResult(refs, frames, tuple(snapshots))


def _counting(
    refs: tuple[int, ...],
    frames: int,
    pick: Callable[[Sequence[int], Callable[[int], int]], int],
) -> PagingResult:
    memory: list[int | None] = [None] * frames
    counts = [0] * frames
    filled = 0
    pointer = 0
    snapshots: list[Frames | None] = []
    for page in refs:
        if page in memory:
            counts[memory.index(page)] += 1
            snapshots.append(None)
            continue
        if filled < frames:
            slot = filled
            filled += 1
        else:
            order = [(pointer + offset) % frames for offset in range(frames)]
            slot = pick(order, counts.__getitem__)
            pointer = (slot + 1) % frames
        memory[slot] = page
        counts[slot] = 1
        snapshots.append(tuple(memory))
    return PagingResult(refs, frames, tuple(snapshots))


def lfu(references: Iterable[int], frames: int) -> PagingResult:
    """Replace the least frequently used page, scanning round from the last victim."""
    return _counting(_prepare(references, frames), frames, lambda order, key: min(order, key=key))


def mfu(references: Iterable[int], frames: int) -> PagingResult:
    """Replace the most frequently used page, scanning round from the last victim."""
    return _counting(_prepare(references, frames), frames, lambda order, key: max(order, key=key))


ALGORITHMS: dict[str, Callable[[Iterable[int], int], PagingResult]] = {
    "fifo": fifo,
    "lru": lru,
    "lfu": lfu,
    "mfu": mfu,
}


def format_result(result: PagingResult) -> str:
    """Render the reference string, one row per frame and the fault total."""
    lines = ["".join(f"{page:3d}" for page in result.references), ""]
    for row in range(result.frame_count):
        cells = []
        for snapshot in result.snapshots:
            value = snapshot[row] if snapshot is not None else None
            cells.append(f"{value:3d}" if value else "   ")
        lines.append("".join(cells))
    lines.append(f"Total Page Faults: {result.faults}")
    return "\n".join(lines) + "\n"


def _read_references() -> list[int]:
    count = int(input("Enter no.of references:"))
    print("Enter reference string:")
    return [int(input(f"[{index}]=")) for index in range(count)]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ossim-paging", description="Simulate demand paging.")
    parser.add_argument("algorithm", choices=sorted(ALGORITHMS))
    parser.add_argument("-n", "--frames", type=int, help="number of frames")
    parser.add_argument("references", nargs="*", type=int, help="page reference string")
    args = parser.parse_args(argv)

    frames = args.frames if args.frames is not None else int(input("Enter no.of frames:"))
    references = args.references or _read_references()
    try:
        result = ALGORITHMS[args.algorithm](references, frames)
    except ValueError as error:
        parser.error(str(error))
    print(format_result(result), end="")
    return 0