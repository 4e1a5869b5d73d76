"""Linked file allocation on a simulated disk with a block map."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Sequence
from itertools import pairwise

MAX_BLOCKS = 200
RANDOM_PICKS = 10

FREE = 0
END = -1
RESERVED = -2


class DiskFullError(RuntimeError):
    """Not enough free blocks for the requested file."""


class UnknownFileError(LookupError):
    """No file of that name is in the directory."""


class Disk:
    """A disk of numbered blocks.

    Each block-map entry is FREE, RESERVED, END for the last block of a file,
    or the number of the file's next block.
    """

    def __init__(
        self,
        size: int,
        reserved: Iterable[int] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if not 1 <= size <= MAX_BLOCKS:
            raise ValueError(f"disk size must be between 1 and {MAX_BLOCKS}")
        self._bits = [FREE] * size
        self._files: list[tuple[str, int]] = []
        if reserved is None:
            rng = rng or random.Random()
            reserved = [rng.randrange(size) for _ in range(RANDOM_PICKS)]
        for block in reserved:
            if not 0 <= block < size:
                raise ValueError(f"block {block} is not on the disk")
            self._bits[block] = RESERVED

    @property
    def size(self) -> int:
        return len(self._bits)

    @property
    def free_blocks(self) -> int:
        return self._bits.count(FREE)

    def _walk(self, start: int) -> list[int]:
        blocks = []
        block = start
        while block != END:
            blocks.append(block)
            block = self._bits[block]
        return blocks

    def _find(self, name: str) -> int:
        for index, (entry, _) in enumerate(self._files):
            if entry == name:
                return index
        raise UnknownFileError(f"File {name} not found.")

    def create(self, name: str, blocks: int) -> list[int]:
        """Allocate the first free blocks to a new file and return its chain."""
        if blocks < 1:
            raise ValueError("a file needs at least one block")
        if blocks > self.free_blocks:
            raise DiskFullError(f"Failed to create file {name}")
        chain = [index for index, bit in enumerate(self._bits) if bit == FREE][:blocks]
        for block, following in pairwise(chain):
            self._bits[block] = following
        self._bits[chain[-1]] = END
        self._files.append((name, chain[0]))
        return chain

    def delete(self, name: str) -> list[int]:
        """Remove a file, free its blocks and return them."""
        index = self._find(name)
        chain = self._walk(self._files[index][1])
        for block in chain:
            self._bits[block] = FREE
        del self._files[index]
        return chain

    def chain(self, name: str) -> list[int]:
        return self._walk(self._files[self._find(name)][1])

    def bit_vector(self) -> list[int]:
        return list(self._bits)

    def directory(self) -> list[tuple[str, list[int]]]:
        return [(name, self._walk(start)) for name, start in self._files]


def _format_directory(disk: Disk) -> str:
    lines = ["File\tChain"]
    for name, chain in disk.directory():
        lines.append(f"{name}\t" + "".join(f"{block}->" for block in chain) + "NULL")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ossim-alloc", description="Simulate file allocation.")
    parser.add_argument("-n", "--blocks", type=int, help="total number of disk blocks")
    parser.add_argument("--seed", type=int, help="seed for marking reserved blocks")
    args = parser.parse_args(argv)

    try:
        size = args.blocks if args.blocks is not None else int(
            input("Enter total no.of disk blocks:"))
        disk = Disk(size, rng=random.Random(args.seed))
    except (ValueError, EOFError) as error:
        print(error)
        return 1

    while True:
        print("1.Show bit vector\n2.Create new file\n3.Show directory\n4.Delete file\n5.Exit")
        try:
            choice = input("Enter your choice (1-5):").strip()
            if choice == "1":
                print("".join(f"{bit} " for bit in disk.bit_vector()))
            elif choice == "2":
                name = input("Enter file name:").strip()
                try:
                    disk.create(name, int(input("Enter no.of blocks:")))
                    print(f"File {name} created successfully.")
                except (DiskFullError, ValueError) as error:
                    print(error)
            elif choice == "3":
                print(_format_directory(disk))
            elif choice == "4":
                name = input("Enter file name to be deleted:").strip()
                try:
                    disk.delete(name)
                    print(f"File {name} deleted successfully.")
                except UnknownFileError as error:
                    print(error.args[0])
            elif choice == "5":
                return 0
        except EOFError:
            return 0