"""A line editor working on an in-memory buffer of text lines."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path


class Buffer:
    """Lines of text, numbered from 1, with a flag for unsaved changes.

    Lines keep their line terminators, exactly as read or given.
    """

    def __init__(self, lines: Iterable[str] | None = None) -> None:
        self.lines: list[str] = list(lines or [])
        self.changed = False

    def __len__(self) -> int:
        return len(self.lines)

    def _require(self, *positions: int) -> None:
        for position in positions:
            if not 1 <= position <= len(self.lines):
                raise ValueError(f"Invalid position: {position}")

    def load(self, path: str | Path) -> None:
        """Append the lines of a file to the buffer."""
        with open(path, encoding="utf-8") as handle:
            self.lines.extend(handle)

    def append(self, lines: Iterable[str]) -> None:
        """Add lines at the end of the buffer."""
        self.lines.extend(lines)
        self.changed = True

    def insert(self, position: int, lines: Iterable[str]) -> None:
        """Insert lines before line ``position``."""
        self._require(position)
        index = position - 1
        self.lines[index:index] = list(lines)
        self.changed = True

    def delete(self, start: int, end: int | None = None) -> list[str]:
        """Remove lines ``start`` to ``end`` inclusive and return them."""
        end = start if end is None else end
        if start > end:
            raise ValueError("Invalid parameter")
        self._require(start, end)
        removed = self.lines[start - 1:end]
        del self.lines[start - 1:end]
        self.changed = True
        return removed

    def copy(self, source: int, target: int) -> None:
        """Insert a copy of line ``source`` before line ``target``."""
        self._require(source, target)
        self.lines.insert(target - 1, self.lines[source - 1])
        self.changed = True

    def move(self, source: int, target: int) -> None:
        """Copy line ``source`` before line ``target``, then remove the original."""
        self.copy(source, target)
        self.delete(source if source <= target else source + 1)

    def lines_between(self, start: int, end: int) -> list[tuple[int, str]]:
        """Return (number, line) pairs for lines ``start`` to ``end`` inclusive."""
        if start > end:
            raise ValueError("Invalid parameter")
        self._require(start, end)
        return list(enumerate(self.lines[start - 1:end], start))

    def save(self, path: str | Path) -> None:
        """Write the buffer to a file and clear the changed flag."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.writelines(self.lines)
        self.changed = False


def _read_text(prompt: str) -> Iterator[str]:
    """Yield typed lines, with newlines, until END or end of input."""
    while True:
        try:
            text = input(prompt)
        except EOFError:
            return
        if text == "END":
            return
        yield text + "\n"
        prompt = ""


def _numbers(text: str) -> list[int]:
    values = []
    for token in text.split():
        try:
            values.append(int(token))
        except ValueError:
            break
    return values


def _save(buffer: Buffer, path: str | None, prompt: str) -> str:
    if not path:
        path = input(prompt).strip()
    buffer.save(path)
    return path


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ossim-edit", description="A simple line editor.")
    parser.add_argument("file", nargs="?", help="file to edit")
    args = parser.parse_args(argv)

    buffer = Buffer()
    path: str | None = args.file
    if path:
        try:
            buffer.load(path)
        except FileNotFoundError:
            print(f"File {path} not found.")
            return 1

    while True:
        try:
            line = input("$")
        except EOFError:
            return 0
        command, numbers = line[:1], _numbers(line[1:])
        try:
            if command == "a":
                buffer.append(_read_text("Enter text (type END to stop):"))
            elif command == "p":
                if numbers:
                    if len(numbers) < 2:
                        raise ValueError("Invalid parameter")
                    for number, text in buffer.lines_between(numbers[0], numbers[1]):
                        print(f"{number}: {text}", end="")
                else:
                    for number, text in enumerate(buffer.lines, 1):
                        print(f"{number}:{text}", end="")
            elif command == "i":
                if not numbers:
                    raise ValueError("Invalid parameter")
                buffer._require(numbers[0])
                buffer.insert(numbers[0], list(_read_text(
                    "Enter text to insert (type END to stop):")))
            elif command == "d":
                if not numbers:
                    raise ValueError("Invalid parameter")
                if len(numbers) == 1:
                    buffer.delete(numbers[0])
                else:
                    try:
                        buffer.delete(numbers[0], numbers[1])
                    except ValueError:
                        raise ValueError("Invalid parameter") from None
            elif command in ("c", "m"):
                if len(numbers) < 2:
                    raise ValueError("Invalid parameter")
                try:
                    if command == "c":
                        buffer.copy(numbers[0], numbers[1])
                    else:
                        buffer.move(numbers[0], numbers[1])
                except ValueError:
                    raise ValueError("Invalid parameter") from None
            elif command == "s":
                if buffer.changed:
                    path = _save(buffer, path, "Enter source file name:")
            elif command == "e":
                if buffer.changed:
                    answer = input("Quit without save (Y/N)?")
                    if answer.startswith("N"):
                        _save(buffer, path, "Enter file name:")
                return 0
            else:
                print("Invalid command.")
        except ValueError as error:
            print(error)
        except EOFError:
            return 0