"""A toy command interpreter with built-in file and directory commands."""

from __future__ import annotations

import argparse
import io
import os
import subprocess
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TextIO

PROMPT = "myshell$"


def _complete_lines(path: str | Path) -> Iterator[tuple[int, str]]:
    """Yield (number, line) for every newline-terminated line of a file."""
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        for number, line in enumerate(handle, 1):
            if line.endswith("\n"):
                yield number, line


def _overlapping(text: str, pattern: str) -> int:
    found = 0
    index = text.find(pattern)
    while index != -1:
        found += 1
        index = text.find(pattern, index + 1)
    return found


def _check_pattern(pattern: str) -> None:
    if not pattern:
        raise ValueError("search pattern must not be empty")


def search_first(path: str | Path, pattern: str) -> tuple[int, str] | None:
    """Return the first (line number, line) holding ``pattern``, or None."""
    _check_pattern(pattern)
    return next(
        ((number, line) for number, line in _complete_lines(path) if pattern in line), None
    )


def search_all(path: str | Path, pattern: str) -> list[tuple[int, str]]:
    """Return every (line number, line) holding ``pattern``."""
    _check_pattern(pattern)
    return [(number, line) for number, line in _complete_lines(path) if pattern in line]


def count_occurrences(path: str | Path, pattern: str) -> int:
    """Count occurrences of ``pattern``, overlapping ones included."""
    _check_pattern(pattern)
    return sum(_overlapping(line, pattern) for _, line in _complete_lines(path))


def typeline(path: str | Path, option: str) -> str:
    """Return the file's text: all of it (``a``), the first n (``+n``) or last n (``-n``) lines."""
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        text = handle.read()
    if option == "a":
        return text
    try:
        n = int(option)
    except ValueError:
        raise ValueError(f"invalid typeline option {option!r}") from None
    if n == 0:
        return ""
    ends = [index for index, char in enumerate(text) if char == "\n"]
    if n > 0:
        return text if n > len(ends) else text[: ends[n - 1] + 1]
    skip = len(ends) + n
    return text if skip <= 0 else text[ends[skip - 1] + 1:]


def count(path: str | Path, option: str) -> int:
    """Count characters (``c``), words (``w``) or lines (``l``) of a file.

    Words are counted as spaces plus newlines.
    """
    if option not in ("c", "w", "l"):
        raise ValueError(f"invalid count option {option!r}")
    data = Path(path).read_bytes()
    if option == "c":
        return len(data)
    if option == "l":
        return data.count(b"\n")
    return data.count(b" ") + data.count(b"\n")


def list_dir(path: str | Path, option: str):
    """List a directory.

    ``f`` gives the sorted names of regular files, ``n`` a (directories, files)
    count in which "." and ".." are included, and ``i`` sorted (name, inode)
    pairs for regular files.
    """
    if option not in ("f", "n", "i"):
        raise ValueError(f"invalid list option {option!r}")
    with os.scandir(path) as entries:
        entries = sorted(entries, key=lambda entry: entry.name)
    files = [entry for entry in entries if entry.is_file(follow_symlinks=False)]
    if option == "f":
        return [entry.name for entry in files]
    if option == "i":
        return [(entry.name, entry.inode()) for entry in files]
    directories = 2 + sum(entry.is_dir(follow_symlinks=False) for entry in entries)
    return directories, len(files)


def _search(args: list[str], out: TextIO) -> None:
    option, pattern, path = args[0][0], args[1], args[2]
    try:
        if option == "f":
            hit = search_first(path, pattern)
            if hit:
                out.write(f"{hit[0]}: {hit[1]}")
        elif option == "a":
            for number, line in search_all(path, pattern):
                out.write(f"{number}: {line}")
        elif option == "c":
            out.write(f"Total No.of Occurrences = {count_occurrences(path, pattern)}\n")
        else:
            raise ValueError(f"invalid search option {option!r}")
    except FileNotFoundError:
        out.write(f"File {path} Not Found\n")


def _typeline(args: list[str], out: TextIO) -> None:
    option, path = args[0], args[1]
    try:
        out.write(typeline(path, option))
    except FileNotFoundError:
        out.write(f"File {path} not found.\n")


_COUNT_LABELS = {"c": "characters", "w": "words", "l": "lines"}


def _count(args: list[str], out: TextIO) -> None:
    option, path = args[0][0], args[1]
    try:
        out.write(f"No.of {_COUNT_LABELS.get(option, '')}:{count(path, option)}\n")
    except FileNotFoundError:
        out.write(f"File {path} not found.\n")


def _list(args: list[str], out: TextIO) -> None:
    option, path = args[0][0], args[1]
    try:
        result = list_dir(path, option)
    except FileNotFoundError:
        out.write(f"Dir {path} not found.\n")
        return
    if option == "f":
        out.writelines(f"{name}\n" for name in result)
    elif option == "n":
        out.write(f"{result[0]} Dir(s)\t{result[1]} File(s)\n")
    else:
        out.writelines(f"{name}\t{inode}\n" for name, inode in result)


# name -> (handler, number of arguments, usage)
_BUILTINS = {
    "search": (_search, 3, "search f|a|c pattern file"),
    "typeline": (_typeline, 2, "typeline a|+n|-n file"),
    "count": (_count, 2, "count c|w|l file"),
    "list": (_list, 2, "list f|n|i dir"),
}


def _external(tokens: list[str], out: TextIO) -> int:
    try:
        out.fileno()
        stream: TextIO | None = out
    except (AttributeError, OSError, io.UnsupportedOperation):
        stream = None
    try:
        if stream is not None:
            out.flush()
            return subprocess.run(tokens, stdout=stream).returncode
        result = subprocess.run(tokens, stdout=subprocess.PIPE, text=True)
    except OSError:
        out.write("Bad command.\n")
        return 127
    out.write(result.stdout)
    return result.returncode


def run_command(line: str, out: TextIO) -> int:
    """Run one command line, writing its output to ``out``; return an exit status."""
    tokens = [token for token in line.rstrip("\n").split(" ") if token]
    if not tokens:
        return 0
    builtin = _BUILTINS.get(tokens[0])
    if builtin is None:
        return _external(tokens, out)
    handler, arity, usage = builtin
    args = tokens[1:]
    if len(args) < arity or not args[0]:
        out.write(f"Usage: {usage}\n")
        return 1
    try:
        handler(args, out)
    except ValueError as error:
        out.write(f"{error}\n")
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ossim-shell", description="A toy command interpreter.")
    parser.parse_args(argv)
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            return 0
        run_command(line, sys.stdout)