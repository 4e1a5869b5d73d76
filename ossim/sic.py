"""Simulator for a hypothetical Simple Instruction Computer (SIC)."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from pathlib import Path

MEMORY_SIZE = 100
REGISTER_COUNT = 4


class Operation(Enum):
    """Machine operations; the numeric opcode depends on the instruction set."""

    STOP = "STOP"
    ADD = "ADD"
    SUB = "SUB"
    MULT = "MULT"
    DIV = "DIV"
    MOVER = "MOVER"
    MOVEM = "MOVEM"
    COMP = "COMP"
    BC = "BC"
    READ = "READ"
    PRINT = "PRINT"


_O = Operation

# Each table lists the operation for opcodes 0 through 10.
_TABLES: dict[str, tuple[Operation, ...]] = {
    "standard": (
        _O.STOP, _O.ADD, _O.SUB, _O.MULT, _O.DIV, _O.MOVER,
        _O.MOVEM, _O.COMP, _O.BC, _O.READ, _O.PRINT,
    ),
    "div-last": (
        _O.STOP, _O.ADD, _O.SUB, _O.MULT, _O.MOVER, _O.MOVEM,
        _O.COMP, _O.BC, _O.DIV, _O.READ, _O.PRINT,
    ),
    "mover-last": (
        _O.STOP, _O.ADD, _O.DIV, _O.SUB, _O.MULT, _O.READ,
        _O.COMP, _O.MOVEM, _O.BC, _O.MOVER, _O.PRINT,
    ),
    "io-first": (
        _O.STOP, _O.READ, _O.PRINT, _O.ADD, _O.SUB, _O.MOVER,
        _O.MOVEM, _O.MULT, _O.DIV, _O.BC, _O.COMP,
    ),
    "print-first": (
        _O.STOP, _O.PRINT, _O.SUB, _O.MULT, _O.READ, _O.MOVER,
        _O.MOVEM, _O.COMP, _O.BC, _O.DIV, _O.ADD,
    ),
}

VARIANTS = tuple(_TABLES)

# Condition codes addressed by the BC register digit: LT, LE, EQ, GT, GE, ANY.
_CONDITION_COUNT = 6
_REGISTER_OPS = {
    Operation.ADD, Operation.SUB, Operation.MULT, Operation.DIV,
    Operation.MOVER, Operation.MOVEM, Operation.COMP,
}


def instruction_set(variant: str = "standard") -> dict[int, Operation]:
    """Return the opcode-to-operation mapping of the named instruction set."""
    try:
        table = _TABLES[variant]
    except KeyError:
        raise ValueError(f"unknown instruction set {variant!r}") from None
    return dict(enumerate(table))


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _cmod(a: int, b: int) -> int:
    return a - b * _cdiv(a, b)


def _read_stdin() -> int:
    return int(input())


class Machine:
    """Memory, registers and condition codes of one SIC."""

    def __init__(self, variant: str = "standard") -> None:
        self.opcodes = instruction_set(variant)
        self.memory = [0] * MEMORY_SIZE
        self.registers = [0] * REGISTER_COUNT
        self.conditions = [False] * (_CONDITION_COUNT - 1) + [True]
        self.size = 0

    def load(self, words: Iterable[int]) -> None:
        """Store words in memory after those already loaded."""
        for word in words:
            if self.size >= MEMORY_SIZE:
                raise ValueError(f"program does not fit in {MEMORY_SIZE} words of memory")
            self.memory[self.size] = int(word)
            self.size += 1

    def load_file(self, path: str | Path) -> None:
        """Load whitespace-separated decimal words from a file."""
        text = Path(path).read_text()
        try:
            words = [int(token) for token in text.split()]
        except ValueError as error:
            raise ValueError(f"{path}: not a program file ({error})") from None
        self.load(words)

    def listing(self) -> list[str]:
        """Return the loaded words as six-digit strings."""
        return [f"{word:06d}" for word in self.memory[: self.size]]

    def _address(self, address: int) -> int:
        if not 0 <= address < MEMORY_SIZE:
            raise ValueError(f"address {address} is outside memory")
        return address

    def run(
        self,
        read: Callable[[], int] | None = None,
        write: Callable[[int], object] | None = None,
    ) -> None:
        """Execute from address 0 until STOP."""
        read = read or _read_stdin
        write = write or print
        pc = 0
        while True:
            if not 0 <= pc < MEMORY_SIZE:
                raise ValueError(f"program counter {pc} is outside memory")
            word = self.memory[pc]
            code = _cdiv(word, 10000)
            register = _cdiv(_cmod(word, 10000), 1000) - 1
            address = _cmod(word, 1000)
            operation = self.opcodes.get(code)

            if operation is Operation.STOP:
                return
            if operation in _REGISTER_OPS and not 0 <= register < REGISTER_COUNT:
                raise ValueError(f"invalid register in word {word} at {pc}")

            if operation is Operation.BC:
                if not 0 <= register < _CONDITION_COUNT:
                    raise ValueError(f"invalid condition in word {word} at {pc}")
                if self.conditions[register]:
                    pc = address - 1
                for index in range(_CONDITION_COUNT - 1):
                    self.conditions[index] = False
            elif operation is not None:
                self._execute(operation, register, self._address(address), read, write)
            pc += 1

    def _execute(self, operation, register, address, read, write) -> None:
        regs, mem = self.registers, self.memory
        if operation is Operation.ADD:
            regs[register] += mem[address]
        elif operation is Operation.SUB:
            regs[register] -= mem[address]
        elif operation is Operation.MULT:
            regs[register] *= mem[address]
        elif operation is Operation.DIV:
            if mem[address] == 0:
                raise ZeroDivisionError(f"division by zero at address {address}")
            regs[register] = _cdiv(regs[register], mem[address])
        elif operation is Operation.MOVER:
            regs[register] = mem[address]
        elif operation is Operation.MOVEM:
            mem[address] = regs[register]
        elif operation is Operation.COMP:
            value, operand = regs[register], mem[address]
            flags = (value < operand, value <= operand, value == operand,
                     value > operand, value >= operand)
            for index, flag in enumerate(flags):
                if flag:
                    self.conditions[index] = True
        elif operation is Operation.READ:
            mem[address] = int(read())
        elif operation is Operation.PRINT:
            write(mem[address])


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ossim-sic", description="Simple Instruction Computer.")
    parser.add_argument("--variant", choices=VARIANTS, default="standard",
                        help="opcode assignment to use")
    args = parser.parse_args(argv)
    machine = Machine(args.variant)

    while True:
        print("1.Load\n2.Print\n3.Run\n4.Exit")
        try:
            choice = input("Enter your choice (1-4):").strip()
            if choice == "1":
                name = input("Enter file name:").strip()
                try:
                    machine.load_file(name)
                except FileNotFoundError:
                    print(f"File {name} not found.")
                    return 1
                except ValueError as error:
                    print(error)
            elif choice == "2":
                for line in machine.listing():
                    print(line)
            elif choice == "3":
                try:
                    machine.run()
                except (ValueError, ZeroDivisionError) as error:
                    print(f"Error: {error}")
            elif choice == "4":
                return 0
        except EOFError:
            return 0