"""Deterministic finite automaton driver."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class DFA:
    """A DFA with start state q0; states are numbered by transition-table row."""

    symbols: str
    transitions: tuple[tuple[int, ...], ...]
    finals: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "transitions", tuple(tuple(row) for row in self.transitions))
        object.__setattr__(self, "finals", tuple(self.finals))
        if not self.transitions:
            raise ValueError("a DFA needs at least one state")
        if not self.symbols or len(set(self.symbols)) != len(self.symbols):
            raise ValueError("input symbols must be distinct and non-empty")
        states = len(self.transitions)
        for row in self.transitions:
            if len(row) != len(self.symbols):
                raise ValueError("each state needs one transition per input symbol")
            if any(not 0 <= target < states for target in row):
                raise ValueError("transition leads to an unknown state")
        if any(not 0 <= state < states for state in self.finals):
            raise ValueError("final state is not a state of the DFA")

    @property
    def states(self) -> int:
        return len(self.transitions)

    def _column(self, symbol: str) -> int:
        index = self.symbols.find(symbol)
        if index < 0:
            raise ValueError(f"symbol {symbol!r} is not in the alphabet")
        return index

    def trace(self, text: str) -> list[tuple[int, str]]:
        """Return each (state, remaining input) pair, ending with the final state and ''."""
        state = 0
        steps = []
        for index, symbol in enumerate(text):
            steps.append((state, text[index:]))
            state = self.transitions[state][self._column(symbol)]
        steps.append((state, ""))
        return steps

    def accepts(self, text: str) -> bool:
        return self.trace(text)[-1][0] in self.finals

    def describe(self) -> str:
        """Render the formal definition and transition table."""
        lines = [
            "M=(Q,E,d,q0,F)",
            "Q={" + ",".join(f"q{state}" for state in range(self.states)) + "}",
            "E={" + ",".join(self.symbols) + "}",
            "q0=q0",
            "F={" + ",".join(f"q{state}" for state in self.finals) + "}",
            "d:",
            "\t" + "".join(f"{symbol}\t" for symbol in self.symbols),
        ]
        for state, row in enumerate(self.transitions):
            lines.append(f"q{state}\t" + "".join(f"q{target}\t" for target in row))
        return "\n".join(lines) + "\n"


def starts_with_a_ends_with_b() -> DFA:
    """Strings over {a,b} that start with a and end with b."""
    return DFA("ab", ((1, 3), (1, 2), (1, 2), (3, 3)), (2,))


def contains_101() -> DFA:
    """Strings over {0,1} that contain 101."""
    return DFA("01", ((0, 1), (2, 1), (0, 3), (3, 3)), (3,))


PRESETS = {"ab": starts_with_a_ends_with_b, "101": contains_101}


def _format_check(dfa: DFA, text: str) -> str:
    steps = dfa.trace(text)
    lines = [f"d(q{state},{rest})" for state, rest in steps[:-1]]
    final = steps[-1][0]
    lines.append(f"q{final}")
    lines.append("Accept" if final in dfa.finals else "Reject")
    return "\n".join(lines)


def _read_dfa() -> DFA:
    states = int(input("Enter no.of states:"))
    count = int(input("Enter no.of input symbols:"))
    symbols = input("Enter input symbols:").strip()[:count]
    final_count = int(input("Enter no.of finals:"))
    finals: list[int] = []
    prompt = "Enter finals states:"
    while len(finals) < final_count:
        finals.extend(int(token) for token in input(prompt).split())
        prompt = ""
    print("Enter transition table:")
    table = [
        [int(input(f"d(q{state},{symbol})=")) for symbol in symbols]
        for state in range(states)
    ]
    return DFA(symbols, tuple(map(tuple, table)), tuple(finals[:final_count]))


def _check(dfa: DFA) -> None:
    text = input("Enter input string:").strip()
    try:
        print(_format_check(dfa, text))
    except ValueError as error:
        print(error)


def _run_preset(dfa: DFA) -> int:
    print(dfa.describe(), end="")
    try:
        while True:
            _check(dfa)
            if input("Continue Y(1)/N(0)?").strip() != "1":
                return 0
    except EOFError:
        return 0


def _run_menu() -> int:
    dfa: DFA | None = None
    while True:
        print("1.Read DFA\n2.Show Transition Table\n3.Check acceptance of given string\n4.Exit")
        try:
            choice = input("Enter choice (1-4):").strip()
            if choice == "1":
                try:
                    dfa = _read_dfa()
                except ValueError as error:
                    print(f"Invalid DFA: {error}")
            elif choice in ("2", "3") and dfa is None:
                print("No DFA has been read.")
            elif choice == "2":
                print(dfa.describe(), end="")
            elif choice == "3":
                _check(dfa)
            elif choice == "4":
                return 0
        except EOFError:
            return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ossim-dfa", description="Run a DFA over input strings.")
    parser.add_argument("language", nargs="?", default="custom", choices=["custom", *PRESETS])
    args = parser.parse_args(argv)
    if args.language == "custom":
        return _run_menu()
    return _run_preset(PRESETS[args.language]())