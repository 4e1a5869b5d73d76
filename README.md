# ossim

Small interactive simulators of classic operating-system and
systems-programming exercises, usable as console programs and as a
Python library. No third-party dependencies.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Commands

Every command prompts on the terminal for whatever it was not given on
the command line. End of input (Ctrl-D) leaves the interactive loops.

### `ossim-scheduling {fcfs,sjf,priority,rr} [-p] [-q QUANTUM]`

CPU scheduling. Prompts for the processes (name, arrival time, CPU burst
and, for `priority`, a priority where 1 is highest). `-p` makes `sjf` and
`priority` preemptive (a new decision every time unit); `-q` gives the
round-robin time slice, which is asked for otherwise. Prints the process
table after each decision, then completion, turnaround and waiting times
with their averages, and a one-line Gantt chart such as `0-A-2-B--5`
(`*` marks idle time).

### `ossim-paging {fifo,lfu,lru,mfu} [-n FRAMES] [REFERENCE ...]`

Demand paging. Prints the reference string, the frame contents after
every page fault and the total number of faults.

```
ossim-paging fifo -n 3 3 4 5 6 3 4 7 3 4 5 6 7 2 4 6
```

### `ossim-banker`

Banker's algorithm. Prompts for process and resource counts, totals,
allocation and maximum matrices; prints allocation, max, need and
available, runs the safety algorithm step by step, then handles one
resource request (granted, "must wait", or "exceeded its maximum claim").

### `ossim-allocation [-n BLOCKS] [--seed SEED]`

Linked file allocation on a disk of up to 200 blocks, some of which are
marked reserved at random (`--seed` makes that repeatable). Menu: show
the bit vector, create a file, show the directory with each file's block
chain, delete a file.

### `ossim-sic [--variant {standard,div-last,mover-last,io-first,print-first}]`

Simple Instruction Computer with 100 words of memory and four registers.
Menu: load a program of whitespace-separated decimal words from a file,
list it as six-digit words, run it. A word is `OO R AAA`: opcode, register
(1–4, or condition 1–6 for `BC`) and address. The variants differ only in
which opcode numbers stand for which operation (`STOP`, `ADD`, `SUB`,
`MULT`, `DIV`, `MOVER`, `MOVEM`, `COMP`, `BC`, `READ`, `PRINT`).

### `ossim-dfa [custom|ab|101]`

DFA driver. `custom` (the default) offers a menu to read a DFA, show its
transition table and check strings. `ab` (strings over {a,b} starting with
`a` and ending with `b`) and `101` (strings over {0,1} containing `101`)
print the built-in machine and check strings until told to stop.

### `ossim-editor [FILE]`

Line editor with a `$` prompt:

| Command     | Effect                                              |
|-------------|-----------------------------------------------------|
| `a`         | append lines until a line `END`                     |
| `p`         | print all lines                                     |
| `p m n`     | print lines m to n                                  |
| `i n`       | insert lines before line n, until `END`             |
| `d n`       | delete line n                                       |
| `d n1 n2`   | delete lines n1 to n2                               |
| `c n1 n2`   | copy line n1 before line n2                         |
| `m n1 n2`   | move line n1 before line n2                         |
| `s`         | save (asks for a file name if none is known)        |
| `e`         | exit, offering to save unsaved changes              |

### `ossim-shell`

Toy shell with a `myshell$` prompt. Built-in commands:

- `search f|a|c PATTERN FILE` – first matching line, all matching lines,
  or the number of occurrences
- `typeline a|+n|-n FILE` – whole file, first n or last n lines
- `count c|w|l FILE` – characters, words (spaces plus newlines) or lines
- `list f|n|i DIR` – regular file names, directory and file counts, or
  names with inode numbers

Anything else is run as an external program.

## Library use

```python
from ossim.paging import fifo, format_result

result = fifo([3, 4, 5, 6, 3, 4, 7, 3, 4, 5, 6, 7, 2, 4, 6], 3)
print(result.faults)
print(format_result(result))
```

```python
from ossim.dfa import contains_101

machine = contains_101()
print(machine.accepts("11010"))
```

```python
from ossim.scheduling import Process, round_robin, format_report, format_gantt

schedule = round_robin([Process("p1", 0, 5), Process("p2", 1, 3)], 2)
print(format_report(schedule))
print(format_gantt(schedule.slots))
```

```python
from ossim.banker import BankerState

state = BankerState([10, 5, 7], [[0, 1, 0], [2, 0, 0]], [[7, 5, 3], [3, 2, 2]])
print(state.available(), state.safe_sequence())
```

Other entry points: `ossim.scheduling` (`fcfs`, `sjf`, `priority`,
`round_robin`, `merge_gantt`), `ossim.paging` (`fifo`, `lru`, `lfu`,
`mfu`), `ossim.allocation.Disk`, `ossim.sic.Machine` and
`instruction_set`, `ossim.dfa.DFA`, `ossim.editor.Buffer`, and
`ossim.shell` (`search_first`, `search_all`, `count_occurrences`,
`typeline`, `count`, `list_dir`, `run_command`).

## Limitations

The shell splits command lines on spaces only: there is no quoting,
globbing, pipes, redirection, variables or job control. The simulators
keep all state in memory; only the editor and the instruction computer
read or write files.