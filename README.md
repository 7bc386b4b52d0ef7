# aocpuzzles

Solutions to Advent of Code puzzles, together with a few helpers for working
on new days: fetching puzzle descriptions and inputs, creating the directory
of a new day, and timing solutions.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is solved

- `aocpuzzles.y2022`: days `day_00` (a warm-up) to `day_12`.
- `aocpuzzles.y2023`: `day_05` only, which is still a placeholder: part one
  reads the whole input as an unsigned 32-bit number and part two reads it
  backwards, returning `None` when the text is not such a number (a trailing
  newline is enough for that).

Other days and years are not solved.

## Solving puzzles from Python

Every day module exposes `part_one` and `part_two`. Each takes the puzzle
input as a string and returns the answer, or `None` when there is none.
Malformed input raises `ValueError` (or a subclass of it).

```python
from aocpuzzles.runner import read_input, solve
from aocpuzzles.y2022 import day_01

puzzle_input = read_input("2022/day_01")
solve(1, day_01.part_one, puzzle_input)
solve(2, day_01.part_two, puzzle_input)
```

`solve` prints a banner for the part, then the answer with the time it took
(or `not solved.` for `None`), and returns the answer. `read_input` reads
`input.txt` from the given directory (the working directory by default) and
`read_example` reads `example.txt`, or `example_<suffix>.txt` when a suffix
is given. `parse_exec_time` adds up, in milliseconds, the
`(elapsed: ...)` timings found in such output.

Each day can also be run as a module. It reads `input.txt` from the
directory given as its argument, or from `<year>/day_<DD>` below the working
directory:

```
python -m aocpuzzles.y2022.day_01
python -m aocpuzzles.y2022.day_01 path/to/day_01
```

## Command-line tools

Fetching relies on the external `aoc` command-line client being installed and
on your `PATH`; the commands exit with status 1 when it cannot be run. The
year defaults to 2023.

Download the puzzle description and input of a day:

```
aoc-download 5
aoc-download 5 --year 2022
```

The input is written to `<year>/day_<DD>/input.txt` and the description to
`<year>/day_<DD>/README.md`.

Show a puzzle description in the terminal:

```
aoc-read 5 -y 2022
```

Create the directory for a new day from the templates in `.templates/` (its
files and those of `.templates/src`):

```
aoc-scaffold 6 --year 2023
```

This creates `<year>/day_<DD>/src`, copies the templates there and replaces
`%%NAME%%` in them with `day_<year>_<DD>`. It refuses to overwrite an
existing directory. It does not add a module to the package.

Run days 1 to 25 of 2023 and print the total time spent:

```
aoc-run-all
```

Each day is run as `python -m aocpuzzles.y2023.day_<DD>`; days without a
module, or that print nothing, are reported as `Not solved.`. Only the 2023
days are timed, not those of 2022.