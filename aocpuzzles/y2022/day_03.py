"""Rucksack reorganisation: sum priorities of shared items."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from aocpuzzles.runner import read_input, solve

DIRECTORY = Path("2022") / "day_03"

_DIGIT_9 = 9
_DIGIT_Z = 35
_UPPER_START = _DIGIT_Z - _DIGIT_9


def priority(item: str) -> int:
    """Return 1-26 for ``a``-``z`` and 27-52 for ``A``-``Z``."""
    if len(item) != 1 or not (item.isascii() and item.isalnum()):
        raise ValueError(f"invalid item : {item!r}")
    digit = int(item, 36)
    if digit < _DIGIT_9:
        raise ValueError(f"invalid item : {item!r}")
    start = 0 if item.islower() else _UPPER_START
    return digit - _DIGIT_9 + start


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def part_one(puzzle_input: str) -> Optional[int]:
    total = 0
    for rucksack in _lines(puzzle_input):
        middle = len(rucksack) // 2
        common = set(rucksack[:middle]) & set(rucksack[middle:])
        total += sum(priority(item) for item in common)
    return total


def part_two(puzzle_input: str) -> Optional[int]:
    lines = _lines(puzzle_input)
    total = 0
    for first, second, third in zip(*[iter(lines)] * 3):
        badge = next((item for item in first if item in second and item in third), None)
        if badge is not None:
            total += priority(badge)
    return total


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve both parts for the input in the given directory (or the day's own)."""
    args = sys.argv[1:] if argv is None else list(argv)
    puzzle_input = read_input(Path(args[0]) if args else DIRECTORY)
    solve(1, part_one, puzzle_input)
    solve(2, part_two, puzzle_input)
    return 0


if __name__ == "__main__":
    sys.exit(main())