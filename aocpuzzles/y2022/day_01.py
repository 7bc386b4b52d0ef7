"""Calorie counting: find the elves carrying the most calories."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Iterator, Optional, Sequence

from aocpuzzles.runner import read_input, solve

DIRECTORY = Path("2022") / "day_01"

_U32_MAX = 2**32 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_u32(text: str) -> Optional[int]:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def _lines(text: str) -> list[str]:
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    if lines and lines[-1] == "" and text.endswith("\n"):
        lines.pop()
    return lines


def _inventories(text: str) -> Iterator[list[int]]:
    for inventory in text.split("\n\n"):
        parsed = (_parse_u32(line) for line in _lines(inventory))
        yield [calories for calories in parsed if calories is not None]


def part_one(puzzle_input: str) -> Optional[int]:
    return max((sum(items) for items in _inventories(puzzle_input)), default=None)


def part_two(puzzle_input: str) -> Optional[int]:
    totals = [sum(items) if items else None for items in _inventories(puzzle_input)]
    ranked = sorted(totals, key=lambda total: (total is not None, total or 0), reverse=True)
    top = ranked[:3]
    if any(total is None for total in top):
        return None
    return sum(top)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve both parts for the input in the given directory (or the day's own)."""
    args = sys.argv[1:] if argv is None else list(argv)
    puzzle_input = read_input(Path(args[0]) if args else DIRECTORY)
    solve(1, part_one, puzzle_input)
    solve(2, part_two, puzzle_input)
    return 0


if __name__ == "__main__":
    sys.exit(main())