"""Warm-up puzzle: read a number forwards and backwards."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Optional, Sequence

from aocpuzzles.runner import read_input, solve

DIRECTORY = Path("2022") / "day_00"

_U32_MAX = 2**32 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_u32(text: str) -> Optional[int]:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def part_one(puzzle_input: str) -> Optional[int]:
    return _parse_u32(puzzle_input)


def part_two(puzzle_input: str) -> Optional[int]:
    return _parse_u32(puzzle_input[::-1])


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve both parts for the input in the given directory (or the day's own)."""
    args = sys.argv[1:] if argv is None else list(argv)
    puzzle_input = read_input(Path(args[0]) if args else DIRECTORY)
    solve(1, part_one, puzzle_input)
    solve(2, part_two, puzzle_input)
    return 0


if __name__ == "__main__":
    sys.exit(main())