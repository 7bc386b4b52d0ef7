"""Tuning trouble: find the first run of distinct characters."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from aocpuzzles.runner import read_input, solve

DIRECTORY = Path("2022") / "day_06"

PACKET_MARKER = 4
MESSAGE_MARKER = 14


def find_marker(datastream: str, length: int) -> Optional[int]:
    """Return how many characters are read when ``length`` distinct ones have just
    been seen, or None if that never happens."""
    for start in range(len(datastream) - length + 1):
        window = datastream[start:start + length]
        if len(set(window)) == len(window):
            return start + length
    return None


def part_one(puzzle_input: str) -> Optional[int]:
    return find_marker(puzzle_input, PACKET_MARKER)


def part_two(puzzle_input: str) -> Optional[int]:
    return find_marker(puzzle_input, MESSAGE_MARKER)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve both parts for the input in the given directory (or the day's own)."""
    args = sys.argv[1:] if argv is None else list(argv)
    puzzle_input = read_input(Path(args[0]) if args else DIRECTORY)
    solve(1, part_one, puzzle_input)
    solve(2, part_two, puzzle_input)
    return 0


if __name__ == "__main__":
    sys.exit(main())