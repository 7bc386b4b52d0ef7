"""Camp cleanup: count overlapping section assignments."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from aocpuzzles.runner import read_input, solve

DIRECTORY = Path("2022") / "day_04"

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_id(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid section id : {text!r}")
    return int(text)


def _parse_sections(text: str) -> tuple[int, int]:
    start, sep, end = text.partition("-")
    if not sep:
        raise ValueError(f"invalid section assignments : {text!r}")
    return _parse_id(start), _parse_id(end)


def _contains(sections: tuple[int, int], section: int) -> bool:
    return sections[0] <= section <= sections[1]


@dataclass(frozen=True)
class ElfPair:
    """Two inclusive section ranges assigned to a pair of elves."""

    first: tuple[int, int]
    second: tuple[int, int]

    @classmethod
    def parse(cls, line: str) -> ElfPair:
        left, sep, right = line.partition(",")
        if not sep:
            raise ValueError(f"invalid section assignments pair : {line!r}")
        return cls(_parse_sections(left), _parse_sections(right))

    def is_overlapping(self) -> bool:
        return self.first[0] <= self.second[1] and self.first[1] >= self.second[0]

    def is_fully_overlapping(self) -> bool:
        first_holds_second = all(_contains(self.first, s) for s in self.second)
        second_holds_first = all(_contains(self.second, s) for s in self.first)
        return first_holds_second or second_holds_first


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _pairs(text: str) -> list[ElfPair]:
    return [ElfPair.parse(line) for line in _lines(text)]


def part_one(puzzle_input: str) -> Optional[int]:
    return sum(pair.is_fully_overlapping() for pair in _pairs(puzzle_input))


def part_two(puzzle_input: str) -> Optional[int]:
    return sum(pair.is_overlapping() for pair in _pairs(puzzle_input))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve both parts for the input in the given directory (or the day's own)."""
    args = sys.argv[1:] if argv is None else list(argv)
    puzzle_input = read_input(Path(args[0]) if args else DIRECTORY)
    solve(1, part_one, puzzle_input)
    solve(2, part_two, puzzle_input)
    return 0


if __name__ == "__main__":
    sys.exit(main())