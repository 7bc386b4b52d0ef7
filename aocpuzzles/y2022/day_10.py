"""Cathode-ray tube: emulate a tiny CPU and draw its screen."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

from aocpuzzles.runner import read_input, solve

DIRECTORY = Path("2022") / "day_10"

SIGNAL_CYCLES = (20, 60, 100, 140, 180, 220)

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Instruction:
    """``addx V`` when ``addx`` holds V, ``noop`` when it is None."""

    addx: Optional[int] = None

    @classmethod
    def parse(cls, text: str) -> Instruction:
        _, sep, number = text.strip().partition(" ")
        if not sep:
            return cls()
        if not _INTEGER.fullmatch(number):
            raise ValueError(f"invalid addx value : {number!r}")
        return cls(int(number))

    def x_cycles(self) -> list[int]:
        """Change of X at the end of each cycle the instruction takes."""
        if self.addx is None:
            return [0]
        return [0, self.addx]


class Crt:
    """A 40x6 screen drawn one pixel per cycle by a 3-pixel sprite at X."""

    WIDE = 40
    HIGH = 6

    def __init__(self) -> None:
        self.cycle = 0
        self.screen = [False] * (self.WIDE * self.HIGH)
        self.x = 1

    def _sprite_range(self) -> range:
        index = self.cycle % self.WIDE
        return range(index - 1, index + 2)

    def render(self, delta_x: Iterable[int]) -> None:
        for delta in delta_x:
            self.screen[self.cycle] = self.x in self._sprite_range()
            self.cycle += 1
            self.x += delta

    def __str__(self) -> str:
        rows = (
            self.screen[start:start + self.WIDE]
            for start in range(0, len(self.screen), self.WIDE)
        )
        return "\n".join("".join("#" if pixel else "." for pixel in row) for row in rows)


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def part_one(puzzle_input: str) -> Optional[int]:
    x_cycles = [
        delta
        for line in _lines(puzzle_input)
        for delta in Instruction.parse(line).x_cycles()
    ]
    return sum(cycle * (sum(x_cycles[:cycle - 1]) + 1) for cycle in SIGNAL_CYCLES)


def part_two(puzzle_input: str) -> Optional[str]:
    crt = Crt()
    for line in _lines(puzzle_input):
        crt.render(Instruction.parse(line).x_cycles())
    return str(crt)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve both parts for the input in the given directory (or the day's own)."""
    args = sys.argv[1:] if argv is None else list(argv)
    puzzle_input = read_input(Path(args[0]) if args else DIRECTORY)
    solve(1, part_one, puzzle_input)
    solve(2, part_two, puzzle_input)
    return 0


if __name__ == "__main__":
    sys.exit(main())