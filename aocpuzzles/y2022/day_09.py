"""Rope bridge: follow a rope's knots and count where the tail goes."""

from __future__ import annotations

import itertools
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Sequence

from aocpuzzles.runner import read_input, solve

DIRECTORY = Path("2022") / "day_09"

_USIZE_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Position:
    x: int = 0
    y: int = 0

    def normalize(self) -> Position:
        """Clamp each coordinate to -1, 0 or 1."""
        return Position(max(-1, min(1, self.x)), max(-1, min(1, self.y)))

    def distance(self, target: Position) -> int:
        """Chebyshev distance: diagonal neighbours are one step away."""
        return max(abs(self.x - target.x), abs(self.y - target.y))

    def __add__(self, other: Position) -> Position:
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Position) -> Position:
        return Position(self.x - other.x, self.y - other.y)


_VECTORS = {
    "U": Position(0, 1),
    "D": Position(0, -1),
    "R": Position(1, 0),
    "L": Position(-1, 0),
}


class _StepsError(ValueError):
    """The step count of a motion is not an unsigned integer."""


@dataclass(frozen=True)
class Motion:
    """Move the head ``steps`` times in ``direction`` (``U``, ``D``, ``L`` or ``R``)."""

    direction: str
    steps: int

    def __post_init__(self) -> None:
        if self.direction not in _VECTORS:
            raise ValueError(f"invalid direction : {self.direction!r}")
        if self.steps < 0:
            raise ValueError(f"invalid steps : {self.steps!r}")

    @classmethod
    def parse(cls, line: str) -> Motion:
        parts = line.split(" ")
        if len(parts) != 2:
            raise ValueError(f"invalid motion : {line!r}")
        direction, steps = parts
        if not _UNSIGNED.fullmatch(steps) or int(steps) > _USIZE_MAX:
            raise _StepsError(f"invalid steps : {steps!r}")
        return cls(direction, int(steps))

    def vectors(self) -> Iterator[Position]:
        """One unit vector per step."""
        return itertools.repeat(_VECTORS[self.direction], self.steps)


class Rope:
    """A rope of knots; every knot follows the one before it."""

    def __init__(self, length: int = 2) -> None:
        if length < 1:
            raise ValueError("a rope needs at least one knot")
        self.knots = [Position() for _ in range(length)]

    def tail(self) -> Position:
        return self.knots[-1]

    def move_head_by(self, vector: Position) -> None:
        self.knots[0] = self.knots[0] + vector
        for index in range(1, len(self.knots)):
            head = self.knots[index - 1]
            tail = self.knots[index]
            if tail.distance(head) > 1:
                self.knots[index] = tail + (head - tail).normalize()


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _motions(text: str) -> list[Motion]:
    motions = []
    for line in _lines(text):
        try:
            motions.append(Motion.parse(line))
        except _StepsError:
            continue
    return motions


def _tail_visits(puzzle_input: str, length: int) -> int:
    rope = Rope(length)
    visited = set()
    for motion in _motions(puzzle_input):
        for vector in motion.vectors():
            rope.move_head_by(vector)
            visited.add(rope.tail())
    return len(visited)


def part_one(puzzle_input: str) -> Optional[int]:
    return _tail_visits(puzzle_input, 2)


def part_two(puzzle_input: str) -> Optional[int]:
    return _tail_visits(puzzle_input, 10)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve both parts for the input in the given directory (or the day's own)."""
    args = sys.argv[1:] if argv is None else list(argv)
    puzzle_input = read_input(Path(args[0]) if args else DIRECTORY)
    solve(1, part_one, puzzle_input)
    solve(2, part_two, puzzle_input)
    return 0


if __name__ == "__main__":
    sys.exit(main())