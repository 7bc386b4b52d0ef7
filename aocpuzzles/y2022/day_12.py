"""Hill climbing: shortest paths over a height map."""

from __future__ import annotations

import heapq
import itertools
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Sequence

from aocpuzzles.runner import read_input, solve

DIRECTORY = Path("2022") / "day_12"

_DIGIT_A = 10
_DIGIT_Z = 35


def char_to_elevation(char: str) -> int:
    """Elevation of a map cell: ``a``/``S`` is 0, ``z``/``E`` is 25."""
    if char == "E":
        digit = _DIGIT_Z
    elif char == "S":
        digit = _DIGIT_A
    else:
        if len(char) != 1 or not (char.isascii() and char.isalnum()):
            raise ValueError(f"invalid elevation : {char!r}")
        digit = int(char, 36)
    if digit < _DIGIT_A:
        raise ValueError(f"invalid elevation : {char!r}")
    return digit - _DIGIT_A


@dataclass(frozen=True)
class HeightMap:
    """Map cells stored row by row, ``columns`` cells to a row."""

    cells: tuple[str, ...]
    columns: int
    rows: int = field(init=False)

    def __post_init__(self) -> None:
        cells = tuple(self.cells)
        if self.columns <= 0 or len(cells) % self.columns:
            raise ValueError("cell count must be a multiple of the column count")
        object.__setattr__(self, "cells", cells)
        object.__setattr__(self, "rows", len(cells) // self.columns)

    def get(self, row: int, col: int) -> Optional[str]:
        if 0 <= row < self.rows and 0 <= col < self.columns:
            return self.cells[row * self.columns + col]
        return None

    def __iter__(self) -> Iterator[str]:
        return iter(self.cells)


@dataclass(frozen=True, order=True)
class Pos:
    row: int
    col: int

    @classmethod
    def from_index(cls, columns: int, index: int) -> Pos:
        return cls(index // columns, index % columns)

    def elevation(self, grid: HeightMap) -> Optional[int]:
        cell = grid.get(self.row, self.col)
        return None if cell is None else char_to_elevation(cell)

    def distance(self, other: Pos) -> int:
        """Manhattan distance."""
        return abs(self.row - other.row) + abs(self.col - other.col)


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_height_map(text: str) -> tuple[HeightMap, Pos, Pos]:
    """Return the map with its start (``S``) and end (``E``) positions."""
    lines = _lines(text)
    if not lines:
        raise ValueError("empty height map")
    grid = HeightMap(tuple("".join(lines)), len(lines[0]))
    try:
        start = Pos.from_index(grid.columns, grid.cells.index("S"))
    except ValueError:
        raise ValueError("Can't find start position") from None
    try:
        end = Pos.from_index(grid.columns, grid.cells.index("E"))
    except ValueError:
        raise ValueError("Can't find end position") from None
    return grid, start, end


class ElevationPathFinder:
    """Finds shortest climbs where each step rises by at most one."""

    def __init__(self, height_map: HeightMap) -> None:
        self.elevation_grid = height_map

    def _successors(self, position: Pos) -> list[Pos]:
        row, col = position.row, position.col
        possibilities = (
            Pos(row, col + 1),
            Pos(row + 1, col),
            Pos(row, max(col - 1, 0)),
            Pos(max(row - 1, 0), col),
        )
        grid = self.elevation_grid
        highest = (position.elevation(grid) or 0) + 1
        return [
            p
            for p in possibilities
            if grid.get(p.row, p.col) is not None
            and 0 <= (p.elevation(grid) or 0) <= highest
        ]

    def shortest(self, start: Pos, end: Pos) -> Optional[list[Pos]]:
        """A* search; return the path from ``start`` to ``end``, or None."""
        parents: dict[Pos, tuple[Optional[Pos], int]] = {start: (None, 0)}
        order = itertools.count()
        to_see = [(0, 0, next(order), start)]
        while to_see:
            _, negative_cost, _, node = heapq.heappop(to_see)
            cost = -negative_cost
            if node == end:
                path = [node]
                parent = parents[node][0]
                while parent is not None:
                    path.append(parent)
                    parent = parents[parent][0]
                return path[::-1]
            if cost > parents[node][1]:
                continue
            for successor in self._successors(node):
                new_cost = cost + 1
                known = parents.get(successor)
                if known is not None and known[1] <= new_cost:
                    continue
                parents[successor] = (node, new_cost)
                estimated = new_cost + successor.distance(end)
                heapq.heappush(to_see, (estimated, -new_cost, next(order), successor))
        return None


def part_one(puzzle_input: str) -> Optional[int]:
    grid, start, end = parse_height_map(puzzle_input)
    path = ElevationPathFinder(grid).shortest(start, end)
    return None if path is None else len(path) - 1


def part_two(puzzle_input: str) -> Optional[int]:
    grid, _, end = parse_height_map(puzzle_input)
    pathfinder = ElevationPathFinder(grid)
    starts = (
        Pos.from_index(grid.columns, index)
        for index, cell in enumerate(grid)
        if cell in ("S", "a")
    )
    lengths = (
        len(path)
        for path in (pathfinder.shortest(start, end) for start in starts)
        if path is not None
    )
    shortest = min(lengths, default=None)
    return None if shortest is None else shortest - 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve both parts for the input in the given directory (or the day's own)."""
    args = sys.argv[1:] if argv is None else list(argv)
    puzzle_input = read_input(Path(args[0]) if args else DIRECTORY)
    solve(1, part_one, puzzle_input)
    solve(2, part_two, puzzle_input)
    return 0


if __name__ == "__main__":
    sys.exit(main())