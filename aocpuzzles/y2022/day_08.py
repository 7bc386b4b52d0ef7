"""Treetop tree house: visibility and scenic scores in a forest."""

from __future__ import annotations

import itertools
import math
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, Sequence

from aocpuzzles.runner import read_input, solve
from aocpuzzles.y2022.day_08_grid import UGrid

DIRECTORY = Path("2022") / "day_08"


class Direction(Enum):
    """Viewing directions, iterated as up, left, down, right."""

    UP = "up"
    LEFT = "left"
    DOWN = "down"
    RIGHT = "right"


@dataclass(frozen=True)
class Tree:
    position: tuple[int, int]
    height: int

    def looking_up(self) -> Iterator[int]:
        """Line numbers above the tree, nearest first."""
        return reversed(range(self.position[1]))

    def looking_down(self) -> Iterator[int]:
        """Line numbers below the tree, unbounded."""
        return itertools.count(self.position[1] + 1)

    def looking_left(self) -> Iterator[int]:
        return reversed(range(self.position[0]))

    def looking_right(self) -> Iterator[int]:
        """Positions to the right of the tree, unbounded."""
        return itertools.count(self.position[0] + 1)


@dataclass(frozen=True)
class VisibilityCheck:
    """Looks along lines of trees in a forest."""

    forest: UGrid

    def _iter_from_tree(self, tree: Tree, direction: Direction) -> Iterator[int]:
        if direction is Direction.UP:
            return tree.looking_up()
        if direction is Direction.DOWN:
            return itertools.takewhile(lambda y: y < self.forest.rows, tree.looking_down())
        if direction is Direction.LEFT:
            return tree.looking_left()
        return itertools.takewhile(lambda x: x < self.forest.columns, tree.looking_right())

    def _heights(self, tree: Tree, direction: Direction) -> Iterator[int]:
        x, y = tree.position
        for n in self._iter_from_tree(tree, direction):
            if direction in (Direction.UP, Direction.DOWN):
                yield self.forest[(x, n)]
            else:
                yield self.forest[(n, y)]

    def is_visible_from_outside(self, tree: Tree, direction: Direction) -> bool:
        """True if every tree in that direction is shorter."""
        return not any(height >= tree.height for height in self._heights(tree, direction))

    def count_visible_trees(self, tree: Tree, direction: Direction) -> int:
        """Trees seen up to and including the first one at least as tall."""
        count = 0
        for height in self._heights(tree, direction):
            count += 1
            if height >= tree.height:
                break
        return count


def scenic_score(checker: VisibilityCheck, tree: Tree) -> int:
    """Product of the viewing distances in the four directions."""
    return math.prod(checker.count_visible_trees(tree, direction) for direction in Direction)


def _trees(forest: UGrid) -> Iterator[Tree]:
    for index in range(forest.rows * forest.columns):
        position = forest.index_to_coord(index)
        yield Tree(position, forest[position])


def part_one(puzzle_input: str) -> Optional[int]:
    forest = UGrid.parse(puzzle_input)
    checker = VisibilityCheck(forest)

    def visible(tree: Tree) -> bool:
        x, y = tree.position
        if x == 0 or x == forest.rows - 1 or y == 0 or y == forest.columns - 1:
            return True
        return any(checker.is_visible_from_outside(tree, d) for d in Direction)

    return sum(visible(tree) for tree in _trees(forest))


def part_two(puzzle_input: str) -> Optional[int]:
    forest = UGrid.parse(puzzle_input)
    checker = VisibilityCheck(forest)
    return max((scenic_score(checker, tree) for tree in _trees(forest)), default=None)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve both parts for the input in the given directory (or the day's own)."""
    args = sys.argv[1:] if argv is None else list(argv)
    puzzle_input = read_input(Path(args[0]) if args else DIRECTORY)
    solve(1, part_one, puzzle_input)
    solve(2, part_two, puzzle_input)
    return 0


if __name__ == "__main__":
    sys.exit(main())