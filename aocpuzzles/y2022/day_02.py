"""Rock paper scissors: score a strategy guide."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from aocpuzzles.runner import read_input, solve

DIRECTORY = Path("2022") / "day_02"


class HandShape(Enum):
    """A shape played in a round; its value is the shape's score."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    def beats(self) -> HandShape:
        """Return the shape this one defeats."""
        return _BEATS[self]


_BEATS = {
    HandShape.ROCK: HandShape.SCISSORS,
    HandShape.PAPER: HandShape.ROCK,
    HandShape.SCISSORS: HandShape.PAPER,
}

_HAND_LETTERS = {
    "A": HandShape.ROCK,
    "X": HandShape.ROCK,
    "B": HandShape.PAPER,
    "Y": HandShape.PAPER,
    "C": HandShape.SCISSORS,
    "Z": HandShape.SCISSORS,
}


def parse_hand_shape(letter: str) -> HandShape:
    try:
        return _HAND_LETTERS[letter]
    except KeyError:
        raise ValueError(f"invalid hand shape : {letter}") from None


class Strategy(Enum):
    """How the guide asks a round to be played."""

    LOST = "lost"
    DRAW = "draw"
    WON = "won"

    def winning_hand(self, opponent: HandShape) -> HandShape:
        """Return the shape to play against ``opponent`` for this strategy."""
        if self is Strategy.DRAW:
            return opponent
        if self is Strategy.LOST:
            return opponent.beats().beats()
        return opponent.beats()


_STRATEGY_LETTERS = {"X": Strategy.WON, "Y": Strategy.DRAW, "Z": Strategy.LOST}


def parse_strategy(letter: str) -> Strategy:
    try:
        return _STRATEGY_LETTERS[letter]
    except KeyError:
        raise ValueError(f"invalid strategy : {letter}") from None


@dataclass(frozen=True)
class Round:
    opponent: HandShape
    player: HandShape

    def player_score(self) -> int:
        """Shape score plus 0 for a loss, 3 for a draw and 6 for a win."""
        if self.opponent.beats() is self.player:
            battle = 0
        elif self.player.beats() is self.opponent:
            battle = 6
        else:
            battle = 3
        return self.player.value + battle


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _split_letters(line: str) -> tuple[str, str]:
    first, sep, second = line.partition(" ")
    if not sep:
        raise ValueError(f"Could not split letters in line: {line!r}")
    return first, second


def part_one(puzzle_input: str) -> Optional[int]:
    total = 0
    for line in _lines(puzzle_input):
        opponent, player = _split_letters(line)
        total += Round(parse_hand_shape(opponent), parse_hand_shape(player)).player_score()
    return total


def part_two(puzzle_input: str) -> Optional[int]:
    total = 0
    for line in _lines(puzzle_input):
        opponent_letter, strategy_letter = _split_letters(line)
        opponent = parse_hand_shape(opponent_letter)
        player = parse_strategy(strategy_letter).winning_hand(opponent)
        total += Round(opponent, player).player_score()
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