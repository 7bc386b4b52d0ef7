"""Supply stacks: rearrange crates and read the top of each stack."""

from __future__ import annotations

import re
import sys
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from aocpuzzles.runner import read_input, solve

DIRECTORY = Path("2022") / "day_05"

_U8_MAX = 255
_NUMBER_LINE = re.compile(r"[ \t]*(?:[0-9]+[ \t]*)+\n\n")
_PROCEDURE = re.compile(
    r"move[ \t]+([0-9]+)[ \t]+from[ \t]+([0-9]+)[ \t]+to[ \t]+([0-9]+)"
)


@dataclass(frozen=True)
class Procedure:
    """Move ``moves`` crates from stack ``source`` to stack ``target`` (0-based)."""

    moves: int
    source: int
    target: int


def _crate(text: str, pos: int) -> Optional[tuple[str, int]]:
    if text.startswith("[", pos) and pos + 2 < len(text) and text[pos + 2] == "]":
        return text[pos + 1], pos + 3
    if text.startswith("   ", pos):
        return " ", pos + 3
    return None


def _crate_line(text: str, pos: int) -> Optional[tuple[list[str], int]]:
    first = _crate(text, pos)
    if first is None:
        return None
    item, pos = first
    items = [item]
    while text.startswith(" ", pos):
        following = _crate(text, pos + 1)
        if following is None:
            break
        item, pos = following
        items.append(item)
    return items, pos


def parse_crate_line(line: str) -> list[str]:
    """Return the crate letters of one drawing row, a space for each gap."""
    parsed = _crate_line(line, 0)
    if parsed is None or parsed[1] != len(line):
        raise ValueError(f"invalid crate line : {line!r}")
    return parsed[0]


def parse_stacks(text: str) -> tuple[list[list[str]], str]:
    """Parse the crate drawing; return stacks (top first) and the unparsed rest."""
    stacks: list[list[str]] = []
    pos = 0
    rows = 0
    while True:
        parsed = _crate_line(text, pos)
        if parsed is None:
            break
        row, end = parsed
        if not text.startswith("\n", end):
            break
        pos = end + 1
        rows += 1
        for index, name in enumerate(row):
            if index >= len(stacks):
                stacks.append([])
            if name.isalnum():
                stacks[index].append(name)
    if not rows:
        raise ValueError("invalid crate stack")
    return stacks, text[pos:]


def _u8(text: str) -> Optional[int]:
    value = int(text)
    return value if value <= _U8_MAX else None


def _procedure_at(text: str, pos: int) -> Optional[tuple[Procedure, int]]:
    match = _PROCEDURE.match(text, pos)
    if match is None:
        return None
    numbers = [_u8(group) for group in match.groups()]
    if any(number is None for number in numbers):
        return None
    moves, source, target = numbers
    if source == 0 or target == 0:
        raise ValueError(f"invalid stack number in : {match.group(0)!r}")
    return Procedure(moves, source - 1, target - 1), match.end()


def parse_procedures(text: str) -> list[Procedure]:
    """Parse newline-separated ``move N from A to B`` lines."""
    first = _procedure_at(text, 0)
    if first is None:
        raise ValueError("invalide procedure")
    procedure, pos = first
    procedures = [procedure]
    while text.startswith("\n", pos):
        following = _procedure_at(text, pos + 1)
        if following is None:
            break
        procedure, pos = following
        procedures.append(procedure)
    return procedures


def parse_input(text: str) -> tuple[list[list[str]], list[Procedure]]:
    """Split the puzzle into its crate stacks and rearrangement procedure."""
    stacks, rest = parse_stacks(text)
    numbers = _NUMBER_LINE.match(rest)
    if numbers is None or any(
        _u8(number) is None for number in re.findall(r"[0-9]+", numbers.group(0))
    ):
        raise ValueError("invalide number lines")
    return stacks, parse_procedures(rest[numbers.end():])


def _rearrange(puzzle_input: str, keep_order: bool) -> str:
    parsed_stacks, procedures = parse_input(puzzle_input)
    stacks = [deque(stack) for stack in parsed_stacks]
    for procedure in procedures:
        source = stacks[procedure.source]
        if procedure.moves > len(source):
            raise IndexError("not enough crates to move")
        moved = [source.popleft() for _ in range(procedure.moves)]
        stacks[procedure.target].extendleft(reversed(moved) if keep_order else moved)
    return "".join(stack[0] for stack in stacks)


def part_one(puzzle_input: str) -> Optional[str]:
    return _rearrange(puzzle_input, keep_order=False)


def part_two(puzzle_input: str) -> Optional[str]:
    return _rearrange(puzzle_input, keep_order=True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve both parts for the input in the given directory (or the day's own)."""
    args = sys.argv[1:] if argv is None else list(argv)
    puzzle_input = read_input(Path(args[0]) if args else DIRECTORY)
    solve(1, part_one, puzzle_input)
    solve(2, part_two, puzzle_input)
    return 0


if __name__ == "__main__":
    sys.exit(main())