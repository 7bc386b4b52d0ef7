"""Monkey in the middle: track items thrown between monkeys."""

from __future__ import annotations

import math
import re
import struct
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Sequence

from aocpuzzles.runner import read_input, solve

DIRECTORY = Path("2022") / "day_11"

_U64_MAX = 2**64 - 1
_SPACE = " \t"
_MULTISPACE = " \t\r\n"
_DIGITS = re.compile(r"[0-9]+")
_FLOAT = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class ParseError(ValueError):
    """The monkey notes could not be parsed."""


class Operator(Enum):
    ADD = "+"
    MULTIPLY = "*"


@dataclass(frozen=True)
class Operation:
    """``new = left <operator> right``; an operand of None stands for ``old``."""

    operator: Operator
    left: Optional[int]
    right: Optional[int]

    def calc(self, old: int) -> int:
        left = old if self.left is None else self.left
        right = old if self.right is None else self.right
        result = left + right if self.operator is Operator.ADD else left * right
        if result > _U64_MAX:
            raise OverflowError(f"worry level overflow: {result}")
        return result


@dataclass(frozen=True)
class Test:
    """Throw to ``if_true`` when the worry is divisible by ``divisor``, else ``if_false``."""

    __test__ = False

    divisor: int
    if_true: int
    if_false: int

    def throw_index(self, worry: int) -> int:
        return self.if_true if worry % self.divisor == 0 else self.if_false


@dataclass
class Monkey:
    id: int
    items: list[int]
    operation: Operation
    test: Test


# --- parsing -----------------------------------------------------------------

_Result = Optional[tuple[object, int]]
_Parser = Callable[[str, int], _Result]


def _tag(text: str, pos: int, tag: str) -> Optional[int]:
    return pos + len(tag) if text.startswith(tag, pos) else None


def _span(text: str, pos: int, chars: str, minimum: int) -> Optional[int]:
    end = pos
    while end < len(text) and text[end] in chars:
        end += 1
    return end if end - pos >= minimum else None


def _u64(digits: str) -> int:
    value = int(digits)
    if value > _U64_MAX:
        raise ParseError(f"number too large : {digits}")
    return value


def _digits_at(text: str, pos: int) -> Optional[tuple[int, int]]:
    match = _DIGITS.match(text, pos)
    if match is None:
        return None
    return _u64(match.group()), match.end()


def _float_to_id(text: str) -> int:
    value = float(text)
    try:
        value = struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        value = math.copysign(math.inf, value)
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return _U64_MAX
    return min(int(value), _U64_MAX)


def _permutation(text: str, pos: int, parsers: Sequence[_Parser]):
    results: list[object] = [None] * len(parsers)
    pending = set(range(len(parsers)))
    while pending:
        for index, parser in enumerate(parsers):
            if index not in pending:
                continue
            parsed = parser(text, pos)
            if parsed is not None:
                results[index], pos = parsed
                pending.discard(index)
                break
        else:
            return None
    return results, pos


def _after_multispace(parser: _Parser) -> _Parser:
    def parse(text: str, pos: int) -> _Result:
        start = _span(text, pos, _MULTISPACE, 1)
        return None if start is None else parser(text, start)

    return parse


def _monkey_id_at(text: str, pos: int) -> _Result:
    p = _tag(text, pos, "Monkey")
    if p is None:
        return None
    p = _span(text, p, _SPACE, 1)
    if p is None:
        return None
    number = _FLOAT.match(text, p)
    if number is None:
        return None
    p = _tag(text, number.end(), ":")
    if p is None:
        return None
    return _float_to_id(number.group()), p


def _starting_items_at(text: str, pos: int) -> _Result:
    p = _tag(text, pos, "Starting items:")
    if p is None:
        return None
    p = _span(text, p, _SPACE, 0)
    items: list[int] = []
    first = _digits_at(text, p)
    if first is not None:
        item, p = first
        items.append(item)
        while text.startswith(", ", p):
            following = _digits_at(text, p + 2)
            if following is None:
                break
            item, p = following
            items.append(item)
    return items, p


def _worry_level_at(text: str, pos: int) -> _Result:
    if text.startswith("old", pos):
        return None, pos + 3
    return _digits_at(text, pos)


def _operation_at(text: str, pos: int) -> _Result:
    p = _tag(text, pos, "Operation: new = ")
    if p is None:
        return None
    left = _worry_level_at(text, p)
    if left is None:
        return None
    p = _span(text, left[1], _SPACE, 1)
    if p is None or p >= len(text) or text[p] not in "+*":
        return None
    operator = Operator(text[p])
    p = _span(text, p + 1, _SPACE, 1)
    if p is None:
        return None
    right = _worry_level_at(text, p)
    if right is None:
        return None
    return Operation(operator, left[0], right[0]), right[1]


def _prefixed_number(prefix: str) -> _Parser:
    def parse(text: str, pos: int) -> _Result:
        p = _tag(text, pos, prefix)
        return None if p is None else _digits_at(text, p)

    return parse


def _test_at(text: str, pos: int) -> _Result:
    parsed = _permutation(
        text,
        pos,
        (
            _prefixed_number("Test: divisible by "),
            _after_multispace(_prefixed_number("If true: throw to monkey ")),
            _after_multispace(_prefixed_number("If false: throw to monkey ")),
        ),
    )
    if parsed is None:
        return None
    (divisor, if_true, if_false), p = parsed
    return Test(divisor, if_true, if_false), p


def _monkey_id_line_at(text: str, pos: int) -> _Result:
    parsed = _monkey_id_at(text, pos)
    if parsed is None:
        return None
    end = _tag(text, parsed[1], "\n")
    return None if end is None else (parsed[0], end)


def _monkey_at(text: str, pos: int) -> _Result:
    parsed = _permutation(
        text,
        pos,
        (
            _monkey_id_line_at,
            _after_multispace(_starting_items_at),
            _after_multispace(_operation_at),
            _after_multispace(_test_at),
        ),
    )
    if parsed is None:
        return None
    (monkey_id, items, operation, test), p = parsed
    return Monkey(monkey_id, items, operation, test), p


def _notes_at(text: str, pos: int) -> _Result:
    first = _monkey_at(text, pos)
    if first is None:
        return None
    monkey, p = first
    monkeys = [monkey]
    while text.startswith("\n\n", p):
        following = _monkey_at(text, p + 2)
        if following is None:
            break
        monkey, p = following
        monkeys.append(monkey)
    return monkeys, p


def _parse_whole(parser: _Parser, text: str, what: str):
    parsed = parser(text, 0)
    if parsed is None or parsed[1] != len(text):
        raise ParseError(f"invalid {what} : {text!r}")
    return parsed[0]


def parse_notes(text: str) -> list[Monkey]:
    """Parse blank-line-separated monkey notes; trailing text is ignored."""
    parsed = _notes_at(text, 0)
    if parsed is None:
        raise ParseError(f"invalid notes : {text[:40]!r}")
    return parsed[0]


def parse_monkey(text: str) -> Monkey:
    return _parse_whole(_monkey_at, text, "monkey")


def parse_monkey_id(text: str) -> int:
    return _parse_whole(_monkey_id_at, text, "monkey id")


def parse_starting_items(text: str) -> list[int]:
    return _parse_whole(_starting_items_at, text, "starting items")


def parse_operation(text: str) -> Operation:
    return _parse_whole(_operation_at, text, "operation")


def parse_worry_level(text: str) -> Optional[int]:
    """Return the level, or None for ``old``."""
    return _parse_whole(_worry_level_at, text, "worry level")


def parse_test(text: str) -> Test:
    return _parse_whole(_test_at, text, "test")


# --- simulation --------------------------------------------------------------


class Round:
    """Plays rounds of keep-away over a copy of the given monkeys."""

    def __init__(self, monkeys: Sequence[Monkey], human_worry: Callable[[int], int]) -> None:
        self.human_worry = human_worry
        self.monkey_by_id = {
            monkey.id: Monkey(monkey.id, list(monkey.items), monkey.operation, monkey.test)
            for monkey in monkeys
        }
        self.inspection_counts = {monkey.id: 0 for monkey in monkeys}

    def play(self) -> None:
        """Let every monkey, by id from 0, inspect and throw all its items."""
        for monkey_id in range(len(self.monkey_by_id)):
            monkey = self.monkey_by_id.get(monkey_id)
            if monkey is None:
                raise KeyError(f"Monkey {monkey_id} not found")
            items, monkey.items = monkey.items, []
            throws = []
            for item in items:
                worry = self.human_worry(monkey.operation.calc(item))
                throws.append((monkey.test.throw_index(worry), worry))
            self.inspection_counts[monkey.id] += len(throws)
            for target, worry in throws:
                receiver = self.monkey_by_id.get(target)
                if receiver is not None:
                    receiver.items.append(worry)

    def monkey_business(self) -> int:
        """Product of the two highest inspection counts."""
        return math.prod(sorted(self.inspection_counts.values(), reverse=True)[:2])


def _play(monkeys: Sequence[Monkey], human_worry: Callable[[int], int], rounds: int) -> int:
    game = Round(monkeys, human_worry)
    for _ in range(rounds):
        game.play()
    return game.monkey_business()


def part_one(puzzle_input: str) -> Optional[int]:
    return _play(parse_notes(puzzle_input), lambda worry: worry // 3, 20)


def part_two(puzzle_input: str) -> Optional[int]:
    monkeys = parse_notes(puzzle_input)
    divisor = math.prod(monkey.test.divisor for monkey in monkeys)
    return _play(monkeys, lambda worry: worry % divisor, 10_000)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve both parts for the input in the given directory (or the day's own)."""
    args = sys.argv[1:] if argv is None else list(argv)
    puzzle_input = read_input(Path(args[0]) if args else DIRECTORY)
    solve(1, part_one, puzzle_input)
    solve(2, part_two, puzzle_input)
    return 0


if __name__ == "__main__":
    sys.exit(main())