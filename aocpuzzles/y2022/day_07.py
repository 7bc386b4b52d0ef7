"""No space left on device: size directories from a terminal session."""

from __future__ import annotations

import math
import re
import struct
import sys
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Optional, Sequence, Union

from aocpuzzles.runner import read_input, solve

DIRECTORY = Path("2022") / "day_07"

SMALL_DIRECTORY = 100_000
TOTAL_SPACE = 70_000_000
UPDATE_SPACE = 30_000_000

_USIZE_MAX = 2**64 - 1

_CD = "$ cd "
_LS = "$ ls\n"
_ALNUM = re.compile(r"[A-Za-z0-9]+")
_FILENAME = re.compile(r"[A-Za-z0-9._-]+")
_SPACE = re.compile(r"[ \t]+")
_FLOAT = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class ParseError(ValueError):
    """The terminal output could not be parsed."""


@dataclass(frozen=True)
class CdRoot:
    """``$ cd /``"""


@dataclass(frozen=True)
class CdOut:
    """``$ cd ..``"""


@dataclass(frozen=True)
class CdIn:
    """``$ cd <directory>``"""

    directory: str


@dataclass(frozen=True)
class Directory:
    name: str


@dataclass(frozen=True)
class File:
    name: str
    size: int


@dataclass(frozen=True)
class Ls:
    """``$ ls`` with the entries it listed."""

    contents: tuple[Union[Directory, File], ...] = ()


Command = Union[CdRoot, CdOut, CdIn, Ls]


def _size_from_text(text: str) -> int:
    value = float(text)
    try:
        value = struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        value = math.copysign(math.inf, value)
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return _USIZE_MAX
    return min(int(value), _USIZE_MAX)


def _command_cd(text: str, pos: int) -> Optional[tuple[Command, int]]:
    if not text.startswith(_CD, pos):
        return None
    pos += len(_CD)
    if text.startswith("/", pos):
        return CdRoot(), pos + 1
    if text.startswith("..", pos):
        return CdOut(), pos + 2
    match = _ALNUM.match(text, pos)
    if match is None:
        return None
    return CdIn(match.group()), match.end()


def _entry(text: str, pos: int) -> Optional[tuple[Union[Directory, File], int]]:
    if text.startswith("dir", pos):
        space = _SPACE.match(text, pos + 3)
        if space is not None:
            name = _FILENAME.match(text, space.end())
            if name is not None:
                return Directory(name.group()), name.end()
    size = _FLOAT.match(text, pos)
    if size is None:
        return None
    space = _SPACE.match(text, size.end())
    if space is None:
        return None
    name = _FILENAME.match(text, space.end())
    if name is None:
        return None
    return File(name.group(), _size_from_text(size.group())), name.end()


def _command_ls(text: str, pos: int) -> Optional[tuple[Command, int]]:
    if not text.startswith(_LS, pos):
        return None
    pos += len(_LS)
    contents = []
    first = _entry(text, pos)
    if first is not None:
        entry, pos = first
        contents.append(entry)
        while text.startswith("\n", pos):
            following = _entry(text, pos + 1)
            if following is None:
                break
            entry, pos = following
            contents.append(entry)
    return Ls(tuple(contents)), pos


def _command(text: str, pos: int) -> Optional[tuple[Command, int]]:
    return _command_cd(text, pos) or _command_ls(text, pos)


def parse_terminal_output(text: str) -> list[Command]:
    """Parse newline-separated ``cd`` and ``ls`` commands; trailing text is ignored."""
    first = _command(text, 0)
    if first is None:
        line = text.split("\n", 1)[0]
        raise ParseError(f"0: at line 1, in commands:\n{line}\n^")
    command, pos = first
    commands = [command]
    while text.startswith("\n", pos):
        following = _command(text, pos + 1)
        if following is None:
            break
        command, pos = following
        commands.append(command)
    return commands


def directory_sizes(commands: Sequence[Command]) -> dict[str, int]:
    """Total size of the files below each visited directory, keyed by path."""
    path = PurePosixPath("/")
    sizes: dict[str, int] = {}
    for command in commands:
        if isinstance(command, CdRoot):
            path = PurePosixPath("/")
        elif isinstance(command, CdOut):
            path = path.parent
        elif isinstance(command, CdIn):
            path = path / command.directory
        else:
            files_size = sum(
                entry.size for entry in command.contents if isinstance(entry, File)
            )
            for ancestor in (path, *path.parents):
                key = str(ancestor)
                sizes[key] = sizes.get(key, 0) + files_size
    return dict(sorted(sizes.items()))


def part_one(puzzle_input: str) -> Optional[int]:
    sizes = directory_sizes(parse_terminal_output(puzzle_input))
    return sum(size for size in sizes.values() if size < SMALL_DIRECTORY)


def part_two(puzzle_input: str) -> Optional[int]:
    sizes = directory_sizes(parse_terminal_output(puzzle_input))
    if "/" not in sizes:
        raise ValueError("no listing found for /")
    used_space = sizes["/"]
    if used_space > TOTAL_SPACE:
        raise ValueError("used space exceeds the disk size")
    free_space = TOTAL_SPACE - used_space
    if free_space > UPDATE_SPACE:
        raise ValueError("enough free space already")
    min_space_to_delete = UPDATE_SPACE - free_space
    return min(
        (size for size in sizes.values() if size >= min_space_to_delete), default=None
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve both parts for the input in the given directory (or the day's own)."""
    args = sys.argv[1:] if argv is None else list(argv)
    puzzle_input = read_input(Path(args[0]) if args else DIRECTORY)
    try:
        solve(1, part_one, puzzle_input)
        solve(2, part_two, puzzle_input)
    except ParseError as err:
        print(f"Problem parsing arguments: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())