"""Driving the external ``aoc`` command to read and download puzzles."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from typing import Optional, Sequence

from aocpuzzles.runner import LATEST_AOC_YEAR


class AocCliError(Exception):
    """Base error for failures around the ``aoc`` command."""

    message = "aoc-cli failed."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class CommandNotFound(AocCliError):
    message = "aoc-cli is not present in environment."


class CommandNotCallable(AocCliError):
    message = "aoc-cli could not be called."


class BadExitStatus(AocCliError):
    message = "aoc-cli exited with a non-zero status."

    def __init__(self, output: subprocess.CompletedProcess) -> None:
        super().__init__()
        self.output = output


class FileSystemError(AocCliError):
    message = "could not write output files to file system."


def check() -> None:
    """Raise :class:`CommandNotFound` unless ``aoc`` can be run."""
    try:
        subprocess.run(["aoc", "-V"], capture_output=True)
    except OSError as err:
        raise CommandNotFound() from err


def input_path(year: int, day: int) -> str:
    return f"{year}/day_{day:02}/input.txt"


def puzzle_path(year: int, day: int) -> str:
    return f"{year}/day_{day:02}/README.md"


def build_args(command: str, args: Sequence[str], day: int, year: int) -> list[str]:
    """Return the ``aoc`` argument list for ``command``."""
    return [*args, "--year", str(year), "--day", str(day), command]


def _call_aoc_cli(args: Sequence[str]) -> subprocess.CompletedProcess:
    if __debug__:
        print(f"Calling >aoc with: {' '.join(args)}")
    try:
        return subprocess.run(["aoc", *args])
    except OSError as err:
        raise CommandNotCallable() from err


def read(day: int, year: int) -> subprocess.CompletedProcess:
    """Show the puzzle description for a day."""
    return _call_aoc_cli(build_args("read", [], day, year))


def download(day: int, year: int) -> subprocess.CompletedProcess:
    """Download input and description for a day into the repository tree."""
    input_file = input_path(year, day)
    puzzle_file = puzzle_path(year, day)
    try:
        os.makedirs(os.path.join("src", "puzzles"), exist_ok=True)
    except OSError as err:
        raise FileSystemError() from err

    args = build_args(
        "download",
        ["--overwrite", "--input-file", input_file, "--puzzle-file", puzzle_file],
        day,
        year,
    )
    output = _call_aoc_cli(args)
    if output.returncode != 0:
        raise BadExitStatus(output)
    print("---")
    print(f'🎄 Successfully wrote input to "{input_file}".')
    print(f'🎄 Successfully wrote puzzle to "{puzzle_file}".')
    return output


class _ArgumentError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise _ArgumentError(message)


def _bounded(limit: int):
    def convert(text: str) -> int:
        value = int(text)
        if not 0 <= value <= limit:
            raise ValueError(text)
        return value

    convert.__name__ = "integer"
    return convert


def _parse_args(prog: str, argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = _Parser(prog=prog)
    parser.add_argument("day", type=_bounded(255))
    parser.add_argument("-y", "--year", type=_bounded(65535), default=None)
    return parser.parse_args(argv)


def _run(prog: str, action, argv: Optional[Sequence[str]]) -> int:
    try:
        args = _parse_args(prog, argv)
    except _ArgumentError as err:
        print(f"Failed to process arguments: {err}", file=sys.stderr)
        return 1
    try:
        check()
    except AocCliError:
        print(
            'command "aoc" not found or not callable. '
            'Try running "cargo install aoc-cli" to install it.',
            file=sys.stderr,
        )
        return 1
    year = LATEST_AOC_YEAR if args.year is None else args.year
    try:
        output = action(args.day, year)
    except AocCliError as err:
        print(f"failed to spawn aoc-cli: {err}", file=sys.stderr)
        return 1
    return 0 if output.returncode == 0 else 1


def download_main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry point for downloading a day."""
    return _run("download", download, argv)


def read_main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry point for reading a day's puzzle."""
    return _run("read", read, argv)