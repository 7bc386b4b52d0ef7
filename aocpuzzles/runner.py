"""Reading puzzle inputs, running solvers and timing them."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Callable, Optional

LATEST_AOC_YEAR = 2023

ANSI_ITALIC = "\x1b[3m"
ANSI_BOLD = "\x1b[1m"
ANSI_RESET = "\x1b[0m"


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as err:
        raise FileNotFoundError(f"Could not open input file : {path}") from err


def read_input(directory: Optional[Path | str] = None) -> str:
    """Return the contents of ``input.txt`` in ``directory`` (default: cwd)."""
    base = Path.cwd() if directory is None else Path(directory)
    return _read(base / "input.txt")


def read_example(directory: Optional[Path | str] = None, suffix: str = "") -> str:
    """Return ``example.txt`` or ``example_<suffix>.txt`` from ``directory``."""
    base = Path.cwd() if directory is None else Path(directory)
    name = "example.txt" if not suffix else f"example_{suffix}.txt"
    return _read(base / name)


def read_file(folder: str, day: int) -> str:
    """Return ``src/<folder>/<day:02>.txt`` relative to the working directory."""
    path = Path.cwd() / "src" / folder / f"{day:02}.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as err:
        raise FileNotFoundError("could not open input file") from err


def _parse_time(value: str, postfix: str) -> float:
    return float(value.split(postfix)[0])


def parse_exec_time(output: str) -> float:
    """Sum, in milliseconds, every ``(elapsed: ...)`` timing found in ``output``."""
    total = 0.0
    for line in output.splitlines():
        if "elapsed:" not in line:
            continue
        timing = line.split("(elapsed: ")[-1]
        # ``in`` rather than ``endswith``: the line may end with ANSI escapes.
        if "ns)" in timing:
            continue
        if "µs)" in timing:
            total += _parse_time(timing, "µs") / 1000
        elif "ms)" in timing:
            total += _parse_time(timing, "ms")
        elif "s)" in timing:
            total += _parse_time(timing, "s") * 1000
    return total


def _format_elapsed(nanos: int) -> str:
    if nanos >= 1_000_000_000:
        return f"{nanos / 1_000_000_000:.2f}s"
    if nanos >= 1_000_000:
        return f"{nanos / 1_000_000:.2f}ms"
    if nanos >= 1_000:
        return f"{nanos / 1_000:.2f}µs"
    return f"{nanos:.2f}ns"


def solve(part: int, solver: Callable[[str], Any], puzzle_input: str) -> Any:
    """Run ``solver`` on the input, print its answer with timing, return the answer."""
    print(f"🎄 {ANSI_BOLD}Part {part}{ANSI_RESET} 🎄")
    start = time.perf_counter_ns()
    result = solver(puzzle_input)
    elapsed = time.perf_counter_ns() - start
    if result is None:
        print("not solved.")
    else:
        print(f"{result} {ANSI_ITALIC}(elapsed: {_format_elapsed(elapsed)}){ANSI_RESET}")
    return result