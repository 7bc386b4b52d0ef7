"""Run every day's solution and report the total execution time."""

from __future__ import annotations

import subprocess
import sys
from typing import Optional, Sequence

from aocpuzzles.runner import (
    ANSI_BOLD,
    ANSI_ITALIC,
    ANSI_RESET,
    LATEST_AOC_YEAR,
    parse_exec_time,
)


def run_day(day: int) -> float:
    """Run one day of the latest year, print its output, return its time in ms."""
    padded = f"{day:02}"
    module = f"aocpuzzles.y{LATEST_AOC_YEAR}.day_{padded}"
    completed = subprocess.run(
        [sys.executable, "-m", module],
        capture_output=True,
        encoding="utf-8",
    )

    print("----------")
    print(f"{ANSI_BOLD}| Day {padded} |{ANSI_RESET}")
    print("----------")

    output = completed.stdout or ""
    if not output:
        print("Not solved.")
        return 0.0
    print(output.strip())
    return parse_exec_time(output)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run days 1 to 25 and print the summed execution time."""
    total = sum(run_day(day) for day in range(1, 26))
    print(f"{ANSI_BOLD}Total:{ANSI_RESET} {ANSI_ITALIC}{total:.2f}ms{ANSI_RESET}")
    return 0