"""Create a new day's directory from templates."""

from __future__ import annotations

import argparse
import shutil
import sys
from pathlib import Path
from typing import Optional, Sequence

from aocpuzzles.runner import LATEST_AOC_YEAR

PLACEHOLDER = "%%NAME%%"
TEMPLATES = Path(".templates")


def replace_module_name(path: Path | str, name: str) -> None:
    """Replace the name placeholder in ``path`` with ``name``."""
    path = Path(path)
    contents = path.read_text(encoding="utf-8")
    try:
        path.write_text(contents.replace(PLACEHOLDER, name), encoding="utf-8")
    except OSError:
        print(f"Failed to edit : {path}", file=sys.stderr)
        return
    print(f"Edited {path}")


def _holds_placeholder(path: Path) -> bool:
    try:
        return PLACEHOLDER in path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        return False


def scaffold(
    day: int,
    year: int = LATEST_AOC_YEAR,
    templates: Path | str = TEMPLATES,
    root: Path | str = Path("."),
) -> Path:
    """Copy the templates into ``<root>/<year>/day_<dd>`` and return that path."""
    templates = Path(templates)
    module_name = f"day_{year}_{day:02}"
    module_path = Path(root) / str(year) / f"day_{day:02}"

    if module_path.exists():
        raise FileExistsError(f"destination `{module_path}` already exists")

    src = module_path / "src"
    print(f'$ mkdir -p "{src}"')
    src.mkdir(parents=True)

    entries = [*sorted(templates.iterdir()), *sorted((templates / "src").iterdir())]
    for source in (entry for entry in entries if entry.is_file()):
        target = module_path / source.relative_to(templates)
        print(f"$ cp {source} {target}")
        shutil.copy(source, target)
        if _holds_placeholder(target):
            replace_module_name(target, module_name)

    print(f'Created workspace "{module_path}"')
    print("---")
    print(f"🎄 Type `python -m aocpuzzles.y{year}.day_{day:02}` to run your solution.")
    return module_path


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


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry point: ``scaffold DAY [-y YEAR]``."""
    parser = _Parser(prog="scaffold")
    parser.add_argument("day", type=_bounded(255))
    parser.add_argument("-y", "--year", type=_bounded(65535), default=None)
    try:
        args = parser.parse_args(argv)
    except _ArgumentError as err:
        print(f"Failed to process arguments:\n  {err}", file=sys.stderr)
        return 1
    year = LATEST_AOC_YEAR if args.year is None else args.year
    try:
        scaffold(args.day, year)
    except FileExistsError as err:
        print(err, file=sys.stderr)
        return 1
    return 0