"""A grid of single-digit values read from lines of text."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator

_SEPARATORS = re.compile(r"[\n ]")
_DIGITS = "0123456789"


@dataclass
class UGrid:
    """Digits stored line after line.

    ``rows`` is the number of lines and ``columns`` the length of a line.
    Positions are ``(x, y)``: ``x`` along a line, ``y`` the line number.
    """

    rows: int
    columns: int
    values: list[int] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> UGrid:
        """Build a grid from lines (or space-separated words) of digits."""
        words = [word for word in _SEPARATORS.split(text) if word]
        if not words:
            raise ValueError("empty grid")
        values = [int(char) for word in words for char in word if char in _DIGITS]
        return cls(rows=len(words), columns=len(words[0]), values=values)

    def sub_grid_iter(self, row_range: range, col_range: range) -> Iterator[int]:
        """Yield the values whose index falls in both ranges."""
        for index, value in enumerate(self.values):
            if index % self.rows in row_range and index // self.columns in col_range:
                yield value

    def index_to_coord(self, index: int) -> tuple[int, int]:
        """Return the ``(x, y)`` position of a flat index."""
        last = len(self.values) - 1
        if index < 0 or index > last:
            raise IndexError(
                f"index {index} out of grid range {self.rows}x{self.columns} "
                f"(max index {last})"
            )
        return index % self.columns, index // self.columns

    def coord(self) -> list[tuple[tuple[int, int], int]]:
        """Every value paired with its position."""
        return [(self.index_to_coord(index), value) for index, value in enumerate(self.values)]

    def iter_row(self, index: int) -> Iterator[int]:
        """Iterate over the values of line ``index``."""
        start = index * self.columns
        end = start + self.columns
        if index < 0 or end > len(self.values):
            raise IndexError(f"row {index} out of grid range")
        return iter(self.values[start:end])

    def iter_rows(self) -> Iterator[Iterator[int]]:
        for index in range(self.rows):
            yield self.iter_row(index)

    def iter_col(self, index: int) -> Iterator[int]:
        """Iterate over the values at position ``index`` of every line."""
        if index < 0 or index > len(self.values):
            raise IndexError(f"column {index} out of grid range")
        return iter(self.values[index::self.columns])

    def iter_columns(self) -> Iterator[Iterator[int]]:
        for index in range(self.columns):
            yield self.iter_col(index)

    def edge(self) -> list[int]:
        """Values around the border: first line, side pairs, last line."""
        last_column_index = self.columns - 1

        def middle(column: Iterator[int]) -> list[int]:
            return [
                value
                for position, value in enumerate(column)
                if position not in (0, last_column_index)
            ]

        first_col = middle(self.iter_col(0))
        last_col = middle(self.iter_col(last_column_index))
        sides = [value for pair in zip(first_col, last_col) for value in pair]
        return [*self.iter_row(0), *sides, *self.iter_row(self.rows - 1)]

    def coord_to_index(self, x: int, y: int) -> int:
        """Return the flat index of position ``(x, y)``."""
        return y * self.columns + x

    def __getitem__(self, position: tuple[int, int]) -> int:
        x, y = position
        index = self.coord_to_index(x, y)
        if index < 0 or index >= len(self.values):
            raise IndexError(f"position {position} out of grid range")
        return self.values[index]