"""The 9x9 grid: parsing, cell access, cloning and rendering."""

from __future__ import annotations

import re
from typing import Dict, Iterable, Iterator, List, Set, Tuple, Union

from . import constraints
from .constraints import BOX_OF_INDEX
from .errors import InvalidPuzzle

# Position in this string is the cell value it stands for.
ASCII = ".123456789"

_WHITESPACE = re.compile(r"\s")
_ILLEGAL = re.compile(r"[^1-9.]")

Source = Union[str, Iterable[str]]


def _index(row: int, col: int) -> int:
    if not (0 <= row <= 8 and 0 <= col <= 8):
        raise IndexError(f"Cell ({row}, {col}) is outside the 9x9 grid")
    return row * 9 + col


class Puzzle:
    """A Sudoku grid stored as 81 integers, ``0`` meaning unknown."""

    def __init__(self, source: Source) -> None:
        text = source if isinstance(source, str) else "".join(source)
        text = _WHITESPACE.sub("", text)

        if len(text) != 81:
            raise InvalidPuzzle(f"Grid is the wrong size: expected 81 cells, got {len(text)}")

        illegal = _ILLEGAL.search(text)
        if illegal:
            raise InvalidPuzzle(
                f"Illegal character {illegal.group()!r} in puzzle at position {illegal.start()}"
            )

        self._grid: List[int] = [ASCII.index(ch) for ch in text]

        if self.has_duplicates():
            raise InvalidPuzzle("Initial puzzle has duplicates")

    @property
    def cells(self) -> Tuple[int, ...]:
        return tuple(self._grid)

    def get(self, row: int, col: int) -> int:
        return self._grid[_index(row, col)]

    def set(self, row: int, col: int, value: int) -> None:
        """Write ``value`` at ``(row, col)``.

        Only the range is checked; callers are expected to write members of
        the cell's candidate set so that no duplicate is created.
        """
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 9:
            raise InvalidPuzzle(f"Illegal cell value {value!r}")
        self._grid[_index(row, col)] = value

    def clone(self) -> "Puzzle":
        copy = Puzzle.__new__(Puzzle)
        copy._grid = list(self._grid)
        return copy

    def render(self) -> str:
        return "\n".join(
            "".join(ASCII[value] for value in self._grid[row * 9 : row * 9 + 9])
            for row in range(9)
        )

    def each_unknown(self) -> Iterator[Tuple[int, int, int]]:
        """Yield ``(row, col, box)`` for every unknown cell in row-major order."""
        for row in range(9):
            for col in range(9):
                index = row * 9 + col
                if self._grid[index] != 0:
                    continue
                yield row, col, BOX_OF_INDEX[index]

    def row_digits(self, row: int) -> Set[int]:
        return constraints.row_digits(self._grid, row)

    def column_digits(self, col: int) -> Set[int]:
        return constraints.column_digits(self._grid, col)

    def box_digits(self, box: int) -> Set[int]:
        return constraints.box_digits(self._grid, box)

    def possible(self, row: int, col: int, box: int) -> Set[int]:
        return constraints.possible(self._grid, row, col, box)

    def has_duplicates(self) -> bool:
        return constraints.has_duplicates(self._grid)

    def unknown_count(self) -> int:
        return self._grid.count(0)

    def is_complete(self) -> bool:
        return 0 not in self._grid

    def givens(self) -> Dict[Tuple[int, int], int]:
        return {divmod(index, 9): value for index, value in enumerate(self._grid) if value}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Puzzle):
            return NotImplemented
        return self._grid == other._grid

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        flat = "".join(ASCII[value] for value in self._grid)
        return f"Puzzle({flat!r})"
