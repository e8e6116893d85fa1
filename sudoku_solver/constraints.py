"""Row, column and box queries over the 81 cells of a grid."""

from __future__ import annotations

from typing import List, Sequence, Set

ALL_DIGITS = frozenset(range(1, 10))

# Box number (0-8, left-to-right, top-to-bottom) of every linear cell index.
BOX_OF_INDEX = tuple((index // 27) * 3 + (index % 9) // 3 for index in range(81))

# Linear index of the upper-left cell of each box.
BOX_TO_INDEX = (0, 3, 6, 27, 30, 33, 54, 57, 60)

BOX_OFFSETS = (0, 1, 2, 9, 10, 11, 18, 19, 20)


def _row_values(cells: Sequence[int], row: int) -> List[int]:
    start = row * 9
    return [value for value in cells[start : start + 9] if value]


def _column_values(cells: Sequence[int], col: int) -> List[int]:
    return [cells[index] for index in range(col, 81, 9) if cells[index]]


def _box_values(cells: Sequence[int], box: int) -> List[int]:
    start = BOX_TO_INDEX[box]
    return [cells[start + offset] for offset in BOX_OFFSETS if cells[start + offset]]


def row_digits(cells: Sequence[int], row: int) -> Set[int]:
    return set(_row_values(cells, row))


def column_digits(cells: Sequence[int], col: int) -> Set[int]:
    return set(_column_values(cells, col))


def box_digits(cells: Sequence[int], box: int) -> Set[int]:
    return set(_box_values(cells, box))


def possible(cells: Sequence[int], row: int, col: int, box: int) -> Set[int]:
    """Digits that can still go in the cell at ``(row, col)``.

    An empty set means the cell has no legal value in the current state.
    """
    used = row_digits(cells, row) | column_digits(cells, col) | box_digits(cells, box)
    return set(ALL_DIGITS - used)


def has_duplicates(cells: Sequence[int]) -> bool:
    """True when a row, column or box holds the same nonzero digit twice."""
    for walker in (_row_values, _column_values, _box_values):
        for region in range(9):
            values = walker(cells, region)
            if len(values) != len(set(values)):
                return True
    return False
