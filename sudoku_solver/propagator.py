"""Constraint propagation: fill forced cells until nothing changes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .puzzle import Puzzle

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Complete:
    """Every cell of the grid is filled."""


@dataclass(frozen=True)
class Unresolved:
    """Propagation stalled; branch on this cell next."""

    row: int
    col: int
    candidates: Tuple[int, ...]


@dataclass(frozen=True)
class Contradiction:
    """The cell at ``(row, col)`` has no legal value left."""

    row: int
    col: int


ScanResult = Union[Complete, Unresolved, Contradiction]


def scan(puzzle: Puzzle) -> ScanResult:
    """Fill every cell with a single candidate, in place, up to a fixed point.

    While a pass has not yet written a cell, the first cell with the fewest
    candidates is remembered; the one remembered by the last pass is returned
    when the grid is left incomplete.
    """
    passes = 0
    changed = True
    best: Optional[Unresolved] = None

    while changed:
        changed = False
        passes += 1
        best = None
        smallest = 10
        filled = 0

        for row, col, box in puzzle.each_unknown():
            candidates = puzzle.possible(row, col, box)
            if not candidates:
                log.debug("Pass %d: no candidates left for (%d, %d)", passes, row, col)
                return Contradiction(row, col)
            if len(candidates) == 1:
                (value,) = candidates
                puzzle.set(row, col, value)
                changed = True
                filled += 1
            elif not changed and len(candidates) < smallest:
                smallest = len(candidates)
                best = Unresolved(row, col, tuple(sorted(candidates)))

        log.debug("Pass %d: filled %d cells", passes, filled)

    if best is None:
        return Complete()
    return best
