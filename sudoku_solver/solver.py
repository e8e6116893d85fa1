"""Backtracking search on top of constraint propagation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from .errors import Unsolvable
from .propagator import Complete, Contradiction, scan
from .puzzle import Puzzle, Source

log = logging.getLogger(__name__)


@dataclass
class SearchStats:
    guesses: int = 0
    dead_ends: int = 0
    max_depth: int = 0


@dataclass
class Solved:
    puzzle: Puzzle
    stats: SearchStats


@dataclass
class NoSolution:
    stats: SearchStats


SolveResult = Union[Solved, NoSolution]


def _search(puzzle: Puzzle, depth: int, stats: SearchStats) -> SolveResult:
    puzzle = puzzle.clone()
    stats.max_depth = max(stats.max_depth, depth)

    outcome = scan(puzzle)
    if isinstance(outcome, Complete):
        return Solved(puzzle, stats)
    if isinstance(outcome, Contradiction):
        stats.dead_ends += 1
        return NoSolution(stats)

    row, col = outcome.row, outcome.col
    for guess in outcome.candidates:
        log.debug("Depth %d: trying %d at (%d, %d)", depth, guess, row, col)
        stats.guesses += 1
        puzzle.set(row, col, guess)
        result = _search(puzzle, depth + 1, stats)
        if isinstance(result, Solved):
            return result

    return NoSolution(stats)


def solve(puzzle: Puzzle) -> SolveResult:
    """Solve ``puzzle`` without modifying it.

    Returns :class:`Solved` holding a new, completely filled grid, or
    :class:`NoSolution` once every branch has been exhausted. Candidates are
    tried in ascending order, so the same input always gives the same answer.
    """
    stats = SearchStats()
    result = _search(puzzle, 0, stats)
    if isinstance(result, Solved):
        log.info(
            "Solved after %d guesses (%d dead ends, depth %d)",
            stats.guesses,
            stats.dead_ends,
            stats.max_depth,
        )
    else:
        log.info("No solution after %d guesses", stats.guesses)
    return result


def solve_puzzle(source: Union[Source, Puzzle]) -> Puzzle:
    """Parse ``source`` if needed, solve it and return the filled grid.

    Raises :class:`InvalidPuzzle` for malformed input and :class:`Unsolvable`
    when the puzzle has no solution.
    """
    puzzle = source if isinstance(source, Puzzle) else Puzzle(source)
    result = solve(puzzle)
    if isinstance(result, NoSolution):
        raise Unsolvable("Sudoku puzzle cannot be solved")
    return result.puzzle
