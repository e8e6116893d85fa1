"""Sudoku solver: constraint propagation plus MRV-guided backtracking."""

from .errors import InvalidPuzzle, SudokuError, Unsolvable
from .propagator import Complete, Contradiction, Unresolved, scan
from .puzzle import Puzzle
from .solver import NoSolution, SearchStats, Solved, solve, solve_puzzle

__all__ = [
    "Complete",
    "Contradiction",
    "InvalidPuzzle",
    "NoSolution",
    "Puzzle",
    "SearchStats",
    "Solved",
    "SudokuError",
    "Unresolved",
    "Unsolvable",
    "scan",
    "solve",
    "solve_puzzle",
]
