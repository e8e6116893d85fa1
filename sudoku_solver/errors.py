"""Exceptions raised by the Sudoku solver."""


class SudokuError(Exception):
    """Base class for every error raised by this package."""


class InvalidPuzzle(SudokuError, ValueError):
    """The puzzle text or a cell value is malformed."""


class Unsolvable(SudokuError):
    """No assignment of digits satisfies the puzzle."""
