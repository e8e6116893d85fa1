"""Format solver results for the command line."""

from __future__ import annotations

from typing import Optional

import typer

from .puzzle import ASCII, Puzzle
from .solver import SearchStats


def pretty_board(puzzle: Puzzle) -> str:
    """Render the grid with separators between the 3x3 boxes."""
    lines = []
    for row in range(9):
        if row % 3 == 0 and row:
            lines.append("------+-------+------")
        chunks = []
        for col in range(9):
            if col % 3 == 0 and col:
                chunks.append("|")
            chunks.append(ASCII[puzzle.get(row, col)])
        lines.append(" ".join(chunks))
    return "\n".join(lines)


def format_stats(stats: SearchStats) -> str:
    return f"guesses={stats.guesses} dead_ends={stats.dead_ends} max_depth={stats.max_depth}"


def print_solution(
    puzzle: Puzzle,
    pretty: bool = False,
    stats: Optional[SearchStats] = None,
) -> None:
    typer.echo(pretty_board(puzzle) if pretty else puzzle.render())
    if stats is not None:
        typer.echo(f"# {format_stats(stats)}")


def print_failure(index: int, message: str) -> None:
    typer.echo(f"Puzzle {index}: {message}", err=True)
