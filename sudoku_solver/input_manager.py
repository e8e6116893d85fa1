"""Split puzzle files into the text of individual puzzles."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Iterable, List, Union

PuzzleLines = List[str]

_WHITESPACE = re.compile(r"\s")


def _significant(line: str) -> int:
    return len(_WHITESPACE.sub("", line))


def split_puzzles(lines: Iterable[str]) -> List[PuzzleLines]:
    """Group lines into puzzles.

    Blank lines separate puzzles and ``#`` lines are comments. A block whose
    lines all hold 81 significant characters is read as one puzzle per line.
    """
    blocks: List[PuzzleLines] = []
    current: PuzzleLines = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line.lstrip().startswith("#"):
            continue
        if not line.strip():
            if current:
                blocks.append(current)
                current = []
            continue
        current.append(line)
    if current:
        blocks.append(current)

    puzzles: List[PuzzleLines] = []
    for block in blocks:
        if len(block) > 1 and all(_significant(line) == 81 for line in block):
            puzzles.extend([line] for line in block)
        else:
            puzzles.append(block)
    return puzzles


def read_puzzles(path: Union[str, Path]) -> List[PuzzleLines]:
    """Read puzzles from ``path``; ``-`` reads standard input."""
    if str(path) == "-":
        return split_puzzles(sys.stdin.read().splitlines())
    with open(path, "r", encoding="utf-8") as handle:
        return split_puzzles(handle.read().splitlines())
