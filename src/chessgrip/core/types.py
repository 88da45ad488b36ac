"""Coordinate type and board geometry helpers.

Coordinates are ``(file, rank)`` pairs, both 0–7:
    a1=(0, 0), b1=(1, 0), ..., h1=(7, 0)
    ...
    a8=(0, 7), ..., h8=(7, 7)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

BOARD_SIZE = 8


class Coordinate(NamedTuple):
    """A board cell addressed by file (a–h → 0–7) and rank (1–8 → 0–7)."""

    file: int
    rank: int

    @property
    def name(self) -> str:
        """Human-readable name, e.g. (4, 3) → 'e4'."""
        return chr(ord("a") + self.file) + str(self.rank + 1)

    @classmethod
    def parse(cls, name: str) -> Coordinate:
        """Parse a cell name, e.g. 'e4' → (4, 3)."""
        if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(ord(name[0]) - ord("a"), int(name[1]) - 1)

    def offset(self, d_file: int, d_rank: int) -> Coordinate:
        return Coordinate(self.file + d_file, self.rank + d_rank)

    def __str__(self) -> str:
        return self.name


def is_on_board(file: int, rank: int) -> bool:
    """Check whether a file/rank pair addresses one of the 64 cells."""
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


def all_coordinates() -> Iterator[Coordinate]:
    """Every cell, a1 first, rank by rank."""
    for rank in range(BOARD_SIZE):
        for file in range(BOARD_SIZE):
            yield Coordinate(file, rank)


def cells_between(start: Coordinate, end: Coordinate) -> list[Coordinate]:
    """Cells strictly between *start* and *end* on a shared line.

    Walks one step at a time from *start* toward *end* and stops before
    *end*. The caller guarantees the two cells share a file, a rank or a
    diagonal.
    """
    step_file = (end.file > start.file) - (end.file < start.file)
    step_rank = (end.rank > start.rank) - (end.rank < start.rank)
    cells: list[Coordinate] = []
    if start == end:
        return cells
    cur = start.offset(step_file, step_rank)
    while cur != end:
        cells.append(cur)
        cur = cur.offset(step_file, step_rank)
    return cells
