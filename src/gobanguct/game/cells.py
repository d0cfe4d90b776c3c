"""Cell values and board coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Cell(IntEnum):
    """Content of a board cell."""

    EMPTY = 0
    AI = 1
    HUMAN = 2

    @property
    def opponent(self) -> Cell:
        """The other player."""
        if self is Cell.AI:
            return Cell.HUMAN
        if self is Cell.HUMAN:
            return Cell.AI
        raise ValueError("EMPTY has no opponent")


@dataclass(frozen=True, order=True)
class Point:
    """Board coordinate, ordered row-major."""

    row: int
    col: int

    def __iter__(self):
        yield self.row
        yield self.col

    def __repr__(self) -> str:
        return f"Point({self.row}, {self.col})"
