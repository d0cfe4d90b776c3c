"""
Gobang board environment.

Board representation:
- R x C grid, dtype int8
- 0 = empty
- 1 = AI stones
- 2 = human stones

Dimensions are fixed at construction. The only mutating operations are
apply() and reset(); everything else is a read-only query.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from . import heuristic
from .cells import Cell, Point
from .outcome import Outcome

WIN_LENGTH = 5

# Terminal rewards (positive favours the AI)
AI_WIN = 1.0
HUMAN_WIN = -0.8
NO_REWARD = 0.0

WINNER_AI = "ai"
WINNER_HUMAN = "human"
WINNER_DRAW = "draw"

# Tolerance under which an aggregate heuristic score counts as "nothing found"
SCORE_EPSILON = 1e-9


class IllegalMoveError(ValueError):
    """Raised when a move targets an occupied/off-board cell or has no valid mover."""


class Board:
    """
    Fixed-size Gobang board.

    Args:
        rows: Number of rows (> 0)
        cols: Number of columns (> 0)
    """

    def __init__(self, rows: int = 19, cols: int = 19):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.grid = np.zeros((rows, cols), dtype=np.int8)

    @classmethod
    def from_array(cls, grid) -> Board:
        """Build a board from an existing grid (copied)."""
        array = np.array(grid, dtype=np.int8, copy=True)
        if array.ndim != 2:
            raise ValueError(f"Board grid must be 2-D, got shape {array.shape}")
        valid = np.isin(array, [int(cell) for cell in Cell])
        if not np.all(valid):
            raise ValueError("Board grid contains values outside {0, 1, 2}")
        board = cls(*array.shape)
        board.grid = array
        return board

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def center(self) -> Point:
        return Point(self.rows // 2, self.cols // 2)

    def __getitem__(self, point: Point) -> Cell:
        return Cell(int(self.grid[point.row, point.col]))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.grid, other.grid)

    __hash__ = None

    def __repr__(self) -> str:
        stones = int(np.count_nonzero(self.grid))
        return f"Board({self.rows}x{self.cols}, stones={stones})"

    def to_array(self) -> np.ndarray:
        """Return a copy of the grid."""
        return self.grid.copy()

    def is_empty(self) -> bool:
        return not np.any(self.grid)

    def is_full(self) -> bool:
        return bool(np.all(self.grid != Cell.EMPTY))

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.row < self.rows and 0 <= point.col < self.cols

    def is_legal(self, point: Optional[Point]) -> bool:
        """True iff point is on the board and its cell is empty."""
        if point is None or not self.in_bounds(point):
            return False
        return bool(self.grid[point.row, point.col] == Cell.EMPTY)

    def reset(self) -> None:
        """Clear every cell."""
        self.grid = np.zeros((self.rows, self.cols), dtype=np.int8)

    def copy(self) -> Board:
        """Deep copy; the new grid shares no memory with this one."""
        board = Board(self.rows, self.cols)
        board.grid = self.grid.copy()
        return board

    def apply(self, point: Point, mover: Cell) -> Outcome:
        """
        Place a stone and report the result.

        Args:
            point: Target cell, must be legal
            mover: Cell.AI or Cell.HUMAN

        Returns:
            Outcome with the winner's reward if the move made five in a row,
            otherwise reward 0 and done=False

        Raises:
            IllegalMoveError: If the cell is off-board/occupied or the mover is invalid
        """
        if not self.is_legal(point):
            raise IllegalMoveError(f"Illegal point {point} on {self!r}")
        if mover not in (Cell.AI, Cell.HUMAN):
            raise IllegalMoveError(f"Illegal mover {mover!r} at {point}")

        self.grid[point.row, point.col] = mover

        if self._is_five(point):
            ai_won = mover == Cell.AI
            return Outcome(
                reward=AI_WIN if ai_won else HUMAN_WIN,
                board=self.grid,
                done=True,
                info={"winner": WINNER_AI if ai_won else WINNER_HUMAN},
            )
        return Outcome(reward=NO_REWARD, board=self.grid)

    def run_length(self, point: Point, dr: int, dc: int) -> int:
        """Length of the contiguous same-owner run through point along (dr, dc)."""
        owner = self.grid[point.row, point.col]
        length = 1
        for sign in (-1, 1):
            r, c = point.row + sign * dr, point.col + sign * dc
            while 0 <= r < self.rows and 0 <= c < self.cols and self.grid[r, c] == owner:
                length += 1
                r, c = r + sign * dr, c + sign * dc
        return length

    def _is_five(self, point: Point) -> bool:
        """Check whether the stone at point completes a line of WIN_LENGTH."""
        return any(
            self.run_length(point, dr, dc) >= WIN_LENGTH
            for dr, dc in heuristic.AXES
        )

    def candidate_moves(self) -> set[Point]:
        """
        Empty cells 8-adjacent to at least one stone.

        An empty board has no candidates; the caller seeds the first move.
        """
        occupied = self.grid != Cell.EMPTY
        padded = np.pad(occupied, 1)
        near = np.zeros_like(occupied)
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                near |= padded[1 + dr:1 + dr + self.rows, 1 + dc:1 + dc + self.cols]
        rows, cols = np.nonzero(near & ~occupied)
        return {Point(int(r), int(c)) for r, c in zip(rows, cols)}

    def heuristic_score(self) -> Outcome:
        """
        Evaluate the position by pattern scoring.

        done is True when any scoring shape was found, so a playout can stop
        early on a tactically significant position.
        """
        value = heuristic.score(self.grid.tolist())
        return Outcome(
            reward=value,
            board=self.grid,
            done=abs(value) > SCORE_EPSILON,
        )

    def quick_win_move(self) -> Optional[Point]:
        """
        Find a move that ends the game immediately for either side.

        Candidates are tried in row-major order, AI first then human, each on
        a throwaway copy.

        Returns:
            A winning or blocking point, or None
        """
        for point in sorted(self.candidate_moves()):
            for mover in (Cell.AI, Cell.HUMAN):
                if self.copy().apply(point, mover).done:
                    return point
        return None
