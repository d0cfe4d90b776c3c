"""
Positional pattern scoring for Gobang.

The board is swept from three perspectives:
- AI stones as played
- human stones as played
- human stones as if the human moved next (every empty cell is tried
  as a hypothetical human stone)

Each run of same-owner stones along an axis is scored once by its length
and by how many of its two flanking cells are empty. A run is only scored
when both flanking cells lie on the board.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from .cells import Cell

# Line directions: horizontal, vertical, diagonal, anti-diagonal
AXES = ((0, 1), (1, 0), (1, 1), (1, -1))

# Pattern rewards (positive favours the AI)
AI_THREE = 0.2
AI_FOUR_BLOCKED = 0.2
AI_FOUR_OPEN = 0.8
AI_FIVE = 1.0
HUMAN_THREE = -0.8
HUMAN_FOUR_BLOCKED = -0.8
HUMAN_FOUR_OPEN = -0.8
HUMAN_FIVE = -0.8
HUMAN_NEXT_THREE = -0.25
HUMAN_NEXT_FOUR_BLOCKED = -0.25

Grid = Sequence[Sequence[int]]


class Perspective(Enum):
    """Whose stones a sweep scores."""

    AI = "ai"
    HUMAN = "human"
    HUMAN_NEXT = "human_next"


_THREE = {
    Perspective.AI: AI_THREE,
    Perspective.HUMAN: HUMAN_THREE,
    Perspective.HUMAN_NEXT: HUMAN_NEXT_THREE,
}
_FOUR_OPEN = {
    Perspective.AI: AI_FOUR_OPEN,
    Perspective.HUMAN: HUMAN_FOUR_OPEN,
    Perspective.HUMAN_NEXT: HUMAN_FOUR_OPEN,
}
_FOUR_BLOCKED = {
    Perspective.AI: AI_FOUR_BLOCKED,
    Perspective.HUMAN: HUMAN_FOUR_BLOCKED,
    Perspective.HUMAN_NEXT: HUMAN_NEXT_FOUR_BLOCKED,
}
_FIVE = {
    Perspective.AI: AI_FIVE,
    Perspective.HUMAN: HUMAN_FIVE,
    Perspective.HUMAN_NEXT: HUMAN_FIVE,
}


def line_reward(length: int, open_ends: int, perspective: Perspective) -> float:
    """
    Reward for a single run.

    Args:
        length: Number of stones in the run (including a hypothetical seed)
        open_ends: How many of the two flanking cells are empty (0-2)
        perspective: Whose run this is

    Returns:
        Pattern reward, 0.0 if the run is not a scoring shape
    """
    if length == 3 and open_ends == 2:
        return _THREE[perspective]
    if length == 4 and open_ends == 2:
        return _FOUR_OPEN[perspective]
    if length == 4 and open_ends == 1:
        return _FOUR_BLOCKED[perspective]
    if length >= 5:
        return _FIVE[perspective]
    return 0.0


def _run(cells: Grid, row: int, col: int, dr: int, dc: int, owner: int):
    """
    Collect the run through (row, col) along one axis.

    The seed cell is always part of the run; the walk extends in both
    directions over cells equal to owner.

    Returns:
        (run, before, after) where run lists the run's coordinates and
        before/after are the flanking coordinates (possibly off-board)
    """
    rows, cols = len(cells), len(cells[0])
    run = [(row, col)]

    r, c = row - dr, col - dc
    while 0 <= r < rows and 0 <= c < cols and cells[r][c] == owner:
        run.append((r, c))
        r, c = r - dr, c - dc
    before = (r, c)

    r, c = row + dr, col + dc
    while 0 <= r < rows and 0 <= c < cols and cells[r][c] == owner:
        run.append((r, c))
        r, c = r + dr, c + dc
    after = (r, c)

    return run, before, after


def sweep(cells: Grid, perspective: Perspective) -> float:
    """Sum of line rewards for one perspective."""
    if perspective is Perspective.AI:
        seed, owner = Cell.AI, Cell.AI
    elif perspective is Perspective.HUMAN:
        seed, owner = Cell.HUMAN, Cell.HUMAN
    else:
        seed, owner = Cell.EMPTY, Cell.HUMAN

    rows, cols = len(cells), len(cells[0])
    visited: set[tuple[int, int, int]] = set()
    total = 0.0

    for row in range(rows):
        for col in range(cols):
            if cells[row][col] != seed:
                continue
            for axis, (dr, dc) in enumerate(AXES):
                if (row, col, axis) in visited:
                    continue
                run, before, after = _run(cells, row, col, dr, dc, owner)
                visited.update((r, c, axis) for r, c in run)

                if not (0 <= before[0] < rows and 0 <= before[1] < cols):
                    continue
                if not (0 <= after[0] < rows and 0 <= after[1] < cols):
                    continue
                open_ends = (
                    (cells[before[0]][before[1]] == Cell.EMPTY)
                    + (cells[after[0]][after[1]] == Cell.EMPTY)
                )
                total += line_reward(len(run), open_ends, perspective)

    return total


def score(cells: Grid) -> float:
    """
    Aggregate positional score of a grid.

    Sums the human-as-played, human-next and AI-as-played sweeps.
    """
    return (
        sweep(cells, Perspective.HUMAN)
        + sweep(cells, Perspective.HUMAN_NEXT)
        + sweep(cells, Perspective.AI)
    )
