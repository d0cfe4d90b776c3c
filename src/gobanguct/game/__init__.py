"""Game module - Gobang board, outcomes and pattern scoring."""

from .cells import Cell, Point
from .outcome import Outcome
from .board import (
    WIN_LENGTH,
    AI_WIN,
    HUMAN_WIN,
    NO_REWARD,
    WINNER_AI,
    WINNER_HUMAN,
    WINNER_DRAW,
    Board,
    IllegalMoveError,
)
from .heuristic import Perspective, line_reward, score

__all__ = [
    "Cell",
    "Point",
    "Outcome",
    "WIN_LENGTH",
    "AI_WIN",
    "HUMAN_WIN",
    "NO_REWARD",
    "WINNER_AI",
    "WINNER_HUMAN",
    "WINNER_DRAW",
    "Board",
    "IllegalMoveError",
    "Perspective",
    "line_reward",
    "score",
]
