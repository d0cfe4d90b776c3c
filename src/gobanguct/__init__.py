"""
Gobang UCT - five-in-a-row played by Monte-Carlo tree search.

The core is a board environment (legality, moves, win detection, pattern
scoring) and a UCT engine that grows a tree of positions with bulk
expansion and heuristic playouts.

Usage:
    from gobanguct.game import Board, Cell, Point
    from gobanguct.mcts import UCT, Node

    board = Board(19, 19)
    board.apply(Point(9, 9), Cell.AI)
    board.apply(Point(9, 10), Cell.HUMAN)

    engine = UCT()
    move = engine.choose_move(board, last_move=Point(9, 10))
    board.apply(move, Cell.AI)
"""

__version__ = "0.1.0"

from . import game
from . import mcts
from . import utils

__all__ = [
    "game",
    "mcts",
    "utils",
    "__version__",
]
