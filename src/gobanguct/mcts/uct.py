"""
UCT search for Gobang.

UCB selection formula:
U(n) = value(n) + C * sqrt(2 * ln(N(parent)) / N(n))

Each simulation:
1. Select: descend by UCB (min for human moves, max for AI moves) to a leaf
2. Expand: once a leaf has been visited more than the threshold, add a
   child for every candidate move at once
3. Playout: random play on a detached clone until a terminal move or a
   non-zero pattern score
4. Backpropagate: fold the reward into every node from the leaf to the root

All rewards share one scale: positive favours the AI.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from .node import Node
from ..game import (
    WINNER_AI,
    WINNER_DRAW,
    WINNER_HUMAN,
    Board,
    Cell,
    Outcome,
    Point,
)
from ..utils.config import UCTConfig
from ..utils.logging import Logger, SearchMetrics


class UCT:
    """
    UCT engine with bulk expansion and heuristic playouts.

    Args:
        config: Search parameters (C, expansion threshold, budgets)
        rng: Random generator for playouts; seeded from config.seed if omitted
        logger: Optional logger for search summaries and warnings
    """

    def __init__(
        self,
        config: Optional[UCTConfig] = None,
        rng: Optional[np.random.Generator] = None,
        logger: Optional[Logger] = None,
    ):
        self.config = config if config is not None else UCTConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.logger = logger

    def ucb(self, node: Node, parent_visits: int) -> float:
        """UCB score of a visited child."""
        return node.value + self.config.c * math.sqrt(
            2 * math.log(parent_visits) / node.visits
        )

    def selection(self, node: Node) -> Node:
        """
        Descend from node to a leaf.

        Unvisited children are taken first. Otherwise the child's mover
        decides the direction: human moves take the minimum UCB score,
        AI moves the maximum. Ties go to the earliest child.
        """
        while node.has_children:
            unvisited = next((c for c in node.children if c.visits == 0), None)
            if unvisited is not None:
                node = unvisited
                continue

            scores = [self.ucb(child, node.visits) for child in node.children]
            if node.children[0].mover == Cell.HUMAN:
                index = int(np.argmin(scores))
            else:
                index = int(np.argmax(scores))
            node = node.children[index]
        return node

    def expansion(self, node: Node) -> Node:
        """
        Add one child per candidate move.

        Terminal or already expanded nodes are returned unchanged.
        """
        if node.is_terminal or node.has_children:
            return node

        mover = node.to_move
        for point in sorted(node.board.candidate_moves()):
            board = node.board.copy()
            outcome = board.apply(point, mover)
            node.add_child(point, board, outcome)
        return node

    def simulation(self, node: Node) -> Outcome:
        """
        Run one select/expand/playout/backpropagate iteration from node.

        Returns:
            The Outcome whose reward was backpropagated
        """
        leaf = self.selection(node)

        if not leaf.has_children and leaf.visits > self.config.expansion_threshold:
            self.expansion(leaf)
            if leaf.has_children:
                leaf = self.selection(leaf)

        outcome = self.playout(leaf)
        self.backpropagation(leaf, outcome.reward)
        return outcome

    def playout(self, leaf: Node) -> Outcome:
        """
        Play randomly from leaf until the position resolves.

        Works on a detached clone; leaf and the tree are never modified.
        After each AI move the position is re-scored by pattern; after a
        human move the move's own Outcome is kept. A terminal leaf returns
        its cached Outcome directly.
        """
        if leaf.is_terminal:
            return leaf.outcome

        restarts = 0
        steps = 0
        state = leaf.clone()
        outcome = state.board.heuristic_score()

        while not outcome.done:
            if state.is_terminal:
                outcome = state.outcome
                break

            moves = sorted(state.board.candidate_moves())
            if not moves:
                # Board filled without a winner; retry from the leaf
                if steps == 0 or restarts >= self.config.max_playout_restarts:
                    return self._draw(state.board, restarts)
                restarts += 1
                steps = 0
                state = leaf.clone()
                outcome = state.board.heuristic_score()
                continue

            point = moves[int(self.rng.integers(len(moves)))]
            mover = state.to_move
            result = state.board.apply(point, mover)
            outcome = result
            if mover == Cell.AI and not result.done:
                outcome = state.board.heuristic_score()
            state = Node(board=state.board, move=point, mover=mover, outcome=result)
            steps += 1

        return outcome

    def backpropagation(self, node: Node, value: float) -> None:
        """Fold value into node and every ancestor up to the root."""
        while node is not None:
            node.update(value)
            node = node.parent

    # --- Driver helpers ---

    def search(self, root: Node, num_simulations: Optional[int] = None) -> Node:
        """
        Run a fixed number of simulations from root.

        An unexpanded, non-terminal root is expanded first so every
        candidate move gets statistics.

        Args:
            root: Root node bound to the current real board
            num_simulations: Iterations to run (default from config)

        Returns:
            Root node with updated statistics
        """
        if num_simulations is None:
            num_simulations = self.config.num_simulations

        if not root.has_children:
            self.expansion(root)

        terminal = 0
        for _ in range(num_simulations):
            outcome = self.simulation(root)
            if outcome.winner in (WINNER_AI, WINNER_HUMAN):
                terminal += 1

        if self.logger is not None:
            best = self.best_child(root)
            self.logger.log_search(SearchMetrics(
                simulations=num_simulations,
                root_visits=root.visits,
                tree_size=root.tree_size(),
                best_move=tuple(best.move) if best is not None else None,
                best_value=best.value if best is not None else None,
                terminal_outcomes=terminal,
            ))

        return root

    @staticmethod
    def best_child(root: Node) -> Optional[Node]:
        """Child with the highest mean value (AI perspective)."""
        return root.best_child()

    def choose_move(
        self,
        board: Board,
        last_move: Optional[Point] = None,
        last_mover: Optional[Cell] = None,
        num_simulations: Optional[int] = None,
    ) -> Optional[Point]:
        """
        Pick the AI's next move on board.

        An immediate win or block is played without searching, and an empty
        board gets the centre. The board itself is not modified.

        Args:
            board: Current real board
            last_move: The opponent's last move, if known
            last_mover: Who moved last (default: the stone at last_move, else human)
            num_simulations: Search budget (default from config)

        Returns:
            The chosen point, or None if there is nothing to play
        """
        if board.is_empty():
            return board.center

        forced = board.quick_win_move()
        if forced is not None:
            return forced

        root = Node(board=board.copy(), move=last_move, mover=last_mover)
        self.search(root, num_simulations)
        best = self.best_child(root)
        return best.move if best is not None else None

    # --- Helpers ---

    def _draw(self, board: Board, restarts: int) -> Outcome:
        if self.logger is not None:
            self.logger.log_warning(
                f"Playout found no moves after {restarts} restarts; scoring a draw"
            )
        return Outcome(reward=0.0, board=board.grid, done=True, info={"winner": WINNER_DRAW})
