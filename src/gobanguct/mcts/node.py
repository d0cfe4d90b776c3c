"""
UCT search tree node.

Each node represents a board position reached by a move and stores:
- visits: number of backpropagated rewards
- value: running mean of those rewards (positive favours the AI)
- children: owned list of successor nodes
- parent: weak back-reference used only for backpropagation
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import List, Optional

from ..game import Board, Cell, Outcome, Point


@dataclass(eq=False)
class Node:
    """
    Search tree node.

    Children are created in bulk during expansion. The parent is held
    through a weak reference so a subtree never keeps its ancestors alive.

    mover defaults to the stone at move, or to Cell.HUMAN when there is no
    stone there. An explicit mover that contradicts the stone raises ValueError.
    """

    board: Board
    move: Optional[Point] = None  # Move that reached this node
    mover: Optional[Cell] = None  # Who played move (for a root: who moved last)
    outcome: Optional[Outcome] = None  # Cached result of move

    visits: int = 0
    value: float = 0.0

    children: List[Node] = field(default_factory=list)
    _parent: Optional[weakref.ref] = field(default=None, repr=False)

    def __post_init__(self):
        stone = Cell.EMPTY
        if self.move is not None and self.board.in_bounds(self.move):
            stone = self.board[self.move]

        if stone == Cell.EMPTY:
            if self.mover is None:
                self.mover = Cell.HUMAN
        elif self.mover is None:
            self.mover = stone
        elif self.mover != stone:
            raise ValueError(
                f"Mover {Cell(self.mover).name} does not match the {stone.name} stone at {self.move}"
            )
        self.mover = Cell(self.mover)

    @property
    def parent(self) -> Optional[Node]:
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, node: Optional[Node]) -> None:
        self._parent = weakref.ref(node) if node is not None else None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_terminal(self) -> bool:
        """True if the move that created this node ended the game."""
        return self.outcome is not None and self.outcome.done

    @property
    def has_children(self) -> bool:
        return len(self.children) > 0

    @property
    def to_move(self) -> Cell:
        """Who plays next from this position."""
        return self.mover.opponent

    def add_child(self, move: Point, board: Board, outcome: Outcome) -> Node:
        """Attach a child for a move already applied to board."""
        child = Node(board=board, move=move, mover=self.to_move, outcome=outcome)
        child.parent = self
        self.children.append(child)
        return child

    def update(self, value: float) -> None:
        """Fold one reward into the running mean."""
        self.value = (self.value * self.visits + value) / (self.visits + 1)
        self.visits += 1

    def clone(self) -> Node:
        """
        Detached copy for playouts.

        The board is deep-copied; statistics, move and outcome are shared
        values. The clone has no parent and no children, so nothing done
        to it can reach the persistent tree.
        """
        return Node(
            board=self.board.copy(),
            move=self.move,
            mover=self.mover,
            outcome=self.outcome,
            visits=self.visits,
            value=self.value,
        )

    def detach(self) -> Node:
        """Promote this node to a root (tree reuse after a real move)."""
        self._parent = None
        return self

    def best_child(self) -> Optional[Node]:
        """Child with the highest mean value, first one on ties."""
        best = None
        for child in self.children:
            if best is None or child.value > best.value:
                best = child
        return best

    def depth(self) -> int:
        """Distance from the root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def tree_size(self) -> int:
        """Number of nodes in this subtree, including self."""
        size = 0
        stack = [self]
        while stack:
            node = stack.pop()
            size += 1
            stack.extend(node.children)
        return size

    def __repr__(self) -> str:
        return (
            f"Node(move={self.move}, mover={self.mover.name}, visits={self.visits}, "
            f"value={self.value:+.3f}, children={len(self.children)})"
        )
