"""
Result of a single board transition.

An Outcome is produced exactly once per move (or per heuristic evaluation)
and never changes afterwards. Rewards use one scale everywhere:
positive favours the AI, negative favours the human.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

import numpy as np


@dataclass(frozen=True, eq=False)
class Outcome:
    """Immutable snapshot of a position after a move."""

    reward: float
    board: np.ndarray  # read-only snapshot of the grid
    done: bool = False
    info: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        snapshot = np.array(self.board, dtype=np.int8, copy=True)
        snapshot.setflags(write=False)
        object.__setattr__(self, "board", snapshot)
        object.__setattr__(self, "reward", float(self.reward))
        object.__setattr__(self, "info", MappingProxyType(dict(self.info)))

    @property
    def winner(self) -> Optional[str]:
        """Winner recorded in info, if any."""
        return self.info.get("winner")

    def __repr__(self) -> str:
        return f"Outcome(reward={self.reward:+.3f}, done={self.done}, info={dict(self.info)})"
