"""
Configuration management for Gobang UCT.

Uses dataclasses for clean configuration with sensible defaults.
Supports loading from YAML files.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Optional, TYPE_CHECKING
import numpy as np
import yaml

from ..game import Board
from .logging import Logger

if TYPE_CHECKING:
    from ..mcts import UCT


@dataclass
class BoardConfig:
    """Board configuration."""

    rows: int = 19
    cols: int = 19


@dataclass
class UCTConfig:
    """UCT search configuration."""

    c: float = 0.5  # Exploration constant in the UCB formula
    expansion_threshold: int = 40  # Visits before a leaf is expanded
    num_simulations: int = 2000  # Default search budget per move
    max_playout_restarts: int = 8  # Restarts on a full board before scoring a draw
    seed: Optional[int] = None  # Seed for the engine's random generator


@dataclass
class Config:
    """Full configuration."""

    board: BoardConfig = field(default_factory=BoardConfig)
    uct: UCTConfig = field(default_factory=UCTConfig)

    # Global settings
    seed: int = 42
    log_dir: Optional[str] = None

    def save(self, path: str) -> None:
        """Save config to YAML file."""
        with open(path, "w") as f:
            yaml.dump(asdict(self), f, default_flow_style=False)

    @classmethod
    def load(cls, path: str) -> Config:
        """Load config from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls(
            board=BoardConfig(**(data.get("board") or {})),
            uct=UCTConfig(**(data.get("uct") or {})),
            seed=data.get("seed", 42),
            log_dir=data.get("log_dir"),
        )

    def make_board(self) -> Board:
        """Create an empty board with the configured dimensions."""
        return Board(self.board.rows, self.board.cols)

    def make_engine(self, verbose: bool = False) -> UCT:
        """
        Create a UCT engine wired to this config.

        The engine's generator is seeded from uct.seed, falling back to the
        global seed. Search summaries go to log_dir when it is set.
        """
        from ..mcts import UCT

        seed = self.uct.seed if self.uct.seed is not None else self.seed
        logger = Logger(log_dir=self.log_dir, verbose=verbose)
        return UCT(config=self.uct, rng=np.random.default_rng(seed), logger=logger)


def get_default_config() -> Config:
    """Get default configuration (19x19, C=0.5, expansion after 40 visits)."""
    return Config()
