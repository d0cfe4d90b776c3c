"""Utilities module."""

from .config import (
    Config,
    BoardConfig,
    UCTConfig,
    get_default_config,
)
from .seed import set_seed
from .logging import (
    Logger,
    SearchMetrics,
    console,
    print_children,
)

__all__ = [
    "Config",
    "BoardConfig",
    "UCTConfig",
    "get_default_config",
    "set_seed",
    "Logger",
    "SearchMetrics",
    "console",
    "print_children",
]
