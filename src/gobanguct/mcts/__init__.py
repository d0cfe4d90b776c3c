"""
UCT tree search module.
"""

from .node import Node
from .uct import UCT

__all__ = [
    "Node",
    "UCT",
]
