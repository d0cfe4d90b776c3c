"""
Logging utilities with rich formatting.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from ..mcts.node import Node


console = Console()


@dataclass
class SearchMetrics:
    """Summary of one search (one real move)."""

    simulations: int
    root_visits: int
    tree_size: int
    best_move: Optional[tuple[int, int]]
    best_value: Optional[float]
    terminal_outcomes: int = 0
    timestamp: str = ""

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now().isoformat()


class Logger:
    """
    Search logger with rich output and JSON logging.

    Args:
        log_dir: Directory for log files (None disables the JSON log)
        verbose: Whether to print to console
    """

    def __init__(self, log_dir: Optional[str] = None, verbose: bool = True):
        self.verbose = verbose
        self.log_file: Optional[Path] = None

        if log_dir is not None:
            self.log_dir = Path(log_dir)
            self.log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.log_file = self.log_dir / f"search_{timestamp}.jsonl"

        self.metrics_history: list[SearchMetrics] = []

    def log_search(self, metrics: SearchMetrics) -> None:
        """Log metrics for one search."""
        self.metrics_history.append(metrics)

        if self.log_file is not None:
            with open(self.log_file, "a") as f:
                f.write(json.dumps(asdict(metrics)) + "\n")

        if self.verbose:
            self._print_search(metrics)

    def _print_search(self, m: SearchMetrics) -> None:
        """Print search summary to console."""
        table = Table(title="Search", show_header=False, box=None)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("Simulations", str(m.simulations))
        table.add_row("Root visits", str(m.root_visits))
        table.add_row("Tree size", str(m.tree_size))
        table.add_row("Terminal", str(m.terminal_outcomes))
        if m.best_move is not None:
            table.add_row("Best move", f"{m.best_move}")
            table.add_row("Best value", f"{m.best_value:+.4f}")

        console.print(table)

    def log_message(self, message: str, style: str = "white") -> None:
        """Log a message."""
        if self.verbose:
            console.print(f"[{style}]{message}[/]")

    def log_info(self, message: str) -> None:
        """Log info message."""
        self.log_message(message, "blue")

    def log_success(self, message: str) -> None:
        """Log success message."""
        self.log_message(message, "green")

    def log_warning(self, message: str) -> None:
        """Log warning message."""
        self.log_message(message, "yellow")

    def log_error(self, message: str) -> None:
        """Log error message."""
        self.log_message(message, "red")


def print_children(root: Node, limit: int = 10) -> None:
    """Print the root's children ranked by mean value."""
    table = Table(title="Candidate moves", show_header=True)
    table.add_column("Move", style="cyan")
    table.add_column("Visits", justify="right")
    table.add_column("Value", justify="right")

    ranked = sorted(root.children, key=lambda n: n.value, reverse=True)
    for child in ranked[:limit]:
        move = f"({child.move.row}, {child.move.col})" if child.move is not None else "-"
        table.add_row(move, str(child.visits), f"{child.value:+.4f}")

    console.print(table)
