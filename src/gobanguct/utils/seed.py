"""
Random seed management for reproducibility.
"""

from __future__ import annotations

import random
import numpy as np


def set_seed(seed: int) -> None:
    """
    Set random seeds for reproducibility.

    Sets seeds for:
    - Python random
    - NumPy global generator

    Engines take their own numpy Generator; this only covers code that
    falls back to the global state.

    Args:
        seed: Random seed value
    """
    random.seed(seed)
    np.random.seed(seed)
