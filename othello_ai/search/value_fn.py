"""Abstract board value function for search algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class StateValueFn(ABC):
    """
    Board evaluator that scores a position for a fixed ``player``.
    """

    @abstractmethod
    def evaluate(self, board: np.ndarray, player: int) -> float:
        """
        Higher is better for ``player``, regardless of who is to move.
        """
        ...
