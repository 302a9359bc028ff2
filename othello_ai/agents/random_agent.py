"""Random agent implementation."""

from typing import Optional

import numpy as np

from othello_ai.envs.othello.state import Move
from othello_ai.envs.othello.utils import legal_moves
from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """Agent that selects moves uniformly from the legal moves."""

    name = "random"

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize random agent.

        Args:
            seed: Random seed for reproducibility
        """
        self._rng = np.random.default_rng(seed)

    def act(self, board: np.ndarray, player: int) -> Optional[Move]:
        moves = legal_moves(board, player)
        if not moves:
            return None
        return moves[int(self._rng.integers(len(moves)))]
