"""Pure minimax agent for Othello (no opening heuristic)."""

from typing import Optional

import numpy as np

from othello_ai.envs.othello.state import Move
from othello_ai.search.minimax_policy import MinimaxConfig, MinimaxPolicy
from othello_ai.search.othello.heuristic_value_fn import EvalWeights, OthelloHeuristicValueFn
from ..base_agent import BaseAgent


class OthelloMinimaxAgent(BaseAgent):
    """Runs the alpha-beta search on every move of the game."""

    name = "minimax"

    def __init__(
        self,
        config: Optional[MinimaxConfig] = None,
        weights: Optional[EvalWeights] = None,
    ):
        self.policy = MinimaxPolicy(
            value_fn=OthelloHeuristicValueFn(weights),
            config=config or MinimaxConfig(),
        )

    def act(self, board: np.ndarray, player: int) -> Optional[Move]:
        return self.policy.select_move(board, player)
