"""Scripted Othello opponent: heuristic early, minimax late."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from othello_ai.envs.othello.state import Move
from othello_ai.envs.othello.utils import count_empty, legal_moves
from othello_ai.search.minimax_policy import MinimaxConfig, MinimaxPolicy
from othello_ai.search.othello.heuristic_value_fn import EvalWeights, OthelloHeuristicValueFn
from ..base_agent import BaseAgent
from .heuristic_agent import heuristic_move

logger = logging.getLogger(__name__)


@dataclass
class StrategistConfig:
    # switch to minimax at or below this many empty cells
    late_game_threshold: int = 24
    minimax: MinimaxConfig = field(default_factory=MinimaxConfig)
    evaluation: EvalWeights = field(default_factory=EvalWeights)


def choose_move(
    board: np.ndarray,
    ai_player: int,
    config: Optional[StrategistConfig] = None,
    policy: Optional[MinimaxPolicy] = None,
) -> Optional[Move]:
    """
    Decide the AI's move on ``board``.

    Returns ``None`` when ``ai_player`` has no legal move; the caller treats
    that as a pass.
    """
    config = config or StrategistConfig()
    moves = legal_moves(board, ai_player)
    if not moves:
        logger.info("AI has no legal move; passing")
        return None

    empty = count_empty(board)
    if empty <= config.late_game_threshold:
        if policy is None:
            policy = MinimaxPolicy(
                value_fn=OthelloHeuristicValueFn(config.evaluation),
                config=config.minimax,
            )
        move = policy.select_move(board, ai_player, moves)
        logger.info("AI is using minimax (%d empty): chose %s", empty, move.coord if move else None)
        return move

    move = heuristic_move(board, ai_player, moves)
    logger.info("AI is using simple strategy (%d empty): chose %s", empty, move.coord if move else None)
    return move


class OthelloStrategistAgent(BaseAgent):
    """Agent wrapper around :func:`choose_move`."""

    name = "strategist"

    def __init__(self, config: Optional[StrategistConfig] = None):
        self.config = config or StrategistConfig()
        self.policy = MinimaxPolicy(
            value_fn=OthelloHeuristicValueFn(self.config.evaluation),
            config=self.config.minimax,
        )

    def act(self, board: np.ndarray, player: int) -> Optional[Move]:
        return choose_move(board, player, self.config, policy=self.policy)
