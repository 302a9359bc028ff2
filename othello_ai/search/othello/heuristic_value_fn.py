"""Weighted positional evaluation for Othello minimax."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from othello_ai.envs.othello.utils import (
    CORNERS,
    count_empty,
    legal_moves,
    opponent,
)
from ..value_fn import StateValueFn


@dataclass(frozen=True)
class EvalWeights:
    corner_weight: float = 50.0
    mobility_weight: float = 5.0
    # at or below this many empty cells only the disc differential counts
    endgame_empty_threshold: int = 10


def evaluate_board(
    board: np.ndarray,
    ai_color: int,
    weights: Optional[EvalWeights] = None,
) -> float:
    """
    Score ``board`` from ``ai_color``'s point of view.

    Terms:
        1. disc differential (ai discs - opponent discs);
        2. corner control, +corner_weight per owned corner and
           -corner_weight per corner held by the opponent;
        3. mobility differential times mobility_weight.

    With ``endgame_empty_threshold`` or fewer empty cells only term 1 is
    returned.
    """
    weights = weights or EvalWeights()
    opp = opponent(ai_color)

    disc_diff = int(np.sum(board == ai_color)) - int(np.sum(board == opp))

    if count_empty(board) <= weights.endgame_empty_threshold:
        return float(disc_diff)

    corner_score = 0.0
    for row, col in CORNERS:
        if board[row, col] == ai_color:
            corner_score += weights.corner_weight
        elif board[row, col] == opp:
            corner_score -= weights.corner_weight

    mobility = len(legal_moves(board, ai_color)) - len(legal_moves(board, opp))

    return disc_diff + corner_score + mobility * weights.mobility_weight


class OthelloHeuristicValueFn(StateValueFn):
    """Disc differential plus corner and mobility terms."""

    def __init__(self, weights: Optional[EvalWeights] = None) -> None:
        self.weights = weights or EvalWeights()

    def evaluate(self, board: np.ndarray, player: int) -> float:
        return evaluate_board(board, player, self.weights)
