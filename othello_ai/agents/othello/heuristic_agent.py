"""Heuristic agent implementation for Othello."""

from typing import Optional, Sequence

import numpy as np

from othello_ai.envs.othello.state import Move
from othello_ai.envs.othello.utils import is_corner, legal_moves
from ..base_agent import BaseAgent


def heuristic_move(
    board: np.ndarray,
    player: int,
    moves: Optional[Sequence[Move]] = None,
) -> Optional[Move]:
    """
    Opening/midgame move choice.

    1. Take the first corner move in row-major order, if any.
    2. Otherwise take the move flipping the most discs; on equal counts
       the earlier move is kept.
    3. Otherwise fall back to the first legal move.

    Returns ``None`` when ``player`` has no legal move.
    """
    if moves is None:
        moves = legal_moves(board, player)
    if not moves:
        return None

    size = board.shape[0]
    for move in moves:
        if is_corner(move.row, move.col, size):
            return move

    best_move = None
    max_flips = -1
    for move in moves:
        if len(move.flips) > max_flips:
            max_flips = len(move.flips)
            best_move = move

    if best_move is None:
        return moves[0]
    return best_move


class OthelloHeuristicAgent(BaseAgent):
    """
    Greedy Othello agent.

    Strategy:
    1. Corners are most valuable (they can never be flipped)
    2. Otherwise maximise the number of discs captured this move
    """

    name = "heuristic"

    def act(self, board: np.ndarray, player: int) -> Optional[Move]:
        return heuristic_move(board, player)
