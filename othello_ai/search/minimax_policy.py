"""Minimax search policy with alpha-beta pruning."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from othello_ai.envs.othello.state import Move
from othello_ai.envs.othello.utils import apply_move, is_terminal, has_legal_move, legal_moves, opponent
from .othello.heuristic_value_fn import OthelloHeuristicValueFn
from .value_fn import StateValueFn

logger = logging.getLogger(__name__)


@dataclass
class MinimaxConfig:
    depth: int = 5
    use_alpha_beta: bool = True
    # A single-side pass spends one ply of depth. A double pass always
    # ends the branch.
    pass_consumes_depth: bool = True

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError(f"Minimax depth must be >= 1, got {self.depth}")


@dataclass
class SearchStats:
    nodes: int = 0
    leaves: int = 0
    cutoffs: int = 0


class MinimaxPolicy:
    """
    Fixed-depth minimax over Othello boards, scored from a fixed AI colour.

    Every root candidate is searched with a fresh ``(-inf, +inf)`` window;
    bounds are not shared between sibling root moves. Worst case at the
    default depth of 5 with at most 24 empty cells is ``24 ** 5`` leaves
    (about 8M); in practice branching is well under 10 and pruning cuts
    most of that.
    """

    def __init__(
        self,
        value_fn: Optional[StateValueFn] = None,
        config: Optional[MinimaxConfig] = None,
    ) -> None:
        self.value_fn = value_fn or OthelloHeuristicValueFn()
        self.config = config or MinimaxConfig()
        self.stats = SearchStats()
        self.last_score: Optional[float] = None

    def select_move(
        self,
        board: np.ndarray,
        player: int,
        moves: Optional[Sequence[Move]] = None,
    ) -> Optional[Move]:
        """
        Pick the root move with the strictly greatest minimax score.

        Ties keep the first move in row-major order. Returns ``None`` when
        ``player`` has no legal move.
        """
        # depth may be reassigned after construction
        if self.config.depth <= 0:
            raise ValueError("Minimax depth must be >= 1")

        if moves is None:
            moves = legal_moves(board, player)

        self.stats = SearchStats()
        self.last_score = None
        if not moves:
            return None

        best_score = -math.inf
        best_move: Optional[Move] = None

        for move in moves:
            child = apply_move(board, move.row, move.col, player, move.flips)
            score = self.minimax(
                child,
                depth=self.config.depth - 1,
                maximizing=False,
                ai_color=player,
                alpha=-math.inf,
                beta=math.inf,
            )
            if score > best_score:
                best_score = score
                best_move = move

        if best_move is None:
            best_move = moves[0]

        self.last_score = best_score
        logger.debug(
            "minimax depth=%d move=%s score=%s nodes=%d leaves=%d cutoffs=%d",
            self.config.depth,
            best_move.coord,
            best_score,
            self.stats.nodes,
            self.stats.leaves,
            self.stats.cutoffs,
        )
        return best_move

    def minimax(
        self,
        board: np.ndarray,
        depth: int,
        maximizing: bool,
        ai_color: int,
        alpha: float,
        beta: float,
    ) -> float:
        self.stats.nodes += 1

        if depth == 0 or is_terminal(board):
            return self._leaf(board, ai_color)

        player = ai_color if maximizing else opponent(ai_color)
        moves = legal_moves(board, player)

        if not moves:
            if not has_legal_move(board, opponent(player)):
                return self._leaf(board, ai_color)
            next_depth = depth - 1 if self.config.pass_consumes_depth else depth
            return self.minimax(board, next_depth, not maximizing, ai_color, alpha, beta)

        if maximizing:
            value = -math.inf
            for move in moves:
                child = apply_move(board, move.row, move.col, player, move.flips)
                score = self.minimax(child, depth - 1, False, ai_color, alpha, beta)
                value = max(value, score)
                if self.config.use_alpha_beta:
                    alpha = max(alpha, score)
                    if beta <= alpha:
                        self.stats.cutoffs += 1
                        break
            return value

        value = math.inf
        for move in moves:
            child = apply_move(board, move.row, move.col, player, move.flips)
            score = self.minimax(child, depth - 1, True, ai_color, alpha, beta)
            value = min(value, score)
            if self.config.use_alpha_beta:
                beta = min(beta, score)
                if beta <= alpha:
                    self.stats.cutoffs += 1
                    break
        return value

    def _leaf(self, board: np.ndarray, ai_color: int) -> float:
        self.stats.leaves += 1
        return self.value_fn.evaluate(board, ai_color)
