"""Othello game rules (immutable state, for drivers and matches)."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from .state import OthelloState
from .utils import (
    BLACK,
    OTHELLO_SIZE,
    WHITE,
    apply_move,
    count_pieces,
    get_flips,
    has_legal_move,
    initial_board,
    legal_moves,
    validate_board,
)
from othello_ai.games.turn_based_game import TurnBasedGame, Action


class OthelloGame(TurnBasedGame[OthelloState]):
    """
    Pure Othello rules without environment: only state transitions.

    Turn order is handled here: after a move the opponent plays next unless
    it has no legal move, in which case it passes and the mover plays again.
    When neither side can move the state is final and the winner is decided
    by disc count.
    """

    def __init__(self, size: int = OTHELLO_SIZE) -> None:
        self.size = size
        self._player_tokens = np.array([BLACK, WHITE], dtype=np.int8)

    def initial_state(self) -> OthelloState:
        return OthelloState(
            board=initial_board(self.size),
            current_player_index=0,
            winner=None,
            done=False,
        )

    def state_from_board(self, board: np.ndarray, player: int = BLACK) -> OthelloState:
        """Wrap an arbitrary position, resolving passes and game end."""
        validate_board(board, self.size)
        index = 0 if player == BLACK else 1
        return self._resolve_turn(board.copy(), index, last_move=None)

    def legal_actions(self, state: OthelloState) -> Sequence[Action]:
        if state.done:
            return []

        current_token = self.current_player(state)
        return [move.row * self.size + move.col for move in legal_moves(state.board, current_token)]

    def apply_action(self, state: OthelloState, action: Action) -> OthelloState:
        if state.done:
            raise ValueError("Cannot apply action in terminal state")

        if action < 0 or action >= self.size * self.size:
            raise ValueError(f"Illegal action: {action}")

        row = action // self.size
        col = action % self.size

        current_token = self.current_player(state)
        flips = get_flips(state.board, row, col, current_token, self.size)

        if not flips:
            raise ValueError(f"Invalid move at ({row}, {col})")

        board = apply_move(state.board, row, col, current_token, flips)
        return self._resolve_turn(board, 1 - state.current_player_index, last_move=(row, col))

    def _resolve_turn(self, board, next_player_index, last_move) -> OthelloState:
        next_token = int(self._player_tokens[next_player_index])

        if not has_legal_move(board, next_token):
            other_index = 1 - next_player_index
            other_token = int(self._player_tokens[other_index])

            if not has_legal_move(board, other_token):
                black_count, white_count = count_pieces(board)
                if black_count > white_count:
                    winner = BLACK
                elif white_count > black_count:
                    winner = WHITE
                else:
                    winner = 0

                return OthelloState(
                    board=board,
                    current_player_index=next_player_index,
                    winner=winner,
                    done=True,
                    last_move=last_move,
                )
            next_player_index = other_index

        return OthelloState(
            board=board,
            current_player_index=next_player_index,
            winner=None,
            done=False,
            last_move=last_move,
        )

    def current_player(self, state: OthelloState) -> int:
        return int(self._player_tokens[state.current_player_index])

    def is_terminal(self, state: OthelloState) -> bool:
        return state.done

    def winner(self, state: OthelloState) -> Optional[int]:
        return state.winner
