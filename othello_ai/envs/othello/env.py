"""Othello environment: owns the live board and drives the turn cycle."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ..base import StepResult, TurnBasedEnv
from .game import OthelloGame
from .state import Move, OthelloState
from .utils import (
    BLACK,
    OTHELLO_SIZE,
    WHITE,
    count_pieces,
    get_flips,
    is_on_board,
    legal_moves,
)

INVALID_MOVE_MESSAGE = "You cannot place a disc there."

PLAYER_NAMES = {BLACK: "Black", WHITE: "White"}
PLAYER_SYMBOLS = {BLACK: "X", WHITE: "O"}


class OthelloEnv(TurnBasedEnv):
    """
    Othello (Reversi) environment (8x8 board).

    Holds the single authoritative board. Players place pieces on the board,
    flipping opponent pieces between the placed piece and existing pieces.
    A side without a legal move passes automatically; the game ends when
    neither side can move and the side with more discs wins.
    """

    def __init__(self, size: int = OTHELLO_SIZE):
        self.size = size
        self._game = OthelloGame(size=size)
        self._state: Optional[OthelloState] = None
        self.reset()

    def reset(self, board: Optional[np.ndarray] = None, player: int = BLACK) -> np.ndarray:
        """
        Start a new game.

        Args:
            board: Optional custom starting position (copied).
            player: Token of the side to move on a custom position.

        Returns:
            A copy of the starting board.
        """
        if board is None:
            self._state = self._game.initial_state()
        else:
            self._state = self._game.state_from_board(board, player)
        return self.board.copy()

    def step(self, row: int, col: int) -> StepResult:
        if self.done:
            raise ValueError("Game is over. Call reset() first.")

        assert self._state is not None
        mover = self.current_player_token

        if not is_on_board(row, col, self.size) or not get_flips(
            self._state.board, row, col, mover, self.size
        ):
            info: Dict[str, Any] = {
                "winner": None,
                "invalid_action": True,
                "passed": None,
                "message": INVALID_MOVE_MESSAGE,
            }
            return StepResult(board=self.board.copy(), terminated=False, info=info)

        self._state = self._game.apply_action(self._state, row * self.size + col)

        passed = None
        if not self._state.done and self.current_player_token == mover:
            passed = -mover

        info = {
            "winner": self._state.winner,
            "invalid_action": False,
            "passed": passed,
            "message": None,
        }
        return StepResult(board=self.board.copy(), terminated=self._state.done, info=info)

    def step_move(self, move: Move) -> StepResult:
        """Play a move by its coordinate; flips are recomputed on the live board."""
        return self.step(move.row, move.col)

    def legal_moves(self) -> List[Move]:
        if self.done:
            return []
        return legal_moves(self.board, self.current_player_token)

    def current_player(self) -> int:
        assert self._state is not None
        return self._state.current_player_index

    @property
    def current_player_token(self) -> int:
        assert self._state is not None
        return self._game.current_player(self._state)

    @property
    def board(self) -> np.ndarray:
        assert self._state is not None
        return self._state.board

    @property
    def last_move(self) -> Optional[Tuple[int, int]]:
        assert self._state is not None
        return self._state.last_move

    @property
    def winner(self) -> Optional[int]:
        assert self._state is not None
        return self._state.winner

    @property
    def done(self) -> bool:
        assert self._state is not None
        return self._state.done

    @property
    def scores(self) -> Dict[str, int]:
        black_count, white_count = count_pieces(self.board)
        return {"black": black_count, "white": white_count}

    def render(self, mode: str = "human", highlight_player: Optional[int] = None) -> Optional[str]:
        """
        Draw the board as text.

        Args:
            mode: ``"human"`` prints the board, ``"ansi"`` only returns it.
            highlight_player: Mark this player's legal moves with ``*`` when
                it is the side to move.
        """
        highlight = set()
        if highlight_player is not None and not self.done and highlight_player == self.current_player_token:
            highlight = {move.coord for move in self.legal_moves()}

        lines = []
        lines.append("=" * (self.size * 2 + 3))
        lines.append("  " + " ".join(str(i) for i in range(self.size)))
        lines.append("=" * (self.size * 2 + 3))

        for row in range(self.size):
            row_str = f"{row}|"
            for col in range(self.size):
                cell = int(self.board[row, col])
                if cell in PLAYER_SYMBOLS:
                    row_str += PLAYER_SYMBOLS[cell] + "|"
                elif (row, col) in highlight:
                    row_str += "*|"
                else:
                    row_str += " |"
            lines.append(row_str)

        lines.append("=" * (self.size * 2 + 3))

        scores = self.scores
        lines.append(f"X: {scores['black']}, O: {scores['white']}")
        if self.done:
            if self.winner == BLACK:
                lines.append("Black (X) wins!")
            elif self.winner == WHITE:
                lines.append("White (O) wins!")
            else:
                lines.append("Draw!")
        else:
            player = self.current_player_token
            lines.append(f"Current player: {PLAYER_NAMES[player]} ({PLAYER_SYMBOLS[player]})")

        text = "\n".join(lines)
        if mode == "human":
            print("\n" + text + "\n")
        return text

    def get_state(self) -> OthelloState:
        assert self._state is not None
        return OthelloState(
            board=self.board.copy(),
            current_player_index=self._state.current_player_index,
            winner=self._state.winner,
            done=self._state.done,
            last_move=self._state.last_move,
        )

    def set_state(self, state: OthelloState) -> None:
        self._state = OthelloState(
            board=state.board.copy(),
            current_player_index=state.current_player_index,
            winner=state.winner,
            done=state.done,
            last_move=state.last_move,
        )
