"""Othello environment package."""

from .env import OthelloEnv
from .game import OthelloGame
from .state import Move, OthelloState
from .utils import (
    BLACK,
    CORNERS,
    EMPTY,
    OTHELLO_SIZE,
    WHITE,
    apply_move,
    count_empty,
    count_pieces,
    get_flips,
    has_legal_move,
    initial_board,
    is_on_board,
    is_terminal,
    legal_moves,
    opponent,
)

__all__ = [
    "OthelloEnv",
    "OthelloGame",
    "OthelloState",
    "Move",
    "BLACK",
    "WHITE",
    "EMPTY",
    "CORNERS",
    "OTHELLO_SIZE",
    "apply_move",
    "count_empty",
    "count_pieces",
    "get_flips",
    "has_legal_move",
    "initial_board",
    "is_on_board",
    "is_terminal",
    "legal_moves",
    "opponent",
]
