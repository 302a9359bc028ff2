"""Othello game state and move dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class Move:
    """A placement plus the discs it captures on the board it was computed from."""

    row: int
    col: int
    flips: Tuple[Tuple[int, int], ...] = ()

    @property
    def coord(self) -> Tuple[int, int]:
        return (self.row, self.col)


@dataclass
class OthelloState:
    board: np.ndarray
    current_player_index: int
    winner: Optional[int]
    done: bool
    last_move: Optional[Tuple[int, int]] = None
