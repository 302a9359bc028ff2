"""Base agent interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from othello_ai.envs.othello.state import Move


class BaseAgent(ABC):
    """Base class for all agents."""

    name: str = "agent"

    @abstractmethod
    def act(self, board: np.ndarray, player: int) -> Optional[Move]:
        """
        Return a move for ``player`` on ``board``, or ``None`` to pass.

        The board is never modified; the returned move is only valid for
        the board it was computed from.
        """

    def reset(self) -> None:
        """Called at the start of each game."""
