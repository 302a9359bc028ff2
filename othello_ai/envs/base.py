"""Core interfaces for turn-based environments."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional

import numpy as np


@dataclass(slots=True)
class StepResult:
    """Container for step outcomes in turn-based environments."""

    board: np.ndarray
    terminated: bool
    info: Dict[str, Any]

    def __iter__(self) -> Iterator[Any]:
        """Allow tuple-style unpacking: ``board, done, info = env.step(...)``."""
        yield self.board
        yield self.done
        yield self.info

    @property
    def done(self) -> bool:
        return self.terminated


class TurnBasedEnv(ABC):
    """Abstract base class for synchronous, two-player turn-based games."""

    @abstractmethod
    def reset(self, board: Optional[np.ndarray] = None) -> np.ndarray:
        """Reset environment state and return the initial board."""

    @abstractmethod
    def step(self, row: int, col: int) -> StepResult:
        """Advance environment by one placement from the current player."""

    @abstractmethod
    def current_player(self) -> int:
        """Index (0 or 1) of the player whose turn it is."""

    @abstractmethod
    def render(self, mode: str = "human") -> Optional[str]:
        """Render the environment state."""
