from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, Sequence, TypeVar

S = TypeVar("S")  # state type
Action = int  # flat cell index: row * size + col


class TurnBasedGame(ABC, Generic[S]):
    """
    Common interface for a deterministic two-player perfect-information game.
    No environment, only "pure" rules.
    """

    @abstractmethod
    def initial_state(self) -> S:
        """Starting position."""

    @abstractmethod
    def legal_actions(self, state: S) -> Sequence[Action]:
        """All legal actions in the given state."""

    @abstractmethod
    def apply_action(self, state: S, action: Action) -> S:
        """Return the new state after the move."""

    @abstractmethod
    def current_player(self, state: S) -> int:
        """
        Token of the player to move:
        1 for Black, -1 for White.
        """

    @abstractmethod
    def is_terminal(self, state: S) -> bool:
        """Is the state final (win/draw/loss)?"""

    @abstractmethod
    def winner(self, state: S) -> Optional[int]:
        """
        Who won:

        * 1 : the player with token +1
        * -1: the player with token -1
        * 0 : draw
        * None: not finished yet
        """
