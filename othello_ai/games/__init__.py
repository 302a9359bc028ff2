"""Game-agnostic rule interfaces."""

from .turn_based_game import Action, TurnBasedGame

__all__ = ["Action", "TurnBasedGame"]
