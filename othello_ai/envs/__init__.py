"""Environment modules."""

from .base import StepResult, TurnBasedEnv
from .othello import OthelloEnv, OthelloGame

__all__ = ["OthelloEnv", "OthelloGame", "StepResult", "TurnBasedEnv"]
