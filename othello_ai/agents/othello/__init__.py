"""Othello agents."""

from .heuristic_agent import OthelloHeuristicAgent, heuristic_move
from .minimax_agent import OthelloMinimaxAgent
from .strategist import OthelloStrategistAgent, StrategistConfig, choose_move

__all__ = [
    "OthelloHeuristicAgent",
    "OthelloMinimaxAgent",
    "OthelloStrategistAgent",
    "StrategistConfig",
    "choose_move",
    "heuristic_move",
]
