"""Agent modules."""

from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .othello import (
    OthelloHeuristicAgent,
    OthelloMinimaxAgent,
    OthelloStrategistAgent,
    StrategistConfig,
    choose_move,
    heuristic_move,
)
from ..registry import list_agents, register_agent

if "random" not in list_agents():
    register_agent("random", RandomAgent)
if "heuristic" not in list_agents():
    register_agent("heuristic", OthelloHeuristicAgent)
if "minimax" not in list_agents():
    register_agent("minimax", OthelloMinimaxAgent)
if "strategist" not in list_agents():
    register_agent("strategist", OthelloStrategistAgent)

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "OthelloHeuristicAgent",
    "OthelloMinimaxAgent",
    "OthelloStrategistAgent",
    "StrategistConfig",
    "choose_move",
    "heuristic_move",
]
