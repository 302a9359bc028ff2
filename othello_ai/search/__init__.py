"""Search algorithms and value functions."""

from .value_fn import StateValueFn
from .minimax_policy import MinimaxConfig, MinimaxPolicy, SearchStats
from .othello import EvalWeights, OthelloHeuristicValueFn, evaluate_board

__all__ = [
    "StateValueFn",
    "MinimaxPolicy",
    "MinimaxConfig",
    "SearchStats",
    "EvalWeights",
    "OthelloHeuristicValueFn",
    "evaluate_board",
]
