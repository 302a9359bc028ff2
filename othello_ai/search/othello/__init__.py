"""Othello-specific value functions."""

from .heuristic_value_fn import EvalWeights, OthelloHeuristicValueFn, evaluate_board

__all__ = ["EvalWeights", "OthelloHeuristicValueFn", "evaluate_board"]
