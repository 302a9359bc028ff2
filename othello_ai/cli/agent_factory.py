"""Build registered agents from an AppConfig."""

import logging
from typing import Literal

from othello_ai.agents import BaseAgent
from othello_ai.config import AppConfig
from othello_ai.registry import make_agent

AgentType = Literal["random", "heuristic", "minimax", "strategist"]


def build_agent(agent_type: AgentType, app_config: AppConfig, seed: int) -> BaseAgent:
    strategist_config = app_config.strategist_config()
    if agent_type == "random":
        return make_agent("random", seed=seed)
    if agent_type == "heuristic":
        return make_agent("heuristic")
    if agent_type == "minimax":
        return make_agent(
            "minimax",
            config=strategist_config.minimax,
            weights=strategist_config.evaluation,
        )
    if agent_type == "strategist":
        return make_agent("strategist", config=strategist_config)
    raise ValueError(f"Unknown agent type: {agent_type}")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
