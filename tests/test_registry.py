"""Tests for the agent registry."""

from __future__ import annotations

from uuid import uuid4

import pytest

from othello_ai.registry import (
    get_agent_entry,
    list_agents,
    make_agent,
    register_agent,
)
from othello_ai.agents import OthelloStrategistAgent, RandomAgent, StrategistConfig
from othello_ai.search import MinimaxConfig


class _StubAgent:
    def __init__(self, name: str, depth: int) -> None:
        self.name = name
        self.depth = depth


def test_register_and_make_agent():
    agent_id = f"stub_agent_{uuid4().hex}"
    register_agent(agent_id, _StubAgent)

    instance = make_agent(agent_id, name="test", depth=3)
    assert isinstance(instance, _StubAgent)
    assert instance.name == "test"
    assert instance.depth == 3

    ctor = get_agent_entry(agent_id)
    assert ctor is _StubAgent

    with pytest.raises(ValueError):
        register_agent(agent_id, _StubAgent)


def test_registry_lists_include_defaults():
    agents = list_agents()
    assert {"random", "heuristic", "minimax", "strategist"}.issubset(set(agents))


def test_make_default_agents():
    assert isinstance(make_agent("random", seed=1), RandomAgent)
    config = StrategistConfig(minimax=MinimaxConfig(depth=3))
    agent = make_agent("strategist", config=config)
    assert isinstance(agent, OthelloStrategistAgent)
    assert agent.policy.config.depth == 3


def test_registry_make_missing_entries():
    with pytest.raises(KeyError):
        make_agent("missing_agent")
    with pytest.raises(KeyError):
        get_agent_entry("missing_agent")
