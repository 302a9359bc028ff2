"""Tests for configuration schemas."""

from __future__ import annotations

import pytest

from othello_ai.agents import StrategistConfig
from othello_ai.config import AppConfig, load_config, parse_player
from othello_ai.envs.othello.utils import BLACK, WHITE
from othello_ai.search import EvalWeights, MinimaxConfig


def test_app_config_parsing():
    data = {
        "seed": 7,
        "ai": {
            "player": "black",
            "late_game_threshold": 20,
            "minimax": {"depth": 3, "use_alpha_beta": False},
            "evaluation": {"corner_weight": 30, "mobility_weight": 0},
        },
    }

    cfg = AppConfig.from_dict(data)
    assert cfg.seed == 7
    assert cfg.ai.player == BLACK
    assert cfg.ai.late_game_threshold == 20
    assert cfg.ai.minimax.depth == 3
    assert cfg.ai.minimax.use_alpha_beta is False
    assert cfg.ai.minimax.pass_consumes_depth is True
    assert cfg.ai.evaluation.corner_weight == 30.0
    assert cfg.ai.evaluation.endgame_empty_threshold == 10

    strategist = cfg.strategist_config()
    assert strategist.late_game_threshold == 20
    assert strategist.minimax.depth == 3
    assert strategist.evaluation.mobility_weight == 0.0


def test_defaults():
    cfg = AppConfig.from_dict({})
    assert cfg.seed is None
    assert cfg.ai.player == WHITE
    strategist = cfg.strategist_config()
    assert strategist.late_game_threshold == 24
    assert strategist.minimax.depth == 5
    assert strategist.evaluation.corner_weight == 50.0
    assert load_config(None) == AppConfig()


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "ai.yaml"
    path.write_text(
        "ai:\n"
        "  player: white\n"
        "  minimax:\n"
        "    depth: 4\n"
        "    pass_consumes_depth: false\n"
    )
    cfg = load_config(path)
    assert cfg.ai.minimax.depth == 4
    assert cfg.ai.minimax.pass_consumes_depth is False


def test_invalid_configs(tmp_path):
    with pytest.raises(ValueError):
        AppConfig.from_dict({"ai": {"minimax": {"depth": 0}}})
    with pytest.raises(ValueError):
        AppConfig.from_dict({"ai": {"player": "red"}})

    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_parse_player():
    assert parse_player("Black") == BLACK
    assert parse_player("white") == WHITE
    assert parse_player(-1) == WHITE


def test_parse_player_rejects_bools():
    # bool is an int subclass and True == 1 == BLACK
    with pytest.raises(ValueError):
        parse_player(True)
    with pytest.raises(ValueError):
        parse_player(False)
    with pytest.raises(ValueError):
        AppConfig.from_dict({"ai": {"player": True}})


def test_defaults_follow_search_and_evaluation_configs():
    cfg = AppConfig.from_dict({})
    assert cfg.ai.minimax == MinimaxConfig()
    assert cfg.ai.evaluation == EvalWeights()
    assert cfg.ai.late_game_threshold == StrategistConfig().late_game_threshold
    assert cfg.strategist_config() == StrategistConfig()
