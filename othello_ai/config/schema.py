"""Configuration schema for the AI opponent and CLI runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from othello_ai.agents.othello.strategist import StrategistConfig
from othello_ai.envs.othello.utils import BLACK, WHITE
from othello_ai.search.minimax_policy import MinimaxConfig
from othello_ai.search.othello.heuristic_value_fn import EvalWeights

PLAYER_BY_NAME = {"black": BLACK, "white": WHITE}


def parse_player(name: Union[str, int]) -> int:
    """Map ``"black"``/``"white"`` (or a token) to a player token."""
    if isinstance(name, bool):
        raise ValueError(f"Unknown player {name!r}, expected 'black' or 'white'")
    if isinstance(name, int) and name in (BLACK, WHITE):
        return name
    key = str(name).lower()
    if key not in PLAYER_BY_NAME:
        raise ValueError(f"Unknown player '{name}', expected 'black' or 'white'")
    return PLAYER_BY_NAME[key]


@dataclass
class AIConfig:
    player: int = WHITE
    late_game_threshold: int = StrategistConfig.late_game_threshold
    minimax: MinimaxConfig = field(default_factory=MinimaxConfig)
    evaluation: EvalWeights = field(default_factory=EvalWeights)


@dataclass
class AppConfig:
    ai: AIConfig = field(default_factory=AIConfig)
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        ai_data = data.get("ai") or {}

        # MinimaxConfig rejects depth < 1 on construction
        minimax_defaults = MinimaxConfig()
        minimax_data = ai_data.get("minimax") or {}
        minimax = MinimaxConfig(
            depth=int(minimax_data.get("depth", minimax_defaults.depth)),
            use_alpha_beta=bool(
                minimax_data.get("use_alpha_beta", minimax_defaults.use_alpha_beta)
            ),
            pass_consumes_depth=bool(
                minimax_data.get("pass_consumes_depth", minimax_defaults.pass_consumes_depth)
            ),
        )

        eval_defaults = EvalWeights()
        eval_data = ai_data.get("evaluation") or {}
        evaluation = EvalWeights(
            corner_weight=float(eval_data.get("corner_weight", eval_defaults.corner_weight)),
            mobility_weight=float(eval_data.get("mobility_weight", eval_defaults.mobility_weight)),
            endgame_empty_threshold=int(
                eval_data.get("endgame_empty_threshold", eval_defaults.endgame_empty_threshold)
            ),
        )

        ai = AIConfig(
            player=parse_player(ai_data.get("player", "white")),
            late_game_threshold=int(
                ai_data.get("late_game_threshold", AIConfig.late_game_threshold)
            ),
            minimax=minimax,
            evaluation=evaluation,
        )

        seed = data.get("seed")
        if seed is not None:
            seed = int(seed)

        return cls(ai=ai, seed=seed)

    def strategist_config(self) -> StrategistConfig:
        return StrategistConfig(
            late_game_threshold=self.ai.late_game_threshold,
            minimax=self.ai.minimax,
            evaluation=self.ai.evaluation,
        )


def load_config(path: Union[str, Path, None] = None) -> AppConfig:
    """Load AppConfig from a YAML file; defaults when ``path`` is None."""
    if path is None:
        return AppConfig()
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)
