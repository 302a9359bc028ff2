"""Config package exports."""

from .schema import AIConfig, AppConfig, load_config, parse_player

__all__ = [
    "AIConfig",
    "AppConfig",
    "load_config",
    "parse_player",
]
