"""CLI for playing agent vs agent."""

from typing import Optional

import tyro

from othello_ai.config import load_config
from othello_ai.utils.match import play_match
from .agent_factory import AgentType, build_agent, setup_logging


def play_agent_vs_agent(
    agent1_type: AgentType,
    agent2_type: AgentType,
    num_games: int = 1,
    render: bool = False,
    alternate_colors: bool = True,
    config_path: Optional[str] = None,
    seed: int = 42,
    log_level: str = "WARNING",
):
    """
    Play agent vs agent games.

    Args:
        agent1_type: Type of agent1 ('random', 'heuristic', 'minimax' or 'strategist')
        agent2_type: Type of agent2 ('random', 'heuristic', 'minimax' or 'strategist')
        num_games: Number of games to play
        render: Whether to render games
        alternate_colors: Swap colours every game
        config_path: Optional YAML config with AI settings
        seed: Random seed
        log_level: Logging level
    """
    setup_logging(log_level)
    app_config = load_config(config_path)
    if app_config.seed is not None:
        seed = app_config.seed

    agent1 = build_agent(agent1_type, app_config, seed)
    agent2 = build_agent(agent2_type, app_config, seed + 1)

    print(f"Playing {num_games} games: {agent1_type} vs {agent2_type}")
    print("=" * 50)

    agent1_wins, draws, agent2_wins = play_match(
        agent1,
        agent2,
        num_games=num_games,
        alternate_colors=alternate_colors,
        render=render,
    )

    print("=" * 50)
    print(f"{agent1_type}: {agent1_wins} wins")
    print(f"{agent2_type}: {agent2_wins} wins")
    print(f"Draws: {draws}")


def main():
    tyro.cli(play_agent_vs_agent)


if __name__ == "__main__":
    main()
