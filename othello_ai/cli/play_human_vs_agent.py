"""CLI for playing Othello against an agent."""

from typing import Literal, Optional, Tuple

import tyro

from othello_ai.config import load_config, parse_player
from othello_ai.envs.othello import OthelloEnv
from othello_ai.envs.othello.env import PLAYER_NAMES, PLAYER_SYMBOLS
from othello_ai.envs.othello.utils import opponent
from .agent_factory import AgentType, build_agent, setup_logging


def read_coordinate(
    prompt: str = "Enter row and column (e.g. '2 3'): ",
) -> Optional[Tuple[int, int]]:
    """Ask until the user types two integers; ``None`` on EOF or Ctrl+C."""
    while True:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return None
        parts = line.replace(",", " ").split()
        if len(parts) != 2:
            print("Please enter two numbers: row and column!")
            continue
        try:
            return int(parts[0]), int(parts[1])
        except ValueError:
            print("Please enter valid numbers!")


def play_human_vs_agent(
    agent_type: AgentType = "strategist",
    human_color: Optional[Literal["black", "white"]] = None,
    config_path: Optional[str] = None,
    seed: int = 42,
    log_level: str = "WARNING",
):
    """
    Play a game of Othello against an agent.

    Args:
        agent_type: Opponent type ('random', 'heuristic', 'minimax' or 'strategist')
        human_color: Colour the human plays (Black moves first); defaults to
            the side opposite the configured AI player
        config_path: Optional YAML config with AI settings
        seed: Random seed
        log_level: Logging level for AI diagnostics
    """
    setup_logging(log_level)
    app_config = load_config(config_path)
    if app_config.seed is not None:
        seed = app_config.seed

    if human_color is None:
        human = opponent(app_config.ai.player)
    else:
        human = parse_player(human_color)
    agent = build_agent(agent_type, app_config, seed)
    env = OthelloEnv()

    print("=" * 50)
    print("Othello - Human vs Agent")
    print("=" * 50)
    print(f"Agent type: {agent_type}")
    print(f"Human plays: {PLAYER_NAMES[human]} ({PLAYER_SYMBOLS[human]})")
    print("=" * 50)
    print()

    env.reset()
    agent.reset()

    while not env.done:
        env.render(highlight_player=human)
        token = env.current_player_token

        if token == human:
            legal = [move.coord for move in env.legal_moves()]
            print(f"Your turn! Legal moves: {legal}")
            coord = read_coordinate()
            if coord is None:
                print("Game aborted.")
                return
            result = env.step(*coord)
            if result.info["invalid_action"]:
                print(result.info["message"])
                continue
        else:
            print(f"{PLAYER_NAMES[token]} (AI) is thinking...")
            move = agent.act(env.board.copy(), token)
            if move is None:
                # env only hands the turn to a side that can move
                raise RuntimeError("Agent returned no move although legal moves exist")
            print(f"Agent plays: {move.coord}")
            result = env.step_move(move)

        passed = result.info["passed"]
        if passed is not None:
            print(f"{PLAYER_NAMES[passed]} has no legal move and passes.")
        print()

    env.render()
    scores = env.scores
    print(f"Game over! Black: {scores['black']}, White: {scores['white']}")
    if env.winner == 0:
        print("It's a draw! 🤝")
    elif env.winner == human:
        print("You win! 🎉")
    else:
        print("Agent wins! 😢")


def main():
    tyro.cli(play_human_vs_agent)


if __name__ == "__main__":
    main()
