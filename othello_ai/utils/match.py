"""Utilities for playing matches between agents."""

import logging
from typing import List, Optional, Tuple, Union

from othello_ai.agents.base_agent import BaseAgent
from othello_ai.envs.othello import OthelloEnv
from othello_ai.envs.othello.utils import BLACK

logger = logging.getLogger(__name__)


def play_game(agent_black: BaseAgent, agent_white: BaseAgent, env: Optional[OthelloEnv] = None, render: bool = False) -> Tuple[int, int]:
    """
    Play one game to completion.

    Returns:
        Tuple of (winner token or 0 for a draw, number of moves played).
    """
    if env is None:
        env = OthelloEnv()
    env.reset()
    agent_black.reset()
    agent_white.reset()

    moves = 0
    while not env.done:
        token = env.current_player_token
        agent = agent_black if token == BLACK else agent_white
        move = agent.act(env.board.copy(), token)
        if move is None:
            raise RuntimeError(f"Agent '{agent.name}' returned no move although legal moves exist")

        result = env.step_move(move)
        if result.info["invalid_action"]:
            raise ValueError(f"Agent '{agent.name}' played an illegal move at {move.coord}")
        moves += 1

        if result.info["passed"] is not None:
            logger.debug("player %d passes", result.info["passed"])
        if render:
            env.render()

    return int(env.winner), moves


def play_match(
    agent1: BaseAgent,
    agent2: BaseAgent,
    num_games: int = 10,
    alternate_colors: bool = True,
    render: bool = False,
    collect_episode_lengths: bool = False,
    env: Optional[OthelloEnv] = None,
) -> Union[Tuple[int, int, int], Tuple[int, int, int, List[int]]]:
    """
    Play a match between two agents.

    Args:
        agent1: First agent
        agent2: Second agent
        num_games: Number of games to play
        alternate_colors: If True, agent1 plays Black in even games and White
                          in odd games. If False, agent1 is always Black.
        render: Print the board after every move.
        collect_episode_lengths: If True, also return episode lengths.
        env: Optional environment to use. If None, creates a new OthelloEnv.

    Returns:
        Tuple of (agent1_wins, draws, agent2_wins). If ``collect_episode_lengths`` is True,
        also returns a list with the number of moves for every game played.
    """
    if env is None:
        env = OthelloEnv()

    agent1_wins = 0
    draws = 0
    agent2_wins = 0
    episode_lengths: List[int] = []

    for game_idx in range(num_games):
        agent1_is_black = not alternate_colors or game_idx % 2 == 0
        black, white = (agent1, agent2) if agent1_is_black else (agent2, agent1)

        winner, moves = play_game(black, white, env=env, render=render)
        episode_lengths.append(moves)

        if winner == 0:
            draws += 1
        elif (winner == BLACK) == agent1_is_black:
            agent1_wins += 1
        else:
            agent2_wins += 1

        logger.info(
            "game %d/%d: %s (black) vs %s (white) -> winner=%d in %d moves",
            game_idx + 1,
            num_games,
            black.name,
            white.name,
            winner,
            moves,
        )

    if collect_episode_lengths:
        return agent1_wins, draws, agent2_wins, episode_lengths
    return agent1_wins, draws, agent2_wins
