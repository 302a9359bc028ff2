"""Tests for agents and the top-level move choice."""

import logging

import numpy as np

from othello_ai.agents import (
    OthelloHeuristicAgent,
    OthelloMinimaxAgent,
    OthelloStrategistAgent,
    RandomAgent,
    StrategistConfig,
    choose_move,
    heuristic_move,
)
from othello_ai.envs.othello import OthelloEnv
from othello_ai.envs.othello.utils import (
    BLACK,
    WHITE,
    board_from_rows,
    count_empty,
    initial_board,
    legal_moves,
)
from othello_ai.search import MinimaxConfig, MinimaxPolicy


CORNER_VS_BIG_CAPTURE = [
    ".BBWWWWW",
    "BWWWWWWW",
    "WWWWWWWW",
    "WWWWWWWW",
    "WBB.BBWW",
    "WWWWWWWW",
    "WWWWWWWW",
    "WWWWWWWW",
]


def _late_position(max_empty=20, seed=0):
    env = OthelloEnv()
    agent = RandomAgent(seed=seed)
    while True:
        env.reset()
        while count_empty(env.board) > max_empty and not env.done:
            token = env.current_player_token
            env.step_move(agent.act(env.board, token))
        if not env.done:
            return env.board.copy(), env.current_player_token


def test_heuristic_prefers_corner_over_bigger_capture():
    board = board_from_rows(CORNER_VS_BIG_CAPTURE)
    moves = legal_moves(board, WHITE)
    assert [(m.coord, len(m.flips)) for m in moves] == [((0, 0), 3), ((4, 3), 4)]

    move = heuristic_move(board, WHITE)
    assert move.coord == (0, 0)
    assert move.flips == ((1, 0), (0, 1), (0, 2))


def test_heuristic_takes_first_corner_in_scan_order():
    board = np.zeros((8, 8), dtype=np.int8)
    board[0, 6] = BLACK
    board[0, 5] = WHITE
    board[6, 0] = BLACK
    board[5, 0] = WHITE
    board[7, 6] = BLACK
    board[7, 5] = WHITE
    corners = [m.coord for m in legal_moves(board, WHITE) if m.coord in ((0, 7), (7, 0), (7, 7))]
    assert corners == [(0, 7), (7, 0), (7, 7)]
    assert heuristic_move(board, WHITE).coord == (0, 7)


def test_heuristic_picks_most_flips_first_on_ties():
    board = board_from_rows([
        "........",
        "........",
        "...B....",
        "..WWW...",
        "...B....",
        "........",
        "........",
        "........",
    ])
    # the row ends are open, so every legal move flips a single diagonal disc
    move = heuristic_move(board, BLACK)
    best = max(len(m.flips) for m in legal_moves(board, BLACK))
    assert len(move.flips) == best
    firsts = [m for m in legal_moves(board, BLACK) if len(m.flips) == best]
    assert move == firsts[0]


def test_heuristic_opening_tie_keeps_first():
    assert heuristic_move(initial_board(), BLACK).coord == (2, 3)


def test_heuristic_prefers_most_flips_over_scan_order():
    board = board_from_rows([
        "........",
        "........",
        "........",
        "..WWWB..",
        "...B....",
        "........",
        "........",
        "........",
    ])
    moves = legal_moves(board, BLACK)
    assert [(m.coord, len(m.flips)) for m in moves] == [
        ((2, 1), 1),
        ((2, 3), 1),
        ((2, 5), 1),
        ((3, 1), 3),
    ]

    move = heuristic_move(board, BLACK)
    assert move.coord == (3, 1)
    assert move.flips == ((3, 2), (3, 3), (3, 4))
    assert OthelloHeuristicAgent().act(board, BLACK).coord == (3, 1)


def test_heuristic_without_moves():
    board = np.full((8, 8), WHITE, dtype=np.int8)
    assert heuristic_move(board, BLACK) is None
    assert OthelloHeuristicAgent().act(board, BLACK) is None


def test_choose_move_returns_none_without_moves():
    board = np.full((8, 8), BLACK, dtype=np.int8)
    board[7, 7] = 0
    assert choose_move(board, WHITE) is None


def test_choose_move_uses_heuristic_early(caplog):
    board = initial_board()
    with caplog.at_level(logging.INFO, logger="othello_ai.agents.othello.strategist"):
        move = choose_move(board, BLACK)
    assert move == heuristic_move(board, BLACK)
    assert "simple strategy" in caplog.text


def test_choose_move_uses_minimax_late(caplog):
    board, player = _late_position(max_empty=20, seed=1)
    config = StrategistConfig(minimax=MinimaxConfig(depth=2))

    with caplog.at_level(logging.INFO, logger="othello_ai.agents.othello.strategist"):
        move = choose_move(board, player, config)

    expected = MinimaxPolicy(config=MinimaxConfig(depth=2)).select_move(board, player)
    assert move == expected
    assert "minimax" in caplog.text


def test_late_game_threshold_is_inclusive():
    board, player = _late_position(max_empty=24, seed=2)
    empty = count_empty(board)

    at_threshold = StrategistConfig(late_game_threshold=empty, minimax=MinimaxConfig(depth=1))
    below_threshold = StrategistConfig(late_game_threshold=empty - 1, minimax=MinimaxConfig(depth=1))

    minimax_choice = MinimaxPolicy(config=MinimaxConfig(depth=1)).select_move(board, player)
    assert choose_move(board, player, at_threshold) == minimax_choice
    assert choose_move(board, player, below_threshold) == heuristic_move(board, player)


def test_strategist_agent_returns_legal_move():
    board, player = _late_position(max_empty=22, seed=4)
    agent = OthelloStrategistAgent(StrategistConfig(minimax=MinimaxConfig(depth=2)))
    move = agent.act(board, player)
    assert move in legal_moves(board, player)


def test_minimax_agent_returns_legal_move():
    agent = OthelloMinimaxAgent(config=MinimaxConfig(depth=2))
    board = initial_board()
    assert agent.act(board, BLACK) in legal_moves(board, BLACK)


def test_random_agent_is_seeded():
    board = initial_board()
    first = [RandomAgent(seed=42).act(board, BLACK) for _ in range(3)]
    assert first[0] == first[1] == first[2]
    assert first[0] in legal_moves(board, BLACK)
