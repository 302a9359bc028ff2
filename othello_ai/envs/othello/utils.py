"""Shared utilities for Othello game logic."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .state import Move

OTHELLO_SIZE = 8

EMPTY = 0
BLACK = 1
WHITE = -1

Coord = Tuple[int, int]

# up, down, left, right, then the diagonals
DIRECTIONS: Tuple[Coord, ...] = (
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
)

CORNERS: Tuple[Coord, ...] = (
    (0, 0),
    (0, OTHELLO_SIZE - 1),
    (OTHELLO_SIZE - 1, 0),
    (OTHELLO_SIZE - 1, OTHELLO_SIZE - 1),
)


def opponent(player: int) -> int:
    """Return the token of the other player."""
    if player not in (BLACK, WHITE):
        raise ValueError(f"Unknown player token: {player}")
    return -player


def initial_board(size: int = OTHELLO_SIZE) -> np.ndarray:
    """Standard starting position: two diagonal pairs in the centre."""
    board = np.zeros((size, size), dtype=np.int8)
    mid = size // 2
    board[mid - 1, mid - 1] = WHITE
    board[mid - 1, mid] = BLACK
    board[mid, mid - 1] = BLACK
    board[mid, mid] = WHITE
    return board


def validate_board(board: np.ndarray, size: int = OTHELLO_SIZE) -> None:
    """
    Check the hard board invariants.

    Raises:
        ValueError: if the board is not ``size x size`` or holds a value
            other than EMPTY, BLACK or WHITE.
    """
    if board.shape != (size, size):
        raise ValueError(f"Board must have shape ({size}, {size}), got {board.shape}")
    if not np.isin(board, (EMPTY, BLACK, WHITE)).all():
        raise ValueError("Board cells must be EMPTY (0), BLACK (1) or WHITE (-1)")


def is_on_board(row: int, col: int, size: int = OTHELLO_SIZE) -> bool:
    return 0 <= row < size and 0 <= col < size


def is_corner(row: int, col: int, size: int = OTHELLO_SIZE) -> bool:
    return row in (0, size - 1) and col in (0, size - 1)


def get_flips(
    board: np.ndarray,
    row: int,
    col: int,
    player: int,
    size: int = OTHELLO_SIZE,
) -> List[Coord]:
    """
    Get all pieces that would be flipped by placing a piece at (row, col).

    Args:
        board: Game board array.
        row: Row position.
        col: Column position.
        player: Player token (1 or -1).
        size: Board size.

    Returns:
        List of (row, col) positions that would be flipped, grouped by
        direction in ``DIRECTIONS`` order. Empty when the cell is occupied
        or the placement captures nothing.
    """
    if board[row, col] != EMPTY:
        return []

    opp = -player
    flips: List[Coord] = []

    for dr, dc in DIRECTIONS:
        temp_flips = []
        r, c = row + dr, col + dc

        while is_on_board(r, c, size) and board[r, c] == opp:
            temp_flips.append((r, c))
            r += dr
            c += dc

        if is_on_board(r, c, size) and board[r, c] == player and temp_flips:
            flips.extend(temp_flips)

    return flips


def is_valid_move(
    board: np.ndarray,
    row: int,
    col: int,
    player: int,
    size: int = OTHELLO_SIZE,
) -> bool:
    """Check if placing a piece at (row, col) is a valid move."""
    return len(get_flips(board, row, col, player, size)) > 0


def legal_moves(board: np.ndarray, player: int) -> List[Move]:
    """
    All legal moves for ``player`` in row-major order.

    The scan order is part of the contract: the heuristic strategy and the
    minimax tie-breaking both keep the first move found.
    """
    size = board.shape[0]
    moves = []
    for row in range(size):
        for col in range(size):
            flips = get_flips(board, row, col, player, size)
            if flips:
                moves.append(Move(row, col, tuple(flips)))
    return moves


def has_legal_move(board: np.ndarray, player: int) -> bool:
    size = board.shape[0]
    return any(
        is_valid_move(board, r, c, player, size)
        for r in range(size)
        for c in range(size)
    )


def is_terminal(board: np.ndarray) -> bool:
    """True when neither player can move."""
    return not has_legal_move(board, BLACK) and not has_legal_move(board, WHITE)


def apply_move(
    board: np.ndarray,
    row: int,
    col: int,
    player: int,
    flips: Iterable[Coord],
    inplace: bool = False,
) -> np.ndarray:
    """
    Place ``player`` at (row, col) and turn every cell in ``flips``.

    ``flips`` must come from :func:`get_flips` for the same board, cell and
    player; it is not re-validated.

    Returns:
        The resulting board (a copy unless ``inplace`` is set).
    """
    if board[row, col] != EMPTY:
        raise ValueError(f"Cell ({row}, {col}) is already occupied")

    target = board if inplace else board.copy()
    target[row, col] = player
    for flip_row, flip_col in flips:
        target[flip_row, flip_col] = player
    return target


def count_pieces(board: np.ndarray) -> Tuple[int, int]:
    """
    Count pieces for each player.

    Args:
        board: Game board array.

    Returns:
        Tuple of (black_count, white_count).
    """
    black_count = np.sum(board == BLACK)
    white_count = np.sum(board == WHITE)
    return int(black_count), int(white_count)


def count_empty(board: np.ndarray) -> int:
    return int(np.sum(board == EMPTY))


def board_from_rows(rows: Sequence[str]) -> np.ndarray:
    """
    Build a board from text rows using ``B``/``X`` for Black, ``W``/``O``
    for White and ``.`` for empty cells.
    """
    symbols = {".": EMPTY, "B": BLACK, "X": BLACK, "W": WHITE, "O": WHITE}
    board = np.array([[symbols[ch] for ch in row] for row in rows], dtype=np.int8)
    validate_board(board, size=len(rows))
    return board
