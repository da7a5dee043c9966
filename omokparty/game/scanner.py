"""Run-length scanning along the four line orientations.

The candidate cell is always counted as belonging to the scanned player,
whatever the board actually holds there, so the same call answers both "did
this move win?" and "what would a move here make?". The board is never
written to.
"""

from __future__ import annotations

from typing import Sequence

from omokparty.config import WIN_LENGTH

from .board import Board
from .types import PlayerId, Point

HORIZONTAL = (0, 1)
VERTICAL = (1, 0)
DIAGONAL_DOWN = (1, 1)   # ↘
DIAGONAL_UP = (-1, 1)    # ↗

DIRECTIONS: list[tuple[int, int]] = [HORIZONTAL, VERTICAL, DIAGONAL_DOWN, DIAGONAL_UP]


def _walk(board: Board, row: int, col: int, dr: int, dc: int, player_id: PlayerId) -> int:
    count = 0
    for step in range(1, WIN_LENGTH):
        p = Point(row + dr * step, col + dc * step)
        if not board.is_on_grid(p) or board.get(p) != player_id:
            break
        count += 1
    return count


def consecutive_run(
    board: Board,
    row: int,
    col: int,
    player_id: PlayerId,
    directions: Sequence[tuple[int, int]] = DIRECTIONS,
) -> int:
    """Longest run of `player_id` through (row, col) if that cell were theirs."""
    best = 0
    for dr, dc in directions:
        count = 1
        count += _walk(board, row, col, dr, dc, player_id)
        count += _walk(board, row, col, -dr, -dc, player_id)
        best = max(best, count)
    return best


def is_winning_run(length: int) -> bool:
    return length >= WIN_LENGTH


def wins_at(board: Board, point: Point, player_id: PlayerId) -> bool:
    """Check if `player_id` holding `point` makes WIN_LENGTH in a row."""
    return is_winning_run(consecutive_run(board, point.row, point.col, player_id))
