"""Heuristic agent: greedy one-ply priority ladder over the line scanner.

For every empty cell the agent asks the scanner how long a run it would make
for itself and for the strongest opponent if it played there. It then walks a
fixed ladder of (whose run, minimum length) rules, each checked against all
empty cells in row-major order before the next rule is tried:

  1. own run >= 5        take the win
  2. opponent run >= 5   block a win
  3. opponent run >= 4   block a four
  4. own run >= 4        make a four
  5. opponent run >= 3   block a three
  6. own run >= 3        make a three

With nothing on the ladder it falls back to the empty cell nearest the board
centre (Manhattan distance, ties in row-major order). No lookahead.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from omokparty.game.scanner import consecutive_run
from omokparty.game.state import GameState
from omokparty.game.types import Point

from .base import Agent

OWN = "own"
OPPONENT = "opponent"

PRIORITY_LADDER: list[tuple[str, int]] = [
    (OWN, 5),
    (OPPONENT, 5),
    (OPPONENT, 4),
    (OWN, 4),
    (OPPONENT, 3),
    (OWN, 3),
]


class CellScore(NamedTuple):
    point: Point
    own: int
    opponent: int  # best run any single opponent would get here


def score_cells(game_state: GameState, player_id: int) -> list[CellScore]:
    """Hypothetical run lengths for every empty cell, in row-major order."""
    board = game_state.board
    opponents = [p.id for p in game_state.players if p.id != player_id]
    scores: list[CellScore] = []
    for point in board.empty_cells():
        own = consecutive_run(board, point.row, point.col, player_id)
        opponent = max(
            (consecutive_run(board, point.row, point.col, opp) for opp in opponents),
            default=0,
        )
        scores.append(CellScore(point, own, opponent))
    return scores


def nearest_to_center(points: list[Point], size: int) -> Point:
    center = (size - 1) / 2
    # min() keeps the first of equal keys, so row-major order breaks ties
    return min(points, key=lambda p: abs(p.row - center) + abs(p.col - center))


class HeuristicAgent(Agent):
    def select_move(self, game_state: GameState) -> Optional[Point]:
        scores = score_cells(game_state, game_state.current_player.id)
        if not scores:
            return None

        for whose, threshold in PRIORITY_LADDER:
            for cell in scores:
                run = cell.own if whose == OWN else cell.opponent
                if run >= threshold:
                    return cell.point

        return nearest_to_center([cell.point for cell in scores], game_state.board.size)
