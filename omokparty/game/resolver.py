from __future__ import annotations

import logging

from .board import format_point
from .errors import CellOccupiedError, GamePausedError, NotPlayingError, OutOfBoundsError
from .scanner import wins_at
from .state import GameState, Move, MoveOutcome
from .turns import advance_turn, finish
from .types import MoveResult, Outcome, Phase, Point

logger = logging.getLogger(__name__)


def apply_move(state: GameState, point: Point, reason: str = "human") -> MoveOutcome:
    """Place a marker for the active player, then end the game or pass the turn."""
    if state.phase is Phase.PAUSED:
        raise GamePausedError("Game is paused")
    if state.phase is not Phase.PLAYING:
        raise NotPlayingError("Game is not in progress", {"phase": str(state.phase)})
    if not state.board.is_on_grid(point):
        raise OutOfBoundsError(f"{point} is off the board", {"size": state.board.size})
    if not state.board.is_empty(point):
        raise CellOccupiedError(f"{format_point(point)} is occupied")

    player = state.current_player
    state.board.place(point.row, point.col, player.id)
    player.move_count += 1
    state.moves.append(Move(point=point, player_id=player.id, reason=reason))
    logger.debug("%s played %s (%s)", player.name, format_point(point), reason)

    if wins_at(state.board, point, player.id):
        finish(state, Outcome.WON, player.id)
        result = MoveResult.WON
    elif state.board.is_full:
        finish(state, Outcome.DRAW)
        result = MoveResult.DRAW
    else:
        advance_turn(state)
        result = MoveResult.CONTINUED

    return MoveOutcome(
        result=result,
        point=point,
        player_id=player.id,
        move_count=player.move_count,
    )
