"""Turn bookkeeping: clock speed, turn advance, pause/resume and game end."""

from __future__ import annotations

import logging
from typing import Optional

from omokparty.config import (
    COMPUTER_MOVE_DELAY_SECONDS,
    FAST_FILL_RATIO,
    FAST_TURN_SECONDS,
    NORMAL_TURN_SECONDS,
)

from .board import Board
from .errors import NotPlayingError
from .state import GameState
from .types import Outcome, Phase, PlayerId

logger = logging.getLogger(__name__)


def speed_for(board: Board) -> int:
    """Seconds per turn: shorter once half the board is filled."""
    if board.fill_ratio >= FAST_FILL_RATIO:
        return FAST_TURN_SECONDS
    return NORMAL_TURN_SECONDS


def _arm_computer_timer(state: GameState) -> None:
    if state.current_player.is_computer:
        state.computer_timer.arm(COMPUTER_MOVE_DELAY_SECONDS, state.turn_number)


def begin_turn(state: GameState) -> None:
    """Start the active player's turn: fresh clock, fresh computer timer."""
    speed = speed_for(state.board)
    state.clock.speed_seconds = speed
    state.clock.remaining_seconds = speed
    state.turn_number += 1
    state.computer_timer.disarm()
    _arm_computer_timer(state)


def advance_turn(state: GameState) -> None:
    state.current_player_index = (state.current_player_index + 1) % len(state.players)
    begin_turn(state)


def finish(state: GameState, outcome: Outcome, winner: Optional[PlayerId] = None) -> None:
    state.outcome = outcome
    state.winner = winner
    state.phase = Phase.OVER
    state.computer_timer.disarm()
    if outcome is Outcome.WON:
        logger.info("Player %s wins after %d moves", winner, len(state.moves))
    else:
        logger.info("Game drawn after %d moves", len(state.moves))


def pause(state: GameState) -> None:
    """Suspend the countdown; remaining_seconds is left as it was."""
    if state.phase is not Phase.PLAYING:
        raise NotPlayingError("Only a running game can be paused", {"phase": str(state.phase)})
    state.phase = Phase.PAUSED
    state.computer_timer.disarm()
    logger.info("Game paused")


def resume(state: GameState) -> None:
    """Continue a paused game. The clock restarts at the turn's full speed."""
    if state.phase is not Phase.PAUSED:
        raise NotPlayingError("Game is not paused", {"phase": str(state.phase)})
    state.phase = Phase.PLAYING
    state.clock.remaining_seconds = state.clock.speed_seconds
    _arm_computer_timer(state)
    logger.info("Game resumed")
