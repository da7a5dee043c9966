"""Engine entry points for the presentation layer.

Everything is synchronous. The UI calls `tick` once per second while a game
is running; the countdown and the computer's thinking delay both advance
only through `tick`, so tests drive them without waiting on a wall clock.
"""

from __future__ import annotations

import copy
import logging
import random
from typing import Optional, Sequence

from omokparty.agent.base import Agent
from omokparty.agent.heuristic_agent import HeuristicAgent
from omokparty.agent.random_agent import RandomAgent
from omokparty.config import (
    AVAILABLE_MARKERS,
    DEFAULT_BOARD_SIZE,
    DEFAULT_PLAYERS,
    MIN_BOARD_SIZE,
)

from .board import Board, format_point
from .errors import (
    GameInProgressError,
    IncompleteSetupError,
    InvalidMarkerError,
    InvalidPlayersError,
    InvalidSizeError,
    MarkerTakenError,
    NotYourTurnError,
)
from .resolver import apply_move
from .state import GameState, MoveOutcome, TickResult
from .turns import begin_turn, finish, pause, resume  # noqa: F401 (pause/resume re-exported)
from .types import Outcome, Phase, Player, PlayerId, Point

logger = logging.getLogger(__name__)

_computer_agent: Agent = HeuristicAgent()


def default_players() -> list[Player]:
    return [
        Player(id=i, name=name, default_marker=marker, is_computer=is_computer)
        for i, (name, marker, is_computer) in enumerate(DEFAULT_PLAYERS)
    ]


def _new_board(board_size: int) -> Board:
    board = Board.create(board_size)
    if board.size < MIN_BOARD_SIZE:
        raise InvalidSizeError(
            f"Board must be at least {MIN_BOARD_SIZE}x{MIN_BOARD_SIZE}",
            {"size": board_size},
        )
    return board


def new_setup(
    players: Optional[Sequence[Player]] = None,
    board_size: int = DEFAULT_BOARD_SIZE,
) -> GameState:
    """A Setup-phase state waiting for markers to be chosen."""
    if players is None:
        players = default_players()
    return GameState(board=_new_board(board_size), players=list(players))


def choose_marker(state: GameState, player_id: PlayerId, marker: str) -> None:
    if state.phase is not Phase.SETUP:
        raise GameInProgressError("Markers can only be chosen before the game starts")
    if not marker:
        raise InvalidMarkerError("Marker must not be empty", {"player": player_id})
    for other in state.players:
        if other.id != player_id and other.marker == marker:
            raise MarkerTakenError(f"{marker} is already taken by {other.name}")
    state.player_by_id(player_id).marker = marker


def _check_players(players: Sequence[Player]) -> None:
    if not players:
        raise IncompleteSetupError("A game needs at least one player")
    ids = [p.id for p in players]
    if len(set(ids)) != len(ids):
        raise InvalidPlayersError("Player ids must be distinct", {"ids": ids})
    missing = [p.name for p in players if not p.is_computer and not p.marker]
    if missing:
        raise IncompleteSetupError(
            "All players must choose a marker", {"missing": ", ".join(missing)}
        )


def _computer_marker(player: Player, taken: set[str]) -> str:
    """The computer's default marker, or the first free one if a human took it."""
    for marker in [player.default_marker] + AVAILABLE_MARKERS:
        if marker not in taken:
            return marker
    return player.default_marker


def start_game(players: Sequence[Player], board_size: int = DEFAULT_BOARD_SIZE) -> GameState:
    """Begin play with a fresh board of at least MIN_BOARD_SIZE per side.

    Every human needs a marker first, and no two players may share one.
    """
    _check_players(players)
    board = _new_board(board_size)
    fresh = [copy.copy(p) for p in players]
    taken = {p.marker for p in fresh if p.marker}
    for p in fresh:
        p.move_count = 0
        if p.is_computer and not p.marker:
            p.marker = _computer_marker(p, taken)
            taken.add(p.marker)

    markers = [p.display_marker for p in fresh]
    for i, marker in enumerate(markers):
        if marker in markers[:i]:
            raise MarkerTakenError(f"{marker} is chosen by more than one player")

    state = GameState(board=board, players=fresh, phase=Phase.PLAYING)
    begin_turn(state)
    logger.info(
        "Game started on %dx%d with %s",
        board_size,
        board_size,
        ", ".join(str(p) for p in fresh),
    )
    return state


def start(setup: GameState) -> GameState:
    if setup.phase is not Phase.SETUP:
        raise GameInProgressError("Game has already started")
    return start_game(setup.players, setup.board.size)


def place_marker(state: GameState, row: int, col: int) -> MoveOutcome:
    """Human move. Raises an OmokError subclass if it cannot be played."""
    if state.phase is Phase.PLAYING and state.current_player.is_computer:
        raise NotYourTurnError(f"It is {state.current_player.name}'s turn")
    return apply_move(state, Point(row, col), reason="human")


def tick(
    state: GameState,
    rng: Optional[random.Random] = None,
    agent: Optional[Agent] = None,
) -> TickResult:
    """Advance the game by one second."""
    if state.phase is not Phase.PLAYING:
        return TickResult(remaining_seconds=state.clock.remaining_seconds)

    if state.current_player.is_computer:
        return _tick_computer(state, agent or _computer_agent)

    state.clock.remaining_seconds -= 1
    if state.clock.remaining_seconds > 0:
        return TickResult(remaining_seconds=state.clock.remaining_seconds)

    point = RandomAgent(rng).select_move(state)
    if point is None:
        finish(state, Outcome.DRAW)
        return TickResult(draw=True)
    logger.debug("Time ran out for %s, forcing %s", state.current_player.name, format_point(point))
    outcome = apply_move(state, point, reason="timeout")
    return TickResult(forced_move=outcome, remaining_seconds=state.clock.remaining_seconds)


def _tick_computer(state: GameState, agent: Agent) -> TickResult:
    timer = state.computer_timer
    if not timer.armed:
        return TickResult(remaining_seconds=state.clock.remaining_seconds)
    if timer.turn_number != state.turn_number:
        logger.debug("Dropping stale computer timer for turn %s", timer.turn_number)
        timer.disarm()
        return TickResult(remaining_seconds=state.clock.remaining_seconds)

    timer.remaining_seconds -= 1
    if timer.remaining_seconds > 0:
        return TickResult(remaining_seconds=state.clock.remaining_seconds)
    timer.disarm()

    point = agent.select_move(state)
    if point is None:
        finish(state, Outcome.DRAW)
        return TickResult(draw=True)
    logger.debug("%s (%s) chose %s", state.current_player.name, agent.name, format_point(point))
    outcome = apply_move(state, point, reason="computer")
    return TickResult(computer_move=outcome, remaining_seconds=state.clock.remaining_seconds)


def reset(state: Optional[GameState] = None) -> GameState:
    """Discard the game and return default setup. Valid from any phase."""
    if state is not None:
        state.computer_timer.disarm()
    logger.info("Game reset")
    return new_setup()


def extend_board(state: GameState, by: int) -> GameState:
    """Grow the board before play. A finished game goes back to setup."""
    if state.phase in (Phase.PLAYING, Phase.PAUSED):
        raise GameInProgressError("Cannot extend the board during a game")
    board = state.board.extend(by)
    players = [copy.copy(p) for p in state.players]
    for p in players:
        p.move_count = 0
    return GameState(board=board, players=players)
