from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .board import Board, format_point
from .types import MoveResult, Outcome, Phase, Player, PlayerId, Point


@dataclass
class TurnClock:
    remaining_seconds: int = 0
    speed_seconds: int = 0


@dataclass
class ComputerTimer:
    """One-shot delay before the computer's move; armed for a single turn."""

    remaining_seconds: int = 0
    turn_number: Optional[int] = None

    @property
    def armed(self) -> bool:
        return self.turn_number is not None

    def arm(self, seconds: int, turn_number: int) -> None:
        self.remaining_seconds = seconds
        self.turn_number = turn_number

    def disarm(self) -> None:
        self.remaining_seconds = 0
        self.turn_number = None


@dataclass
class Move:
    point: Point
    player_id: PlayerId
    reason: str = "human"  # "human", "timeout" or "computer"

    def __str__(self) -> str:
        return f"{self.player_id}: {format_point(self.point)}"


@dataclass
class MoveOutcome:
    result: MoveResult
    point: Point
    player_id: PlayerId
    move_count: int


@dataclass
class TickResult:
    forced_move: Optional[MoveOutcome] = None  # countdown ran out on a human
    computer_move: Optional[MoveOutcome] = None
    draw: bool = False  # no empty cell was left to move into
    remaining_seconds: int = 0

    @property
    def moved(self) -> bool:
        return self.forced_move is not None or self.computer_move is not None


@dataclass
class GameState:
    """Full state of one game. Mutated only through the engine."""

    board: Board
    players: list[Player]
    current_player_index: int = 0
    outcome: Outcome = Outcome.IN_PROGRESS
    winner: Optional[PlayerId] = None
    phase: Phase = Phase.SETUP
    clock: TurnClock = field(default_factory=TurnClock)
    computer_timer: ComputerTimer = field(default_factory=ComputerTimer)
    turn_number: int = 0
    moves: list[Move] = field(default_factory=list)

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.OVER

    @property
    def is_draw(self) -> bool:
        return self.outcome is Outcome.DRAW

    def player_by_id(self, player_id: PlayerId) -> Player:
        for player in self.players:
            if player.id == player_id:
                return player
        raise KeyError(player_id)
