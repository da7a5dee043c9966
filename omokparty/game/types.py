from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple, Optional

PlayerId = int


class Point(NamedTuple):
    row: int  # 0-indexed, 0 = top
    col: int  # 0-indexed, 0 = left


class Phase(enum.Enum):
    SETUP = "setup"
    PLAYING = "playing"
    PAUSED = "paused"
    OVER = "over"

    def __str__(self) -> str:
        return self.name.capitalize()


class Outcome(enum.Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class MoveResult(enum.Enum):
    CONTINUED = "continued"
    WON = "won"
    DRAW = "draw"


@dataclass
class Player:
    id: PlayerId
    name: str
    default_marker: str
    marker: Optional[str] = None  # chosen during setup
    move_count: int = 0
    is_computer: bool = False

    @property
    def display_marker(self) -> str:
        return self.marker or self.default_marker

    def __str__(self) -> str:
        return f"{self.name} {self.display_marker}"
