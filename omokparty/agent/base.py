from __future__ import annotations

import abc
from typing import Optional

from omokparty.game.state import GameState
from omokparty.game.types import Point


class Agent(abc.ABC):
    @abc.abstractmethod
    def select_move(self, game_state: GameState) -> Optional[Point]:
        """Return the cell this agent wants to play, or None if none is empty."""

    @property
    def name(self) -> str:
        return self.__class__.__name__
