from __future__ import annotations

import random
from typing import Optional

from omokparty.game.state import GameState
from omokparty.game.types import Point

from .base import Agent


class RandomAgent(Agent):
    """Uniformly random empty cell. Used for moves forced by the countdown."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def select_move(self, game_state: GameState) -> Optional[Point]:
        cells = game_state.board.empty_cells()
        if not cells:
            return None
        return self.rng.choice(cells)
