"""Tests for the priority-ladder computer player."""

import pytest

from omokparty.agent.heuristic_agent import (
    PRIORITY_LADDER,
    HeuristicAgent,
    nearest_to_center,
    score_cells,
)
from omokparty.game import engine
from omokparty.game.types import Point

HUMAN_A, HUMAN_B, COMPUTER = 0, 1, 2


def _computer_to_move(size=12):
    """Started game with seat 3 computer-controlled and on turn."""
    players = engine.default_players()
    players[0].marker = "🚀"
    players[1].marker = "🍕"
    players[2].is_computer = True
    g = engine.start_game(players, size)
    g.current_player_index = COMPUTER
    return g


def _put(g, player_id, cells):
    for r, c in cells:
        g.board.place(r, c, player_id)


@pytest.fixture
def agent():
    return HeuristicAgent()


# ---------------------------------------------------------------------------
# Fallback: nearest to centre
# ---------------------------------------------------------------------------

class TestCenterFallback:
    def test_empty_even_board_takes_first_central_cell(self, agent):
        g = _computer_to_move(12)
        assert agent.select_move(g) == Point(5, 5)

    def test_empty_odd_board_takes_exact_center(self, agent):
        g = _computer_to_move(13)
        assert agent.select_move(g) == Point(6, 6)

    def test_occupied_center_moves_to_next_nearest(self, agent):
        g = _computer_to_move(13)
        _put(g, HUMAN_A, [(6, 6)])
        # (5,6) is the first distance-1 cell in row-major order
        assert agent.select_move(g) == Point(5, 6)

    def test_nearest_to_center_ties_break_row_major(self):
        pts = [Point(0, 0), Point(5, 6), Point(6, 5), Point(6, 6)]
        assert nearest_to_center(pts, 12) == Point(5, 6)


# ---------------------------------------------------------------------------
# Priority ladder
# ---------------------------------------------------------------------------

class TestLadder:
    def test_ladder_order(self):
        assert PRIORITY_LADDER == [
            ("own", 5), ("opponent", 5), ("opponent", 4),
            ("own", 4), ("opponent", 3), ("own", 3),
        ]

    def test_own_win_outranks_blocking_opponent_win(self, agent):
        g = _computer_to_move()
        _put(g, COMPUTER, [(3, 0), (3, 1), (3, 2), (3, 3)])
        _put(g, HUMAN_A, [(8, 5), (8, 6), (8, 7), (8, 8)])
        assert agent.select_move(g) == Point(3, 4)

    def test_blocks_opponent_win_when_it_cannot_win(self, agent):
        g = _computer_to_move()
        _put(g, HUMAN_A, [(8, 5), (8, 6), (8, 7), (8, 8)])
        assert agent.select_move(g) == Point(8, 4)

    def test_blocks_any_opponent(self, agent):
        g = _computer_to_move()
        _put(g, HUMAN_B, [(2, 9), (3, 9), (4, 9), (5, 9)])
        assert agent.select_move(g) == Point(1, 9)

    def test_block_four_outranks_own_four(self, agent):
        g = _computer_to_move()
        _put(g, COMPUTER, [(2, 2), (2, 3), (2, 4)])
        _put(g, HUMAN_A, [(8, 5), (8, 6), (8, 7)])
        assert agent.select_move(g) == Point(8, 4)

    def test_own_four_outranks_blocking_three(self, agent):
        g = _computer_to_move()
        _put(g, COMPUTER, [(2, 2), (2, 3), (2, 4)])
        _put(g, HUMAN_A, [(8, 5), (8, 6)])
        assert agent.select_move(g) == Point(2, 1)

    def test_block_three_outranks_own_three(self, agent):
        g = _computer_to_move()
        _put(g, COMPUTER, [(2, 2), (2, 3)])
        _put(g, HUMAN_A, [(8, 5), (8, 6)])
        assert agent.select_move(g) == Point(8, 4)

    def test_own_three(self, agent):
        g = _computer_to_move()
        _put(g, COMPUTER, [(2, 2), (2, 3)])
        assert agent.select_move(g) == Point(2, 1)

    def test_singletons_fall_back_to_center(self, agent):
        g = _computer_to_move()
        _put(g, HUMAN_A, [(0, 0)])
        _put(g, COMPUTER, [(11, 11)])
        assert agent.select_move(g) == Point(5, 5)


class TestSelection:
    def test_none_when_board_full(self, agent):
        g = _computer_to_move()
        for p in g.board.empty_cells():
            g.board.place(p.row, p.col, 99)
        assert agent.select_move(g) is None

    def test_does_not_mutate_board(self, agent):
        g = _computer_to_move()
        _put(g, HUMAN_A, [(8, 5), (8, 6), (8, 7)])
        agent.select_move(g)
        assert g.board.occupied_count == 3

    def test_score_cells_covers_every_empty_cell(self):
        g = _computer_to_move()
        _put(g, HUMAN_A, [(8, 5), (8, 6), (8, 7)])
        scores = score_cells(g, COMPUTER)
        assert len(scores) == 144 - 3
        by_point = {s.point: s for s in scores}
        assert by_point[Point(8, 4)].opponent == 4
        assert by_point[Point(8, 4)].own == 1

    def test_name(self, agent):
        assert agent.name == "HeuristicAgent"
