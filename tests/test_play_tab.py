from omokparty.game.types import Outcome, Phase
from omokparty.ui.board_component import LOSS_COLOR, WIN_COLOR
from omokparty.ui.play_tab import (
    GameSession,
    _outputs,
    _apply_human_move,
    _extend_board,
    _on_tick,
    _reset,
    _start_game,
    _toggle_pause,
)


def _started(computer=False):
    session = GameSession()
    _start_game("🚀", "🍕", None if computer else "🎲", computer, session)
    return session


def test_new_session_is_in_setup():
    session = GameSession()
    assert session.game.phase is Phase.SETUP
    assert "Choose a marker" in session.status_text


def test_start_game():
    session = _started()
    assert session.game.phase is Phase.PLAYING
    assert "Player 1" in session.status_text
    assert "20s" in session.status_text


def test_start_game_missing_marker():
    session = GameSession()
    result = _start_game("🚀", None, "🎲", False, session)
    assert session.game.phase is Phase.SETUP
    assert "must choose a marker" in result[1]


def test_start_game_duplicate_marker():
    session = GameSession()
    _start_game("🚀", "🚀", "🎲", False, session)
    assert session.game.phase is Phase.SETUP
    assert "already taken" in session.status_text


def test_start_with_computer_seat():
    session = _started(computer=True)
    assert session.game.phase is Phase.PLAYING
    assert session.game.players[2].is_computer
    assert session.game.players[2].marker == "🟢"


def test_restart_after_game_over():
    session = _started()
    session.game.phase = Phase.OVER
    _start_game("🍩", "🍕", "🎲", False, session)
    assert session.game.phase is Phase.PLAYING
    assert session.game.players[0].marker == "🍩"


def test_human_move():
    session = _started()
    result = _apply_human_move("F6", session)
    assert session.game.board.occupant_at(5, 5) == 0
    assert result[-1] == ""  # coordinate box cleared
    assert session.player_table[0][2] == "1"


def test_invalid_coordinate():
    session = _started()
    _apply_human_move("Z99", session)
    assert "Invalid coordinate" in session.status_text
    assert session.game.board.occupied_count == 0


def test_occupied_cell_message():
    session = _started()
    _apply_human_move("F6", session)
    _apply_human_move("F6", session)
    assert "occupied" in session.status_text


def test_tick_counts_down():
    session = _started()
    _on_tick(session)
    assert "19s" in session.status_text
    assert session.player_table[0][3] == "19s"


def test_toggle_pause():
    session = _started()
    _toggle_pause(session)
    assert session.game.phase is Phase.PAUSED
    assert session.status_text == "Paused."
    _toggle_pause(session)
    assert session.game.phase is Phase.PLAYING


def test_toggle_pause_in_setup_reports_error():
    session = GameSession()
    _toggle_pause(session)
    assert session.game.phase is Phase.SETUP
    assert "paused" in session.status_text


def test_extend_board():
    session = GameSession()
    _extend_board(2, session)
    assert session.game.board.size == 14
    assert "14x14" in session.status_text
    _extend_board(0, session)
    assert session.game.board.size == 14
    assert "more than 12" in session.status_text


def test_reset():
    session = _started()
    _apply_human_move("F6", session)
    _reset(session)
    assert session.game.phase is Phase.SETUP
    assert session.game.board.occupied_count == 0


def test_player_table_marks_active_player():
    session = _started()
    table = session.player_table
    assert table[0][0].startswith("▶")
    assert not table[1][0].startswith("▶")


def test_game_over_banner_win():
    session = _started()
    session.game.phase = Phase.OVER
    session.game.outcome = Outcome.WON
    session.game.winner = 1
    assert session.game_over_banner == "Player 2 wins!"


def test_game_over_banner_computer():
    session = _started(computer=True)
    session.game.phase = Phase.OVER
    session.game.outcome = Outcome.WON
    session.game.winner = 2
    assert session.game_over_banner == "Computer wins!"


def test_game_over_banner_draw():
    session = _started()
    session.game.phase = Phase.OVER
    session.game.outcome = Outcome.DRAW
    assert session.game_over_banner == "Draw!"


def test_game_over_banner_empty_when_playing():
    assert _started().game_over_banner == ""


def test_human_named_computer_gets_win_color():
    session = _started()
    session.game.players[0].name = "Computer Bob"
    session.game.phase = Phase.OVER
    session.game.outcome = Outcome.WON
    session.game.winner = 0
    assert session.game_over_banner == "Computer Bob wins!"
    html = _outputs(session)[0]
    assert WIN_COLOR in html
    assert LOSS_COLOR not in html


def test_computer_win_gets_loss_color():
    session = _started(computer=True)
    session.game.phase = Phase.OVER
    session.game.outcome = Outcome.WON
    session.game.winner = 2
    assert LOSS_COLOR in _outputs(session)[0]
