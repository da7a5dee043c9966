"""Play tab: up to three players on one board, optional computer seat."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

import gradio as gr

from omokparty.config import AVAILABLE_MARKERS, DEFAULT_BOARD_SIZE
from omokparty.game import engine
from omokparty.game.board import format_point, parse_coordinate
from omokparty.game.errors import OmokError
from omokparty.game.state import GameState
from omokparty.game.types import Outcome, Phase
from omokparty.ui.board_component import (
    TONE_LOSS,
    TONE_NEUTRAL,
    TONE_WIN,
    render_board_svg,
)

COMPUTER_SEAT = 2


@dataclass
class GameSession:
    """Per-tab game state held in gr.State."""

    game: GameState = field(default_factory=engine.new_setup)
    message: str = ""

    @property
    def game_over_banner(self) -> str:
        """Short text for the SVG overlay banner. Empty if game is not over."""
        g = self.game
        if not g.is_over:
            return ""
        if g.outcome is Outcome.WON:
            winner = g.player_by_id(g.winner)
            if winner.is_computer:
                return "Computer wins!"
            return f"{winner.name} wins!"
        return "Draw!"

    @property
    def game_over_tone(self) -> str:
        g = self.game
        if g.is_over and g.outcome is Outcome.WON:
            return TONE_LOSS if g.player_by_id(g.winner).is_computer else TONE_WIN
        return TONE_NEUTRAL

    @property
    def status_text(self) -> str:
        g = self.game
        if self.message:
            return self.message
        if g.phase is Phase.SETUP:
            return "Choose a marker for every player, then start."
        if g.phase is Phase.PAUSED:
            return "Paused."
        if g.is_over:
            if g.outcome is Outcome.WON:
                winner = g.player_by_id(g.winner)
                return f"Game over — {winner} wins with 5 in a row!"
            return "Game over — Draw!"
        player = g.current_player
        if player.is_computer:
            return f"{player} is thinking..."
        return f"{player}'s turn — {g.clock.remaining_seconds}s"

    @property
    def player_table(self) -> list[list[str]]:
        rows: list[list[str]] = []
        g = self.game
        for i, p in enumerate(g.players):
            active = g.phase is Phase.PLAYING and i == g.current_player_index
            timer = f"{g.clock.remaining_seconds}s" if active and not p.is_computer else ""
            rows.append([
                ("▶ " if active else "") + p.name,
                p.marker or "—",
                str(p.move_count),
                timer,
            ])
        return rows


def _outputs(session: GameSession):
    clickable = (
        session.game.phase is Phase.PLAYING
        and not session.game.current_player.is_computer
    )
    html = render_board_svg(
        session.game,
        clickable=clickable,
        game_over_message=session.game_over_banner,
        game_over_tone=session.game_over_tone,
    )
    return html, session.status_text, session.player_table, session


def _setup_from(game: GameState) -> GameState:
    """Fresh setup on the same board size, keeping names and seats."""
    players = [copy.copy(p) for p in game.players]
    for p in players:
        p.marker = None
        p.move_count = 0
    return engine.new_setup(players, game.board.size)


def _choose_markers(session: GameSession, markers: list[str], computer_seat: bool) -> None:
    g = session.game
    for player in g.players:
        player.marker = None
        player.is_computer = computer_seat and player.id == COMPUTER_SEAT
    for player, marker in zip(g.players, markers):
        if marker:
            engine.choose_marker(g, player.id, marker)


def _start_game(m1: str, m2: str, m3: str, computer_seat: bool, session: GameSession):
    session.message = ""
    if session.game.phase is not Phase.SETUP:
        session.game = _setup_from(session.game)
    try:
        _choose_markers(session, [m1, m2, m3], computer_seat)
        session.game = engine.start(session.game)
    except OmokError as e:
        session.message = e.message
    return _outputs(session)


def _apply_human_move(coord_text: str, session: GameSession):
    """Process a click or typed coordinate for the active human player."""
    session.message = ""
    point = parse_coordinate(coord_text, session.game.board.size)
    if point is None:
        session.message = f"Invalid coordinate: '{coord_text}'."
        return _outputs(session) + ("",)
    try:
        engine.place_marker(session.game, point.row, point.col)
    except OmokError as e:
        session.message = e.message
    return _outputs(session) + ("",)


def _on_tick(session: GameSession):
    result = engine.tick(session.game)
    if result.forced_move is not None:
        session.message = ""
        player = session.game.player_by_id(result.forced_move.player_id)
        gr.Info(f"Time's up: {player.name} played {format_point(result.forced_move.point)}")
    elif result.computer_move is not None:
        session.message = ""
    return _outputs(session)


def _toggle_pause(session: GameSession):
    session.message = ""
    try:
        if session.game.phase is Phase.PAUSED:
            engine.resume(session.game)
        else:
            engine.pause(session.game)
    except OmokError as e:
        session.message = e.message
    return _outputs(session)


def _reset(session: GameSession):
    session.game = engine.reset(session.game)
    session.message = ""
    return _outputs(session)


def _extend_board(by: float, session: GameSession):
    session.message = ""
    try:
        session.game = engine.extend_board(session.game, int(by or 0))
        session.message = f"Board is now {session.game.board.size}x{session.game.board.size}."
    except OmokError as e:
        session.message = e.message
    return _outputs(session)


def build_play_tab() -> None:
    """Construct the Play tab UI inside a gr.Blocks context."""

    initial = GameSession()
    session_state = gr.State(initial)

    with gr.Row():
        # Left: board
        with gr.Column(scale=3):
            board_html = gr.HTML(value=render_board_svg(initial.game), label="Board")
        # Right: controls
        with gr.Column(scale=1):
            status_text = gr.Textbox(
                value=initial.status_text,
                label="Status",
                interactive=False,
                lines=2,
            )
            player_table = gr.Dataframe(
                value=initial.player_table,
                headers=["Player", "Marker", "Moves", "Time"],
                datatype=["str", "str", "str", "str"],
                interactive=False,
                column_count=4,
            )

            gr.Markdown("### Setup")
            marker_inputs = [
                gr.Dropdown(choices=AVAILABLE_MARKERS, value=None, label=p.name)
                for p in initial.game.players
            ]
            computer_seat = gr.Checkbox(label="Computer plays Player 3", value=False)
            with gr.Row():
                extend_by = gr.Number(value=0, precision=0, label="Extend board by")
                extend_btn = gr.Button("Extend")
            start_btn = gr.Button("Start Game", variant="primary")

            with gr.Row():
                pause_btn = gr.Button("Pause / Resume")
                reset_btn = gr.Button("Reset", variant="stop")

            coord_input = gr.Textbox(
                label=f"Cell (e.g. F6 on a {DEFAULT_BOARD_SIZE}x{DEFAULT_BOARD_SIZE} board)",
                placeholder="F6",
                elem_id="coord-input",
                lines=1,
            )
            coord_submit = gr.Button("Place", elem_id="coord-submit")

    timer = gr.Timer(1.0)

    # Outputs shared by most callbacks
    board_outputs = [board_html, status_text, player_table, session_state]

    start_btn.click(
        fn=_start_game,
        inputs=marker_inputs + [computer_seat, session_state],
        outputs=board_outputs,
    )
    coord_submit.click(
        fn=_apply_human_move,
        inputs=[coord_input, session_state],
        outputs=board_outputs + [coord_input],
    )
    timer.tick(fn=_on_tick, inputs=[session_state], outputs=board_outputs)
    pause_btn.click(fn=_toggle_pause, inputs=[session_state], outputs=board_outputs)
    reset_btn.click(fn=_reset, inputs=[session_state], outputs=board_outputs)
    extend_btn.click(
        fn=_extend_board,
        inputs=[extend_by, session_state],
        outputs=board_outputs,
    )
