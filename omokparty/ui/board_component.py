"""SVG board renderer + JavaScript click handler for Gradio."""

from __future__ import annotations

from typing import Optional

from omokparty.game.board import column_label, format_point
from omokparty.game.state import GameState
from omokparty.game.types import Phase, Point

# Layout constants
BOARD_PX = 600
MARGIN = 30

# Colors
BG_COLOR = "#1E293B"
CELL_COLOR = "rgba(255, 255, 255, 0.18)"
LABEL_COLOR = "#E2E8F0"
LAST_MOVE_COLOR = "#FACC15"
WIN_COLOR = "#4ADE80"
LOSS_COLOR = "#F87171"
NEUTRAL_COLOR = "#FFFFFF"

# Game-over banner tones
TONE_WIN = "win"
TONE_LOSS = "loss"
TONE_NEUTRAL = "neutral"
_TONE_COLORS = {TONE_WIN: WIN_COLOR, TONE_LOSS: LOSS_COLOR, TONE_NEUTRAL: NEUTRAL_COLOR}


def _cell_px(size: int) -> float:
    return (BOARD_PX - 2 * MARGIN) / size


def _coord(row: int, col: int, size: int) -> tuple[float, float]:
    """Top-left pixel corner of a cell."""
    cell = _cell_px(size)
    return MARGIN + col * cell, MARGIN + row * cell


def _banner(message: str, tone: str) -> list[str]:
    color = _TONE_COLORS.get(tone, NEUTRAL_COLOR)
    mid = BOARD_PX / 2
    return [
        f'<rect x="0" y="{mid - 40}" width="{BOARD_PX}" height="80" '
        f'fill="rgba(0, 0, 0, 0.6)"/>',
        f'<text x="{mid}" y="{mid + 12}" text-anchor="middle" font-size="36" '
        f'font-family="sans-serif" font-weight="bold" fill="{color}">{message}</text>',
    ]


def render_board_svg(
    game_state: GameState,
    clickable: bool = True,
    highlight_last: bool = True,
    game_over_message: str = "",
    game_over_tone: str = TONE_NEUTRAL,
) -> str:
    """Render the board as an SVG string.

    game_over_tone picks the banner colour and is one of the TONE_* values.
    """
    board = game_state.board
    size = board.size
    cell = _cell_px(size)
    font = int(cell * 0.6)
    parts: list[str] = []

    parts.append(
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{BOARD_PX}" height="{BOARD_PX}" '
        f'viewBox="0 0 {BOARD_PX} {BOARD_PX}" '
        f'id="omok-board">'
    )
    parts.append(f'<rect width="{BOARD_PX}" height="{BOARD_PX}" fill="{BG_COLOR}" rx="16"/>')

    # Column labels (top) and row labels (left)
    for i in range(size):
        x, _ = _coord(0, i, size)
        parts.append(
            f'<text x="{x + cell / 2:.1f}" y="{MARGIN - 10}" text-anchor="middle" '
            f'font-size="12" font-family="monospace" fill="{LABEL_COLOR}">'
            f'{column_label(i)}</text>'
        )
        _, y = _coord(i, 0, size)
        parts.append(
            f'<text x="{MARGIN / 2}" y="{y + cell / 2 + 4:.1f}" text-anchor="middle" '
            f'font-size="12" font-family="monospace" fill="{LABEL_COLOR}">'
            f'{i + 1}</text>'
        )

    last_point: Optional[Point] = None
    if game_state.moves:
        last_point = game_state.moves[-1].point

    markers = {p.id: p.display_marker for p in game_state.players}
    can_click = clickable and game_state.phase is Phase.PLAYING

    for r in range(size):
        for c in range(size):
            pt = Point(r, c)
            x, y = _coord(r, c, size)
            stroke = LAST_MOVE_COLOR if highlight_last and pt == last_point else "none"
            parts.append(
                f'<rect x="{x + 1:.1f}" y="{y + 1:.1f}" width="{cell - 2:.1f}" '
                f'height="{cell - 2:.1f}" rx="6" fill="{CELL_COLOR}" '
                f'stroke="{stroke}" stroke-width="3"/>'
            )
            occupant = board.get(pt)
            if occupant is not None:
                parts.append(
                    f'<text x="{x + cell / 2:.1f}" y="{y + cell / 2 + font / 3:.1f}" '
                    f'text-anchor="middle" font-size="{font}">{markers[occupant]}</text>'
                )
            elif can_click:
                coord_str = format_point(pt)
                parts.append(
                    f'<rect x="{x:.1f}" y="{y:.1f}" width="{cell:.1f}" height="{cell:.1f}" '
                    f'fill="transparent" class="board-click" '
                    f'data-coord="{coord_str}" style="cursor:pointer">'
                    f'<title>{coord_str}</title></rect>'
                )

    if game_over_message:
        parts.extend(_banner(game_over_message, game_over_tone))

    parts.append("</svg>")
    parts.append(f"<script>{CLICK_HANDLER}</script>")
    return "\n".join(parts)


# Writes the clicked coordinate into the hidden Gradio Textbox and presses
# the submit button.
CLICK_HANDLER = """
(function() {
    if (window._omokClickBound) return;
    window._omokClickBound = true;

    document.addEventListener('click', function(e) {
        const cell = e.target.closest('.board-click');
        if (!cell) return;
        const coord = cell.getAttribute('data-coord');
        if (!coord) return;

        const container = document.querySelector('#coord-input textarea, #coord-input input');
        if (!container) return;
        const nativeSetter = Object.getOwnPropertyDescriptor(
            window.HTMLInputElement.prototype, 'value'
        )?.set || Object.getOwnPropertyDescriptor(
            window.HTMLTextAreaElement.prototype, 'value'
        )?.set;
        if (nativeSetter) {
            nativeSetter.call(container, coord);
        } else {
            container.value = coord;
        }
        container.dispatchEvent(new Event('input', { bubbles: true }));
        const btn = document.querySelector('#coord-submit');
        if (btn) btn.click();
    });
})();
"""

# Same handler, in the `() => {...}` form gr.Blocks.load(js=...) expects.
BOARD_CLICK_JS = "() => {" + CLICK_HANDLER + "}"
