"""omokparty — Gradio web app entry point."""

import logging

import gradio as gr

from omokparty.ui.board_component import BOARD_CLICK_JS
from omokparty.ui.play_tab import build_play_tab

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

with gr.Blocks(title="omokparty") as demo:
    gr.Markdown("# omokparty")
    gr.Markdown(
        "Three players, one board, 5 in a row to win. "
        "Run out of time and a random cell is played for you."
    )

    with gr.Tab("Play"):
        build_play_tab()

    # Bind board click handler JS on page load
    demo.load(fn=None, js=BOARD_CLICK_JS)

if __name__ == "__main__":
    demo.launch(theme=gr.themes.Soft())
