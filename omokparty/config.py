"""Configuration constants used across omokparty."""

from __future__ import annotations

# Board
DEFAULT_BOARD_SIZE: int = 12
MIN_BOARD_SIZE: int = 12  # extension must produce a board strictly larger than this
WIN_LENGTH: int = 5

# Turn countdown, in seconds; speeds up once the board is half full
NORMAL_TURN_SECONDS: int = 20
FAST_TURN_SECONDS: int = 5
FAST_FILL_RATIO: float = 0.5

# "Thinking time" before the computer player's move is applied
COMPUTER_MOVE_DELAY_SECONDS: int = 2

# (name, default marker, computer-controlled)
DEFAULT_PLAYERS: list[tuple[str, str, bool]] = [
    ("Player 1", "🔴", False),
    ("Player 2", "🔵", False),
    ("Player 3", "🟢", False),
]

AVAILABLE_MARKERS: list[str] = [
    "😀", "😂", "🥳", "😎", "🤩", "🚀", "🌟", "🌈", "🍕", "🍔",
    "🍩", "🍦", "🍓", "🍎", "⚽", "🏀", "🏈", "🎲", "🧩", "🏆",
]
