"""
omokparty error hierarchy.

Every engine failure is local and recoverable: the caller reports the
message and carries on. All errors inherit from OmokError so the UI can catch
them in one place.

Usage:
    from omokparty.game.errors import OmokError

    try:
        engine.place_marker(state, row, col)
    except OmokError as e:
        status = e.message
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "CellOccupiedError",
    "GameInProgressError",
    "GamePausedError",
    "IncompleteSetupError",
    "InvalidExtensionError",
    "InvalidMarkerError",
    "InvalidPlayersError",
    "InvalidSizeError",
    "MarkerTakenError",
    "NotPlayingError",
    "NotYourTurnError",
    "OmokError",
    "OutOfBoundsError",
]


class OmokError(Exception):
    """Base exception for all engine errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "OMOK_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Board errors
# =============================================================================


class InvalidSizeError(OmokError):
    code = "INVALID_SIZE"


class OutOfBoundsError(OmokError):
    code = "OUT_OF_BOUNDS"


class CellOccupiedError(OmokError):
    code = "CELL_OCCUPIED"


class InvalidExtensionError(OmokError):
    """Extension amount not positive, or the resulting board is too small."""
    code = "INVALID_EXTENSION"


# =============================================================================
# Phase / turn errors
# =============================================================================


class GameInProgressError(OmokError):
    """Operation only allowed before a game starts."""
    code = "GAME_IN_PROGRESS"


class NotPlayingError(OmokError):
    code = "NOT_PLAYING"


class GamePausedError(OmokError):
    code = "PAUSED"


class NotYourTurnError(OmokError):
    """A human tried to move while the computer player is active."""
    code = "NOT_YOUR_TURN"


# =============================================================================
# Setup errors
# =============================================================================


class IncompleteSetupError(OmokError):
    """No players were given, or a human player has not chosen a marker."""
    code = "INCOMPLETE_SETUP"


class MarkerTakenError(OmokError):
    code = "MARKER_TAKEN"


class InvalidMarkerError(OmokError):
    code = "INVALID_MARKER"


class InvalidPlayersError(OmokError):
    """Player list cannot form a game, e.g. two players share an id."""
    code = "INVALID_PLAYERS"
