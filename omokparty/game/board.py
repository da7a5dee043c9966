from __future__ import annotations

import re
from typing import Optional

from omokparty.config import MIN_BOARD_SIZE

from .errors import (
    CellOccupiedError,
    InvalidExtensionError,
    InvalidSizeError,
    OutOfBoundsError,
)
from .types import PlayerId, Point

_COORD_RE = re.compile(r"^([A-Z]+)(\d+)$")


def column_label(index: int) -> str:
    """Spreadsheet-style column label: 0 -> 'A', 25 -> 'Z', 26 -> 'AA'."""
    label = ""
    index += 1
    while index > 0:
        index, rem = divmod(index - 1, 26)
        label = chr(ord("A") + rem) + label
    return label


def _column_index(label: str) -> int:
    index = 0
    for ch in label:
        index = index * 26 + (ord(ch) - ord("A") + 1)
    return index - 1


def parse_coordinate(text: str, size: int) -> Optional[Point]:
    """Parse a coordinate string like 'E5' or 'M12' into a Point.

    Column is a letter label, row is a number 1..size counted from the top.
    Returns None if the string is invalid or off a board of the given size.
    """
    match = _COORD_RE.match(text.strip().upper())
    if match is None:
        return None
    col = _column_index(match.group(1))
    row = int(match.group(2)) - 1
    if not (0 <= row < size and 0 <= col < size):
        return None
    return Point(row, col)


def format_point(point: Point) -> str:
    """Format a Point as a coordinate string like 'E5'."""
    return f"{column_label(point.col)}{point.row + 1}"


class Board:
    """Square board of cells, each empty or holding a player id."""

    def __init__(self, size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise InvalidSizeError(
                "Board size must be a positive integer", {"size": size}
            )
        self.size = size
        self._grid: dict[Point, PlayerId] = {}

    @classmethod
    def create(cls, size: int) -> Board:
        return cls(size)

    def place(self, row: int, col: int, player_id: PlayerId) -> None:
        point = Point(row, col)
        if not self.is_on_grid(point):
            raise OutOfBoundsError(
                f"({row}, {col}) is off the board", {"size": self.size}
            )
        if not self.is_empty(point):
            raise CellOccupiedError(f"{format_point(point)} is occupied")
        self._grid[point] = player_id

    def occupant_at(self, row: int, col: int) -> Optional[PlayerId]:
        return self._grid.get(Point(row, col))

    def get(self, point: Point) -> Optional[PlayerId]:
        return self._grid.get(point)

    def is_empty(self, point: Point) -> bool:
        return point not in self._grid

    def is_on_grid(self, point: Point) -> bool:
        return 0 <= point.row < self.size and 0 <= point.col < self.size

    def empty_cells(self) -> list[Point]:
        return [
            Point(r, c)
            for r in range(self.size)
            for c in range(self.size)
            if Point(r, c) not in self._grid
        ]

    def occupied_cells(self) -> list[Point]:
        return sorted(self._grid)

    @property
    def occupied_count(self) -> int:
        return len(self._grid)

    @property
    def is_full(self) -> bool:
        return len(self._grid) == self.size * self.size

    @property
    def fill_ratio(self) -> float:
        return len(self._grid) / (self.size * self.size)

    def extend(self, by: int) -> Board:
        """Return a fresh, empty board whose side is `by` cells longer."""
        new_size = self.size + by
        if by <= 0 or new_size <= MIN_BOARD_SIZE:
            raise InvalidExtensionError(
                f"Board must grow to more than {MIN_BOARD_SIZE} cells per side",
                {"size": self.size, "by": by},
            )
        return Board(new_size)
