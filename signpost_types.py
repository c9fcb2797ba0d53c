"""
Shared type definitions for the signpost system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Direction(IntEnum):
    """Arrow direction, numbered clockwise from northeast (north is increasing y)."""

    NONE = 0  # No arrow (last cell of the sequence)
    NE = 1
    E = 2
    SE = 3
    S = 4
    SW = 5
    W = 6
    NW = 7
    N = 8

    @property
    def delta(self) -> tuple[int, int]:
        """Unit step (dx, dy) for this direction."""
        return _DELTAS[self]

    @property
    def arrow(self) -> str:
        """Two-character ASCII glyph used on the text board."""
        return _ARROWS[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.NONE: (0, 0),
    Direction.NE: (1, 1),
    Direction.E: (1, 0),
    Direction.SE: (1, -1),
    Direction.S: (0, -1),
    Direction.SW: (-1, -1),
    Direction.W: (-1, 0),
    Direction.NW: (-1, 1),
    Direction.N: (0, 1),
}

_ARROWS = (" *", "NE", "E ", "SE", "S ", "SW", "W ", "NW", "N ")

_BY_DELTA = {delta: d for d, delta in _DELTAS.items() if d != Direction.NONE}


def dir_of(x0: int, y0: int, x1: int, y1: int) -> Direction:
    """
    Direction of a queen move from (x0, y0) to (x1, y1).

    Returns Direction.NONE if the points coincide or do not share a row,
    column or diagonal.
    """
    dx = x1 - x0
    dy = y1 - y0
    if dx == 0 and dy == 0:
        return Direction.NONE
    if dx != 0 and dy != 0 and abs(dx) != abs(dy):
        return Direction.NONE
    return _BY_DELTA[((dx > 0) - (dx < 0), (dy > 0) - (dy < 0))]


# =============================================================================
# Positions
# =============================================================================


@dataclass(frozen=True, order=True)
class Place:
    """A cell position (x, y) on the board."""

    x: int
    y: int

    def dir_of(self, other: Place) -> Direction:
        return dir_of(self.x, self.y, other.x, other.y)

    def move(self, direction: Direction, steps: int = 1) -> Place:
        """The place reached by moving `steps` cells in `direction`."""
        dx, dy = direction.delta
        return Place(self.x + dx * steps, self.y + dy * steps)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


PlaceList = tuple[Place, ...]


# =============================================================================
# Errors
# =============================================================================


class PuzzleConstructionError(ValueError):
    """Raised when a solution grid cannot describe a signpost puzzle."""


class FixedNumberError(ValueError):
    """
    Raised when a square cannot take the requested fixed number.

    The board is left exactly as it was before the call.
    """

    def __init__(self, message: str, *, place: Place | None = None, number: int | None = None) -> None:
        super().__init__(message)
        self.place = place
        self.number = number
