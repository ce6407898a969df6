"""The two closed sets of hex directions and their offset tables.

``NEIGHBOR_COORDS`` and ``DIAGONAL_COORDS`` are indexed by the ordinal of
the matching enumeration member; the ordering is load-bearing::

               x axis
               ___
              /   \\
          +--+  1  +--+
         / 2  \\___/  0 \\
         \\    /   \\    /
          +--+     +--+
         /    \\___/    \\
         \\ 3  /   \\  5 /
          +--+  4  +--+   y axis
              \\___/
"""

from __future__ import annotations

from enum import Enum

from .coords import Hex


class Direction(Enum):
    """The six edge-sharing neighbor directions."""

    TOP_RIGHT = 0
    TOP = 1
    TOP_LEFT = 2
    BOTTOM_LEFT = 3
    BOTTOM = 4
    BOTTOM_RIGHT = 5

    @property
    def index(self) -> int:
        return self.value

    def __neg__(self) -> Direction:
        return Direction((self.value + 3) % 6)


class DiagonalDirection(Enum):
    """The six vertex directions, rotated 30 degrees from :class:`Direction`."""

    RIGHT = 0
    TOP_RIGHT = 1
    TOP_LEFT = 2
    LEFT = 3
    BOTTOM_LEFT = 4
    BOTTOM_RIGHT = 5

    @property
    def index(self) -> int:
        return self.value

    def __neg__(self) -> DiagonalDirection:
        return DiagonalDirection((self.value + 3) % 6)


NEIGHBOR_COORDS: tuple[Hex, ...] = (
    Hex(1, -1),
    Hex(0, -1),
    Hex(-1, 0),
    Hex(-1, 1),
    Hex(0, 1),
    Hex(1, 0),
)

DIAGONAL_COORDS: tuple[Hex, ...] = (
    Hex(2, -1),
    Hex(1, -2),
    Hex(-1, -1),
    Hex(-2, 1),
    Hex(-1, 2),
    Hex(1, 1),
)


def neighbor_coord(direction: Direction) -> Hex:
    return NEIGHBOR_COORDS[direction.index]


def diagonal_coord(direction: DiagonalDirection) -> Hex:
    return DIAGONAL_COORDS[direction.index]


__all__ = [
    "DIAGONAL_COORDS",
    "DiagonalDirection",
    "Direction",
    "NEIGHBOR_COORDS",
    "diagonal_coord",
    "neighbor_coord",
]
