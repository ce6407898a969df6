"""Hex lengths, distances and neighbor/direction queries."""

from __future__ import annotations

from typing import TypeVar

from .coords import Hex
from .directions import (
    DIAGONAL_COORDS,
    NEIGHBOR_COORDS,
    DiagonalDirection,
    Direction,
    diagonal_coord,
    neighbor_coord,
)

D = TypeVar("D", Direction, DiagonalDirection)


def _max_axis(x: int, y: int, z: int) -> int:
    if x >= y and x >= z:
        return x
    if y >= x and y >= z:
        return y
    return z


def length(h: Hex) -> int:
    """Distance from the origin, ``max(|x|, |y|, |z|)``."""

    a = abs(h)
    return _max_axis(a.x, a.y, abs(h.z))


def ulength(h: Hex) -> int:
    """Unsigned variant of :func:`length`; never negative."""

    return _max_axis(abs(h.x), abs(h.y), abs(h.z))


def distance_to(a: Hex, b: Hex) -> int:
    return length(a - b)


def unsigned_distance_to(a: Hex, b: Hex) -> int:
    return ulength(a - b)


def neighbor(h: Hex, direction: Direction) -> Hex:
    return h + neighbor_coord(direction)


def diagonal_neighbor(h: Hex, direction: DiagonalDirection) -> Hex:
    return h + diagonal_coord(direction)


def neighbor_direction(h: Hex, other: Hex) -> Direction | None:
    """Return the direction leading from ``h`` to ``other``.

    ``None`` when the two coordinates are not adjacent.
    """

    for direction in Direction:
        if neighbor(h, direction) == other:
            return direction
    return None


def _wedge(x: int, y: int, z: int, axes: tuple[D, D, D]) -> D:
    # Ties go to the first axis in (x, y, z) order.
    xa, ya, za = abs(x), abs(y), abs(z)
    top = max(xa, ya, za)
    if top == xa:
        value, direction = x, axes[0]
    elif top == ya:
        value, direction = y, axes[1]
    else:
        value, direction = z, axes[2]
    return -direction if value < 0 else direction


_DIRECTION_AXES = (Direction.BOTTOM_LEFT, Direction.TOP, Direction.BOTTOM_RIGHT)
_DIAGONAL_AXES = (
    DiagonalDirection.RIGHT,
    DiagonalDirection.BOTTOM_LEFT,
    DiagonalDirection.TOP_LEFT,
)


def direction_to(a: Hex, b: Hex) -> Direction:
    """Return the :class:`Direction` wedge that ``b`` lies in, seen from ``a``.

    The cubic offset ``b - a`` is rotated by 30 degrees to ``(y - x, z - y,
    x - z)`` so each axis points at the middle of an edge wedge. ``a == b``
    falls on the first axis and yields ``Direction.BOTTOM_LEFT``.
    """

    x, y, z = (b - a).to_cubic()
    return _wedge(y - x, z - y, x - z, _DIRECTION_AXES)


def diagonal_to(a: Hex, b: Hex) -> DiagonalDirection:
    """Return the :class:`DiagonalDirection` wedge that ``b`` lies in, seen from ``a``."""

    x, y, z = (b - a).to_cubic()
    return _wedge(x, y, z, _DIAGONAL_AXES)


def all_neighbors(h: Hex) -> tuple[Hex, ...]:
    return tuple(h + offset for offset in NEIGHBOR_COORDS)


def all_diagonals(h: Hex) -> tuple[Hex, ...]:
    return tuple(h + offset for offset in DIAGONAL_COORDS)


__all__ = [
    "all_diagonals",
    "all_neighbors",
    "diagonal_neighbor",
    "diagonal_to",
    "direction_to",
    "distance_to",
    "length",
    "neighbor",
    "neighbor_direction",
    "ulength",
    "unsigned_distance_to",
]
