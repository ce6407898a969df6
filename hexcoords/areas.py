"""Lines, filled ranges and wraparound folding over hex coordinates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterator, Sequence

from .coords import Hex, hex_round
from .directions import Direction
from .errors import WraparoundError
from .metrics import distance_to, neighbor_direction, ulength
from .transforms import left, right

logger = logging.getLogger(__name__)


def lerp(a: Hex, b: Hex, s: float) -> Hex:
    """Interpolate between ``a`` and ``b`` and round to the nearest hex.

    ``s`` outside ``[0, 1]`` extrapolates along the same line.
    """

    start = a.as_vec2()
    point = start + (b.as_vec2() - start) * s
    return hex_round((float(point[0]), float(point[1])))


@dataclass(frozen=True, slots=True)
class HexLine:
    """Inclusive straight line of hexes from ``start`` to ``end``."""

    start: Hex
    end: Hex

    def __len__(self) -> int:
        return distance_to(self.start, self.end) + 1

    def __iter__(self) -> Iterator[Hex]:
        distance = distance_to(self.start, self.end)
        if distance == 0:
            yield self.start
            return
        for step in range(distance + 1):
            yield lerp(self.start, self.end, step / distance)


def line_to(a: Hex, b: Hex) -> HexLine:
    return HexLine(a, b)


def directions_to(a: Hex, b: Hex) -> Iterator[Direction]:
    """Yield the step directions walked along :func:`line_to`."""

    for current, nxt in pairwise(line_to(a, b)):
        direction = neighbor_direction(current, nxt)
        if direction is not None:
            yield direction


def _check_radius(radius: int) -> None:
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")


def range_count(radius: int) -> int:
    """Number of hexes within ``radius`` of any center: ``3r(r + 1) + 1``."""

    _check_radius(radius)
    return 3 * radius * (radius + 1) + 1


@dataclass(frozen=True, slots=True)
class HexRange:
    """Every hex within ``radius`` of ``center``, x-major then y ascending."""

    center: Hex
    radius: int

    def __post_init__(self) -> None:
        _check_radius(self.radius)

    def __len__(self) -> int:
        return range_count(self.radius)

    def __iter__(self) -> Iterator[Hex]:
        r = self.radius
        for dx in range(-r, r + 1):
            for dy in range(max(-r, -dx - r), min(r, r - dx) + 1):
                yield self.center + Hex(dx, dy)


def hex_range(center: Hex, radius: int) -> HexRange:
    return HexRange(center, radius)


def wraparound_mirrors(radius: int) -> tuple[Hex, ...]:
    """Return the six mirror centers of the origin for a map of ``radius``.

    Each mirror sits ``2 * radius + 1`` steps away from the origin, one per
    rotation of the base mirror ``(2r + 1, -r)``.
    """

    _check_radius(radius)
    mirror = Hex(2 * radius + 1, -radius)
    turned_left, turned_right = left(mirror), right(mirror)
    return (
        turned_left,
        mirror,
        turned_right,
        -turned_left,
        -mirror,
        -turned_right,
    )


def wrap_with(
    h: Hex,
    radius: int,
    mirrors: Sequence[Hex],
    *,
    max_steps: int | None = None,
) -> Hex:
    """Fold ``h`` back into the range of ``radius`` around the origin.

    The nearest of ``mirrors`` is subtracted until ``h`` lies within range.
    Every subtraction must shorten ``h``; a step that does not, or running
    past ``max_steps`` (default: the starting length, which bounds any
    strictly shortening walk), raises :class:`WraparoundError`.
    """

    _check_radius(radius)
    current_length = ulength(h)
    if current_length <= radius:
        return h
    if len(mirrors) != 6:
        raise ValueError(f"expected 6 mirrors, got {len(mirrors)}")
    limit = current_length if max_steps is None else max_steps
    result = h
    steps = 0
    while current_length > radius:
        if steps >= limit:
            logger.error("wrap of %s in radius %d exceeded %d steps", h, radius, limit)
            raise WraparoundError(f"wrapping {h} in radius {radius} exceeded {limit} steps")
        mirror = min(mirrors, key=lambda m: distance_to(result, m))
        result = result - mirror
        next_length = ulength(result)
        if next_length >= current_length:
            logger.error("mirror %s did not shorten %s (radius %d)", mirror, result + mirror, radius)
            raise WraparoundError(f"mirror {mirror} did not bring {h} closer to radius {radius}")
        current_length = next_length
        steps += 1
    logger.debug("wrapped %s to %s in %d steps", h, result, steps)
    return result


def wrap_in_range(h: Hex, radius: int) -> Hex:
    """Fold ``h`` into the range of ``radius`` using the canonical mirrors."""

    return wrap_with(h, radius, wraparound_mirrors(radius))


__all__ = [
    "HexLine",
    "HexRange",
    "directions_to",
    "hex_range",
    "lerp",
    "line_to",
    "range_count",
    "wrap_in_range",
    "wrap_with",
    "wraparound_mirrors",
]
