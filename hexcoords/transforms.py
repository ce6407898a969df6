"""Rotations and reflections of hex coordinates.

Rotations form a cyclic group of order 6. ``left`` turns by -60 degrees
(counter clockwise) and ``right`` by +60 degrees; every other rotation is
looked up from the six group elements instead of being applied step by step.
"""

from __future__ import annotations

from typing import Callable

from .coords import ORIGIN, Hex


def left(h: Hex) -> Hex:
    return Hex(-h.z, -h.x)


def right(h: Hex) -> Hex:
    return Hex(-h.y, -h.z)


def _negate(h: Hex) -> Hex:
    return -h


def _identity(h: Hex) -> Hex:
    return h


_LEFT_TURNS: tuple[Callable[[Hex], Hex], ...] = (
    _identity,
    left,
    lambda h: left(left(h)),
    _negate,
    lambda h: right(right(h)),
    right,
)


def rotate_left(h: Hex, m: int) -> Hex:
    """Rotate ``h`` counter clockwise around the origin by ``60 * m`` degrees."""

    return _LEFT_TURNS[m % 6](h)


def rotate_right(h: Hex, m: int) -> Hex:
    """Rotate ``h`` clockwise around the origin by ``60 * m`` degrees."""

    return _LEFT_TURNS[-m % 6](h)


def left_around(h: Hex, center: Hex = ORIGIN) -> Hex:
    return left(h - center) + center


def right_around(h: Hex, center: Hex = ORIGIN) -> Hex:
    return right(h - center) + center


def rotate_left_around(h: Hex, center: Hex, m: int) -> Hex:
    return rotate_left(h - center, m) + center


def rotate_right_around(h: Hex, center: Hex, m: int) -> Hex:
    return rotate_right(h - center, m) + center


def reflect_x(h: Hex) -> Hex:
    """Mirror ``h`` across the x axis (swaps ``y`` and ``z``)."""

    return Hex(h.x, h.z)


def reflect_y(h: Hex) -> Hex:
    """Mirror ``h`` across the y axis (swaps ``x`` and ``z``)."""

    return Hex(h.z, h.y)


def reflect_z(h: Hex) -> Hex:
    """Mirror ``h`` across the z axis (swaps ``x`` and ``y``)."""

    return Hex(h.y, h.x)


__all__ = [
    "left",
    "left_around",
    "reflect_x",
    "reflect_y",
    "reflect_z",
    "right",
    "right_around",
    "rotate_left",
    "rotate_left_around",
    "rotate_right",
    "rotate_right_around",
]
