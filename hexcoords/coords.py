"""Axial hex coordinates and the arithmetic defined on them."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from .errors import HexInvariantError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Hex:
    """Hexagonal axial coordinate.

    Only ``x`` (``q``) and ``y`` (``r``) are stored. The third cubic axis
    ``z`` (``s``) is always derived as ``-x - y`` so the cubic invariant
    ``x + y + z == 0`` holds for every instance by construction.
    """

    x: int
    y: int

    @classmethod
    def splat(cls, value: int) -> Hex:
        """Return a coordinate with both axial components set to ``value``."""

        return cls(value, value)

    @classmethod
    def from_cubic(cls, x: int, y: int, z: int) -> Hex:
        """Build a coordinate from cubic components.

        Raises :class:`HexInvariantError` when ``x + y + z != 0``.
        """

        if x + y + z != 0:
            logger.error("rejected cubic coordinates (%d, %d, %d)", x, y, z)
            raise HexInvariantError(f"cubic coordinates must sum to zero, got ({x}, {y}, {z})")
        return cls(x, y)

    @property
    def z(self) -> int:
        return -self.x - self.y

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def to_cubic(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def as_vec2(self) -> np.ndarray:
        """Direct float mapping of ``(x, y)``; no pixel layout is applied."""

        return np.array([self.x, self.y], dtype=np.float64)

    def as_vec3(self) -> np.ndarray:
        """Direct float mapping of the cubic ``(x, y, z)`` triple."""

        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __add__(self, other: object) -> Hex:
        if not isinstance(other, Hex):
            return NotImplemented
        return Hex(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Hex:
        if not isinstance(other, Hex):
            return NotImplemented
        return Hex(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Hex:
        return Hex(-self.x, -self.y)

    def __mul__(self, factor: object) -> Hex:
        if not isinstance(factor, int):
            return NotImplemented
        return Hex(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __floordiv__(self, divisor: object) -> Hex:
        if not isinstance(divisor, int):
            return NotImplemented
        return Hex(self.x // divisor, self.y // divisor)

    def __abs__(self) -> Hex:
        # Componentwise; the result is a length intermediate, not a position.
        return Hex(abs(self.x), abs(self.y))


ORIGIN = Hex(0, 0)
ZERO = ORIGIN
ONE = Hex(1, 1)
X_AXIS = Hex(1, 0)
Y_AXIS = Hex(0, 1)
Z_AXIS = Hex(0, -1)


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def hex_round(point: tuple[float, float]) -> Hex:
    """Round a fractional axial point to the nearest valid :class:`Hex`.

    Both axes are rounded first. The axis whose remainder is the larger
    error is then corrected from the cubic constraint, using half of the
    other axis' remainder, so the result never drifts off the grid the way
    independent rounding of both axes can.

    >>> hex_round((0.6, 10.2))
    Hex(x=1, y=10)
    """

    x, y = float(point[0]), float(point[1])
    x_rounded, y_rounded = _round_half_away(x), _round_half_away(y)
    x_rem, y_rem = x - x_rounded, y - y_rounded
    if x_rem * x_rem >= y_rem * y_rem:
        x_rounded += _round_half_away(x_rem + 0.5 * y_rem)
    else:
        y_rounded += _round_half_away(y_rem + 0.5 * x_rem)
    return Hex(int(x_rounded), int(y_rounded))


__all__ = [
    "Hex",
    "ONE",
    "ORIGIN",
    "X_AXIS",
    "Y_AXIS",
    "ZERO",
    "Z_AXIS",
    "hex_round",
]
