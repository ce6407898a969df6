"""Offset and doubled coordinate systems, converted to and from :class:`Hex`."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .coords import Hex


class OffsetLayout(Enum):
    ODD_R = "odd_r"
    EVEN_R = "even_r"
    ODD_Q = "odd_q"
    EVEN_Q = "even_q"


@dataclass(frozen=True, slots=True)
class Offset:
    col: int
    row: int
    layout: OffsetLayout


class DoubledLayout(Enum):
    DOUBLED_WIDTH = "doubled_width"  # pointy top, columns step by two
    DOUBLED_HEIGHT = "doubled_height"  # flat top, rows step by two


@dataclass(frozen=True, slots=True)
class Doubled:
    col: int
    row: int
    layout: DoubledLayout


def to_offset(h: Hex, layout: OffsetLayout) -> Offset:
    q, r = h.x, h.y
    if layout == OffsetLayout.EVEN_R:
        col = q + (r + (r & 1)) // 2
        row = r
    elif layout == OffsetLayout.ODD_R:
        col = q + (r - (r & 1)) // 2
        row = r
    elif layout == OffsetLayout.EVEN_Q:
        col = q
        row = r + (q + (q & 1)) // 2
    elif layout == OffsetLayout.ODD_Q:
        col = q
        row = r + (q - (q & 1)) // 2
    else:
        raise ValueError("Unknown layout")
    return Offset(col, row, layout)


def from_offset(o: Offset) -> Hex:
    col, row, layout = o.col, o.row, o.layout
    if layout == OffsetLayout.EVEN_R:
        q = col - (row + (row & 1)) // 2
        r = row
    elif layout == OffsetLayout.ODD_R:
        q = col - (row - (row & 1)) // 2
        r = row
    elif layout == OffsetLayout.EVEN_Q:
        q = col
        r = row - (col + (col & 1)) // 2
    elif layout == OffsetLayout.ODD_Q:
        q = col
        r = row - (col - (col & 1)) // 2
    else:
        raise ValueError("Unknown layout")
    return Hex(q, r)


def to_doubled(h: Hex, layout: DoubledLayout) -> Doubled:
    if layout == DoubledLayout.DOUBLED_WIDTH:
        return Doubled(2 * h.x + h.y, h.y, layout)
    if layout == DoubledLayout.DOUBLED_HEIGHT:
        return Doubled(h.x, 2 * h.y + h.x, layout)
    raise ValueError("Unknown layout")


def from_doubled(d: Doubled) -> Hex:
    """Convert doubled coordinates back to axial.

    Doubled pairs whose ``col + row`` is odd do not name a cell and raise
    ``ValueError``.
    """

    if (d.col + d.row) & 1:
        raise ValueError(f"doubled coordinates ({d.col}, {d.row}) must have an even sum")
    if d.layout == DoubledLayout.DOUBLED_WIDTH:
        return Hex((d.col - d.row) // 2, d.row)
    if d.layout == DoubledLayout.DOUBLED_HEIGHT:
        return Hex(d.col, (d.row - d.col) // 2)
    raise ValueError("Unknown layout")


__all__ = [
    "Doubled",
    "DoubledLayout",
    "Offset",
    "OffsetLayout",
    "from_doubled",
    "from_offset",
    "to_doubled",
    "to_offset",
]
