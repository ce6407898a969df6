"""Pydantic payloads for persisting hex coordinates.

Only ``x`` and ``y`` are stored; ``z`` is recomputed on load.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from pydantic import BaseModel, ConfigDict, model_validator

from .coords import Hex


class HexModel(BaseModel):
    """Serializable axial coordinate."""

    model_config = ConfigDict(extra="forbid")

    x: int
    y: int

    @model_validator(mode="before")
    @classmethod
    def _coerce_pair(cls, value: object) -> Mapping[str, object] | object:
        if isinstance(value, Hex):
            return {"x": value.x, "y": value.y}
        if isinstance(value, Mapping):
            return value
        if isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray):
            sequence = list(value)
            if len(sequence) != 2:
                raise ValueError("hex payload sequences must hold exactly two items")
            return {"x": sequence[0], "y": sequence[1]}
        return value

    @classmethod
    def from_hex(cls, h: Hex) -> HexModel:
        return cls(x=h.x, y=h.y)

    def to_hex(self) -> Hex:
        return Hex(self.x, self.y)


__all__ = ["HexModel"]
