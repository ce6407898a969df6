"""Validated settings for wraparound hex maps."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .areas import range_count, wrap_with, wraparound_mirrors
from .coords import Hex


class WraparoundSettings(BaseModel):
    """Radius and step guard for folding coordinates into a hexagonal map."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    radius: int = Field(default=0, ge=0)
    max_steps: int | None = Field(default=None, ge=1)

    @property
    def diameter(self) -> int:
        return 2 * self.radius + 1

    @property
    def cell_count(self) -> int:
        """Number of cells covered by the map."""

        return range_count(self.radius)

    def mirrors(self) -> tuple[Hex, ...]:
        return wraparound_mirrors(self.radius)

    def wrap(self, h: Hex) -> Hex:
        """Fold ``h`` into the map using the canonical mirrors."""

        return wrap_with(h, self.radius, self.mirrors(), max_steps=self.max_steps)


__all__ = ["WraparoundSettings"]
