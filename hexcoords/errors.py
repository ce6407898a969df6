"""Exceptions raised when a hex coordinate invariant is broken."""

from __future__ import annotations


class HexInvariantError(AssertionError):
    """A cubic coordinate triple did not satisfy ``x + y + z == 0``.

    This signals a programming error, not a recoverable condition, hence the
    ``AssertionError`` base.
    """


class WraparoundError(HexInvariantError):
    """Mirror reduction failed to bring a coordinate back into range."""


__all__ = ["HexInvariantError", "WraparoundError"]
