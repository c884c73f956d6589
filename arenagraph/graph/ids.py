"""Typed arena identifiers and timestamp helpers."""
from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass


@dataclass(frozen=True)
class _ArenaIndex:
    """Integer handle into one of the graph arenas.

    Subclasses are deliberately not interchangeable: ``NodeIndex(0)`` and
    ``EdgeIndex(0)`` never compare equal.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"{type(self).__name__} requires an int, got {type(self.value).__name__}")
        if self.value < 0:
            raise ValueError(f"{type(self).__name__} must be non-negative, got {self.value}")

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"


@dataclass(frozen=True, repr=False)
class NodeIndex(_ArenaIndex):
    """Stable identifier of a node slot."""


@dataclass(frozen=True, repr=False)
class EdgeIndex(_ArenaIndex):
    """Stable identifier of an edge slot."""


def utc_now() -> str:
    """Return the current UTC time formatted as an ISO 8601 string."""

    return _dt.datetime.now(_dt.timezone.utc).isoformat()
