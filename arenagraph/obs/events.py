"""Event bus primitives."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from arenagraph.graph.ids import utc_now


@dataclass
class Event:
    """Record of a single graph mutation."""

    ts: str
    level: str
    msg: str
    action: str | None = None
    target_ids: List[int] = field(default_factory=list)
    extras: dict | None = None


@dataclass
class EventBus:
    """Append-only in-memory event bus."""

    events: List[Event] = field(default_factory=list)

    def emit(
        self,
        *,
        level: str,
        msg: str,
        action: str | None = None,
        target_ids: Iterable[int] | None = None,
        extras: dict | None = None,
    ) -> Event:
        """Create and store a new :class:`Event`."""

        event = Event(
            ts=utc_now(),
            level=level,
            msg=msg,
            action=action,
            target_ids=list(target_ids or []),
            extras=extras,
        )
        self.events.append(event)
        return event

    def history(self) -> Tuple[Event, ...]:
        """Return the chronological event history."""

        return tuple(self.events)

    def by_action(self, action: str) -> Tuple[Event, ...]:
        """Return the events recorded for ``action``."""

        return tuple(event for event in self.events if event.action == action)

    def clear(self) -> None:
        self.events.clear()
