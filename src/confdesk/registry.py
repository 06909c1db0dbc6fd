from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from .core import Event, IdSequence, create_seminar, create_workshop

logger = logging.getLogger(__name__)


class EventRegistry:
    """Append-only, insertion-ordered list of the events created this run."""

    def __init__(self, ids: Optional[IdSequence] = None) -> None:
        self.ids = ids or IdSequence()
        self._events: List[Event] = []

    def append(self, event: Event) -> None:
        self._events.append(event)
        logger.debug("Registered %s", event.summary())

    def all(self) -> Tuple[Event, ...]:
        return tuple(self._events)

    def is_empty(self) -> bool:
        return not self._events

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self.all())

    # ------------------------------ Helpers -----------------------------

    def add_workshop(self, name: str, capacity: int, topic: str, company: str) -> Event:
        event = create_workshop(self.ids, name, capacity, topic, company)
        self.append(event)
        return event

    def add_seminar(self, name: str, capacity: int, speaker: str) -> Event:
        event = create_seminar(self.ids, name, capacity, speaker)
        self.append(event)
        return event
