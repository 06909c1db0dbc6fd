from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

UNNAMED_EVENT = "Unnamed Event"
DEFAULT_TOPIC = "General"
DEFAULT_COMPANY = "Unknown"
DEFAULT_SPEAKER = "TBD"

LABEL_WIDTH = 9


class CapacityError(ValueError):
    """Raised when an event is given a negative capacity."""

    def __init__(self, capacity: int, message: str = "Capacity cannot be negative.") -> None:
        super().__init__(message)
        self.capacity = capacity
        self.message = message


class IdSequence:
    """Hands out event ids in creation order, starting at 1."""

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def peek(self) -> int:
        return self._next

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value

    def reset(self, start: int = 1) -> None:
        self._next = start


def _clean(value: str | None, default: str) -> str:
    if value is None or not value.strip():
        return default
    return value.strip()


def validate_capacity(capacity: int) -> int:
    if capacity < 0:
        raise CapacityError(capacity)
    return capacity


# ----------------------------- Data model -------------------------------


@dataclass(frozen=True)
class EventInfo:
    id: int
    name: str
    capacity: int


@dataclass(frozen=True)
class WorkshopDetails:
    topic: str
    company: str


@dataclass(frozen=True)
class SeminarDetails:
    speaker: str


EventDetails = Union[WorkshopDetails, SeminarDetails]


@dataclass(frozen=True)
class Event:
    """A registered event: shared fields plus one variant payload."""

    info: EventInfo
    details: EventDetails

    @property
    def id(self) -> int:
        return self.info.id

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def capacity(self) -> int:
        return self.info.capacity

    @property
    def kind(self) -> str:
        if isinstance(self.details, WorkshopDetails):
            return "Workshop"
        if isinstance(self.details, SeminarDetails):
            return "Seminar"
        raise TypeError(f"Unsupported event details: {type(self.details).__name__}")

    def summary(self) -> str:
        info, d = self.info, self.details
        if isinstance(d, WorkshopDetails):
            return (
                f"Workshop [{info.id}] {info.name} | Topic: {d.topic} | "
                f"Company: {d.company} | Capacity: {info.capacity}"
            )
        if isinstance(d, SeminarDetails):
            return f"Seminar  [{info.id}] {info.name} | Speaker: {d.speaker} | Capacity: {info.capacity}"
        raise TypeError(f"Unsupported event details: {type(d).__name__}")

    def detail(self, verbose: bool = True) -> List[str]:
        """Labeled lines for the detailed view; a single summary line otherwise."""
        if not verbose:
            return [self.summary()]
        rows = [("Type", self.kind), ("Event ID", self.id), ("Name", self.name)]
        d = self.details
        if isinstance(d, WorkshopDetails):
            rows += [("Topic", d.topic), ("Company", d.company)]
        elif isinstance(d, SeminarDetails):
            rows.append(("Speaker", d.speaker))
        rows.append(("Capacity", self.capacity))
        return [f"{label:<{LABEL_WIDTH}}: {value}" for label, value in rows]


# ------------------------------ Factories -------------------------------


def create_workshop(ids: IdSequence, name: str, capacity: int, topic: str, company: str) -> Event:
    validate_capacity(capacity)
    info = EventInfo(id=ids.next(), name=_clean(name, UNNAMED_EVENT), capacity=capacity)
    return Event(info, WorkshopDetails(topic=_clean(topic, DEFAULT_TOPIC), company=_clean(company, DEFAULT_COMPANY)))


def create_seminar(ids: IdSequence, name: str, capacity: int, speaker: str) -> Event:
    validate_capacity(capacity)
    info = EventInfo(id=ids.next(), name=_clean(name, UNNAMED_EVENT), capacity=capacity)
    return Event(info, SeminarDetails(speaker=_clean(speaker, DEFAULT_SPEAKER)))
