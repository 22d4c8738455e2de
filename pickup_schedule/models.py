"""
This module defines the data models for the curbside pickup schedule.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, List

from .exceptions import ScheduleParseError

WASTE_SERVICE_NAME = "waste"

# Upstream service codes that need a friendlier name when spoken
DISPLAY_NAMES = {
    "yardwaste": "Yard Waste",
    "looseleaf": "Leaf Collection",
}


@dataclass(frozen=True)
class EventFlag:
    """A single flag attached to an upstream event."""

    name: str
    service_name: str


@dataclass(frozen=True)
class ScheduleEvent:
    """A raw event as returned by the events endpoint."""

    day: str
    flags: List[EventFlag] = field(default_factory=list)


@dataclass(frozen=True)
class PickupOccurrence:
    """Represents one curbside pickup service on a specific day."""

    day: str  # e.g. 2021-06-22
    service_code: str  # e.g. Garbage, Recycling, yardwaste, looseleaf

    def __post_init__(self):
        try:
            datetime.strptime(self.day, "%Y-%m-%d")
        except (TypeError, ValueError) as e:
            raise ScheduleParseError(f"Invalid pickup day '{self.day}': {e}") from e

    @property
    def pickup_date(self) -> date:
        return datetime.strptime(self.day, "%Y-%m-%d").date()

    @property
    def display_name(self) -> str:
        """The friendly name of the service."""
        return DISPLAY_NAMES.get(self.service_code, self.service_code)

    @property
    def display_day(self) -> str:
        """The day formatted like 'Monday, January 2, 2006'."""
        d = self.pickup_date
        return f"{d:%A}, {d:%B} {d.day}, {d.year}"


def build_occurrences(events: Iterable[ScheduleEvent]) -> List[PickupOccurrence]:
    """
    Turns raw upstream events into pickup occurrences.

    Only the first flag tagged with the "waste" service is kept for each event,
    and events without such a flag are dropped. Upstream returns events in
    ascending date order, so the result is ordered and grouped by day. Callers
    rely on that ordering and no sorting is done here.

    Args:
        events: The raw events in upstream order.

    Returns:
        A list of PickupOccurrence objects in the same order.
    """
    occurrences = []
    for event in events:
        for flag in event.flags:
            if flag.service_name == WASTE_SERVICE_NAME:
                occurrences.append(PickupOccurrence(day=event.day, service_code=flag.name))
                break
    return occurrences
