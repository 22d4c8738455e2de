"""
This module defines the QueryService which turns pickup occurrences into spoken answers.
"""
import logging
from dataclasses import dataclass
from typing import List, Sequence

from ..models import PickupOccurrence

# Get a logger instance for this module
logger = logging.getLogger(__name__)

NOTHING_SCHEDULED = "No curbside pick up is scheduled in the next 30 days."


@dataclass(frozen=True)
class Answer:
    """A card title and the text spoken back to the user."""

    title: str
    text: str


def join_service_names(names: Sequence[str]) -> str:
    """
    Joins service names into a spoken list, e.g. "garbage, recycling, and yardwaste".

    The comma before "and" is kept even for two items.
    """
    if len(names) == 1:
        return names[0]
    return ", ".join(names[:-1]) + f", and {names[-1]}"


class QueryService:
    """Answers the schedule questions a user can ask."""

    def get_schedule(self, occurrences: List[PickupOccurrence], service_type: str) -> Answer:
        """
        Finds the next pickup for a service type, matching the display name case-insensitively.

        Args:
            occurrences: The upcoming occurrences in ascending date order.
            service_type: The service type as the user said it.

        Returns:
            An Answer with the pickup date, or a "not scheduled" answer.
        """
        service_type_lower = service_type.lower()
        for occurrence in occurrences:
            if occurrence.display_name.lower() == service_type_lower:
                return Answer(
                    title=f"{occurrence.display_name} Curbside Pick Up",
                    text=f"Curbside pick up for {service_type_lower} is on {occurrence.display_day}.",
                )

        logger.info(f"No {service_type} pick up found in the next 30 days")
        return Answer(
            title=f"{service_type} Curbside Pick Up",
            text=f"Curbside pick up for {service_type} is not scheduled in the next 30 days.",
        )

    def what_is_next(self, occurrences: List[PickupOccurrence]) -> Answer:
        """
        Lists every service on the next pickup day.

        The occurrences must be grouped by day in ascending order. Collection
        stops at the first occurrence on a different day.
        """
        pick_up_day = None
        service_codes = []
        for occurrence in occurrences:
            if pick_up_day is None:
                pick_up_day = occurrence.display_day
            elif occurrence.display_day != pick_up_day:
                break
            service_codes.append(occurrence.service_code)

        if not service_codes:
            logger.info("No curbside pick up is scheduled in the next 30 days")
            return Answer(title="No Curbside Pick Up", text=NOTHING_SCHEDULED)

        logger.info(f"Found {len(service_codes)} services on {pick_up_day}")
        names = [code.lower() for code in sorted(service_codes)]
        return Answer(
            title="Curbside Pick Up Schedule",
            text=f"On {pick_up_day}, there will be curb side pick up for: {join_service_names(names)}.",
        )
