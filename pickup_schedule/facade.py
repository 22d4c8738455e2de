"""
This module defines the central facade for the curbside pickup schedule.
"""

import logging
from datetime import date
from typing import List, Optional

from .models import PickupOccurrence, build_occurrences
from .services.address_service import AddressService
from .services.query_service import Answer, QueryService
from .services.schedule_service import ScheduleService

logger = logging.getLogger(__name__)


class CurbsideScheduleFacade:
    """
    The central entry point for schedule queries.
    It chains the address lookup, the event fetch and the query answers for one address.
    """

    def __init__(
        self,
        address_service: AddressService,
        schedule_service: ScheduleService,
        query_service: QueryService,
    ):
        self.address_service = address_service
        self.schedule_service = schedule_service
        self.query_service = query_service

    def get_thirty_day_schedule(self, address: str, today: Optional[date] = None) -> List[PickupOccurrence]:
        """
        Finds the pickup occurrences for an address over the next month.

        Args:
            address: The street address.
            today: The first day of the window. Defaults to the current date.

        Returns:
            The occurrences in ascending date order.

        Raises:
            AddressNotFound: If the address cannot be resolved.
            UpstreamUnavailable: If either upstream request fails.
            ScheduleParseError: If the schedule response cannot be decoded.
        """
        location_id = self.address_service.resolve_address(address)
        events = self.schedule_service.fetch_schedule(location_id, today=today)
        occurrences = build_occurrences(events)
        logger.info(f"Found {len(occurrences)} pick up occurrences for '{address}'.")
        return occurrences

    def get_schedule(self, address: str, service_type: str) -> Answer:
        """Answers when the given service type is next picked up."""
        occurrences = self.get_thirty_day_schedule(address)
        return self.query_service.get_schedule(occurrences, service_type)

    def what_is_next(self, address: str) -> Answer:
        """Answers which services are picked up on the next pickup day."""
        occurrences = self.get_thirty_day_schedule(address)
        return self.query_service.what_is_next(occurrences)
