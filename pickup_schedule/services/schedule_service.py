"""
This module defines the ScheduleService for fetching upcoming pickup events.
"""
import logging
from datetime import date
from typing import List, Optional, Tuple

import requests
from dateutil.relativedelta import relativedelta

from ..config import RECOLLECT_API_URL, RECOLLECT_SERVICE_ID, REQUEST_TIMEOUT_SECONDS
from ..exceptions import ScheduleParseError, UpstreamUnavailable
from ..models import EventFlag, ScheduleEvent

# Get a logger instance for this module
logger = logging.getLogger(__name__)


def schedule_window(today: date) -> Tuple[str, str]:
    """Returns the (after, before) dates covering one calendar month from today."""
    before = today + relativedelta(months=1)
    return today.isoformat(), before.isoformat()


class ScheduleService:
    """Handles fetching and decoding of pickup events for a place."""

    def __init__(
        self,
        api_url: str = RECOLLECT_API_URL,
        service_id: str = RECOLLECT_SERVICE_ID,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ):
        self.api_url = api_url.rstrip("/")
        self.service_id = service_id
        self.timeout = timeout

    def fetch_schedule(self, location_id: str, today: Optional[date] = None) -> List[ScheduleEvent]:
        """
        Fetches the events for a place from today until the same day next month.

        Args:
            location_id: The place ID returned by the address lookup.
            today: The first day of the window. Defaults to the current date.

        Returns:
            A list of ScheduleEvent objects in upstream order.

        Raises:
            UpstreamUnavailable: If the request fails or returns a non-200 status.
            ScheduleParseError: If the response body is not the expected shape.
        """
        after, before = schedule_window(today or date.today())
        url = f"{self.api_url}/api/places/{location_id}/services/{self.service_id}/events"
        params = {
            "nomerge": 1,
            "hide": "reminder_only",
            "after": after,
            "before": before,
        }
        logger.info(f"Making an HTTP request at {url} from {after} to {before}")
        try:
            response = requests.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"The schedule lookup failed for place {location_id}: {e}")
            raise UpstreamUnavailable(f"Failed to get the schedule: {e}") from e

        if response.status_code != 200:
            logger.error(f"The schedule lookup failed with {response.status_code}")
            raise UpstreamUnavailable(f"Failed to get the schedule: HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Failed to decode the schedule lookup response: {e}")
            raise ScheduleParseError(f"Failed to decode the schedule response: {e}") from e

        return self._parse_events(payload)

    def _parse_events(self, payload) -> List[ScheduleEvent]:
        """Decode the events document into ScheduleEvent objects."""
        if not isinstance(payload, dict):
            raise ScheduleParseError("The schedule response is not a JSON object")

        events = []
        try:
            for raw_event in payload.get("events") or []:
                flags = [
                    EventFlag(name=str(raw_flag["name"]), service_name=str(raw_flag.get("service_name", "")))
                    for raw_flag in raw_event.get("flags") or []
                ]
                events.append(ScheduleEvent(day=str(raw_event["day"]), flags=flags))
        except (AttributeError, KeyError, TypeError) as e:
            logger.error(f"Failed to decode the schedule lookup response: {e}")
            raise ScheduleParseError(f"Unexpected schedule response shape: {e}") from e

        logger.info(f"Decoded {len(events)} events from the schedule response")
        return events
