"""
This module defines the AddressService for resolving a street address to a ReCollect place ID.
"""
import logging

import requests

from ..config import RECOLLECT_API_URL, RECOLLECT_AREA, RECOLLECT_SERVICE_ID, REQUEST_TIMEOUT_SECONDS
from ..exceptions import AddressNotFound, UpstreamUnavailable

# Get a logger instance for this module
logger = logging.getLogger(__name__)


class AddressService:
    """Handles address lookups against the address suggest endpoint."""

    def __init__(
        self,
        api_url: str = RECOLLECT_API_URL,
        area: str = RECOLLECT_AREA,
        service_id: str = RECOLLECT_SERVICE_ID,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ):
        self.api_url = api_url.rstrip("/")
        self.area = area
        self.service_id = service_id
        self.timeout = timeout

    def resolve_address(self, address: str) -> str:
        """
        Finds the place ID of an address. The first suggestion is used since
        it is the most accurate.

        Args:
            address: The free-text street address.

        Returns:
            The place ID of the address.

        Raises:
            AddressNotFound: If no suggestion is returned.
            UpstreamUnavailable: If the request fails or the response is unusable.
        """
        url = f"{self.api_url}/api/areas/{self.area}/services/{self.service_id}/address-suggest"
        logger.info(f"Making an HTTP request at {url} for the address '{address}'")
        try:
            response = requests.get(url, params={"q": address}, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"The address lookup HTTP request failed: {e}")
            raise UpstreamUnavailable(f"Failed to find the address: {e}") from e

        if response.status_code != 200:
            logger.error(f"The address lookup HTTP request failed with {response.status_code}")
            raise UpstreamUnavailable(f"Failed to find the address: HTTP {response.status_code}")

        try:
            suggestions = response.json()
        except ValueError as e:
            logger.error(f"Failed to decode the address lookup response: {e}")
            raise UpstreamUnavailable(f"Failed to decode the address lookup response: {e}") from e

        if not isinstance(suggestions, list):
            logger.error(f"Unexpected address lookup response: {suggestions!r}")
            raise UpstreamUnavailable("Unexpected address lookup response")

        if not suggestions:
            logger.warning(f"The address '{address}' wasn't found.")
            raise AddressNotFound(f"Address not found: {address}")

        first = suggestions[0]
        place_id = first.get("place_id") if isinstance(first, dict) else None
        if not place_id:
            logger.error(f"The first address suggestion has no place_id: {first!r}")
            raise UpstreamUnavailable("The address suggestion has no place_id")

        logger.info(f"Found the address ID {place_id} for '{address}'.")
        return str(place_id)
