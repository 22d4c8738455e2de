"""
This module defines custom exceptions for the curbside pickup schedule client.
"""


class PickupScheduleError(Exception):
    """Base class for all pickup schedule errors."""

    pass


class AddressNotFound(PickupScheduleError):
    """Raised when the address suggest endpoint returns no candidates."""

    pass


class UpstreamUnavailable(PickupScheduleError):
    """Raised on a transport failure or a non-200 response from the schedule API."""

    pass


class ScheduleParseError(PickupScheduleError):
    """Raised when a schedule response cannot be decoded into events."""

    pass


class ConfigurationMissing(PickupScheduleError):
    """Raised when the street address is not configured."""

    pass
