"""
This module contains configuration settings for the application.
"""
import os

from .exceptions import ConfigurationMissing

# ReCollect API settings
RECOLLECT_API_URL = os.environ.get("RECOLLECT_API_URL", "https://api.recollect.net")
RECOLLECT_AREA = os.environ.get("RECOLLECT_AREA", "CaryNC")
RECOLLECT_SERVICE_ID = os.environ.get("RECOLLECT_SERVICE_ID", "1087")

# Timeout for each upstream request in seconds
REQUEST_TIMEOUT_SECONDS = int(os.environ.get("REQUEST_TIMEOUT_SECONDS", 30))

# Logging level name
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def get_street_address() -> str:
    """
    Returns the configured street address, read from the environment at call time.

    Raises:
        ConfigurationMissing: If STREET_ADDRESS is unset or blank.
    """
    address = os.environ.get("STREET_ADDRESS", "").strip()
    if not address:
        raise ConfigurationMissing("the address is not configured")
    return address
