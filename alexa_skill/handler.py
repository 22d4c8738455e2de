"""
AWS Lambda entry point for the curbside pickup skill.

Set STREET_ADDRESS to the home's street address (e.g. 1260 NW Maynard Rd).
"""
import logging

from curbside_pickup.app_factory import create_dispatcher, initialize_app
from pickup_schedule.config import get_street_address
from pickup_schedule.exceptions import ConfigurationMissing

from .envelope import SkillRequest, build_simple_response

initialize_app()

logger = logging.getLogger(__name__)


def lambda_handler(event: dict, context=None) -> dict:
    """Handles one Alexa request and returns the Alexa response."""
    try:
        address = get_street_address()
    except ConfigurationMissing:
        logger.critical("STREET_ADDRESS environment variable not set.")
        raise
    logger.info(f"Using the address {address}")

    request = SkillRequest.from_dict(event)
    dispatcher = create_dispatcher(address)
    answer = dispatcher.dispatch(request.intent_name, request.slots)
    return build_simple_response(answer)
