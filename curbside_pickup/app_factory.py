"""
This module provides a factory for creating and configuring the application's core components.
"""

from alexa_skill.dispatcher import IntentDispatcher
from pickup_schedule.facade import CurbsideScheduleFacade
from pickup_schedule.services.address_service import AddressService
from pickup_schedule.services.query_service import QueryService
from pickup_schedule.services.schedule_service import ScheduleService

from .logging_config import setup_logging


def initialize_app():
    """
    Initializes the application by setting up logging.
    """
    setup_logging()


def create_facade() -> CurbsideScheduleFacade:
    """
    Initializes and returns the CurbsideScheduleFacade with all its dependencies.
    """
    return CurbsideScheduleFacade(
        address_service=AddressService(),
        schedule_service=ScheduleService(),
        query_service=QueryService(),
    )


def create_dispatcher(address: str) -> IntentDispatcher:
    """
    Returns an IntentDispatcher answering for the given address.
    """
    return IntentDispatcher(facade=create_facade(), address=address)
