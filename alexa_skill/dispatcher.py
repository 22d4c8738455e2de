"""
This module routes skill intents to the schedule queries.
"""
import logging
from enum import Enum
from typing import Dict, Optional

from pickup_schedule.facade import CurbsideScheduleFacade
from pickup_schedule.services.query_service import Answer

logger = logging.getLogger(__name__)

COLLECTION_TYPE_SLOT = "collectionType"

HELP_ANSWER = Answer(
    title="Help",
    text=(
        "You can say things like what's next or when's recycling. "
        "The four supported collection types are: "
        "garbage, recycling, yard waste, and leaf collection."
    ),
)

UNKNOWN_ANSWER = Answer(title="Unknown Request", text="The intent was unrecognized")


class Intent(Enum):
    GET_SCHEDULE = "GetSchedule"
    WHAT_IS_NEXT = "WhatIsNext"
    HELP = "AMAZON.HelpIntent"
    UNKNOWN = ""

    @classmethod
    def from_name(cls, name: str) -> "Intent":
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN


class IntentDispatcher:
    """Answers an intent for the configured street address."""

    def __init__(self, facade: CurbsideScheduleFacade, address: str):
        self.facade = facade
        self.address = address

    def dispatch(self, intent_name: str, slots: Optional[Dict[str, str]] = None) -> Answer:
        """
        Runs the query behind an intent.

        Unknown intents get a fixed answer. Errors from the schedule lookup
        are not handled here.
        """
        slots = slots or {}
        logger.info(f"Finding the handler for the intent {intent_name}")
        intent = Intent.from_name(intent_name)

        if intent is Intent.GET_SCHEDULE:
            service_type = slots.get(COLLECTION_TYPE_SLOT, "")
            logger.info(f"The GetSchedule intent has the service type {service_type}")
            return self.facade.get_schedule(self.address, service_type)
        if intent is Intent.WHAT_IS_NEXT:
            return self.facade.what_is_next(self.address)
        if intent is Intent.HELP:
            return HELP_ANSWER

        logger.info(f"The intent {intent_name} was unrecognized")
        return UNKNOWN_ANSWER
