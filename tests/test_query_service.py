"""
Unit tests for the QueryService.
"""

import pytest

from pickup_schedule.models import PickupOccurrence
from pickup_schedule.services.query_service import Answer, QueryService, join_service_names

OCCURRENCES = [
    PickupOccurrence("2025-03-10", "Garbage"),
    PickupOccurrence("2025-03-10", "Recycling"),
    PickupOccurrence("2025-03-17", "Garbage"),
    PickupOccurrence("2025-03-17", "yardwaste"),
]


@pytest.mark.parametrize("service_type", ["Recycling", "recycling", "RECYCLING"])
def test_get_schedule_is_case_insensitive(service_type):
    """Tests that the service type matches the display name regardless of case."""
    answer = QueryService().get_schedule(OCCURRENCES, service_type)

    assert answer == Answer(
        title="Recycling Curbside Pick Up",
        text="Curbside pick up for recycling is on Monday, March 10, 2025.",
    )


def test_get_schedule_matches_display_name():
    """Tests that "yard waste" matches the yardwaste service code."""
    answer = QueryService().get_schedule(OCCURRENCES, "Yard Waste")

    assert answer.title == "Yard Waste Curbside Pick Up"
    assert answer.text == "Curbside pick up for yard waste is on Monday, March 17, 2025."


def test_get_schedule_uses_first_match():
    answer = QueryService().get_schedule(OCCURRENCES, "garbage")

    assert answer.text == "Curbside pick up for garbage is on Monday, March 10, 2025."


def test_get_schedule_not_scheduled_keeps_caller_casing():
    """Tests the "not scheduled" answer keeps the service type as given."""
    answer = QueryService().get_schedule(OCCURRENCES, "Leaf Collection")

    assert answer == Answer(
        title="Leaf Collection Curbside Pick Up",
        text="Curbside pick up for Leaf Collection is not scheduled in the next 30 days.",
    )


def test_what_is_next_nothing_scheduled():
    answer = QueryService().what_is_next([])

    assert answer == Answer(
        title="No Curbside Pick Up",
        text="No curbside pick up is scheduled in the next 30 days.",
    )


def test_what_is_next_single_service():
    answer = QueryService().what_is_next([PickupOccurrence("2025-03-17", "Garbage")])

    assert answer == Answer(
        title="Curbside Pick Up Schedule",
        text="On Monday, March 17, 2025, there will be curb side pick up for: garbage.",
    )


def test_what_is_next_stops_at_the_next_day():
    """Tests that only the services of the first pickup day are listed."""
    answer = QueryService().what_is_next(OCCURRENCES)

    assert answer.text == (
        "On Monday, March 10, 2025, there will be curb side pick up for: garbage, and recycling."
    )


def test_what_is_next_sorts_raw_service_codes():
    """Tests that services are sorted by raw code, case-sensitively, before lowercasing."""
    occurrences = [
        PickupOccurrence("2025-03-10", "yardwaste"),
        PickupOccurrence("2025-03-10", "Recycling"),
        PickupOccurrence("2025-03-10", "Garbage"),
        PickupOccurrence("2025-03-10", "looseleaf"),
    ]

    answer = QueryService().what_is_next(occurrences)

    assert answer.text == (
        "On Monday, March 10, 2025, there will be curb side pick up for: "
        "garbage, recycling, looseleaf, and yardwaste."
    )


@pytest.mark.parametrize(
    "names, expected",
    [
        (["garbage"], "garbage"),
        (["garbage", "recycling"], "garbage, and recycling"),
        (["garbage", "recycling", "yardwaste"], "garbage, recycling, and yardwaste"),
    ],
)
def test_join_service_names(names, expected):
    assert join_service_names(names) == expected
