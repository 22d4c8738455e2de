"""
This module reads Alexa request envelopes and builds Alexa responses.
"""
from dataclasses import dataclass, field
from typing import Dict

from pickup_schedule.services.query_service import Answer


@dataclass
class SkillRequest:
    """The parts of an Alexa request the skill uses."""

    request_type: str = ""
    intent_name: str = ""
    slots: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, event: dict) -> "SkillRequest":
        """
        Reads an Alexa request envelope.

        Requests without an intent (e.g. a LaunchRequest) get an empty intent name.
        Slots without a value are read as empty strings.
        """
        body = event.get("request") or {}
        intent = body.get("intent") or {}
        slots = {
            name: (slot or {}).get("value") or ""
            for name, slot in (intent.get("slots") or {}).items()
        }
        return cls(
            request_type=body.get("type", ""),
            intent_name=intent.get("name", ""),
            slots=slots,
        )


def build_simple_response(answer: Answer) -> dict:
    """Wraps an answer in a plain text response with a simple card."""
    return {
        "version": "1.0",
        "response": {
            "outputSpeech": {"type": "PlainText", "text": answer.text},
            "card": {"type": "Simple", "title": answer.title, "content": answer.text},
            "shouldEndSession": True,
        },
    }
