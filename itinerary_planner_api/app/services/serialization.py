"""
Conversion between stored rows and itinerary records.

The ``itineraries`` table only holds scalar columns, so ``interests``
and ``activities`` are stored as JSON array text.  Every row read from
the store passes through ``row_to_record`` before anything else sees
it.
"""

import json
from typing import Any, Dict, List, Sequence

from pydantic import ValidationError as PydanticValidationError

from ..core.errors import MalformedDataError
from ..schemas.itinerary import ItineraryCreate, ItineraryRead


def encode_sequence(seq: Sequence[str]) -> str:
    """Encode an ordered sequence of strings as a JSON array."""
    return json.dumps(list(seq), ensure_ascii=False)


def decode_sequence(text: Any) -> List[str]:
    """Decode a JSON array of strings produced by ``encode_sequence``.

    Raises ``MalformedDataError`` when the value is not such an array.
    """
    if not isinstance(text, str):
        raise MalformedDataError(f"Expected encoded sequence text, got {type(text).__name__}")
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedDataError(f"Invalid sequence encoding: {exc}") from exc
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise MalformedDataError("Encoded sequence is not a list of strings")
    return value


def record_to_row(itinerary_id: str, title: str, data: ItineraryCreate) -> Dict[str, Any]:
    return {
        "id": itinerary_id,
        "title": title,
        "destination": data.destination,
        "duration": data.duration,
        "budget": data.budget,
        "type": data.type,
        "interests": encode_sequence(data.interests),
        "activities": encode_sequence(data.activities),
        "content": data.content,
    }


def row_to_record(row: Dict[str, Any]) -> ItineraryRead:
    interests = decode_sequence(row["interests"])
    activities = decode_sequence(row["activities"])
    try:
        return ItineraryRead(
            id=row["id"],
            title=row["title"],
            destination=row["destination"],
            duration=row["duration"],
            budget=row["budget"],
            type=row["type"],
            interests=interests,
            activities=activities,
            content=row["content"],
            created_at=row["created_at"],
        )
    except PydanticValidationError as exc:
        raise MalformedDataError(f"Stored itinerary {row.get('id')} is invalid: {exc}") from exc
