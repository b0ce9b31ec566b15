"""
Error types raised by the itinerary core.

These are plain exceptions, independent of FastAPI.  The API layer
translates them into HTTP responses: ``ValidationError`` becomes 400,
``NotFound`` becomes 404 and the storage-level errors become 500.
"""

from typing import Any, Dict, Optional


class ItineraryError(Exception):
    """Base class for all itinerary errors."""

    code = "ITINERARY_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(ItineraryError):
    """Required input is missing or malformed."""

    code = "VALIDATION_ERROR"


class NotFound(ItineraryError):
    """The requested itinerary does not exist."""

    code = "NOT_FOUND"

    def __init__(self, itinerary_id: str):
        super().__init__("Not found", {"id": itinerary_id})
        self.itinerary_id = itinerary_id


class MalformedDataError(ItineraryError):
    """A stored value could not be decoded."""

    code = "MALFORMED_DATA"


class StorageError(ItineraryError):
    """The storage medium failed or rejected a write."""

    code = "STORAGE_ERROR"


def error_content(exc: ItineraryError) -> Dict[str, Any]:
    return {"detail": exc.message, "code": exc.code}
