"""
Service layer for saved itineraries.

``ItineraryService`` is the only entry point for the itinerary
lifecycle: it validates input, assigns identifiers, applies the title
default and delegates persistence to an ``ItineraryStore``.  Every
record it returns has already been decoded by the serialization
adapter.

Renaming and deleting never check for existence first; a missing id
is a silent no-op, and callers that need confirmation call ``get``.
"""

import logging
import uuid
from typing import Callable, List
from urllib.parse import urlencode

from ..core.db import ItineraryStore
from ..core.errors import NotFound, ValidationError
from ..schemas.itinerary import ItineraryCreate, ItineraryRead
from .serialization import record_to_row, row_to_record

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]

DEFAULT_TITLE_TEMPLATE = "Trip to {destination}"
DEFAULT_PUBLIC_BASE_URL = "http://localhost:3000"


def new_itinerary_id() -> str:
    """Return a random UUID4 string."""
    return str(uuid.uuid4())


class ItineraryService:
    """Create, list, fetch, rename and delete saved itineraries."""

    def __init__(
        self,
        store: ItineraryStore,
        id_factory: IdFactory = new_itinerary_id,
        public_base_url: str = DEFAULT_PUBLIC_BASE_URL,
    ) -> None:
        if not public_base_url:
            raise ValueError("public_base_url is required for share links")
        self.store = store
        self.id_factory = id_factory
        self.public_base_url = public_base_url

    async def create(self, data: ItineraryCreate) -> str:
        """Persist a generated itinerary and return its new id.

        ``destination`` and ``content`` must be non-blank; otherwise
        ``ValidationError`` is raised before the store is touched.  A
        missing or blank ``title`` becomes ``"Trip to <destination>"``.
        """
        if not data.destination or not data.destination.strip():
            raise ValidationError("destination is required", {"field": "destination"})
        if not data.content or not data.content.strip():
            raise ValidationError("content is required", {"field": "content"})

        itinerary_id = self.id_factory()
        title = data.title
        if not title or not title.strip():
            title = DEFAULT_TITLE_TEMPLATE.format(destination=data.destination)
        self.store.insert(record_to_row(itinerary_id, title, data))
        logger.info("Created itinerary %s for %s", itinerary_id, data.destination)
        return itinerary_id

    async def list(self) -> List[ItineraryRead]:
        """Return all itineraries, newest first."""
        return [row_to_record(row) for row in self.store.select_all()]

    async def get(self, itinerary_id: str) -> ItineraryRead:
        row = self.store.select_by_id(itinerary_id)
        if row is None:
            raise NotFound(itinerary_id)
        return row_to_record(row)

    async def rename_title(self, itinerary_id: str, title: str) -> bool:
        self.store.update_title(itinerary_id, title)
        logger.info("Renamed itinerary %s", itinerary_id)
        return True

    async def delete(self, itinerary_id: str) -> bool:
        self.store.delete_by_id(itinerary_id)
        logger.info("Deleted itinerary %s", itinerary_id)
        return True

    async def share_url(self, itinerary_id: str) -> str:
        """Return the front-end link that opens a saved itinerary.

        Only existing itineraries can be shared; ``NotFound`` otherwise.
        """
        if self.store.select_by_id(itinerary_id) is None:
            raise NotFound(itinerary_id)
        return build_share_url(self.public_base_url, itinerary_id)


def build_share_url(base_url: str, itinerary_id: str) -> str:
    """``https://host/`` + ``abc`` -> ``https://host/?trip=abc``."""
    return f"{base_url}?{urlencode({'trip': itinerary_id})}"
