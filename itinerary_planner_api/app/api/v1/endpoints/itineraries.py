"""
Itinerary endpoints for API v1.

These routes map HTTP verbs onto ``ItineraryService`` operations.
Saved itineraries are globally visible; no authentication is
required.  Renaming and deleting always answer ``{"success": true}``,
even for unknown ids.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from itinerary_planner_api.app.core.errors import NotFound, ValidationError
from itinerary_planner_api.app.schemas.itinerary import (
    ItineraryCreate,
    ItineraryCreated,
    ItineraryRead,
    ItineraryShareLink,
    ItineraryTitleUpdate,
    SuccessResponse,
)
from itinerary_planner_api.app.services.itinerary_service import ItineraryService

router = APIRouter()


def get_itinerary_service(request: Request) -> ItineraryService:
    """Return the service bound to the application's store."""
    return request.app.state.itinerary_service


@router.post("", response_model=ItineraryCreated, status_code=status.HTTP_201_CREATED)
async def create_itinerary(
    itinerary_in: ItineraryCreate,
    service: ItineraryService = Depends(get_itinerary_service),
) -> ItineraryCreated:
    """Save a generated itinerary and return its id."""
    try:
        itinerary_id = await service.create(itinerary_in)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    return ItineraryCreated(id=itinerary_id)


@router.get("", response_model=List[ItineraryRead])
async def list_itineraries(
    service: ItineraryService = Depends(get_itinerary_service),
) -> List[ItineraryRead]:
    """Return every saved itinerary, newest first."""
    return await service.list()


@router.get("/{itinerary_id}", response_model=ItineraryRead)
async def get_itinerary(
    itinerary_id: str,
    service: ItineraryService = Depends(get_itinerary_service),
) -> ItineraryRead:
    try:
        return await service.get(itinerary_id)
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.get("/{itinerary_id}/share", response_model=ItineraryShareLink)
async def share_itinerary(
    itinerary_id: str,
    service: ItineraryService = Depends(get_itinerary_service),
) -> ItineraryShareLink:
    """Return the public link that opens this itinerary in the front-end."""
    try:
        url = await service.share_url(itinerary_id)
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    return ItineraryShareLink(id=itinerary_id, url=url)


@router.patch("/{itinerary_id}", response_model=SuccessResponse)
async def rename_itinerary(
    itinerary_id: str,
    update: ItineraryTitleUpdate,
    service: ItineraryService = Depends(get_itinerary_service),
) -> SuccessResponse:
    """Change the title of a saved itinerary."""
    await service.rename_title(itinerary_id, update.title)
    return SuccessResponse()


@router.delete("/{itinerary_id}", response_model=SuccessResponse)
async def delete_itinerary(
    itinerary_id: str,
    service: ItineraryService = Depends(get_itinerary_service),
) -> SuccessResponse:
    await service.delete(itinerary_id)
    return SuccessResponse()
