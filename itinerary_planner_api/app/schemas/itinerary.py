"""
Pydantic schemas for itineraries.

``ItineraryCreate`` is the payload sent by the front-end once the AI
collaborator has produced the markdown body.  ``ItineraryRead`` is the
typed record returned by the service for every read; list-valued
fields are real lists, never their stored text form.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ItineraryBase(BaseModel):
    destination: str = Field(..., examples=["Tokyo"])
    duration: int = Field(..., ge=1, examples=[5], description="Trip length in days")
    budget: str = Field(..., examples=["medio"])
    type: str = Field(..., examples=["cultural"], description="Trip style")
    interests: List[str] = Field(default_factory=list, examples=[["Arte"]])
    activities: List[str] = Field(default_factory=list, examples=[["Musei"]])
    content: str = Field(..., description="Markdown itinerary body")


class ItineraryCreate(ItineraryBase):
    """Schema for saving a generated itinerary.

    ``title`` may be omitted; the service then derives one from the
    destination.
    """

    title: Optional[str] = None


class ItineraryRead(ItineraryBase):
    """Schema for reading a stored itinerary."""

    id: str
    title: str
    created_at: str


class ItineraryCreated(BaseModel):
    id: str


class ItineraryTitleUpdate(BaseModel):
    title: str


class ItineraryShareLink(BaseModel):
    id: str
    url: str


class SuccessResponse(BaseModel):
    success: bool = True
