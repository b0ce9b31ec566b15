"""
Top-level router for version 1 of the API.

Aggregates domain routers under a unified prefix.  New domains add
their routers here.
"""

from fastapi import APIRouter

from .endpoints import health, itineraries

router = APIRouter()

router.include_router(itineraries.router, prefix="/itineraries", tags=["itineraries"])
router.include_router(health.router, prefix="/health", tags=["health"])
