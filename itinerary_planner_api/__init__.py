"""
Top-level package for the Itinerary Planner API.

All functionality lives in submodules under ``app``; import the
application as ``itinerary_planner_api.app.main:app``.
"""

__all__ = []
