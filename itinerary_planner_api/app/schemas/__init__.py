"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the storage rows so the API shape does
not depend on how records are persisted.
"""
