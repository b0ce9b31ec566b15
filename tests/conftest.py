"""Pytest configuration and fixtures for testing."""

import itertools

import pytest
from fastapi.testclient import TestClient

from itinerary_planner_api.app.core.config import Settings
from itinerary_planner_api.app.core.db import ItineraryStore
from itinerary_planner_api.app.main import create_app
from itinerary_planner_api.app.schemas.itinerary import ItineraryCreate
from itinerary_planner_api.app.services.itinerary_service import ItineraryService


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "itineraries.db")


@pytest.fixture
def store(db_path):
    """An initialized store backed by a temporary file."""
    with ItineraryStore(db_path) as s:
        yield s


@pytest.fixture
def sequential_ids():
    counter = itertools.count(1)
    return lambda: f"itn-{next(counter)}"


@pytest.fixture
def service(store, sequential_ids):
    return ItineraryService(store, id_factory=sequential_ids, public_base_url="https://trips.example")


@pytest.fixture
def tokyo():
    return ItineraryCreate(
        destination="Tokyo",
        duration=5,
        budget="medio",
        type="cultural",
        interests=["Arte"],
        activities=["Musei"],
        content="# Day 1...",
    )


@pytest.fixture
def test_settings(db_path):
    settings = Settings()
    settings.database_url = db_path
    settings.public_base_url = "https://trips.example"
    settings.log_file = ""
    return settings


@pytest.fixture
def app(db_path, test_settings):
    return create_app(store=ItineraryStore(db_path), settings=test_settings)


@pytest.fixture
def client(app):
    """Test client; entering it runs startup so the store is initialized."""
    with TestClient(app) as c:
        yield c
