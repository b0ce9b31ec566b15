"""Tests for the requests-based itinerary client."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from itinerary_client import ItineraryClient


def make_response(status_code, body=None, url="http://localhost:3000/api/v1/itineraries"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response._content = json.dumps(body).encode() if body is not None else b""
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return ItineraryClient(base_url="http://localhost:3000/api/v1/", session=session)


def test_create_itinerary_posts_payload_and_returns_id(api, session):
    session.request.return_value = make_response(201, {"id": "abc"})
    payload = {"destination": "Tokyo", "duration": 5, "content": "# Day 1"}

    itinerary_id, error = api.create_itinerary(payload)

    assert (itinerary_id, error) == ("abc", None)
    session.request.assert_called_once_with(
        method="POST",
        url="http://localhost:3000/api/v1/itineraries",
        json=payload,
        timeout=15,
    )


def test_list_itineraries(api, session):
    session.request.return_value = make_response(200, [{"id": "b"}, {"id": "a"}])

    items, error = api.list_itineraries()

    assert error is None
    assert [i["id"] for i in items] == ["b", "a"]


def test_get_missing_itinerary_returns_error(api, session):
    session.request.return_value = make_response(404, {"detail": "Not found"})

    item, error = api.get_itinerary("ghost")

    assert item is None
    assert error == {"status_code": 404, "message": "Not found"}
    assert session.request.call_args.kwargs["url"].endswith("/itineraries/ghost")


def test_rename_and_delete_report_success(api, session):
    session.request.return_value = make_response(200, {"success": True})

    assert api.rename_itinerary("abc", "New") == (True, None)
    assert session.request.call_args.kwargs["method"] == "PATCH"
    assert session.request.call_args.kwargs["json"] == {"title": "New"}

    assert api.delete_itinerary("abc") == (True, None)
    assert session.request.call_args.kwargs["method"] == "DELETE"


def test_network_failure_is_returned_not_raised(api, session):
    session.request.side_effect = requests.ConnectionError("refused")

    items, error = api.list_itineraries()

    assert items == []
    assert error == {"status_code": None, "message": "refused"}


def test_share_link_uses_front_end_origin(api):
    assert api.share_link("abc") == "http://localhost:3000?trip=abc"


def test_share_link_with_explicit_public_url(session):
    api = ItineraryClient(base_url="http://api:8000/api", public_url="https://trips.example", session=session)

    assert api.share_link("abc") == "https://trips.example?trip=abc"


def test_base_url_without_scheme_defaults_to_http(session):
    session.request.return_value = make_response(200, [])
    api = ItineraryClient(base_url="localhost:3000/api", session=session)

    api.list_itineraries()

    assert api.share_link("abc") == "http://localhost:3000?trip=abc"
    assert session.request.call_args.kwargs["url"] == "http://localhost:3000/api/itineraries"


def test_share_link_origin_drops_path_and_query(session):
    api = ItineraryClient(base_url="https://api.example:8443/v1/?x=1", session=session)

    assert api.share_link("abc") == "https://api.example:8443?trip=abc"
