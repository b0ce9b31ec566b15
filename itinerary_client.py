"""Itinerary API client.

A thin wrapper around the Itinerary Planner REST API for front-ends
and scripts.  It uses the ``requests`` library internally and never
raises for HTTP failures: every operation returns a tuple
``(result, error)`` where ``error`` is ``None`` on success or a
dictionary with ``status_code`` and ``message`` keys.

Operations:

* :meth:`ItineraryClient.list_itineraries` – all saved itineraries, newest first.
* :meth:`ItineraryClient.get_itinerary` – one itinerary by id.
* :meth:`ItineraryClient.create_itinerary` – save a generated itinerary.
* :meth:`ItineraryClient.rename_itinerary` – change an itinerary's title.
* :meth:`ItineraryClient.delete_itinerary` – remove an itinerary.
* :meth:`ItineraryClient.share_link` – front-end link for a saved itinerary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlencode, urlsplit

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


@dataclass
class ApiEndpoint:
    """An API operation.

    Attributes:
        path: The URI template, e.g. ``/itineraries`` or ``/itineraries/{id}``.
        method: The HTTP method in upper case.
    """

    path: str
    method: str

    def format(self, itinerary_id: Any = None) -> str:
        if itinerary_id is None:
            return self.path
        return self.path.replace("{id}", str(itinerary_id))


class ItineraryClient:
    """Client for the itinerary endpoints of the API."""

    ENDPOINTS: Dict[str, ApiEndpoint] = {
        "list": ApiEndpoint("/itineraries", "GET"),
        "create": ApiEndpoint("/itineraries", "POST"),
        "get": ApiEndpoint("/itineraries/{id}", "GET"),
        "rename": ApiEndpoint("/itineraries/{id}", "PATCH"),
        "delete": ApiEndpoint("/itineraries/{id}", "DELETE"),
    }

    def __init__(
        self,
        *,
        base_url: str,
        public_url: Optional[str] = None,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API including its prefix, e.g.
                ``http://localhost:3000/api/v1``.  Without a scheme,
                ``http://`` is assumed.
            public_url: Origin of the web front-end used for share
                links.  Defaults to the scheme and host of ``base_url``.
            timeout: Request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        if "://" not in base_url:
            base_url = f"http://{base_url}"
        self.base_url = base_url.rstrip("/")
        self.public_url = public_url or self._origin(self.base_url)
        self.timeout = timeout
        self.session = session or requests.Session()

    @staticmethod
    def _origin(url: str) -> str:
        parts = urlsplit(url)
        return f"{parts.scheme}://{parts.netloc}"

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response on success; on failure it is ``None`` and ``error``
            describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = exc.response.json().get("detail") or ""
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _call(
        self, name: str, itinerary_id: Any = None, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        ep = self.ENDPOINTS[name]
        return self._request(ep.method, ep.format(itinerary_id), json_body=json_body)

    # ------------------------------------------------------------------
    # Itinerary operations
    # ------------------------------------------------------------------
    def list_itineraries(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return saved itineraries, newest first, or ``[]`` on failure."""
        data, error = self._call("list")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_itinerary(self, itinerary_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("get", itinerary_id)

    def create_itinerary(self, payload: Dict[str, Any]) -> Tuple[Optional[str], Optional[Error]]:
        """Save an itinerary.

        Args:
            payload: ``destination``, ``duration``, ``budget``, ``type``,
                ``interests``, ``activities``, ``content`` and optionally
                ``title``.
        Returns:
            A tuple ``(id, error)``.
        """
        data, error = self._call("create", json_body=payload)
        if error:
            return None, error
        return (data or {}).get("id"), None

    def rename_itinerary(self, itinerary_id: str, title: str) -> Tuple[bool, Optional[Error]]:
        data, error = self._call("rename", itinerary_id, json_body={"title": title})
        if error:
            return False, error
        return bool(data and data.get("success")), None

    def delete_itinerary(self, itinerary_id: str) -> Tuple[bool, Optional[Error]]:
        data, error = self._call("delete", itinerary_id)
        if error:
            return False, error
        return bool(data and data.get("success")), None

    def share_link(self, itinerary_id: str) -> str:
        """Return the front-end URL that opens ``itinerary_id``.

        Built locally; the server exposes the same link at
        ``/itineraries/{id}/share`` for clients that want an
        existence check.
        """
        return f"{self.public_url}?{urlencode({'trip': itinerary_id})}"
