"""Movie catalog API client.

This module defines a thin client around the catalog REST API.  It is
the only place where the client side talks HTTP; the interactive view
state in :mod:`movie_catalog_view` calls these methods and never builds
URLs itself.  The client uses the ``requests`` library internally.

The client exposes one method per API operation:

* :meth:`MovieCatalogAPI.list_movies` – return the whole catalog.
* :meth:`MovieCatalogAPI.get_movie` – fetch a single movie by its identifier.
* :meth:`MovieCatalogAPI.add_movie` – create a movie.
* :meth:`MovieCatalogAPI.update_movie` – replace every field of a movie.
* :meth:`MovieCatalogAPI.delete_movie` – delete a movie.

Every method returns a ``(data, error)`` tuple instead of raising, so
callers can surface failures to the user in a single place.  Requests
are never retried.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000"

Error = Dict[str, Any]


class MovieCatalogAPI:
    """Client for the movie catalog API."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:5000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Optional per-request timeout in seconds.  ``None``
                leaves the transport default in place.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/movies``).
            json_body: JSON body to send with the request (for POST/PUT).
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` is a dictionary with keys
            ``status_code`` and ``message`` describing the issue.
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
            # A failed Response is falsy, so compare against None.
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("message") or err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Movie operations
    # ------------------------------------------------------------------
    def list_movies(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve every movie.

        Returns:
            A tuple ``(movies, error)``. ``movies`` is empty on failure.
        """
        data, error = self._request("GET", "/movies")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_movie(self, movie_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single movie by ID."""
        return self._request("GET", f"/movies/{movie_id}")

    def add_movie(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a movie.

        Returns:
            A tuple ``(result, error)``; ``result`` holds the new ``id``
            and a confirmation ``message``.
        """
        return self._request("POST", "/movies", json_body=payload)

    def update_movie(self, movie_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace a movie.  Fields absent from ``payload`` are cleared."""
        return self._request("PUT", f"/movies/{movie_id}", json_body=payload)

    def delete_movie(self, movie_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a movie.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/movies/{movie_id}")
        if error:
            return False, error
        return True, None
