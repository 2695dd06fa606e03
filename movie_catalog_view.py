"""Local state of the interactive movie catalog client.

:class:`CatalogView` holds everything a front end needs to render the
catalog: the fetched movies, the current view, the search text, the
add/edit form, the last known location and the carousel position.  It
talks to the server only through :class:`movie_catalog_client.MovieCatalogAPI`.

Consistency with the server is kept by re-fetching the whole catalog
after every successful mutation; nothing is patched locally.  A failed
mutation raises one alert through the ``alert`` callback and leaves the
state as it was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Dict, List, Optional, Tuple

from movie_catalog_client import MovieCatalogAPI

logger = logging.getLogger(__name__)

VIEW_LIST = "list"
VIEW_ADD = "add"
VIEW_EDIT = "edit"
VIEWS = (VIEW_LIST, VIEW_ADD, VIEW_EDIT)


@dataclass(frozen=True)
class MovieForm:
    """Immutable add/edit form.

    Values are kept as the raw text the user typed.  Every change
    produces a new form via :meth:`with_field`.
    """

    title: str = ""
    genre: str = ""
    description: str = ""
    poster_url: str = ""
    rating: str = ""

    def with_field(self, name: str, value: str) -> "MovieForm":
        return replace(self, **{name: value})

    @classmethod
    def from_movie(cls, movie: Dict[str, Any]) -> "MovieForm":
        values = {}
        for field in fields(cls):
            value = movie.get(field.name)
            values[field.name] = "" if value is None else str(value)
        return cls(**values)

    def to_payload(self) -> Dict[str, Any]:
        """Convert to a request body.

        Blank fields become ``None``.  Raises ``ValueError`` when the
        rating is not a number.
        """
        payload: Dict[str, Any] = {}
        for field in fields(self):
            text = getattr(self, field.name).strip()
            payload[field.name] = text or None
        if payload["rating"] is not None:
            payload["rating"] = float(payload["rating"])
        return payload


def _log_alert(message: str) -> None:
    logger.warning(message)


class CatalogView:
    """Client-side catalog state driven by user actions."""

    def __init__(self, api: MovieCatalogAPI, alert: Optional[Callable[[str], None]] = None) -> None:
        self.api = api
        self.alert = alert or _log_alert
        self.movies: List[Dict[str, Any]] = []
        self.view = VIEW_LIST
        self.search = ""
        self.form = MovieForm()
        self.editing_id: Optional[int] = None
        self.location: Optional[Tuple[float, float]] = None
        self.carousel_index = 0

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------
    def load(self) -> bool:
        """Fetch the whole catalog, replacing the local copy."""
        movies, error = self.api.list_movies()
        if error:
            logger.error("Error fetching movies: %s", error["message"])
            return False
        self.movies = movies
        if self.carousel_index >= len(self.movies):
            self.carousel_index = 0
        return True

    # ------------------------------------------------------------------
    # Views and form
    # ------------------------------------------------------------------
    def show(self, view: str) -> None:
        if view not in VIEWS:
            raise ValueError(f"Unknown view: {view}")
        self.view = view

    def start_add(self) -> None:
        self.form = MovieForm()
        self.editing_id = None
        self.view = VIEW_ADD

    def start_edit(self, movie: Dict[str, Any]) -> None:
        self.form = MovieForm.from_movie(movie)
        self.editing_id = movie["id"]
        self.view = VIEW_EDIT

    def update_form(self, name: str, value: str) -> None:
        self.form = self.form.with_field(name, value)

    def _finish_form(self) -> None:
        self.form = MovieForm()
        self.editing_id = None
        self.view = VIEW_LIST

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def set_search(self, text: str) -> None:
        self.search = text

    def visible_movies(self) -> List[Dict[str, Any]]:
        """Movies whose title or genre contains the search text, ignoring case."""
        needle = self.search.strip().lower()
        if not needle:
            return list(self.movies)
        return [
            movie
            for movie in self.movies
            if needle in (movie.get("title") or "").lower() or needle in (movie.get("genre") or "").lower()
        ]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def submit(self) -> bool:
        """Send the form as an add or an update, depending on the view."""
        try:
            payload = self.form.to_payload()
        except ValueError:
            self.alert("Rating must be a number")
            return False

        if self.view == VIEW_EDIT and self.editing_id is not None:
            _, error = self.api.update_movie(self.editing_id, payload)
            failure = "Failed to update movie"
        else:
            _, error = self.api.add_movie(payload)
            failure = "Failed to add movie"
        if error:
            self.alert(f"{failure}: {error['message']}")
            return False

        self._finish_form()
        self.load()
        return True

    def delete(self, movie_id: int) -> bool:
        ok, error = self.api.delete_movie(movie_id)
        if not ok:
            message = error["message"] if error else "unknown error"
            self.alert(f"Failed to delete: {message}")
            return False
        self.load()
        return True

    # ------------------------------------------------------------------
    # Carousel and location
    # ------------------------------------------------------------------
    def advance_carousel(self) -> int:
        """Step the carousel, wrapping at the end of the catalog."""
        if not self.movies:
            self.carousel_index = 0
        else:
            self.carousel_index = (self.carousel_index + 1) % len(self.movies)
        return self.carousel_index

    def carousel_movie(self) -> Optional[Dict[str, Any]]:
        if not self.movies:
            return None
        return self.movies[self.carousel_index % len(self.movies)]

    def set_location(self, lat: float, long: float) -> None:
        self.location = (lat, long)

    def clear_location(self) -> None:
        self.location = None
