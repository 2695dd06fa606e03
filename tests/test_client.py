import json
from unittest.mock import MagicMock

import requests

from movie_catalog_client import MovieCatalogAPI


def _response(status_code, body=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://catalog.test/movies"
    response._content = json.dumps(body).encode("utf-8") if body is not None else b""
    return response


def _api(*responses):
    session = MagicMock()
    session.request.side_effect = list(responses)
    return MovieCatalogAPI(base_url="http://catalog.test/", session=session), session


def test_list_movies_returns_collection():
    api, session = _api(_response(200, [{"id": 1, "title": "Dune"}]))
    movies, error = api.list_movies()
    assert error is None
    assert movies == [{"id": 1, "title": "Dune"}]
    session.request.assert_called_once_with(
        method="GET", url="http://catalog.test/movies", json=None, timeout=None
    )


def test_add_movie_posts_payload():
    api, session = _api(_response(201, {"message": "Movie added successfully", "id": 7}))
    result, error = api.add_movie({"title": "Dune"})
    assert error is None
    assert result["id"] == 7
    assert session.request.call_args.kwargs["method"] == "POST"
    assert session.request.call_args.kwargs["json"] == {"title": "Dune"}


def test_update_movie_puts_to_record_url():
    api, session = _api(_response(200, {"message": "Movie updated successfully"}))
    _, error = api.update_movie(3, {"title": "Dune"})
    assert error is None
    assert session.request.call_args.kwargs["url"] == "http://catalog.test/movies/3"
    assert session.request.call_args.kwargs["method"] == "PUT"


def test_http_error_reports_status_and_message():
    api, _ = _api(_response(404, {"message": "Movie not found"}))
    movie, error = api.get_movie(9)
    assert movie is None
    assert error == {"status_code": 404, "message": "Movie not found"}


def test_delete_failure_returns_false():
    api, _ = _api(_response(400, {"message": "Invalid request"}))
    ok, error = api.delete_movie("x")
    assert ok is False
    assert error["status_code"] == 400


def test_delete_success_returns_true():
    api, _ = _api(_response(200, {"message": "Movie deleted successfully"}))
    assert api.delete_movie(1) == (True, None)


def test_transport_error_is_reported_without_status():
    session = MagicMock()
    session.request.side_effect = requests.ConnectionError("connection refused")
    api = MovieCatalogAPI(session=session)
    movies, error = api.list_movies()
    assert movies == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


def test_requests_are_not_retried():
    session = MagicMock()
    session.request.side_effect = requests.ConnectionError("down")
    api = MovieCatalogAPI(session=session)
    api.add_movie({"title": "Dune"})
    assert session.request.call_count == 1
