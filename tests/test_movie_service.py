from movie_catalog_api.app.schemas.movie import MovieWrite


def _dune(**overrides):
    fields = {"title": "Dune", "genre": "Sci-Fi", "rating": 8.5}
    fields.update(overrides)
    return MovieWrite(**fields)


def test_create_then_get_round_trips(service):
    movie_id = service.create_movie(_dune(description="Spice", poster_url="http://img/dune.jpg"))
    movie = service.get_movie(movie_id)
    assert movie.id == movie_id
    assert movie.title == "Dune"
    assert movie.genre == "Sci-Fi"
    assert movie.description == "Spice"
    assert movie.poster_url == "http://img/dune.jpg"
    assert movie.rating == 8.5


def test_create_assigns_unused_ids(service):
    first = service.create_movie(_dune())
    second = service.create_movie(_dune(title="Arrival"))
    assert first != second


def test_ids_are_not_reused_after_delete(service):
    first = service.create_movie(_dune())
    assert service.delete_movie(first)
    second = service.create_movie(_dune())
    assert second > first


def test_list_returns_all_movies(service):
    service.create_movie(_dune())
    service.create_movie(_dune(title="Arrival"))
    assert [movie.title for movie in service.list_movies()] == ["Dune", "Arrival"]
    assert service.count_movies() == 2


def test_get_missing_movie_returns_none(service):
    assert service.get_movie(404) is None


def test_update_replaces_all_fields(service):
    movie_id = service.create_movie(_dune(description="Spice"))
    assert service.update_movie(movie_id, MovieWrite(title="Dune: Part One"))
    movie = service.get_movie(movie_id)
    assert movie.title == "Dune: Part One"
    assert movie.genre is None
    assert movie.description is None
    assert movie.rating is None


def test_update_missing_movie_changes_nothing(service):
    service.create_movie(_dune())
    before = service.list_movies()
    assert not service.update_movie(999, _dune(title="Other"))
    assert service.list_movies() == before


def test_delete_then_get_is_not_found(service):
    movie_id = service.create_movie(_dune())
    assert service.delete_movie(movie_id)
    assert service.get_movie(movie_id) is None


def test_delete_missing_movie_changes_nothing(service):
    service.create_movie(_dune())
    assert not service.delete_movie(999)
    assert service.count_movies() == 1


def test_values_are_bound_not_interpolated(service):
    title = "Robert'); DROP TABLE movies;--"
    movie_id = service.create_movie(_dune(title=title))
    assert service.get_movie(movie_id).title == title
    assert service.count_movies() == 1
