import pytest
from fastapi.testclient import TestClient

from movie_catalog_api.app.core.config import Settings
from movie_catalog_api.app.core.db import init_db
from movie_catalog_api.app.main import create_app, create_pool
from movie_catalog_api.app.services.movie_service import MovieService


@pytest.fixture
def test_settings(tmp_path):
    return Settings(database_url=str(tmp_path / "catalog.db"), log_level="DEBUG")


@pytest.fixture
def pool(test_settings):
    pool = create_pool(test_settings)
    init_db(pool)
    yield pool
    pool.close()


@pytest.fixture
def service(pool):
    return MovieService(pool)


@pytest.fixture
def client(test_settings, pool):
    app = create_app(test_settings, pool=pool)
    with TestClient(app) as test_client:
        yield test_client
