"""
FastAPI dependencies.

The connection pool is created by ``create_app`` and kept on
``app.state``; handlers receive a ``MovieService`` bound to it.
"""

from fastapi import Request

from movie_catalog_api.app.core.db import ConnectionPool
from movie_catalog_api.app.services.movie_service import MovieService


def get_pool(request: Request) -> ConnectionPool:
    return request.app.state.pool


def get_movie_service(request: Request) -> MovieService:
    return MovieService(get_pool(request))
