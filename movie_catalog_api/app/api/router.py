"""
Top‑level router of the catalog API.

Aggregates the resource routers.  The API is unversioned, so the
router is mounted at the application root.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from .endpoints import movies

router = APIRouter()


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
def root() -> str:
    return "MovieMania Backend is Running!"


router.include_router(movies.router, prefix="/movies", tags=["movies"])
