"""
Movie endpoints.

These routes expose the catalog CRUD surface.  Handlers are plain
functions: FastAPI runs them in its threadpool, so each request blocks
only its own worker while it waits for a pooled connection.

None of the routes require authentication.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from movie_catalog_api.app.api.deps import get_movie_service
from movie_catalog_api.app.schemas.movie import Message, MovieCreated, MovieRead, MovieWrite
from movie_catalog_api.app.services.movie_service import MovieService

router = APIRouter()

MOVIE_NOT_FOUND = "Movie not found"

# Range of a SQLite INTEGER; larger ids cannot be bound to a query.
MIN_MOVIE_ID = -(2**63)
MAX_MOVIE_ID = 2**63 - 1


@router.get("", response_model=List[MovieRead])
def list_movies(service: MovieService = Depends(get_movie_service)) -> List[MovieRead]:
    """Return the full catalog.  There is no pagination."""
    return service.list_movies()


@router.get("/{movie_id}", response_model=MovieRead)
def get_movie(
    movie_id: int = Path(..., ge=MIN_MOVIE_ID, le=MAX_MOVIE_ID),
    service: MovieService = Depends(get_movie_service),
) -> MovieRead:
    """Retrieve a single movie by its ID.  Raises 404 if it does not exist."""
    movie = service.get_movie(movie_id)
    if movie is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=MOVIE_NOT_FOUND)
    return movie


@router.post("", response_model=MovieCreated, status_code=status.HTTP_201_CREATED)
def create_movie(movie: MovieWrite, service: MovieService = Depends(get_movie_service)) -> MovieCreated:
    """Add a movie.

    A title is required; a missing or blank title is rejected with 400
    before anything is written.  The response echoes the submitted
    fields together with the new ``id``.
    """
    if not movie.has_title():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Title is required")
    movie_id = service.create_movie(movie)
    return MovieCreated(message="Movie added successfully", id=movie_id, **movie.model_dump())


@router.put("/{movie_id}", response_model=Message)
def update_movie(
    movie: MovieWrite,
    movie_id: int = Path(..., ge=MIN_MOVIE_ID, le=MAX_MOVIE_ID),
    service: MovieService = Depends(get_movie_service),
) -> Message:
    """Replace every field of an existing movie.

    Fields missing from the body are cleared.  A blank title violates
    the table constraint and is reported as a database error.
    """
    if not service.update_movie(movie_id, movie):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=MOVIE_NOT_FOUND)
    return Message(message="Movie updated successfully")


@router.delete("/{movie_id}", response_model=Message)
def delete_movie(
    movie_id: int = Path(..., ge=MIN_MOVIE_ID, le=MAX_MOVIE_ID),
    service: MovieService = Depends(get_movie_service),
) -> Message:
    """Delete a movie.  Raises 404 if it does not exist."""
    if not service.delete_movie(movie_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=MOVIE_NOT_FOUND)
    return Message(message="Movie deleted successfully")
