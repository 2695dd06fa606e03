"""
Service layer for movie records.

``MovieService`` is the catalog store: it owns the SQL for the
``movies`` table and runs every statement on a connection borrowed
from the pool it was constructed with.  All queries use parameterized
statements; values are never formatted into SQL text.

Database errors are not caught here.  They propagate to the API
layer, which reports them as HTTP 500.
"""

import logging
import sqlite3
from typing import List, Optional

from movie_catalog_api.app.core.db import ConnectionPool
from movie_catalog_api.app.schemas.movie import MovieRead, MovieWrite

logger = logging.getLogger(__name__)

_COLUMNS = "id, title, genre, description, poster_url, rating"


class MovieService:
    """CRUD operations over the ``movies`` table."""

    def __init__(self, pool: ConnectionPool) -> None:
        self.pool = pool

    def list_movies(self) -> List[MovieRead]:
        """Return every movie in natural storage order."""
        with self.pool.cursor() as cursor:
            rows = cursor.execute(f"SELECT {_COLUMNS} FROM movies").fetchall()
        return [self._row_to_movie_read(row) for row in rows]

    def get_movie(self, movie_id: int) -> Optional[MovieRead]:
        """Return the movie with ``movie_id`` or ``None`` if there is none."""
        with self.pool.cursor() as cursor:
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM movies WHERE id = ?",
                (movie_id,),
            ).fetchone()
        if not row:
            return None
        return self._row_to_movie_read(row)

    def create_movie(self, data: MovieWrite) -> int:
        """Insert a movie and return the id assigned by the database."""
        with self.pool.cursor() as cursor:
            cursor.execute(
                """
                INSERT INTO movies (title, genre, description, poster_url, rating)
                VALUES (?, ?, ?, ?, ?)
                """,
                (data.title, data.genre, data.description, data.poster_url, data.rating),
            )
            movie_id = cursor.lastrowid
        logger.info("Created movie %s '%s'", movie_id, data.title)
        return movie_id

    def update_movie(self, movie_id: int, data: MovieWrite) -> bool:
        """Replace every mutable field of a movie.

        Returns ``False`` when no row has ``movie_id``.
        """
        with self.pool.cursor() as cursor:
            cursor.execute(
                """
                UPDATE movies
                SET title = ?, genre = ?, description = ?, poster_url = ?, rating = ?
                WHERE id = ?
                """,
                (data.title, data.genre, data.description, data.poster_url, data.rating, movie_id),
            )
            updated = cursor.rowcount > 0
        if updated:
            logger.info("Updated movie %s", movie_id)
        return updated

    def delete_movie(self, movie_id: int) -> bool:
        """Delete a movie.  Returns ``False`` when no row has ``movie_id``."""
        with self.pool.cursor() as cursor:
            cursor.execute("DELETE FROM movies WHERE id = ?", (movie_id,))
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("Deleted movie %s", movie_id)
        return deleted

    def count_movies(self) -> int:
        with self.pool.cursor() as cursor:
            row = cursor.execute("SELECT COUNT(*) AS count FROM movies").fetchone()
        return row["count"]

    @staticmethod
    def _row_to_movie_read(row: sqlite3.Row) -> MovieRead:
        return MovieRead(
            id=row["id"],
            title=row["title"],
            genre=row["genre"],
            description=row["description"],
            poster_url=row["poster_url"],
            rating=row["rating"],
        )
