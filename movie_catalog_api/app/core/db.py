"""
SQLite database integration: connection pool and migrations.

This module provides a bounded ``ConnectionPool`` shared by all
requests of a running application, and ``init_db`` which applies the
schema migrations.  Migrations are an explicit step: the application
never alters the schema on import, the caller decides when to run
``init_db`` (see ``movie_catalog_api.migrate`` and ``run.py``).

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import queue
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


class PoolError(sqlite3.OperationalError):
    """Raised when the pool cannot hand out a connection."""


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and the special ``:memory:`` name are returned
    unchanged.  Relative paths are resolved against the project root.
    """
    if database_url == ":memory:" or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


class ConnectionPool:
    """A bounded pool of SQLite connections.

    At most ``size`` connections exist at any time.  Connections are
    opened lazily on first demand and reused afterwards.  A caller that
    finds every connection in use waits until one is released, or until
    ``timeout`` seconds have passed when a timeout is configured.
    """

    def __init__(self, database: str, size: int = 5, timeout: Optional[float] = None) -> None:
        if size < 1:
            raise ValueError("Pool size must be at least 1")
        self.database = database
        self.size = size
        self.timeout = timeout
        self._slots = threading.BoundedSemaphore(size)
        self._idle: "queue.LifoQueue[sqlite3.Connection]" = queue.LifoQueue()
        self._opened: List[sqlite3.Connection] = []
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def opened(self) -> int:
        """Number of connections currently open."""
        return len(self._opened)

    def _connect(self) -> sqlite3.Connection:
        # Connections migrate between threadpool workers, so the
        # same-thread check has to be disabled.
        conn = sqlite3.connect(self.database, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        with self._lock:
            self._opened.append(conn)
        logger.debug("Opened connection %d/%d to %s", len(self._opened), self.size, self.database)
        return conn

    def acquire(self) -> sqlite3.Connection:
        """Take a connection out of the pool, waiting if none is free."""
        if self._closed:
            raise PoolError("Connection pool is closed")
        if not self._slots.acquire(timeout=self.timeout):
            raise PoolError(f"Timed out waiting for a database connection after {self.timeout}s")
        try:
            try:
                return self._idle.get_nowait()
            except queue.Empty:
                return self._connect()
        except BaseException:
            self._slots.release()
            raise

    def release(self, conn: sqlite3.Connection) -> None:
        """Return a connection taken with ``acquire``."""
        try:
            if conn.in_transaction:
                conn.rollback()
            if self._closed:
                conn.close()
            else:
                self._idle.put(conn)
        finally:
            self._slots.release()

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Context manager that borrows a connection for the block."""
        conn = self.acquire()
        try:
            yield conn
        finally:
            self.release(conn)

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Context manager that yields a cursor and commits on success."""
        with self.connection() as conn:
            cursor = conn.cursor()
            try:
                yield cursor
                conn.commit()
            except Exception:
                conn.rollback()
                raise
            finally:
                cursor.close()

    def close(self) -> None:
        """Close every open connection.  Borrowed ones close on release."""
        self._closed = True
        while True:
            try:
                conn = self._idle.get_nowait()
            except queue.Empty:
                break
            conn.close()
        with self._lock:
            count = len(self._opened)
            self._opened.clear()
        logger.info("Connection pool for %s closed (%d connections)", self.database, count)


MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS movies (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL CHECK (length(trim(title)) > 0),
            genre TEXT,
            description TEXT,
            poster_url TEXT,
            rating REAL
        );
        """,
    ),
]

SAMPLE_MOVIES: List[Tuple[str, str, str, str, float]] = [
    (
        "Inception",
        "Sci-Fi",
        "A thief who steals corporate secrets through dream-sharing technology.",
        "https://image.tmdb.org/t/p/w500/9gk7adHYeDvHkCSEqAvQNLV5Uge.jpg",
        8.8,
    ),
    (
        "The Dark Knight",
        "Action",
        "Batman raises the stakes in his war on crime.",
        "https://image.tmdb.org/t/p/w500/qJ2tW6WMUDux911r6m7haRef0WH.jpg",
        9.0,
    ),
    (
        "Interstellar",
        "Sci-Fi",
        "A team of explorers travel through a wormhole in space.",
        "https://media.themoviedb.org/t/p/w600_and_h900_face/gEU2QniE6E77NI6lCU6MxlNBvIx.jpg",
        8.6,
    ),
    (
        "Parasite",
        "Thriller",
        "Greed and class discrimination threaten the newly formed symbiotic relationship.",
        "https://image.tmdb.org/t/p/w500/7IiTTgloJzvGI1TAYymCfbfl3vT.jpg",
        8.6,
    ),
    (
        "Avengers: Endgame",
        "Action",
        "After the devastating events of Infinity War, the universe is in ruins.",
        "https://image.tmdb.org/t/p/w500/or06FN3Dka5tukK1e9sl16pB3iy.jpg",
        8.4,
    ),
]


def init_db(pool: ConnectionPool, reset: bool = False, seed: bool = False) -> int:
    """Initialise the database and apply pending migrations.

    By default this is idempotent and non-destructive: the
    ``migrations`` table records what has been applied and existing
    rows are left untouched.

    With ``reset=True`` the ``movies`` table is dropped first, all prior
    data is discarded and the sample movies are inserted.  ``seed=True``
    inserts the sample movies without dropping anything, but only when
    the table is empty.

    Returns the schema version after the run.
    """
    with pool.cursor() as cursor:
        cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")

        if reset:
            logger.warning("Dropping table 'movies' and discarding all catalog data")
            cursor.execute("DROP TABLE IF EXISTS movies")
            cursor.execute("DELETE FROM migrations")

        cursor.execute("SELECT MAX(version) AS version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                logger.info("Applied migration %d", version)
                current_version = version

        if reset or seed:
            count = cursor.execute("SELECT COUNT(*) AS count FROM movies").fetchone()["count"]
            if count == 0:
                cursor.executemany(
                    "INSERT INTO movies (title, genre, description, poster_url, rating) VALUES (?, ?, ?, ?, ?)",
                    SAMPLE_MOVIES,
                )
                logger.info("Inserted %d sample movies", len(SAMPLE_MOVIES))

    return current_version
