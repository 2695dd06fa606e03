import sqlite3
import threading

import pytest

from movie_catalog_api.app.core.db import SAMPLE_MOVIES, ConnectionPool, PoolError, init_db


def _titles(pool):
    with pool.cursor() as cursor:
        return [row["title"] for row in cursor.execute("SELECT title FROM movies ORDER BY id")]


def test_init_db_creates_movies_table(pool):
    with pool.cursor() as cursor:
        columns = [row["name"] for row in cursor.execute("PRAGMA table_info(movies)")]
    assert columns == ["id", "title", "genre", "description", "poster_url", "rating"]


def test_init_db_is_idempotent_and_keeps_data(pool):
    with pool.cursor() as cursor:
        cursor.execute("INSERT INTO movies (title) VALUES (?)", ("Heat",))
    assert init_db(pool) == 1
    assert init_db(pool) == 1
    assert _titles(pool) == ["Heat"]


def test_init_db_does_not_seed_by_default(pool):
    assert _titles(pool) == []


def test_reset_drops_data_and_seeds_samples(pool):
    with pool.cursor() as cursor:
        cursor.execute("INSERT INTO movies (title) VALUES (?)", ("Heat",))
    init_db(pool, reset=True)
    assert _titles(pool) == [movie[0] for movie in SAMPLE_MOVIES]
    assert len(SAMPLE_MOVIES) == 5


def test_seed_only_fills_an_empty_table(pool):
    init_db(pool, seed=True)
    init_db(pool, seed=True)
    assert len(_titles(pool)) == 5


def test_blank_title_violates_constraint(pool):
    with pytest.raises(sqlite3.IntegrityError):
        with pool.cursor() as cursor:
            cursor.execute("INSERT INTO movies (title) VALUES (?)", ("   ",))


def test_failed_statement_is_rolled_back(pool):
    with pytest.raises(sqlite3.IntegrityError):
        with pool.cursor() as cursor:
            cursor.execute("INSERT INTO movies (title) VALUES (?)", ("Heat",))
            cursor.execute("INSERT INTO movies (title) VALUES (?)", (None,))
    assert _titles(pool) == []


def test_pool_reuses_connections(tmp_path):
    pool = ConnectionPool(str(tmp_path / "pool.db"), size=5)
    for _ in range(10):
        with pool.connection() as conn:
            conn.execute("SELECT 1")
    assert pool.opened == 1
    pool.close()


def test_pool_rejects_invalid_size(tmp_path):
    with pytest.raises(ValueError):
        ConnectionPool(str(tmp_path / "pool.db"), size=0)


def test_pool_queues_callers_beyond_its_size(tmp_path):
    pool = ConnectionPool(str(tmp_path / "pool.db"), size=1)
    acquired = threading.Event()

    def worker():
        with pool.connection():
            acquired.set()

    held = pool.acquire()
    thread = threading.Thread(target=worker)
    thread.start()
    assert not acquired.wait(0.2)
    pool.release(held)
    assert acquired.wait(2)
    thread.join(2)
    assert pool.opened == 1
    pool.close()


def test_pool_timeout_raises_pool_error(tmp_path):
    pool = ConnectionPool(str(tmp_path / "pool.db"), size=1, timeout=0.05)
    held = pool.acquire()
    with pytest.raises(PoolError):
        pool.acquire()
    pool.release(held)
    pool.close()


def test_closed_pool_refuses_connections(tmp_path):
    pool = ConnectionPool(str(tmp_path / "pool.db"), size=2)
    pool.close()
    assert pool.closed
    with pytest.raises(PoolError):
        pool.acquire()
