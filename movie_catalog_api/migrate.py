#!/usr/bin/env python3
"""
Apply the catalog schema migrations to a SQLite database.

By default the run is idempotent and keeps existing data.  ``--reset``
drops the ``movies`` table, recreates it and inserts the five sample
movies; ``--seed`` inserts the samples only into an empty table.

Usage:
    python -m movie_catalog_api.migrate --db ./movie_catalog.db
    python -m movie_catalog_api.migrate --reset

If --db is omitted the ``DATABASE_URL`` setting is used.
"""

import argparse
import logging
import sys
from typing import List, Optional

from movie_catalog_api.app.core.config import settings
from movie_catalog_api.app.core.db import ConnectionPool, get_database_path, init_db
from movie_catalog_api.app.core.logging_config import setup_logging

logger = logging.getLogger("movie_catalog_api.migrate")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Create or upgrade the movie catalog schema (SQLite).")
    ap.add_argument("--db", default=settings.database_url, help="Path to SQLite DB file (default: DATABASE_URL)")
    ap.add_argument("--reset", action="store_true", help="Drop the movies table, discarding all data, and reseed it")
    ap.add_argument("--seed", action="store_true", help="Insert the sample movies if the table is empty")
    args = ap.parse_args(argv)

    setup_logging(settings.log_level, settings.log_file)
    pool = ConnectionPool(get_database_path(args.db), size=1)
    try:
        version = init_db(pool, reset=args.reset, seed=args.seed)
    except Exception:
        logger.exception("Migration of %s failed", pool.database)
        return 1
    finally:
        pool.close()
    logger.info("Database %s is at schema version %d", pool.database, version)
    return 0


if __name__ == "__main__":
    sys.exit(main())
