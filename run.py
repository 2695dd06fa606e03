"""Entry point for serving the Movie Catalog API.

This script starts the API under Uvicorn.  Host and port come from the
``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0`` and
``5000``); the database and pool size from ``DATABASE_URL`` and
``DB_POOL_SIZE``.

Pass ``--migrate`` to bring the schema up to date before serving; add
``--reset`` to also drop and reseed the catalog.

Usage:
    python run.py --migrate
"""
import argparse
import asyncio
import logging

from uvicorn import Config, Server

from movie_catalog_api.app.core.config import settings
from movie_catalog_api.app.core.db import init_db
from movie_catalog_api.app.main import create_app, create_pool


async def run_api(migrate: bool, reset: bool) -> None:
    """Optionally migrate, then serve the API until interrupted."""
    pool = create_pool(settings)
    if migrate or reset:
        init_db(pool, reset=reset)
    app = create_app(settings, pool=pool)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


def main() -> None:
    parser = argparse.ArgumentParser(description="Serve the Movie Catalog API.")
    parser.add_argument("--migrate", action="store_true", help="Apply pending migrations before serving")
    parser.add_argument("--reset", action="store_true", help="Drop and reseed the movies table before serving")
    args = parser.parse_args()
    try:
        asyncio.run(run_api(args.migrate, args.reset))
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")


if __name__ == "__main__":
    main()
