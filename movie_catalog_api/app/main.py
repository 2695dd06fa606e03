"""
Main entrypoint for the Movie Catalog API.

This module assembles the FastAPI application: logging, CORS, error
handlers, routes and the database connection pool.  ``create_app``
builds and configures the app, which is then instantiated at module
import time as ``app`` so it can be served directly, e.g.::

    uvicorn movie_catalog_api.app.main:app --reload

Creating the app does not touch the database schema.  Run the
migrations first (``python -m movie_catalog_api.migrate``) or start the
server through ``run.py --migrate``.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router
from .core.config import Settings, settings
from .core.db import ConnectionPool, get_database_path
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_pool(app_settings: Settings) -> ConnectionPool:
    """Build the connection pool described by ``app_settings``."""
    return ConnectionPool(
        get_database_path(app_settings.database_url),
        size=app_settings.db_pool_size,
        timeout=app_settings.db_pool_timeout,
    )


def create_app(app_settings: Optional[Settings] = None, pool: Optional[ConnectionPool] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use; defaults to the environment‑derived module
        level ``settings``.
    pool : Optional[ConnectionPool]
        Store handle to serve requests with.  When omitted a pool is
        built from the settings.  Either way the application owns it
        from here on and closes it on shutdown.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.pool = pool or create_pool(app_settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origin_list,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(router)

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info(
            "Serving catalog from %s (pool size %d)",
            app.state.pool.database,
            app.state.pool.size,
        )

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        app.state.pool.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
