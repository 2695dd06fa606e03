"""
Exception handlers translating failures into JSON responses.

* ``HTTPException`` (404 not found, 400 missing title, ...) becomes
  ``{"message": detail}`` with the exception's status code.
* Request validation errors become HTTP 400 with the pydantic error
  list under ``errors``.
* Any ``sqlite3.Error`` raised by the store becomes HTTP 500 with the
  raw database error in the body.
"""

import logging
import sqlite3

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("HTTP %s on %s %s: %s", exc.status_code, request.method, request.url.path, exc.detail)
    else:
        logger.info("HTTP %s on %s %s: %s", exc.status_code, request.method, request.url.path, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _error_summary(exc: RequestValidationError) -> list:
    # The rejected input is left out: it may be a non-finite float, which
    # cannot be rendered as JSON.
    return jsonable_encoder(
        [{"loc": error["loc"], "msg": error["msg"], "type": error["type"]} for error in exc.errors()]
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Validation error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request", "errors": _error_summary(exc)},
    )


async def store_exception_handler(request: Request, exc: sqlite3.Error) -> JSONResponse:
    logger.error(
        "Database error on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": type(exc).__name__,
            "message": str(exc),
            "code": getattr(exc, "sqlite_errorname", None),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(sqlite3.Error, store_exception_handler)
