"""
Database error → HTTP response mapping.

Connection-level failures (pool checkout timeout, refused or dropped
connections) answer 503 so clients can retry later; any other SQLAlchemy
error answers 500. asyncpg raises connect failures as bare ``OSError``
subclasses (``ConnectionRefusedError``, ``TimeoutError``) that SQLAlchemy
does not wrap, so ``OSError`` is on the 503 list too. Starlette resolves
handlers along the exception's MRO, so the specific classes take
precedence over ``SQLAlchemyError``.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

logger = logging.getLogger(__name__)


async def database_unavailable_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Database unavailable during %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(status_code=503, content={"detail": "Database unavailable"})


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        "Database error during %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


def register_exception_handlers(app: FastAPI) -> None:
    for exc_class in (PoolTimeoutError, OperationalError, InterfaceError, OSError):
        app.add_exception_handler(exc_class, database_unavailable_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
