"""Shared error-to-HTTP-status mapper.

Route handlers catch persistence failures, log them with context and hand
them to ``errorhandler`` which picks the status code. Unhandled exceptions
reach the catch-all registered by ``register_error_handlers``.
"""

import logging
from typing import Mapping, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def _status_for(exc: BaseException) -> tuple[int, str]:
    if isinstance(exc, IntegrityError):
        return status.HTTP_409_CONFLICT, "Conflict"
    if isinstance(exc, NoResultFound):
        return status.HTTP_404_NOT_FOUND, "Not Found"
    if isinstance(exc, OperationalError):
        return status.HTTP_503_SERVICE_UNAVAILABLE, "Service Unavailable"
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"


def errorhandler(exc: BaseException) -> JSONResponse:
    status_code, message = _status_for(exc)
    return JSONResponse(status_code=status_code, content={"error": message})


def method_not_allowed(method: str, allowed: Sequence[str]) -> PlainTextResponse:
    return PlainTextResponse(
        f"Method {method} Not Allowed",
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers={"Allow": ", ".join(allowed)},
    )


def register_error_handlers(app: FastAPI, allowed_methods: Mapping[str, Sequence[str]] | None = None) -> None:
    """Register the 405 rewrite and the catch-all handler.

    ``allowed_methods`` maps a path to the methods it serves; a 405 raised by
    routing on one of those paths reports that full list in ``Allow``.
    """
    allowed_by_path = {path.rstrip("/"): list(methods) for path, methods in (allowed_methods or {}).items()}

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        allowed = allowed_by_path.get(request.url.path.rstrip("/"))
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED and allowed:
            return method_not_allowed(request.method, allowed)
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        # Never leak internal details
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return errorhandler(exc)
