"""
Exception handlers that render errors as ``{"message": ...}`` JSON bodies.

Authentication failures always use the same generic body. Server-side
failures are logged with the request's correlation id and reported to the
client only as an opaque message.
"""

import logging
from typing import Any

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import (
    INTERNAL_ERROR_MESSAGE,
    UNAUTHENTICATED_MESSAGE,
    VALIDATION_FAILED_MESSAGE,
    ApiError,
    ErrorKind,
)

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
# Location prefixes FastAPI adds to validation error locations.
_LOCATION_PREFIXES = ("body", "query", "path", "header")


def _field_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    details = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        message = str(error.get("msg", "Invalid value"))
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        details.append({"field": ".".join(loc) or "body", "message": message})
    return details


def _internal_error_response() -> JSONResponse:
    request_id = correlation_id.get()
    headers = {REQUEST_ID_HEADER: request_id} if request_id else None
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
        headers=headers,
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render an ApiError according to its error kind."""
    err = exc.err
    if err.kind is ErrorKind.UNAUTHENTICATED:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": UNAUTHENTICATED_MESSAGE},
            headers={"WWW-Authenticate": "Bearer"},
        )
    if err.kind in (ErrorKind.STORAGE, ErrorKind.INTERNAL):
        logger.error("%s error on %s %s: %s", err.kind.value, request.method, request.url.path, err.message)
        return _internal_error_response()
    content: dict[str, Any] = {"message": err.message}
    if err.kind is ErrorKind.VALIDATION_FAILED:
        content["errors"] = err.details
    return JSONResponse(status_code=err.status_code, content=content)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request body/query validation failures are 400 with field-level detail."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": VALIDATION_FAILED_MESSAGE, "errors": _field_errors(exc.errors())},
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Framework HTTP errors (unknown route, wrong method) in the same body shape."""
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": UNAUTHENTICATED_MESSAGE},
            headers={"WWW-Authenticate": "Bearer"},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=dict(exc.headers) if exc.headers else None,
    )


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Storage error on %s %s", request.method, request.url.path)
    return _internal_error_response()


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _internal_error_response()


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
