"""
Custom application exceptions and the JSON error envelope.

HTTP-facing exceptions subclass ``HTTPException`` and carry the status code
the client sees. Domain exceptions (validation, store failures) are raised
below the views and translated there.
"""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppException(HTTPException):
    """Base application exception."""

    def __init__(self, detail: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(status_code=status_code, detail=detail)


class NotFoundException(AppException):
    """Resource not found exception."""

    def __init__(self, detail: str = "Resource not found"):
        super().__init__(detail=detail, status_code=status.HTTP_404_NOT_FOUND)


class BadRequestException(AppException):
    """Bad request exception."""

    def __init__(self, detail: str = "Bad request"):
        super().__init__(detail=detail, status_code=status.HTTP_400_BAD_REQUEST)


class ConflictException(AppException):
    """Resource already exists."""

    def __init__(self, detail: str = "Conflict"):
        super().__init__(detail=detail, status_code=status.HTTP_409_CONFLICT)


class ValidationError(Exception):
    """Client input is missing required fields or has the wrong shape."""

    def __init__(self, message: str = "Missing required fields"):
        super().__init__(message)
        self.message = message


class AdapterError(Exception):
    """Any failure talking to the document store."""


class AdapterUnavailableError(AdapterError):
    """The store connection was never established (or has been closed)."""


class ReadError(AdapterError):
    """A query against the store failed."""


class WriteError(AdapterError):
    """An insert, update or delete against the store failed."""


class DuplicateAirportError(WriteError):
    """An airport with the same IATA code is already stored."""


def error_response(status_code: int, message: str) -> JSONResponse:
    """Render the uniform ``{"error": ...}`` envelope."""
    return JSONResponse({"error": message}, status_code=status_code)


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Route every HTTP error through the JSON error envelope."""
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
