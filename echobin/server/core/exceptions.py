"""
Custom exception classes.

Represent malformed input to the utility endpoints, plus the exception
handlers that shape every error response as ``{"error": ...}``.
"""

import logging
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..models import ErrorBody

logger = logging.getLogger(__name__)


class EchoServerError(Exception):
    """Base exception class for rejected requests."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidStatusCodeError(EchoServerError):
    """Raised when /status receives an unusable status code."""

    def __init__(self, code: str):
        self.code = code
        super().__init__("status code is not a number")


class StatusCodeOutOfRangeError(EchoServerError):
    """Raised when the requested status code is outside [200, 599]."""

    def __init__(self, code: int):
        self.code = code
        super().__init__(f"status code {code} is outside the range [200, 599]")


class MissingRedirectTargetError(EchoServerError):
    """Raised when /redirect is called without a `to` link."""

    def __init__(self):
        super().__init__("provide a `to` link in the URL")


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorBody(error=message).model_dump(),
        headers=headers,
    )


# ===========================================
# Exception Handlers
# ===========================================


async def echo_server_exception_handler(request: Request, exc: EchoServerError):
    """
    Handler for rejected input.
    """
    return error_response(exc.status_code, str(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Handler for HTTPException (unknown routes, wrong methods).
    """
    return error_response(exc.status_code, exc.detail, headers=getattr(exc, "headers", None))


async def global_exception_handler(request: Request, exc: Exception):
    """
    Catch-all handler for unhandled exceptions.
    """
    logger.error(
        f"Global exception handler caught: {exc}",
        exc_info=True,
        extra={
            "path": request.url.path,
            "method": request.method,
        },
    )

    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")
