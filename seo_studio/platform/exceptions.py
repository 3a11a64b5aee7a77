from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from seo_studio.platform.logger import get_logger
from seo_studio.platform.response import error_response

logger = get_logger(__name__)


class ServiceError(Exception):
    """Base for every failure a request handler reports to the caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def with_headline(self, headline: str) -> "ServiceError":
        """Same error class, caller-facing headline, original message kept as details."""
        details = self.details if self.details is not None else self.message
        error = type(self)(headline, details=details)
        error.__cause__ = self
        return error


class InputValidationError(ServiceError):
    """A required request field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST


class FetchOrParseError(ServiceError):
    """The scrape target was unreachable, answered non-2xx, or could not be read."""


class UpstreamModelError(ServiceError):
    """The chat-completion call failed, timed out or returned nothing."""


class StructuredOutputError(ServiceError):
    """Model output (or caller-supplied analysis) is not the JSON we need."""


def add_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def service_exception_handler(request: Request, exc: ServiceError):
        if exc.status_code >= 500:
            logger.error(
                "%s on %s %s: %s (%s)",
                type(exc).__name__,
                request.method,
                request.url.path,
                exc.message,
                exc.details,
            )
        else:
            logger.info(
                "%s on %s %s: %s",
                type(exc).__name__,
                request.method,
                request.url.path,
                exc.message,
            )
        return error_response(
            error=exc.message, details=exc.details, status_code=exc.status_code
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(error=str(exc.detail) or "Error", status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return error_response(
            error="Invalid request body",
            details=[
                {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
                for err in exc.errors()
            ],
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return error_response(
            error="Internal server error",
            details=str(exc),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
