"""Global error hierarchy and FastAPI exception handlers.

All extractor-specific errors extend ExtractorError. The FastAPI exception
handlers catch these errors (plus Pydantic's RequestValidationError and
unhandled exceptions) and return a consistent JSON envelope:
{ success, data, error, warning, meta }.
"""

from __future__ import annotations

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class ExtractorError(Exception):
    """Base error for all extractor-specific errors."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class ValidationError(ExtractorError):
    """Malformed input URL — rejected before any fetch is attempted."""

    status_code = 400
    message = "Invalid URL format"


class AcquisitionError(ExtractorError):
    """Browser launch, navigation or content extraction failed."""

    status_code = 500
    message = "Failed to acquire page content"


class StructuringError(ExtractorError):
    """Model invocation, response format or schema validation failed.

    Never reaches the HTTP layer: the structuring engine converts it into a
    degraded outcome carrying fallback data.
    """

    status_code = 500
    message = "Failed to structure job data"


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------


def _envelope(
    status_code: int,
    error: str,
    meta: dict | None = None,
) -> JSONResponse:
    """Build a JSON envelope error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "data": None,
            "error": error,
            "warning": None,
            "meta": meta,
        },
    )


async def _extractor_error_handler(
    _request: Request, exc: ExtractorError
) -> JSONResponse:
    """Handle ExtractorError subclasses."""
    meta = exc.details if exc.details else None
    message = exc.message
    if isinstance(exc, AcquisitionError):
        message = f"Scraping failed: {exc.message}"
    return _envelope(exc.status_code, message, meta=meta)


async def _validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI / Pydantic RequestValidationError (422)."""
    field_errors = [
        {
            "field": " -> ".join(str(loc) for loc in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    return _envelope(
        status_code=422,
        error="Validation error",
        meta={"fields": field_errors},
    )


async def _unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions — log traceback, return generic 500."""
    logger.error(
        "Unhandled exception: %s\n%s",
        exc,
        traceback.format_exc(),
    )
    return _envelope(status_code=500, error="Internal server error")


# ---------------------------------------------------------------------------
# Registration helper
# ---------------------------------------------------------------------------


def register_error_handlers(app: FastAPI) -> None:
    """Wire up all exception handlers on the FastAPI application."""
    app.add_exception_handler(ExtractorError, _extractor_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)  # type: ignore[arg-type]
