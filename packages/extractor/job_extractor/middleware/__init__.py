"""Middleware package — error hierarchy and request ID."""

from job_extractor.middleware.error_handler import (
    AcquisitionError,
    ExtractorError,
    StructuringError,
    ValidationError,
    register_error_handlers,
)
from job_extractor.middleware.request_id import RequestIdMiddleware, current_request_id

__all__ = [
    "AcquisitionError",
    "ExtractorError",
    "RequestIdMiddleware",
    "StructuringError",
    "ValidationError",
    "current_request_id",
    "register_error_handlers",
]
