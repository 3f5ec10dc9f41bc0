"""
API error hierarchy.

Every error carries the HTTP status it maps to; the exception handlers in
``multiblog.main`` render them as ``{"error": message}``.
"""

from fastapi import status


class ApiError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(ApiError):
    """Missing or malformed input field."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    """Target row or a referenced foreign key does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class MethodNotAllowedError(ApiError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED


class ConflictError(ApiError):
    """Application-level unique constraint violation."""

    status_code = status.HTTP_409_CONFLICT


class InternalError(ApiError):
    """Unexpected failure. The message is generic; details go to the log only."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
