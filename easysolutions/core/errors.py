"""
Error types raised by the request handlers.

Each error carries the HTTP status it maps to and a message that is safe to
show to clients. The mapping to JSON responses lives in api/error_handlers.py.
"""

from typing import Optional
from fastapi import status


class ApiError(Exception):
    """Base class for every error the API reports to clients."""

    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None):
        self.message = message or self.default_message
        # Underlying error text, only echoed to clients in development mode
        self.detail = detail
        super().__init__(self.message)


class ValidationError(ApiError):
    http_status = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request data"


class InvalidIdentifier(ApiError):
    http_status = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid ID"


class NotFound(ApiError):
    http_status = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class DispatchError(ApiError):
    """Store write or mail send failed after the input was accepted."""

    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Failed to send email. Please try again later."


class InternalError(ApiError):
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"


class RouteNotFound(ApiError):
    http_status = status.HTTP_404_NOT_FOUND
    default_message = "Endpoint not found"
