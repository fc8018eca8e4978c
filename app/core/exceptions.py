"""Application exceptions mapped to HTTP status codes.

Services raise these; the handler registered in ``app.main`` renders them as
``{"detail": ...}``. Server-side failures (5xx) never expose their cause to the
client: the message is replaced with a generic one and the cause is logged.
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """Base exception for all application errors."""

    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def public_message(self) -> str:
        if self.status_code >= 500:
            return "Internal Server Error"
        return self.message


class ValidationFailed(AppException):
    """Missing or malformed required input."""

    status_code = 400
    default_message = "Validation error"


class NotFound(AppException):
    status_code = 404
    default_message = "Resource not found"


class StorageError(AppException):
    """Object storage put/delete/sign failed."""

    default_message = "Object storage operation failed"


class CompressionError(AppException):
    default_message = "Error compressing file"
