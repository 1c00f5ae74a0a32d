"""
Exceptions raised by the Dialpad client.
"""

from typing import Any, Dict, Optional


class DialpadError(Exception):
    """Base exception for all Dialpad client errors."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class ConfigurationError(DialpadError):
    """Invalid client configuration (e.g. unknown environment)."""


class ValidationError(DialpadError):
    """Request input was rejected, locally or by the API (400/422)."""


class APIError(DialpadError):
    """The API request failed."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None,
        response: Any = None,
        details: Any = None,
    ):
        super().__init__(message, details=details)
        self.status_code = status_code
        self.response_data = response_data or {}
        self.response = response


class AuthenticationError(APIError):
    """The API token was missing, invalid or expired (401)."""


class PermissionDeniedError(APIError):
    """The token is not allowed to access the resource (403)."""


class NotFoundError(APIError):
    """The requested resource does not exist (404)."""


class BadRequestError(APIError, ValidationError):
    """The API rejected the request input (400/422)."""
