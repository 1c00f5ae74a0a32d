"""
Dialpad API client.

A typed Python client for the Dialpad REST API (v2).

Usage:
    from dialpad import DialpadClient

    client = DialpadClient("YOUR_API_TOKEN", environment="live")
    company = client.company.get()
"""

__version__ = "0.1.0"

from .api import DialpadClient, get_client  # noqa: E402
from .config import DialpadConfig, HOSTS  # noqa: E402
from .exceptions import (  # noqa: E402
    DialpadError,
    ConfigurationError,
    ValidationError,
    APIError,
    AuthenticationError,
    PermissionDeniedError,
    NotFoundError,
    BadRequestError,
)

__all__ = [
    "__version__",
    "DialpadClient",
    "get_client",
    "DialpadConfig",
    "HOSTS",
    "DialpadError",
    "ConfigurationError",
    "ValidationError",
    "APIError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "BadRequestError",
]
