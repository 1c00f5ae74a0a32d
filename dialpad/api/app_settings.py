"""
App Settings API - OAuth app settings retrieval.
"""

from typing import Optional, Any

from ._http import HTTPClient
from .resource import Resource
from .schemas import GetAppSettingsArgs, validate_payload


class AppSettingsAPI:
    """API for the app settings of the calling OAuth app."""

    def __init__(self, http: HTTPClient):
        """
        Initialize App Settings API.

        Args:
            http: HTTP client instance
        """
        self._resource = Resource(http, "app", "settings")

    def get_settings(
        self,
        target_id: Optional[int] = None,
        target_type: Optional[str] = None
    ) -> Any:
        """
        Get the app settings of the OAuth app, or of a specific target.

        Args:
            target_id: ID of the target (user, office, ...)
            target_type: Type of the target

        Raises:
            ValidationError: If the arguments have the wrong type
        """
        params = validate_payload(
            GetAppSettingsArgs,
            {"target_id": target_id, "target_type": target_type}
        )
        return self._resource.get(params=params)
