"""
User Devices API.
"""

from typing import Optional, Dict, Any

from ._http import HTTPClient
from .resource import Resource, DEFAULT_LIMIT


class UserDeviceAPI:
    """API for the devices registered to users."""

    def __init__(self, http: HTTPClient):
        self._resource = Resource(http, "userdevices")

    def get_device(self, device_id: str) -> Any:
        """Get a device by ID."""
        return self._resource.get(device_id)

    def list(
        self,
        user_id: int,
        limit: int = DEFAULT_LIMIT,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """List the devices of a user."""
        return self._resource.list(limit=limit, params=params, user_id=user_id)
