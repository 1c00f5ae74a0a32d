"""
Blocked Numbers API - Inbound call blocking.
"""

from typing import Optional, Dict, Any, List

from ._http import HTTPClient
from .resource import Resource, DEFAULT_LIMIT


class BlockedNumberAPI:
    """
    API for numbers blocked from calling in.

    Handles:
    - Listing blocked numbers
    - Blocking and unblocking numbers in bulk
    """

    def __init__(self, http: HTTPClient):
        self._resource = Resource(http, "blockednumbers")

    def list(self, limit: int = DEFAULT_LIMIT, params: Optional[Dict[str, Any]] = None) -> Any:
        """List all numbers blocked via the API."""
        return self._resource.list(limit=limit, params=params)

    def block_numbers(self, numbers: List[str]) -> Any:
        """Block inbound calls from the given E.164 numbers."""
        return self._resource.post("add", data={"numbers": numbers})

    def unblock_numbers(self, numbers: List[str]) -> Any:
        """Unblock inbound calls from the given E.164 numbers."""
        return self._resource.post("remove", data={"numbers": numbers})

    def get_number(self, number_e164: str) -> Any:
        """
        Get a blocked number.

        The API answers 404 (NotFoundError) if the number is not blocked.
        """
        return self._resource.get(number_e164)
