"""
Calls API - Outbound call initiation and call details.
"""

from typing import Optional, Dict, Any

from ._http import HTTPClient
from .resource import Resource


class CallAPI:
    """API for calls."""

    def __init__(self, http: HTTPClient):
        self._resource = Resource(http, "call")

    def initiate_call(
        self,
        phone_number: str,
        user_id: int,
        data: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        Initiate an outbound call to ring all devices of a user.

        Args:
            phone_number: E.164 number to call
            user_id: ID of the calling user
            data: Extra body fields (group_id, outbound_caller_id, ...)
        """
        body: Dict[str, Any] = {"phone_number": phone_number, "user_id": user_id}
        if data:
            body.update(data)
        return self._resource.post(data=body)

    def get_info(self, call_id: int) -> Any:
        """Get details of a call."""
        return self._resource.get(call_id)
