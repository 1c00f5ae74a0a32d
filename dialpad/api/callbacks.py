"""
Callbacks API - Call center callback requests.
"""

from typing import Any

from ._http import HTTPClient
from .resource import Resource


class CallbackAPI:
    """API for call center callbacks."""

    def __init__(self, http: HTTPClient):
        self._resource = Resource(http, "callback")

    def enqueue_callback(self, call_center_id: int, phone_number: str) -> Any:
        """Queue a callback from a call center to a phone number."""
        return self._resource.post(
            data={"call_center_id": call_center_id, "phone_number": phone_number}
        )

    def validate_callback(self, call_center_id: int, phone_number: str) -> Any:
        """Check whether a callback request would be accepted, without queueing it."""
        return self._resource.post(
            "validate",
            data={"call_center_id": call_center_id, "phone_number": phone_number}
        )
