"""
Call Centers API - Call centers and their operators.
"""

from typing import Any

from ._http import HTTPClient
from .resource import Resource

DEFAULT_SKILL_LEVEL = 100


class CallCenterAPI:
    """
    API for call centers.

    Handles:
    - Call center lookup
    - Operator membership
    """

    def __init__(self, http: HTTPClient):
        self._resource = Resource(http, "callcenters")

    def get_call_center(self, call_center_id: int) -> Any:
        """Get a call center by ID."""
        return self._resource.get(call_center_id)

    def get_operators(self, call_center_id: int) -> Any:
        """List the operators of a call center."""
        return self._resource.get(call_center_id, "operators")

    def add_operator(
        self,
        call_center_id: int,
        user_id: int,
        skill_level: int = DEFAULT_SKILL_LEVEL
    ) -> Any:
        """Add a user as operator of a call center."""
        return self._resource.post(
            call_center_id,
            "operators",
            data={"user_id": user_id, "skill_level": skill_level}
        )

    def remove_operator(self, call_center_id: int, user_id: int) -> Any:
        """Remove an operator; the user is identified in the request body."""
        return self._resource.delete(call_center_id, "operators", data={"user_id": user_id})
