"""
Numbers API - Phone number inventory and assignment.
"""

from typing import Optional, Dict, Any

from ._http import HTTPClient
from .resource import Resource, DEFAULT_LIMIT


class NumberAPI:
    """
    API for phone numbers.

    Handles:
    - Number listing and lookup
    - Assignment to users, offices, rooms, ...
    - Unassignment (optionally releasing the number)
    - Number formatting
    """

    def __init__(self, http: HTTPClient):
        self._resource = Resource(http, "numbers")

    def list(self, limit: int = DEFAULT_LIMIT, params: Optional[Dict[str, Any]] = None) -> Any:
        """List numbers."""
        return self._resource.list(limit=limit, params=params)

    def get_number(self, number_e164: str) -> Any:
        """Get details of a number."""
        return self._resource.get(number_e164)

    def unassign(self, number_e164: str, release: bool = False) -> Any:
        """
        Unassign a number from its target.

        Args:
            number_e164: Number to unassign
            release: Also release the number back to the carrier
        """
        return self._resource.delete(number_e164, data={"release": release})

    def assign(
        self,
        number_e164: str,
        target_id: int,
        target_type: str,
        primary: bool = True
    ) -> Any:
        """
        Assign a number to a target.

        Args:
            number_e164: Number to assign
            target_id: ID of the target
            target_type: Target type (user, office, room, callcenter, ...)
            primary: Make it the target's primary number
        """
        return self._resource.post(
            "assign",
            data={
                "number": number_e164,
                "target_id": target_id,
                "target_type": target_type,
                "primary": primary,
            }
        )

    def format(self, number: str, country_code: Optional[str] = None) -> Any:
        """Format a number as E.164, optionally using a country code hint."""
        body: Dict[str, Any] = {"number": number}
        if country_code is not None:
            body["country_code"] = country_code
        return self._resource.post("format", data=body)
