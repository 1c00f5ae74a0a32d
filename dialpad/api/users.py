"""
Users API - User management operations.
"""

from typing import Optional, Dict, Any, Union

from ._http import HTTPClient
from .resource import Resource, DEFAULT_LIMIT

UserId = Union[int, str]


class UserAPI:
    """
    API for user management operations.

    Handles:
    - User CRUD
    - Call actions (initiate call, toggle recording, do-not-disturb)
    - Number assignment
    - Deskphones and personas
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize Users API.

        Args:
            http: HTTP client instance
        """
        self._resource = Resource(http, "users")

    def list(self, limit: int = DEFAULT_LIMIT, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        List users.

        Args:
            limit: Maximum number of results
            params: Extra query parameters (email, state, cursor, ...); a
                "limit" key here overrides the limit argument
        """
        return self._resource.list(limit=limit, params=params)

    def create(self, email: str, office_id: int, data: Optional[Dict[str, Any]] = None) -> Any:
        """
        Create a user.

        Args:
            email: Email address of the new user
            office_id: Office the user belongs to
            data: Extra body fields (first_name, last_name, license, ...)
        """
        body: Dict[str, Any] = {"email": email, "office_id": office_id}
        if data:
            body.update(data)
        return self._resource.post(data=body)

    def get(self, user_id: UserId) -> Any:
        """Get a user by ID ("me" for the token owner)."""
        return self._resource.get(user_id)

    def update(self, user_id: UserId, data: Dict[str, Any]) -> Any:
        """Update a user."""
        return self._resource.patch(user_id, data=data)

    def delete(self, user_id: UserId) -> Any:
        """Delete a user."""
        return self._resource.delete(user_id)

    # ========== Call Actions ==========

    def toggle_call_recording(self, user_id: UserId, data: Dict[str, Any]) -> Any:
        """Start or stop recording the user's active call."""
        return self._resource.patch(user_id, "activecall", data=data)

    def initiate_call(
        self,
        user_id: UserId,
        phone_number: str,
        data: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Ring the user's devices and dial phone_number once answered."""
        body: Dict[str, Any] = {"phone_number": phone_number}
        if data:
            body.update(data)
        return self._resource.post(user_id, "initiate_call", data=body)

    def toggle_do_not_disturb(self, user_id: UserId, do_not_disturb: bool) -> Any:
        """Set the user's do-not-disturb flag."""
        return self._resource.patch(user_id, "togglednd", data={"do_not_disturb": do_not_disturb})

    # ========== Numbers ==========

    def assign_number(self, user_id: UserId, data: Dict[str, Any]) -> Any:
        """Assign a number to a user."""
        return self._resource.post(user_id, "assign_number", data=data)

    def unassign_number(self, user_id: UserId, number_e164: str) -> Any:
        """Unassign a number from a user."""
        return self._resource.post(user_id, "unassign_number", data={"number": number_e164})

    # ========== Deskphones ==========

    def get_deskphones(self, user_id: UserId) -> Any:
        """List the deskphones of a user."""
        return self._resource.get(user_id, "deskphones")

    def create_deskphone(
        self,
        user_id: UserId,
        mac_address: str,
        name: str,
        phone_type: str
    ) -> Any:
        """Register a deskphone to a user."""
        return self._resource.post(
            user_id,
            "deskphones",
            data={"mac_address": mac_address, "name": name, "type": phone_type}
        )

    def get_deskphone(self, user_id: UserId, deskphone_id: Union[int, str]) -> Any:
        """Get a deskphone of a user."""
        return self._resource.get(user_id, "deskphones", deskphone_id)

    def update_deskphone(
        self,
        user_id: UserId,
        deskphone_id: Union[int, str],
        data: Dict[str, Any]
    ) -> Any:
        """Update a deskphone of a user."""
        return self._resource.patch(user_id, "deskphones", deskphone_id, data=data)

    def delete_deskphone(self, user_id: UserId, deskphone_id: Union[int, str]) -> Any:
        """Delete a deskphone of a user."""
        return self._resource.delete(user_id, "deskphones", deskphone_id)

    # ========== Personas ==========

    def get_personas(self, user_id: UserId) -> Any:
        """List the personas of a user."""
        return self._resource.get(user_id, "personas")

    def update_persona(
        self,
        user_id: UserId,
        persona_id: Union[int, str],
        data: Dict[str, Any]
    ) -> Any:
        """Update a persona of a user."""
        return self._resource.patch(user_id, "personas", persona_id, data=data)
