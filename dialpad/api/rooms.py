"""
Rooms API - Rooms, their numbers and deskphones.
"""

from typing import Optional, Dict, Any, Union

from ._http import HTTPClient
from .resource import Resource, DEFAULT_LIMIT

RoomId = Union[int, str]


class RoomAPI:
    """
    API for rooms.

    Handles:
    - Room CRUD
    - International PIN generation
    - Number assignment
    - Deskphones registered to a room
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize Rooms API.

        Args:
            http: HTTP client instance
        """
        self._resource = Resource(http, "rooms")

    def list(self, limit: int = DEFAULT_LIMIT, params: Optional[Dict[str, Any]] = None) -> Any:
        """List rooms."""
        return self._resource.list(limit=limit, params=params)

    def create(self, data: Dict[str, Any]) -> Any:
        """Create a room."""
        return self._resource.post(data=data)

    def generate_international_pin(self, customer_ref: str) -> Any:
        """Generate a PIN for placing international calls from a room phone."""
        return self._resource.post("international_pin", data={"customer_ref": customer_ref})

    def get(self, room_id: RoomId) -> Any:
        """Get a room by ID."""
        return self._resource.get(room_id)

    def update(self, room_id: RoomId, data: Dict[str, Any]) -> Any:
        """Update a room."""
        return self._resource.patch(room_id, data=data)

    def delete(self, room_id: RoomId) -> Any:
        """Delete a room."""
        return self._resource.delete(room_id)

    def assign_number(self, room_id: RoomId, data: Dict[str, Any]) -> Any:
        """Assign a number to a room."""
        return self._resource.post(room_id, "assign_number", data=data)

    def unassign_number(self, room_id: RoomId, number_e164: str) -> Any:
        """Unassign a number from a room."""
        return self._resource.post(room_id, "unassign_number", data={"number": number_e164})

    # ========== Deskphones ==========

    def get_deskphones(self, room_id: RoomId) -> Any:
        """List the deskphones of a room."""
        return self._resource.get(room_id, "deskphones")

    def create_deskphone(
        self,
        room_id: RoomId,
        mac_address: str,
        name: str,
        phone_type: str
    ) -> Any:
        """
        Register a deskphone to a room.

        Args:
            room_id: Room ID
            mac_address: MAC address of the phone
            name: Display name
            phone_type: Phone model type
        """
        return self._resource.post(
            room_id,
            "deskphones",
            data={"mac_address": mac_address, "name": name, "type": phone_type}
        )

    def get_deskphone(self, room_id: RoomId, deskphone_id: Union[int, str]) -> Any:
        """Get a deskphone of a room."""
        return self._resource.get(room_id, "deskphones", deskphone_id)

    def delete_deskphone(self, room_id: RoomId, deskphone_id: Union[int, str]) -> Any:
        """Delete a deskphone of a room."""
        return self._resource.delete(room_id, "deskphones", deskphone_id)
