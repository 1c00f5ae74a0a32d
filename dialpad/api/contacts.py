"""
Contacts API - Shared and local contacts.
"""

from typing import Optional, Dict, Any, Union

from ._http import HTTPClient
from .resource import Resource, DEFAULT_LIMIT


class ContactAPI:
    """
    API for contacts.

    Handles:
    - Contact listing
    - Contact CRUD
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize Contacts API.

        Args:
            http: HTTP client instance
        """
        self._resource = Resource(http, "contacts")

    def list(self, limit: int = DEFAULT_LIMIT, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        List contacts.

        Args:
            limit: Maximum number of results
            params: Extra query parameters (owner_id, cursor, ...); a "limit"
                key here overrides the limit argument
        """
        return self._resource.list(limit=limit, params=params)

    def create(self, data: Dict[str, Any]) -> Any:
        """Create a contact."""
        return self._resource.post(data=data)

    def get(self, contact_id: Union[int, str]) -> Any:
        """Get a contact by ID."""
        return self._resource.get(contact_id)

    def update(self, contact_id: Union[int, str], data: Dict[str, Any]) -> Any:
        """Update a contact."""
        return self._resource.patch(contact_id, data=data)

    def delete(self, contact_id: Union[int, str]) -> Any:
        """Delete a contact."""
        return self._resource.delete(contact_id)
