"""
Call Routers API - API-driven call routing.
"""

from typing import Optional, Dict, Any, Union

from ._http import HTTPClient
from .resource import Resource


class CallRouterAPI:
    """
    API for call routers.

    Handles:
    - Router CRUD
    - Number assignment
    """

    def __init__(self, http: HTTPClient):
        self._resource = Resource(http, "callrouters")

    def list(self, office_id: int, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        List the call routers of an office.

        Args:
            office_id: Office to list routers for
            params: Extra query parameters; these win over office_id
        """
        query: Dict[str, Any] = {"office_id": office_id}
        if params:
            query.update(params)
        return self._resource.get(params=query)

    def create(self, data: Dict[str, Any]) -> Any:
        """Create a call router."""
        return self._resource.post(data=data)

    def get(self, router_id: Union[int, str]) -> Any:
        """Get a call router by ID."""
        return self._resource.get(router_id)

    def update(self, router_id: Union[int, str], data: Dict[str, Any]) -> Any:
        """Update a call router."""
        return self._resource.patch(router_id, data=data)

    def delete(self, router_id: Union[int, str]) -> Any:
        """Delete a call router."""
        return self._resource.delete(router_id)

    def assign_number(self, router_id: Union[int, str], data: Dict[str, Any]) -> Any:
        """Assign a number to a call router."""
        return self._resource.post(router_id, "assign_number", data=data)
