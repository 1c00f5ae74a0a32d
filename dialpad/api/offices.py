"""
Offices API - Offices, their numbers, operators and plans.
"""

from typing import Optional, Dict, Any

from ._http import HTTPClient
from .resource import Resource, DEFAULT_LIMIT


class OfficeAPI:
    """
    API for offices.

    Handles:
    - Office listing and lookup
    - Number assignment
    - Office operators, call centers and departments
    - Billing plan
    """

    def __init__(self, http: HTTPClient):
        self._resource = Resource(http, "offices")

    def list(self, limit: int = DEFAULT_LIMIT, params: Optional[Dict[str, Any]] = None) -> Any:
        """List offices."""
        return self._resource.list(limit=limit, params=params)

    def get_office(self, office_id: int) -> Any:
        """Get an office by ID."""
        return self._resource.get(office_id)

    def assign_number(self, office_id: int, data: Dict[str, Any]) -> Any:
        """Assign a number to an office."""
        return self._resource.post(office_id, "assign_number", data=data)

    def unassign_number(self, office_id: int, number_e164: str) -> Any:
        """Unassign a number from an office."""
        return self._resource.post(office_id, "unassign_number", data={"number": number_e164})

    def get_operators(self, office_id: int) -> Any:
        """List the operators of an office."""
        return self._resource.get(office_id, "operators")

    def get_call_centers(
        self,
        office_id: int,
        limit: int = DEFAULT_LIMIT,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """List the call centers of an office."""
        return self._resource.list(office_id, "callcenters", limit=limit, params=params)

    def get_departments(
        self,
        office_id: int,
        limit: int = DEFAULT_LIMIT,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """List the departments of an office."""
        return self._resource.list(office_id, "departments", limit=limit, params=params)

    def get_plan(self, office_id: int) -> Any:
        """Get the billing plan of an office."""
        return self._resource.get(office_id, "plan")
