"""
Departments API - Departments and their operators.
"""

from typing import Optional, Dict, Any

from ._http import HTTPClient
from .resource import Resource, DEFAULT_LIMIT


class DepartmentAPI:
    """API for departments."""

    def __init__(self, http: HTTPClient):
        self._resource = Resource(http, "departments")

    def list(self, limit: int = DEFAULT_LIMIT, params: Optional[Dict[str, Any]] = None) -> Any:
        """List departments."""
        return self._resource.list(limit=limit, params=params)

    def get(self, department_id: int) -> Any:
        """Get a department by ID."""
        return self._resource.get(department_id)

    def get_operators(self, department_id: int) -> Any:
        """List the operators of a department."""
        return self._resource.get(department_id, "operators")

    def add_operator(self, department_id: int, operator_id: int, operator_type: str) -> Any:
        """
        Add an operator to a department.

        Args:
            department_id: Department ID
            operator_id: ID of the user or room
            operator_type: "user" or "room"
        """
        return self._resource.post(
            department_id,
            "operators",
            data={"operator_id": operator_id, "operator_type": operator_type}
        )

    def remove_operator(self, department_id: int, operator_id: int) -> Any:
        """Remove an operator from a department."""
        return self._resource.delete(department_id, "operators", operator_id)
