"""
Stats API - Analytics exports.
"""

from typing import Dict, Any, Union

from ._http import HTTPClient
from .resource import Resource


class StatsAPI:
    """API for stats exports."""

    def __init__(self, http: HTTPClient):
        self._resource = Resource(http, "stats")

    def post_export(self, data: Dict[str, Any]) -> Any:
        """Start a stats export; returns the export request ID."""
        return self._resource.post(data=data)

    def get_export(self, export_id: Union[int, str]) -> Any:
        """Get the status and download URL of a stats export."""
        return self._resource.get(export_id)
