"""
Company API.
"""

from typing import Any

from ._http import HTTPClient
from .resource import Resource


class CompanyAPI:
    """API for the company the token belongs to."""

    def __init__(self, http: HTTPClient):
        self._resource = Resource(http, "company")

    def get(self) -> Any:
        """Get the company."""
        return self._resource.get()
