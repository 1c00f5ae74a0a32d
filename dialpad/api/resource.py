"""
Shared request helper for Dialpad resources.

Every resource API holds one Resource, which owns the fixed path prefix
(e.g. ``("users",)``) and forwards verb calls to the HTTP client.
"""

from typing import Any, Dict, Optional, Tuple, Union

from ._http import HTTPClient

Segment = Union[str, int]

DEFAULT_LIMIT = 25


class Resource:
    """
    Request helper scoped to a fixed path prefix.

    Path segments are joined with "/" as given; no encoding or
    normalisation is applied, so callers pass non-empty strings or ints.
    """

    def __init__(self, http: HTTPClient, *path: Segment):
        """
        Initialize the resource helper.

        Args:
            http: HTTP client instance
            path: Fixed path segments forming the resource prefix
        """
        self._http = http
        self._path: Tuple[Segment, ...] = tuple(path)

    @property
    def path(self) -> Tuple[Segment, ...]:
        """Fixed path segments of this resource."""
        return self._path

    def build_path(self, *segments: Segment) -> str:
        """Join the resource prefix with call-specific segments."""
        return "/".join(str(s) for s in self._path + segments)

    def get(self, *segments: Segment, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._http.request("GET", self.build_path(*segments), params=params)

    def post(
        self,
        *segments: Segment,
        data: Any = None,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        return self._http.request("POST", self.build_path(*segments), params=params, json_data=data)

    def patch(
        self,
        *segments: Segment,
        data: Any = None,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        return self._http.request("PATCH", self.build_path(*segments), params=params, json_data=data)

    def put(
        self,
        *segments: Segment,
        data: Any = None,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        return self._http.request("PUT", self.build_path(*segments), params=params, json_data=data)

    def delete(
        self,
        *segments: Segment,
        data: Any = None,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """DELETE request; some endpoints (bulk unassign/remove) take a body."""
        return self._http.request("DELETE", self.build_path(*segments), params=params, json_data=data)

    def list(
        self,
        *segments: Segment,
        limit: int = DEFAULT_LIMIT,
        params: Optional[Dict[str, Any]] = None,
        **fixed: Any
    ) -> Any:
        """
        GET a collection with a result limit.

        Query is built as ``{**fixed, "limit": limit, **params}``: keys in
        ``params`` win, including ``limit``.
        """
        query: Dict[str, Any] = dict(fixed)
        query["limit"] = limit
        if params:
            query.update(params)
        return self.get(*segments, params=query)
