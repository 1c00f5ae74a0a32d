"""
Transcripts API.
"""

from typing import Any

from ._http import HTTPClient
from .resource import Resource


class TranscriptAPI:
    """API for call transcripts."""

    def __init__(self, http: HTTPClient):
        self._resource = Resource(http, "transcripts")

    def get_transcript(self, call_id: int) -> Any:
        """Get the transcript of a call."""
        return self._resource.get(call_id)
