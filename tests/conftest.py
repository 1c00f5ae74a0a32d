"""
Shared fixtures for Dialpad client tests.
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from dialpad import DialpadClient

SANDBOX_ROOT = "https://sandbox.dialpad.com/api/v2/"


def make_response(status_code=200, body=None, method="GET", url=SANDBOX_ROOT):
    """Build a real requests.Response with a JSON body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body.encode() if isinstance(body, str) else body
    else:
        response._content = json.dumps(body).encode()
    response.request = MagicMock(method=method, url=url)
    return response


@pytest.fixture
def mock_session():
    """Create a mock requests session answering 200 {}."""
    session = MagicMock()
    session.headers = {}
    session.proxies = {}
    session.request.return_value = make_response(200, {})
    return session


@pytest.fixture
def client(mock_session):
    """Create a sandbox client backed by the mock session."""
    return DialpadClient("test-token", session=mock_session)


def last_call(session):
    """Return (method, url, kwargs) of the most recent session request."""
    kwargs = session.request.call_args.kwargs
    return kwargs["method"], kwargs["url"], kwargs
