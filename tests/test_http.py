"""
Tests for the HTTP transport.
"""

from unittest.mock import MagicMock

import pytest
import requests

from dialpad.api import HTTPClient
from dialpad.config import DialpadConfig
from dialpad.exceptions import (
    APIError,
    AuthenticationError,
    BadRequestError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)

from .conftest import make_response, last_call


@pytest.fixture
def http(mock_session):
    """Create an HTTP client with a mock session."""
    config = DialpadConfig(token="secret")
    return HTTPClient(config, session=mock_session)


class TestHeaders:
    """Tests for per-request headers."""

    def test_bearer_token(self, http, mock_session):
        """Test the authorization header carries the token."""
        http.request("GET", "users")
        _, _, kwargs = last_call(mock_session)
        assert kwargs["headers"]["Authorization"] == "Bearer secret"

    def test_no_company_header_by_default(self, http, mock_session):
        """Test the company header is absent until a company ID is set."""
        http.request("GET", "users")
        _, _, kwargs = last_call(mock_session)
        assert "DP-Company-ID" not in kwargs["headers"]

    def test_company_header_reads_current_value(self, http, mock_session):
        """Test a company ID changed after construction applies to the next request."""
        http.config.company_id = 42
        http.request("GET", "company")
        assert last_call(mock_session)[2]["headers"]["DP-Company-ID"] == "42"

        http.config.company_id = "abc"
        http.request("GET", "company")
        assert last_call(mock_session)[2]["headers"]["DP-Company-ID"] == "abc"

    def test_session_defaults(self, mock_session):
        """Test session-level headers and proxies from config."""
        config = DialpadConfig(
            token="t",
            headers={"X-Trace": "1"},
            proxies={"https": "http://proxy:8080"},
        )
        HTTPClient(config, session=mock_session)
        assert mock_session.headers["Accept"] == "application/json"
        assert mock_session.headers["User-Agent"].startswith("dialpad-python/")
        assert mock_session.headers["X-Trace"] == "1"
        assert mock_session.proxies["https"] == "http://proxy:8080"


class TestRequest:
    """Tests for request building and response decoding."""

    def test_url_and_transport_options(self, mock_session):
        """Test the URL is joined onto the API root and options are passed."""
        config = DialpadConfig(token="t", timeout=5.0, verify_ssl=False)
        HTTPClient(config, session=mock_session).request("GET", "users/1")
        method, url, kwargs = last_call(mock_session)
        assert method == "GET"
        assert url == "https://sandbox.dialpad.com/api/v2/users/1"
        assert kwargs["timeout"] == 5.0
        assert kwargs["verify"] is False

    def test_none_params_dropped(self, http, mock_session):
        """Test query parameters set to None are not sent."""
        http.request("GET", "users", params={"limit": 25, "email": None})
        assert last_call(mock_session)[2]["params"] == {"limit": 25}

    def test_json_body(self, http, mock_session):
        """Test the body is sent as JSON."""
        http.request("POST", "sms", json_data={"text": "hi"})
        assert last_call(mock_session)[2]["json"] == {"text": "hi"}

    def test_decodes_json(self, http, mock_session):
        """Test the decoded body is returned unchanged."""
        mock_session.request.return_value = make_response(200, {"items": [1, 2]})
        assert http.request("GET", "users") == {"items": [1, 2]}

    def test_empty_body(self, http, mock_session):
        """Test a 204 response decodes to an empty dict."""
        mock_session.request.return_value = make_response(204)
        assert http.request("DELETE", "users/1") == {}

    def test_non_json_body(self, http, mock_session):
        """Test a non-JSON success body is wrapped."""
        mock_session.request.return_value = make_response(200, "plain text")
        assert http.request("GET", "stats/1") == {"content": "plain text"}


class TestErrors:
    """Tests for error classification."""

    @pytest.mark.parametrize("status,exc", [
        (401, AuthenticationError),
        (403, PermissionDeniedError),
        (404, NotFoundError),
        (500, APIError),
    ])
    def test_status_mapping(self, http, mock_session, status, exc):
        """Test HTTP status codes map to exceptions."""
        mock_session.request.return_value = make_response(status, {"error": {"message": "nope"}})
        with pytest.raises(exc) as info:
            http.request("GET", "users")
        assert info.value.status_code == status
        assert "nope" in str(info.value)
        assert info.value.response is mock_session.request.return_value

    @pytest.mark.parametrize("status", [400, 422])
    def test_bad_request(self, http, mock_session, status):
        """Test 400/422 responses raise ValidationError carrying status and response."""
        response = make_response(status, {"message": "bad number"})
        mock_session.request.return_value = response
        with pytest.raises(ValidationError, match="bad number") as info:
            http.request("POST", "numbers/format")
        assert isinstance(info.value, BadRequestError)
        assert isinstance(info.value, APIError)
        assert info.value.status_code == status
        assert info.value.response is response
        assert info.value.response_data == {"message": "bad number"}

    def test_dot_segments_not_normalised(self, http, mock_session):
        """Test the endpoint is appended to the API root as given."""
        http.request("GET", "users/..")
        assert last_call(mock_session)[1] == "https://sandbox.dialpad.com/api/v2/users/.."

    def test_non_json_error(self, http, mock_session):
        """Test an error with a plain text body."""
        mock_session.request.return_value = make_response(502, "Bad Gateway")
        with pytest.raises(APIError, match="Bad Gateway"):
            http.request("GET", "users")

    def test_connection_error(self, http, mock_session):
        """Test network failures surface as APIError chained to the cause."""
        cause = requests.exceptions.ConnectionError("refused")
        mock_session.request.side_effect = cause
        with pytest.raises(APIError, match="Connection failed") as info:
            http.request("GET", "users")
        assert info.value.__cause__ is cause
        assert info.value.status_code is None

    def test_timeout(self, http, mock_session):
        """Test timeouts surface as APIError."""
        mock_session.request.side_effect = requests.exceptions.Timeout("slow")
        with pytest.raises(APIError, match="timed out"):
            http.request("GET", "users")

    def test_no_retry(self, http, mock_session):
        """Test a failing request is issued exactly once."""
        mock_session.request.return_value = make_response(503, {})
        with pytest.raises(APIError):
            http.request("GET", "users")
        assert mock_session.request.call_count == 1


class TestSessionLifecycle:
    """Tests for session creation and closing."""

    def test_lazy_session(self):
        """Test a requests session is created on first use."""
        http = HTTPClient(DialpadConfig(token="t"))
        assert isinstance(http.session, requests.Session)
        assert http.session is http.session
        http.close()

    def test_close(self, http, mock_session):
        """Test closing the client closes the session."""
        with http:
            pass
        mock_session.close.assert_called_once()
