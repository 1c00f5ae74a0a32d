"""
Tests for the DialpadClient facade.
"""

import pytest

from dialpad import DialpadClient, get_client
from dialpad.api import UserAPI, SMSAPI, WebhookAPI
from dialpad.config import DialpadConfig
from dialpad.exceptions import ConfigurationError, NotFoundError

from .conftest import make_response, last_call


class TestConstruction:
    """Tests for client construction."""

    def test_defaults_to_sandbox(self, client):
        """Test the default environment."""
        assert client.base_url == "https://sandbox.dialpad.com/api/v2/"
        assert client.get_company_id() is None

    def test_live_environment(self, mock_session):
        client = DialpadClient("t", environment="live", session=mock_session)
        assert client.base_url == "https://dialpad.com/api/v2/"

    def test_base_url_override(self, mock_session):
        """Test an explicit base URL wins over the environment."""
        client = DialpadClient("t", environment="live", base_url="http://mock:9000", session=mock_session)
        client.company.get()
        assert last_call(mock_session)[1] == "http://mock:9000/api/v2/company"

    def test_unknown_environment(self, mock_session):
        """Test an unknown environment fails at construction."""
        with pytest.raises(ConfigurationError):
            DialpadClient("t", environment="prod", session=mock_session)

    def test_transport_options(self, mock_session):
        """Test transport options reach each request."""
        client = DialpadClient("t", timeout=3, verify_ssl=False, session=mock_session)
        client.company.get()
        kwargs = last_call(mock_session)[2]
        assert kwargs["timeout"] == 3
        assert kwargs["verify"] is False

    def test_explicit_config(self, mock_session):
        config = DialpadConfig(token="cfg", company_id=5)
        client = DialpadClient(config=config, session=mock_session)
        assert client.config == config
        assert client.company_id == 5

    def test_shared_config_not_mutated(self, mock_session):
        """Test setting a company ID does not leak into other clients sharing a config."""
        config = DialpadConfig(token="cfg")
        first = DialpadClient(config=config, session=mock_session)
        second = DialpadClient(config=config, session=mock_session)

        first.set_company_id(42)

        assert config.company_id is None
        assert second.get_company_id() is None
        second.company.get()
        assert "DP-Company-ID" not in last_call(mock_session)[2]["headers"]

    def test_resources_exposed(self, client):
        """Test every resource is available as an attribute."""
        assert isinstance(client.user, UserAPI)
        assert isinstance(client.sms, SMSAPI)
        assert isinstance(client.webhook, WebhookAPI)
        for name in (
            "app_settings", "blocked_number", "call", "call_router", "callback",
            "callcenter", "company", "contact", "department", "event_subscription",
            "number", "office", "room", "stats", "subscription", "transcript",
            "userdevice",
        ):
            assert getattr(client, name) is not None

    def test_get_client_from_env(self, monkeypatch, mock_session):
        """Test get_client reads the environment when no token is given."""
        monkeypatch.setenv("DIALPAD_API_KEY", "env-token")
        monkeypatch.setenv("DIALPAD_ENVIRONMENT", "live")
        monkeypatch.delenv("DIALPAD_BASE_URL", raising=False)
        client = get_client(session=mock_session)
        assert client.config.token == "env-token"
        assert client.base_url == "https://dialpad.com/api/v2/"


class TestCompanyId:
    """Tests for the company ID header."""

    def test_initial_company_id(self, mock_session):
        client = DialpadClient("t", company_id="12345", session=mock_session)
        client.user.list()
        assert last_call(mock_session)[2]["headers"]["DP-Company-ID"] == "12345"

    def test_set_company_id_mid_session(self, client, mock_session):
        """Test the header follows the current company ID."""
        client.user.list()
        assert "DP-Company-ID" not in last_call(mock_session)[2]["headers"]

        client.set_company_id(42)
        client.company.get()
        assert last_call(mock_session)[2]["headers"]["DP-Company-ID"] == "42"

        client.company_id = 43
        client.office.list()
        assert last_call(mock_session)[2]["headers"]["DP-Company-ID"] == "43"
        assert client.get_company_id() == 43

        client.set_company_id(None)
        client.office.list()
        assert "DP-Company-ID" not in last_call(mock_session)[2]["headers"]

    def test_auth_header_on_every_resource(self, client, mock_session):
        """Test every resource sends the bearer token."""
        calls = [
            lambda: client.user.get(1),
            lambda: client.sms.send_sms(text="x", to_numbers=["+1555"]),
            lambda: client.number.unassign("+1555"),
            lambda: client.webhook.create_webhook("https://h"),
            lambda: client.event_subscription.put_sms_event_subscription("s", {}),
        ]
        for call in calls:
            call()
            assert last_call(mock_session)[2]["headers"]["Authorization"] == "Bearer test-token"


class TestEndToEnd:
    """End-to-end scenarios through the facade."""

    def test_sandbox_scenario(self, client, mock_session):
        """Test listing users, then fetching the company with a company ID."""
        mock_session.request.return_value = make_response(200, {"items": [{"id": 1}]})
        result = client.user.list()

        method, url, kwargs = last_call(mock_session)
        assert result == {"items": [{"id": 1}]}
        assert (method, url) == ("GET", "https://sandbox.dialpad.com/api/v2/users")
        assert kwargs["params"] == {"limit": 25}
        assert kwargs["headers"] == {"Authorization": "Bearer test-token"}

        client.set_company_id(42)
        client.company.get()
        method, url, kwargs = last_call(mock_session)
        assert (method, url) == ("GET", "https://sandbox.dialpad.com/api/v2/company")
        assert kwargs["headers"]["DP-Company-ID"] == "42"

    def test_error_propagates(self, client, mock_session):
        """Test API errors reach the caller."""
        mock_session.request.return_value = make_response(404, {"error": {"message": "not blocked"}})
        with pytest.raises(NotFoundError, match="not blocked"):
            client.blocked_number.get_number("+15550000000")

    def test_context_manager(self, mock_session):
        with DialpadClient("t", session=mock_session) as client:
            client.company.get()
        mock_session.close.assert_called_once()
