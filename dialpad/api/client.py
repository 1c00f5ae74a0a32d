"""
Dialpad API Client - Main facade for all API resources.
"""

import logging
from dataclasses import replace
from typing import Any, Optional, Union

import requests

from ..config import DialpadConfig, DEFAULT_ENVIRONMENT
from ._http import HTTPClient
from .app_settings import AppSettingsAPI
from .blocked_numbers import BlockedNumberAPI
from .call_centers import CallCenterAPI
from .call_routers import CallRouterAPI
from .callbacks import CallbackAPI
from .calls import CallAPI
from .company import CompanyAPI
from .contacts import ContactAPI
from .departments import DepartmentAPI
from .event_subscriptions import EventSubscriptionAPI
from .numbers import NumberAPI
from .offices import OfficeAPI
from .rooms import RoomAPI
from .sms import SMSAPI
from .stats import StatsAPI
from .subscriptions import SubscriptionAPI
from .transcripts import TranscriptAPI
from .user_devices import UserDeviceAPI
from .users import UserAPI
from .webhooks import WebhookAPI

logger = logging.getLogger(__name__)

CompanyId = Union[str, int]


class DialpadClient:
    """
    Client for the Dialpad API.

    Builds one HTTP transport and exposes every resource as an attribute:

        client = DialpadClient("YOUR_API_TOKEN", environment="live")
        users = client.user.list()
        client.set_company_id(42)
        company = client.company.get()

    Transport options (timeout, verify_ssl, headers, proxies) may be passed
    as keyword arguments; they are ignored when a full config is given.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        environment: Optional[str] = None,
        base_url: Optional[str] = None,
        company_id: Optional[CompanyId] = None,
        config: Optional[DialpadConfig] = None,
        session: Optional[requests.Session] = None,
        **transport_options: Any
    ):
        """
        Initialize the API client.

        Args:
            token: API token sent as a bearer credential
            environment: "live" or "sandbox" (default: sandbox)
            base_url: Explicit base address, overrides the environment
            company_id: Company ID sent as the DP-Company-ID header
            config: Complete configuration, used instead of the arguments above
            session: Optional pre-built requests session
            **transport_options: timeout, verify_ssl, headers, proxies
        """
        if config is None:
            config = DialpadConfig(
                token=token or "",
                environment=environment or DEFAULT_ENVIRONMENT,
                base_url=base_url,
                company_id=company_id,
                **transport_options
            )
        else:
            # Company ID is set per client
            config = replace(config)
        # Raises ConfigurationError for an unknown environment
        api_root = config.api_root
        logger.debug(f"Dialpad API root: {api_root}")

        self._http = HTTPClient(config, session=session)

        self.app_settings = AppSettingsAPI(self._http)
        self.blocked_number = BlockedNumberAPI(self._http)
        self.call = CallAPI(self._http)
        self.call_router = CallRouterAPI(self._http)
        self.callback = CallbackAPI(self._http)
        self.callcenter = CallCenterAPI(self._http)
        self.company = CompanyAPI(self._http)
        self.contact = ContactAPI(self._http)
        self.department = DepartmentAPI(self._http)
        self.event_subscription = EventSubscriptionAPI(self._http)
        self.number = NumberAPI(self._http)
        self.office = OfficeAPI(self._http)
        self.room = RoomAPI(self._http)
        self.sms = SMSAPI(self._http)
        self.stats = StatsAPI(self._http)
        self.subscription = SubscriptionAPI(self._http)
        self.transcript = TranscriptAPI(self._http)
        self.user = UserAPI(self._http)
        self.userdevice = UserDeviceAPI(self._http)
        self.webhook = WebhookAPI(self._http)

    @classmethod
    def from_env(cls, session: Optional[requests.Session] = None, **overrides: Any) -> "DialpadClient":
        """Create a client from DIALPAD_* environment variables."""
        return cls(config=DialpadConfig.from_env(**overrides), session=session)

    @property
    def config(self) -> DialpadConfig:
        """Get the configuration."""
        return self._http.config

    @property
    def base_url(self) -> str:
        """Get the base URL for API requests."""
        return self._http.base_url

    @property
    def http(self) -> HTTPClient:
        """The shared HTTP transport."""
        return self._http

    # ========== Company ID ==========

    def get_company_id(self) -> Optional[CompanyId]:
        """Get the company ID sent with requests, or None if unset."""
        return self._http.config.company_id

    def set_company_id(self, company_id: Optional[CompanyId]) -> None:
        """Set the company ID for subsequent requests (None removes the header)."""
        self._http.config.company_id = company_id

    company_id = property(get_company_id, set_company_id)

    # ========== Context Manager ==========

    def close(self) -> None:
        """Close the HTTP session."""
        self._http.close()

    def __enter__(self) -> "DialpadClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def get_client(token: Optional[str] = None, **kwargs: Any) -> DialpadClient:
    """
    Get an API client instance.

    Without a token, the configuration is read from DIALPAD_* environment
    variables.

    Args:
        token: Optional API token
        **kwargs: Passed to DialpadClient

    Returns:
        DialpadClient instance
    """
    if token is None and "config" not in kwargs:
        session = kwargs.pop("session", None)
        return DialpadClient.from_env(session=session, **kwargs)
    return DialpadClient(token, **kwargs)
