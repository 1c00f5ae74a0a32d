"""
Dialpad API Client Package.

Structure:
    - client.py: Main DialpadClient facade
    - _http.py: Base HTTP client with session, auth headers and error handling
    - resource.py: Path-prefixed request helper shared by all resources
    - schemas.py: Pre-flight validation for app settings and SMS
    - one module per API resource (users.py, sms.py, webhooks.py, ...)

Usage:
    from dialpad.api import DialpadClient

    client = DialpadClient("YOUR_API_TOKEN")
    users = client.user.list()
    client.sms.send_sms(text="Hello", to_numbers=["+15551234567"], user_id=1)
"""

from .client import DialpadClient, get_client
from ._http import HTTPClient
from .resource import Resource
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

__all__ = [
    # Main client
    "DialpadClient",
    "get_client",
    # HTTP layer
    "HTTPClient",
    "Resource",
    # Resource APIs
    "AppSettingsAPI",
    "BlockedNumberAPI",
    "CallCenterAPI",
    "CallRouterAPI",
    "CallbackAPI",
    "CallAPI",
    "CompanyAPI",
    "ContactAPI",
    "DepartmentAPI",
    "EventSubscriptionAPI",
    "NumberAPI",
    "OfficeAPI",
    "RoomAPI",
    "SMSAPI",
    "StatsAPI",
    "SubscriptionAPI",
    "TranscriptAPI",
    "UserDeviceAPI",
    "UserAPI",
    "WebhookAPI",
]
