"""
Event Subscriptions API - Call and SMS event subscriptions.
"""

from typing import Optional, Dict, Any

from ._http import HTTPClient
from .resource import Resource, DEFAULT_LIMIT

CALL = "call"
SMS = "sms"


class EventSubscriptionAPI:
    """
    API for event subscriptions.

    Call and SMS subscriptions live in separate sub-collections
    (event-subscriptions/call and event-subscriptions/sms).
    """

    def __init__(self, http: HTTPClient):
        self._resource = Resource(http, "event-subscriptions")

    # ========== Call Event Subscriptions ==========

    def list_call_event_subscriptions(
        self,
        limit: int = DEFAULT_LIMIT,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """List call event subscriptions."""
        return self._resource.list(CALL, limit=limit, params=params)

    def get_call_event_subscription(self, subscription_id: str) -> Any:
        """Get a call event subscription."""
        return self._resource.get(CALL, subscription_id)

    def put_call_event_subscription(self, subscription_id: str, data: Dict[str, Any]) -> Any:
        """Replace a call event subscription."""
        return self._resource.put(CALL, subscription_id, data=data)

    def delete_call_event_subscription(self, subscription_id: str) -> Any:
        """Delete a call event subscription."""
        return self._resource.delete(CALL, subscription_id)

    # ========== SMS Event Subscriptions ==========

    def list_sms_event_subscriptions(
        self,
        limit: int = DEFAULT_LIMIT,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """List SMS event subscriptions."""
        return self._resource.list(SMS, limit=limit, params=params)

    def get_sms_event_subscription(self, subscription_id: str) -> Any:
        """Get an SMS event subscription."""
        return self._resource.get(SMS, subscription_id)

    def put_sms_event_subscription(self, subscription_id: str, data: Dict[str, Any]) -> Any:
        """Replace an SMS event subscription."""
        return self._resource.put(SMS, subscription_id, data=data)

    def delete_sms_event_subscription(self, subscription_id: str) -> Any:
        """Delete an SMS event subscription."""
        return self._resource.delete(SMS, subscription_id)
