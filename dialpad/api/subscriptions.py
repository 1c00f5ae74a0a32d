"""
Subscriptions API - Agent status event subscriptions.
"""

from typing import Optional, Dict, Any

from ._http import HTTPClient
from .resource import Resource, DEFAULT_LIMIT

AGENT_STATUS = "agent_status"


class SubscriptionAPI:
    """API for agent status event subscriptions."""

    def __init__(self, http: HTTPClient):
        self._resource = Resource(http, "subscriptions")

    def list_agent_status_event_subscriptions(
        self,
        limit: int = DEFAULT_LIMIT,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """List agent status event subscriptions."""
        return self._resource.list(AGENT_STATUS, limit=limit, params=params)

    def get_agent_status_event_subscription(self, subscription_id: str) -> Any:
        """Get an agent status event subscription."""
        return self._resource.get(AGENT_STATUS, subscription_id)

    def create_agent_status_event_subscription(
        self,
        webhook_id: str,
        agent_type: str,
        enabled: bool = True,
        data: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        Create an agent status event subscription.

        Args:
            webhook_id: Webhook receiving the events
            agent_type: Agent type to watch (e.g. "callcenter")
            enabled: Whether the subscription is active
            data: Extra body fields; these win over the named arguments
        """
        body: Dict[str, Any] = {
            "webhook_id": webhook_id,
            "agent_type": agent_type,
            "enabled": enabled,
        }
        if data:
            body.update(data)
        return self._resource.post(AGENT_STATUS, data=body)

    def update_agent_status_event_subscription(
        self,
        subscription_id: str,
        data: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Update an agent status event subscription."""
        return self._resource.patch(AGENT_STATUS, subscription_id, data=data)

    def delete_agent_status_event_subscription(self, subscription_id: str) -> Any:
        """Delete an agent status event subscription."""
        return self._resource.delete(AGENT_STATUS, subscription_id)
