"""
Webhooks API - Webhook endpoints for event delivery.
"""

from typing import Optional, Dict, Any, Union

from ._http import HTTPClient
from .resource import Resource, DEFAULT_LIMIT

WebhookId = Union[int, str]


class WebhookAPI:
    """
    API for webhooks.

    Webhooks are referenced by event subscriptions; see
    EventSubscriptionAPI and SubscriptionAPI.
    """

    def __init__(self, http: HTTPClient):
        self._resource = Resource(http, "webhooks")

    def list_webhooks(
        self,
        limit: int = DEFAULT_LIMIT,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """List webhooks."""
        return self._resource.list(limit=limit, params=params)

    def get_webhook(self, webhook_id: WebhookId) -> Any:
        """Get a webhook by ID."""
        return self._resource.get(webhook_id)

    def create_webhook(self, hook_url: str, data: Optional[Dict[str, Any]] = None) -> Any:
        """
        Create a webhook.

        Args:
            hook_url: URL receiving event payloads
            data: Extra body fields (e.g. secret)
        """
        body: Dict[str, Any] = {"hook_url": hook_url}
        if data:
            body.update(data)
        return self._resource.post(data=body)

    def update_webhook(self, webhook_id: WebhookId, data: Dict[str, Any]) -> Any:
        """Update a webhook."""
        return self._resource.patch(webhook_id, data=data)

    def delete_webhook(self, webhook_id: WebhookId) -> Any:
        """Delete a webhook."""
        return self._resource.delete(webhook_id)
