"""Webhook management on Seller Center."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from services.sellercenter.models import as_list
from services.sellercenter.payloads import webhook_create_body, webhook_delete_body

if TYPE_CHECKING:
    from collections.abc import Sequence

    from services.sellercenter.client import SellerCenterClient


class WebhookManager:
    """Create, list and delete the webhooks of a seller account."""

    def __init__(self, client: SellerCenterClient) -> None:
        """Bind the manager to a client."""
        self._client = client

    def list_webhooks(self) -> list[dict[str, Any]]:
        """Return the registered webhooks."""
        body = self._client.call("GetWebhooks").get("Body") or {}
        webhooks = body.get("Webhooks") or {}
        return as_list(webhooks.get("Webhook") if isinstance(webhooks, dict) else webhooks)

    def create_webhook(self, callback_url: str, events: Sequence[str]) -> str:
        """
        Register a webhook.

        Args:
            callback_url: URL Seller Center will call.
            events: Event aliases (e.g. 'onOrderCreated').

        Returns:
            The id of the new webhook.
        """
        request_body = webhook_create_body(callback_url, events)
        response = self._client.call("CreateWebhook", body=request_body)
        body = response.get("Body") or {}
        return str((body.get("Webhook") or {}).get("WebhookId", ""))

    def delete_webhook(self, webhook_id: str) -> None:
        """Delete a webhook by id."""
        self._client.call("DeleteWebhook", body=webhook_delete_body(webhook_id))

    def list_entities(self) -> list[dict[str, Any]]:
        """Return the entities and events a webhook can subscribe to."""
        body = self._client.call("GetWebhookEntities").get("Body") or {}
        entities = body.get("Entities") or {}
        return as_list(entities.get("Entity") if isinstance(entities, dict) else entities)
