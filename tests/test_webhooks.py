"""Tests for webhook management."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from services.sellercenter.client import SellerCenterClient
from services.sellercenter.webhooks import WebhookManager


class TestWebhookManager:
    """Tests for WebhookManager."""

    @pytest.fixture()
    def client(self) -> MagicMock:
        """Create a client double."""
        return MagicMock(spec=SellerCenterClient)

    @pytest.fixture()
    def manager(self, client: MagicMock) -> WebhookManager:
        """Create a manager bound to the client double."""
        return WebhookManager(client)

    def test_list_webhooks(self, manager: WebhookManager, client: MagicMock) -> None:
        """A single webhook is returned as a list."""
        client.call.return_value = {
            "Body": {"Webhooks": {"Webhook": {"WebhookId": "wh-1", "CallbackUrl": "https://x"}}}
        }

        webhooks = manager.list_webhooks()

        assert webhooks == [{"WebhookId": "wh-1", "CallbackUrl": "https://x"}]
        client.call.assert_called_once_with("GetWebhooks")

    def test_list_webhooks_empty(self, manager: WebhookManager, client: MagicMock) -> None:
        """No registered webhooks yields an empty list."""
        client.call.return_value = {"Body": {"Webhooks": ""}}

        assert manager.list_webhooks() == []

    def test_create_webhook(self, manager: WebhookManager, client: MagicMock) -> None:
        """create_webhook posts the callback and events and returns the id."""
        client.call.return_value = {"Body": {"Webhook": {"WebhookId": "wh-9"}}}

        webhook_id = manager.create_webhook("https://shop/hook", ["onOrderCreated"])

        assert webhook_id == "wh-9"
        action = client.call.call_args.args[0]
        body = client.call.call_args.kwargs["body"]
        assert action == "CreateWebhook"
        assert "<CallbackUrl>https://shop/hook</CallbackUrl>" in body
        assert "<Event>onOrderCreated</Event>" in body

    def test_delete_webhook(self, manager: WebhookManager, client: MagicMock) -> None:
        """delete_webhook posts the webhook id."""
        client.call.return_value = {}

        manager.delete_webhook("wh-9")

        assert client.call.call_args.args[0] == "DeleteWebhook"
        assert "<Webhook>wh-9</Webhook>" in client.call.call_args.kwargs["body"]

    def test_list_entities(self, manager: WebhookManager, client: MagicMock) -> None:
        """Entities are returned as a list."""
        client.call.return_value = {
            "Body": {"Entities": {"Entity": [{"Name": "Order"}, {"Name": "Feed"}]}}
        }

        assert manager.list_entities() == [{"Name": "Order"}, {"Name": "Feed"}]
        client.call.assert_called_once_with("GetWebhookEntities")
