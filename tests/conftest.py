"""
Pytest configuration and fixtures for the test suite.

This module contains shared fixtures used across all tests.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest

from services.falabella.facade import FalabellaSellerCenter
from services.feeds.store import FeedStatusStore
from services.feeds.types import FeedRecord, FeedStatus
from services.sellercenter.client import SellerCenterClient
from services.sellercenter.models import Feed, FeedResponse


@pytest.fixture()
def make_feed() -> Callable[..., Feed]:
    """Return a factory for Feed objects with sensible defaults."""

    def factory(**overrides: Any) -> Feed:
        values: dict[str, Any] = {
            "id": "f-100",
            "status": "Processing",
            "action": "ProductCreate",
            "source": "api",
            "creation_date": datetime(2024, 5, 1, 12, 0, tzinfo=UTC),
            "updated_date": datetime(2024, 5, 1, 12, 1, tzinfo=UTC),
            "total_records": 1,
            "processed_records": 0,
            "failed_records": 0,
        }
        values.update(overrides)
        return Feed(**values)

    return factory


@pytest.fixture()
def mock_client(make_feed: Callable[..., Feed]) -> MagicMock:
    """Return a Seller Center client double acknowledging feed f-100."""
    client = MagicMock(spec=SellerCenterClient)
    acknowledgement = FeedResponse(request_id="f-100", request_action="ProductCreate")
    client.product_create.return_value = acknowledgement
    client.product_update.return_value = acknowledgement
    client.product_remove.return_value = acknowledgement
    client.add_image.return_value = acknowledgement
    client.get_feed_status_by_id.return_value = make_feed()
    return client


@pytest.fixture()
def mock_store() -> MagicMock:
    """Return a feed store double echoing upserted feeds as records."""
    store = MagicMock(spec=FeedStatusStore)

    def upsert(feed: Feed) -> FeedRecord:
        return FeedRecord(
            feed_id=feed.id,
            status=FeedStatus(feed.status),
            action=feed.action,
            source=feed.source,
            total_records=feed.total_records,
        )

    store.upsert.side_effect = upsert
    return store


@pytest.fixture()
def seller_center(mock_client: MagicMock, mock_store: MagicMock) -> FalabellaSellerCenter:
    """Return a Chilean facade wired to client and store doubles."""
    return FalabellaSellerCenter(
        "seller@example.com",
        "secret-key",
        "CHL",
        client=mock_client,
        store=mock_store,
    )


@pytest.fixture()
def not_found_error() -> httpx.HTTPStatusError:
    """Return the error raised by raise_for_status on a 404 response."""
    request = httpx.Request("POST", "https://sellercenter-api.falabella.com/?Action=ProductRemove")
    response = httpx.Response(404, text="Not Found", request=request)
    return httpx.HTTPStatusError("Client error '404 Not Found'", request=request, response=response)
