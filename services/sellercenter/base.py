"""Protocol of the Seller Center client consumed by the facade."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from datetime import datetime

    from services.sellercenter.models import (
        Feed,
        FeedResponse,
        Image,
        ProductReference,
        ProductSubmission,
    )
    from services.sellercenter.webhooks import WebhookManager


@runtime_checkable
class SellerCenterApi(Protocol):
    """
    Operations of the Falabella Seller Center API.

    Implementations raise ``httpx.HTTPStatusError`` when the HTTP exchange
    fails and ``ErrorResponseError`` when the API answers with an
    ErrorResponse. Nothing else is translated by callers.
    """

    def get_products(self, product_filter: str, limit: int, offset: int) -> list[dict[str, Any]]:
        """List products matching a filter."""
        ...

    def get_products_by_seller_sku(self, skus: Sequence[str]) -> list[dict[str, Any]]:
        """List products by seller SKU."""
        ...

    def product_create(self, products: Sequence[ProductSubmission]) -> FeedResponse:
        """Submit new products."""
        ...

    def product_update(self, products: Sequence[ProductReference]) -> FeedResponse:
        """Submit business unit updates."""
        ...

    def product_remove(self, products: Sequence[ProductReference]) -> FeedResponse:
        """Submit product removals."""
        ...

    def add_image(self, images: Mapping[str, Sequence[Image]]) -> FeedResponse:
        """Submit product images."""
        ...

    def get_feed_status_by_id(self, feed_id: str) -> Feed:
        """Fetch the status of one feed."""
        ...

    def get_feed_offset_list(self, offset: int, limit: int) -> list[Feed]:
        """List feeds."""
        ...

    def get_orders_created_after(
        self,
        created_after: datetime,
        limit: int,
        offset: int,
        sort_by: str,
        sort_direction: str,
    ) -> list[dict[str, Any]]:
        """List orders created after a point in time."""
        ...

    def get_multiple_order_items(self, order_ids: Sequence[int]) -> list[dict[str, Any]]:
        """List the items of several orders."""
        ...

    def get_order(self, order_id: int) -> dict[str, Any]:
        """Fetch one order."""
        ...

    def get_category_tree(self) -> list[dict[str, Any]]:
        """Fetch the category tree."""
        ...

    def get_category_attributes(self, category_id: int) -> list[dict[str, Any]]:
        """Fetch the attributes of a category."""
        ...

    def get_brands(self) -> list[dict[str, Any]]:
        """List brands."""
        ...

    def get_qc_status_by_sku_seller_list(self, skus: Sequence[str]) -> list[dict[str, Any]]:
        """Fetch quality control status by seller SKU."""
        ...

    def get_seller_by_user(self) -> dict[str, Any]:
        """Fetch the seller owning the credentials."""
        ...

    def webhooks(self) -> WebhookManager:
        """Return the webhook manager."""
        ...
