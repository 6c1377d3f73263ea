"""Facade over the Falabella Seller Center API."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import httpx

from core.logging import get_call_logger, get_logger
from core.result import Result, failure, success
from services.falabella.builders import (
    PayloadValidationError,
    build_business_unit_update,
    build_delete_references,
    build_image_references,
    build_product_submission,
)
from services.falabella.countries import resolve_country
from services.falabella.errors import (
    ApiError,
    ErrorScope,
    FetchError,
    InvalidRequestError,
    TransportError,
)
from services.feeds.store import DjangoFeedStore
from services.sellercenter.client import (
    DEFAULT_TIMEOUT,
    SellerCenterClient,
    SellerCenterConfiguration,
)
from services.sellercenter.errors import ErrorResponseError
from services.sellercenter.models import DEFAULT_PRODUCT_FILTER, ProductFilter

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping, Sequence

    from core.config import Settings
    from services.feeds.store import FeedStatusStore
    from services.feeds.types import FeedRecord
    from services.sellercenter.base import SellerCenterApi
    from services.sellercenter.models import Feed, FeedResponse
    from services.sellercenter.webhooks import WebhookManager

logger = get_logger(__name__)

# Orders are listed from a fixed window, newest first
ORDERS_LOOKBACK = timedelta(days=30)
ORDERS_SORT_BY = "created_at"
ORDERS_SORT_DIRECTION = "DESC"

PRODUCT_FILTERS = frozenset(product_filter.value for product_filter in ProductFilter)


class FalabellaSellerCenter:
    """
    Entry point for Seller Center operations of one seller account.

    Every operation returns a ``Result``: ``Success`` with the marketplace
    data, or ``Failure`` with a ``FetchError`` for rejected input, failed
    HTTP exchanges and ErrorResponses. Any other exception propagates.
    Mutating operations (and ``get_feed_status``) store the resulting feed
    status and return the stored ``FeedRecord``.

    Example:
        >>> seller_center = FalabellaSellerCenter("user@shop.cl", "key", "CHL")
        >>> result = seller_center.list_products(limit=100, offset=0)
    """

    def __init__(
        self,
        username: str,
        api_key: str,
        country: str,
        seller_id: str | None = None,
        *,
        client: SellerCenterApi | None = None,
        store: FeedStatusStore | None = None,
        log_calls: bool = False,
        integrator: str = "PROPIA",
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the facade.

        Args:
            username: Seller Center user.
            api_key: Seller Center API key.
            country: ISO-3 country code of the storefront.
            seller_id: Seller id (optional).
            client: Seller Center client; built from the country when omitted.
            store: Feed status store; the Django store when omitted.
            log_calls: Log one line per Seller Center call.
            integrator: Integration type sent in the User-Agent.
            timeout: Request timeout in seconds for the default client.

        Raises:
            ValueError: If the country code is not supported.
        """
        self.country = resolve_country(country)
        self.username = username
        self.seller_id = seller_id
        self.log_calls = log_calls

        if client is None:
            configuration = SellerCenterConfiguration(
                api_key=api_key,
                username=username,
                endpoint=self.country.endpoint,
                seller_id=seller_id,
                integrator=integrator,
                country=self.country.business_unit_country,
            )
            client = SellerCenterClient(configuration, timeout=timeout)

        self._client = client
        self._store = store if store is not None else DjangoFeedStore()
        self._call_logger = get_call_logger(username)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        client: SellerCenterApi | None = None,
        store: FeedStatusStore | None = None,
    ) -> FalabellaSellerCenter:
        """Build a facade from application settings."""
        falabella = settings.falabella
        return cls(
            falabella.username,
            falabella.api_key.get_secret_value(),
            falabella.country,
            falabella.seller_id,
            client=client,
            store=store,
            log_calls=falabella.custom_log_calls,
            integrator=falabella.integrator,
            timeout=falabella.timeout,
        )

    @property
    def operator_code(self) -> str:
        """Return the operator code of the storefront."""
        return self.country.operator_code

    def _log_call(self, method: str) -> None:
        if self.log_calls:
            self._call_logger.debug("Falabella call", method=method)

    def _run[T](
        self,
        operation: str,
        call: Callable[[], T],
        *,
        scope: ErrorScope = ErrorScope.FETCH,
        context: Mapping[str, Any] | None = None,
    ) -> Result[T, FetchError]:
        """Run a client call, translating recognized client failures."""
        try:
            return success(call())
        except httpx.HTTPStatusError as e:
            error = TransportError(
                operation,
                e,
                scope=scope,
                username=self.username,
                context=context,
            )
        except ErrorResponseError as e:
            error = ApiError(operation, e, scope=scope, username=self.username)

        logger.error(
            "Seller Center call failed",
            operation=operation,
            code=error.code.value,
            message=error.message,
            response_code=error.response_code,
            username=self.username,
        )
        return failure(error)

    def _invalid(
        self,
        operation: str,
        message: str,
        scope: ErrorScope = ErrorScope.FETCH,
    ) -> Result[Any, FetchError]:
        logger.warning("Rejected Seller Center request", operation=operation, message=message)
        return failure(InvalidRequestError(operation, message, scope=scope, username=self.username))

    def _store_feed(self, feed_id: str) -> FeedRecord:
        self._log_call("get_feed_status_by_id")
        feed: Feed = self._client.get_feed_status_by_id(feed_id)
        return self._store.upsert(feed)

    def _submit(self, method: str, submit: Callable[[], FeedResponse]) -> FeedRecord:
        self._log_call(method)
        response = submit()
        return self._store_feed(response.request_id)

    def list_products(
        self,
        limit: int,
        offset: int,
        product_filter: str | None = None,
    ) -> Result[list[dict[str, Any]], FetchError]:
        """
        List products of the seller.

        Args:
            limit: Maximum number of products.
            offset: Number of products to skip.
            product_filter: A ProductFilter value; 'all' when omitted.

        Returns:
            Result with the products, or a product-scope FetchError.
        """
        product_filter = product_filter or DEFAULT_PRODUCT_FILTER.value
        if product_filter not in PRODUCT_FILTERS:
            return self._invalid(
                "list_products",
                f"Unknown product filter: {product_filter}",
                scope=ErrorScope.FETCH_PRODUCT,
            )
        selected = ProductFilter(product_filter).value

        def call() -> list[dict[str, Any]]:
            self._log_call(f"get_products (filter: {selected})")
            return self._client.get_products(selected, limit, offset)

        return self._run("list_products", call, scope=ErrorScope.FETCH_PRODUCT)

    def list_products_by_sku(self, skus: Sequence[str]) -> Result[list[dict[str, Any]], FetchError]:
        """List products by seller SKU; no call is made for an empty list."""
        if not skus:
            return success([])

        def call() -> list[dict[str, Any]]:
            self._log_call("get_products_by_seller_sku")
            return self._client.get_products_by_seller_sku(list(skus))

        return self._run("list_products_by_sku", call, scope=ErrorScope.FETCH_PRODUCT)

    def delete_products(self, skus: Sequence[str]) -> Result[FeedRecord, FetchError]:
        """Remove products by seller SKU and store the resulting feed."""
        references = build_delete_references(list(skus))

        def call() -> FeedRecord:
            return self._submit("product_remove", lambda: self._client.product_remove(references))

        return self._run("delete_products", call)

    def create_products(
        self,
        products: Sequence[Mapping[str, Any]],
    ) -> Result[FeedRecord, FetchError]:
        """
        Create products and store the resulting feed.

        Args:
            products: Attribute mappings keyed by Seller Center field names
                (SellerSku, Name, PrimaryCategory, Brand, Price, Quantity, ...).
                Unrecognized keys are sent as product data attributes.

        Returns:
            Result with the stored feed record.
        """
        try:
            submissions = [
                build_product_submission(product, self.operator_code) for product in products
            ]
        except PayloadValidationError as e:
            return self._invalid("create_products", e.message)

        def call() -> FeedRecord:
            return self._submit("product_create", lambda: self._client.product_create(submissions))

        return self._run(
            "create_products",
            call,
            context={"products": list(products)},
        )

    def update_products(
        self,
        updates_by_sku: Mapping[str, Mapping[str, Any]],
    ) -> Result[FeedRecord, FetchError]:
        """
        Update price and stock of products and store the resulting feed.

        Args:
            updates_by_sku: Per SKU, ``price`` and ``stock`` plus optional
                ``sale_price``, ``sale_start`` and ``sale_end``.

        Returns:
            Result with the stored feed record.
        """
        try:
            references = [
                build_business_unit_update(sku, partial, self.operator_code)
                for sku, partial in updates_by_sku.items()
            ]
        except PayloadValidationError as e:
            return self._invalid("update_products", e.message)

        def call() -> FeedRecord:
            return self._submit("product_update", lambda: self._client.product_update(references))

        return self._run(
            "update_products",
            call,
            context={"update_data": dict(updates_by_sku)},
        )

    def publish_product_images(
        self,
        images_by_sku: Mapping[str, Iterable[str]],
    ) -> Result[FeedRecord, FetchError]:
        """Attach image URLs to products and store the resulting feed."""
        images = build_image_references(images_by_sku)
        urls_by_sku = {sku: [image.url for image in urls] for sku, urls in images.items()}

        def call() -> FeedRecord:
            return self._submit("add_image", lambda: self._client.add_image(images))

        return self._run("publish_product_images", call, context={"images": urls_by_sku})

    def list_orders(self, limit: int, offset: int) -> Result[list[dict[str, Any]], FetchError]:
        """List orders created in the last 30 days, newest first."""
        created_after = datetime.now(UTC) - ORDERS_LOOKBACK

        def call() -> list[dict[str, Any]]:
            self._log_call("get_orders_created_after")
            return self._client.get_orders_created_after(
                created_after,
                limit,
                offset,
                ORDERS_SORT_BY,
                ORDERS_SORT_DIRECTION,
            )

        return self._run("list_orders", call)

    def list_order_items(
        self,
        order_ids: Sequence[int],
    ) -> Result[list[dict[str, Any]], FetchError]:
        """List the items of several orders; no call is made for an empty list."""
        if not order_ids:
            return success([])

        def call() -> list[dict[str, Any]]:
            self._log_call("get_multiple_order_items")
            return self._client.get_multiple_order_items(list(order_ids))

        return self._run("list_order_items", call)

    def get_order(self, order_id: int) -> Result[dict[str, Any], FetchError]:
        """Fetch one order."""

        def call() -> dict[str, Any]:
            self._log_call("get_order")
            return self._client.get_order(order_id)

        return self._run("get_order", call)

    def list_categories(self) -> Result[list[dict[str, Any]], FetchError]:
        """Fetch the category tree."""

        def call() -> list[dict[str, Any]]:
            self._log_call("get_category_tree")
            return self._client.get_category_tree()

        return self._run("list_categories", call)

    def get_category_attributes(self, category_id: int) -> Result[list[dict[str, Any]], FetchError]:
        """Fetch the attributes of a category."""

        def call() -> list[dict[str, Any]]:
            self._log_call("get_category_attributes")
            return self._client.get_category_attributes(category_id)

        return self._run("get_category_attributes", call)

    def list_brands(self) -> Result[list[dict[str, Any]], FetchError]:
        """List brands."""

        def call() -> list[dict[str, Any]]:
            self._log_call("get_brands")
            return self._client.get_brands()

        return self._run("list_brands", call)

    def list_feeds(self, offset: int = 0, limit: int = 10) -> Result[list[Feed], FetchError]:
        """List feeds as reported by Seller Center (nothing is stored)."""

        def call() -> list[Feed]:
            self._log_call("get_feed_offset_list")
            return self._client.get_feed_offset_list(offset, limit)

        return self._run("list_feeds", call)

    def get_feed_status(self, feed_id: str) -> Result[FeedRecord, FetchError]:
        """Refresh the status of a feed and return the stored record."""
        return self._run("get_feed_status", lambda: self._store_feed(feed_id))

    def get_quality_control_status(
        self,
        skus: Sequence[str],
    ) -> Result[list[dict[str, Any]], FetchError]:
        """Fetch quality control status by seller SKU."""

        def call() -> list[dict[str, Any]]:
            self._log_call("get_qc_status_by_sku_seller_list")
            return self._client.get_qc_status_by_sku_seller_list(list(skus))

        return self._run("get_quality_control_status", call)

    def get_seller(self) -> Result[dict[str, Any], FetchError]:
        """Fetch the seller owning the credentials."""

        def call() -> dict[str, Any]:
            self._log_call("get_seller_by_user")
            return self._client.get_seller_by_user()

        return self._run("get_seller", call)

    def get_webhook_manager(self) -> WebhookManager:
        """Return the webhook manager of the client."""
        return self._client.webhooks()
