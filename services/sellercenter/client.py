"""HTTP client for the Falabella Seller Center API."""

from __future__ import annotations

import hashlib
import hmac
import json
import platform
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from core.logging import get_logger
from services.sellercenter.errors import ErrorResponseError
from services.sellercenter.models import Feed, FeedResponse, as_list
from services.sellercenter.payloads import (
    image_body,
    product_create_body,
    product_remove_body,
    product_update_body,
)
from services.sellercenter.webhooks import WebhookManager

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from types import TracebackType

    from services.sellercenter.models import Image, ProductReference, ProductSubmission

logger = get_logger(__name__)

# Default timeout for API requests
DEFAULT_TIMEOUT = 30.0
API_VERSION = "1.0"
RESPONSE_FORMAT = "JSON"


@dataclass(frozen=True, slots=True)
class SellerCenterConfiguration:
    """
    Credentials and identification sent with every request.

    Attributes:
        api_key: Secret used to sign requests.
        username: Seller Center user (sent as UserID).
        endpoint: Base URL (production or staging).
        version: API version.
        source: Request source tag.
        seller_id: Seller id, first segment of the User-Agent.
        language: Integration technology, for the User-Agent.
        language_version: Technology version, for the User-Agent.
        integrator: Integration type, for the User-Agent.
        country: Two-letter business unit country, for the User-Agent.
    """

    api_key: str
    username: str
    endpoint: str
    version: str = API_VERSION
    source: str = "SDK"
    seller_id: str | None = None
    language: str = "Python"
    language_version: str = field(default_factory=platform.python_version)
    integrator: str = "PROPIA"
    country: str = "CL"

    @property
    def user_agent(self) -> str:
        """User-Agent in the SELLER/TECH/VERSION/INTEGRATOR/COUNTRY format."""
        return "/".join(
            [
                self.seller_id or "",
                self.language,
                self.language_version,
                self.integrator,
                self.country,
            ]
        )


def sign(params: Mapping[str, Any], api_key: str) -> str:
    """
    Compute the request signature.

    Parameters are sorted by name, RFC 3986 encoded, joined with '&' and
    signed with HMAC-SHA256 using the API key.
    """
    canonical = "&".join(
        f"{quote(str(name), safe='')}={quote(str(value), safe='')}"
        for name, value in sorted(params.items())
    )
    return hmac.new(api_key.encode(), canonical.encode(), hashlib.sha256).hexdigest()


def _body(response: Mapping[str, Any]) -> dict[str, Any]:
    body = response.get("Body")
    return body if isinstance(body, dict) else {}


def _collection(response: Mapping[str, Any], container: str, item: str) -> list[Any]:
    outer = _body(response).get(container)
    if isinstance(outer, dict):
        return as_list(outer.get(item))
    return as_list(outer)


class SellerCenterClient:
    """
    Synchronous HTTP client for Seller Center.

    One ``httpx.Client`` is kept for the lifetime of the instance. Failed
    HTTP exchanges raise ``httpx.HTTPStatusError``; ErrorResponse bodies
    raise ``ErrorResponseError``.
    """

    def __init__(
        self,
        configuration: SellerCenterConfiguration,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            configuration: Credentials and identification.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (used by tests).
        """
        self.configuration = configuration
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None
        self._webhooks: WebhookManager | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self.configuration.endpoint,
                timeout=self.timeout,
                transport=self._transport,
                headers={
                    "Accept": "application/json",
                    "User-Agent": self.configuration.user_agent,
                },
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            self._client.close()
            self._client = None

    def __enter__(self) -> SellerCenterClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _signed_params(self, action: str, params: Mapping[str, Any] | None) -> dict[str, str]:
        signed: dict[str, str] = {
            "Action": action,
            "Format": RESPONSE_FORMAT,
            "Timestamp": datetime.now(UTC).isoformat(timespec="seconds"),
            "UserID": self.configuration.username,
            "Version": self.configuration.version,
        }
        for name, value in (params or {}).items():
            if value is not None:
                signed[name] = str(value)
        signed["Signature"] = sign(signed, self.configuration.api_key)
        return signed

    def call(
        self,
        action: str,
        params: Mapping[str, Any] | None = None,
        body: str | None = None,
    ) -> dict[str, Any]:
        """
        Perform one API action.

        Actions with a body are sent as POST, the rest as GET.

        Args:
            action: Seller Center action name (e.g. 'GetProducts').
            params: Action parameters; None values are dropped.
            body: XML request body for mutating actions.

        Returns:
            The SuccessResponse object (``Head`` and ``Body``).

        Raises:
            httpx.HTTPStatusError: If the API returned a non-2xx status.
            ErrorResponseError: If the API returned an ErrorResponse.
        """
        client = self._get_client()
        method = "POST" if body is not None else "GET"

        logger.info(
            "Calling Seller Center",
            action=action,
            method=method,
            endpoint=self.configuration.endpoint,
        )

        response = client.request(
            method,
            "/",
            params=self._signed_params(action, params),
            content=body.encode() if body is not None else None,
            headers={"Content-Type": "text/xml; charset=utf-8"} if body is not None else None,
        )
        response.raise_for_status()

        data: dict[str, Any] = response.json()
        if "ErrorResponse" in data:
            head = data["ErrorResponse"].get("Head") or {}
            raise ErrorResponseError.from_head(head)

        success_response: dict[str, Any] = data.get("SuccessResponse") or {}
        return success_response

    def _submit(self, action: str, body: str) -> FeedResponse:
        response = self.call(action, body=body)
        return FeedResponse.from_head(response.get("Head") or {})

    def get_products(self, product_filter: str, limit: int, offset: int) -> list[dict[str, Any]]:
        """List products matching a filter."""
        response = self.call(
            "GetProducts",
            {"Filter": product_filter, "Limit": limit, "Offset": offset},
        )
        return _collection(response, "Products", "Product")

    def get_products_by_seller_sku(self, skus: Sequence[str]) -> list[dict[str, Any]]:
        """List products by seller SKU."""
        response = self.call("GetProducts", {"SkuSellerList": json.dumps(list(skus))})
        return _collection(response, "Products", "Product")

    def product_create(self, products: Sequence[ProductSubmission]) -> FeedResponse:
        """Submit new products; returns the feed acknowledgement."""
        return self._submit("ProductCreate", product_create_body(products))

    def product_update(self, products: Sequence[ProductReference]) -> FeedResponse:
        """Submit business unit updates; returns the feed acknowledgement."""
        return self._submit("ProductUpdate", product_update_body(products))

    def product_remove(self, products: Sequence[ProductReference]) -> FeedResponse:
        """Submit product removals; returns the feed acknowledgement."""
        return self._submit("ProductRemove", product_remove_body(products))

    def add_image(self, images: Mapping[str, Sequence[Image]]) -> FeedResponse:
        """Submit product images; returns the feed acknowledgement."""
        return self._submit("Image", image_body(images))

    def get_feed_status_by_id(self, feed_id: str) -> Feed:
        """Fetch the status of one feed."""
        response = self.call("FeedStatus", {"FeedID": feed_id})
        return Feed.from_payload(_body(response)["FeedDetail"])

    def get_feed_offset_list(self, offset: int, limit: int) -> list[Feed]:
        """List feeds, most recent first."""
        response = self.call("FeedOffsetList", {"Offset": offset, "PageSize": limit})
        return [Feed.from_payload(entry) for entry in _collection(response, "Feed", "Feed")]

    def get_orders_created_after(
        self,
        created_after: datetime,
        limit: int,
        offset: int,
        sort_by: str,
        sort_direction: str,
    ) -> list[dict[str, Any]]:
        """List orders created after a point in time."""
        response = self.call(
            "GetOrders",
            {
                "CreatedAfter": created_after.isoformat(timespec="seconds"),
                "Limit": limit,
                "Offset": offset,
                "SortBy": sort_by,
                "SortDirection": sort_direction,
            },
        )
        return _collection(response, "Orders", "Order")

    def get_multiple_order_items(self, order_ids: Sequence[int]) -> list[dict[str, Any]]:
        """List the items of several orders."""
        order_list = "[" + ",".join(str(order_id) for order_id in order_ids) + "]"
        response = self.call("GetMultipleOrderItems", {"OrderIdList": order_list})
        return _collection(response, "Orders", "Order")

    def get_order(self, order_id: int) -> dict[str, Any]:
        """Fetch one order."""
        response = self.call("GetOrder", {"OrderId": order_id})
        orders = _collection(response, "Orders", "Order")
        return orders[0] if orders else {}

    def get_category_tree(self) -> list[dict[str, Any]]:
        """Fetch the category tree."""
        return _collection(self.call("GetCategoryTree"), "Categories", "Category")

    def get_category_attributes(self, category_id: int) -> list[dict[str, Any]]:
        """Fetch the attributes of a category."""
        response = self.call("GetCategoryAttributes", {"PrimaryCategory": category_id})
        return _collection(response, "Attributes", "Attribute")

    def get_brands(self) -> list[dict[str, Any]]:
        """List brands."""
        return _collection(self.call("GetBrands"), "Brands", "Brand")

    def get_qc_status_by_sku_seller_list(self, skus: Sequence[str]) -> list[dict[str, Any]]:
        """Fetch quality control status by seller SKU."""
        response = self.call("GetQcStatus", {"SkuSellerList": json.dumps(list(skus))})
        return _collection(response, "Status", "State")

    def get_seller_by_user(self) -> dict[str, Any]:
        """Fetch the seller owning the credentials."""
        seller: dict[str, Any] = _body(self.call("GetSellerByUser")).get("Seller") or {}
        return seller

    def webhooks(self) -> WebhookManager:
        """Return the webhook manager bound to this client."""
        if self._webhooks is None:
            self._webhooks = WebhookManager(self)
        return self._webhooks
