"""Request and response objects of the Seller Center API."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping
    from decimal import Decimal

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ProductStatus(str, Enum):
    """Status of a product or business unit."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    DELETED = "deleted"


class ProductFilter(str, Enum):
    """Filters accepted by the GetProducts action."""

    ALL = "all"
    LIVE = "live"
    INACTIVE = "inactive"
    DELETED = "deleted"
    IMAGE_MISSING = "image-missing"
    PENDING = "pending"
    REJECTED = "rejected"
    SOLD_OUT = "sold-out"


DEFAULT_PRODUCT_FILTER = ProductFilter.ALL


def as_list(value: Any) -> list[Any]:
    """Normalize a Seller Center collection (absent, single or many) to a list."""
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return value
    return [value]


def parse_datetime(value: Any) -> datetime | None:
    """
    Parse a timestamp reported by Seller Center.

    Raises:
        ValueError: If the value is present but not a recognizable timestamp.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return datetime.strptime(text, f"{DATE_FORMAT} %z")


@dataclass(frozen=True, slots=True)
class CategoryRef:
    """Reference to a marketplace category by id."""

    id: int | str


@dataclass(frozen=True, slots=True)
class BrandRef:
    """Reference to a marketplace brand by name."""

    name: str


@dataclass(frozen=True, slots=True)
class Image:
    """Reference to a product image by public URL."""

    url: str


@dataclass(frozen=True, slots=True)
class BusinessUnit:
    """
    Price, stock and status of a product in one storefront.

    Attributes:
        operator_code: Storefront tenant tag (e.g. 'facl').
        price: Regular price.
        stock: Available quantity.
        status: Product status in this storefront.
        sale_price: Special price (optional).
        sale_start_date: Start of the special price window (optional).
        sale_end_date: End of the special price window (optional).
    """

    operator_code: str
    price: Decimal | float | int
    stock: int
    status: ProductStatus = ProductStatus.ACTIVE
    sale_price: Decimal | float | int | None = None
    sale_start_date: datetime | None = None
    sale_end_date: datetime | None = None


@dataclass(slots=True)
class ProductData:
    """Free-form product attributes sent inside ``ProductData``."""

    attributes: dict[str, Any] = field(default_factory=dict)

    def add(self, name: str, value: Any) -> None:
        """Set an attribute; ``None`` values are not sent."""
        if value is not None:
            self.attributes[name] = value


@dataclass(slots=True)
class ProductSubmission:
    """A full product as sent to ProductCreate."""

    seller_sku: str
    name: str
    primary_category: CategoryRef
    description: str
    brand: BrandRef
    product_id: str
    parent_sku: str
    business_units: list[BusinessUnit] = field(default_factory=list)
    product_data: ProductData = field(default_factory=ProductData)
    variation: str | None = None
    tax_class: str | None = None
    status: ProductStatus = ProductStatus.ACTIVE
    color: str | None = None
    color_basico: str | None = None
    size: str | None = None
    talla: str | None = None
    images: list[Image] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ProductReference:
    """A product addressed by seller SKU, used for updates and removals."""

    seller_sku: str
    business_units: tuple[BusinessUnit, ...] = ()


@dataclass(frozen=True, slots=True)
class FeedResponse:
    """Acknowledgement of a mutating action; ``request_id`` is the feed id."""

    request_id: str
    request_action: str | None = None
    response_type: str | None = None
    timestamp: str | None = None

    @classmethod
    def from_head(cls, head: Mapping[str, Any]) -> FeedResponse:
        """Build from the ``Head`` of a SuccessResponse."""
        return cls(
            request_id=str(head["RequestId"]),
            request_action=head.get("RequestAction"),
            response_type=head.get("ResponseType"),
            timestamp=head.get("Timestamp"),
        )


def _entries(container: Any, key: str) -> list[Any]:
    if isinstance(container, dict):
        return as_list(container.get(key))
    return as_list(container)


@dataclass(frozen=True, slots=True)
class Feed:
    """
    Status of an asynchronous bulk operation, as reported by Seller Center.

    Attributes:
        id: Feed identifier (the RequestId of the submission).
        status: Queued, Processing, Canceled, Finished or Error.
        action: Submitted action (ProductCreate, ProductUpdate, ...).
        source: Origin of the feed (e.g. 'api').
        creation_date: When the feed was created, marketplace clock.
        updated_date: Last update of the feed, marketplace clock.
        total_records: Records in the feed.
        processed_records: Records processed so far.
        failed_records: Records that failed.
        errors: Per-record errors.
        warnings: Per-record warnings.
        failure_reports: Failure report descriptors.
    """

    id: str
    status: str
    action: str = ""
    source: str = ""
    creation_date: datetime | None = None
    updated_date: datetime | None = None
    total_records: int = 0
    processed_records: int = 0
    failed_records: int = 0
    errors: list[Any] = field(default_factory=list)
    warnings: list[Any] = field(default_factory=list)
    failure_reports: list[Any] = field(default_factory=list)

    @classmethod
    def from_payload(cls, detail: Mapping[str, Any]) -> Feed:
        """Build from a ``FeedDetail`` (or feed list entry) object."""
        return cls(
            id=str(detail["Feed"]),
            status=str(detail.get("Status", "")),
            action=str(detail.get("Action") or ""),
            source=str(detail.get("Source") or ""),
            creation_date=parse_datetime(detail.get("CreationDate")),
            updated_date=parse_datetime(detail.get("UpdatedDate")),
            total_records=int(detail.get("TotalRecords") or 0),
            processed_records=int(detail.get("ProcessedRecords") or 0),
            failed_records=int(detail.get("FailedRecords") or 0),
            errors=_entries(detail.get("FeedErrors"), "Error"),
            warnings=_entries(detail.get("FeedWarnings"), "Warning"),
            failure_reports=_entries(detail.get("FailureReports"), "FailureReport"),
        )
