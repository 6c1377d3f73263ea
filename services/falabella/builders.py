"""Builders turning generic attribute mappings into Seller Center payloads."""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import TYPE_CHECKING, Any

from services.sellercenter.models import (
    BrandRef,
    BusinessUnit,
    CategoryRef,
    Image,
    ProductData,
    ProductReference,
    ProductStatus,
    ProductSubmission,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

# Keys with a dedicated place in the product; everything else goes to ProductData
PRODUCT_KEYS = frozenset(
    {
        "PrimaryCategory",
        "Brand",
        "ConditionType",
        "PackageHeight",
        "PackageWidth",
        "PackageLength",
        "PackageWeight",
        "ShortDescription",
        "Price",
        "Quantity",
        "SellerSku",
        "Name",
        "Variation",
        "Description",
        "ProductId",
        "TaxClass",
        "ParentSku",
    }
)
VARIANT_KEYS = ("Color", "ColorBasico", "Size", "Talla")
REQUIRED_PRODUCT_KEYS = (
    "SellerSku",
    "Name",
    "PrimaryCategory",
    "Description",
    "Brand",
    "ProductId",
    "ParentSku",
    "Price",
    "Quantity",
)
PACKAGE_KEYS = ("ConditionType", "PackageHeight", "PackageWidth", "PackageLength", "PackageWeight")

# Extra keys become ProductData element names
XML_NAME = re.compile(r"[A-Za-z_][\w.-]*")
# Extra values are written as element text, so collections have no rendering
COLLECTION_TYPES = (list, tuple, set, frozenset, dict)


class PayloadValidationError(ValueError):
    """Raised when input cannot be turned into a valid payload."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with the message and the offending field."""
        self.message = message
        self.field = field
        super().__init__(message)


def _check_attribute(name: str, value: Any) -> None:
    """Reject extra attributes that cannot be written as one XML element."""
    if not isinstance(name, str) or not XML_NAME.fullmatch(name):
        msg = f"Invalid attribute name: {name!r}"
        raise PayloadValidationError(msg, field=str(name))
    if isinstance(value, COLLECTION_TYPES):
        msg = f"Attribute {name} must be a scalar, got {type(value).__name__}"
        raise PayloadValidationError(msg, field=name)


def build_product_submission(record: Mapping[str, Any], operator_code: str) -> ProductSubmission:
    """
    Build a ProductCreate entry from a generic attribute mapping.

    Recognized keys are mapped to product fields; color and size variant
    keys become variant fields; every other key is attached verbatim to
    ``ProductData``. The product gets a single active business unit for
    ``operator_code`` with the record's Price and Quantity.

    Args:
        record: Product attributes keyed by Seller Center field names.
        operator_code: Storefront tenant tag for the business unit.

    Returns:
        The product submission.

    Raises:
        PayloadValidationError: If a required key is missing, or an extra
            key is not a valid XML element name, or its value is a
            collection.
    """
    missing = [key for key in REQUIRED_PRODUCT_KEYS if record.get(key) is None]
    if missing:
        msg = f"Missing required product fields: {', '.join(missing)}"
        raise PayloadValidationError(msg, field=missing[0])

    product_data = ProductData()
    for key in PACKAGE_KEYS:
        product_data.add(key, record.get(key))
    product_data.add("ShortDescription", record.get("ShortDescription"))
    for name, value in record.items():
        if name not in PRODUCT_KEYS and name not in VARIANT_KEYS:
            _check_attribute(name, value)
            product_data.add(name, value)

    return ProductSubmission(
        seller_sku=str(record["SellerSku"]),
        name=str(record["Name"]),
        variation=record.get("Variation"),
        primary_category=CategoryRef(id=record["PrimaryCategory"]),
        description=str(record["Description"]),
        brand=BrandRef(name=str(record["Brand"])),
        business_units=[
            BusinessUnit(
                operator_code=operator_code,
                price=record["Price"],
                stock=record["Quantity"],
                status=ProductStatus.ACTIVE,
            )
        ],
        product_id=str(record["ProductId"]),
        tax_class=record.get("TaxClass"),
        product_data=product_data,
        status=ProductStatus.ACTIVE,
        parent_sku=str(record["ParentSku"]),
        color=record.get("Color"),
        color_basico=record.get("ColorBasico"),
        size=record.get("Size"),
        talla=record.get("Talla"),
    )


def _sale_date(value: Any, field: str) -> datetime | None:
    """Parse an optional sale window date; falsy values mean absent."""
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            pass
    msg = f"Invalid {field}: {value!r}"
    raise PayloadValidationError(msg, field=field)


def build_business_unit_update(
    sku: str,
    partial: Mapping[str, Any],
    operator_code: str,
) -> ProductReference:
    """
    Build a ProductUpdate entry for one SKU.

    Args:
        sku: Seller SKU of the product.
        partial: ``price`` and ``stock`` (required), ``sale_price``,
            ``sale_start`` and ``sale_end`` (optional).
        operator_code: Storefront tenant tag for the business unit.

    Returns:
        The product reference carrying the updated business unit.

    Raises:
        PayloadValidationError: If price/stock are missing or a sale date
            is malformed.
    """
    for key in ("price", "stock"):
        if partial.get(key) is None:
            msg = f"Missing {key} for SKU {sku}"
            raise PayloadValidationError(msg, field=key)

    unit = BusinessUnit(
        operator_code=operator_code,
        price=partial["price"],
        stock=partial["stock"],
        status=ProductStatus.ACTIVE,
        sale_price=partial.get("sale_price"),
        sale_start_date=_sale_date(partial.get("sale_start"), "sale_start"),
        sale_end_date=_sale_date(partial.get("sale_end"), "sale_end"),
    )
    return ProductReference(seller_sku=sku, business_units=(unit,))


def build_image_references(images_by_sku: Mapping[str, Iterable[str]]) -> dict[str, list[Image]]:
    """Map each image URL to an image reference, grouped by SKU."""
    return {sku: [Image(url=url) for url in urls] for sku, urls in images_by_sku.items()}


def build_delete_references(skus: Sequence[str]) -> list[ProductReference]:
    """Build one removal reference per seller SKU."""
    return [ProductReference(seller_sku=sku) for sku in skus]
