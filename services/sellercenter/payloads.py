"""XML request bodies for mutating Seller Center actions."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

from services.sellercenter.models import DATE_FORMAT

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from services.sellercenter.models import (
        BusinessUnit,
        Image,
        ProductReference,
        ProductSubmission,
    )

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" ?>'


def _text(value: Any) -> str:
    if isinstance(value, datetime):
        # Aware values keep their UTC offset after the seconds
        if value.utcoffset() is not None:
            return value.isoformat(sep=" ", timespec="seconds")
        return value.strftime(DATE_FORMAT)
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _child(parent: ET.Element, tag: str, value: Any) -> None:
    """Append ``<tag>value</tag>`` unless value is None."""
    if value is None:
        return
    ET.SubElement(parent, tag).text = _text(value)


def _render(root: ET.Element) -> str:
    return XML_DECLARATION + ET.tostring(root, encoding="unicode")


def _business_units(parent: ET.Element, units: Iterable[BusinessUnit]) -> None:
    units = list(units)
    if not units:
        return
    container = ET.SubElement(parent, "BusinessUnits")
    for unit in units:
        node = ET.SubElement(container, "BusinessUnit")
        _child(node, "OperatorCode", unit.operator_code)
        _child(node, "Price", unit.price)
        _child(node, "SpecialPrice", unit.sale_price)
        _child(node, "SpecialFromDate", unit.sale_start_date)
        _child(node, "SpecialToDate", unit.sale_end_date)
        _child(node, "Stock", unit.stock)
        _child(node, "Status", unit.status)


def product_create_body(products: Sequence[ProductSubmission]) -> str:
    """Render the ProductCreate request body."""
    root = ET.Element("Request")
    for product in products:
        node = ET.SubElement(root, "Product")
        _child(node, "SellerSku", product.seller_sku)
        _child(node, "ParentSku", product.parent_sku)
        _child(node, "Status", product.status)
        _child(node, "Name", product.name)
        _child(node, "Variation", product.variation)
        _child(node, "PrimaryCategory", product.primary_category.id)
        _child(node, "Description", product.description)
        _child(node, "Brand", product.brand.name)
        _child(node, "ProductId", product.product_id)
        _child(node, "TaxClass", product.tax_class)
        _child(node, "Color", product.color)
        _child(node, "ColorBasico", product.color_basico)
        _child(node, "Size", product.size)
        _child(node, "Talla", product.talla)
        _business_units(node, product.business_units)
        data = ET.SubElement(node, "ProductData")
        for name, value in product.product_data.attributes.items():
            _child(data, name, value)
    return _render(root)


def product_update_body(products: Sequence[ProductReference]) -> str:
    """Render the ProductUpdate request body."""
    root = ET.Element("Request")
    for product in products:
        node = ET.SubElement(root, "Product")
        _child(node, "SellerSku", product.seller_sku)
        _business_units(node, product.business_units)
    return _render(root)


def product_remove_body(products: Sequence[ProductReference]) -> str:
    """Render the ProductRemove request body."""
    root = ET.Element("Request")
    for product in products:
        node = ET.SubElement(root, "Product")
        _child(node, "SellerSku", product.seller_sku)
    return _render(root)


def image_body(images: Mapping[str, Sequence[Image]]) -> str:
    """Render the Image request body, one ProductImage per SKU."""
    root = ET.Element("Request")
    for sku, sku_images in images.items():
        node = ET.SubElement(root, "ProductImage")
        _child(node, "SellerSku", sku)
        container = ET.SubElement(node, "Images")
        for image in sku_images:
            _child(container, "Image", image.url)
    return _render(root)


def webhook_create_body(callback_url: str, events: Sequence[str]) -> str:
    """Render the CreateWebhook request body."""
    root = ET.Element("Request")
    node = ET.SubElement(root, "Webhook")
    _child(node, "CallbackUrl", callback_url)
    container = ET.SubElement(node, "Events")
    for event in events:
        _child(container, "Event", event)
    return _render(root)


def webhook_delete_body(webhook_id: str) -> str:
    """Render the DeleteWebhook request body."""
    root = ET.Element("Request")
    _child(root, "Webhook", webhook_id)
    return _render(root)
