"""Tests for Seller Center XML request bodies."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import UTC, datetime, timedelta, timezone

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
from services.sellercenter.payloads import (
    XML_DECLARATION,
    image_body,
    product_create_body,
    product_remove_body,
    product_update_body,
    webhook_create_body,
    webhook_delete_body,
)


def parse(body: str) -> ET.Element:
    """Parse a request body, checking the XML declaration."""
    assert body.startswith(XML_DECLARATION)
    return ET.fromstring(body.removeprefix(XML_DECLARATION))


class TestProductCreateBody:
    """Tests for the ProductCreate body."""

    def test_product_fields(self) -> None:
        """Product fields, business units and product data are rendered."""
        product = ProductSubmission(
            seller_sku="SKU-1",
            name="Shirt",
            primary_category=CategoryRef(id=1234),
            description="A shirt",
            brand=BrandRef(name="Acme"),
            product_id="7801234567890",
            parent_sku="SKU-1",
            business_units=[BusinessUnit(operator_code="facl", price=19990, stock=5)],
            product_data=ProductData({"ConditionType": "Nuevo", "PackageWeight": 1}),
            color="Rojo",
        )

        root = parse(product_create_body([product]))

        node = root.find("Product")
        assert node is not None
        assert node.findtext("SellerSku") == "SKU-1"
        assert node.findtext("Status") == "active"
        assert node.findtext("PrimaryCategory") == "1234"
        assert node.findtext("Brand") == "Acme"
        assert node.findtext("Color") == "Rojo"
        assert node.find("Talla") is None
        assert node.find("TaxClass") is None
        assert node.findtext("BusinessUnits/BusinessUnit/OperatorCode") == "facl"
        assert node.findtext("BusinessUnits/BusinessUnit/Price") == "19990"
        assert node.findtext("BusinessUnits/BusinessUnit/Stock") == "5"
        assert node.findtext("ProductData/ConditionType") == "Nuevo"
        assert node.findtext("ProductData/PackageWeight") == "1"

    def test_special_characters_are_escaped(self) -> None:
        """Text values are XML-escaped."""
        product = ProductSubmission(
            seller_sku="SKU-1",
            name="Salt & Pepper <set>",
            primary_category=CategoryRef(id=1),
            description="d",
            brand=BrandRef(name="b"),
            product_id="p",
            parent_sku="SKU-1",
        )

        body = product_create_body([product])

        assert "Salt &amp; Pepper &lt;set&gt;" in body
        assert parse(body).findtext("Product/Name") == "Salt & Pepper <set>"


class TestProductUpdateBody:
    """Tests for the ProductUpdate body."""

    def test_sale_window(self) -> None:
        """Sale price and dates are rendered in the business unit."""
        unit = BusinessUnit(
            operator_code="fape",
            price=100,
            stock=3,
            status=ProductStatus.ACTIVE,
            sale_price=80,
            sale_start_date=datetime(2024, 6, 1),
            sale_end_date=datetime(2024, 6, 30, 23, 59, 59),
        )

        root = parse(product_update_body([ProductReference("SKU-1", (unit,))]))

        node = root.find("Product/BusinessUnits/BusinessUnit")
        assert node is not None
        assert node.findtext("SpecialPrice") == "80"
        assert node.findtext("SpecialFromDate") == "2024-06-01 00:00:00"
        assert node.findtext("SpecialToDate") == "2024-06-30 23:59:59"
        assert node.findtext("Status") == "active"

    def test_aware_sale_window_keeps_offset(self) -> None:
        """Aware sale dates are rendered with their UTC offset."""
        santiago = timezone(timedelta(hours=-3))
        unit = BusinessUnit(
            operator_code="facl",
            price=100,
            stock=3,
            sale_price=80,
            sale_start_date=datetime(2024, 6, 1, tzinfo=santiago),
            sale_end_date=datetime(2024, 6, 30, 23, 59, 59, tzinfo=UTC),
        )

        root = parse(product_update_body([ProductReference("SKU-1", (unit,))]))

        node = root.find("Product/BusinessUnits/BusinessUnit")
        assert node is not None
        assert node.findtext("SpecialFromDate") == "2024-06-01 00:00:00-03:00"
        assert node.findtext("SpecialToDate") == "2024-06-30 23:59:59+00:00"

    def test_without_sale_window(self) -> None:
        """Absent sale fields are omitted."""
        unit = BusinessUnit(operator_code="facl", price=100, stock=3)

        root = parse(product_update_body([ProductReference("SKU-1", (unit,))]))

        assert root.find("Product/BusinessUnits/BusinessUnit/SpecialPrice") is None


class TestOtherBodies:
    """Tests for removal, image and webhook bodies."""

    def test_product_remove_body(self) -> None:
        """Each SKU becomes a Product entry without business units."""
        root = parse(product_remove_body([ProductReference("A"), ProductReference("B")]))

        assert [node.findtext("SellerSku") for node in root.findall("Product")] == ["A", "B"]
        assert root.find("Product/BusinessUnits") is None

    def test_image_body(self) -> None:
        """Images are grouped per SKU."""
        root = parse(image_body({"A": [Image("https://img/1.jpg"), Image("https://img/2.jpg")]}))

        node = root.find("ProductImage")
        assert node is not None
        assert node.findtext("SellerSku") == "A"
        assert [image.text for image in node.findall("Images/Image")] == [
            "https://img/1.jpg",
            "https://img/2.jpg",
        ]

    def test_webhook_bodies(self) -> None:
        """Webhook create and delete bodies carry their fields."""
        create = parse(webhook_create_body("https://shop/hook", ["onOrderCreated"]))
        delete = parse(webhook_delete_body("wh-1"))

        assert create.findtext("Webhook/CallbackUrl") == "https://shop/hook"
        assert create.findtext("Webhook/Events/Event") == "onOrderCreated"
        assert delete.findtext("Webhook") == "wh-1"
