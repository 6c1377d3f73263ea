"""Tests for normalized Seller Center errors."""

from __future__ import annotations

import httpx
import pytest

from services.falabella.errors import (
    ApiError,
    ErrorCode,
    ErrorScope,
    FetchError,
    InvalidRequestError,
    TransportError,
    request_text,
)
from services.sellercenter.errors import ErrorResponseError


class TestFetchError:
    """Tests for the FetchError dataclass."""

    def test_str(self) -> None:
        """String form shows operation, code and message."""
        error = FetchError(code=ErrorCode.TRANSPORT, operation="delete_products", message="boom")

        assert str(error) == "[delete_products] transport: boom"

    def test_is_frozen(self) -> None:
        """FetchError is immutable."""
        error = FetchError(code=ErrorCode.API_ERROR, operation="op", message="m")

        with pytest.raises(AttributeError):
            error.message = "other"  # type: ignore[misc]

    def test_product_scope(self) -> None:
        """Only product-scope errors report is_product_error."""
        general = FetchError(code=ErrorCode.API_ERROR, operation="op", message="m")
        product = FetchError(
            code=ErrorCode.API_ERROR,
            operation="op",
            message="m",
            scope=ErrorScope.FETCH_PRODUCT,
        )

        assert general.is_product_error is False
        assert product.is_product_error is True


class TestErrorFactories:
    """Tests for error factory functions."""

    def test_invalid_request_error(self) -> None:
        """InvalidRequestError carries the message and scope."""
        error = InvalidRequestError(
            "list_products", "Unknown product filter: x", ErrorScope.FETCH_PRODUCT, "user"
        )

        assert error.code == ErrorCode.INVALID_REQUEST
        assert error.scope == ErrorScope.FETCH_PRODUCT
        assert error.username == "user"
        assert error.request is None

    def test_transport_error(self, not_found_error: httpx.HTTPStatusError) -> None:
        """TransportError keeps the request text, response body and status line."""
        error = TransportError(
            "delete_products",
            not_found_error,
            username="user",
            context={"skus": ["A"]},
        )

        assert error.code == ErrorCode.TRANSPORT
        assert error.response == "Not Found"
        assert error.response_code == "404 (Not Found)"
        assert error.request is not None
        assert error.request.startswith("POST https://sellercenter-api.falabella.com/")
        assert error.context == {"skus": ["A"]}

    def test_transport_error_server_failure(self) -> None:
        """Server errors report their own status and reason."""
        request = httpx.Request("GET", "https://sellercenter-api.falabella.com/")
        response = httpx.Response(503, text="<html>down</html>", request=request)
        exc = httpx.HTTPStatusError("Server error", request=request, response=response)

        error = TransportError("list_brands", exc)

        assert error.response_code == "503 (Service Unavailable)"
        assert error.response == "<html>down</html>"
        assert error.context == {}

    def test_api_error(self) -> None:
        """ApiError copies the ErrorResponse fields."""
        exc = ErrorResponseError(
            "E009: Access Denied", error_type="Sender", action="GetProducts", code=9
        )

        error = ApiError("list_products", exc, ErrorScope.FETCH_PRODUCT, "user")

        assert error.code == ErrorCode.API_ERROR
        assert error.message == "E009: Access Denied"
        assert error.error_type == "Sender"
        assert error.action == "GetProducts"
        assert error.is_product_error is True


class TestRequestText:
    """Tests for request rendering."""

    def test_includes_method_url_headers_and_body(self) -> None:
        """The request line, headers and body are rendered."""
        request = httpx.Request(
            "POST",
            "https://sellercenter-api.falabella.com/?Action=ProductRemove",
            headers={"Content-Type": "text/xml"},
            content=b"<Request/>",
        )

        text = request_text(request)

        assert text.startswith(
            "POST https://sellercenter-api.falabella.com/?Action=ProductRemove\r\n"
        )
        assert "content-type: text/xml" in text
        assert text.endswith("\r\n\r\n<Request/>")
