"""Tests for Result pattern implementation."""

from __future__ import annotations

import pytest

from core.result import Failure, Success, UnwrapFailedError, failure, success
from services.falabella.errors import ErrorCode, FetchError


@pytest.fixture()
def fetch_error() -> FetchError:
    """Return a transport error."""
    return FetchError(
        code=ErrorCode.TRANSPORT,
        operation="delete_products",
        message="Client error '404 Not Found'",
        response_code="404 (Not Found)",
    )


class TestSuccess:
    """Tests for Success class."""

    def test_flags(self) -> None:
        """Success reports success and not failure."""
        result = Success(["SKU-1"])

        assert result.is_success() is True
        assert result.is_failure() is False

    def test_unwrap_returns_value(self) -> None:
        """unwrap and unwrap_or return the contained value."""
        result = Success("f-100")

        assert result.unwrap() == "f-100"
        assert result.unwrap_or("other") == "f-100"

    def test_map_transforms_value(self) -> None:
        """map transforms the contained value."""
        result = Success([{"SellerSku": "A"}, {"SellerSku": "B"}])

        skus = result.map(lambda products: [product["SellerSku"] for product in products])

        assert skus == Success(["A", "B"])

    def test_map_error_returns_self(self) -> None:
        """map_error leaves a Success unchanged."""
        result: Success[int] = Success(1)

        assert result.map_error(str) is result


class TestFailure:
    """Tests for Failure class."""

    def test_flags(self, fetch_error: FetchError) -> None:
        """Failure reports failure and not success."""
        result = Failure(fetch_error)

        assert result.is_success() is False
        assert result.is_failure() is True

    def test_unwrap_raises_with_error(self, fetch_error: FetchError) -> None:
        """unwrap raises UnwrapFailedError carrying the error."""
        result = Failure(fetch_error)

        with pytest.raises(UnwrapFailedError, match="Cannot unwrap Failure") as exc_info:
            result.unwrap()

        assert exc_info.value.error is fetch_error
        assert "404" in str(exc_info.value)

    def test_unwrap_failed_error_is_value_error(self) -> None:
        """UnwrapFailedError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Failure("boom").unwrap()

    def test_unwrap_or_returns_default(self, fetch_error: FetchError) -> None:
        """unwrap_or returns the default."""
        assert Failure(fetch_error).unwrap_or([]) == []

    def test_map_returns_self(self, fetch_error: FetchError) -> None:
        """map leaves a Failure unchanged."""
        result = Failure(fetch_error)

        assert result.map(len) is result

    def test_map_error_transforms_error(self, fetch_error: FetchError) -> None:
        """map_error transforms the error."""
        result = Failure(fetch_error)

        assert result.map_error(lambda error: error.response_code).error == "404 (Not Found)"


class TestHelpers:
    """Tests for success() and failure() helpers."""

    def test_success(self) -> None:
        """success() wraps a value."""
        assert success(42) == Success(42)

    def test_failure(self, fetch_error: FetchError) -> None:
        """failure() wraps an error."""
        assert failure(fetch_error) == Failure(fetch_error)
