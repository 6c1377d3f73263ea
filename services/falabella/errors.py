"""Normalized error types for Seller Center operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from services.sellercenter.errors import ErrorResponseError


class ErrorCode(str, Enum):
    """Kinds of failure a facade operation can report."""

    INVALID_REQUEST = "invalid_request"
    TRANSPORT = "transport"
    API_ERROR = "api_error"


class ErrorScope(str, Enum):
    """Which family of operations produced the error."""

    FETCH = "fetch"
    FETCH_PRODUCT = "fetch_product"


@dataclass(frozen=True, slots=True)
class FetchError:
    """
    Error returned by a facade operation.

    Attributes:
        code: Kind of failure.
        operation: Name of the facade operation that failed.
        message: Human-readable error message.
        scope: FETCH_PRODUCT for product listing/lookup operations.
        username: Seller Center user the call was made for.
        request: Outbound request text (transport failures).
        response: Response body text (transport failures).
        response_code: Status code and reason phrase, e.g. '404 (Not Found)'.
        error_type: Error classification from an ErrorResponse.
        action: Rejected API action from an ErrorResponse.
        context: Input data attached for diagnostics.
    """

    code: ErrorCode
    operation: str
    message: str
    scope: ErrorScope = ErrorScope.FETCH
    username: str | None = None
    request: str | None = None
    response: str | None = None
    response_code: str | None = None
    error_type: str | None = None
    action: str | None = None
    context: Mapping[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"[{self.operation}] {self.code.value}: {self.message}"

    @property
    def is_product_error(self) -> bool:
        """Check if the error comes from a product listing/lookup operation."""
        return self.scope == ErrorScope.FETCH_PRODUCT


def request_text(request: httpx.Request) -> str:
    """Render an outbound request as text: request line, headers and body."""
    lines = [f"{request.method} {request.url}"]
    lines.extend(f"{name}: {value}" for name, value in request.headers.items())
    body = request.content.decode(errors="replace") if request.content else ""
    return "\r\n".join(lines) + "\r\n\r\n" + body


def InvalidRequestError(
    operation: str,
    message: str,
    scope: ErrorScope = ErrorScope.FETCH,
    username: str | None = None,
) -> FetchError:
    """Create an error for input rejected before any network call."""
    return FetchError(
        code=ErrorCode.INVALID_REQUEST,
        operation=operation,
        message=message,
        scope=scope,
        username=username,
    )


def TransportError(
    operation: str,
    exc: httpx.HTTPStatusError,
    scope: ErrorScope = ErrorScope.FETCH,
    username: str | None = None,
    context: Mapping[str, Any] | None = None,
) -> FetchError:
    """Create an error from a failed HTTP exchange."""
    response = exc.response
    return FetchError(
        code=ErrorCode.TRANSPORT,
        operation=operation,
        message=str(exc),
        scope=scope,
        username=username,
        request=request_text(exc.request),
        response=response.text,
        response_code=f"{response.status_code} ({response.reason_phrase})",
        context=dict(context or {}),
    )


def ApiError(
    operation: str,
    exc: ErrorResponseError,
    scope: ErrorScope = ErrorScope.FETCH,
    username: str | None = None,
) -> FetchError:
    """Create an error from a Seller Center ErrorResponse."""
    return FetchError(
        code=ErrorCode.API_ERROR,
        operation=operation,
        message=exc.message,
        scope=scope,
        username=username,
        error_type=exc.error_type,
        action=exc.action,
    )
