"""Exceptions raised by the Seller Center client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


class ErrorResponseError(Exception):
    """
    Raised when Seller Center answers with a well-formed ErrorResponse.

    Attributes:
        message: Error message from the response head.
        error_type: Error classification (e.g. 'Sender', 'Platform').
        action: The API action that was rejected.
        code: Numeric error code as reported, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        error_type: str | None = None,
        action: str | None = None,
        code: int | None = None,
    ) -> None:
        """Initialize with the values of the ErrorResponse head."""
        self.message = message
        self.error_type = error_type
        self.action = action
        self.code = code
        super().__init__(message)

    @classmethod
    def from_head(cls, head: Mapping[str, Any]) -> ErrorResponseError:
        """Build the exception from an ErrorResponse ``Head`` object."""
        raw_code = head.get("ErrorCode")
        try:
            code = int(raw_code) if raw_code not in (None, "") else None
        except (TypeError, ValueError):
            code = None
        return cls(
            str(head.get("ErrorMessage", "Unknown error response")),
            error_type=head.get("ErrorType"),
            action=head.get("RequestAction"),
            code=code,
        )
