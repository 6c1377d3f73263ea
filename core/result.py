"""
Result pattern for explicit error handling.

Facade operations return either a Success carrying the marketplace data or a
Failure carrying a normalized error, instead of raising vendor exceptions.

Example:
    >>> result = seller_center.get_feed_status("f-100")
    >>> if result.is_success():
    ...     print(result.unwrap().status)
    ... else:
    ...     print(f"Error: {result.error}")
    FeedStatus.PROCESSING
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Never

if TYPE_CHECKING:
    from collections.abc import Callable


class UnwrapFailedError(ValueError):
    """Raised when unwrapping a Failure; keeps the original error value."""

    def __init__(self, error: object) -> None:
        """Initialize with the error contained in the Failure."""
        self.error = error
        super().__init__(f"Cannot unwrap Failure: {error}")


@dataclass(frozen=True, slots=True)
class Success[T]:
    """
    Represents a successful result containing a value.

    Attributes:
        value: The success value.
    """

    value: T

    def is_success(self) -> bool:
        """Return True if this is a Success."""
        return True

    def is_failure(self) -> bool:
        """Return False if this is a Success."""
        return False

    def unwrap(self) -> T:
        """Return the success value."""
        return self.value

    def unwrap_or(self, _default: T) -> T:
        """Return the success value (ignores default)."""
        return self.value

    def map[U](self, func: Callable[[T], U]) -> Success[U]:
        """
        Apply a function to the success value.

        Args:
            func: Function to apply to the value.

        Returns:
            New Success with the mapped value.
        """
        return Success(func(self.value))

    def map_error[E, U](self, _func: Callable[[E], U]) -> Success[T]:
        """Return self unchanged; there is no error to map."""
        return self


@dataclass(frozen=True, slots=True)
class Failure[E]:
    """
    Represents a failed result containing an error.

    Attributes:
        error: The error value.
    """

    error: E

    def is_success(self) -> bool:
        """Return False if this is a Failure."""
        return False

    def is_failure(self) -> bool:
        """Return True if this is a Failure."""
        return True

    def unwrap(self) -> Never:
        """
        Raise since this is a Failure.

        Raises:
            UnwrapFailedError: Always, with the contained error attached.
        """
        raise UnwrapFailedError(self.error)

    def unwrap_or[T](self, default: T) -> T:
        """Return the provided default value."""
        return default

    def map[T, U](self, _func: Callable[[T], U]) -> Failure[E]:
        """Return self unchanged; there is no value to map."""
        return self

    def map_error[U](self, func: Callable[[E], U]) -> Failure[U]:
        """
        Apply a function to the error value.

        Args:
            func: Function to apply to the error.

        Returns:
            New Failure with the mapped error.
        """
        return Failure(func(self.error))


type Result[T, E] = Success[T] | Failure[E]


def success[T](value: T) -> Success[T]:
    """Create a Success result."""
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    """Create a Failure result."""
    return Failure(error)
