"""Country to operator/endpoint resolution for Falabella Seller Center."""

from __future__ import annotations

from dataclasses import dataclass

from core.countries import OPERATOR_CODES, PRODUCTION_URL, STAGING_URL, TEST_COUNTRY

__all__ = [
    "OPERATOR_CODES",
    "PRODUCTION_URL",
    "STAGING_URL",
    "TEST_COUNTRY",
    "CountryContext",
    "resolve_country",
]


@dataclass(frozen=True, slots=True)
class CountryContext:
    """
    Storefront selection derived from a country code.

    Attributes:
        country: ISO-3 country code the context was built from.
        operator_code: Marketplace tenant tag (e.g. 'facl').
        endpoint: Base URL of the Seller Center API.
    """

    country: str
    operator_code: str
    endpoint: str

    @property
    def business_unit_country(self) -> str:
        """Two-letter country of the operator, as the API expects it."""
        return self.operator_code[-2:].upper()

    @property
    def is_staging(self) -> bool:
        """Check if requests go to the staging environment."""
        return self.endpoint == STAGING_URL


def resolve_country(country: str) -> CountryContext:
    """
    Build the country context for a storefront.

    Args:
        country: ISO-3 country code (one of OPERATOR_CODES).

    Returns:
        The resolved CountryContext.

    Raises:
        ValueError: If the country code is not supported.
    """
    operator_code = OPERATOR_CODES.get(country)
    if operator_code is None:
        msg = f"Invalid country: {country}. Must be one of {list(OPERATOR_CODES)}"
        raise ValueError(msg)

    endpoint = STAGING_URL if country == TEST_COUNTRY else PRODUCTION_URL
    return CountryContext(country=country, operator_code=operator_code, endpoint=endpoint)
