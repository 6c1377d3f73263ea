"""Falabella Seller Center adapter package."""

from services.falabella.builders import (
    PayloadValidationError,
    build_business_unit_update,
    build_delete_references,
    build_image_references,
    build_product_submission,
)
from services.falabella.countries import (
    OPERATOR_CODES,
    PRODUCTION_URL,
    STAGING_URL,
    CountryContext,
    resolve_country,
)
from services.falabella.errors import ErrorCode, ErrorScope, FetchError
from services.falabella.facade import FalabellaSellerCenter

__all__ = [
    "OPERATOR_CODES",
    "PRODUCTION_URL",
    "STAGING_URL",
    "CountryContext",
    "ErrorCode",
    "ErrorScope",
    "FalabellaSellerCenter",
    "FetchError",
    "PayloadValidationError",
    "build_business_unit_update",
    "build_delete_references",
    "build_image_references",
    "build_product_submission",
    "resolve_country",
]
