"""Storefront country codes and Seller Center endpoints."""

from __future__ import annotations

PRODUCTION_URL = "https://sellercenter-api.falabella.com"
STAGING_URL = "https://sellercenter-api-staging.falabella.com"

# Country code used against the staging environment
TEST_COUNTRY = "TST"

# Operator (storefront tenant) codes by ISO-3 country code
OPERATOR_CODES: dict[str, str] = {
    "ARG": "faar",
    "BRA": "fabr",
    "CHL": "facl",
    "COL": "faco",
    "MEX": "famx",
    "PER": "fape",
    TEST_COUNTRY: "facl",
    "URY": "fauy",
}
