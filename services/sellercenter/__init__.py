"""Falabella Seller Center API client package."""

from services.sellercenter.base import SellerCenterApi
from services.sellercenter.client import SellerCenterClient, SellerCenterConfiguration
from services.sellercenter.errors import ErrorResponseError
from services.sellercenter.models import (
    DEFAULT_PRODUCT_FILTER,
    BrandRef,
    BusinessUnit,
    CategoryRef,
    Feed,
    FeedResponse,
    Image,
    ProductData,
    ProductFilter,
    ProductReference,
    ProductStatus,
    ProductSubmission,
)
from services.sellercenter.webhooks import WebhookManager

__all__ = [
    "DEFAULT_PRODUCT_FILTER",
    "BrandRef",
    "BusinessUnit",
    "CategoryRef",
    "ErrorResponseError",
    "Feed",
    "FeedResponse",
    "Image",
    "ProductData",
    "ProductFilter",
    "ProductReference",
    "ProductStatus",
    "ProductSubmission",
    "SellerCenterApi",
    "SellerCenterClient",
    "SellerCenterConfiguration",
    "WebhookManager",
]
