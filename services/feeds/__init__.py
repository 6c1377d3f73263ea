"""Feed status storage package."""

from services.feeds.store import DjangoFeedStore, FeedStatusStore
from services.feeds.types import COMPLETED_STATUSES, FeedRecord, FeedStatus

__all__ = [
    "COMPLETED_STATUSES",
    "DjangoFeedStore",
    "FeedRecord",
    "FeedStatus",
    "FeedStatusStore",
]
