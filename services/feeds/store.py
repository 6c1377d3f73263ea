"""Persistence of feed status records."""

from __future__ import annotations

from datetime import UTC
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from django.utils import timezone

from core.logging import get_logger
from services.feeds.types import FeedRecord, FeedStatus

if TYPE_CHECKING:
    from datetime import datetime

    from apps.feeds.models import FalabellaFeed
    from services.sellercenter.models import Feed

logger = get_logger(__name__)


@runtime_checkable
class FeedStatusStore(Protocol):
    """Keyed store of feed status records."""

    def find_by_feed_id(self, feed_id: str) -> FeedRecord | None:
        """Return the record of a feed, or None if there is none."""
        ...

    def upsert(self, feed: Feed) -> FeedRecord:
        """Create or fully replace the record of a feed."""
        ...


def _aware(value: datetime | None) -> datetime | None:
    if value is None or timezone.is_aware(value):
        return value
    return timezone.make_aware(value, UTC)


def _json_list(value: Any) -> list[Any]:
    return list(value) if value else []


def to_record(model: FalabellaFeed) -> FeedRecord:
    """Convert a stored row into a FeedRecord."""
    return FeedRecord(
        feed_id=model.feed_id,
        status=FeedStatus(model.status),
        source=model.source,
        action=model.action,
        creation_date=model.creation_date,
        updated_date=model.updated_date,
        total_records=model.total_records,
        processed_records=model.processed_records,
        failed_records=model.failed_records,
        errors=_json_list(model.errors),
        warnings=_json_list(model.warnings),
        failure_reports=_json_list(model.failure_reports),
        deleted_at=model.deleted_at,
    )


class DjangoFeedStore:
    """
    FeedStatusStore backed by the ``falabella_feeds`` table.

    Upserts are a plain read-then-write with no locking; concurrent
    upserts of the same feed resolve as last write wins.
    """

    def find_by_feed_id(self, feed_id: str) -> FeedRecord | None:
        """Return the record of a feed, ignoring soft-deleted rows."""
        from apps.feeds.models import FalabellaFeed

        model = FalabellaFeed.objects.filter(feed_id=feed_id).first()
        return to_record(model) if model is not None else None

    def upsert(self, feed: Feed) -> FeedRecord:
        """
        Create or fully replace the record of a feed.

        Every field except identity is overwritten from the feed. The lookup
        includes soft-deleted rows so the unique feed id is never duplicated.

        Args:
            feed: Feed status reported by Seller Center.

        Returns:
            The stored record.
        """
        from apps.feeds.models import FalabellaFeed

        model = FalabellaFeed.all_objects.filter(feed_id=feed.id).first()
        created = model is None
        if model is None:
            model = FalabellaFeed(feed_id=feed.id)

        model.status = FeedStatus(feed.status).value
        model.source = feed.source
        model.action = feed.action
        model.creation_date = _aware(feed.creation_date)
        model.updated_date = _aware(feed.updated_date)
        model.total_records = feed.total_records
        model.processed_records = feed.processed_records
        model.failed_records = feed.failed_records
        model.errors = _json_list(feed.errors)
        model.warnings = _json_list(feed.warnings)
        model.failure_reports = _json_list(feed.failure_reports)
        model.save()

        logger.info(
            "Stored feed status",
            feed_id=feed.id,
            status=model.status,
            action=model.action,
            created=created,
        )
        return to_record(model)
