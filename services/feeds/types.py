"""Types for stored feed status records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from datetime import datetime


class FeedStatus(str, Enum):
    """Processing status of a feed."""

    QUEUED = "Queued"  # accepted, waiting to be processed
    PROCESSING = "Processing"
    CANCELED = "Canceled"  # canceled by the seller
    FINISHED = "Finished"
    ERROR = "Error"  # finished with errors


COMPLETED_STATUSES = frozenset({FeedStatus.CANCELED, FeedStatus.FINISHED, FeedStatus.ERROR})


@dataclass(frozen=True, slots=True)
class FeedRecord:
    """
    Locally stored status of a feed.

    Counters and payloads are stored exactly as Seller Center reported them.

    Attributes:
        feed_id: Marketplace feed identifier (natural key).
        status: Feed status.
        source: Origin tag (e.g. 'api').
        action: Submitted action (e.g. 'ProductCreate').
        creation_date: Marketplace creation timestamp.
        updated_date: Marketplace update timestamp.
        total_records: Records in the feed.
        processed_records: Records processed.
        failed_records: Records failed.
        errors: Per-record errors.
        warnings: Per-record warnings.
        failure_reports: Failure report descriptors.
        deleted_at: Soft-deletion timestamp, if any.
    """

    feed_id: str
    status: FeedStatus
    source: str = ""
    action: str = ""
    creation_date: datetime | None = None
    updated_date: datetime | None = None
    total_records: int = 0
    processed_records: int = 0
    failed_records: int = 0
    errors: list[Any] = field(default_factory=list)
    warnings: list[Any] = field(default_factory=list)
    failure_reports: list[Any] = field(default_factory=list)
    deleted_at: datetime | None = None

    @property
    def is_completed(self) -> bool:
        """Check if the feed reached a final status."""
        return self.status in COMPLETED_STATUSES
