"""Models for the feeds application."""

from __future__ import annotations

from django.db import models
from django.utils import timezone

from services.feeds.types import COMPLETED_STATUSES, FeedStatus


class ActiveFeedManager(models.Manager):
    """Manager that hides soft-deleted feeds."""

    def get_queryset(self) -> models.QuerySet[FalabellaFeed]:
        """Return feeds that are not soft-deleted."""
        return super().get_queryset().filter(deleted_at__isnull=True)


class FalabellaFeed(models.Model):
    """
    Status of a Seller Center feed (asynchronous bulk operation).

    Rows are written by ``services.feeds.store.DjangoFeedStore`` and are
    never physically deleted by it.
    """

    feed_id = models.CharField(
        max_length=64,
        unique=True,
        help_text="Feed identifier assigned by Seller Center",
    )
    status = models.CharField(
        max_length=20,
        choices=[(status.value, status.value) for status in FeedStatus],
        help_text="Feed status as reported by Seller Center",
    )
    source = models.CharField(max_length=50, blank=True, default="")
    action = models.CharField(
        max_length=50,
        blank=True,
        default="",
        help_text="Submitted action (e.g. ProductCreate)",
    )
    creation_date = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Creation time reported by Seller Center",
    )
    updated_date = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Last update time reported by Seller Center",
    )
    total_records = models.PositiveIntegerField(default=0)
    processed_records = models.PositiveIntegerField(default=0)
    failed_records = models.PositiveIntegerField(default=0)
    errors = models.JSONField(default=list, blank=True)
    warnings = models.JSONField(default=list, blank=True)
    failure_reports = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    deleted_at = models.DateTimeField(null=True, blank=True)

    objects = ActiveFeedManager()
    all_objects = models.Manager()

    class Meta:
        """Meta options for FalabellaFeed model."""

        db_table = "falabella_feeds"
        ordering = ["-created_at"]
        verbose_name = "Falabella Feed"
        verbose_name_plural = "Falabella Feeds"

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.action or 'Feed'} {self.feed_id} ({self.status})"

    @property
    def is_completed(self) -> bool:
        """Check if the feed reached a final status."""
        return self.status in {status.value for status in COMPLETED_STATUSES}

    @property
    def is_deleted(self) -> bool:
        """Check if the feed is soft-deleted."""
        return self.deleted_at is not None

    def soft_delete(self) -> None:
        """Mark the feed as deleted without removing the row."""
        self.deleted_at = timezone.now()
        self.save(update_fields=["deleted_at", "updated_at"])
