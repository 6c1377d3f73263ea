"""Admin configuration for feeds app."""

from django.contrib import admin

from .models import FalabellaFeed


@admin.register(FalabellaFeed)
class FalabellaFeedAdmin(admin.ModelAdmin):
    """Admin configuration for FalabellaFeed model."""

    list_display = (
        "feed_id",
        "action",
        "status",
        "total_records",
        "processed_records",
        "failed_records",
        "is_completed",
        "updated_date",
    )
    list_filter = ("status", "action", "source")
    search_fields = ("feed_id",)
    readonly_fields = ("created_at", "updated_at")
    ordering = ("-created_at",)

    def get_queryset(self, request):  # type: ignore[no-untyped-def]
        """Include soft-deleted feeds."""
        return FalabellaFeed.all_objects.all()

    @admin.display(boolean=True, description="Completed")
    def is_completed(self, obj: FalabellaFeed) -> bool:
        """Return whether the feed reached a final status."""
        return obj.is_completed
