"""Feeds app configuration."""

from django.apps import AppConfig


class FeedsConfig(AppConfig):
    """Configuration for the feeds application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.feeds"
    verbose_name = "Falabella Feeds"
