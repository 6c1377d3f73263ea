from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="FalabellaFeed",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "feed_id",
                    models.CharField(
                        help_text="Feed identifier assigned by Seller Center",
                        max_length=64,
                        unique=True,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Queued", "Queued"),
                            ("Processing", "Processing"),
                            ("Canceled", "Canceled"),
                            ("Finished", "Finished"),
                            ("Error", "Error"),
                        ],
                        help_text="Feed status as reported by Seller Center",
                        max_length=20,
                    ),
                ),
                ("source", models.CharField(blank=True, default="", max_length=50)),
                (
                    "action",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Submitted action (e.g. ProductCreate)",
                        max_length=50,
                    ),
                ),
                (
                    "creation_date",
                    models.DateTimeField(
                        blank=True,
                        help_text="Creation time reported by Seller Center",
                        null=True,
                    ),
                ),
                (
                    "updated_date",
                    models.DateTimeField(
                        blank=True,
                        help_text="Last update time reported by Seller Center",
                        null=True,
                    ),
                ),
                ("total_records", models.PositiveIntegerField(default=0)),
                ("processed_records", models.PositiveIntegerField(default=0)),
                ("failed_records", models.PositiveIntegerField(default=0)),
                ("errors", models.JSONField(blank=True, default=list)),
                ("warnings", models.JSONField(blank=True, default=list)),
                ("failure_reports", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("deleted_at", models.DateTimeField(blank=True, null=True)),
            ],
            options={
                "verbose_name": "Falabella Feed",
                "verbose_name_plural": "Falabella Feeds",
                "db_table": "falabella_feeds",
                "ordering": ["-created_at"],
            },
        ),
    ]
