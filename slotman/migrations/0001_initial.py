"""
Initial migration for Slotman.

- Campaign
- Placement (with slot index on scheduled_date/publication/type)
- HistoricalPlacement (simple_history)
"""

import uuid

import django.db.models.deletion
import simple_history.models
from django.conf import settings
from django.db import migrations, models

PLACEMENT_TYPE_CHOICES = [
    ("Primary", "Primary"),
    ("Secondary", "Secondary"),
    ("Peak Picks", "Peak Picks"),
    ("Beehiv", "Beehiv"),
    ("Smart Links", "Smart Links"),
    ("BLS", "BLS"),
    ("Podcast Ad", "Podcast Ad"),
    (":30 Pre-Roll", ":30 Pre-Roll"),
    (":30 Mid-Roll", ":30 Mid-Roll"),
    ("15 Minute Interview", "15 Minute Interview"),
]

PUBLICATION_CHOICES = [
    ("The Peak", "The Peak Daily Newsletter"),
    ("Peak Money", "Peak Money"),
    ("Peak Daily Podcast", "Peak Daily Podcast"),
]

PLACEMENT_STATUS_CHOICES = [
    ("New Campaign", "New Campaign"),
    ("Copywriting in Progress", "Copywriting in Progress"),
    ("Peak Team Review Complete", "Peak Team Review Complete"),
    ("Sent for Approval", "Sent for Approval"),
    ("Approved", "Approved"),
    ("Onboarding Requested", "Onboarding Requested"),
    ("Drafting Script", "Drafting Script"),
    ("Script Review by Client", "Script Review by Client"),
    ("Approved Script", "Approved Script"),
    ("Audio Sent for Approval", "Audio Sent for Approval"),
    ("Audio Sent", "Audio Sent"),
    ("Audio Approved", "Audio Approved"),
    ("Drafting Questions", "Drafting Questions"),
    ("Questions In Review", "Questions In Review"),
    ("Client Reviewing Interview", "Client Reviewing Interview"),
    ("Revising for Client", "Revising for Client"),
    ("Approved Interview", "Approved Interview"),
]

CONFLICT_PREFERENCE_CHOICES = [
    ("Defer if conflict", "Defer if conflict"),
    ("Date is crucial", "Date is crucial"),
]


def placement_fields():
    """Fields shared by Placement and HistoricalPlacement."""
    return [
        ("name", models.CharField(blank=True, max_length=200, verbose_name="Name")),
        (
            "type",
            models.CharField(
                choices=PLACEMENT_TYPE_CHOICES, max_length=30, verbose_name="Type"
            ),
        ),
        (
            "publication",
            models.CharField(
                choices=PUBLICATION_CHOICES, max_length=30, verbose_name="Publication"
            ),
        ),
        (
            "scheduled_date",
            models.DateField(
                blank=True,
                db_index=True,
                help_text="Calendar date the placement runs (weekdays only)",
                null=True,
                verbose_name="Date",
            ),
        ),
        (
            "status",
            models.CharField(
                choices=PLACEMENT_STATUS_CHOICES,
                default="New Campaign",
                max_length=40,
                verbose_name="Status",
            ),
        ),
        (
            "conflict_preference",
            models.CharField(
                blank=True,
                choices=CONFLICT_PREFERENCE_CHOICES,
                max_length=30,
                verbose_name="Conflict preference",
            ),
        ),
        ("notes", models.TextField(blank=True, verbose_name="Notes")),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        # ══════════════════════════════════════════════════════════════
        # CAMPAIGN
        # ══════════════════════════════════════════════════════════════
        migrations.CreateModel(
            name="Campaign",
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
                    "uuid",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        unique=True,
                        verbose_name="UUID",
                    ),
                ),
                ("name", models.CharField(max_length=200, verbose_name="Name")),
                (
                    "client_name",
                    models.CharField(blank=True, max_length=200, verbose_name="Client"),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Waiting on Onboarding", "Waiting on Onboarding"),
                            ("Onboarding Form Complete", "Onboarding Form Complete"),
                            ("Active", "Active"),
                            ("Placements Completed", "Placements Completed"),
                            ("Wrapped", "Wrapped"),
                        ],
                        default="Waiting on Onboarding",
                        max_length=40,
                        verbose_name="Status",
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(auto_now_add=True, verbose_name="created at"),
                ),
                (
                    "updated_at",
                    models.DateTimeField(auto_now=True, verbose_name="updated at"),
                ),
            ],
            options={
                "verbose_name": "Campaign",
                "verbose_name_plural": "Campaigns",
                "db_table": "slotman_campaign",
                "ordering": ["-created_at"],
            },
        ),
        # ══════════════════════════════════════════════════════════════
        # PLACEMENT
        # ══════════════════════════════════════════════════════════════
        migrations.CreateModel(
            name="Placement",
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
                    "uuid",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        unique=True,
                        verbose_name="UUID",
                    ),
                ),
                *placement_fields(),
                (
                    "created_at",
                    models.DateTimeField(auto_now_add=True, verbose_name="created at"),
                ),
                (
                    "updated_at",
                    models.DateTimeField(auto_now=True, verbose_name="updated at"),
                ),
                (
                    "campaign",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="placements",
                        to="slotman.campaign",
                        verbose_name="Campaign",
                    ),
                ),
            ],
            options={
                "verbose_name": "Placement",
                "verbose_name_plural": "Placements",
                "db_table": "slotman_placement",
                "ordering": ["scheduled_date", "created_at"],
                "indexes": [
                    models.Index(
                        fields=["scheduled_date", "publication", "type"],
                        name="slotman_placement_slot_idx",
                    ),
                    models.Index(
                        fields=["campaign", "scheduled_date"],
                        name="slotman_placement_camp_idx",
                    ),
                ],
            },
        ),
        # ══════════════════════════════════════════════════════════════
        # HISTORY
        # ══════════════════════════════════════════════════════════════
        migrations.CreateModel(
            name="HistoricalPlacement",
            fields=[
                (
                    "id",
                    models.BigIntegerField(
                        auto_created=True, blank=True, db_index=True, verbose_name="ID"
                    ),
                ),
                (
                    "uuid",
                    models.UUIDField(
                        db_index=True,
                        default=uuid.uuid4,
                        editable=False,
                        verbose_name="UUID",
                    ),
                ),
                *placement_fields(),
                (
                    "created_at",
                    models.DateTimeField(
                        blank=True, editable=False, verbose_name="created at"
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        blank=True, editable=False, verbose_name="updated at"
                    ),
                ),
                ("history_id", models.AutoField(primary_key=True, serialize=False)),
                ("history_date", models.DateTimeField(db_index=True)),
                ("history_change_reason", models.CharField(max_length=100, null=True)),
                (
                    "history_type",
                    models.CharField(
                        choices=[("+", "Created"), ("~", "Changed"), ("-", "Deleted")],
                        max_length=1,
                    ),
                ),
                (
                    "campaign",
                    models.ForeignKey(
                        blank=True,
                        db_constraint=False,
                        null=True,
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name="+",
                        to="slotman.campaign",
                        verbose_name="Campaign",
                    ),
                ),
                (
                    "history_user",
                    models.ForeignKey(
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "historical Placement",
                "verbose_name_plural": "historical Placements",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
