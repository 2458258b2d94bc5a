"""
Placement model.

Placement = the schedulable unit: one ad of a given type in a given
publication, optionally assigned to a calendar date.
"""

import uuid

from django.db import models
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords


class PlacementType(models.TextChoices):
    """Ad Calendar placement types."""

    PRIMARY = "Primary", _("Primary")
    SECONDARY = "Secondary", _("Secondary")
    PEAK_PICKS = "Peak Picks", _("Peak Picks")
    BEEHIV = "Beehiv", _("Beehiv")
    SMART_LINKS = "Smart Links", _("Smart Links")
    BLS = "BLS", _("BLS")
    PODCAST_AD = "Podcast Ad", _("Podcast Ad")
    PRE_ROLL = ":30 Pre-Roll", _(":30 Pre-Roll")
    MID_ROLL = ":30 Mid-Roll", _(":30 Mid-Roll")
    INTERVIEW = "15 Minute Interview", _("15 Minute Interview")


NEWSLETTER_PLACEMENT_TYPES = (
    PlacementType.PRIMARY,
    PlacementType.SECONDARY,
    PlacementType.PEAK_PICKS,
    PlacementType.BEEHIV,
    PlacementType.SMART_LINKS,
    PlacementType.BLS,
    PlacementType.PODCAST_AD,
)

PODCAST_PLACEMENT_TYPES = (
    PlacementType.PRE_ROLL,
    PlacementType.MID_ROLL,
    PlacementType.INTERVIEW,
)


class Publication(models.TextChoices):
    """Distribution channels. Quotas are independent per publication."""

    THE_PEAK = "The Peak", _("The Peak Daily Newsletter")
    PEAK_MONEY = "Peak Money", _("Peak Money")
    PEAK_DAILY_PODCAST = "Peak Daily Podcast", _("Peak Daily Podcast")


class PlacementStatus(models.TextChoices):
    """Placement lifecycle status (copy/approval workflow, not scheduling)."""

    NEW_CAMPAIGN = "New Campaign", _("New Campaign")
    COPYWRITING = "Copywriting in Progress", _("Copywriting in Progress")
    TEAM_REVIEW_COMPLETE = "Peak Team Review Complete", _("Peak Team Review Complete")
    SENT_FOR_APPROVAL = "Sent for Approval", _("Sent for Approval")
    APPROVED = "Approved", _("Approved")
    ONBOARDING_REQUESTED = "Onboarding Requested", _("Onboarding Requested")
    DRAFTING_SCRIPT = "Drafting Script", _("Drafting Script")
    SCRIPT_REVIEW = "Script Review by Client", _("Script Review by Client")
    APPROVED_SCRIPT = "Approved Script", _("Approved Script")
    AUDIO_SENT_FOR_APPROVAL = "Audio Sent for Approval", _("Audio Sent for Approval")
    AUDIO_SENT = "Audio Sent", _("Audio Sent")
    AUDIO_APPROVED = "Audio Approved", _("Audio Approved")
    DRAFTING_QUESTIONS = "Drafting Questions", _("Drafting Questions")
    QUESTIONS_IN_REVIEW = "Questions In Review", _("Questions In Review")
    CLIENT_REVIEWING_INTERVIEW = "Client Reviewing Interview", _("Client Reviewing Interview")
    REVISING_FOR_CLIENT = "Revising for Client", _("Revising for Client")
    APPROVED_INTERVIEW = "Approved Interview", _("Approved Interview")


class ConflictPreference(models.TextChoices):
    """What the client wants when the requested date is taken."""

    DEFER = "Defer if conflict", _("Defer if conflict")
    CRUCIAL = "Date is crucial", _("Date is crucial")


class Placement(models.Model):
    """
    Ad placement in the calendar.

    scheduled_date starts as NULL. The scheduling paths only ever SET a
    NULL date; moving an existing date is an explicit reschedule.
    """

    # UUID for external references
    uuid = models.UUIDField(
        default=uuid.uuid4,
        editable=False,
        unique=True,
        verbose_name=_("UUID"),
    )

    campaign = models.ForeignKey(
        "slotman.Campaign",
        on_delete=models.CASCADE,
        related_name="placements",
        verbose_name=_("Campaign"),
    )

    name = models.CharField(
        max_length=200,
        blank=True,
        verbose_name=_("Name"),
    )

    type = models.CharField(
        max_length=30,
        choices=PlacementType.choices,
        verbose_name=_("Type"),
    )

    publication = models.CharField(
        max_length=30,
        choices=Publication.choices,
        verbose_name=_("Publication"),
    )

    scheduled_date = models.DateField(
        null=True,
        blank=True,
        db_index=True,
        verbose_name=_("Date"),
        help_text=_("Calendar date the placement runs (weekdays only)"),
    )

    status = models.CharField(
        max_length=40,
        choices=PlacementStatus.choices,
        default=PlacementStatus.NEW_CAMPAIGN,
        verbose_name=_("Status"),
    )

    conflict_preference = models.CharField(
        max_length=30,
        choices=ConflictPreference.choices,
        blank=True,
        verbose_name=_("Conflict preference"),
    )

    notes = models.TextField(
        blank=True,
        verbose_name=_("Notes"),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    # History
    history = HistoricalRecords()

    class Meta:
        db_table = "slotman_placement"
        verbose_name = _("Placement")
        verbose_name_plural = _("Placements")
        ordering = ["scheduled_date", "created_at"]
        indexes = [
            models.Index(
                fields=["scheduled_date", "publication", "type"],
                name="slotman_placement_slot_idx",
            ),
            models.Index(fields=["campaign", "scheduled_date"], name="slotman_placement_camp_idx"),
        ]

    def __str__(self) -> str:
        label = self.name or f"{self.type} ({self.publication})"
        if self.scheduled_date:
            return f"{label} @ {self.scheduled_date.isoformat()}"
        return label

    @property
    def is_scheduled(self) -> bool:
        """Has a date?"""
        return self.scheduled_date is not None

    @property
    def is_podcast(self) -> bool:
        return self.type in PODCAST_PLACEMENT_TYPES
