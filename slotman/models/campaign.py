"""
Campaign model.

Campaign = the client engagement that owns a set of placements.
Slotman only needs its identity; billing, onboarding and copy live elsewhere.
"""

import uuid

from django.db import models
from django.utils.translation import gettext_lazy as _


class CampaignStatus(models.TextChoices):
    """Campaign lifecycle status."""

    WAITING_ON_ONBOARDING = "Waiting on Onboarding", _("Waiting on Onboarding")
    ONBOARDING_COMPLETE = "Onboarding Form Complete", _("Onboarding Form Complete")
    ACTIVE = "Active", _("Active")
    PLACEMENTS_COMPLETED = "Placements Completed", _("Placements Completed")
    WRAPPED = "Wrapped", _("Wrapped")


class Campaign(models.Model):
    """Client campaign (owner of placements)."""

    # UUID for external references
    uuid = models.UUIDField(
        default=uuid.uuid4,
        editable=False,
        unique=True,
        verbose_name=_("UUID"),
    )

    name = models.CharField(
        max_length=200,
        verbose_name=_("Name"),
    )

    client_name = models.CharField(
        max_length=200,
        blank=True,
        verbose_name=_("Client"),
    )

    status = models.CharField(
        max_length=40,
        choices=CampaignStatus.choices,
        default=CampaignStatus.WAITING_ON_ONBOARDING,
        verbose_name=_("Status"),
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        db_table = "slotman_campaign"
        verbose_name = _("Campaign")
        verbose_name_plural = _("Campaigns")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        if self.client_name:
            return f"{self.client_name} - {self.name}"
        return self.name

    @property
    def unscheduled_placements(self):
        """Placements still waiting for a date."""
        return self.placements.filter(scheduled_date__isnull=True)
