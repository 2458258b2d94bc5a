"""
Placement lookups shared by the scheduling services.
"""

import uuid
from datetime import date

from slotman.exceptions import SlotError
from slotman.models import Placement


def _as_uuid(value) -> uuid.UUID | None:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


class PlacementQueries:
    """Placement lookups (by external UUID, optionally scoped to a campaign)."""

    @classmethod
    def get_placement(cls, placement_id, campaign_id=None) -> Placement:
        """
        Fetch a placement by UUID.

        Args:
            placement_id: Placement UUID (UUID or string)
            campaign_id: Campaign UUID; when given, the placement must belong to it

        Raises:
            SlotError: PLACEMENT_NOT_FOUND
        """
        placement_uuid = _as_uuid(placement_id)
        if placement_uuid is None:
            raise SlotError("PLACEMENT_NOT_FOUND", placement=str(placement_id))

        qs = Placement.objects.select_related("campaign").filter(uuid=placement_uuid)

        if campaign_id is not None:
            campaign_uuid = _as_uuid(campaign_id)
            if campaign_uuid is None:
                raise SlotError(
                    "PLACEMENT_NOT_FOUND",
                    placement=str(placement_id),
                    campaign=str(campaign_id),
                )
            qs = qs.filter(campaign__uuid=campaign_uuid)

        placement = qs.first()
        if placement is None:
            details = {"placement": str(placement_id), "message": "Placement not found"}
            if campaign_id is not None:
                details["campaign"] = str(campaign_id)
            raise SlotError("PLACEMENT_NOT_FOUND", **details)

        return placement

    @classmethod
    def get_unscheduled(cls, campaign=None) -> list[Placement]:
        """Placements still waiting for a date."""
        qs = Placement.objects.filter(scheduled_date__isnull=True)

        if campaign is not None:
            qs = qs.filter(campaign=campaign)

        return list(qs.order_by("created_at"))

    @classmethod
    def get_scheduled_on(cls, target_date: date, publication: str = None) -> list[Placement]:
        """Placements running on a given day."""
        qs = Placement.objects.filter(scheduled_date=target_date)

        if publication:
            qs = qs.filter(publication=publication)

        return list(qs.order_by("publication", "type", "created_at"))
