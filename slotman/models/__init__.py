"""
Slotman Models.

Core models for the ad calendar:
- Campaign: Client engagement owning placements
- Placement: Schedulable unit (type + publication + optional date)
"""

from slotman.models.campaign import Campaign, CampaignStatus
from slotman.models.placement import (
    NEWSLETTER_PLACEMENT_TYPES,
    PODCAST_PLACEMENT_TYPES,
    ConflictPreference,
    Placement,
    PlacementStatus,
    PlacementType,
    Publication,
)

__all__ = [
    "Campaign",
    "CampaignStatus",
    "Placement",
    "PlacementStatus",
    "PlacementType",
    "Publication",
    "ConflictPreference",
    "NEWSLETTER_PLACEMENT_TYPES",
    "PODCAST_PLACEMENT_TYPES",
]
