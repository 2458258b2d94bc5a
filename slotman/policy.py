"""
Capacity Policy.

Static mapping from placement type to a daily quota per publication.
A quota of None means the type is uncapped.

Usage:
    policy = CapacityPolicy.from_settings()
    policy.quota_for(PlacementType.PRIMARY)      # 1
    policy.quota_for(PlacementType.BEEHIV)       # None (unlimited)

    # Tests / callers can inject their own table
    policy = CapacityPolicy({**DEFAULT_DAILY_LIMITS, "Peak Picks": 2})
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from slotman.exceptions import SlotError
from slotman.models import PlacementType

# Per publication, weekdays only. None = unlimited.
DEFAULT_DAILY_LIMITS: Mapping[str, int | None] = MappingProxyType(
    {
        PlacementType.PRIMARY: 1,
        PlacementType.SECONDARY: 1,
        PlacementType.PEAK_PICKS: 4,
        PlacementType.BEEHIV: None,
        PlacementType.SMART_LINKS: None,
        PlacementType.BLS: None,
        PlacementType.PODCAST_AD: None,
        PlacementType.PRE_ROLL: None,
        PlacementType.MID_ROLL: None,
        PlacementType.INTERVIEW: None,
    }
)


@dataclass(frozen=True)
class CapacityPolicy:
    """
    Daily quota table, shared by the capacity reader and both schedulers.

    Immutable: quotas cannot drift between the "show availability" path
    and the "commit" path of one call.
    """

    limits: Mapping[str, int | None] = field(default_factory=lambda: DEFAULT_DAILY_LIMITS)

    def __post_init__(self):
        normalized = {}
        for type_, limit in self.limits.items():
            if limit is not None and (isinstance(limit, bool) or int(limit) < 0):
                raise ValueError(f"Invalid daily limit for {type_!r}: {limit!r}")
            normalized[str(type_)] = None if limit is None else int(limit)
        object.__setattr__(self, "limits", MappingProxyType(normalized))

    @classmethod
    def from_settings(cls) -> CapacityPolicy:
        """Defaults merged with SLOTMAN["DAILY_LIMITS"] overrides."""
        from slotman.conf import get_setting

        overrides = get_setting("DAILY_LIMITS") or {}
        return cls({**DEFAULT_DAILY_LIMITS, **overrides})

    def quota_for(self, placement_type: str) -> int | None:
        """
        Daily quota for a type, per publication.

        Returns:
            int limit, or None when the type is uncapped

        Raises:
            SlotError: UNKNOWN_PLACEMENT_TYPE
        """
        key = str(placement_type)
        if key not in self.limits:
            raise SlotError("UNKNOWN_PLACEMENT_TYPE", type=key)
        return self.limits[key]

    def is_capped(self, placement_type: str) -> bool:
        return self.quota_for(placement_type) is not None

    def capped_types(self) -> list[str]:
        """Capped types, in PlacementType declaration order."""
        ordered = [t for t in PlacementType.values if t in self.limits]
        extra = [t for t in self.limits if t not in ordered]
        return [t for t in ordered + extra if self.limits[t] is not None]
