"""
Slotman Service - Thin wrapper over the service mixins.

Usage:
    from slotman import slots, SlotError

    # Availability
    capacity = slots.capacity("2026-03-02", "2026-03-06")
    capacity.as_dict()   # {"startDate": ..., "endDate": ..., "days": [...]}

    # Onboarding (client picks a date)
    result = slots.assign(placement.uuid, "2026-03-02")
    result.changed       # False when the same date was already stored

    # Un-schedule
    slots.assign(placement.uuid, None)

    # Admin
    slots.reschedule(placement.uuid, "2026-03-04")
    slots.bulk_schedule([{"placement_id": p.uuid, "scheduled_date": "2026-03-03"}])

    # Custom quotas for one call
    slots.assign(placement.uuid, "2026-03-02", policy=CapacityPolicy({...}))
"""

from datetime import date

from slotman.policy import CapacityPolicy
from slotman.results import DateRangeCapacity
from slotman.services import (
    BulkScheduling,
    CapacityQueries,
    PlacementQueries,
    SlotAssignment,
)


class Slots(CapacityQueries, PlacementQueries, SlotAssignment, BulkScheduling):
    """
    Main API for Slotman (thin wrapper).

    Composes the classmethod mixins; no instance state.
    """

    @classmethod
    def capacity(
        cls,
        start_date: date | str,
        end_date: date | str,
        publications: list[str] | None = None,
        policy: CapacityPolicy | None = None,
    ) -> DateRangeCapacity:
        """Alias for get_capacity()."""
        return cls.get_capacity(start_date, end_date, publications, policy)
