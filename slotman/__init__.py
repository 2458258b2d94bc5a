"""
Django Slotman - Placement scheduling & capacity allocation.

Assigns calendar dates to ad placements under per-type, per-publication
daily quotas.

Usage:
    from slotman import slots, SlotError

    # Availability (snapshot, always re-validated on write)
    capacity = slots.capacity(date(2026, 3, 2), date(2026, 3, 6))
    for day in capacity.days:
        for slot in day.slots:
            print(day.date, slot.publication, slot.type, slot.available)

    # Onboarding: one placement, one date
    try:
        slots.assign(placement.uuid, "2026-03-02")
    except SlotError as e:
        print(e.code, e.details)

    # Admin grid: many placements, best effort
    result = slots.bulk_schedule([
        {"placement_id": p1.uuid, "scheduled_date": "2026-03-02"},
        {"placement_id": p2.uuid, "scheduled_date": "2026-03-03"},
    ])
    print(result.scheduled, result.errors)
"""

from slotman.exceptions import SlotError


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name in ("slots", "Slots"):
        from slotman.service import Slots

        return Slots
    if name == "CapacityPolicy":
        from slotman.policy import CapacityPolicy

        return CapacityPolicy
    if name == "BulkScheduleResult":
        from slotman.results import BulkScheduleResult

        return BulkScheduleResult
    if name == "DateRangeCapacity":
        from slotman.results import DateRangeCapacity

        return DateRangeCapacity
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "slots",
    "Slots",
    "SlotError",
    "CapacityPolicy",
    "BulkScheduleResult",
    "DateRangeCapacity",
]
__version__ = "0.1.0"
