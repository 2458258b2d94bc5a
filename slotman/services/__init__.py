"""
Slotman Services.

Business logic that doesn't belong in models:
- capacity: Live slot usage and date-range availability
- queries: Placement lookups
- assignment: Assign (null-guarded), unschedule, reschedule one placement
- bulk: Best-effort multi-placement scheduling
"""

from slotman.services.assignment import SlotAssignment
from slotman.services.bulk import BulkAssignment, BulkScheduling
from slotman.services.capacity import CapacityQueries
from slotman.services.queries import PlacementQueries

__all__ = [
    "CapacityQueries",
    "PlacementQueries",
    "SlotAssignment",
    "BulkScheduling",
    "BulkAssignment",
]
