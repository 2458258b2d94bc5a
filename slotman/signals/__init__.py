"""
Slotman Signals.

All communication with external systems happens via signals
(dashboard cache invalidation, client notices, calendar sync...).

Signals:
    placement_scheduled: A placement got (or moved to) a date
    placement_unscheduled: A placement's date was cleared
    schedule_rejected: A scheduling request was refused
"""

from django.dispatch import Signal

# Placement committed to a date
# Sent by slots.assign(), slots.reschedule() and slots.bulk_schedule()
# Args: placement, scheduled_date, previous_date, source ("assign" | "reschedule" | "bulk")
placement_scheduled = Signal()

# Placement date cleared
# Sent by slots.unschedule() (and slots.assign(..., None))
# Args: placement, previous_date
placement_unscheduled = Signal()

# Scheduling request refused (weekday, capacity, race, ...)
# Sent by slots.assign() and slots.reschedule(); bulk reports rows in its result
# Args: placement_id, scheduled_date, error (SlotError)
schedule_rejected = Signal()

__all__ = ["placement_scheduled", "placement_unscheduled", "schedule_rejected"]
