"""
Slotman REST API.

Provides DRF views for:
- Capacity (date-range availability)
- Schedule (single placement, onboarding)
- Bulk schedule (admin grid)
- Placement (read-only + reschedule action)
"""
