"""
Slotman Signal Handlers.

Default receivers write a scheduling audit trail to the log.
Projects hook their own receivers for notifications and cache invalidation.

This module is imported in apps.py to register handlers.
"""

import logging

from django.dispatch import receiver

from slotman.signals import placement_scheduled, placement_unscheduled, schedule_rejected

logger = logging.getLogger(__name__)


@receiver(placement_scheduled)
def log_placement_scheduled(sender, placement, scheduled_date, previous_date=None, source="", **kwargs):
    """Record a committed date."""
    if previous_date:
        message = (
            f"Placement {placement.uuid} moved {previous_date} → {scheduled_date} ({source})"
        )
    else:
        message = f"Placement {placement.uuid} scheduled on {scheduled_date} ({source})"

    logger.info(
        message,
        extra={
            "placement": str(placement.uuid),
            "campaign": str(placement.campaign.uuid),
            "date": str(scheduled_date),
            "previous_date": str(previous_date) if previous_date else None,
            "type": placement.type,
            "publication": placement.publication,
            "source": source,
        },
    )


@receiver(placement_unscheduled)
def log_placement_unscheduled(sender, placement, previous_date=None, **kwargs):
    """Record a cleared date."""
    logger.info(
        f"Placement {placement.uuid} unscheduled (was {previous_date})",
        extra={
            "placement": str(placement.uuid),
            "previous_date": str(previous_date) if previous_date else None,
        },
    )


@receiver(schedule_rejected)
def log_schedule_rejected(sender, placement_id, scheduled_date, error, **kwargs):
    """Record a refused request."""
    logger.warning(
        f"Scheduling rejected for placement {placement_id} on {scheduled_date}: {error.code}",
        extra={
            "placement": str(placement_id),
            "date": str(scheduled_date),
            "code": error.code,
            "details": error.details,
        },
    )
