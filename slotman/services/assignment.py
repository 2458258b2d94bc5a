"""
Assignment service -- assign, unschedule, reschedule one placement.

assign() is the onboarding path: a client picks a date from an availability
snapshot that may already be stale, so every gate is re-checked against live
rows and the commit itself is a conditional UPDATE that only matches while
the date is still NULL.
"""

import logging
from datetime import date

from django.db import DatabaseError, transaction
from django.utils import timezone

from slotman.conf import get_capacity_policy
from slotman.dates import ensure_schedulable, parse_schedule_date
from slotman.exceptions import SlotError
from slotman.models import Placement
from slotman.policy import CapacityPolicy
from slotman.results import AssignResult
from slotman.services.capacity import CapacityQueries
from slotman.services.queries import PlacementQueries
from slotman.signals import placement_scheduled, placement_unscheduled, schedule_rejected

logger = logging.getLogger(__name__)


class SlotAssignment:
    """
    Single-placement scheduling operations.

    All methods are @classmethod so the mixin can be composed into Slots
    without instantiation.
    """

    @classmethod
    def assign(
        cls,
        placement_id,
        scheduled_date: date | str | None,
        campaign_id=None,
        policy: CapacityPolicy | None = None,
    ) -> AssignResult:
        """
        Set a placement's date, only if it has none yet.

        Gates (first failure wins):
            1. date format                  → INVALID_DATE_FORMAT
            2. placement exists             → PLACEMENT_NOT_FOUND
            3. same date already stored     → success, changed=False
            4. different date stored        → ALREADY_SCHEDULED
            5. weekday                      → INVALID_WEEKDAY
            6. live quota (capped types)    → CAPACITY_EXCEEDED
            7. UPDATE ... WHERE scheduled_date IS NULL
               lost the race                → CONCURRENTLY_SCHEDULED

        scheduled_date=None un-schedules and bypasses all quota logic.

        Args:
            placement_id: Placement UUID
            scheduled_date: date, YYYY-MM-DD string, or None
            campaign_id: Campaign UUID the placement must belong to (optional)
            policy: Quota table (default: built from settings)

        Returns:
            AssignResult

        Raises:
            SlotError
        """
        if scheduled_date is None:
            return cls.unschedule(placement_id, campaign_id=campaign_id)

        try:
            return cls._assign(placement_id, scheduled_date, campaign_id, policy)
        except SlotError as exc:
            schedule_rejected.send(
                sender=cls,
                placement_id=str(placement_id),
                scheduled_date=str(scheduled_date),
                error=exc,
            )
            raise

    @classmethod
    def _assign(cls, placement_id, scheduled_date, campaign_id, policy) -> AssignResult:
        target = parse_schedule_date(scheduled_date)
        placement = PlacementQueries.get_placement(placement_id, campaign_id)

        # Retried request: nothing to do
        if placement.scheduled_date == target:
            logger.debug(
                f"Placement {placement.uuid} already on {target}, no-op",
                extra={"placement": str(placement.uuid), "date": str(target)},
            )
            return AssignResult(placement=placement, scheduled_date=target, changed=False)

        if placement.scheduled_date is not None:
            raise SlotError(
                "ALREADY_SCHEDULED",
                placement=str(placement.uuid),
                existing=placement.scheduled_date.isoformat(),
                requested=target.isoformat(),
                message=f"Placement is already scheduled on {placement.scheduled_date.isoformat()}",
            )

        ensure_schedulable(target)

        policy = policy or get_capacity_policy()
        CapacityQueries.ensure_slot_available(placement, target, policy)

        now = timezone.now()
        updated = Placement.objects.filter(
            pk=placement.pk,
            scheduled_date__isnull=True,
        ).update(scheduled_date=target, updated_at=now)

        if updated == 0:
            return cls._resolve_lost_update(placement, target)

        placement.scheduled_date = target
        placement.updated_at = now

        # QuerySet.update() bypasses HistoricalRecords
        Placement.history.bulk_history_create([placement], update=True)

        placement_scheduled.send(
            sender=cls,
            placement=placement,
            scheduled_date=target,
            previous_date=None,
            source="assign",
        )

        return AssignResult(placement=placement, scheduled_date=target)

    @classmethod
    def _resolve_lost_update(cls, placement: Placement, target: date) -> AssignResult:
        """
        The null-guarded UPDATE matched nothing: find out who won.

        Re-reads the committed date. Same date means an identical request got
        there first (idempotent success); any other date means a concurrent
        writer claimed the placement.
        """
        stored = list(
            Placement.objects.filter(pk=placement.pk).values_list("scheduled_date", flat=True)
        )

        if not stored:
            raise SlotError(
                "PERSISTENCE_FAILURE",
                placement=str(placement.uuid),
                message="Placement disappeared before the update",
            )

        current = stored[0]
        placement.scheduled_date = current

        if current == target:
            logger.debug(
                f"Placement {placement.uuid} set to {target} by a concurrent request",
                extra={"placement": str(placement.uuid), "date": str(target)},
            )
            return AssignResult(placement=placement, scheduled_date=target, changed=False)

        if current is not None:
            raise SlotError(
                "CONCURRENTLY_SCHEDULED",
                placement=str(placement.uuid),
                existing=current.isoformat(),
                requested=target.isoformat(),
                message="Placement was scheduled by another request, refresh availability",
            )

        raise SlotError(
            "PERSISTENCE_FAILURE",
            placement=str(placement.uuid),
            message="Failed to update placement",
        )

    @classmethod
    def unschedule(cls, placement_id, campaign_id=None) -> AssignResult:
        """
        Clear a placement's date. No quota logic involved.

        Raises:
            SlotError: PLACEMENT_NOT_FOUND, PERSISTENCE_FAILURE
        """
        placement = PlacementQueries.get_placement(placement_id, campaign_id)

        previous = placement.scheduled_date
        if previous is None:
            return AssignResult(placement=placement, scheduled_date=None, changed=False)

        placement.scheduled_date = None
        cls._save_date(placement)

        placement_unscheduled.send(sender=cls, placement=placement, previous_date=previous)

        return AssignResult(placement=placement, scheduled_date=None)

    @classmethod
    def reschedule(
        cls,
        placement_id,
        scheduled_date: date | str,
        campaign_id=None,
        policy: CapacityPolicy | None = None,
    ) -> AssignResult:
        """
        Move a placement to a new date (admin override).

        Re-validates weekday and live quota, then overwrites whatever date is
        stored. Not race-guarded: use assign() for client-facing scheduling.

        Raises:
            SlotError: INVALID_DATE_FORMAT, PLACEMENT_NOT_FOUND, INVALID_WEEKDAY,
                CAPACITY_EXCEEDED, PERSISTENCE_FAILURE
        """
        try:
            target = parse_schedule_date(scheduled_date)
            placement = PlacementQueries.get_placement(placement_id, campaign_id)

            if placement.scheduled_date == target:
                return AssignResult(placement=placement, scheduled_date=target, changed=False)

            ensure_schedulable(target)

            policy = policy or get_capacity_policy()
            CapacityQueries.ensure_slot_available(placement, target, policy)

            previous = placement.scheduled_date
            placement.scheduled_date = target
            cls._save_date(placement)
        except SlotError as exc:
            schedule_rejected.send(
                sender=cls,
                placement_id=str(placement_id),
                scheduled_date=str(scheduled_date),
                error=exc,
            )
            raise

        placement_scheduled.send(
            sender=cls,
            placement=placement,
            scheduled_date=target,
            previous_date=previous,
            source="reschedule",
        )

        return AssignResult(placement=placement, scheduled_date=target)

    # ══════════════════════════════════════════════════════════════
    # INTERNALS
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def _save_date(cls, placement: Placement) -> None:
        """Persist scheduled_date alone (history recorded)."""
        try:
            with transaction.atomic():
                placement.save(update_fields=["scheduled_date", "updated_at"])
        except DatabaseError as exc:
            # update_fields on a vanished row raises DatabaseError
            raise SlotError(
                "PERSISTENCE_FAILURE",
                placement=str(placement.uuid),
                message="Failed to update placement",
                reason=str(exc),
            ) from exc
