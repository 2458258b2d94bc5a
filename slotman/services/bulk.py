"""
Bulk scheduling service -- admin grid, many placements at once.

Best effort, not a transaction: each assignment is validated and committed
on its own, and one failure never rolls back or stops the others.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date

from django.db import DatabaseError, transaction

from slotman.conf import get_capacity_policy
from slotman.dates import ensure_schedulable, parse_schedule_date
from slotman.exceptions import SlotError
from slotman.policy import CapacityPolicy
from slotman.results import AssignmentError, BulkScheduleResult
from slotman.services.capacity import CapacityQueries
from slotman.services.queries import PlacementQueries
from slotman.signals import placement_scheduled

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BulkAssignment:
    """One row of a bulk request."""

    placement_id: str
    scheduled_date: date | str
    campaign_id: str | None = None

    @classmethod
    def coerce(cls, value) -> BulkAssignment:
        """Accept a BulkAssignment or a mapping with the same keys."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(
                placement_id=value.get("placement_id"),
                scheduled_date=value.get("scheduled_date"),
                campaign_id=value.get("campaign_id"),
            )
        raise TypeError(f"Cannot build BulkAssignment from {type(value).__name__}")


class BulkScheduling:
    """
    Bulk scheduling operations.

    All methods are @classmethod so the mixin can be composed into Slots
    without instantiation.
    """

    @classmethod
    def bulk_schedule(
        cls,
        assignments: Iterable[BulkAssignment | Mapping],
        policy: CapacityPolicy | None = None,
    ) -> BulkScheduleResult:
        """
        Schedule many placements, sequentially and independently.

        Per assignment: format → weekday → placement exists → live quota
        (capped types) → unconditional update. No null-guard: this path is
        admin-invoked and overwrites an existing date.

        Args:
            assignments: BulkAssignment objects or mappings with
                placement_id, scheduled_date and optional campaign_id
            policy: Quota table (default: built from settings, once per batch)

        Returns:
            BulkScheduleResult with scheduled count and per-row errors.
            Row failures never raise.
        """
        policy = policy or get_capacity_policy()
        result = BulkScheduleResult()

        for raw in assignments:
            assignment = BulkAssignment.coerce(raw)
            try:
                cls._schedule_one(assignment, policy)
            except SlotError as exc:
                result.errors.append(
                    AssignmentError(
                        placement_id=str(assignment.placement_id),
                        error=cls._error_message(exc),
                        code=exc.code,
                    )
                )
                continue

            result.scheduled += 1

        log = logger.info if result.success else logger.warning
        log(
            f"Bulk schedule: {result.scheduled} scheduled, {len(result.errors)} rejected",
            extra={
                "scheduled": result.scheduled,
                "rejected": [e.as_dict() for e in result.errors],
            },
        )

        return result

    @classmethod
    def _schedule_one(cls, assignment: BulkAssignment, policy: CapacityPolicy) -> None:
        target = ensure_schedulable(parse_schedule_date(assignment.scheduled_date))
        placement = PlacementQueries.get_placement(
            assignment.placement_id, assignment.campaign_id
        )

        CapacityQueries.ensure_slot_available(placement, target, policy)

        previous = placement.scheduled_date
        placement.scheduled_date = target

        try:
            # Savepoint per row: a failed row must not poison the batch
            with transaction.atomic():
                placement.save(update_fields=["scheduled_date", "updated_at"])
        except DatabaseError as exc:
            raise SlotError(
                "PERSISTENCE_FAILURE",
                placement=str(placement.uuid),
                message="Failed to update placement",
                reason=str(exc),
            ) from exc

        placement_scheduled.send(
            sender=cls,
            placement=placement,
            scheduled_date=target,
            previous_date=previous,
            source="bulk",
        )

    @classmethod
    def _error_message(cls, exc: SlotError) -> str:
        if exc.code == "INVALID_DATE_FORMAT":
            return f"Invalid date format: {exc.details.get('value')}. Must be YYYY-MM-DD"
        return exc.message
