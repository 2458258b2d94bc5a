"""
Slotman Result Types.

Structured results for capacity queries and scheduling operations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from slotman.models import Placement


# ══════════════════════════════════════════════════════════════
# CAPACITY
# ══════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class SlotCapacity:
    """
    Usage of one (publication, capped type) pair on one day.

    available = limit - used, never clamped: <= 0 means full.
    """

    publication: str
    type: str
    used: int
    limit: int

    @property
    def available(self) -> int:
        return self.limit - self.used

    @property
    def is_full(self) -> bool:
        return self.available <= 0

    def as_dict(self) -> dict:
        return {
            "publication": self.publication,
            "type": self.type,
            "used": self.used,
            "limit": self.limit,
            "available": self.available,
        }


@dataclass(frozen=True)
class DayCapacity:
    """All capped slots for one weekday."""

    date: date
    slots: list[SlotCapacity] = field(default_factory=list)

    def slot(self, publication: str, placement_type: str) -> SlotCapacity | None:
        for s in self.slots:
            if s.publication == publication and s.type == placement_type:
                return s
        return None

    def as_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "slots": [s.as_dict() for s in self.slots],
        }


@dataclass(frozen=True)
class DateRangeCapacity:
    """
    Capacity snapshot for [start_date, end_date].

    One DayCapacity per weekday; weekends never appear.
    """

    start_date: date
    end_date: date
    days: list[DayCapacity] = field(default_factory=list)

    def day(self, target: date) -> DayCapacity | None:
        for d in self.days:
            if d.date == target:
                return d
        return None

    def as_dict(self) -> dict:
        """Wire shape: {startDate, endDate, days: [{date, slots: [...]}]}."""
        return {
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "days": [d.as_dict() for d in self.days],
        }


# ══════════════════════════════════════════════════════════════
# SCHEDULING
# ══════════════════════════════════════════════════════════════


@dataclass
class AssignResult:
    """
    Successful single-placement scheduling.

    changed=False when the request was a no-op (same date already stored,
    or un-scheduling a placement that had no date).
    """

    placement: Placement
    scheduled_date: date | None
    changed: bool = True

    def as_dict(self) -> dict:
        return {
            "success": True,
            "placementId": str(self.placement.uuid),
            "scheduledDate": (
                self.scheduled_date.isoformat() if self.scheduled_date else None
            ),
            "changed": self.changed,
        }


@dataclass
class AssignmentError:
    """One rejected row of a bulk request."""

    placement_id: str
    error: str
    code: str = ""

    def as_dict(self) -> dict:
        return {"placementId": self.placement_id, "error": self.error}


@dataclass
class BulkScheduleResult:
    """
    Outcome of a bulk scheduling request.

    success=True: every assignment was committed
    success=False: errors lists each rejected placement
    """

    scheduled: int = 0
    errors: list[AssignmentError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def as_dict(self) -> dict:
        return {
            "success": self.success,
            "scheduled": self.scheduled,
            "errors": [e.as_dict() for e in self.errors],
        }
