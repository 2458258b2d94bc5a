"""
Schedule dates.

Placements are scheduled on calendar dates with no time component.
On the wire a schedule date is always the fixed-width ``YYYY-MM-DD``
form; inside slotman it is always a ``datetime.date``.
"""

import re
from collections.abc import Iterator
from datetime import date, datetime, timedelta

from slotman.exceptions import SlotError

DATE_FORMAT_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# date.weekday(): Monday=0 .. Sunday=6
SATURDAY = 5


def parse_schedule_date(value) -> date:
    """
    Parse a schedule date.

    Accepts a ``date`` or a strict ``YYYY-MM-DD`` string. Datetimes are
    rejected (schedule dates have no time component).

    Raises:
        SlotError: INVALID_DATE_FORMAT
    """
    if isinstance(value, datetime):
        raise SlotError("INVALID_DATE_FORMAT", value=value.isoformat())

    if isinstance(value, date):
        return value

    if not isinstance(value, str) or not DATE_FORMAT_RE.match(value):
        raise SlotError("INVALID_DATE_FORMAT", value=str(value))

    try:
        return date.fromisoformat(value)
    except ValueError:
        # Well-formed but not a real day (e.g. 2026-02-30)
        raise SlotError("INVALID_DATE_FORMAT", value=value)


def format_schedule_date(value: date | None) -> str | None:
    """Render a schedule date in wire format."""
    return value.isoformat() if value is not None else None


def is_schedulable(value: date) -> bool:
    """True iff the date falls Monday–Friday."""
    return value.weekday() < SATURDAY


def ensure_schedulable(value: date) -> date:
    """
    Reject weekend dates.

    Raises:
        SlotError: INVALID_WEEKDAY
    """
    if not is_schedulable(value):
        raise SlotError(
            "INVALID_WEEKDAY",
            date=value.isoformat(),
            message="Date must be a weekday",
        )
    return value


def iter_weekdays(start_date: date, end_date: date) -> Iterator[date]:
    """Yield every weekday in the closed range [start_date, end_date]."""
    current = start_date
    while current <= end_date:
        if is_schedulable(current):
            yield current
        current += timedelta(days=1)
