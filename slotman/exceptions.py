"""
Slotman Exceptions.

All slotman errors are wrapped in SlotError for consistent handling.
"""

from typing import Any


class SlotError(Exception):
    """
    Base exception for all Slotman errors.

    Usage:
        raise SlotError("CAPACITY_EXCEEDED", used=1, limit=1)

    Attributes:
        code: Error code (INVALID_WEEKDAY, CAPACITY_EXCEEDED, etc.)
        details: Additional context as keyword arguments
    """

    def __init__(self, code: str, **details: Any):
        self.code = code
        self.details = details
        message = f"{code}: {details}" if details else code
        super().__init__(message)

    @property
    def message(self) -> str:
        """Human-readable message for display (falls back to the code)."""
        return self.details.get("message") or self.code

    def as_dict(self) -> dict:
        """Return error as dictionary for API responses."""
        return {"code": self.code, **self.details}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"SlotError({self.code}: {details_str})"
        return f"SlotError({self.code})"


# Error codes
# INVALID_DATE_FORMAT: Date is not a YYYY-MM-DD string (or date)
# INVALID_DATE_RANGE: start_date is after end_date
# INVALID_WEEKDAY: Date falls on a Saturday or Sunday
# PLACEMENT_NOT_FOUND: Placement does not exist (or not in that campaign)
# ALREADY_SCHEDULED: Placement already holds a different date
# CONCURRENTLY_SCHEDULED: Another writer set the date between check and commit
# CAPACITY_EXCEEDED: Live recount shows the slot full
# PERSISTENCE_FAILURE: Update affected no rows for any other reason
# UNKNOWN_PLACEMENT_TYPE: Type missing from the capacity policy
