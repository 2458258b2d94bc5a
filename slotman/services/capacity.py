"""
Capacity service -- live usage counts and date-range availability.

Usage is recomputed from Placement rows on every call. Both the
availability report and the schedulers count through the same base
queryset, so the number shown to users is the number enforced at commit.
"""

import logging
from collections import defaultdict
from datetime import date

from django.db.models import Count

from slotman.conf import get_capacity_policy, get_default_publications
from slotman.dates import iter_weekdays, parse_schedule_date
from slotman.exceptions import SlotError
from slotman.models import Placement, Publication
from slotman.policy import CapacityPolicy
from slotman.results import DateRangeCapacity, DayCapacity, SlotCapacity

logger = logging.getLogger(__name__)


class CapacityQueries:
    """
    Read-side capacity operations.

    Nothing here locks or reserves: every result is a snapshot and every
    writer must re-validate before committing.
    """

    @classmethod
    def scheduled_between(cls, start_date: date, end_date: date):
        """Placements holding a date in the closed range [start_date, end_date]."""
        return Placement.objects.filter(
            scheduled_date__gte=start_date,
            scheduled_date__lte=end_date,
        )

    @classmethod
    def count_slot_usage(
        cls,
        scheduled_date: date,
        placement_type: str,
        publication: str,
        exclude: Placement | None = None,
    ) -> int:
        """
        Live count of placements already in a (date, type, publication) slot.

        Args:
            exclude: Placement left out of the count (the one being moved)
        """
        qs = cls.scheduled_between(scheduled_date, scheduled_date).filter(
            type=placement_type,
            publication=publication,
        )
        if exclude is not None and exclude.pk is not None:
            qs = qs.exclude(pk=exclude.pk)
        return qs.count()

    @classmethod
    def usage_by_day(
        cls,
        start_date: date,
        end_date: date,
        publications: list[str] | None = None,
    ) -> dict[date, dict[str, dict[str, int]]]:
        """
        Usage counts as date -> publication -> type -> count.

        One grouped query projecting only date/publication/type.
        """
        qs = cls.scheduled_between(start_date, end_date)
        if publications is not None:
            qs = qs.filter(publication__in=publications)

        rows = (
            qs.values("scheduled_date", "publication", "type")
            .annotate(used=Count("id"))
            .order_by()
        )

        usage: dict[date, dict[str, dict[str, int]]] = defaultdict(
            lambda: defaultdict(dict)
        )
        for row in rows:
            usage[row["scheduled_date"]][row["publication"]][row["type"]] = row["used"]

        return usage

    @classmethod
    def get_capacity(
        cls,
        start_date: date | str,
        end_date: date | str,
        publications: list[str] | None = None,
        policy: CapacityPolicy | None = None,
    ) -> DateRangeCapacity:
        """
        Compute availability for every weekday in [start_date, end_date].

        Emits one SlotCapacity per (weekday, publication, capped type).
        Uncapped types never appear; weekends never appear.

        Args:
            start_date: First day (date or YYYY-MM-DD)
            end_date: Last day, inclusive
            publications: Restrict to these publications (default: all)
            policy: Quota table (default: built from settings)

        Raises:
            SlotError: INVALID_DATE_FORMAT, INVALID_DATE_RANGE
        """
        start_date = parse_schedule_date(start_date)
        end_date = parse_schedule_date(end_date)

        if start_date > end_date:
            raise SlotError(
                "INVALID_DATE_RANGE",
                start_date=start_date.isoformat(),
                end_date=end_date.isoformat(),
                message="startDate must be before or equal to endDate",
            )

        policy = policy or get_capacity_policy()
        if publications is None:
            publications = get_default_publications() or list(Publication.values)

        capped = [(t, policy.quota_for(t)) for t in policy.capped_types()]
        usage = cls.usage_by_day(start_date, end_date, publications)

        days = []
        for day in iter_weekdays(start_date, end_date):
            day_usage = usage.get(day, {})
            slots = []
            for publication in publications:
                pub_usage = day_usage.get(publication, {})
                for placement_type, limit in capped:
                    slots.append(
                        SlotCapacity(
                            publication=publication,
                            type=placement_type,
                            used=pub_usage.get(placement_type, 0),
                            limit=limit,
                        )
                    )
            days.append(DayCapacity(date=day, slots=slots))

        logger.debug(
            f"Computed capacity {start_date} → {end_date} ({len(days)} weekdays)",
            extra={
                "start_date": str(start_date),
                "end_date": str(end_date),
                "days": len(days),
                "publications": list(publications),
            },
        )

        return DateRangeCapacity(start_date=start_date, end_date=end_date, days=days)

    @classmethod
    def ensure_slot_available(
        cls,
        placement: Placement,
        scheduled_date: date,
        policy: CapacityPolicy,
    ) -> None:
        """
        Re-check live quota for the placement's slot on a date.

        Uncapped types always pass. The placement itself is left out of the
        count, so moving it within its own slot never counts twice.

        Raises:
            SlotError: CAPACITY_EXCEEDED (with used/limit for display)
        """
        limit = policy.quota_for(placement.type)
        if limit is None:
            return

        used = cls.count_slot_usage(
            scheduled_date, placement.type, placement.publication, exclude=placement
        )
        if used >= limit:
            raise SlotError(
                "CAPACITY_EXCEEDED",
                placement=str(placement.uuid),
                date=scheduled_date.isoformat(),
                type=placement.type,
                publication=placement.publication,
                used=used,
                limit=limit,
                message=(
                    f"{placement.type} is full on {scheduled_date.isoformat()} "
                    f"for {placement.publication} ({used}/{limit})"
                ),
            )
