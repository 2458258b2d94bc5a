"""
Tests for Slotman management commands.
"""

import json
import pytest
from datetime import date
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError

from slotman.models import Campaign, Placement, PlacementType, Publication


def run(*args, **kwargs):
    out = StringIO()
    call_command(*args, stdout=out, **kwargs)
    return out.getvalue()


class TestSlotmanCapacityCommand:
    """Tests for `manage.py slotman_capacity`."""

    def test_table(self, db):
        campaign = Campaign.objects.create(name="Cmd Test")
        Placement.objects.create(
            campaign=campaign,
            type=PlacementType.PRIMARY,
            publication=Publication.THE_PEAK,
            scheduled_date=date(2026, 3, 2),
        )

        output = run("slotman_capacity", "2026-03-02", "2026-03-03", publications=["The Peak"])

        assert "Mon 2026-03-02" in output
        assert "Tue 2026-03-03" in output
        assert "1/1  FULL" in output
        assert "0/4" in output

    def test_json(self, db):
        output = run("slotman_capacity", "2026-03-06", "2026-03-09", json=True)

        data = json.loads(output)
        assert data["startDate"] == "2026-03-06"
        assert [d["date"] for d in data["days"]] == ["2026-03-06", "2026-03-09"]

    def test_bad_range(self, db):
        with pytest.raises(CommandError, match="startDate must be before or equal to endDate"):
            run("slotman_capacity", "2026-03-06", "2026-03-02")


class TestLoadDemoCommand:
    """Tests for `manage.py load_slotman_demo`."""

    def test_load(self, db):
        output = run("load_slotman_demo")

        assert Campaign.objects.count() == 3
        assert Placement.objects.count() == 10
        assert Placement.objects.filter(scheduled_date__isnull=False).count() == 6
        assert Placement.objects.filter(scheduled_date__isnull=True).count() == 4
        assert "6 placements scheduled" in output

    def test_demo_dates_are_weekdays(self, db):
        run("load_slotman_demo")

        for placement in Placement.objects.filter(scheduled_date__isnull=False):
            assert placement.scheduled_date.weekday() < 5

    def test_clear(self, db):
        run("load_slotman_demo")
        run("load_slotman_demo", clear=True)

        assert Campaign.objects.count() == 3
