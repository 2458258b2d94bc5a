"""
Tests for Slotman signal handlers (slotman.signals.handlers).

Verifies that:
- committed dates are logged at INFO with structured extras
- cleared dates are logged
- rejected requests are logged at WARNING with the error code
- no-op requests log nothing on the handlers logger
"""

import logging
import pytest
from datetime import date

from slotman import SlotError, slots
from slotman.models import Campaign, Placement, PlacementType, Publication

HANDLERS_LOGGER = "slotman.signals.handlers"
MONDAY = date(2026, 3, 2)


# ═══════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture
def placement(db):
    campaign = Campaign.objects.create(name="Signals Test", client_name="Felix Health")
    return Placement.objects.create(
        campaign=campaign,
        type=PlacementType.SECONDARY,
        publication=Publication.PEAK_MONEY,
    )


def handler_records(caplog):
    return [r for r in caplog.records if r.name == HANDLERS_LOGGER]


# ═══════════════════════════════════════════════════════════════════
# Tests
# ═══════════════════════════════════════════════════════════════════


class TestScheduledHandler:
    """Tests for log_placement_scheduled."""

    def test_assign_logged(self, placement, caplog):
        with caplog.at_level(logging.INFO, logger=HANDLERS_LOGGER):
            slots.assign(placement.uuid, MONDAY)

        records = handler_records(caplog)
        assert len(records) == 1
        record = records[0]
        assert record.levelno == logging.INFO
        assert record.placement == str(placement.uuid)
        assert record.campaign == str(placement.campaign.uuid)
        assert record.date == "2026-03-02"
        assert record.type == "Secondary"
        assert record.publication == "Peak Money"
        assert record.source == "assign"
        assert "scheduled on 2026-03-02" in record.getMessage()

    def test_reschedule_logged_as_move(self, placement, caplog):
        slots.assign(placement.uuid, MONDAY)

        with caplog.at_level(logging.INFO, logger=HANDLERS_LOGGER):
            slots.reschedule(placement.uuid, "2026-03-03")

        record = handler_records(caplog)[0]
        assert record.previous_date == "2026-03-02"
        assert record.source == "reschedule"
        assert "moved 2026-03-02 → 2026-03-03" in record.getMessage()

    def test_commit_logged_once(self, placement, caplog):
        with caplog.at_level(logging.INFO, logger="slotman"):
            slots.assign(placement.uuid, MONDAY)

        commits = [
            r for r in caplog.records
            if r.name.startswith("slotman") and r.levelno == logging.INFO
        ]
        assert [r.name for r in commits] == [HANDLERS_LOGGER]

    def test_noop_not_logged(self, placement, caplog):
        slots.assign(placement.uuid, MONDAY)

        with caplog.at_level(logging.INFO, logger=HANDLERS_LOGGER):
            slots.assign(placement.uuid, MONDAY)

        assert handler_records(caplog) == []


class TestUnscheduledHandler:
    """Tests for log_placement_unscheduled."""

    def test_unschedule_logged(self, placement, caplog):
        slots.assign(placement.uuid, MONDAY)

        with caplog.at_level(logging.INFO, logger=HANDLERS_LOGGER):
            slots.assign(placement.uuid, None)

        record = handler_records(caplog)[0]
        assert record.previous_date == "2026-03-02"
        assert "unscheduled" in record.getMessage()


class TestRejectedHandler:
    """Tests for log_schedule_rejected."""

    def test_weekend_rejection_logged(self, placement, caplog):
        with caplog.at_level(logging.WARNING, logger=HANDLERS_LOGGER):
            with pytest.raises(SlotError):
                slots.assign(placement.uuid, "2026-03-07")

        record = handler_records(caplog)[0]
        assert record.levelno == logging.WARNING
        assert record.code == "INVALID_WEEKDAY"
        assert record.placement == str(placement.uuid)
        assert record.date == "2026-03-07"

    def test_capacity_rejection_carries_details(self, placement, caplog):
        Placement.objects.create(
            campaign=placement.campaign,
            type=PlacementType.SECONDARY,
            publication=Publication.PEAK_MONEY,
            scheduled_date=MONDAY,
        )

        with caplog.at_level(logging.WARNING, logger=HANDLERS_LOGGER):
            with pytest.raises(SlotError):
                slots.assign(placement.uuid, MONDAY)

        record = handler_records(caplog)[0]
        assert record.code == "CAPACITY_EXCEEDED"
        assert record.details["used"] == 1
        assert record.details["limit"] == 1
