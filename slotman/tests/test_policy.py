"""
Tests for slotman.policy.CapacityPolicy and slotman.conf.
"""

import pytest
from dataclasses import MISSING, FrozenInstanceError, fields

from django.test import override_settings

from slotman.conf import get_capacity_policy, get_max_range_days, get_setting
from slotman.exceptions import SlotError
from slotman.models import PlacementType
from slotman.policy import DEFAULT_DAILY_LIMITS, CapacityPolicy


class TestDefaultPolicy:
    """Tests for the built-in quota table."""

    def test_capped_defaults(self):
        policy = CapacityPolicy()

        assert policy.quota_for(PlacementType.PRIMARY) == 1
        assert policy.quota_for(PlacementType.SECONDARY) == 1
        assert policy.quota_for(PlacementType.PEAK_PICKS) == 4

    @pytest.mark.parametrize(
        "placement_type",
        [
            PlacementType.BEEHIV,
            PlacementType.SMART_LINKS,
            PlacementType.BLS,
            PlacementType.PODCAST_AD,
            PlacementType.PRE_ROLL,
            PlacementType.MID_ROLL,
            PlacementType.INTERVIEW,
        ],
    )
    def test_uncapped_defaults(self, placement_type):
        policy = CapacityPolicy()

        assert policy.quota_for(placement_type) is None
        assert not policy.is_capped(placement_type)

    def test_default_table_built_per_instance(self):
        limits_field = fields(CapacityPolicy)[0]

        assert limits_field.default is MISSING
        assert dict(CapacityPolicy().limits) == {str(k): v for k, v in DEFAULT_DAILY_LIMITS.items()}

    def test_every_type_listed(self):
        assert set(DEFAULT_DAILY_LIMITS) == set(PlacementType.values)

    def test_capped_types_order(self):
        assert CapacityPolicy().capped_types() == ["Primary", "Secondary", "Peak Picks"]

    def test_quota_for_plain_string(self):
        assert CapacityPolicy().quota_for("Peak Picks") == 4

    def test_unknown_type_raises(self):
        with pytest.raises(SlotError) as exc:
            CapacityPolicy().quota_for("Billboard")

        assert exc.value.code == "UNKNOWN_PLACEMENT_TYPE"
        assert exc.value.details["type"] == "Billboard"


class TestCustomPolicy:
    """Tests for injected quota tables."""

    def test_override_one_type(self):
        policy = CapacityPolicy({**DEFAULT_DAILY_LIMITS, "Peak Picks": 2})

        assert policy.quota_for("Peak Picks") == 2
        assert policy.quota_for("Primary") == 1

    def test_uncap_a_type(self):
        policy = CapacityPolicy({**DEFAULT_DAILY_LIMITS, "Primary": None})

        assert not policy.is_capped("Primary")
        assert "Primary" not in policy.capped_types()

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError):
            CapacityPolicy({"Primary": -1})

    def test_limits_immutable(self):
        policy = CapacityPolicy()

        with pytest.raises(TypeError):
            policy.limits["Primary"] = 5

    def test_policy_frozen(self):
        policy = CapacityPolicy()

        with pytest.raises(FrozenInstanceError):
            policy.limits = {}


class TestSettings:
    """Tests for slotman.conf lookups."""

    def test_max_range_default(self):
        assert get_max_range_days() == 90

    @override_settings(SLOTMAN={"MAX_RANGE_DAYS": 30})
    def test_dict_setting(self):
        assert get_max_range_days() == 30

    @override_settings(SLOTMAN={}, SLOTMAN_MAX_RANGE_DAYS=45)
    def test_flat_setting(self):
        assert get_max_range_days() == 45

    @override_settings(SLOTMAN={"MAX_RANGE_DAYS": 30}, SLOTMAN_MAX_RANGE_DAYS=45)
    def test_dict_wins_over_flat(self):
        assert get_setting("MAX_RANGE_DAYS") == 30

    @override_settings(SLOTMAN={})
    def test_unset_falls_back_to_defaults(self):
        assert get_setting("DAILY_LIMITS") is None
        assert get_setting("DEFAULT_PUBLICATIONS") is None

    @override_settings(SLOTMAN={"DAILY_LIMITS": {"Peak Picks": 6}})
    def test_policy_from_settings(self):
        policy = get_capacity_policy()

        assert policy.quota_for("Peak Picks") == 6
        assert policy.quota_for("Primary") == 1
        assert policy.quota_for("Beehiv") is None

    def test_policy_rebuilt_each_call(self):
        with override_settings(SLOTMAN={"DAILY_LIMITS": {"Primary": 3}}):
            assert get_capacity_policy().quota_for("Primary") == 3

        assert get_capacity_policy().quota_for("Primary") == 1
