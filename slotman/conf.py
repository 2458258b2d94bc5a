"""
Slotman Settings.

Supports two formats (dict takes priority):

    # Option 1: Dict
    SLOTMAN = {
        "DAILY_LIMITS": {"Peak Picks": 5},
        "MAX_RANGE_DAYS": 60,
    }

    # Option 2: Flat
    SLOTMAN_DAILY_LIMITS = {"Peak Picks": 5}
    SLOTMAN_MAX_RANGE_DAYS = 60

All settings have defaults, so no configuration is required.
"""

from django.conf import settings


# ── Defaults ──

DEFAULTS = {
    # Partial override of slotman.policy.DEFAULT_DAILY_LIMITS.
    # None as a value means "unlimited" for that type.
    "DAILY_LIMITS": None,
    # Widest window the capacity endpoint will compute.
    "MAX_RANGE_DAYS": 90,
    # Publications included in capacity reports (None = all).
    "DEFAULT_PUBLICATIONS": None,
}


# ── Accessors ──

_sentinel = object()


def get_setting(name, default=_sentinel):
    """
    Get a slotman setting.

    Looks up in order:
    1. SLOTMAN dict (e.g. SLOTMAN = {"MAX_RANGE_DAYS": 60})
    2. Flat setting (e.g. SLOTMAN_MAX_RANGE_DAYS = 60)
    3. DEFAULTS
    """
    slotman_dict = getattr(settings, "SLOTMAN", {})
    if name in slotman_dict:
        return slotman_dict[name]

    flat_value = getattr(settings, f"SLOTMAN_{name}", _sentinel)
    if flat_value is not _sentinel:
        return flat_value

    if default is not _sentinel:
        return default

    return DEFAULTS.get(name)


def get_capacity_policy():
    """
    Return a CapacityPolicy built from current settings.

    Built fresh on every call: quotas are never cached between the
    availability read and the commit.
    """
    from slotman.policy import CapacityPolicy

    return CapacityPolicy.from_settings()


def get_max_range_days() -> int:
    """Return the maximum span (in days) of a capacity query."""
    return int(get_setting("MAX_RANGE_DAYS", DEFAULTS["MAX_RANGE_DAYS"]))


def get_default_publications():
    """Return the configured publication filter for capacity reports, or None."""
    publications = get_setting("DEFAULT_PUBLICATIONS")
    if not publications:
        return None
    return list(publications)
