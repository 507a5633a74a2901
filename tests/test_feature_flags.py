"""Test feature flag resolution per tier."""
import pytest

from core.access.feature_flags import FeatureFlags, resolve_feature_flags
from core.access.tiers import CanonicalTier


def test_starter_flags():
    flags = resolve_feature_flags("starter")
    assert flags.live_feed and flags.calendar and flags.view_menu and flags.basic_settings
    assert not flags.edit_calendar
    assert not flags.promos
    assert not flags.panic_button
    assert flags.calendar_read_only
    assert flags.live_feed_read_only


def test_pro_flags():
    flags = resolve_feature_flags("pro")
    assert flags.edit_calendar
    assert flags.edit_menu
    assert flags.team_chat
    assert not flags.kitchen_view
    assert not flags.api_access
    assert not flags.calendar_read_only


def test_elite_flags_all_on():
    flags = resolve_feature_flags("enterprise")
    assert all(flags.as_dict().values())
    assert flags.enabled() == list(FeatureFlags.names())


def test_free_equals_starter():
    assert resolve_feature_flags("free") == resolve_feature_flags("starter")


def test_unknown_tier_gets_starter_flags():
    assert resolve_feature_flags("platinum") == resolve_feature_flags("starter")
    assert resolve_feature_flags(None) == resolve_feature_flags("starter")


def test_flags_are_monotonic():
    """A flag on at one tier stays on at every higher tier."""
    tiers = list(CanonicalTier)
    for lower, higher in zip(tiers, tiers[1:]):
        low = resolve_feature_flags(lower).as_dict()
        high = resolve_feature_flags(higher).as_dict()
        for name, enabled in low.items():
            if enabled:
                assert high[name], f"{name} lost between {lower.value} and {higher.value}"


def test_flags_are_frozen():
    flags = resolve_feature_flags("pro")
    with pytest.raises(AttributeError):
        flags.panic_button = True


def test_flag_names():
    names = FeatureFlags.names()
    assert len(names) == 19
    assert "kitchen_view" in names
    assert "calendar_read_only" not in names
