"""Test pure-function access rules."""
from patterns.rules_engine import (
    ROUTE_FEATURES,
    can_access_route,
    check_feature_access,
    check_module_access,
    check_route_access,
    evaluate_rules,
    has_feature_access,
)


def test_feature_access_by_tier():
    assert has_feature_access("elite", "panic_button")
    assert not has_feature_access("pro", "panic_button")
    assert has_feature_access("free", "live_feed")


def test_feature_access_reports_required_tier():
    result = check_feature_access("starter", "promos")
    assert not result.passed
    assert result.rule_name == "feature_access"
    assert result.details["required_tier"] == "pro"
    assert "pro" in result.message


def test_unknown_feature_is_denied():
    result = check_feature_access("elite", "time_travel")
    assert not result.passed
    assert "Unknown feature" in result.message


def test_route_access():
    assert not can_access_route("pro", "/dashboard/kitchen")
    assert can_access_route("elite", "/dashboard/kitchen")
    assert can_access_route("pro", "/dashboard/promos/")
    assert can_access_route("starter", "/dashboard/settings")
    assert not can_access_route("starter", "/dashboard/stock")


def test_ungated_route_is_open():
    result = check_route_access("free", "/dashboard/calls")
    assert result.passed
    assert result.details["feature"] is None


def test_route_table_names_real_flags():
    from core.access.feature_flags import FeatureFlags

    assert set(ROUTE_FEATURES.values()) <= set(FeatureFlags.names())


def test_module_access():
    assert check_module_access("restaurant", "kds").passed
    assert not check_module_access("beauty", "kds").passed
    assert check_module_access("garage", "parts_inventory").passed


def test_evaluate_rules():
    result = evaluate_rules(
        check_route_access("elite", "/dashboard/kitchen"),
        check_module_access("restaurant", "kds"),
    )
    assert result.all_passed
    assert result.failed == []

    result = evaluate_rules(
        check_route_access("pro", "/dashboard/kitchen"),
        check_module_access("restaurant", "kds"),
    )
    assert not result.all_passed
    assert len(result.failed) == 1
    assert result.failed[0].rule_name == "route_access"


def test_booking_write_gate():
    from verticals.receptionist.rules import check_booking_write

    assert check_booking_write("pro").passed
    assert check_booking_write("enterprise").passed

    result = check_booking_write("free")
    assert not result.passed
    assert result.rule_name == "booking_write"
    assert result.message == "Editing bookings requires the pro plan"
    assert not check_booking_write(None).passed
