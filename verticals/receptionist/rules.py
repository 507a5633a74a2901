"""Receptionist dashboard rules: pure functions.

Re-exports the rules engine pattern and adds the dashboard's own gates.
"""

from core.access.tiers import TierLike
from patterns.rules_engine import (
    ROUTE_FEATURES,
    RuleResult,
    RuleSetResult,
    can_access_route,
    check_feature_access,
    check_module_access,
    check_route_access,
    evaluate_rules,
    has_feature_access,
)

# Starter calendars are read-only
BOOKING_WRITE_FEATURE = "edit_calendar"


def check_booking_write(tier: TierLike) -> RuleResult:
    """Can this tier create, change or delete bookings?"""
    result = check_feature_access(tier, BOOKING_WRITE_FEATURE)
    required = result.details.get("required_tier")
    return RuleResult(
        passed=result.passed,
        rule_name="booking_write",
        message=(
            "Bookings are editable"
            if result.passed
            else f"Editing bookings requires the {required} plan"
        ),
        details=result.details,
    )


__all__ = [
    "BOOKING_WRITE_FEATURE",
    "ROUTE_FEATURES",
    "RuleResult",
    "RuleSetResult",
    "can_access_route",
    "check_booking_write",
    "check_feature_access",
    "check_module_access",
    "check_route_access",
    "evaluate_rules",
    "has_feature_access",
]
