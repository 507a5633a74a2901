"""Pure-function rules engine pattern.

Rules are stateless functions: (tier/vertical, subject) -> RuleResult.
No database, no side effects. This makes them:
- Trivially testable (pure input/output)
- Composable (chain multiple rules)
- Auditable (deterministic, explainable)

Example domain: can this tenant open a page, use a feature, or enable a
vertical module?
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from core.access.feature_flags import FeatureFlags, resolve_feature_flags
from core.access.tiers import TierLike, normalize_tier
from core.business.registry import resolve_vertical_config


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class RuleResult:
    """Outcome of a single rule evaluation."""

    passed: bool
    rule_name: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class RuleSetResult:
    """Aggregate outcome of multiple rules."""

    all_passed: bool
    results: list[RuleResult]
    failed: list[RuleResult] = field(default_factory=list)

    def __post_init__(self):
        self.failed = [r for r in self.results if not r.passed]
        self.all_passed = len(self.failed) == 0


# ---------------------------------------------------------------------------
# Route → flag table
# ---------------------------------------------------------------------------

ROUTE_FEATURES: dict[str, str] = {
    "/dashboard/kitchen": "kitchen_view",
    "/dashboard/promos": "promos",
    "/dashboard/settings": "basic_settings",
    "/dashboard/stock": "edit_menu",
}


def _minimum_tier_for(feature: str) -> Optional[str]:
    """Lowest tier whose flags include ``feature``."""
    for tier in ("starter", "pro", "elite"):
        if getattr(resolve_feature_flags(tier), feature, False):
            return tier
    return None


# ---------------------------------------------------------------------------
# Access rules
# ---------------------------------------------------------------------------

def check_feature_access(tier: TierLike, feature: str) -> RuleResult:
    """Check a single feature flag for a tier.

    Unknown feature names fail: access is never granted by accident.
    """
    canonical = normalize_tier(tier)

    if feature not in FeatureFlags.names():
        return RuleResult(
            passed=False,
            rule_name="feature_access",
            message=f"Unknown feature: {feature}",
            details={"tier": canonical.value, "feature": feature},
        )

    passed = getattr(resolve_feature_flags(canonical), feature)
    required = _minimum_tier_for(feature)
    return RuleResult(
        passed=passed,
        rule_name="feature_access",
        message=(
            f"{feature} available on {canonical.value}"
            if passed
            else f"{feature} requires the {required} plan (current: {canonical.value})"
        ),
        details={"tier": canonical.value, "feature": feature, "required_tier": required},
    )


def check_route_access(tier: TierLike, path: str) -> RuleResult:
    """Check whether a dashboard page is open to the tier.

    Pages not listed in ROUTE_FEATURES are open to everyone.
    """
    feature = ROUTE_FEATURES.get(path.rstrip("/") or "/")
    if feature is None:
        return RuleResult(
            passed=True,
            rule_name="route_access",
            message=f"{path} is not gated",
            details={"path": path, "feature": None},
        )

    result = check_feature_access(tier, feature)
    return RuleResult(
        passed=result.passed,
        rule_name="route_access",
        message=result.message,
        details={"path": path, **result.details},
    )


def check_module_access(vertical: Optional[str], module: str) -> RuleResult:
    """Check that an opt-in module belongs to the tenant's vertical."""
    config = resolve_vertical_config(vertical)
    passed = config.has_module(module)

    return RuleResult(
        passed=passed,
        rule_name="module_access",
        message=(
            f"Module {module} enabled for {config.vertical.value}"
            if passed
            else f"Module {module} is not available for {config.vertical.value}"
        ),
        details={
            "vertical": config.vertical.value,
            "module": module,
            "available_modules": sorted(config.available_modules),
        },
    )


def has_feature_access(tier: TierLike, feature: str) -> bool:
    return check_feature_access(tier, feature).passed


def can_access_route(tier: TierLike, path: str) -> bool:
    return check_route_access(tier, path).passed


# ---------------------------------------------------------------------------
# Rule composition
# ---------------------------------------------------------------------------

def evaluate_rules(*rules: RuleResult) -> RuleSetResult:
    """Compose multiple rule results into a single aggregate.

    Example::

        result = evaluate_rules(
            check_route_access(profile.plan, "/dashboard/kitchen"),
            check_module_access(profile.business_type, "kds"),
        )
        if result.all_passed:
            open_kitchen_display()
    """
    return RuleSetResult(
        all_passed=all(r.passed for r in rules),
        results=list(rules),
    )
