"""Everything the dashboard shell needs for one tenant, resolved in one call.

Chains the engine in data-flow order: vertical label → VerticalConfig, tier
label → canonical tier → feature flags, and both → menu. Pure; the caller
supplies the labels it read from the tenant profile.
"""

from dataclasses import dataclass
from typing import Optional

from core.access.feature_flags import FeatureFlags, resolve_feature_flags
from core.access.navigation import MenuItem, MenuMode, build_menu
from core.access.tiers import CanonicalTier, normalize_tier
from core.business.registry import resolve_vertical_config
from patterns.domain_config import VerticalConfig


@dataclass(frozen=True)
class DashboardProfile:
    config: VerticalConfig
    tier: CanonicalTier
    features: FeatureFlags
    menu: tuple[MenuItem, ...]

    def to_dict(self) -> dict:
        return {
            "vertical": self.config.vertical.value,
            "tier": self.tier.value,
            "config": self.config.to_dict(),
            "features": self.features.as_dict(),
            "menu": [item.to_dict() for item in self.menu],
        }


def resolve_dashboard(
    business_type: Optional[str],
    plan: Optional[str],
    mode: MenuMode | str = MenuMode.LOCKED,
) -> DashboardProfile:
    """Resolve vertical config, tier, flags and menu for a tenant profile."""
    tier = normalize_tier(plan)
    return DashboardProfile(
        config=resolve_vertical_config(business_type),
        tier=tier,
        features=resolve_feature_flags(tier),
        menu=tuple(build_menu(business_type, tier, mode)),
    )
