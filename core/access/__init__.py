"""
ReceptionAI Core Access: subscription tiers and what they unlock.

- Tiers: one canonical scale (starter < pro < elite), fail-closed
- FeatureFlags: monotonic boolean capabilities per tier
- Navigation: per-vertical menus, omitted or locked by tier
- Plans: commercial plan catalogue
"""
from core.access.feature_flags import FeatureFlags, resolve_feature_flags
from core.access.navigation import (
    MENU_ALIASES,
    VERTICAL_MENUS,
    MenuItem,
    MenuMode,
    NavigationEntry,
    build_menu,
    menu_entries,
)
from core.access.plans import PLANS, Plan, get_plan, list_plans
from core.access.tiers import (
    LOWEST_TIER,
    TIER_ALIASES,
    CanonicalTier,
    meets_minimum,
    normalize_tier,
    tier_rank,
)

__all__ = [
    # Flags
    "FeatureFlags",
    "resolve_feature_flags",
    # Navigation
    "MENU_ALIASES",
    "VERTICAL_MENUS",
    "MenuItem",
    "MenuMode",
    "NavigationEntry",
    "build_menu",
    "menu_entries",
    # Plans
    "PLANS",
    "Plan",
    "get_plan",
    "list_plans",
    # Tiers
    "LOWEST_TIER",
    "TIER_ALIASES",
    "CanonicalTier",
    "meets_minimum",
    "normalize_tier",
    "tier_rank",
]
