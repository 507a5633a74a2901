"""Feature Flag Resolver: canonical tier → flat boolean capabilities.

Flags fall into three bands and each band includes everything below it, so
a flag can never be on for a lower tier and off for a higher one:

- always on: live call feed, calendar, menu view, basic settings
- pro and above: calendar editing, resources, team chat, basic analytics,
  menu editing, promotions, AI settings
- elite only: advanced analytics, panic button, smart triggers, reputation
  AI, multi-location, kitchen view, ghost mode, API access
"""

from dataclasses import asdict, dataclass, fields
from functools import lru_cache

from core.access.tiers import CanonicalTier, TierLike, normalize_tier


@dataclass(frozen=True)
class FeatureFlags:
    """Capabilities for one tier. Derived, never stored."""

    # Starter
    live_feed: bool = True
    calendar: bool = True
    view_menu: bool = True
    basic_settings: bool = True

    # Pro
    edit_calendar: bool = False
    resource_management: bool = False
    team_chat: bool = False
    basic_analytics: bool = False
    edit_menu: bool = False
    promos: bool = False
    ai_settings: bool = False

    # Elite
    advanced_analytics: bool = False
    panic_button: bool = False
    smart_triggers: bool = False
    reputation_ai: bool = False
    multi_location: bool = False
    kitchen_view: bool = False
    ghost_mode: bool = False
    api_access: bool = False

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    # Read-only views are the inverse of edit rights, so they are not flags
    @property
    def live_feed_read_only(self) -> bool:
        return not self.edit_calendar

    @property
    def calendar_read_only(self) -> bool:
        return not self.edit_calendar

    def as_dict(self) -> dict[str, bool]:
        return asdict(self)

    def enabled(self) -> list[str]:
        return [name for name, value in self.as_dict().items() if value]


_PRO_FLAGS = (
    "edit_calendar",
    "resource_management",
    "team_chat",
    "basic_analytics",
    "edit_menu",
    "promos",
    "ai_settings",
)

_ELITE_FLAGS = (
    "advanced_analytics",
    "panic_button",
    "smart_triggers",
    "reputation_ai",
    "multi_location",
    "kitchen_view",
    "ghost_mode",
    "api_access",
)


@lru_cache(maxsize=None)
def _flags_for(tier: CanonicalTier) -> FeatureFlags:
    enabled = {}
    if tier.rank >= CanonicalTier.PRO.rank:
        enabled.update(dict.fromkeys(_PRO_FLAGS, True))
    if tier.rank >= CanonicalTier.ELITE.rank:
        enabled.update(dict.fromkeys(_ELITE_FLAGS, True))
    return FeatureFlags(**enabled)


def resolve_feature_flags(tier: TierLike) -> FeatureFlags:
    """Return the flags for a tier (label or CanonicalTier).

    Example::

        flags = resolve_feature_flags(profile.plan)
        if flags.panic_button:
            show_panic_button()
    """
    return _flags_for(normalize_tier(tier))
