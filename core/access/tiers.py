"""Tier Hierarchy Resolver.

Two tier vocabularies coexist in tenant data: ``starter/pro/elite`` (from
navigation) and ``free/starter/pro/enterprise`` (from billing). Both are
normalized onto one ordinal scale:

    starter (0) < pro (1) < elite (2)

with ``free -> starter`` and ``enterprise -> elite``. Unknown or missing
labels normalize to ``starter``: an unreadable tier must never grant more
access than the lowest plan.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

logger = logging.getLogger(__name__)


class CanonicalTier(str, Enum):
    STARTER = "starter"
    PRO = "pro"
    ELITE = "elite"

    @property
    def rank(self) -> int:
        return _TIER_RANK[self]

    @property
    def display_label(self) -> str:
        """Upper-case label shown on locked menu entries, e.g. ``PRO``."""
        return self.value.upper()


_TIER_RANK: Mapping[CanonicalTier, int] = MappingProxyType({
    CanonicalTier.STARTER: 0,
    CanonicalTier.PRO: 1,
    CanonicalTier.ELITE: 2,
})

LOWEST_TIER = CanonicalTier.STARTER

# Every label either scale can produce
TIER_ALIASES: Mapping[str, CanonicalTier] = MappingProxyType({
    "free": CanonicalTier.STARTER,
    "starter": CanonicalTier.STARTER,
    "pro": CanonicalTier.PRO,
    "elite": CanonicalTier.ELITE,
    "enterprise": CanonicalTier.ELITE,
})

TierLike = Union[CanonicalTier, str, None]


def normalize_tier(label: TierLike) -> CanonicalTier:
    """Map any tier label onto the canonical scale (fail-closed)."""
    if isinstance(label, CanonicalTier):
        return label
    if isinstance(label, str):
        tier = TIER_ALIASES.get(label.strip().lower())
        if tier is not None:
            return tier
    logger.debug("Unknown tier %r, treating as %s", label, LOWEST_TIER.value)
    return LOWEST_TIER


def tier_rank(tier: TierLike) -> int:
    return normalize_tier(tier).rank


def meets_minimum(tier: TierLike, minimum: Optional[TierLike]) -> bool:
    """True when ``tier`` is at or above ``minimum``.

    A ``None`` minimum means "no requirement". Labels are normalized first,
    so ``meets_minimum("enterprise", "elite")`` holds.
    """
    if minimum is None:
        return True
    return normalize_tier(tier).rank >= normalize_tier(minimum).rank
