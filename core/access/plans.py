"""Commercial plans, one per canonical tier (prices in EUR per month)."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from core.access.tiers import CanonicalTier, TierLike, normalize_tier


@dataclass(frozen=True)
class Plan:
    tier: CanonicalTier
    label: str
    monthly_price: int
    features: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "tier": self.tier.value,
            "label": self.label,
            "monthly_price": self.monthly_price,
            "features": list(self.features),
        }


PLANS: Mapping[CanonicalTier, Plan] = MappingProxyType({
    CanonicalTier.STARTER: Plan(
        tier=CanonicalTier.STARTER,
        label="Starter",
        monthly_price=0,
        features=(
            "Lecture seule des RDV",
            "Journal d'appels basique",
            "Support email",
        ),
    ),
    CanonicalTier.PRO: Plan(
        tier=CanonicalTier.PRO,
        label="Pro",
        monthly_price=500,
        features=(
            "Gestion complète des RDV",
            "Dashboard analytics",
            "Gestion du menu/stock",
            "Promos & Annonces",
            "Support prioritaire",
        ),
    ),
    CanonicalTier.ELITE: Plan(
        tier=CanonicalTier.ELITE,
        label="Elite",
        monthly_price=1000,
        features=(
            "Toutes les fonctionnalités Pro",
            "IA avancée + Smart Triggers",
            "Marketing automatisé",
            "Panic Button",
            "API personnalisée",
            "Account Manager dédié",
        ),
    ),
})


def get_plan(tier: TierLike) -> Plan:
    return PLANS[normalize_tier(tier)]


def list_plans() -> list[Plan]:
    return sorted(PLANS.values(), key=lambda plan: plan.tier.rank)
