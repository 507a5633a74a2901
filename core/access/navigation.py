"""Navigation Composer: per-vertical sidebar menus gated by tier.

Each canonical vertical owns an ordered list of entries, or reuses another
vertical's list verbatim through ``MENU_ALIASES``. Entries carrying a
``minimum_tier`` are either dropped (``MenuMode.OMIT``) or kept in a locked
state annotated with the plan they need (``MenuMode.LOCKED``); the caller
picks the mode per presentation context.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from core.access.tiers import CanonicalTier, TierLike, meets_minimum, normalize_tier
from core.business.registry import RegistryError, resolve_vertical
from patterns.domain_config import Vertical


class MenuMode(str, Enum):
    OMIT = "omit"
    LOCKED = "locked"


@dataclass(frozen=True)
class NavigationEntry:
    icon: str  # Lucide icon name
    label: str
    path: str
    minimum_tier: Optional[CanonicalTier] = None


@dataclass(frozen=True)
class MenuItem:
    """A navigation entry as rendered for one tenant tier."""

    icon: str
    label: str
    path: str
    minimum_tier: Optional[CanonicalTier] = None
    locked: bool = False

    @property
    def required_tier_label(self) -> Optional[str]:
        if not self.locked or self.minimum_tier is None:
            return None
        return self.minimum_tier.display_label

    def to_dict(self) -> dict:
        return {
            "icon": self.icon,
            "label": self.label,
            "path": self.path,
            "minimum_tier": self.minimum_tier.value if self.minimum_tier else None,
            "locked": self.locked,
            "required_tier_label": self.required_tier_label,
        }


# ---------------------------------------------------------------------------
# Menu table
# ---------------------------------------------------------------------------

_PRO = CanonicalTier.PRO
_ELITE = CanonicalTier.ELITE

_DASHBOARD = NavigationEntry("LayoutDashboard", "Dashboard", "/dashboard")
_CALLS = NavigationEntry("Phone", "Appels", "/dashboard/calls")
_SETTINGS = NavigationEntry("Settings", "Settings", "/dashboard/settings")

_MENUS: dict[Vertical, tuple[NavigationEntry, ...]] = {
    Vertical.RESTAURANT: (
        _DASHBOARD,
        NavigationEntry("Calendar", "Réservations", "/dashboard/reservations"),
        NavigationEntry("Table2", "Tables", "/dashboard/tables", _PRO),
        NavigationEntry("UtensilsCrossed", "Menu", "/dashboard/stock", _PRO),
        NavigationEntry("Tag", "Promos", "/dashboard/promos", _PRO),
        _CALLS,
        _SETTINGS,
    ),
    Vertical.MEDICAL: (
        _DASHBOARD,
        NavigationEntry("Users", "Patients", "/dashboard/reservations"),
        NavigationEntry("DoorOpen", "Salles", "/dashboard/rooms", _PRO),
        NavigationEntry("Stethoscope", "Services", "/dashboard/stock", _PRO),
        NavigationEntry("AlertTriangle", "Urgences", "/dashboard/urgences", _ELITE),
        _CALLS,
        _SETTINGS,
    ),
    Vertical.AUTOMOTIVE: (
        _DASHBOARD,
        NavigationEntry("Wrench", "Réparations", "/dashboard/reservations"),
        NavigationEntry("Car", "Véhicules", "/dashboard/vehicles", _PRO),
        NavigationEntry("ClipboardList", "Pièces", "/dashboard/stock", _PRO),
        NavigationEntry("FileText", "Devis", "/dashboard/quotes", _PRO),
        _CALLS,
        _SETTINGS,
    ),
    Vertical.REAL_ESTATE: (
        _DASHBOARD,
        NavigationEntry("Calendar", "Visites", "/dashboard/reservations"),
        _CALLS,
        _SETTINGS,
    ),
    Vertical.LEGAL: (
        _DASHBOARD,
        NavigationEntry("Calendar", "Consultations", "/dashboard/reservations"),
        _CALLS,
        _SETTINGS,
    ),
    Vertical.BEAUTY: (
        _DASHBOARD,
        NavigationEntry("Calendar", "Rendez-vous", "/dashboard/reservations"),
        NavigationEntry("Sparkles", "Prestations", "/dashboard/stock", _PRO),
        NavigationEntry("Tag", "Promos", "/dashboard/promos", _PRO),
        _CALLS,
        _SETTINGS,
    ),
    Vertical.TRADES: (
        _DASHBOARD,
        NavigationEntry("Hammer", "Interventions", "/dashboard/reservations"),
        NavigationEntry("ClipboardList", "Matériel", "/dashboard/stock", _PRO),
        NavigationEntry("FileText", "Devis", "/dashboard/quotes", _PRO),
        _CALLS,
        _SETTINGS,
    ),
}

# Verticals without a menu of their own
MENU_ALIASES: Mapping[Vertical, Vertical] = MappingProxyType({
    Vertical.FITNESS: Vertical.BEAUTY,
})


def _verify_menus() -> None:
    missing = [
        v.value for v in Vertical
        if v not in _MENUS and MENU_ALIASES.get(v) not in _MENUS
    ]
    if missing:
        raise RegistryError(f"No navigation menu for verticals: {missing}")


_verify_menus()

VERTICAL_MENUS: Mapping[Vertical, tuple[NavigationEntry, ...]] = MappingProxyType(_MENUS)


# ---------------------------------------------------------------------------
# Composer
# ---------------------------------------------------------------------------

def menu_entries(vertical: Optional[str]) -> tuple[NavigationEntry, ...]:
    """All entries for a vertical label, before tier gating."""
    resolved = resolve_vertical(vertical)
    return VERTICAL_MENUS[MENU_ALIASES.get(resolved, resolved)]


def build_menu(
    vertical: Optional[str],
    tier: TierLike,
    mode: MenuMode | str = MenuMode.OMIT,
) -> list[MenuItem]:
    """Build the sidebar for a tenant.

    Example::

        build_menu("restaurant", "starter")                   # no Tables/Menu/Promos
        build_menu("restaurant", "starter", MenuMode.LOCKED)  # Tables locked, "PRO"
    """
    mode = MenuMode(mode)
    canonical = normalize_tier(tier)
    items = []

    for entry in menu_entries(vertical):
        reachable = meets_minimum(canonical, entry.minimum_tier)
        if not reachable and mode is MenuMode.OMIT:
            continue
        items.append(
            MenuItem(
                icon=entry.icon,
                label=entry.label,
                path=entry.path,
                minimum_tier=entry.minimum_tier,
                locked=not reachable,
            )
        )

    return items
