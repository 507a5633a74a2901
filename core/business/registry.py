"""Vertical registry: static vertical → configuration table.

Built once at import and never mutated. Lookups accept arbitrary strings
because the vertical label comes from user-editable profile data:

- canonical labels and legacy French synonyms resolve to their config
- anything else **fails open** to the restaurant config, so the dashboard can
  always render something

Callers that need to reject unknown labels use ``parse_vertical`` or
``is_known_vertical`` before resolving.

An incomplete table (a canonical vertical without config, a blank vocabulary
term, a synonym pointing nowhere) is a deployment error and raises
``RegistryError`` while this module is imported.
"""

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from core.business import schemas
from patterns.domain_config import (
    ColorScheme,
    IconPair,
    Vertical,
    VerticalConfig,
    Vocabulary,
)

logger = logging.getLogger(__name__)

DEFAULT_VERTICAL = Vertical.RESTAURANT

_CANONICAL_LABELS = frozenset(v.value for v in Vertical)


class RegistryError(RuntimeError):
    """The static vertical table is incomplete or inconsistent."""


# ---------------------------------------------------------------------------
# Legacy labels
# ---------------------------------------------------------------------------

VERTICAL_SYNONYMS: Mapping[str, Vertical] = MappingProxyType({
    "beaute": Vertical.BEAUTY,
    "sport": Vertical.FITNESS,
    "dentiste": Vertical.MEDICAL,
    "clinique": Vertical.MEDICAL,
    "veterinaire": Vertical.MEDICAL,
    "juridique": Vertical.LEGAL,
    "immobilier": Vertical.REAL_ESTATE,
    "garage": Vertical.AUTOMOTIVE,
    "autoecole": Vertical.AUTOMOTIVE,
})


# ---------------------------------------------------------------------------
# Configuration table
# ---------------------------------------------------------------------------

_CONFIGS: dict[Vertical, VerticalConfig] = {
    Vertical.RESTAURANT: VerticalConfig(
        vertical=Vertical.RESTAURANT,
        label="Restaurant",
        vocabulary=Vocabulary(
            service="Service",
            booking="Réservation",
            client="Client",
            appointment="Réservation",
            resource="Table",
            staff="Serveur",
            location="Salle",
        ),
        icons=IconPair(primary="🍕", secondary="🍽️"),
        metadata_schema=schemas.RestaurantMetadata,
        available_modules=frozenset({"kds", "table_manager", "menu_86"}),
        color_scheme=ColorScheme(primary="#fb923c", accent="#f97316"),  # orange
        neon_glow="glow-restaurant",
    ),
    Vertical.BEAUTY: VerticalConfig(
        vertical=Vertical.BEAUTY,
        label="Salon Beauté",
        vocabulary=Vocabulary(
            service="Traitement",
            booking="Rendez-vous",
            client="Client",
            appointment="Rendez-vous",
            resource="Cabine",
            staff="Styliste",
            location="Salon",
        ),
        icons=IconPair(primary="💇‍♀️", secondary="✨"),
        metadata_schema=schemas.BeautyMetadata,
        available_modules=frozenset({"style_picker", "cabin_manager", "treatment_tracker"}),
        color_scheme=ColorScheme(primary="#ec4899", accent="#f472b6"),  # pink
        neon_glow="glow-beauty",
    ),
    Vertical.FITNESS: VerticalConfig(
        vertical=Vertical.FITNESS,
        label="Salle Sport",
        vocabulary=Vocabulary(
            service="Classe",
            booking="Réservation",
            client="Membre",
            appointment="Session",
            resource="Court",
            staff="Coach",
            location="Salle",
        ),
        icons=IconPair(primary="🏋️", secondary="💪"),
        metadata_schema=schemas.FitnessMetadata,
        available_modules=frozenset({"class_capacity", "court_booking", "coach_assignment"}),
        color_scheme=ColorScheme(primary="#22c55e", accent="#4ade80"),  # green
        neon_glow="glow-fitness",
    ),
    Vertical.MEDICAL: VerticalConfig(
        vertical=Vertical.MEDICAL,
        label="Clinique",
        vocabulary=Vocabulary(
            service="Consultation",
            booking="Rendez-vous",
            client="Patient",
            appointment="Consultation",
            resource="Cabinet",
            staff="Médecin",
            location="Clinique",
        ),
        icons=IconPair(primary="🦷", secondary="🏥"),
        metadata_schema=schemas.MedicalMetadata,
        available_modules=frozenset({"patient_timeline", "urgency_tracker", "symptom_tracker"}),
        color_scheme=ColorScheme(primary="#3b82f6", accent="#60a5fa"),  # blue
        neon_glow="glow-medical",
    ),
    Vertical.LEGAL: VerticalConfig(
        vertical=Vertical.LEGAL,
        label="Juridique",
        vocabulary=Vocabulary(
            service="Consultation",
            booking="Rendez-vous",
            client="Client",
            appointment="Consultation",
            resource="Bureau",
            staff="Avocat",
            location="Cabinet",
        ),
        icons=IconPair(primary="⚖️", secondary="📋"),
        metadata_schema=schemas.LegalMetadata,
        available_modules=frozenset({"document_vault", "case_manager", "confidential_tracker"}),
        color_scheme=ColorScheme(primary="#a855f7", accent="#c084fc"),  # purple
        neon_glow="glow-legal",
    ),
    Vertical.REAL_ESTATE: VerticalConfig(
        vertical=Vertical.REAL_ESTATE,
        label="Immobilier",
        vocabulary=Vocabulary(
            service="Visite",
            booking="Rendez-vous",
            client="Acheteur",
            appointment="Visite",
            resource="Propriété",
            staff="Agent",
            location="Bien",
        ),
        icons=IconPair(primary="🏠", secondary="📍"),
        metadata_schema=schemas.RealEstateMetadata,
        available_modules=frozenset({"property_map", "property_manager", "buyer_profiles"}),
        color_scheme=ColorScheme(primary="#f97316", accent="#fb923c"),  # orange
        neon_glow="glow-real-estate",
    ),
    Vertical.AUTOMOTIVE: VerticalConfig(
        vertical=Vertical.AUTOMOTIVE,
        label="Garage",
        vocabulary=Vocabulary(
            service="Réparation",
            booking="Rendez-vous",
            client="Client",
            appointment="RDV",
            resource="Pont",
            staff="Mécanicien",
            location="Atelier",
        ),
        icons=IconPair(primary="🚗", secondary="🔧"),
        metadata_schema=schemas.AutomotiveMetadata,
        available_modules=frozenset({"kanban_board", "vehicle_tracker", "parts_inventory"}),
        color_scheme=ColorScheme(primary="#ef4444", accent="#f87171"),  # red
        neon_glow="glow-automotive",
    ),
    Vertical.TRADES: VerticalConfig(
        vertical=Vertical.TRADES,
        label="Artisans",
        vocabulary=Vocabulary(
            service="Intervention",
            booking="Intervention",
            client="Client",
            appointment="Intervention",
            resource="Équipe",
            staff="Artisan",
            location="Chantier",
        ),
        icons=IconPair(primary="🛠️", secondary="🚚"),
        metadata_schema=schemas.TradesMetadata,
        available_modules=frozenset({"dispatch_map", "intervention_tracker", "access_manager"}),
        color_scheme=ColorScheme(primary="#eab308", accent="#facc15"),  # yellow
        neon_glow="glow-trades",
    ),
}


# ---------------------------------------------------------------------------
# Startup check
# ---------------------------------------------------------------------------

def verify_registry(
    configs: Mapping[Vertical, VerticalConfig],
    synonyms: Mapping[str, Vertical],
) -> None:
    """Raise RegistryError if the table does not cover every vertical fully."""
    problems = []

    for vertical in Vertical:
        config = configs.get(vertical)
        if config is None:
            problems.append(f"no config for vertical '{vertical.value}'")
            continue
        if config.vertical is not vertical:
            problems.append(
                f"config for '{vertical.value}' is tagged '{config.vertical.value}'"
            )
        missing = config.vocabulary.missing_terms()
        if missing:
            problems.append(f"'{vertical.value}' has no vocabulary for {missing}")

    for synonym, target in synonyms.items():
        if target not in configs:
            problems.append(f"synonym '{synonym}' targets unknown vertical '{target}'")
        if synonym in _CANONICAL_LABELS:
            problems.append(f"synonym '{synonym}' shadows a canonical vertical")

    if problems:
        raise RegistryError("Vertical registry is incomplete: " + "; ".join(problems))


verify_registry(_CONFIGS, VERTICAL_SYNONYMS)

VERTICAL_CONFIGS: Mapping[Vertical, VerticalConfig] = MappingProxyType(_CONFIGS)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def parse_vertical(label: Optional[str]) -> Optional[Vertical]:
    """Strict lookup: canonical label or synonym, else None."""
    if not isinstance(label, str):
        return None
    key = label.strip().lower()
    if key in _CANONICAL_LABELS:
        return Vertical(key)
    return VERTICAL_SYNONYMS.get(key)


def is_known_vertical(label: Optional[str]) -> bool:
    return parse_vertical(label) is not None


def resolve_vertical(label: Optional[str]) -> Vertical:
    """Resolve a label to a canonical vertical, falling back to restaurant."""
    vertical = parse_vertical(label)
    if vertical is None:
        logger.debug(
            "Unknown vertical %r, falling back to %s", label, DEFAULT_VERTICAL.value
        )
        return DEFAULT_VERTICAL
    return vertical


def resolve_vertical_config(label: Optional[str]) -> VerticalConfig:
    """Return the VerticalConfig for a label (fail-open to restaurant).

    Example::

        resolve_vertical_config("garage").vocabulary.service   # "Réparation"
        resolve_vertical_config("???") is resolve_vertical_config("restaurant")
    """
    return VERTICAL_CONFIGS[resolve_vertical(label)]


def list_verticals() -> list[dict[str, str]]:
    """Canonical verticals with their onboarding label and icon."""
    return [
        {
            "value": config.vertical.value,
            "label": config.label,
            "icon": config.icons.primary,
        }
        for config in VERTICAL_CONFIGS.values()
    ]
