"""Dataclass-based domain configuration pattern.

Each business vertical is described by one frozen ``VerticalConfig``: the
words the dashboard uses, its icons and theme, the shape of the free-form
booking metadata it accepts, and the optional modules it unlocks. This gives
you:
- One generic data model, many presentations (no per-vertical code forks)
- Immutability (frozen=True prevents accidental mutation of shared tables)
- Type safety (IDE autocompletion, mypy checking)
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Literal

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Verticals
# ---------------------------------------------------------------------------

class Vertical(str, Enum):
    """Canonical business verticals."""

    RESTAURANT = "restaurant"
    BEAUTY = "beauty"
    FITNESS = "fitness"
    MEDICAL = "medical"
    LEGAL = "legal"
    REAL_ESTATE = "real_estate"
    AUTOMOTIVE = "automotive"
    TRADES = "trades"


ServiceKey = Literal[
    "service", "booking", "client", "appointment", "resource", "staff", "location"
]


# ---------------------------------------------------------------------------
# Nested config sections
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Vocabulary:
    """Display terms for the seven semantic keys."""

    service: str
    booking: str
    client: str
    appointment: str
    resource: str
    staff: str
    location: str

    @classmethod
    def keys(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def as_dict(self) -> dict[str, str]:
        return {key: getattr(self, key) for key in self.keys()}

    def missing_terms(self) -> list[str]:
        """Keys whose term is empty or blank."""
        return [
            key for key in self.keys()
            if not isinstance(getattr(self, key), str) or not getattr(self, key).strip()
        ]


@dataclass(frozen=True)
class IconPair:
    primary: str
    secondary: str


@dataclass(frozen=True)
class ColorScheme:
    """Theme colours (hex)."""

    primary: str
    accent: str


# ---------------------------------------------------------------------------
# Top-level vertical config
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class VerticalConfig:
    """Complete presentation and metadata configuration for one vertical.

    Usage::

        config = resolve_vertical_config(profile.business_type)
        heading = f"{config.icons.primary} {config.vocabulary.booking}s"
        if "kds" in config.available_modules:
            show_kitchen_display()
    """

    vertical: Vertical
    label: str
    vocabulary: Vocabulary
    icons: IconPair
    metadata_schema: type[BaseModel]
    color_scheme: ColorScheme
    neon_glow: str
    available_modules: frozenset[str] = field(default_factory=frozenset)

    @property
    def theme_class(self) -> str:
        return f"theme-{self.vertical.value}"

    def has_module(self, module: str) -> bool:
        return module in self.available_modules

    def to_dict(self) -> dict:
        """JSON-friendly view (the metadata schema is emitted as JSON Schema)."""
        return {
            "vertical": self.vertical.value,
            "label": self.label,
            "vocabulary": self.vocabulary.as_dict(),
            "icons": {"primary": self.icons.primary, "secondary": self.icons.secondary},
            "metadata_schema": self.metadata_schema.model_json_schema(),
            "available_modules": sorted(self.available_modules),
            "color_scheme": {
                "primary": self.color_scheme.primary,
                "accent": self.color_scheme.accent,
            },
            "neon_glow": self.neon_glow,
            "theme_class": self.theme_class,
        }
