"""Metadata formatter: turns booking metadata into a display summary.

Each vertical registers its own formatter; the engine dispatches on the
resolved vertical. A generic fallback handles any vertical without one.
Formatters read the validated blob but tolerate the older key names still
found in call-log metadata (``car_model``, ``plate``, ``symptom`` ...).
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from core.business.registry import resolve_vertical
from patterns.domain_config import Vertical


@dataclass
class FormattedMetadata:
    title: str
    badge: Optional[str] = None
    icon: Optional[str] = None
    alert: Optional[str] = None
    style: Optional[str] = None
    details: list[tuple[str, str]] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "badge": self.badge,
            "icon": self.icon,
            "alert": self.alert,
            "style": self.style,
            "details": [{"label": label, "value": value} for label, value in self.details],
        }


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def fmt_number(value: float | int) -> str:
    """``4`` and ``4.0`` both render as "4"; no float conversion of ints."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def fmt_euros(value: Any) -> str:
    if value is None:
        return "N/A"
    if not _is_number(value):
        return str(value)
    return f"{fmt_number(value)}€"


def fmt_km(value: Any) -> str:
    if value is None:
        return "N/A"
    if not _is_number(value):
        return str(value)
    return f"{value:,} km".replace(",", " ")


def _first(data: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = data.get(key)
        if value not in (None, "", []):
            return value
    return None


def _join(value: Any) -> Optional[str]:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value) if value else None
    return str(value) if value not in (None, "") else None


# ---------------------------------------------------------------------------
# Generic fallback formatter
# ---------------------------------------------------------------------------

def format_generic(data: dict[str, Any]) -> FormattedMetadata:
    """First five entries, keys made readable."""
    details = [
        (key.replace("_", " "), str(value))
        for key, value in list(data.items())[:5]
    ]
    return FormattedMetadata(title="Appel", details=details)


# ---------------------------------------------------------------------------
# Formatter registry
# ---------------------------------------------------------------------------

MetadataFormatter = Callable[[dict[str, Any]], FormattedMetadata]

_FORMATTERS: dict[Vertical, MetadataFormatter] = {}


def register_formatter(vertical: Vertical, formatter: MetadataFormatter) -> None:
    """Register a vertical-specific formatter, replacing any previous one."""
    _FORMATTERS[vertical] = formatter


def format_metadata(vertical: Optional[str], metadata: Optional[dict[str, Any]]) -> FormattedMetadata:
    """Render a metadata blob for the given vertical.

    Example::

        summary = format_metadata("garage", {"vehicle_model": "Clio", "license_plate": "AB-123-CD"})
        summary.title   # "Clio"
        summary.badge   # "AB-123-CD"
    """
    if not metadata:
        return FormattedMetadata(title="Aucune donnée")
    formatter = _FORMATTERS.get(resolve_vertical(vertical), format_generic)
    return formatter(dict(metadata))


# ---------------------------------------------------------------------------
# Vertical formatters
# ---------------------------------------------------------------------------

def format_restaurant(data: dict[str, Any]) -> FormattedMetadata:
    guests = data.get("guests")
    details = []
    if occasion := _first(data, "occasion"):
        details.append(("Occasion", str(occasion)))
    if table := _first(data, "table_pref", "table_preference"):
        details.append(("Préférence", str(table)))
    if requests := _join(_first(data, "special_requests")):
        details.append(("Demandes", requests))
    if sold_out := _join(_first(data, "menu_86")):
        details.append(("Épuisé", sold_out))

    return FormattedMetadata(
        title=f"Table pour {fmt_number(guests)}" if _is_number(guests) else "Table pour -",
        badge=_join(_first(data, "dietary")),
        icon="Utensils",
        details=details,
    )


def format_beauty(data: dict[str, Any]) -> FormattedMetadata:
    duration = data.get("duration")
    details = []
    if duration:
        details.append(("Durée", f"{duration} min"))
    if stylist := _first(data, "stylist"):
        details.append(("Styliste", str(stylist)))
    if cabin := _first(data, "cabin"):
        details.append(("Cabine", str(cabin)))

    return FormattedMetadata(
        title=_first(data, "service_type") or "Prestation",
        badge=f"{duration} min" if duration else None,
        icon="Scissors",
        details=details,
    )


def format_medical(data: dict[str, Any]) -> FormattedMetadata:
    symptom = _join(_first(data, "symptoms", "symptom"))
    pain_level = data.get("pain_level")
    details = []
    if symptom:
        details.append(("Symptôme", symptom))
    if location := _first(data, "location"):
        details.append(("Localisation", str(location)))
    if allergies := _join(_first(data, "allergies")):
        details.append(("Allergies", allergies))
    if data.get("previous_visit") is True:
        details.append(("Suivi", "Patient déjà venu"))

    if data.get("urgency") == "emergency" or data.get("urgent") is True:
        return FormattedMetadata(
            title=symptom or "Urgence médicale",
            badge=f"Douleur: {pain_level}/10" if pain_level else None,
            icon="AlertTriangle",
            alert="URGENT",
            style="pulse-red",
            details=details,
        )

    return FormattedMetadata(
        title=symptom or "Consultation",
        badge=f"Niveau: {pain_level}/10" if pain_level else data.get("urgency"),
        icon="Activity",
        details=details,
    )


def format_real_estate(data: dict[str, Any]) -> FormattedMetadata:
    viewing_type = _first(data, "viewing_type")
    details = []
    if address := _first(data, "property_address"):
        details.append(("Adresse", str(address)))
    if buyer := _first(data, "buyer_name"):
        details.append(("Acquéreur", str(buyer)))
    if viewing_type:
        details.append(("Type de visite", str(viewing_type)))

    return FormattedMetadata(
        title=_first(data, "property_ref") or "Visite immobilière",
        badge=viewing_type,
        icon="Home",
        details=details,
    )


def format_automotive(data: dict[str, Any]) -> FormattedMetadata:
    vehicle = _first(data, "vehicle_model", "car_model", "car")
    brand = _first(data, "vehicle_brand")
    details = []
    if issue := _first(data, "repair_type", "issue"):
        details.append(("Problème", str(issue)))
    if mileage := _first(data, "mileage"):
        details.append(("Kilométrage", fmt_km(mileage)))
    if cost := _first(data, "estimated_cost"):
        details.append(("Estimation", fmt_euros(cost)))
    if status := _first(data, "status"):
        details.append(("Statut", str(status)))

    title = " ".join(str(part) for part in (brand, vehicle) if part)
    return FormattedMetadata(
        title=title or "Véhicule inconnu",
        badge=_first(data, "license_plate", "plate"),
        icon="Wrench",
        details=details,
    )


def format_trades(data: dict[str, Any]) -> FormattedMetadata:
    tradesman_type = _first(data, "tradesman_type")
    details = []
    if address := _first(data, "address"):
        details.append(("Adresse", str(address)))
    if tradesman_type:
        details.append(("Type", str(tradesman_type)))
    if status := _first(data, "status"):
        details.append(("Statut", str(status)))

    return FormattedMetadata(
        title=_first(data, "problem_desc") or "Intervention",
        badge=tradesman_type,
        icon="Hammer",
        details=details,
    )


register_formatter(Vertical.RESTAURANT, format_restaurant)
register_formatter(Vertical.BEAUTY, format_beauty)
register_formatter(Vertical.MEDICAL, format_medical)
register_formatter(Vertical.REAL_ESTATE, format_real_estate)
register_formatter(Vertical.AUTOMOTIVE, format_automotive)
register_formatter(Vertical.TRADES, format_trades)
