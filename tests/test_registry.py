"""Test vertical registry lookups and the startup completeness check."""
import pytest
from pydantic import BaseModel

from core.business.registry import (
    DEFAULT_VERTICAL,
    VERTICAL_CONFIGS,
    VERTICAL_SYNONYMS,
    RegistryError,
    is_known_vertical,
    list_verticals,
    parse_vertical,
    resolve_vertical,
    resolve_vertical_config,
    verify_registry,
)
from patterns.domain_config import Vertical, Vocabulary


def test_every_vertical_has_config():
    assert set(VERTICAL_CONFIGS) == set(Vertical)
    for vertical, config in VERTICAL_CONFIGS.items():
        assert config.vertical is vertical
        assert config.vocabulary.missing_terms() == []
        assert issubclass(config.metadata_schema, BaseModel)


def test_garage_config():
    """Automotive vocabulary, modules and theme."""
    config = resolve_vertical_config("automotive")
    assert config.vocabulary.service == "Réparation"
    assert config.vocabulary.staff == "Mécanicien"
    assert config.has_module("kanban_board")
    assert not config.has_module("kds")
    assert config.theme_class == "theme-automotive"
    assert config.color_scheme.primary == "#ef4444"


def test_unknown_vertical_falls_back_to_restaurant():
    """Unknown, blank and missing labels all render the restaurant config."""
    restaurant = VERTICAL_CONFIGS[Vertical.RESTAURANT]
    assert resolve_vertical_config("spaceport") is restaurant
    assert resolve_vertical_config("") is restaurant
    assert resolve_vertical_config(None) is restaurant
    assert resolve_vertical("spaceport") is DEFAULT_VERTICAL


def test_labels_are_case_and_space_insensitive():
    assert resolve_vertical("  Medical ") is Vertical.MEDICAL
    assert resolve_vertical("REAL_ESTATE") is Vertical.REAL_ESTATE


def test_synonyms_resolve_to_their_vertical():
    assert resolve_vertical("garage") is Vertical.AUTOMOTIVE
    assert resolve_vertical("dentiste") is Vertical.MEDICAL
    assert resolve_vertical("juridique") is Vertical.LEGAL
    assert resolve_vertical("sport") is Vertical.FITNESS
    assert resolve_vertical("beaute") is Vertical.BEAUTY
    assert resolve_vertical("immobilier") is Vertical.REAL_ESTATE


def test_synonyms_never_shadow_canonical_labels():
    canonical = {v.value for v in Vertical}
    assert canonical.isdisjoint(VERTICAL_SYNONYMS)


def test_strict_parse():
    assert parse_vertical("legal") is Vertical.LEGAL
    assert parse_vertical("clinique") is Vertical.MEDICAL
    assert parse_vertical("spaceport") is None
    assert parse_vertical(None) is None
    assert is_known_vertical("trades")
    assert not is_known_vertical("unknown")


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        VERTICAL_CONFIGS[Vertical.RESTAURANT] = VERTICAL_CONFIGS[Vertical.BEAUTY]


def test_verify_registry_rejects_missing_vertical():
    configs = dict(VERTICAL_CONFIGS)
    del configs[Vertical.LEGAL]
    with pytest.raises(RegistryError, match="legal"):
        verify_registry(configs, {})


def test_verify_registry_rejects_blank_vocabulary():
    from dataclasses import replace

    configs = dict(VERTICAL_CONFIGS)
    beauty = configs[Vertical.BEAUTY]
    blank = Vocabulary(**{**beauty.vocabulary.as_dict(), "staff": "  "})
    configs[Vertical.BEAUTY] = replace(beauty, vocabulary=blank)
    with pytest.raises(RegistryError, match="staff"):
        verify_registry(configs, {})


def test_verify_registry_rejects_shadowing_synonym():
    with pytest.raises(RegistryError, match="shadows"):
        verify_registry(VERTICAL_CONFIGS, {"medical": Vertical.LEGAL})


def test_verify_registry_accepts_shipped_table():
    verify_registry(VERTICAL_CONFIGS, VERTICAL_SYNONYMS)


def test_list_verticals():
    verticals = list_verticals()
    assert len(verticals) == len(Vertical)
    garage = next(v for v in verticals if v["value"] == "automotive")
    assert garage == {"value": "automotive", "label": "Garage", "icon": "🚗"}


def test_config_to_dict_emits_json_schema():
    data = resolve_vertical_config("restaurant").to_dict()
    assert data["vertical"] == "restaurant"
    assert data["theme_class"] == "theme-restaurant"
    assert "guests" in data["metadata_schema"]["properties"]
    assert data["available_modules"] == ["kds", "menu_86", "table_manager"]
