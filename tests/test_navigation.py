"""Test per-vertical menus and tier gating."""
from core.access.navigation import (
    MENU_ALIASES,
    VERTICAL_MENUS,
    MenuMode,
    build_menu,
    menu_entries,
)
from patterns.domain_config import Vertical


def _labels(items):
    return [item.label for item in items]


def test_restaurant_starter_omit():
    menu = build_menu("restaurant", "starter")
    assert _labels(menu) == ["Dashboard", "Réservations", "Appels", "Settings"]
    assert not any(item.locked for item in menu)


def test_restaurant_starter_locked():
    """Gated entries stay in order, locked with their plan label."""
    menu = build_menu("restaurant", "starter", MenuMode.LOCKED)
    assert _labels(menu) == [
        "Dashboard", "Réservations", "Tables", "Menu", "Promos", "Appels", "Settings",
    ]
    tables = menu[2]
    assert tables.locked
    assert tables.required_tier_label == "PRO"
    assert not menu[0].locked
    assert menu[0].required_tier_label is None


def test_restaurant_pro_unlocks_everything():
    menu = build_menu("restaurant", "pro", "locked")
    assert len(menu) == 7
    assert not any(item.locked for item in menu)


def test_medical_urgences_elite_only():
    pro = build_menu("medical", "pro")
    assert "Urgences" not in _labels(pro)

    locked = build_menu("medical", "pro", MenuMode.LOCKED)
    urgences = next(item for item in locked if item.label == "Urgences")
    assert urgences.locked
    assert urgences.required_tier_label == "ELITE"

    elite = build_menu("medical", "enterprise")
    assert "Urgences" in _labels(elite)


def test_fitness_reuses_beauty_menu():
    assert MENU_ALIASES[Vertical.FITNESS] is Vertical.BEAUTY
    assert menu_entries("fitness") == menu_entries("beauty")
    assert menu_entries("sport") == VERTICAL_MENUS[Vertical.BEAUTY]


def test_unknown_vertical_gets_restaurant_menu():
    assert menu_entries("spaceport") == VERTICAL_MENUS[Vertical.RESTAURANT]


def test_every_vertical_has_menu():
    for vertical in Vertical:
        entries = menu_entries(vertical.value)
        assert entries[0].label == "Dashboard"
        assert entries[-1].path == "/dashboard/settings"


def test_omit_is_subset_of_locked():
    for vertical in Vertical:
        for tier in ("starter", "pro", "elite"):
            omitted = build_menu(vertical.value, tier, MenuMode.OMIT)
            locked = build_menu(vertical.value, tier, MenuMode.LOCKED)
            assert omitted == [item for item in locked if not item.locked]


def test_higher_tier_never_loses_entries():
    for vertical in Vertical:
        starter = set(_labels(build_menu(vertical.value, "starter")))
        pro = set(_labels(build_menu(vertical.value, "pro")))
        elite = set(_labels(build_menu(vertical.value, "elite")))
        assert starter <= pro <= elite


def test_menu_item_to_dict():
    item = build_menu("automotive", "free", MenuMode.LOCKED)[2]
    assert item.to_dict() == {
        "icon": "Car",
        "label": "Véhicules",
        "path": "/dashboard/vehicles",
        "minimum_tier": "pro",
        "locked": True,
        "required_tier_label": "PRO",
    }
