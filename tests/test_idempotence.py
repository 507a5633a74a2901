"""Test that every resolver returns the same answer for the same input."""
import pytest

from core.access.feature_flags import resolve_feature_flags
from core.access.navigation import MenuMode, build_menu
from core.access.tiers import normalize_tier
from core.business.metadata import validate_metadata
from core.business.registry import resolve_vertical_config
from core.business.vocabulary import get_vocabulary

CALLS = [
    ("validate_metadata", lambda: validate_metadata("garage", {"status": "ready", "mileage": 9000})),
    ("validate_metadata_invalid", lambda: validate_metadata("garage", {"status": "parked"})),
    ("build_menu_omit", lambda: build_menu("medical", "pro", MenuMode.OMIT)),
    ("build_menu_locked", lambda: build_menu("sport", "free", MenuMode.LOCKED)),
    ("get_vocabulary", lambda: get_vocabulary("dentiste", "client")),
    ("resolve_feature_flags", lambda: resolve_feature_flags("enterprise")),
    ("normalize_tier", lambda: normalize_tier("bogus")),
]


@pytest.mark.parametrize("name,call", CALLS, ids=[name for name, _ in CALLS])
def test_repeated_calls_agree(name, call):
    assert call() == call()


@pytest.mark.parametrize("label", ["restaurant", "garage", "unknown_sector", None])
def test_config_lookup_returns_same_object(label):
    assert resolve_vertical_config(label) is resolve_vertical_config(label)
