"""Test tier normalisation and ordering."""
import pytest

from core.access.tiers import (
    LOWEST_TIER,
    TIER_ALIASES,
    CanonicalTier,
    meets_minimum,
    normalize_tier,
    tier_rank,
)


def test_both_vocabularies_normalise():
    assert normalize_tier("free") is CanonicalTier.STARTER
    assert normalize_tier("starter") is CanonicalTier.STARTER
    assert normalize_tier("pro") is CanonicalTier.PRO
    assert normalize_tier("elite") is CanonicalTier.ELITE
    assert normalize_tier("enterprise") is CanonicalTier.ELITE


def test_labels_are_case_insensitive():
    assert normalize_tier(" PRO ") is CanonicalTier.PRO
    assert normalize_tier("Enterprise") is CanonicalTier.ELITE


def test_unknown_tier_fails_closed():
    """Unreadable tiers never grant more than the lowest plan."""
    assert normalize_tier("platinum") is LOWEST_TIER
    assert normalize_tier("") is LOWEST_TIER
    assert normalize_tier(None) is LOWEST_TIER
    assert normalize_tier(3) is LOWEST_TIER


def test_canonical_tier_passes_through():
    assert normalize_tier(CanonicalTier.ELITE) is CanonicalTier.ELITE


def test_rank_order():
    assert tier_rank("starter") < tier_rank("pro") < tier_rank("elite")
    assert tier_rank("free") == tier_rank("starter")
    assert tier_rank("enterprise") == tier_rank("elite")


def test_meets_minimum():
    assert meets_minimum("enterprise", "elite")
    assert meets_minimum("elite", "pro")
    assert not meets_minimum("free", "pro")
    assert not meets_minimum("pro", "elite")
    assert meets_minimum("starter", None)


@pytest.mark.parametrize("label", sorted(TIER_ALIASES))
def test_meets_minimum_reflexive(label):
    assert meets_minimum(label, label)


def test_meets_minimum_transitive():
    labels = sorted(TIER_ALIASES)
    for a in labels:
        for b in labels:
            for c in labels:
                if meets_minimum(a, b) and meets_minimum(b, c):
                    assert meets_minimum(a, c)


def test_display_label():
    assert CanonicalTier.PRO.display_label == "PRO"
    assert CanonicalTier.ELITE.display_label == "ELITE"
