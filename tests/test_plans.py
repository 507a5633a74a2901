"""Test the plan catalogue."""
from core.access.plans import PLANS, get_plan, list_plans
from core.access.tiers import CanonicalTier


def test_one_plan_per_tier():
    assert set(PLANS) == set(CanonicalTier)


def test_prices():
    assert [plan.monthly_price for plan in list_plans()] == [0, 500, 1000]


def test_get_plan_normalises_label():
    assert get_plan("free").tier is CanonicalTier.STARTER
    assert get_plan("enterprise").label == "Elite"
    assert get_plan("unknown").tier is CanonicalTier.STARTER


def test_to_dict():
    data = get_plan("pro").to_dict()
    assert data["tier"] == "pro"
    assert data["monthly_price"] == 500
    assert isinstance(data["features"], list)
