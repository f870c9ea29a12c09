"""
Unit tests for recommendation_rules.py

Tests cover:
- Recommendation dataclass
- Per-category quantity formulas
- Case-insensitive category matching
- Unknown categories
- Output order
"""
import pytest

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.readiness.models import HouseholdProfile, InventoryItem, SupplyGap
from core.readiness.scoring import calculate_readiness
from recommendation_rules import Recommendation, build_recommendations


def _gap(category, shortfall):
    return SupplyGap(category=category, shortfall=shortfall)


class TestQuantityFormulas:
    """Quantities scale with shortfall and/or household size"""

    def test_water_scales_with_shortfall_and_household(self):
        recs = build_recommendations([_gap("Water", 2.5)], household_size=3)
        assert recs == [Recommendation(
            category="water",
            item="Water (drinking)",
            quantity=8,
            unit="gallons",
            priority="high",
        )]

    def test_food_is_two_cans_per_person_day(self):
        recs = build_recommendations([_gap("Food", 2.5)], household_size=3)
        assert recs[0].quantity == 15
        assert recs[0].unit == "cans"
        assert recs[0].priority == "high"

    def test_food_rounds_up(self):
        recs = build_recommendations([_gap("Food", 0.1)], household_size=1)
        assert recs[0].quantity == 1

    def test_medical_is_one_kit(self):
        recs = build_recommendations([_gap("Medical", 7.7)], household_size=6)
        assert recs[0].item == "First aid kit"
        assert recs[0].quantity == 1
        assert recs[0].unit == "kit"
        assert recs[0].priority == "medium"

    def test_tools_is_one_flashlight_per_two_people(self):
        assert build_recommendations([_gap("Tools", 1)], household_size=3)[0].quantity == 2
        assert build_recommendations([_gap("Tools", 1)], household_size=4)[0].quantity == 2
        assert build_recommendations([_gap("Tools", 1)], household_size=1)[0].quantity == 1

    def test_shelter_is_one_blanket_per_person(self):
        recs = build_recommendations([_gap("Shelter", 3.3)], household_size=5)
        assert recs[0].quantity == 5
        assert recs[0].unit == "blankets"
        assert recs[0].priority == "low"

    def test_quantities_are_ints(self):
        gaps = [_gap(c, 1.3) for c in ("Water", "Food", "Medical", "Tools", "Shelter")]
        for rec in build_recommendations(gaps, household_size=3):
            assert isinstance(rec.quantity, int)


class TestCategoryMatching:
    """Categories match case-insensitively; unknown ones are skipped"""

    @pytest.mark.parametrize("name", ["water", "Water", "WATER"])
    def test_case_insensitive(self, name):
        recs = build_recommendations([_gap(name, 1)], household_size=1)
        assert len(recs) == 1
        assert recs[0].category == "water"

    def test_unknown_category_skipped(self):
        recs = build_recommendations([_gap("Pets", 4), _gap("Water", 1)], household_size=2)
        assert [r.category for r in recs] == ["water"]

    def test_empty_gaps(self):
        assert build_recommendations([], household_size=4) == []


class TestOrdering:
    """Output follows input gap order"""

    def test_follows_input_order(self):
        gaps = [_gap("Shelter", 1), _gap("Water", 1), _gap("Tools", 1), _gap("Medical", 1), _gap("Food", 1)]
        recs = build_recommendations(gaps, household_size=2)
        assert [r.category for r in recs] == ["shelter", "water", "tools", "medical", "food"]

    def test_from_computed_gaps(self):
        household = HouseholdProfile(household_size=2, hazard_profile="general", has_emergency_plan=False)
        inventory = [InventoryItem(category="water", quantity=6, unit="gallons", days_supply=6)]
        result = calculate_readiness(inventory, household)

        recs = build_recommendations(result.top_gaps, household.household_size)

        assert [r.category for r in recs] == ["medical", "food", "tools", "shelter", "water"]
        water = recs[-1]
        # 0.3 days short for two people
        assert water.quantity == 1
