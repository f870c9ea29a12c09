from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping

from core.readiness.adapters import clamp, item_contribution, resolve_household_size, round_half_up
from core.readiness.models import (
    Category,
    CategoryBreakdown,
    Hazard,
    HouseholdProfile,
    InventoryItem,
    ReadinessResult,
    SupplyGap,
)


MAX_TOP_GAPS = 5

DEFAULT_HAZARD_MULTIPLIER = 1.0

PLAN_FACTOR_WITH_PLAN = 0.9
PLAN_FACTOR_WITHOUT_PLAN = 1.1


# FEMA baseline, days of supply
BASELINE_REQUIREMENTS: Mapping[Category, float] = MappingProxyType({
    Category.WATER: 3,
    Category.FOOD: 3,
    Category.MEDICAL: 7,   # a week of medications
    Category.TOOLS: 3,
    Category.SHELTER: 3,
})


HAZARD_MULTIPLIERS: Mapping[Hazard, float] = MappingProxyType({
    Hazard.WILDFIRE: 1.5,     # evacuations can be extended
    Hazard.HURRICANE: 1.8,    # outages can last weeks
    Hazard.EARTHQUAKE: 1.3,
    Hazard.TORNADO: 1.2,
    Hazard.FLOOD: 1.4,
    Hazard.WINTER: 1.6,
    Hazard.GENERAL: 1.0,
})


CATEGORY_WEIGHTS: Mapping[Category, float] = MappingProxyType({
    Category.WATER: 0.35,
    Category.FOOD: 0.30,
    Category.MEDICAL: 0.20,
    Category.TOOLS: 0.10,
    Category.SHELTER: 0.05,
})


def resolve_hazard_multiplier(hazard_profile: str) -> float:
    try:
        hazard = Hazard(hazard_profile)
    except ValueError:
        return DEFAULT_HAZARD_MULTIPLIER
    return HAZARD_MULTIPLIERS[hazard]


def calculate_target_days(household: HouseholdProfile) -> Dict[Category, float]:
    multiplier = resolve_hazard_multiplier(household.hazard_profile)
    plan_factor = PLAN_FACTOR_WITH_PLAN if household.has_emergency_plan else PLAN_FACTOR_WITHOUT_PLAN
    return {
        category: base_days * multiplier * plan_factor
        for category, base_days in BASELINE_REQUIREMENTS.items()
    }


def aggregate_supply(inventory: Iterable[InventoryItem], household_size: int) -> Dict[Category, float]:
    supply: Dict[Category, float] = {category: 0.0 for category in BASELINE_REQUIREMENTS}
    for item in inventory:
        contribution = item_contribution(item, household_size)
        if contribution is None:
            continue
        category, days = contribution
        supply[category] += days
    return supply


def calculate_overall(breakdown: Mapping[Category, CategoryBreakdown]) -> int:
    weighted = sum(
        breakdown[category].score * weight
        for category, weight in CATEGORY_WEIGHTS.items()
    )
    # half-up, not banker's rounding
    return int(clamp(round_half_up(weighted)))


def rank_gaps(breakdown: Mapping[Category, CategoryBreakdown]) -> List[SupplyGap]:
    gaps = [
        SupplyGap(
            category=category.value.capitalize(),
            shortfall=data.shortfall,
            priority=data.shortfall * CATEGORY_WEIGHTS[category],
        )
        for category, data in breakdown.items()
        if data.shortfall > 0
    ]
    # sorted() is stable, so equal priorities keep canonical category order
    gaps = sorted(gaps, key=lambda g: g.priority, reverse=True)
    return gaps[:MAX_TOP_GAPS]


def calculate_readiness(
    inventory: Iterable[InventoryItem],
    household: HouseholdProfile,
    *,
    household_size_policy: str = "reject",
) -> ReadinessResult:
    """
    Score a household's supplies against hazard- and plan-adjusted targets.

    Water, food and medical supply is per person and divided by household
    size; tools and shelter count once for the whole household. Items in
    unknown categories are ignored. Survival days are the minimum across
    categories (the bottleneck), not an average.
    """
    household_size = resolve_household_size(household, household_size_policy)

    targets = calculate_target_days(household)
    supply = aggregate_supply(inventory, household_size)

    breakdown: Dict[Category, CategoryBreakdown] = {}
    for category in BASELINE_REQUIREMENTS:
        days_supply = supply[category]
        target = targets[category]
        breakdown[category] = CategoryBreakdown(
            days_supply=days_supply,
            target_days=target,
            score=min(100.0, (days_supply / target) * 100),
            shortfall=max(0.0, target - days_supply),
        )

    return ReadinessResult(
        overall_score=calculate_overall(breakdown),
        days_of_survival=min(data.days_supply for data in breakdown.values()),
        category_breakdown={category.value: data for category, data in breakdown.items()},
        top_gaps=rank_gaps(breakdown),
    )
