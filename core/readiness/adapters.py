from __future__ import annotations

import math
from typing import FrozenSet, Literal, Optional, Tuple

from core.readiness.models import Category, HouseholdProfile, InventoryItem


HouseholdSizePolicy = Literal["reject", "clamp"]

HOUSEHOLD_SIZE_POLICIES: FrozenSet[str] = frozenset({"reject", "clamp"})

# daysSupply on these is entered per person, so it is shared across the household
PER_PERSON_CATEGORIES: FrozenSet[Category] = frozenset({
    Category.WATER,
    Category.FOOD,
    Category.MEDICAL,
})

# shared assets: one flashlight or tarp covers everyone
HOUSEHOLD_CATEGORIES: FrozenSet[Category] = frozenset({
    Category.TOOLS,
    Category.SHELTER,
})


class InvalidHouseholdSize(ValueError):
    """Raised when a household of fewer than one person reaches the engine."""

    def __init__(self, household_size: int):
        self.household_size = household_size
        super().__init__(f"household_size must be >= 1 (got {household_size})")


def clamp(x: float, lo: float = 0.0, hi: float = 100.0) -> float:
    return max(lo, min(hi, x))


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def resolve_household_size(household: HouseholdProfile, policy: HouseholdSizePolicy = "reject") -> int:
    """
    Boundary guard for the per-person division.
    `reject` raises InvalidHouseholdSize, `clamp` treats anything below 1 as 1.
    """
    if policy not in HOUSEHOLD_SIZE_POLICIES:
        raise ValueError(f"household_size_policy must be one of {sorted(HOUSEHOLD_SIZE_POLICIES)}")

    size = int(household.household_size)
    if size >= 1:
        return size
    if policy == "clamp":
        return 1
    raise InvalidHouseholdSize(size)


def canonical_category(value: str) -> Optional[Category]:
    try:
        return Category(value)
    except ValueError:
        return None


def item_contribution(item: InventoryItem, household_size: int) -> Optional[Tuple[Category, float]]:
    """
    Days this item adds to its category total, or None when the category is
    not one we score.
    """
    category = canonical_category(item.category)
    if category is None:
        return None
    if category in PER_PERSON_CATEGORIES:
        return category, item.days_supply / household_size
    if category in HOUSEHOLD_CATEGORIES:
        return category, item.days_supply
    return None
