# recommendation_rules.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Literal

from core.readiness.models import SupplyGap


Priority = Literal["high", "medium", "low"]


@dataclass
class Recommendation:
    category: str
    item: str
    quantity: int
    unit: str
    priority: Priority


def _rec(
    *,
    category: str,
    item: str,
    quantity: int,
    unit: str,
    priority: Priority,
) -> Recommendation:
    return Recommendation(
        category=category,
        item=item,
        quantity=int(quantity),
        unit=unit,
        priority=priority,
    )


def build_recommendations(
    gaps: Iterable[SupplyGap],
    household_size: int,
) -> List[Recommendation]:
    """
    One canned purchase per gap, scaled by shortfall and/or household size.
    Gap categories match case-insensitively; unknown ones are skipped.
    """
    recs: List[Recommendation] = []

    for gap in gaps:
        category = gap.category.lower()
        shortfall = gap.shortfall

        # -------------------------
        # Consumables (high)
        # -------------------------
        if category == "water":
            recs.append(_rec(
                category=category,
                item="Water (drinking)",
                quantity=math.ceil(shortfall * household_size),  # 1 gallon per person per day
                unit="gallons",
                priority="high",
            ))
        elif category == "food":
            recs.append(_rec(
                category=category,
                item="Canned food (ready-to-eat)",
                quantity=math.ceil(shortfall * household_size * 2),
                unit="cans",
                priority="high",
            ))

        # -------------------------
        # Medical / tools (medium)
        # -------------------------
        elif category == "medical":
            recs.append(_rec(
                category=category,
                item="First aid kit",
                quantity=1,
                unit="kit",
                priority="medium",
            ))
        elif category == "tools":
            recs.append(_rec(
                category=category,
                item="Flashlight with batteries",
                quantity=math.ceil(household_size / 2),
                unit="flashlights",
                priority="medium",
            ))

        # -------------------------
        # Shelter (low)
        # -------------------------
        elif category == "shelter":
            recs.append(_rec(
                category=category,
                item="Emergency blankets",
                quantity=household_size,
                unit="blankets",
                priority="low",
            ))

    return recs
