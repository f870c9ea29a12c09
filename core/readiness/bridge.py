from __future__ import annotations

import logging
from datetime import date
from typing import List, Sequence

from pydantic import BaseModel

from core.readiness.adapters import canonical_category
from core.readiness.models import HouseholdProfile, HouseholdReport, InventoryItem, ReadinessResult
from core.readiness.report import generate_household_report
from core.readiness.scoring import calculate_readiness
from recommendation_rules import Recommendation, build_recommendations
from supply_inputs import find_expiring_items

logger = logging.getLogger(__name__)


class ReadinessReport(BaseModel):
    result: ReadinessResult
    recommendations: List[Recommendation]
    report: HouseholdReport


def build_readiness_report(
    inventory: Sequence[InventoryItem],
    household: HouseholdProfile,
    *,
    as_of: date,
    household_size_policy: str = "reject",
    expiry_window_days: int = 30,
) -> ReadinessReport:
    excluded = [item for item in inventory if canonical_category(item.category) is None]
    if excluded:
        logger.debug(
            "Excluding %d item(s) with unscored categories: %s",
            len(excluded),
            sorted({item.category for item in excluded}),
        )

    result = calculate_readiness(inventory, household, household_size_policy=household_size_policy)

    # recommend() needs a real head count; the clamp policy may have let 0 through
    recommendations = build_recommendations(result.top_gaps, max(1, household.household_size))
    expiring = find_expiring_items(inventory, as_of=as_of, window_days=expiry_window_days)

    report = generate_household_report(result, household, recommendations, expiring)

    logger.info(
        "Readiness computed: overall=%s days=%.1f gaps=%d expiring=%d",
        result.overall_score,
        result.days_of_survival,
        len(result.top_gaps),
        len(expiring),
    )
    return ReadinessReport(result=result, recommendations=recommendations, report=report)
