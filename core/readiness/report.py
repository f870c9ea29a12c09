from __future__ import annotations

from typing import List, Optional, Sequence

from core.readiness.adapters import round_half_up
from core.readiness.mappers import gap_to_line, recommendations_to_actions
from core.readiness.models import (
    ExpiringItem,
    HouseholdProfile,
    HouseholdReport,
    ReadinessBand,
    ReadinessResult,
)
from recommendation_rules import Recommendation


MAX_REPORTED_GAPS = 3

# FEMA recommends at least 3 days of supplies
WELL_PREPARED_DAYS = 3
PARTIALLY_READY_DAYS = 1


SCORE_BANDS = [
    (75, 100, ReadinessBand(
        label="Ready",
        description="Supplies meet or nearly meet the targets for your hazard and household.",
        tone="green",
    )),
    (50, 74, ReadinessBand(
        label="Getting There",
        description="Core supplies are in place but one or more categories fall short.",
        tone="amber",
    )),
    (0, 49, ReadinessBand(
        label="At Risk",
        description="Supplies would not carry the household through a typical emergency.",
        tone="red",
    )),
]


def interpret(overall_score: int) -> ReadinessBand:
    for lo, hi, band in SCORE_BANDS:
        if lo <= overall_score <= hi:
            return band
    # fallback
    return SCORE_BANDS[-1][2]


def readiness_status(days_of_survival: float) -> str:
    if days_of_survival >= WELL_PREPARED_DAYS:
        return "Well Prepared"
    if days_of_survival >= PARTIALLY_READY_DAYS:
        return "Partially Ready"
    return "Needs Attention"


def generate_household_report(
    result: ReadinessResult,
    household: HouseholdProfile,
    recommendations: Sequence[Recommendation] = (),
    expiring: Optional[List[ExpiringItem]] = None,
) -> HouseholdReport:
    category_scores = {
        category: round_half_up(data.score)
        for category, data in result.category_breakdown.items()
    }

    return HouseholdReport(
        overall_score=result.overall_score,
        band=interpret(result.overall_score),
        status=readiness_status(result.days_of_survival),
        days_of_survival=result.days_of_survival,
        household_size=household.household_size,
        category_scores=category_scores,
        priority_gaps=[gap_to_line(g) for g in result.top_gaps[:MAX_REPORTED_GAPS]],
        recommended_actions=recommendations_to_actions(list(recommendations)),
        biggest_gap=result.top_gaps[0].category if result.top_gaps else None,
        expiring_items=list(expiring or []),
    )
