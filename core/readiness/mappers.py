from __future__ import annotations

from typing import List

from core.readiness.models import SupplyGap
from recommendation_rules import Recommendation


_PRIORITY_ORDER = {
    "high": 0,
    "medium": 1,
    "low": 2,
}


def gap_to_line(gap: SupplyGap) -> str:
    return f"{gap.category}: {gap.shortfall:.1f} days short"


def recommendation_to_action(r: Recommendation) -> str:
    return f"[{r.priority}] {r.item}: {r.quantity} {r.unit}"


def recommendations_to_actions(recs: List[Recommendation]) -> List[str]:
    # high first; within a priority keep the gap ranking
    ordered = sorted(recs, key=lambda r: _PRIORITY_ORDER.get(r.priority, len(_PRIORITY_ORDER)))
    return [recommendation_to_action(r) for r in ordered]
