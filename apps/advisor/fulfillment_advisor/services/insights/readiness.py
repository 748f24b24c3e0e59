from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...bands import PackageSize, ShippingProblem
from ..normalize import NormalizedProfile
from .base import InsightContext, clamp


def readiness_score(profile: NormalizedProfile) -> int:
    """How ready the operation is for a smooth hand-over to outsourced fulfilment (0-100)."""
    score = 100
    if profile.sku_count > 100 and profile.ships_from_home:
        score -= 15
    # Anything past a small catalogue implies stock without barcodes.
    if profile.sku_count > 25:
        score -= 15
    if profile.biggest_problem is ShippingProblem.RETURNS and profile.is_from_china:
        score -= 20
    if profile.package_size is PackageSize.XL:
        score -= 10
    return int(clamp(score, 0, 100))


@dataclass
class ReadinessScorer:
    name: str = "readiness"

    def compute(self, context: InsightContext) -> dict[str, Any]:
        return {"readiness_score_pct": readiness_score(context.profile)}
