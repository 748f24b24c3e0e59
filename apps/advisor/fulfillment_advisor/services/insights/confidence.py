from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...bands import OrderVolume
from ...schemas import ConfidenceLevel
from ..normalize import NormalizedProfile
from .base import InsightContext

BROAD_ORDER_BANDS = {OrderVolume.UNDER_100, OrderVolume.OVER_2000}

FIELD_LABELS = {
    "monthly_orders_choice": "monthly order volume",
    "sku_range_choice": "catalogue size",
    "package_weight_choice": "package weight",
    "package_size_choice": "package size",
    "customer_location_choice": "customer location",
    "current_shipping_method": "current shipping setup",
    "biggest_shipping_problem": "biggest shipping problem",
    "delivery_expectation_choice": "delivery expectation",
    "shipping_cost_choice": "shipping cost",
}


def derive_confidence(profile: NormalizedProfile) -> tuple[ConfidenceLevel, list[str]]:
    """
    Confidence drops one level per weak signal: no website, no category, a very broad order band.
    Defaulted answers are listed as assumptions but do not move the level.
    """
    assumptions: list[str] = []
    penalty = 0

    if not profile.has_website:
        assumptions.append("Website URL missing – used generic product segment averages")
        penalty += 1
    if not profile.category:
        assumptions.append("Product category not provided – returns risk estimated")
        penalty += 1
    if profile.order_volume in BROAD_ORDER_BANDS:
        assumptions.append("Monthly order range very broad – savings calculated with midpoint")
        penalty += 1

    for field_name in profile.defaulted_fields:
        label = FIELD_LABELS.get(field_name, field_name)
        assumptions.append(f"No recognised answer for {label} – used the default band")

    if penalty == 0:
        level: ConfidenceLevel = "High"
    elif penalty == 1:
        level = "Medium"
    else:
        level = "Low"
    return level, assumptions


@dataclass
class ConfidenceScorer:
    name: str = "confidence"

    def compute(self, context: InsightContext) -> dict[str, Any]:
        level, assumptions = derive_confidence(context.profile)
        return {"confidence_level": level, "assumptions": assumptions}
