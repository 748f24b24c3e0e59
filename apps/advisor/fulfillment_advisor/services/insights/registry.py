from __future__ import annotations

from typing import Any

from ...schemas import InsightSet
from .base import Insight, InsightContext
from .carbon import CarbonEstimator
from .carrier import CarrierSelector
from .confidence import ConfidenceScorer
from .cubic_weight import CubicWeightEducator
from .duty import DutyNoteGenerator
from .health import ShippingHealthScorer
from .margin import MarginAlertGenerator
from .playbook import CaseStudy, CustomsCheatSheet, OperationsPlan, PackagingCost, QuickTip, ReturnsRisk, SpeedGain
from .readiness import ReadinessScorer
from .warehouse import InventoryWarehouseEstimator


def default_insights() -> list[Insight]:
    return [
        ShippingHealthScorer(),
        CarbonEstimator(),
        DutyNoteGenerator(),
        MarginAlertGenerator(),
        InventoryWarehouseEstimator(),
        CarrierSelector(),
        CubicWeightEducator(),
        ConfidenceScorer(),
        ReadinessScorer(),
        SpeedGain(),
        QuickTip(),
        OperationsPlan(),
        PackagingCost(),
        ReturnsRisk(),
        CaseStudy(),
        CustomsCheatSheet(),
    ]


def compute_insights(context: InsightContext, insights: list[Insight] | None = None) -> InsightSet:
    values: dict[str, Any] = {}
    for insight in insights if insights is not None else default_insights():
        produced = insight.compute(context)
        overlap = values.keys() & produced.keys()
        if overlap:
            raise ValueError(f"insight {insight.name!r} redefines {', '.join(sorted(overlap))}")
        values.update(produced)
    return InsightSet(**values)
