from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from ...config import Settings
from ...schemas import FulfillmentStrategy, Lane, SavingsProjection
from ..normalize import NormalizedProfile


@dataclass(frozen=True)
class InsightContext:
    profile: NormalizedProfile
    strategy: FulfillmentStrategy
    savings: SavingsProjection
    settings: Settings

    @property
    def lane(self) -> Lane:
        return shipping_lane(self.profile, self.strategy)


class Insight(Protocol):
    name: str

    def compute(self, context: InsightContext) -> dict[str, Any]:
        """Return values keyed by InsightSet field name."""
        ...


def shipping_lane(profile: NormalizedProfile, strategy: FulfillmentStrategy) -> Lane:
    if strategy is FulfillmentStrategy.CHINA_3PL:
        return "CN_GLOBAL"
    if profile.has_international_customers:
        return "AUS_INTL"
    return "AUS_DOM"


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def format_money(value: float) -> str:
    if float(value).is_integer():
        return f"{value:,.0f}"
    return f"{value:,.2f}"
