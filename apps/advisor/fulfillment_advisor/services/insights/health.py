from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...bands import CustomerLocation, DeliveryExpectation, PackageSize, ShippingCost, ShippingMethod, ShippingProblem
from ...schemas import FulfillmentStrategy
from ..normalize import NormalizedProfile
from .base import InsightContext, clamp

BASELINE = 85
SCORE_FLOOR = 35
SCORE_CEILING = 95

COST_ADJUSTMENT = {
    ShippingCost.OVER_20: -30,
    ShippingCost.FROM_15: -20,
    ShippingCost.FROM_10: -10,
    ShippingCost.FROM_5: 5,
    ShippingCost.UNDER_5: 10,
    ShippingCost.UNKNOWN: 0,
}

PROBLEM_ADJUSTMENT = {
    ShippingProblem.COSTS: -10,
    ShippingProblem.RETURNS: -12,
    ShippingProblem.TIME: -8,
    ShippingProblem.SLOW_DELIVERY: -8,
    ShippingProblem.INTERNATIONAL: -8,
    ShippingProblem.PACKAGING: -6,
    ShippingProblem.COMPLAINTS: -6,
    ShippingProblem.TRACKING: -5,
}

LOCATION_ADJUSTMENT = {
    CustomerLocation.AU_ONLY: 5,
    CustomerLocation.MOSTLY_AU: -5,
    CustomerLocation.HALF: -10,
    CustomerLocation.MOSTLY_INTERNATIONAL: -15,
    CustomerLocation.INTERNATIONAL_ONLY: -18,
}

THREE_PL_STRATEGIES = {FulfillmentStrategy.AUS_3PL, FulfillmentStrategy.CHINA_3PL}


def _delivery(profile: NormalizedProfile, strategy: FulfillmentStrategy) -> int:
    if profile.delivery_expectation is DeliveryExpectation.SAME_NEXT_DAY:
        if strategy is FulfillmentStrategy.AUS_MULTI:
            return 5
        if strategy is FulfillmentStrategy.AUS_3PL:
            return -10
        return -25
    if profile.delivery_expectation is DeliveryExpectation.TWO_TO_THREE_DAYS:
        return 5
    return 0


def _sku_complexity(profile: NormalizedProfile) -> int:
    skus = profile.sku_count
    if skus >= 500:
        return -20
    if skus >= 300:
        return -15
    if skus >= 100:
        return -8
    if skus <= 25:
        return 5
    return 0


def _current_method(profile: NormalizedProfile, strategy: FulfillmentStrategy) -> int:
    method = profile.shipping_method
    if method is ShippingMethod.HOME_GARAGE:
        return -15
    if profile.is_from_china:
        return 5 if strategy is FulfillmentStrategy.CHINA_3PL else -10
    if method in (ShippingMethod.AU_3PL, ShippingMethod.OFFICE_WAREHOUSE):
        return 10
    return 0


def _package_fit(profile: NormalizedProfile) -> int:
    size = profile.package_size
    weight = profile.avg_weight_kg

    if size is PackageSize.XL and weight < 1.5:
        return -20
    if size in (PackageSize.L, PackageSize.XL) and weight < 0.75:
        return -15
    if size is PackageSize.S and weight > 3:
        return -12

    well_matched = (
        (size is PackageSize.S and weight <= 1)
        or (size is PackageSize.M and 1 <= weight <= 3)
        or (size is PackageSize.L and 2 <= weight <= 5)
        or (size is PackageSize.XL and weight > 5)
    )
    if well_matched:
        return 8
    if size is PackageSize.M and (weight < 0.5 or weight > 4):
        return -5
    return 0


def _location(profile: NormalizedProfile) -> int:
    location = profile.customer_location
    adjustment = LOCATION_ADJUSTMENT[location]
    if location is CustomerLocation.MOSTLY_AU and profile.avg_weight_kg > 2:
        adjustment -= 5
    if profile.international_exposure >= 2 and profile.fast_delivery_expected:
        adjustment -= 8
    return adjustment


def _volume_alignment(profile: NormalizedProfile, strategy: FulfillmentStrategy) -> int:
    orders = profile.monthly_orders
    if strategy is FulfillmentStrategy.DIY and orders > 500:
        return -15
    if strategy is FulfillmentStrategy.AUS_MULTI and orders < 1500:
        return -10
    if strategy in THREE_PL_STRATEGIES and 500 <= orders <= 2000:
        return 8
    return 0


def _returns(profile: NormalizedProfile, strategy: FulfillmentStrategy) -> int:
    if profile.biggest_problem is not ShippingProblem.RETURNS:
        return 0
    adjustment = 0
    if profile.has_international_customers:
        adjustment -= 8
    if strategy is FulfillmentStrategy.DIY:
        adjustment -= 5
    return adjustment


def shipping_health_score(profile: NormalizedProfile, strategy: FulfillmentStrategy) -> int:
    score = (
        BASELINE
        + COST_ADJUSTMENT[profile.shipping_cost]
        + _delivery(profile, strategy)
        + _sku_complexity(profile)
        + _current_method(profile, strategy)
        + _package_fit(profile)
        + PROBLEM_ADJUSTMENT.get(profile.biggest_problem, 0)
        + _location(profile)
        + _volume_alignment(profile, strategy)
        + _returns(profile, strategy)
    )
    return int(clamp(score, SCORE_FLOOR, SCORE_CEILING))


@dataclass
class ShippingHealthScorer:
    name: str = "shipping_health"

    def compute(self, context: InsightContext) -> dict[str, Any]:
        return {"shipping_health_score": shipping_health_score(context.profile, context.strategy)}
