from __future__ import annotations

from ..schemas import FulfillmentStrategy, SavingsPoint, SavingsProjection
from .normalize import NormalizedProfile

# (order ceiling, saving per order) for in-house fulfilment tooling.
DIY_RATES: list[tuple[float, float]] = [
    (100, 0.5),
    (300, 1.0),
    (float("inf"), 2.0),
]

# (weight ceiling kg, saving per order); ceilings are exclusive except the 2 kg tier.
CHINA_RATES: list[tuple[float, float]] = [
    (0.5, 10.0),
    (1.0, 8.0),
]
CHINA_MID_WEIGHT_KG = 2.0
CHINA_MID_RATE = 6.0
CHINA_HEAVY_RATE = 4.0

AUS_3PL_RATE = 3.0
AUS_3PL_HIGH_VOLUME_RATE = 4.0
AUS_3PL_HIGH_VOLUME_ORDERS = 2000
AUS_MULTI_RATE = 4.0

# Next volume band ceiling for the savings curve.
ORDER_CEILINGS: list[tuple[int, int]] = [
    (100, 300),
    (300, 500),
    (500, 1000),
    (1000, 2000),
    (2000, 2500),
]
CURVE_STEP = 250


def _china_rate(weight_kg: float) -> float:
    for ceiling, rate in CHINA_RATES:
        if weight_kg < ceiling:
            return rate
    if weight_kg <= CHINA_MID_WEIGHT_KG:
        return CHINA_MID_RATE
    return CHINA_HEAVY_RATE


def savings_per_order(strategy: FulfillmentStrategy, profile: NormalizedProfile) -> float:
    if strategy is FulfillmentStrategy.DIY:
        return next(rate for ceiling, rate in DIY_RATES if profile.monthly_orders < ceiling)
    if strategy is FulfillmentStrategy.AUS_3PL:
        if profile.monthly_orders >= AUS_3PL_HIGH_VOLUME_ORDERS:
            return AUS_3PL_HIGH_VOLUME_RATE
        return AUS_3PL_RATE
    if strategy is FulfillmentStrategy.AUS_MULTI:
        return AUS_MULTI_RATE
    return _china_rate(profile.avg_weight_kg)


def estimate_savings(strategy: FulfillmentStrategy, profile: NormalizedProfile) -> SavingsProjection:
    per_order = savings_per_order(strategy, profile)
    orders = profile.monthly_orders
    return SavingsProjection(
        savings_per_order=per_order,
        monthly_orders=orders,
        total_monthly_savings=per_order * orders,
    )


def next_order_ceiling(current_orders: int) -> int:
    for upper, ceiling in ORDER_CEILINGS:
        if current_orders <= upper:
            return ceiling
    return current_orders


def build_savings_curve(savings: SavingsProjection) -> list[SavingsPoint]:
    """Monthly saving at the current volume and every 250 orders up to the next band ceiling."""
    current = savings.monthly_orders
    ceiling = next_order_ceiling(current)
    points = [
        SavingsPoint(orders=orders, monthly_saving=round(orders * savings.savings_per_order))
        for orders in range(current, ceiling + 1, CURVE_STEP)
    ]
    if not points or points[-1].orders != ceiling:
        points.append(SavingsPoint(orders=ceiling, monthly_saving=round(ceiling * savings.savings_per_order)))
    return points
