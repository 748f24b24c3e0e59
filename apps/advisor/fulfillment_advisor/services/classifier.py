from __future__ import annotations

import logging

from ..schemas import FulfillmentStrategy
from .normalize import NormalizedProfile

logger = logging.getLogger(__name__)

DIY_ORDER_CEILING = 500
MULTI_WAREHOUSE_ORDER_FLOOR = 2000
# Parcels above this weight are not economical to air-ship from China.
AIR_FREIGHT_WEIGHT_LIMIT_KG = 5.0
# Catalogues above this size are too costly to split across warehouses.
SPLIT_WAREHOUSE_SKU_LIMIT = 500


def _multi_or_single(profile: NormalizedProfile) -> FulfillmentStrategy:
    if profile.sku_count > SPLIT_WAREHOUSE_SKU_LIMIT:
        return FulfillmentStrategy.AUS_3PL
    return FulfillmentStrategy.AUS_MULTI


def _decide(profile: NormalizedProfile) -> FulfillmentStrategy:
    orders = profile.monthly_orders

    if orders < DIY_ORDER_CEILING:
        return FulfillmentStrategy.DIY

    # Origin and feasibility constraints are checked before the plain volume bands.
    if profile.is_from_china:
        if profile.avg_weight_kg > AIR_FREIGHT_WEIGHT_LIMIT_KG:
            return FulfillmentStrategy.AUS_3PL
        return FulfillmentStrategy.CHINA_3PL

    if profile.is_global_focus:
        return FulfillmentStrategy.AUS_3PL

    if profile.fast_delivery_expected:
        return _multi_or_single(profile)

    if orders < MULTI_WAREHOUSE_ORDER_FLOOR:
        return FulfillmentStrategy.AUS_3PL

    return _multi_or_single(profile)


def classify(profile: NormalizedProfile) -> FulfillmentStrategy:
    strategy = _decide(profile)
    logger.debug(
        "classified %s orders/mo (china=%s global=%s fast=%s skus=%s) as %s",
        profile.monthly_orders,
        profile.is_from_china,
        profile.is_global_focus,
        profile.fast_delivery_expected,
        profile.sku_count,
        strategy.value,
    )
    return strategy
