from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from ...schemas import FulfillmentStrategy, WarehouseEstimate
from ..normalize import NormalizedProfile
from .base import InsightContext

ORDERS_PER_PALLET = 100

# AUD per pallet per month (2024 market research).
AU_NATIONAL_MEDIAN = 18.82
CN_AVERAGE = 12.50
AU_STATE_RATES = {
    "VIC": 16.43,
    "NSW": 19.50,
    "QLD": 18.17,
    "WA": 20.04,
    "SA": 19.90,
}


def pallets_needed(monthly_orders: int) -> int:
    return math.ceil(monthly_orders / ORDERS_PER_PALLET)


def _sku_insight(profile: NormalizedProfile) -> str:
    skus = profile.sku_count
    label = profile.sku_range.value
    if skus <= 25:
        return f"🎯 Low SKU complexity ({label} SKUs). Simple inventory management with minimal carrying costs."
    if skus <= 100:
        return f"📊 Moderate SKU complexity ({label} SKUs). Good balance of variety and manageability."
    if skus <= 300:
        return f"📈 High SKU complexity ({label} SKUs). Consider SKU rationalization to reduce carrying costs."
    return (
        f"⚠️ Very high SKU complexity ({label} SKUs). High carrying costs - "
        "consider reducing slow-moving SKUs or bundling strategies."
    )


def estimate_warehouse(profile: NormalizedProfile, strategy: FulfillmentStrategy) -> WarehouseEstimate:
    orders = profile.monthly_orders
    pallets = pallets_needed(orders)
    au_cost = pallets * AU_NATIONAL_MEDIAN

    inventory_text = (
        f"{_sku_insight(profile)} Estimated warehouse cost: AU${au_cost:.0f}/month "
        f"for {pallets} pallets based on {orders} orders/month."
    )

    if strategy is FulfillmentStrategy.CHINA_3PL:
        cn_cost = pallets * CN_AVERAGE
        delta = au_cost - cn_cost
        return WarehouseEstimate(
            pallets=pallets,
            monthly_cost_aud=cn_cost,
            comparison_cost_aud=au_cost,
            delta_aud=delta,
            inventory_alert_text=inventory_text,
            warehouse_cost_text=(
                f"🏭 Warehouse Cost Analysis: AU 3PL ~AU${au_cost:.0f}/month vs China 3PL ~AU${cn_cost:.0f}/month "
                f"for {pallets} pallets. Monthly savings: AU${delta:.0f} using international fulfillment."
            ),
        )

    cheapest = min(AU_STATE_RATES, key=AU_STATE_RATES.__getitem__)
    priciest = max(AU_STATE_RATES, key=AU_STATE_RATES.__getitem__)
    return WarehouseEstimate(
        pallets=pallets,
        monthly_cost_aud=au_cost,
        inventory_alert_text=inventory_text,
        warehouse_cost_text=(
            f"🏭 Australian 3PL Costs: ~AU${au_cost:.0f}/month for {pallets} pallets "
            f"(national median AU${AU_NATIONAL_MEDIAN}/pallet/month). "
            f"Cheapest: {cheapest} (AU${AU_STATE_RATES[cheapest]:.0f}/pallet), "
            f"Most expensive: {priciest} (AU${AU_STATE_RATES[priciest]:.0f}/pallet)."
        ),
    )


@dataclass
class InventoryWarehouseEstimator:
    name: str = "warehouse"

    def compute(self, context: InsightContext) -> dict[str, Any]:
        estimate = estimate_warehouse(context.profile, context.strategy)
        return {
            "warehouse": estimate,
            "inventory_alert_text": estimate.inventory_alert_text,
            "warehouse_cost_text": estimate.warehouse_cost_text,
        }
