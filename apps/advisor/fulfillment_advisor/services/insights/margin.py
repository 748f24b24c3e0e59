from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...bands import ShippingCost
from ..normalize import NormalizedProfile
from .base import InsightContext, format_money

# (current per-order spend, optimised per-order spend) for the expensive bands.
SPEND_MODEL = {
    ShippingCost.OVER_20: (25.0, 17.0),
    ShippingCost.FROM_15: (17.5, 12.0),
}

HIGH_SKU_THRESHOLD = 300
HIGH_VOLUME_THRESHOLD = 1000


def _spend_gap(profile: NormalizedProfile) -> tuple[float, float, float]:
    current_rate, optimised_rate = SPEND_MODEL[profile.shipping_cost]
    current = profile.monthly_orders * current_rate
    optimised = profile.monthly_orders * optimised_rate
    return current, optimised, current - optimised


def margin_alert(profile: NormalizedProfile) -> str:
    cost = profile.shipping_cost
    orders = profile.monthly_orders

    if cost is ShippingCost.OVER_20:
        current, optimised, gap = _spend_gap(profile)
        return (
            f"🚨 Critical Alert: Shipping costs over $20/order severely impact margins. "
            f"At {orders} orders/month you are spending about ${format_money(current)}/month; "
            f"optimised fulfilment brings that to ${format_money(optimised)} "
            f"(save ${format_money(gap)}/month). Immediate action needed."
        )

    if cost is ShippingCost.FROM_15:
        current, optimised, gap = _spend_gap(profile)
        return (
            f"⚠️ Margin Alert: $17.50 average shipping likely represents 15-20% of AOV. "
            f"Current monthly spend: ${format_money(current)}. "
            f"With optimization: ${format_money(optimised)} (save ${format_money(gap)}/month)."
        )

    if cost is ShippingCost.FROM_10:
        if profile.sku_count > HIGH_SKU_THRESHOLD:
            return (
                "📊 Moderate shipping costs, but high SKU complexity may be inflating costs. "
                "Consider SKU rationalization and bulk shipping strategies."
            )
        return (
            "📊 Moderate shipping costs. You're in the acceptable range, "
            "but there's room for 10-15% improvement through carrier negotiation."
        )

    if cost is ShippingCost.FROM_5:
        if orders > HIGH_VOLUME_THRESHOLD:
            return (
                "✅ Good shipping efficiency! At your volume, consider negotiating even better rates "
                "or exploring multi-carrier strategies for 5-10% additional savings."
            )
        return "✅ Solid shipping costs. Focus on maintaining this efficiency as you scale up volume."

    if cost is ShippingCost.UNDER_5:
        return (
            "🎯 Excellent shipping efficiency! You're in the top 10% for cost optimization. "
            "Monitor for any service quality trade-offs as you maintain these rates."
        )

    return "📊 Review your shipping cost structure - accurate cost tracking is essential for margin optimization."


@dataclass
class MarginAlertGenerator:
    name: str = "margin"

    def compute(self, context: InsightContext) -> dict[str, Any]:
        return {"margin_alert_text": margin_alert(context.profile)}
