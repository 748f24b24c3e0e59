from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from ...schemas import CarrierPick, Lane
from .base import InsightContext

# Rows are ordered by weight ceiling within each lane; the first row that fits wins.
CARRIER_MATRIX: list[CarrierPick] = [
    CarrierPick(
        id="auspost_cubic",
        lane="AUS_DOM",
        weight_max_kg=2,
        headline="Australia Post Cubic eParcel",
        tip=(
            "Uses cubic weight (L×W×H÷4000) vs actual weight. Ideal for light, bulky items. "
            "Optimize packaging to reduce cubic weight."
        ),
    ),
    CarrierPick(
        id="startrack_express",
        lane="AUS_DOM",
        weight_max_kg=5,
        headline="StarTrack Express",
        tip="Best for 2-5kg items with next-day metro delivery. Volume discounts available for 500+ parcels/month.",
    ),
    CarrierPick(
        id="tnt_express",
        lane="AUS_DOM",
        weight_max_kg=math.inf,
        headline="TNT Express",
        tip="Premium same-day and next-day service in major cities. Real-time tracking and proof of delivery.",
    ),
    CarrierPick(
        id="dhl_express",
        lane="AUS_INTL",
        weight_max_kg=2,
        headline="DHL Express Worldwide",
        tip=(
            "Fastest international delivery (1-3 days) with excellent tracking. "
            "DDP service available to handle duties/taxes."
        ),
    ),
    CarrierPick(
        id="auspost_intl",
        lane="AUS_INTL",
        weight_max_kg=5,
        headline="Australia Post International Economy",
        tip="Most cost-effective for high-volume international. 7-20 business days. Good coverage to 190+ countries.",
    ),
    CarrierPick(
        id="fedex_priority",
        lane="AUS_INTL",
        weight_max_kg=math.inf,
        headline="FedEx International Priority",
        tip="Reliable 1-3 day delivery with strong tracking. Good for urgent international shipments.",
    ),
    CarrierPick(
        id="sf_express",
        lane="CN_GLOBAL",
        weight_max_kg=1,
        headline="SF Express International",
        tip="Premium service with 5-7 day delivery. Strong compliance for electronics and regulated goods.",
    ),
    CarrierPick(
        id="china_post",
        lane="CN_GLOBAL",
        weight_max_kg=2,
        headline="China Post ePacket",
        tip="Most economical option (10-20 days). Good for low-value items under de minimis thresholds.",
    ),
    CarrierPick(
        id="dhl_ecommerce",
        lane="CN_GLOBAL",
        weight_max_kg=math.inf,
        headline="DHL eCommerce",
        tip="Best balance of cost and speed (5-10 days). Excellent for consolidated shipments and bulk orders.",
    ),
]

DEFAULT_CARRIER = CarrierPick(
    id="auspost_parcel_post",
    lane="AUS_DOM",
    weight_max_kg=math.inf,
    headline="AusPost Parcel Post",
    tip="Safe baseline service when no optimised carrier match is found.",
)


def choose_carrier(lane: Lane, weight_kg: float, matrix: list[CarrierPick] | None = None) -> CarrierPick:
    rows = CARRIER_MATRIX if matrix is None else matrix
    candidates = [row for row in rows if row.lane == lane]
    for row in candidates:
        if weight_kg <= row.weight_max_kg:
            return row
    return DEFAULT_CARRIER


@dataclass
class CarrierSelector:
    name: str = "carrier"

    def compute(self, context: InsightContext) -> dict[str, Any]:
        carrier = choose_carrier(context.lane, context.profile.avg_weight_kg)
        return {"carrier_headline": carrier.headline, "carrier_tip": carrier.tip}
