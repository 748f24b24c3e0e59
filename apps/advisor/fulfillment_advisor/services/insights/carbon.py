from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import CarbonEstimate, Lane
from .base import InsightContext


@dataclass(frozen=True)
class LaneEmissions:
    transport_mode: str
    factor: float  # kg CO2 per tonne-km
    sea_factor: float
    distance_km: float


# UK Government 2024 freight conversion factors; distances are lane averages.
LANE_EMISSIONS: dict[str, LaneEmissions] = {
    "AUS_DOM": LaneEmissions("road transport", 0.025, 0.015, 500),
    "AUS_INTL": LaneEmissions("air freight", 0.606, 0.015, 2000),
    "CN_GLOBAL": LaneEmissions("air freight", 1.316, 0.011, 1500),
}


def _parcel_co2e(weight_kg: float, factor: float, distance_km: float) -> float:
    return weight_kg * factor * distance_km / 1000


def estimate_carbon(lane: Lane, weight_kg: float) -> CarbonEstimate:
    lane_data = LANE_EMISSIONS[lane]
    co2e = _parcel_co2e(weight_kg, lane_data.factor, lane_data.distance_km)
    sea_co2e = _parcel_co2e(weight_kg, lane_data.sea_factor, lane_data.distance_km)
    reduction = (co2e - sea_co2e) / co2e * 100 if co2e > 0 else 0.0

    scope = "domestic replenishment" if lane == "AUS_DOM" else "international shipments"
    text = (
        f"≈ {co2e:.1f} kg CO₂e per parcel via {lane_data.transport_mode}. "
        f"Switch to sea freight for {scope} to reduce emissions by {reduction:.0f}% "
        f"({sea_co2e:.2f} kg CO₂e)."
    )
    return CarbonEstimate(
        lane=lane,
        transport_mode=lane_data.transport_mode,
        distance_km=lane_data.distance_km,
        co2e_kg=co2e,
        sea_freight_co2e_kg=sea_co2e,
        reduction_pct=reduction,
        text=text,
    )


@dataclass
class CarbonEstimator:
    name: str = "carbon"

    def compute(self, context: InsightContext) -> dict[str, Any]:
        estimate = estimate_carbon(context.lane, context.profile.avg_weight_kg)
        return {"co2_text": estimate.text, "carbon": estimate, "lane": estimate.lane}
