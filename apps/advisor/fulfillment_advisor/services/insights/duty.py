from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import Lane
from .base import InsightContext

FORMAL_CLEARANCE_WEIGHT_KG = 2.0

DUTY_NOTES = {
    ("AUS_INTL", True): (
        "🇦🇺 Import to Australia: De minimis AU$1,000. Above: 5% duty (FOB) + 10% GST (CIF+duty). "
        "Processing fee: AU$50-192."
    ),
    ("AUS_INTL", False): (
        "🇦🇺 Heavier parcels (>2kg): May trigger formal customs clearance. "
        "Consider keeping shipments under AU$1,000 to avoid duties."
    ),
    ("CN_GLOBAL", True): (
        "🌍 Global shipping: EU/UK VAT ~20% collected via IOSS. US: $800 de minimis. Most countries: 10-25% VAT/GST."
    ),
    ("CN_GLOBAL", False): (
        "🌍 Over 2kg may trigger formal clearance in EU/UK. Allow extra 2-3 days. Consider sea freight for cost savings."
    ),
}

DOMESTIC_NOTE = "🇦🇺 Domestic shipping: No import duties. Only GST applies to final sale (10% if registered for GST)."


def duty_note(lane: Lane, weight_kg: float) -> str:
    if lane == "AUS_DOM":
        return DOMESTIC_NOTE
    return DUTY_NOTES[(lane, weight_kg <= FORMAL_CLEARANCE_WEIGHT_KG)]


@dataclass
class DutyNoteGenerator:
    name: str = "duty"

    def compute(self, context: InsightContext) -> dict[str, Any]:
        return {"duty_text": duty_note(context.lane, context.profile.avg_weight_kg)}
