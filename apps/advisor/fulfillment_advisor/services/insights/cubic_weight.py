from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...bands import PackageSize
from .base import InsightContext

CUBIC_DIVISOR = 4000

# Example carton (L, W, H) in cm for each size band.
EXAMPLE_DIMENSIONS: dict[PackageSize, tuple[int, int, int]] = {
    PackageSize.S: (25, 15, 10),
    PackageSize.M: (30, 20, 15),
    PackageSize.L: (40, 30, 20),
    PackageSize.XL: (50, 40, 30),
}


def cubic_weight_kg(length_cm: float, width_cm: float, height_cm: float) -> float:
    return length_cm * width_cm * height_cm / CUBIC_DIVISOR


def weight_education(size: PackageSize, actual_weight_kg: float) -> str:
    length, width, height = EXAMPLE_DIMENSIONS[size]
    cubic = cubic_weight_kg(length, width, height)
    dimensions = f"{length}×{width}×{height}cm"

    if cubic > actual_weight_kg:
        verdict = (
            f"You're paying for {cubic:.1f}kg cubic weight vs {actual_weight_kg:g}kg actual weight "
            "(cubic weight is chargeable). Optimize packaging to save costs."
        )
    else:
        verdict = (
            f"Your actual weight ({actual_weight_kg:g}kg) exceeds cubic weight ({cubic:.1f}kg) "
            "(actual weight is chargeable) - good packaging efficiency."
        )

    return (
        '📦 Shipping Weight Education: Carriers charge for "chargeable weight" - the higher of actual vs cubic '
        f"weight. Example: {dimensions} package = {cubic:.1f}kg cubic weight (L×W×H÷{CUBIC_DIVISOR}). {verdict}"
    )


@dataclass
class CubicWeightEducator:
    name: str = "cubic_weight"

    def compute(self, context: InsightContext) -> dict[str, Any]:
        profile = context.profile
        return {"weight_education_text": weight_education(profile.package_size, profile.avg_weight_kg)}
