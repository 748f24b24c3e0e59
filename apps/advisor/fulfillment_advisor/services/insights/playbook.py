from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...bands import PackageSize, ShippingProblem
from ...schemas import FulfillmentStrategy
from .base import InsightContext

SPEED_GAIN_DAYS = {
    FulfillmentStrategy.DIY: 0,
    FulfillmentStrategy.AUS_3PL: 1,
    FulfillmentStrategy.AUS_MULTI: 2,
    FulfillmentStrategy.CHINA_3PL: 3,
}

QUICK_TIPS = {
    ShippingProblem.RETURNS: (
        "Set up an automated RMA portal so customers can self-serve returns – this cuts back-and-forth emails "
        "while giving you instant visibility on incoming stock."
    ),
    ShippingProblem.COSTS: (
        "Compare cubic and dead-weight dimensions on every SKU – trimming even 2 cm can shift you into the next "
        "satchel size and slash cost."
    ),
    ShippingProblem.TIME: (
        "Pre-print labels the night before dispatch to shave minutes off daily pick-pack and hit earlier carrier "
        "cut-offs."
    ),
    ShippingProblem.SLOW_DELIVERY: (
        "Book a daily carrier pickup and move dispatch cut-off earlier so parcels leave the same day they are packed."
    ),
    ShippingProblem.TRACKING: (
        "Deploy simple barcoding (even DYMO labels) so every SKU scan updates stock counts in real time – goodbye "
        "spreadsheet drama."
    ),
    ShippingProblem.STOCKOUTS: (
        "Set reorder alerts at 25% of weekly velocity to trigger purchase orders well before you hit zero."
    ),
    ShippingProblem.PACKAGING: (
        "Right-size cartons with adjustable score lines – you'll protect products and avoid paying to ship fresh air."
    ),
}
DEFAULT_QUICK_TIP = "Audit your pick-pack process once a month to spot easy wins."

GEAR_LISTS = {
    "low": ["Dymo 4XL thermal label printer", "1000 × 500 mm bubble-wrap roll"],
    "mid": ["Zebra ZT230 industrial printer", "Handheld barcode scanner", "Pick-to-light shelf labels"],
    "high": ["Automated carton sealer", "Powered conveyor bench", "Warehouse mobile work-station"],
}

MIGRATION_MILESTONES = [
    "Contract signed & {orders} units inbound to warehouse",
    "System integrations & test orders live",
    "Inventory put-away and cycle counts verified",
    "First customer orders shipped via Future",
    "30-day review – optimisation & KPI report",
]

SATCHEL_PRICES = {
    PackageSize.S: 0.6,
    PackageSize.M: 0.9,
    PackageSize.L: 1.3,
    PackageSize.XL: 1.7,
}

RETURNS_RISK_CATEGORIES = {"Clothing & Accessories", "Tech & Electronics"}
RETURNS_RISK_ALERT = (
    "Products in this category see return rates above 20%. Tighten QC and offer hassle-free exchanges to stay ahead."
)

CASE_STUDIES = {
    FulfillmentStrategy.DIY: '"Packing 400 orders/month, Sophie saved 40% pick-time using our DIY toolkit."',
    FulfillmentStrategy.AUS_3PL: '"4WD Detail cut A$2,400/mo at 800 orders by moving to our Melbourne hub."',
    FulfillmentStrategy.AUS_MULTI: (
        '"Health & Balance Vitamins saw 18% more 5-star reviews after adding QLD warehousing."'
    ),
    FulfillmentStrategy.CHINA_3PL: '"EcoLuxe slashed intl cost by US$8/parcel after relocating stock to Shenzhen."',
}

AUS_STRATEGIES = {FulfillmentStrategy.AUS_3PL, FulfillmentStrategy.AUS_MULTI}
PACKAGING_STRATEGIES = {FulfillmentStrategy.DIY, FulfillmentStrategy.AUS_3PL}


def gear_band(monthly_orders: int) -> str:
    if monthly_orders < 300:
        return "low"
    if monthly_orders <= 500:
        return "mid"
    return "high"


def packaging_cost(size: PackageSize, monthly_orders: int) -> int:
    return round(SATCHEL_PRICES[size] * monthly_orders)


@dataclass
class SpeedGain:
    name: str = "speed_gain"

    def compute(self, context: InsightContext) -> dict[str, Any]:
        return {"speed_gain_days": SPEED_GAIN_DAYS[context.strategy]}


@dataclass
class QuickTip:
    name: str = "quick_tip"

    def compute(self, context: InsightContext) -> dict[str, Any]:
        return {"quick_tip": QUICK_TIPS.get(context.profile.biggest_problem, DEFAULT_QUICK_TIP)}


@dataclass
class OperationsPlan:
    """Gear list for in-house shippers, migration timeline for the Australian 3PL paths."""

    name: str = "operations_plan"

    def compute(self, context: InsightContext) -> dict[str, Any]:
        orders = context.profile.monthly_orders
        plan: dict[str, Any] = {"gear_list": None, "migration_timeline": None}
        if context.strategy is FulfillmentStrategy.DIY:
            plan["gear_list"] = list(GEAR_LISTS[gear_band(orders)])
        if context.strategy in AUS_STRATEGIES:
            plan["migration_timeline"] = [step.format(orders=orders) for step in MIGRATION_MILESTONES]
        return plan


@dataclass
class PackagingCost:
    name: str = "packaging_cost"

    def compute(self, context: InsightContext) -> dict[str, Any]:
        if context.strategy not in PACKAGING_STRATEGIES:
            return {"packaging_cost_estimate": None}
        profile = context.profile
        return {"packaging_cost_estimate": packaging_cost(profile.package_size, profile.monthly_orders)}


@dataclass
class ReturnsRisk:
    name: str = "returns_risk"

    def compute(self, context: InsightContext) -> dict[str, Any]:
        alert = RETURNS_RISK_ALERT if context.profile.category in RETURNS_RISK_CATEGORIES else None
        return {"returns_risk_alert": alert}


@dataclass
class CaseStudy:
    name: str = "case_study"

    def compute(self, context: InsightContext) -> dict[str, Any]:
        return {"case_study": CASE_STUDIES[context.strategy]}


@dataclass
class CustomsCheatSheet:
    name: str = "customs_cheatsheet"

    def compute(self, context: InsightContext) -> dict[str, Any]:
        if context.strategy is not FulfillmentStrategy.CHINA_3PL:
            return {"cheatsheet_link": None}
        return {"cheatsheet_link": context.settings.cheatsheet_url}
