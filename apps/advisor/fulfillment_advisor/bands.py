from __future__ import annotations

from enum import Enum


class OrderVolume(str, Enum):
    UNDER_100 = "Under 100"
    FROM_100 = "100 – 300"
    FROM_300 = "300 – 500"
    FROM_500 = "500 – 1 000"
    FROM_1000 = "1 000 – 2 000"
    OVER_2000 = "2 000+"


class SkuRange(str, Enum):
    UP_TO_25 = "1-25"
    UP_TO_100 = "26-100"
    UP_TO_300 = "101-300"
    OVER_300 = "300+"


class PackageWeight(str, Enum):
    UNDER_HALF_KG = "Under 0.5 kg"
    UP_TO_1_KG = "0.5 kg – 1 kg"
    UP_TO_2_KG = "1 kg – 2 kg"
    UP_TO_5_KG = "2 kg – 5 kg"
    OVER_5_KG = "Over 5 kg"


class PackageSize(str, Enum):
    S = "Small (<3 cm thick)"
    M = "Medium (shoebox)"
    L = "Large (briefcase)"
    XL = "Very large (oversized)"


class CustomerLocation(str, Enum):
    AU_ONLY = "Australia only"
    MOSTLY_AU = "Mostly AU, some international"
    HALF = "Half AU, half international"
    MOSTLY_INTERNATIONAL = "Mostly international"
    INTERNATIONAL_ONLY = "International only"


class ShippingMethod(str, Enum):
    HOME_GARAGE = "Home / garage"
    OFFICE_WAREHOUSE = "Office / warehouse"
    AU_3PL = "3PL in Australia"
    CHINA_3PL = "3PL in China"
    DROPSHIPPING = "Dropshipping"
    OTHER = "Other"


class ShippingProblem(str, Enum):
    COSTS = "Costs too high"
    TIME = "Takes too much time"
    SLOW_DELIVERY = "Delivery too slow"
    INTERNATIONAL = "International complexity"
    COMPLAINTS = "Customer complaints"
    RETURNS = "Hard returns"
    PACKAGING = "Packaging issues"
    TRACKING = "Tracking problems"
    STOCKOUTS = "Stockouts"
    OTHER = "Other"


class DeliveryExpectation(str, Enum):
    SAME_NEXT_DAY = "Same / next day"
    TWO_TO_THREE_DAYS = "2-3 days"
    THREE_TO_FIVE_DAYS = "3-5 days"
    UNKNOWN = "Unknown"


class ShippingCost(str, Enum):
    UNDER_5 = "<$5"
    FROM_5 = "$5-$10"
    FROM_10 = "$10-$15"
    FROM_15 = "$15-$20"
    OVER_20 = ">$20"
    UNKNOWN = "Unknown"


MONTHLY_ORDERS: dict[OrderVolume, int] = {
    OrderVolume.UNDER_100: 50,
    OrderVolume.FROM_100: 200,
    OrderVolume.FROM_300: 400,
    OrderVolume.FROM_500: 800,
    OrderVolume.FROM_1000: 1500,
    OrderVolume.OVER_2000: 2500,
}

SKU_COUNTS: dict[SkuRange, int] = {
    SkuRange.UP_TO_25: 25,
    SkuRange.UP_TO_100: 100,
    SkuRange.UP_TO_300: 300,
    SkuRange.OVER_300: 600,
}

WEIGHT_KG: dict[PackageWeight, float] = {
    PackageWeight.UNDER_HALF_KG: 0.25,
    PackageWeight.UP_TO_1_KG: 0.75,
    PackageWeight.UP_TO_2_KG: 1.5,
    PackageWeight.UP_TO_5_KG: 3.5,
    PackageWeight.OVER_5_KG: 6.0,
}

# Ordinal of how international the customer base is.
INTERNATIONAL_EXPOSURE: dict[CustomerLocation, int] = {
    CustomerLocation.AU_ONLY: 0,
    CustomerLocation.MOSTLY_AU: 1,
    CustomerLocation.HALF: 2,
    CustomerLocation.MOSTLY_INTERNATIONAL: 3,
    CustomerLocation.INTERNATIONAL_ONLY: 4,
}

SHIPPING_COST_RANK: dict[ShippingCost, int] = {
    ShippingCost.UNKNOWN: 0,
    ShippingCost.UNDER_5: 1,
    ShippingCost.FROM_5: 2,
    ShippingCost.FROM_10: 3,
    ShippingCost.FROM_15: 4,
    ShippingCost.OVER_20: 5,
}

# Phrasings used by earlier revisions of the survey.
ALIASES: dict[type[Enum], dict[str, Enum]] = {
    PackageWeight: {
        "Under 0.5kg": PackageWeight.UNDER_HALF_KG,
        "0.5kg – 1kg": PackageWeight.UP_TO_1_KG,
        "1kg – 2kg": PackageWeight.UP_TO_2_KG,
        "2kg – 5kg": PackageWeight.UP_TO_5_KG,
        "Over 5kg": PackageWeight.OVER_5_KG,
    },
    OrderVolume: {
        "100-300": OrderVolume.FROM_100,
        "300-500": OrderVolume.FROM_300,
        "500 – 1000": OrderVolume.FROM_500,
        "500–1000": OrderVolume.FROM_500,
        "500-1000": OrderVolume.FROM_500,
        "1000 – 2000": OrderVolume.FROM_1000,
        "1000–2000": OrderVolume.FROM_1000,
        "1000-2000": OrderVolume.FROM_1000,
        "2000+": OrderVolume.OVER_2000,
    },
    ShippingCost: {
        "Under $5 per order": ShippingCost.UNDER_5,
        "$5-$10 per order": ShippingCost.FROM_5,
        "$10-$15 per order": ShippingCost.FROM_10,
        "$15-$20 per order": ShippingCost.FROM_15,
        "Over $20 per order": ShippingCost.OVER_20,
    },
    ShippingProblem: {
        "Costs too much": ShippingProblem.COSTS,
        "Too expensive": ShippingProblem.COSTS,
        "Takes too long": ShippingProblem.TIME,
        "Slow delivery": ShippingProblem.SLOW_DELIVERY,
        "Hard to manage returns": ShippingProblem.RETURNS,
        "Packaging waste": ShippingProblem.PACKAGING,
        "Hard to track inventory": ShippingProblem.TRACKING,
    },
    DeliveryExpectation: {
        "Same/next day": DeliveryExpectation.SAME_NEXT_DAY,
        "Same day": DeliveryExpectation.SAME_NEXT_DAY,
        "Next day": DeliveryExpectation.SAME_NEXT_DAY,
    },
    CustomerLocation: {},
    ShippingMethod: {
        "Home/garage": ShippingMethod.HOME_GARAGE,
        "Office/warehouse": ShippingMethod.OFFICE_WAREHOUSE,
    },
    PackageSize: {},
    SkuRange: {},
}

DEFAULTS: dict[type[Enum], Enum] = {
    OrderVolume: OrderVolume.UNDER_100,
    SkuRange: SkuRange.UP_TO_100,
    PackageWeight: PackageWeight.UP_TO_2_KG,
    PackageSize: PackageSize.M,
    CustomerLocation: CustomerLocation.AU_ONLY,
    ShippingMethod: ShippingMethod.OTHER,
    ShippingProblem: ShippingProblem.OTHER,
    DeliveryExpectation: DeliveryExpectation.UNKNOWN,
    ShippingCost: ShippingCost.UNKNOWN,
}


def lookup(band: type[Enum], raw: str | None) -> Enum | None:
    """Exact match against a band's choices, then its alias table. No fuzzy matching."""
    value = (raw or "").strip()
    if not value:
        return None
    try:
        return band(value)
    except ValueError:
        return ALIASES.get(band, {}).get(value)
