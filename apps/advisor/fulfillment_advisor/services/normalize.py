from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .. import bands
from ..bands import (
    CustomerLocation,
    DeliveryExpectation,
    OrderVolume,
    PackageSize,
    PackageWeight,
    ShippingCost,
    ShippingMethod,
    ShippingProblem,
    SkuRange,
)
from ..schemas import SurveyResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizedProfile:
    monthly_orders: int
    sku_count: int
    avg_weight_kg: float
    is_from_china: bool
    is_global_focus: bool
    has_international_customers: bool
    fast_delivery_expected: bool
    package_size: PackageSize
    shipping_cost: ShippingCost

    order_volume: OrderVolume
    sku_range: SkuRange
    package_weight: PackageWeight
    customer_location: CustomerLocation
    shipping_method: ShippingMethod
    biggest_problem: ShippingProblem
    delivery_expectation: DeliveryExpectation

    has_website: bool
    category: str | None
    # Survey fields that fell back to their default band.
    defaulted_fields: tuple[str, ...] = ()

    @property
    def shipping_cost_rank(self) -> int:
        return bands.SHIPPING_COST_RANK[self.shipping_cost]

    @property
    def international_exposure(self) -> int:
        return bands.INTERNATIONAL_EXPOSURE[self.customer_location]

    @property
    def ships_from_home(self) -> bool:
        return self.shipping_method is ShippingMethod.HOME_GARAGE


def _package_size_keyword(lower: str) -> PackageSize | None:
    # "very large" must be tested before "large".
    if "very large" in lower or "oversized" in lower:
        return PackageSize.XL
    if "large" in lower:
        return PackageSize.L
    if "medium" in lower or "shoebox" in lower:
        return PackageSize.M
    if "small" in lower:
        return PackageSize.S
    return None


def _customer_location_keyword(lower: str) -> CustomerLocation | None:
    if "international" in lower:
        if "mostly au" in lower:
            return CustomerLocation.MOSTLY_AU
        if "half" in lower:
            return CustomerLocation.HALF
        if "mostly" in lower:
            return CustomerLocation.MOSTLY_INTERNATIONAL
        return CustomerLocation.INTERNATIONAL_ONLY
    if "domestic" in lower or "australia" in lower:
        return CustomerLocation.AU_ONLY
    return None


def _shipping_method_keyword(lower: str) -> ShippingMethod | None:
    if "china" in lower:
        return ShippingMethod.CHINA_3PL
    if "home" in lower or "garage" in lower:
        return ShippingMethod.HOME_GARAGE
    if "3pl" in lower:
        return ShippingMethod.AU_3PL
    if "warehouse" in lower or "office" in lower:
        return ShippingMethod.OFFICE_WAREHOUSE
    if "dropship" in lower:
        return ShippingMethod.DROPSHIPPING
    return None


KEYWORD_RULES = {
    PackageSize: _package_size_keyword,
    CustomerLocation: _customer_location_keyword,
    ShippingMethod: _shipping_method_keyword,
}


def _resolve(band: type[Enum], raw: str | None, field_name: str, defaulted: list[str]) -> Enum:
    found = bands.lookup(band, raw)
    if found is None and band in KEYWORD_RULES:
        found = KEYWORD_RULES[band]((raw or "").lower())
    if found is None:
        defaulted.append(field_name)
        return bands.DEFAULTS[band]
    return found


def normalize(survey: SurveyResponse) -> NormalizedProfile:
    """Map raw survey answers onto numeric bands and flags. Unknown answers resolve to defaults."""
    defaulted: list[str] = []

    order_volume = _resolve(OrderVolume, survey.monthly_orders_choice, "monthly_orders_choice", defaulted)
    sku_range = _resolve(SkuRange, survey.sku_range_choice, "sku_range_choice", defaulted)
    package_weight = _resolve(PackageWeight, survey.package_weight_choice, "package_weight_choice", defaulted)
    package_size = _resolve(PackageSize, survey.package_size_choice, "package_size_choice", defaulted)
    location = _resolve(CustomerLocation, survey.customer_location_choice, "customer_location_choice", defaulted)
    method = _resolve(ShippingMethod, survey.current_shipping_method, "current_shipping_method", defaulted)
    problem = _resolve(ShippingProblem, survey.biggest_shipping_problem, "biggest_shipping_problem", defaulted)
    delivery = _resolve(
        DeliveryExpectation, survey.delivery_expectation_choice, "delivery_expectation_choice", defaulted
    )
    cost = _resolve(ShippingCost, survey.shipping_cost_choice, "shipping_cost_choice", defaulted)

    location_lower = survey.customer_location_choice.lower()
    has_international = "international" in location_lower

    profile = NormalizedProfile(
        monthly_orders=bands.MONTHLY_ORDERS[order_volume],
        sku_count=bands.SKU_COUNTS[sku_range],
        avg_weight_kg=bands.WEIGHT_KG[package_weight],
        is_from_china="china" in survey.current_shipping_method.lower(),
        is_global_focus=has_international and "mostly au" not in location_lower,
        has_international_customers=has_international,
        fast_delivery_expected=delivery is DeliveryExpectation.SAME_NEXT_DAY,
        package_size=package_size,
        shipping_cost=cost,
        order_volume=order_volume,
        sku_range=sku_range,
        package_weight=package_weight,
        customer_location=location,
        shipping_method=method,
        biggest_problem=problem,
        delivery_expectation=delivery,
        has_website=bool(survey.website_url.strip()),
        category=(survey.category or "").strip() or None,
        defaulted_fields=tuple(defaulted),
    )
    if defaulted:
        logger.debug("survey answers fell back to defaults: %s", ", ".join(defaulted))
    return profile
