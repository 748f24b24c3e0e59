from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


ConfidenceLevel = Literal["High", "Medium", "Low"]
Lane = Literal["AUS_DOM", "AUS_INTL", "CN_GLOBAL"]


class FulfillmentStrategy(str, Enum):
    DIY = "DIY"
    AUS_3PL = "AUS_3PL"
    AUS_MULTI = "AUS_MULTI"
    CHINA_3PL = "CHINA_3PL"


class SurveyResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    full_name: str
    email: str
    phone: str
    website_url: str
    products: str
    package_weight_choice: str
    package_size_choice: str
    # The survey UI posts this answer as `volume_range`.
    monthly_orders_choice: str = Field(validation_alias=AliasChoices("monthly_orders_choice", "volume_range"))
    customer_location_choice: str
    current_shipping_method: str
    biggest_shipping_problem: str
    sku_range_choice: str
    delivery_expectation_choice: str
    shipping_cost_choice: str
    category: str | None = None


class SavingsProjection(BaseModel):
    savings_per_order: float = Field(..., ge=0)
    monthly_orders: int = Field(..., ge=0)
    total_monthly_savings: float = Field(..., ge=0)


class SavingsPoint(BaseModel):
    orders: int
    monthly_saving: int


class Content(BaseModel):
    first_name: str
    greeting: str
    title: str
    description: str
    benefits: list[str]
    savings_headline: str
    cta_title: str
    cta_text: str
    cta_url: str
    note: str | None = None


class CarbonEstimate(BaseModel):
    lane: Lane
    transport_mode: str
    distance_km: float
    co2e_kg: float = Field(..., ge=0)
    sea_freight_co2e_kg: float = Field(..., ge=0)
    reduction_pct: float = Field(..., ge=0, le=100)
    text: str


class WarehouseEstimate(BaseModel):
    pallets: int = Field(..., ge=0)
    monthly_cost_aud: float = Field(..., ge=0)
    comparison_cost_aud: float | None = None
    delta_aud: float | None = None
    inventory_alert_text: str
    warehouse_cost_text: str


class CarrierPick(BaseModel):
    id: str
    lane: Lane
    weight_max_kg: float
    headline: str
    tip: str


class InsightSet(BaseModel):
    shipping_health_score: int = Field(..., ge=35, le=95)
    duty_text: str
    co2_text: str
    margin_alert_text: str
    inventory_alert_text: str
    carrier_headline: str
    carrier_tip: str
    weight_education_text: str
    warehouse_cost_text: str
    confidence_level: ConfidenceLevel
    assumptions: list[str]

    lane: Lane
    carbon: CarbonEstimate
    warehouse: WarehouseEstimate
    readiness_score_pct: int = Field(..., ge=0, le=100)
    speed_gain_days: int = Field(..., ge=0)
    quick_tip: str
    gear_list: list[str] | None = None
    migration_timeline: list[str] | None = None
    packaging_cost_estimate: int | None = None
    returns_risk_alert: str | None = None
    case_study: str
    cheatsheet_link: str | None = None


class ResultDocument(BaseModel):
    strategy: FulfillmentStrategy
    page_id: str
    content: Content
    savings: SavingsProjection
    insights: InsightSet
    savings_curve: list[SavingsPoint]
    rendered_document: str
