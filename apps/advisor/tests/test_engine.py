import pytest

from fulfillment_advisor.schemas import FulfillmentStrategy
from fulfillment_advisor.services.engine import PAGE_IDS, generate_result
from fulfillment_advisor.services.insights.base import InsightContext


def test_small_shop_ships_itself(make_survey, settings) -> None:
    result = generate_result(make_survey(monthly_orders_choice="Under 100"), settings=settings)

    assert result.strategy is FulfillmentStrategy.DIY
    assert result.page_id == "DIY_PAGE"
    assert "Shipping Orders Yourself" in result.content.title
    assert result.savings.savings_per_order == 0.5
    assert result.savings.total_monthly_savings == 25.0
    assert result.savings_curve == []
    assert result.content.cta_url == settings.diy_toolkit_url
    assert result.insights.gear_list
    assert result.insights.speed_gain_days == 0
    assert result.insights.confidence_level == "Medium"


def test_mostly_domestic_mid_volume_goes_to_australian_3pl(make_survey, settings) -> None:
    survey = make_survey(
        monthly_orders_choice="500 – 1 000",
        current_shipping_method="Home / garage",
        customer_location_choice="Mostly AU, some international",
        delivery_expectation_choice="2-3 days",
    )
    result = generate_result(survey, settings=settings)

    assert result.strategy is FulfillmentStrategy.AUS_3PL
    assert result.page_id == "AUS1_PAGE"
    assert result.savings.savings_per_order == 3.0
    assert result.savings.total_monthly_savings == 2400.0
    assert result.insights.lane == "AUS_INTL"
    assert result.insights.migration_timeline
    assert result.savings_curve[0].orders == 800
    assert result.savings_curve[-1].orders == 2000


def test_light_china_parcels_stay_with_china_3pl(make_survey, settings) -> None:
    survey = make_survey(
        monthly_orders_choice="1 000 – 2 000",
        current_shipping_method="3PL in China",
        package_weight_choice="Under 0.5 kg",
    )
    result = generate_result(survey, settings=settings)

    assert result.strategy is FulfillmentStrategy.CHINA_3PL
    assert result.page_id == "CN_PAGE"
    assert result.savings.savings_per_order == 10.0
    assert result.savings.total_monthly_savings == 15000.0
    assert result.insights.lane == "CN_GLOBAL"
    assert result.insights.cheatsheet_link == settings.cheatsheet_url
    assert result.insights.carrier_headline == "SF Express International"


def test_fast_delivery_at_scale_goes_multi_warehouse(make_survey, settings) -> None:
    survey = make_survey(
        monthly_orders_choice="2 000+",
        delivery_expectation_choice="Same / next day",
        current_shipping_method="3PL in Australia",
    )
    result = generate_result(survey, settings=settings)

    assert result.strategy is FulfillmentStrategy.AUS_MULTI
    assert result.page_id == "AUS_MULTI_PAGE"
    assert result.savings.total_monthly_savings == 10000.0
    assert result.insights.confidence_level == "Medium"
    assert result.insights.assumptions == ["Monthly order range very broad – savings calculated with midpoint"]


def test_result_is_deterministic(make_survey, settings) -> None:
    first = generate_result(make_survey(), settings=settings)
    second = generate_result(make_survey(), settings=settings)
    assert first == second


def test_missing_name_uses_fallback_greeting(make_survey, settings) -> None:
    result = generate_result(make_survey(full_name="   "), settings=settings)
    assert result.content.first_name == "Friend"
    assert result.content.greeting.startswith("Friend - ")


def test_unrecognised_answers_are_listed_as_assumptions(make_survey, settings) -> None:
    result = generate_result(make_survey(shipping_cost_choice="no idea"), settings=settings)
    assert result.insights.confidence_level == "High"
    assert "No recognised answer for shipping cost – used the default band" in result.insights.assumptions


def test_every_strategy_has_a_page() -> None:
    assert set(PAGE_IDS) == set(FulfillmentStrategy)


def test_custom_insight_list_is_used(make_survey, settings) -> None:
    seen: list[FulfillmentStrategy] = []

    class Recorder:
        name = "recorder"

        def compute(self, context: InsightContext) -> dict:
            seen.append(context.strategy)
            return {}

    with pytest.raises(ValueError):
        # An incomplete insight list cannot build a full result.
        generate_result(make_survey(), settings=settings, insights=[Recorder()])
    assert seen == [FulfillmentStrategy.AUS_3PL]
