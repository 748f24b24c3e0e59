import pytest
from pydantic import ValidationError

from fulfillment_advisor.bands import (
    CustomerLocation,
    OrderVolume,
    PackageSize,
    ShippingCost,
    ShippingMethod,
    ShippingProblem,
)
from fulfillment_advisor.schemas import SurveyResponse
from fulfillment_advisor.services.normalize import normalize

from conftest import BASE_ANSWERS


@pytest.mark.parametrize(
    ("choice", "orders"),
    [
        ("Under 100", 50),
        ("100 – 300", 200),
        ("300 – 500", 400),
        ("500 – 1 000", 800),
        ("1 000 – 2 000", 1500),
        ("2 000+", 2500),
    ],
)
def test_order_volume_bands(make_survey, choice: str, orders: int) -> None:
    assert normalize(make_survey(monthly_orders_choice=choice)).monthly_orders == orders


def test_unknown_answers_fall_back_to_defaults(make_survey) -> None:
    profile = normalize(
        make_survey(
            monthly_orders_choice="loads",
            sku_range_choice="",
            package_weight_choice="heavy-ish",
            package_size_choice="",
            shipping_cost_choice="cheap",
            delivery_expectation_choice="whenever",
            biggest_shipping_problem="everything",
        )
    )
    assert profile.monthly_orders == 50
    assert profile.order_volume is OrderVolume.UNDER_100
    assert profile.sku_count == 100
    assert profile.avg_weight_kg == 1.5
    assert profile.package_size is PackageSize.M
    assert profile.shipping_cost is ShippingCost.UNKNOWN
    assert profile.shipping_cost_rank == 0
    assert profile.fast_delivery_expected is False
    assert profile.biggest_problem is ShippingProblem.OTHER
    assert set(profile.defaulted_fields) == {
        "monthly_orders_choice",
        "sku_range_choice",
        "package_weight_choice",
        "package_size_choice",
        "shipping_cost_choice",
        "delivery_expectation_choice",
        "biggest_shipping_problem",
    }


def test_lookups_are_exact_not_fuzzy(make_survey) -> None:
    profile = normalize(make_survey(monthly_orders_choice="500 - 1 000 orders"))
    assert profile.order_volume is OrderVolume.UNDER_100
    assert "monthly_orders_choice" in profile.defaulted_fields


def test_legacy_phrasings_are_accepted(make_survey) -> None:
    profile = normalize(
        make_survey(
            shipping_cost_choice="Over $20 per order",
            biggest_shipping_problem="Hard to manage returns",
            monthly_orders_choice="2000+",
        )
    )
    assert profile.shipping_cost is ShippingCost.OVER_20
    assert profile.shipping_cost_rank == 5
    assert profile.biggest_problem is ShippingProblem.RETURNS
    assert profile.monthly_orders == 2500
    assert profile.defaulted_fields == ()


def test_sku_over_300_maps_above_split_limit(make_survey) -> None:
    assert normalize(make_survey(sku_range_choice="300+")).sku_count == 600


@pytest.mark.parametrize(
    ("location", "has_international", "global_focus"),
    [
        ("Australia only", False, False),
        ("Mostly AU, some international", True, False),
        ("Half AU, half international", True, True),
        ("Mostly international", True, True),
        ("International only", True, True),
    ],
)
def test_customer_location_flags(make_survey, location: str, has_international: bool, global_focus: bool) -> None:
    profile = normalize(make_survey(customer_location_choice=location))
    assert profile.has_international_customers is has_international
    assert profile.is_global_focus is global_focus


def test_china_flag_is_case_insensitive_substring(make_survey) -> None:
    profile = normalize(make_survey(current_shipping_method="Our supplier ships from CHINA"))
    assert profile.is_from_china is True
    assert profile.shipping_method is ShippingMethod.CHINA_3PL
    assert "current_shipping_method" not in profile.defaulted_fields


def test_keyword_fallbacks_for_size_and_location(make_survey) -> None:
    profile = normalize(
        make_survey(package_size_choice="very large boxes", customer_location_choice="Domestic only")
    )
    assert profile.package_size is PackageSize.XL
    assert profile.customer_location is CustomerLocation.AU_ONLY


def test_fast_delivery_and_website_flags(make_survey) -> None:
    profile = normalize(make_survey(delivery_expectation_choice="Same / next day", website_url="   "))
    assert profile.fast_delivery_expected is True
    assert profile.has_website is False


def test_volume_range_key_is_accepted() -> None:
    answers = {k: v for k, v in BASE_ANSWERS.items() if k != "monthly_orders_choice"}
    survey = SurveyResponse.model_validate({**answers, "volume_range": "2 000+"})
    assert survey.monthly_orders_choice == "2 000+"


def test_missing_required_field_is_a_contract_violation() -> None:
    answers = {k: v for k, v in BASE_ANSWERS.items() if k != "shipping_cost_choice"}
    with pytest.raises(ValidationError):
        SurveyResponse.model_validate(answers)


def test_survey_is_immutable(make_survey) -> None:
    survey = make_survey()
    with pytest.raises(ValidationError):
        survey.full_name = "Someone Else"
