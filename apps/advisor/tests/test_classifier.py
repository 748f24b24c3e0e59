from dataclasses import replace
from itertools import product

import pytest

from fulfillment_advisor.bands import MONTHLY_ORDERS, WEIGHT_KG, CustomerLocation, DeliveryExpectation
from fulfillment_advisor.schemas import FulfillmentStrategy
from fulfillment_advisor.services.classifier import classify
from fulfillment_advisor.services.normalize import normalize


@pytest.fixture()
def profile(make_survey):
    return normalize(make_survey())


@pytest.mark.parametrize("orders", [50, 200, 400, 499])
def test_low_volume_is_always_diy(profile, orders: int) -> None:
    for china, global_focus, fast in product([True, False], repeat=3):
        candidate = replace(
            profile,
            monthly_orders=orders,
            is_from_china=china,
            is_global_focus=global_focus,
            fast_delivery_expected=fast,
        )
        assert classify(candidate) is FulfillmentStrategy.DIY


def test_heavy_china_parcels_go_to_australian_3pl(profile) -> None:
    heavy = replace(profile, monthly_orders=800, is_from_china=True, avg_weight_kg=6.0)
    assert classify(heavy) is FulfillmentStrategy.AUS_3PL


def test_light_china_parcels_stay_in_china(profile) -> None:
    light = replace(profile, monthly_orders=800, is_from_china=True, avg_weight_kg=1.0)
    assert classify(light) is FulfillmentStrategy.CHINA_3PL


def test_china_takes_precedence_over_global_focus(profile) -> None:
    candidate = replace(profile, monthly_orders=2500, is_from_china=True, is_global_focus=True, avg_weight_kg=0.25)
    assert classify(candidate) is FulfillmentStrategy.CHINA_3PL


def test_global_focus_uses_single_australian_3pl(profile) -> None:
    candidate = replace(profile, monthly_orders=2500, is_global_focus=True, fast_delivery_expected=True)
    assert classify(candidate) is FulfillmentStrategy.AUS_3PL


def test_fast_delivery_splits_small_catalogues(profile) -> None:
    candidate = replace(profile, monthly_orders=800, fast_delivery_expected=True, sku_count=100)
    assert classify(candidate) is FulfillmentStrategy.AUS_MULTI


def test_fast_delivery_with_large_catalogue_stays_single(profile) -> None:
    candidate = replace(profile, monthly_orders=800, fast_delivery_expected=True, sku_count=600)
    assert classify(candidate) is FulfillmentStrategy.AUS_3PL


def test_mid_volume_domestic_is_single_3pl(profile) -> None:
    assert classify(replace(profile, monthly_orders=1500)) is FulfillmentStrategy.AUS_3PL


def test_high_volume_large_catalogue_is_single_3pl(profile) -> None:
    candidate = replace(profile, monthly_orders=2500, sku_count=600)
    assert classify(candidate) is FulfillmentStrategy.AUS_3PL


def test_high_volume_small_catalogue_is_multi_warehouse(profile) -> None:
    candidate = replace(profile, monthly_orders=2500, sku_count=300)
    assert classify(candidate) is FulfillmentStrategy.AUS_MULTI


def test_every_band_combination_yields_a_strategy(make_survey) -> None:
    for volume, weight, location, method, delivery in product(
        MONTHLY_ORDERS,
        WEIGHT_KG,
        CustomerLocation,
        ["Home / garage", "3PL in China", "3PL in Australia"],
        DeliveryExpectation,
    ):
        survey = make_survey(
            monthly_orders_choice=volume.value,
            package_weight_choice=weight.value,
            customer_location_choice=location.value,
            current_shipping_method=method,
            delivery_expectation_choice=delivery.value,
        )
        assert classify(normalize(survey)) in set(FulfillmentStrategy)
