from typing import Any, Callable

import pytest

from fulfillment_advisor.config import Settings
from fulfillment_advisor.schemas import SurveyResponse

BASE_ANSWERS: dict[str, Any] = {
    "full_name": "Jordan Taylor",
    "email": "jordan@example.com",
    "phone": "+61400000000",
    "website_url": "https://example.com",
    "products": "Home & Living, Other",
    "package_weight_choice": "1 kg – 2 kg",
    "package_size_choice": "Medium (shoebox)",
    "monthly_orders_choice": "500 – 1 000",
    "customer_location_choice": "Australia only",
    "current_shipping_method": "Home / garage",
    "biggest_shipping_problem": "Takes too much time",
    "sku_range_choice": "26-100",
    "delivery_expectation_choice": "2-3 days",
    "shipping_cost_choice": "$10-$15",
    "category": "Home & Living",
}


@pytest.fixture()
def settings() -> Settings:
    # Isolated from any local .env file.
    return Settings(_env_file=None)


@pytest.fixture()
def make_survey() -> Callable[..., SurveyResponse]:
    def _make(**overrides: Any) -> SurveyResponse:
        return SurveyResponse(**{**BASE_ANSWERS, **overrides})

    return _make
