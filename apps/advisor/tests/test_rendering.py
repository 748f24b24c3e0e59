import pytest

from fulfillment_advisor.schemas import FulfillmentStrategy
from fulfillment_advisor.services.engine import generate_result
from fulfillment_advisor.services.rendering import (
    LABEL_ASSUMPTIONS,
    LABEL_CARRIER,
    LABEL_CO2,
    LABEL_CONFIDENCE,
    LABEL_DUTY,
    LABEL_HEALTH,
    LABEL_INVENTORY,
    LABEL_WAREHOUSE,
    LABEL_WEIGHT,
    UNIVERSAL_FOOTER_TITLE,
    booking_url,
)


def _positions(document: str, markers: list[str]) -> list[int]:
    positions = []
    for marker in markers:
        assert marker in document, marker
        positions.append(document.index(marker))
    return positions


@pytest.mark.parametrize(
    ("base", "expected"),
    [
        ("https://example.com/book", "https://example.com/book?topic=aus1"),
        ("https://example.com/book?invite=abc", "https://example.com/book?invite=abc&topic=aus1"),
        ("https://example.com/ausnz#section-1", "https://example.com/ausnz?topic=aus1#section-1"),
    ],
)
def test_booking_url(base: str, expected: str) -> None:
    assert booking_url(base, FulfillmentStrategy.AUS_3PL) == expected


def test_insight_labels_follow_fixed_order(make_survey, settings) -> None:
    document = generate_result(make_survey(), settings=settings).rendered_document
    positions = _positions(
        document,
        [
            LABEL_HEALTH,
            LABEL_DUTY,
            LABEL_CO2,
            LABEL_INVENTORY,
            LABEL_CARRIER,
            LABEL_WEIGHT,
            LABEL_WAREHOUSE,
            LABEL_CONFIDENCE,
        ],
    )
    assert positions == sorted(positions)


def test_document_sections_follow_fixed_order(make_survey, settings) -> None:
    result = generate_result(make_survey(monthly_orders_choice="Under 100", website_url=""), settings=settings)
    document = result.rendered_document
    positions = _positions(
        document,
        [
            f"# {result.content.title}",
            result.content.greeting,
            result.content.savings_headline,
            "Readiness: [",
            result.content.benefits[0],
            "## Recommended Gear",
            "Your current packaging spend is about $",
            "Quick Tip:",
            "## Insights",
            f"> {result.insights.case_study}",
            f"## {result.content.cta_title}",
            LABEL_CONFIDENCE,
            LABEL_ASSUMPTIONS,
            f"## {UNIVERSAL_FOOTER_TITLE}",
        ],
    )
    assert positions == sorted(positions)


def test_no_speed_badge_for_diy(make_survey, settings) -> None:
    result = generate_result(make_survey(monthly_orders_choice="Under 100"), settings=settings)
    assert result.strategy is FulfillmentStrategy.DIY
    assert "Speed Gain:" not in result.rendered_document
    assert "## Migration Timeline" not in result.rendered_document


def test_australian_3pl_document(make_survey, settings) -> None:
    document = generate_result(make_survey(), settings=settings).rendered_document
    assert "Speed Gain: −1 days" in document
    assert "## Migration Timeline" in document
    assert "1. Contract signed & 800 units inbound to warehouse" in document
    assert "## Recommended Gear" not in document
    assert "Cheat-Sheet" not in document
    assert booking_url(settings.strategy_call_url, FulfillmentStrategy.AUS_3PL) in document


def test_china_document_links_cheatsheet(make_survey, settings) -> None:
    survey = make_survey(current_shipping_method="3PL in China", package_weight_choice="Under 0.5 kg")
    document = generate_result(survey, settings=settings).rendered_document
    assert f"Download Customs & Duties Cheat-Sheet: {settings.cheatsheet_url}" in document
    assert "Your current packaging spend" not in document


def test_returns_risk_alert_is_rendered(make_survey, settings) -> None:
    document = generate_result(make_survey(category="Clothing & Accessories"), settings=settings).rendered_document
    assert "Heads up: Products in this category see return rates above 20%" in document


def test_document_ends_with_newline(make_survey, settings) -> None:
    assert generate_result(make_survey(), settings=settings).rendered_document.endswith("\n")
