from __future__ import annotations

from ..schemas import Content, FulfillmentStrategy, InsightSet

BOOKING_TOPIC = {
    FulfillmentStrategy.DIY: "diy",
    FulfillmentStrategy.AUS_3PL: "aus1",
    FulfillmentStrategy.AUS_MULTI: "ausmulti",
    FulfillmentStrategy.CHINA_3PL: "cn",
}

# Each computed insight is preceded by one of these labels.
LABEL_HEALTH = "Shipping Health:"
LABEL_DUTY = "Duties & Taxes:"
LABEL_CO2 = "Carbon Footprint:"
LABEL_INVENTORY = "Inventory:"
LABEL_CARRIER = "Best Carrier:"
LABEL_WEIGHT = "Weight Pricing:"
LABEL_WAREHOUSE = "Warehouse Costs:"
LABEL_CONFIDENCE = "Confidence:"
LABEL_ASSUMPTIONS = "Assumptions:"

UNIVERSAL_FOOTER_TITLE = "Our Clients Are Shipping 3+ Million Orders Every Year"
UNIVERSAL_FOOTER_DESCRIPTION = (
    "We work with hundreds of leading Aussie and Kiwi brands to help them scale to new heights.\n"
    "Our warehouse teams are an extension of your team, and we pride ourselves on providing best-in-class "
    "customer support."
)
TESTIMONIALS = [
    (
        "Working with Future feels like having our very own warehouse - they deliver exceptional support",
        "Manny Barbas, Sascha Therese",
    ),
    (
        "I was no longer packing orders from morning to night, instead I could really focus on marketing",
        "Justin Clacher, 4WD Detail",
    ),
    (
        "I would recommend Future to anyone that has a growing ecommerce business",
        "Drew Baird, Health & Balance Vitamins",
    ),
    (
        "Future saved us over $2 per order, significantly boosting our profits - It's been a game changer",
        "Gretta Van Riel, SMT",
    ),
]

PROGRESS_WIDTH = 10


def booking_url(base_url: str, strategy: FulfillmentStrategy) -> str:
    # Query string goes before any fragment.
    head, hash_mark, fragment = base_url.partition("#")
    separator = "&" if "?" in head else "?"
    return f"{head}{separator}topic={BOOKING_TOPIC[strategy]}{hash_mark}{fragment}"


def _progress_bar(pct: int) -> str:
    filled = round(pct / 100 * PROGRESS_WIDTH)
    return f"[{'#' * filled}{'-' * (PROGRESS_WIDTH - filled)}] {pct}%"


def _bullets(items: list[str]) -> list[str]:
    return [f"- {item}" for item in items]


def _numbered(items: list[str]) -> list[str]:
    return [f"{i}. {item}" for i, item in enumerate(items, start=1)]


def render(strategy: FulfillmentStrategy, content: Content, insights: InsightSet) -> str:
    """Assemble the recommendation as one text document with a fixed section order."""
    body: list[str] = []

    body.append(f"# {content.title}")
    body.append(content.greeting)
    body.append("")
    body.append(content.description)
    body.append("")
    body.append(content.savings_headline)
    body.append(f"Readiness: {_progress_bar(insights.readiness_score_pct)}")
    body.append(f"You're {insights.readiness_score_pct}% ready for smooth fulfilment.")
    body.append("")

    body.extend(_bullets(content.benefits))
    body.append("")

    if insights.speed_gain_days > 0:
        body.append(f"Speed Gain: −{insights.speed_gain_days} days")
    if content.note:
        body.append(content.note)

    if insights.gear_list:
        body.append("")
        body.append("## Recommended Gear")
        body.extend(_bullets(insights.gear_list))
    elif insights.migration_timeline:
        body.append("")
        body.append("## Migration Timeline")
        body.extend(_numbered(insights.migration_timeline))

    if insights.packaging_cost_estimate is not None:
        body.append("")
        body.append(f"Your current packaging spend is about ${insights.packaging_cost_estimate} per month.")
    if insights.returns_risk_alert:
        body.append(f"Heads up: {insights.returns_risk_alert}")
    body.append(f"Quick Tip: {insights.quick_tip}")
    body.append("")

    body.append("## Insights")
    body.append(f"{LABEL_HEALTH} {insights.shipping_health_score}%")
    body.append(insights.margin_alert_text)
    body.append(f"{LABEL_DUTY} {insights.duty_text}")
    body.append(f"{LABEL_CO2} {insights.co2_text}")
    body.append(f"{LABEL_INVENTORY} {insights.inventory_alert_text}")
    body.append(f"{LABEL_CARRIER} {insights.carrier_headline}")
    body.append(insights.carrier_tip)
    body.append(f"{LABEL_WEIGHT} {insights.weight_education_text}")
    body.append(f"{LABEL_WAREHOUSE} {insights.warehouse_cost_text}")
    body.append("")
    body.append(f"> {insights.case_study}")
    body.append("")

    body.append(f"## {content.cta_title}")
    body.append(content.cta_text)
    body.append(booking_url(content.cta_url, strategy))
    if insights.cheatsheet_link:
        body.append(f"Download Customs & Duties Cheat-Sheet: {insights.cheatsheet_link}")
    body.append("")

    body.append(f"{LABEL_CONFIDENCE} {insights.confidence_level}")
    if insights.assumptions:
        body.append(f"{LABEL_ASSUMPTIONS} {'; '.join(insights.assumptions)}")
    body.append("")

    body.append(f"## {UNIVERSAL_FOOTER_TITLE}")
    body.append(UNIVERSAL_FOOTER_DESCRIPTION)
    body.extend(_bullets([f'"{quote}" — {author}' for quote, author in TESTIMONIALS]))

    return "\n".join(body) + "\n"
