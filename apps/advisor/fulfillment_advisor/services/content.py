from __future__ import annotations

from dataclasses import dataclass

from ..config import Settings, get_settings
from ..schemas import Content, FulfillmentStrategy, SavingsProjection
from .insights.base import format_money


@dataclass(frozen=True)
class ContentBlock:
    title: str
    description: str
    benefits: tuple[str, ...]
    cta_title: str
    cta_text: str
    uses_toolkit_link: bool = False
    note: str | None = None


FUTURE_MATCH_TITLE = "Based on Your Results, Future is the Best 3PL Fit for You"
STRATEGY_CALL_TITLE = "📞 Book Your Free Fulfillment Strategy Call"

CONTENT_BLOCKS: dict[FulfillmentStrategy, ContentBlock] = {
    FulfillmentStrategy.DIY: ContentBlock(
        title="You're Best Off Shipping Orders Yourself (For Now)",
        description=(
            "At your current volume, in-house fulfillment is the smartest move. You're likely doing under 500 "
            "orders/month and don't yet need the cost or complexity of a 3PL.\n"
            "But with a few smart upgrades, you can dramatically reduce time and wasted spend:"
        ),
        benefits=(
            "Use Starshipit, Shippit, or ShipStation to automate label generation and carrier routing",
            "Get a label printer and satchels from your local supplier",
            "Tighten your packaging to reduce cubic weight and avoid carrier penalties",
            "Start tracking your cost-per-order and fulfillment time",
        ),
        cta_title="🎁 Get Our Free Fulfillment Toolkit",
        cta_text="Learn how to reduce your workload and improve margins with our curated DIY playbook.",
        uses_toolkit_link=True,
        note="(Just by switching to OMS tools and optimizing packaging)",
    ),
    FulfillmentStrategy.AUS_3PL: ContentBlock(
        title=FUTURE_MATCH_TITLE,
        description=(
            "Our AI compared 50+ fulfillment providers and Future Fulfillment is your optimal match. You're moving "
            "past 500+ orders/month, which means DIY fulfillment is capping your growth and profits.\n"
            "Switching to Future Fulfillment will give you:"
        ),
        benefits=(
            "Discounted shipping rates via AusPost & CouriersPlease",
            "Barcode-based inventory, returns management, and live order tracking",
            "Reclaimed time to focus on marketing, growth, and ops",
            "Same costs every month – no more surprises",
        ),
        cta_title=STRATEGY_CALL_TITLE,
        cta_text="We'll show you how to transition smoothly and start saving within days.",
    ),
    FulfillmentStrategy.AUS_MULTI: ContentBlock(
        title=FUTURE_MATCH_TITLE,
        description=(
            "Our AI compared 50+ fulfillment providers and Future Fulfillment is your optimal match. With high "
            "order volume across multiple states, central fulfillment is no longer optimal.\n"
            "Future Fulfillment's VIC, NSW, and QLD locations give you:"
        ),
        benefits=(
            "Delivery up to 50% faster, with 30% lower cross-state shipping costs",
            "The ability to serve customers same-day or next-day",
            "Inventory redundancy and smoother replenishment cycles",
            "Better customer reviews and lower refund rates",
        ),
        cta_title=STRATEGY_CALL_TITLE,
        cta_text="We'll map your inventory and show you exactly how much you'll save.",
    ),
    FulfillmentStrategy.CHINA_3PL: ContentBlock(
        title=FUTURE_MATCH_TITLE,
        description=(
            "Our AI compared 50+ fulfillment providers and Future Fulfillment is your optimal match. With your "
            "global customer base and manufacturing in China, our China 3PL gives you:"
        ),
        benefits=(
            "Specialized shipping lines to over 75 countries",
            "Apparel, battery, sensitive, and cosmetic product lines",
            "Express delivery options (3-6 days average)",
            "Premium quality control and branded packaging",
            "Compliance with dangerous goods transport",
        ),
        cta_title=STRATEGY_CALL_TITLE,
        cta_text="We'll show you how to optimize your global shipping strategy.",
    ),
}


def first_name_from(full_name: str, fallback: str = "Friend") -> str:
    parts = (full_name or "").split()
    return parts[0] if parts else fallback


def savings_headline(savings: SavingsProjection) -> str:
    return (
        f"Up to ${format_money(savings.savings_per_order)} saved per order × {savings.monthly_orders} orders/month "
        f"= ${format_money(savings.total_monthly_savings)}/month"
    )


def select_content(
    strategy: FulfillmentStrategy,
    first_name: str,
    savings: SavingsProjection,
    settings: Settings | None = None,
) -> Content:
    settings = settings or get_settings()
    block = CONTENT_BLOCKS[strategy]
    return Content(
        first_name=first_name,
        greeting=f"{first_name} - Your Quiz Results Are In",
        title=block.title,
        description=block.description,
        benefits=list(block.benefits),
        savings_headline=savings_headline(savings),
        cta_title=block.cta_title,
        cta_text=block.cta_text,
        cta_url=settings.diy_toolkit_url if block.uses_toolkit_link else settings.strategy_call_url,
        note=block.note,
    )
