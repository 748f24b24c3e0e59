from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..schemas import FulfillmentStrategy, ResultDocument, SurveyResponse
from .classifier import classify
from .content import first_name_from, select_content
from .insights.base import Insight, InsightContext
from .insights.registry import compute_insights
from .normalize import normalize
from .rendering import render
from .savings import build_savings_curve, estimate_savings

logger = logging.getLogger(__name__)

PAGE_IDS = {
    FulfillmentStrategy.DIY: "DIY_PAGE",
    FulfillmentStrategy.AUS_3PL: "AUS1_PAGE",
    FulfillmentStrategy.AUS_MULTI: "AUS_MULTI_PAGE",
    FulfillmentStrategy.CHINA_3PL: "CN_PAGE",
}


def generate_result(
    survey: SurveyResponse,
    settings: Settings | None = None,
    insights: list[Insight] | None = None,
) -> ResultDocument:
    settings = settings or get_settings()

    profile = normalize(survey)
    strategy = classify(profile)
    savings = estimate_savings(strategy, profile)

    first_name = first_name_from(survey.full_name, fallback=settings.default_first_name)
    content = select_content(strategy, first_name, savings, settings=settings)

    context = InsightContext(profile=profile, strategy=strategy, savings=savings, settings=settings)
    insight_set = compute_insights(context, insights)

    # In-house shippers get no projection curve.
    curve = [] if strategy is FulfillmentStrategy.DIY else build_savings_curve(savings)

    logger.debug(
        "recommendation %s: $%s/order x %s orders, health=%s confidence=%s",
        strategy.value,
        savings.savings_per_order,
        savings.monthly_orders,
        insight_set.shipping_health_score,
        insight_set.confidence_level,
    )

    return ResultDocument(
        strategy=strategy,
        page_id=PAGE_IDS[strategy],
        content=content,
        savings=savings,
        insights=insight_set,
        savings_curve=curve,
        rendered_document=render(strategy, content, insight_set),
    )
