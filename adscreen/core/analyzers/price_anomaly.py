"""
Price Anomaly Detector — Category-conditioned price bands plus contextual
"too good to be true" heuristics.

Ads without a price (price <= 0) are not price-checked at all. Categories
without a band skip only the band check; the heuristics still apply.
"""

from __future__ import annotations

from adscreen.core.image_classifier import ImageClassifier
from adscreen.models.moderation_models import Flag, FlagKind
from adscreen.models.rule_models import RuleSet
from adscreen.models.submission_models import AdSubmission


ANALYZER_ID = "price_anomaly"


def analyze(
    submission: AdSubmission,
    rules: RuleSet,
    classifier: ImageClassifier | None = None,
) -> list[Flag]:
    price = submission.price
    if price <= 0:
        return []

    flags: list[Flag] = []
    category = submission.category

    band = rules.category_price_bands.get(category)
    if band is not None and not band.contains(price):
        flags.append(
            Flag(
                kind=FlagKind.PRICE,
                detail=f"Suspicious pricing for category {category}: {_format_price(price)}",
                weight=rules.price_band_weight,
                source=f"band:{category}",
            )
        )

    text = submission.listing_text
    for heuristic in rules.price_heuristics:
        if heuristic.category is not None and heuristic.category != category:
            continue
        if heuristic.phrase in text and price < heuristic.below:
            flags.append(
                Flag(
                    kind=FlagKind.PRICE,
                    detail=heuristic.flag,
                    weight=heuristic.weight,
                    source=heuristic.phrase,
                )
            )

    return flags


def _format_price(price: float) -> str:
    return f"${price:,.0f}" if float(price).is_integer() else f"${price:,.2f}"
