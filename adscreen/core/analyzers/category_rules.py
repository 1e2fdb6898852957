"""
Category Rule Checker — Category-specific red flags.

Looks up the submission's category in the rule table and evaluates each
registered phrase rule against the primary-language title and description.
Unregistered categories produce nothing.
"""

from __future__ import annotations

from adscreen.core.image_classifier import ImageClassifier
from adscreen.models.moderation_models import Flag, FlagKind
from adscreen.models.rule_models import RuleSet
from adscreen.models.submission_models import AdSubmission


ANALYZER_ID = "category_rules"


def analyze(
    submission: AdSubmission,
    rules: RuleSet,
    classifier: ImageClassifier | None = None,
) -> list[Flag]:
    category_rules = rules.rules_for(submission.category)
    if not category_rules:
        return []

    text = submission.listing_text
    return [
        Flag(
            kind=FlagKind.CATEGORY,
            detail=rule.flag,
            weight=rule.weight,
            source=rule.rule_id,
        )
        for rule in category_rules
        if rule.fires(text)
    ]
