"""
Pattern Matcher — Suspicious-phrase detection with regular expressions.

Each pattern contributes at most once, however many times it matches.
"""

from __future__ import annotations

from adscreen.core.image_classifier import ImageClassifier
from adscreen.models.moderation_models import Flag, FlagKind
from adscreen.models.rule_models import RuleSet
from adscreen.models.submission_models import AdSubmission


ANALYZER_ID = "pattern_matcher"


def analyze(
    submission: AdSubmission,
    rules: RuleSet,
    classifier: ImageClassifier | None = None,
) -> list[Flag]:
    text = submission.all_text
    flags: list[Flag] = []

    for index, pattern in enumerate(rules.suspicious_patterns, start=1):
        if pattern.matches(text):
            flags.append(
                Flag(
                    kind=FlagKind.PATTERN,
                    detail=f"Suspicious pattern {index}",
                    weight=pattern.weight,
                    source=pattern.pattern,
                )
            )

    return flags
