"""
Image Heuristic Scanner — Keyword checks on image references plus an
injected image classifier for stock-photo hosts.

Two independent checks per image; every check that fires is one flag.
"""

from __future__ import annotations

from adscreen.core.image_classifier import ImageClassifier, NullImageClassifier
from adscreen.models.moderation_models import Flag, FlagKind
from adscreen.models.rule_models import RuleSet
from adscreen.models.submission_models import AdSubmission


ANALYZER_ID = "image_scanner"


def analyze(
    submission: AdSubmission,
    rules: RuleSet,
    classifier: ImageClassifier | None = None,
) -> list[Flag]:
    """Scan every image reference in display order."""
    classifier = classifier or NullImageClassifier()
    flags: list[Flag] = []

    for ref in submission.images:
        lowered = ref.lower()

        if any(keyword in lowered for keyword in rules.image_keywords):
            flags.append(
                Flag(
                    kind=FlagKind.IMAGE,
                    detail=f"Potentially inappropriate image detected: {ref}",
                    weight=rules.image_weight,
                    source=ref,
                )
            )

        if _is_classified_host(lowered, rules) and classifier.is_inappropriate(ref):
            flags.append(
                Flag(
                    kind=FlagKind.IMAGE,
                    detail=f"Image classifier flagged image as potentially inappropriate: {ref}",
                    weight=rules.image_weight,
                    source=ref,
                )
            )

    return flags


def _is_classified_host(lowered_ref: str, rules: RuleSet) -> bool:
    if not rules.classified_image_hosts:
        return True
    return any(host in lowered_ref for host in rules.classified_image_hosts)
