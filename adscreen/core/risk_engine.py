"""
Risk Scoring Engine — Runs every analyzer over a submission and aggregates.

Analyzers are independent pure functions: they see the submission, the rule
set and the image classifier, never each other's output. An analyzer that
crashes is logged and contributes nothing; scoring itself never raises.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Mapping

from adscreen.config import settings
from adscreen.core.decision import build_result
from adscreen.core.image_classifier import ImageClassifier, NullImageClassifier, build_image_classifier
from adscreen.models.moderation_models import Flag, ModerationResult
from adscreen.models.rule_models import RuleSet
from adscreen.models.submission_models import AdSubmission
from adscreen.rules.loader import load_rule_set

from adscreen.core.analyzers import (
    category_rules,
    image_scanner,
    lexical_filter,
    pattern_matcher,
    price_anomaly,
)

logger = logging.getLogger("adscreen.engine")

# Type for an analyzer function
AnalyzerFn = Callable[[AdSubmission, RuleSet, ImageClassifier], list[Flag]]

# Registry of analyzers; iteration order is the order flags appear in results
ANALYZER_REGISTRY: Mapping[str, AnalyzerFn] = MappingProxyType({
    lexical_filter.ANALYZER_ID: lexical_filter.analyze,
    pattern_matcher.ANALYZER_ID: pattern_matcher.analyze,
    price_anomaly.ANALYZER_ID: price_anomaly.analyze,
    image_scanner.ANALYZER_ID: image_scanner.analyze,
    category_rules.ANALYZER_ID: category_rules.analyze,
})


class ModerationEngine:
    """
    Content risk scoring engine.

    Holds an immutable RuleSet and an image classifier. Several engines with
    different rule sets can coexist; none of them keeps per-call state.
    """

    def __init__(
        self,
        rules: RuleSet,
        image_classifier: ImageClassifier | None = None,
        analyzers: Mapping[str, AnalyzerFn] | None = None,
    ) -> None:
        self.rules = rules
        self.image_classifier = image_classifier or NullImageClassifier()
        self.analyzers = analyzers if analyzers is not None else ANALYZER_REGISTRY

    def collect_flags(self, submission: AdSubmission) -> list[Flag]:
        """Run all analyzers and concatenate their flags in registry order."""
        flags: list[Flag] = []

        for analyzer_id, analyze in self.analyzers.items():
            try:
                flags.extend(analyze(submission, self.rules, self.image_classifier))
            except Exception:
                # A broken analyzer must not block the submission
                logger.exception("Analyzer '%s' failed; contributing no flags", analyzer_id)

        return flags

    def moderate(self, submission: AdSubmission) -> ModerationResult:
        """
        Score a submission and decide its fate.

        Args:
            submission: The ad as submitted. Not validated here.

        Returns:
            ModerationResult with score, ordered flags and decision.
        """
        result = build_result(self.collect_flags(submission))

        logger.info(
            "Moderated ad in category '%s': score=%.2f decision=%s flags=%d",
            submission.category,
            result.score,
            result.decision.value,
            len(result.flags),
        )
        return result

    def run_single_analyzer(self, analyzer_id: str, submission: AdSubmission) -> list[Flag]:
        """Run one analyzer in isolation."""
        if analyzer_id not in self.analyzers:
            raise ValueError(f"Unknown analyzer: {analyzer_id}")
        return self.analyzers[analyzer_id](submission, self.rules, self.image_classifier)


@lru_cache
def get_default_engine() -> ModerationEngine:
    """
    Engine built from settings.

    Raises RuleSetError on a bad rule source; call it at startup so the
    process fails fast.
    """
    return ModerationEngine(
        rules=load_rule_set(settings.rules_path),
        image_classifier=build_image_classifier(settings),
    )


def moderate(submission: AdSubmission) -> ModerationResult:
    """Score *submission* with the default engine."""
    return get_default_engine().moderate(submission)
