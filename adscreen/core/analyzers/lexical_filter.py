"""
Lexical Filter — Flags prohibited terms anywhere in the ad text.

Runs over all four text fields. Substring containment by default, so a term
embedded in a longer word also matches; rule sets can opt into whole-word
matching instead.
"""

from __future__ import annotations

from adscreen.core.image_classifier import ImageClassifier
from adscreen.models.moderation_models import Flag, FlagKind
from adscreen.models.rule_models import LexicalMatch, RuleSet
from adscreen.models.submission_models import AdSubmission


ANALYZER_ID = "lexical_filter"


def find_prohibited_terms(text: str, rules: RuleSet) -> list[str]:
    """Prohibited terms present in already-lowercased *text*, in rule order."""
    if not text.strip():
        return []

    if rules.lexical_match is LexicalMatch.WORD:
        return [
            term
            for term, regex in zip(rules.prohibited_terms, rules.word_patterns())
            if regex.search(text)
        ]
    return [term for term in rules.prohibited_terms if term in text]


def analyze(
    submission: AdSubmission,
    rules: RuleSet,
    classifier: ImageClassifier | None = None,
) -> list[Flag]:
    """One flag per matched term, each weighing ``rules.lexical_weight``."""
    return [
        Flag(
            kind=FlagKind.LEXICAL,
            detail=f"Prohibited term: {term}",
            weight=rules.lexical_weight,
            source=term,
        )
        for term in find_prohibited_terms(submission.all_text, rules)
    ]
