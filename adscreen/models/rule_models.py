"""
Rule Set Data Models — The read-only rule table the analyzers evaluate.

A RuleSet is loaded once at startup and never mutated. Validation happens
here so that a bad rule file stops the process instead of silently
approving everything.
"""

from __future__ import annotations

import re
from enum import Enum
from types import MappingProxyType

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    field_serializer,
    field_validator,
    model_validator,
)


class LexicalMatch(str, Enum):
    SUBSTRING = "substring"
    WORD = "word"


class SuspiciousPattern(BaseModel):
    """A case-insensitive regular expression with its score weight."""

    model_config = ConfigDict(frozen=True)

    pattern: str = Field(..., min_length=1, description="Regular expression source")
    weight: float = Field(default=0.2, ge=0.0)

    _regex: re.Pattern[str] = PrivateAttr()

    @field_validator("pattern")
    @classmethod
    def _must_compile(cls, value: str) -> str:
        try:
            re.compile(value, re.IGNORECASE)
        except re.error as e:
            raise ValueError(f"invalid regular expression {value!r}: {e}") from e
        return value

    def model_post_init(self, __context) -> None:
        self._regex = re.compile(self.pattern, re.IGNORECASE)

    def matches(self, text: str) -> bool:
        return self._regex.search(text) is not None


class PriceBand(BaseModel):
    """Plausible price range for one category, inclusive on both ends."""

    model_config = ConfigDict(frozen=True)

    min: float = Field(..., ge=0.0)
    max: float = Field(..., ge=0.0)

    @model_validator(mode="after")
    def _ordered(self) -> PriceBand:
        if self.min > self.max:
            raise ValueError(f"price band min {self.min} exceeds max {self.max}")
        return self

    def contains(self, price: float) -> bool:
        return self.min <= price <= self.max


class PriceHeuristic(BaseModel):
    """A phrase that makes a low price implausible, optionally per category."""

    model_config = ConfigDict(frozen=True)

    phrase: str = Field(..., min_length=1)
    below: float = Field(..., gt=0.0, description="Fires when price is strictly below this")
    category: str | None = Field(default=None, description="Restrict to one category code")
    flag: str = Field(..., min_length=1, description="Flag text emitted when it fires")
    weight: float = Field(default=0.1, ge=0.0)

    @field_validator("phrase")
    @classmethod
    def _lower(cls, value: str) -> str:
        return value.lower()


class CategoryRule(BaseModel):
    """
    A category-specific red flag.

    Fires when every ``all_of`` phrase occurs in the listing text and, if
    ``any_of`` is non-empty, at least one of its phrases does too.
    """

    model_config = ConfigDict(frozen=True)

    rule_id: str = Field(..., min_length=1)
    flag: str = Field(..., min_length=1)
    all_of: tuple[str, ...] = ()
    any_of: tuple[str, ...] = ()
    weight: float = Field(default=0.15, ge=0.0)

    @field_validator("all_of", "any_of")
    @classmethod
    def _lower(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(phrase.lower() for phrase in value)

    @model_validator(mode="after")
    def _has_condition(self) -> CategoryRule:
        if not self.all_of and not self.any_of:
            raise ValueError(f"category rule '{self.rule_id}' has no phrases")
        return self

    def fires(self, text: str) -> bool:
        if not all(phrase in text for phrase in self.all_of):
            return False
        return not self.any_of or any(phrase in text for phrase in self.any_of)


class RuleSet(BaseModel):
    """The complete, immutable rule table."""

    model_config = ConfigDict(frozen=True)

    prohibited_terms: tuple[str, ...] = Field(
        default=(), description="Lowercased prohibited terms in evaluation order"
    )
    lexical_match: LexicalMatch = LexicalMatch.SUBSTRING
    lexical_weight: float = Field(default=0.3, ge=0.0)

    suspicious_patterns: tuple[SuspiciousPattern, ...] = ()

    category_price_bands: dict[str, PriceBand] = Field(default_factory=dict, validate_default=True)
    price_band_weight: float = Field(default=0.1, ge=0.0)
    price_heuristics: tuple[PriceHeuristic, ...] = ()

    image_keywords: tuple[str, ...] = ()
    classified_image_hosts: tuple[str, ...] = Field(
        default=(),
        description="Images whose reference contains one of these go to the image classifier; empty means all",
    )
    image_weight: float = Field(default=0.2, ge=0.0)

    category_rules: dict[str, tuple[CategoryRule, ...]] = Field(default_factory=dict, validate_default=True)

    _term_regexes: tuple[re.Pattern[str], ...] = PrivateAttr(default=())

    @field_validator("prohibited_terms", "image_keywords")
    @classmethod
    def _normalize_terms(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        seen: dict[str, None] = {}
        for term in value:
            term = term.strip().lower()
            if not term:
                raise ValueError("empty term")
            seen.setdefault(term, None)
        return tuple(seen)

    @field_validator("category_price_bands", "category_rules", mode="after")
    @classmethod
    def _read_only(cls, value: dict) -> MappingProxyType:
        return MappingProxyType(value)

    @field_serializer("category_price_bands", "category_rules", mode="wrap")
    def _dump_mapping(self, value, handler):
        return handler(dict(value))

    def model_post_init(self, __context) -> None:
        self._term_regexes = tuple(
            re.compile(rf"\b{re.escape(term)}\b") for term in self.prohibited_terms
        )

    def word_patterns(self) -> tuple[re.Pattern[str], ...]:
        """Whole-word regexes, parallel to ``prohibited_terms``."""
        return self._term_regexes

    def rules_for(self, category: str) -> tuple[CategoryRule, ...]:
        return self.category_rules.get(category, ())

    def summary(self) -> dict[str, object]:
        return {
            "prohibited_terms": len(self.prohibited_terms),
            "lexical_match": self.lexical_match.value,
            "suspicious_patterns": len(self.suspicious_patterns),
            "price_band_categories": sorted(self.category_price_bands),
            "price_heuristics": len(self.price_heuristics),
            "image_keywords": len(self.image_keywords),
            "classified_image_hosts": list(self.classified_image_hosts),
            "category_rule_categories": sorted(self.category_rules),
            "category_rules": sum(len(r) for r in self.category_rules.values()),
        }
