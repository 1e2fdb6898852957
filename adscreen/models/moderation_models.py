"""
Moderation Data Models — Flags, decisions, and the per-submission result.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class FlagKind(str, Enum):
    LEXICAL = "lexical"
    PATTERN = "pattern"
    PRICE = "price"
    IMAGE = "image"
    CATEGORY = "category"


class Decision(str, Enum):
    APPROVED = "approved"
    MANUAL_REVIEW = "manual_review"
    REJECTED = "rejected"


class Flag(BaseModel):
    """One triggered rule and its contribution to the score."""

    kind: FlagKind
    detail: str = Field(..., description="Human-readable description of what fired")
    weight: float = Field(..., ge=0.0, description="Score contribution of this flag")
    source: str = Field(default="", description="Rule that fired: term, pattern index, image ref, rule id")


class ModerationResult(BaseModel):
    """Outcome of scoring one submission."""

    score: float = Field(..., ge=0.0, le=1.0)
    flags: list[Flag] = Field(default_factory=list)
    decision: Decision
    approved: bool
    requires_manual_review: bool
    monitored: bool = Field(
        default=False, description="Approved, but scored high enough to watch"
    )
    rejection_reason: str | None = None
    explanation: str = ""

    @property
    def flag_details(self) -> list[str]:
        return [f.detail for f in self.flags]


class ModerationStats(BaseModel):
    """Counts of engine outcomes over a set of results."""

    total: int = 0
    auto_approved: int = 0
    monitored: int = 0
    manual_review: int = 0
    auto_rejected: int = 0
    average_score: float = 0.0


class ReviewRecord(BaseModel):
    """An administrator's manual verdict on a moderated ad."""

    moderation_id: str
    decision: Literal["approve", "reject"]
    reviewer_id: str
    reason: str | None = None
    reviewed_at: str
