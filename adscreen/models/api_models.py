"""
API Request/Response Models — Public-facing schemas for the HTTP endpoints.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from adscreen.models.moderation_models import ModerationResult, ModerationStats
from adscreen.models.submission_models import AdSubmission

MAX_BATCH_SIZE = 100


class ModerationResponse(BaseModel):
    """Engine verdict for one submission."""

    moderation_id: str
    result: ModerationResult


class BatchModerationRequest(BaseModel):
    submissions: list[AdSubmission] = Field(..., min_length=1, max_length=MAX_BATCH_SIZE)


class BatchModerationResponse(BaseModel):
    results: list[ModerationResponse] = Field(default_factory=list)


class ReviewRequest(BaseModel):
    """An administrator's verdict on a previously moderated ad."""

    moderation_id: str = Field(..., min_length=1)
    decision: Literal["approve", "reject"]
    reviewer_id: str = Field(..., min_length=1)
    reason: str | None = Field(default=None, description="Shown to the advertiser on rejection")


class StatsResponse(BaseModel):
    stats: ModerationStats
    reviews: int = 0
