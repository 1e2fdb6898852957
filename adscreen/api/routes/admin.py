"""
Admin Routes — Manual reviews, rule summary, moderation statistics.

  POST /reviews → record an administrator's approve/reject verdict
  GET  /rules   → summary of the active rule set
  GET  /stats   → outcome counts over the audit trail
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from adscreen.api.dependencies import get_audit_logger, get_moderation_engine
from adscreen.audit.logger import MODERATION_EVENT, REVIEW_EVENT, AuditLogger
from adscreen.core.review import UnknownModerationError, record_review
from adscreen.core.risk_engine import ModerationEngine
from adscreen.core.stats import compute_moderation_stats
from adscreen.models.api_models import ReviewRequest, StatsResponse
from adscreen.models.moderation_models import ModerationResult, ReviewRecord

logger = logging.getLogger("adscreen.api.admin")

router = APIRouter()


@router.post("/reviews", response_model=ReviewRecord)
async def submit_review(
    request: ReviewRequest,
    audit: AuditLogger = Depends(get_audit_logger),
):
    """Record a manual review outcome for a moderated ad."""
    try:
        return record_review(
            audit,
            moderation_id=request.moderation_id,
            decision=request.decision,
            reviewer_id=request.reviewer_id,
            reason=request.reason,
        )
    except UnknownModerationError:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown moderation id: {request.moderation_id}",
        )


@router.get("/rules")
async def rules_summary(engine: ModerationEngine = Depends(get_moderation_engine)):
    """Counts and categories of the loaded rule set."""
    return engine.rules.summary()


@router.get("/stats", response_model=StatsResponse)
async def moderation_stats(
    count: int = 1000,
    audit: AuditLogger = Depends(get_audit_logger),
):
    """Outcome statistics over the most recent *count* moderations."""
    results: list[ModerationResult] = []
    for entry in audit.read_recent(count=count, event=MODERATION_EVENT):
        try:
            results.append(ModerationResult.model_validate(entry["result"]))
        except (KeyError, ValueError):
            logger.warning(f"Skipping malformed audit entry {entry.get('moderation_id')}")

    return StatsResponse(
        stats=compute_moderation_stats(results),
        reviews=len(audit.read_recent(count=None, event=REVIEW_EVENT)),
    )
