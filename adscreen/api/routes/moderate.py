"""
Moderation Routes — POST /moderate and POST /moderate/batch

Scores ad submissions and appends each verdict to the audit trail. The
caller persists the ad together with the returned result.

Routes are plain functions so FastAPI runs them in its threadpool; scoring
may block on the image classifier and must stay off the event loop.
"""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends

from adscreen.api.dependencies import get_audit_logger, get_moderation_engine
from adscreen.audit.logger import MODERATION_EVENT, AuditLogger
from adscreen.core.risk_engine import ModerationEngine
from adscreen.models.api_models import (
    BatchModerationRequest,
    BatchModerationResponse,
    ModerationResponse,
)
from adscreen.models.submission_models import AdSubmission

logger = logging.getLogger("adscreen.api.moderate")

router = APIRouter()


def _moderate_and_audit(
    submission: AdSubmission,
    engine: ModerationEngine,
    audit: AuditLogger,
) -> ModerationResponse:
    moderation_id = str(uuid.uuid4())
    result = engine.moderate(submission)

    audit.log(
        MODERATION_EVENT,
        {
            "moderation_id": moderation_id,
            "category": submission.category,
            "result": result.model_dump(mode="json"),
        },
    )
    logger.info(f"[{moderation_id}] {result.decision.value} (score {result.score:.2f})")
    return ModerationResponse(moderation_id=moderation_id, result=result)


@router.post("/moderate", response_model=ModerationResponse)
def moderate_ad(
    submission: AdSubmission,
    engine: ModerationEngine = Depends(get_moderation_engine),
    audit: AuditLogger = Depends(get_audit_logger),
):
    """Score a single ad submission."""
    return _moderate_and_audit(submission, engine, audit)


@router.post("/moderate/batch", response_model=BatchModerationResponse)
def moderate_batch(
    request: BatchModerationRequest,
    engine: ModerationEngine = Depends(get_moderation_engine),
    audit: AuditLogger = Depends(get_audit_logger),
):
    """Score several submissions independently, preserving request order."""
    return BatchModerationResponse(
        results=[_moderate_and_audit(s, engine, audit) for s in request.submissions]
    )
