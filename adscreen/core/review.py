"""
Manual Review — Records an administrator's verdict on a moderated ad.

The engine only routes ads to review; the verdict itself comes from a human
and is appended to the audit trail next to the engine's moderation entry.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Literal

from adscreen.audit.logger import REVIEW_EVENT, AuditLogger
from adscreen.models.moderation_models import ReviewRecord

logger = logging.getLogger("adscreen.review")


class UnknownModerationError(LookupError):
    """No moderation with the given id exists in the audit trail."""


def record_review(
    audit: AuditLogger,
    moderation_id: str,
    decision: Literal["approve", "reject"],
    reviewer_id: str,
    reason: str | None = None,
) -> ReviewRecord:
    """Validate and log a manual review of *moderation_id*."""
    if audit.find_moderation(moderation_id) is None:
        raise UnknownModerationError(moderation_id)

    record = ReviewRecord(
        moderation_id=moderation_id,
        decision=decision,
        reviewer_id=reviewer_id,
        reason=reason,
        reviewed_at=datetime.now(timezone.utc).isoformat(),
    )
    audit.log(REVIEW_EVENT, record)
    logger.info(f"Moderation {moderation_id} reviewed by {reviewer_id}: {decision}")
    return record
