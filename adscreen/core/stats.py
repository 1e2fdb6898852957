"""
Moderation statistics for the admin dashboard.
"""

from __future__ import annotations

from typing import Iterable

from adscreen.core.decision import MONITOR_THRESHOLD, REJECT_THRESHOLD
from adscreen.models.moderation_models import Decision, ModerationResult, ModerationStats


def compute_moderation_stats(results: Iterable[ModerationResult]) -> ModerationStats:
    """Count auto-approved (score < 0.2), monitored, manual-review and auto-rejected results."""
    stats = ModerationStats()
    total_score = 0.0

    for result in results:
        stats.total += 1
        total_score += result.score
        if result.score < MONITOR_THRESHOLD:
            stats.auto_approved += 1
        elif result.score >= REJECT_THRESHOLD:
            stats.auto_rejected += 1
        elif result.decision is Decision.MANUAL_REVIEW:
            stats.manual_review += 1
        else:
            stats.monitored += 1

    if stats.total:
        stats.average_score = round(total_score / stats.total, 4)
    return stats
