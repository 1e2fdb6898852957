"""
Aggregator & Decision — Turns analyzer flags into a ModerationResult.

score = clamp(Σ flag.weight, 0, 1)

Decision bands, first match wins:
    score >= 0.8        → rejected
    0.4 <= score < 0.8  → manual review
    0.2 <= score < 0.4  → approved, monitored
    score < 0.2         → approved
"""

from __future__ import annotations

from adscreen.models.moderation_models import Decision, Flag, FlagKind, ModerationResult

REJECT_THRESHOLD = 0.8
REVIEW_THRESHOLD = 0.4
MONITOR_THRESHOLD = 0.2

# Flag sums are rounded before banding so that float drift (0.1 + 0.2 ...)
# cannot move a score across a threshold.
SCORE_PRECISION = 6

# Order is the order reasons appear in the rejection sentence.
REJECTION_REASONS: dict[FlagKind, str] = {
    FlagKind.LEXICAL: "inappropriate language",
    FlagKind.PATTERN: "potentially harmful content",
    FlagKind.IMAGE: "inappropriate images",
    FlagKind.PRICE: "suspicious pricing",
}

NO_FLAGS_REASON = "Content did not meet our community guidelines."
GENERIC_REASON = (
    "Your ad violates our community guidelines. "
    "Please review our terms of service and try again."
)


def compute_score(flags: list[Flag]) -> float:
    raw = round(sum(f.weight for f in flags), SCORE_PRECISION)
    return min(1.0, max(0.0, raw))


def classify(score: float) -> Decision:
    if score >= REJECT_THRESHOLD:
        return Decision.REJECTED
    if score >= REVIEW_THRESHOLD:
        return Decision.MANUAL_REVIEW
    return Decision.APPROVED


def synthesize_rejection_reason(flags: list[Flag]) -> str:
    """Build the rejection sentence from the kinds of flags present."""
    if not flags:
        return NO_FLAGS_REASON

    kinds = {f.kind for f in flags}
    reasons = [text for kind, text in REJECTION_REASONS.items() if kind in kinds]
    if not reasons:
        return GENERIC_REASON

    return (
        f"Your ad was rejected due to: {', '.join(reasons)}. "
        f"Please review our community guidelines and resubmit with appropriate content."
    )


def build_result(flags: list[Flag]) -> ModerationResult:
    """
    Aggregate flags into the final result.

    Every derived field (approved, review, monitoring, reason) follows from
    the score alone.
    """
    score = compute_score(flags)
    decision = classify(score)

    result = ModerationResult(
        score=score,
        flags=list(flags),
        decision=decision,
        approved=decision is Decision.APPROVED,
        requires_manual_review=decision is Decision.MANUAL_REVIEW,
        monitored=decision is Decision.APPROVED and score >= MONITOR_THRESHOLD,
        rejection_reason=(
            synthesize_rejection_reason(flags) if decision is Decision.REJECTED else None
        ),
    )
    result.explanation = format_moderation_details(result)
    return result


def format_moderation_details(result: ModerationResult) -> str:
    """Admin-facing summary of a moderation result."""
    if result.decision is Decision.APPROVED:
        decision = "Approved (monitored)" if result.monitored else "Approved"
    elif result.decision is Decision.MANUAL_REVIEW:
        decision = "Manual review"
    else:
        decision = "Rejected"

    lines = [
        f"Score: {result.score * 100:.1f}%",
        f"Flagged Content: {'; '.join(result.flag_details) or 'none'}",
        f"Decision: {decision}",
        f"Manual Review: {'Required' if result.requires_manual_review else 'Not Required'}",
    ]
    if result.rejection_reason:
        lines.append(f"Reason: {result.rejection_reason}")
    return "\n".join(lines)
