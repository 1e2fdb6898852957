"""
FastAPI Dependencies — Shared singletons injected via Depends().
"""

from __future__ import annotations

from functools import lru_cache

from adscreen.audit.logger import AuditLogger
from adscreen.core.risk_engine import ModerationEngine, get_default_engine


def get_moderation_engine() -> ModerationEngine:
    """Shared engine built from settings at startup."""
    return get_default_engine()


@lru_cache
def get_audit_logger() -> AuditLogger:
    """Shared audit logger singleton."""
    return AuditLogger()
