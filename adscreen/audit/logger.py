"""
Audit Logger — Structured JSON-lines trail of moderation decisions.

Records every moderation and every manual review with a UTC timestamp and an
event name. Write failures are logged and never reach the caller.
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from adscreen.config import settings

logger = logging.getLogger("adscreen.audit")

MODERATION_EVENT = "moderation"
REVIEW_EVENT = "review"


class AuditLogger:
    """Writes structured audit entries to a JSON-lines file."""

    def __init__(self, log_path: str | Path | None = None) -> None:
        self.log_path = Path(log_path or settings.audit_log_path)

    def log(self, event: str, payload: BaseModel | dict[str, Any]) -> None:
        """Append an audit entry to the log file."""
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(mode="json")

        record = {
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
            "event": event,
            **payload,
        }

        try:
            with open(self.log_path, "a", encoding="utf-8") as f:
                f.write(json.dumps(record) + "\n")
        except OSError as e:
            logger.error(f"Failed to write audit log: {e}")

    def read_recent(self, count: int | None = 50, event: str | None = None) -> list[dict]:
        """Read the most recent N audit entries (all when N is None), optionally of one event type."""
        if not self.log_path.exists():
            return []

        entries: list[dict] = []
        try:
            with open(self.log_path, encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        entry = json.loads(line)
                    except json.JSONDecodeError:
                        continue
                    if event is None or entry.get("event") == event:
                        entries.append(entry)
        except OSError:
            return []

        if count is None:
            return entries
        return entries[-count:] if count > 0 else []

    def find_moderation(self, moderation_id: str) -> dict | None:
        """Most recent moderation entry for *moderation_id*, if any."""
        for entry in reversed(self.read_recent(count=None, event=MODERATION_EVENT)):
            if entry.get("moderation_id") == moderation_id:
                return entry
        return None
