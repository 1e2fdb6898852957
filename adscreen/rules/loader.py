"""
Rule Loader — Builds the process-wide RuleSet from a file or the defaults.

Any problem with the rule source raises RuleSetError. Callers are expected
to let it propagate: the service must not start with unusable rules.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from adscreen.models.rule_models import RuleSet
from adscreen.rules.defaults import default_rule_data

logger = logging.getLogger("adscreen.rules")


class RuleSetError(Exception):
    """The rule source is missing, unreadable, or invalid."""


def build_rule_set(data: Any, source: str = "<memory>") -> RuleSet:
    """Validate raw rule data into a RuleSet."""
    if not isinstance(data, dict):
        raise RuleSetError(f"{source}: rule data must be a mapping, got {type(data).__name__}")
    try:
        return RuleSet.model_validate(data)
    except ValidationError as e:
        raise RuleSetError(f"{source}: invalid rule set: {e}") from e


def load_rule_set(path: str | Path | None = None) -> RuleSet:
    """
    Load the rule set.

    Args:
        path: JSON (.json) or YAML (.yaml/.yml) rule file. None loads the
            embedded default table.

    Returns:
        A validated, immutable RuleSet.

    Raises:
        RuleSetError: if the file cannot be read, parsed, or validated.
    """
    if path is None:
        rules = build_rule_set(default_rule_data(), source="<defaults>")
        logger.info("Loaded default rule set: %s", rules.summary())
        return rules

    rule_path = Path(path)
    try:
        text = rule_path.read_text(encoding="utf-8")
    except OSError as e:
        raise RuleSetError(f"Cannot read rule file {rule_path}: {e}") from e

    suffix = rule_path.suffix.lower()
    try:
        if suffix == ".json":
            data = json.loads(text)
        elif suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            raise RuleSetError(f"Unsupported rule file type '{suffix}' for {rule_path}")
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise RuleSetError(f"Cannot parse rule file {rule_path}: {e}") from e

    rules = build_rule_set(data, source=str(rule_path))
    logger.info("Loaded rule set from %s: %s", rule_path, rules.summary())
    return rules
