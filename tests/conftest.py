"""
Test fixtures shared across all AdScreen tests.
"""

import pytest

from adscreen.core.image_classifier import NullImageClassifier
from adscreen.core.risk_engine import ModerationEngine
from adscreen.models.submission_models import AdSubmission
from adscreen.rules.loader import load_rule_set


@pytest.fixture(scope="session")
def default_rules():
    """The embedded default rule table."""
    return load_rule_set()


@pytest.fixture
def engine(default_rules):
    """Engine on the default rules with image classification switched off."""
    return ModerationEngine(default_rules, NullImageClassifier())


@pytest.fixture
def make_submission():
    """Factory for submissions; unspecified fields stay empty."""

    def _make(**fields):
        return AdSubmission(**fields)

    return _make


@pytest.fixture
def clean_submission():
    """An ordinary furniture ad that trips no rule."""
    return AdSubmission(
        title="Vintage oak dining table",
        title_localized="",
        description="Solid oak table, seats six. Pickup only.",
        description_localized="",
        images=["https://cdn.example.com/ads/table-1.jpg"],
        category="other",
        price=250,
    )


@pytest.fixture
def scam_vehicle_submission():
    """Cheap 'brand new' car with no paperwork, sold urgently."""
    return AdSubmission(
        title="Brand new car for sale",
        description="Urgent sale no title no registration",
        category="vehicles",
        price=3000,
    )
