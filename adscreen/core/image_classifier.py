"""
Image Classifiers — The capability the image scanner asks "is this image
inappropriate?".

Implementations:
  1. NullImageClassifier      — never flags
  2. StaticImageClassifier    — flags a fixed set of references (tests)
  3. SimulatedImageClassifier — seeded per-image Bernoulli draw, stands in
                                for real vision analysis
  4. RemoteImageClassifier    — HTTP call to a vision service; failures
                                degrade to "not flagged"
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Protocol

import httpx

from adscreen.config import Settings

logger = logging.getLogger("adscreen.images")


class ImageClassifier(Protocol):
    def is_inappropriate(self, image_ref: str) -> bool: ...


class NullImageClassifier:
    """Deterministic classifier that never flags anything."""

    def is_inappropriate(self, image_ref: str) -> bool:
        return False


class StaticImageClassifier:
    """Flags exactly the references it was constructed with."""

    def __init__(self, flagged: Iterable[str] = ()) -> None:
        self.flagged = frozenset(flagged)

    def is_inappropriate(self, image_ref: str) -> bool:
        return image_ref in self.flagged


class SimulatedImageClassifier:
    """
    Simulated vision check: flags an image with fixed probability.

    The draw for an image is seeded from ``(seed, image_ref)``, so the same
    image always gets the same verdict and concurrent callers share no
    random state.
    """

    def __init__(self, probability: float = 0.05, seed: int = 0) -> None:
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability must be within [0, 1], got {probability}")
        self.probability = probability
        self.seed = seed

    def is_inappropriate(self, image_ref: str) -> bool:
        draw = random.Random(f"{self.seed}:{image_ref}").random()
        return draw < self.probability


class RemoteImageClassifier:
    """
    Vision-service adapter.

    Sends ``{"image": <ref>}`` to the configured endpoint and expects
    ``{"inappropriate": <bool>}`` back. Moderation must never block an ad
    submission, so any failure is logged and reported as "not flagged".
    """

    def __init__(
        self,
        url: str,
        timeout: float = 5.0,
        client: httpx.Client | None = None,
    ) -> None:
        if not url:
            raise ValueError("RemoteImageClassifier requires an endpoint URL")
        self.url = url
        self._client = client or httpx.Client(timeout=timeout)

    def is_inappropriate(self, image_ref: str) -> bool:
        try:
            response = self._client.post(self.url, json={"image": image_ref})
            response.raise_for_status()
            verdict = response.json()["inappropriate"]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.warning(
                "Image classifier unavailable for %s, treating as not flagged: %s",
                image_ref,
                e,
            )
            return False
        if not isinstance(verdict, bool):
            logger.warning(
                "Image classifier returned non-boolean verdict %r for %s, treating as not flagged",
                verdict,
                image_ref,
            )
            return False
        return verdict

    def close(self) -> None:
        self._client.close()


def build_image_classifier(settings: Settings) -> ImageClassifier:
    """Create the classifier selected by ``settings.image_classifier``."""
    kind = settings.image_classifier

    if kind == "none":
        logger.info("Image classification disabled")
        return NullImageClassifier()

    if kind == "remote":
        if not settings.image_classifier_url:
            raise ValueError(
                "ADSCREEN_IMAGE_CLASSIFIER_URL must be set when image_classifier is 'remote'"
            )
        logger.info("Using remote image classifier at %s", settings.image_classifier_url)
        return RemoteImageClassifier(
            settings.image_classifier_url,
            timeout=settings.image_classifier_timeout,
        )

    logger.info(
        "Using simulated image classifier (p=%s, seed=%s)",
        settings.image_flag_probability,
        settings.image_classifier_seed,
    )
    return SimulatedImageClassifier(
        probability=settings.image_flag_probability,
        seed=settings.image_classifier_seed,
    )
