"""Food detection service over an external label detector."""

import asyncio
import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from food_recognition.domain.detection import ConfidenceThresholds, FoodDetectionResult
from food_recognition.domain.errors import FoodDetectionError
from food_recognition.domain.labels import DetectLabelsResponse, Label
from food_recognition.services.pipeline import detect_food

_logger = logging.getLogger(__name__)


class LabelDetector(Protocol):
    """Interface for the remote label detection call."""

    async def detect_labels(self, image_bytes: bytes) -> DetectLabelsResponse:
        """Return the label batch detected in an image."""


@dataclass
class FoodDetectionService:
    """Service that runs detected labels through the food pipeline."""

    detector: LabelDetector
    thresholds: ConfidenceThresholds
    configured: bool = False
    debug: bool = False

    async def detect(self, image_bytes: bytes) -> FoodDetectionResult:
        """Detect labels in an image and classify them into foods."""
        started = time.perf_counter()
        try:
            response = await self.detector.detect_labels(image_bytes)
        except Exception as exc:
            _logger.exception("Label detection failed")
            raise FoodDetectionError("Failed to analyze image") from exc
        return self._run(response.labels, started)

    async def batch_detect(
        self, images: Sequence[bytes]
    ) -> list[FoodDetectionResult]:
        """Detect foods in several images concurrently, in input order.

        The first failure is raised for the whole batch; detections still in
        flight run to completion and their results are discarded.
        """
        return list(await asyncio.gather(*(self.detect(image) for image in images)))

    def analyze_labels(self, labels: Sequence[Label]) -> FoodDetectionResult:
        """Classify an already detected label batch."""
        return self._run(labels, time.perf_counter())

    def confidence_thresholds(self) -> ConfidenceThresholds:
        """Return recommended confidence cut-offs."""
        return self.thresholds

    def is_configured(self) -> bool:
        """Return True when detector credentials are available."""
        return self.configured

    def _run(self, labels: Sequence[Label], started: float) -> FoodDetectionResult:
        result = detect_food(labels)
        elapsed_ms = (time.perf_counter() - started) * 1000
        if self.debug:
            _logger.info(
                "Food detection: labels=%s foods=%s quality=%s elapsed_ms=%.1f",
                len(labels),
                len(result.detected_foods),
                result.image_analysis.quality,
                elapsed_ms,
            )
        return result.model_copy(update={"processing_time_ms": elapsed_ms})
