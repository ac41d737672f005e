"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from food_recognition.adapters.sample_label_detector import SampleLabelDetector
from food_recognition.config import Settings
from food_recognition.services.detection import FoodDetectionService, LabelDetector

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    detection_service: FoodDetectionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None, detector: LabelDetector | None = None
) -> AppContainer:
    """Create the default dependency container.

    Without an explicit detector the sample detector is used.
    """
    resolved_settings = settings or Settings()
    configured = resolved_settings.has_detector_credentials()
    if detector is None:
        if not configured:
            _logger.warning(
                "AWS credentials not configured. Food recognition will use "
                "sample data."
            )
        detector = SampleLabelDetector(
            delay_seconds=resolved_settings.sample_detector_delay_seconds
        )
    detection_service = FoodDetectionService(
        detector=detector,
        thresholds=resolved_settings.confidence_thresholds(),
        configured=configured,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        detection_service=detection_service,
        close_resources=close_resources,
    )
