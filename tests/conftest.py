"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from food_recognition.config import Settings
from food_recognition.containers import AppContainer
from food_recognition.domain.labels import DetectLabelsResponse, Label
from food_recognition.services.detection import FoodDetectionService, LabelDetector


def make_label(
    name: str,
    confidence: float,
    parents: tuple[str, ...] = (),
    boxes: tuple[tuple[float, float, float, float], ...] = (),
) -> Label:
    """Build a label; boxes are (width, height, left, top)."""
    return Label.model_validate(
        {
            "Name": name,
            "Confidence": confidence,
            "Parents": [{"Name": parent} for parent in parents],
            "Instances": [
                {
                    "BoundingBox": {
                        "Width": width,
                        "Height": height,
                        "Left": left,
                        "Top": top,
                    },
                    "Confidence": confidence,
                }
                for width, height, left, top in boxes
            ],
        }
    )


@dataclass
class FakeLabelDetector(LabelDetector):
    """Fake detector returning a fixed label batch and recording calls."""

    labels: list[Label] = field(
        default_factory=lambda: [
            make_label("Food", 95.5),
            make_label("Apple", 89.2, ("Food",), ((0.3, 0.4, 0.35, 0.3),)),
            make_label("Fruit", 87.8, ("Food",)),
            make_label("Plant", 82.1),
        ]
    )
    calls: list[bytes] = field(default_factory=list)

    async def detect_labels(self, image_bytes: bytes) -> DetectLabelsResponse:
        self.calls.append(image_bytes)
        return DetectLabelsResponse(labels=tuple(self.labels))


@dataclass
class FailingLabelDetector(LabelDetector):
    """Detector that always fails."""

    async def detect_labels(self, image_bytes: bytes) -> DetectLabelsResponse:
        raise ConnectionError("detector unreachable")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        aws_access_key_id="access-key",
        aws_secret_access_key="secret-key",
    )


@pytest.fixture
def label_detector() -> FakeLabelDetector:
    return FakeLabelDetector()


@pytest.fixture
def detection_service(
    settings: Settings, label_detector: FakeLabelDetector
) -> FoodDetectionService:
    return FoodDetectionService(
        detector=label_detector,
        thresholds=settings.confidence_thresholds(),
        configured=settings.has_detector_credentials(),
    )


@pytest.fixture
def container(
    settings: Settings, detection_service: FoodDetectionService
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        detection_service=detection_service,
        close_resources=close_resources,
    )
