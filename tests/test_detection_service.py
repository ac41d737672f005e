"""Tests for the food detection service."""

import asyncio
import logging
from dataclasses import dataclass, field

import pytest

from food_recognition.adapters.sample_label_detector import SampleLabelDetector
from food_recognition.domain.detection import ConfidenceThresholds, ImageQuality
from food_recognition.domain.errors import EmptyLabelBatchError, FoodDetectionError
from food_recognition.domain.labels import DetectLabelsResponse
from food_recognition.services.detection import FoodDetectionService, LabelDetector
from tests.conftest import FailingLabelDetector, FakeLabelDetector, make_label

_THRESHOLDS = ConfidenceThresholds(high=0.85, medium=0.70, low=0.50)


def test_detect_runs_pipeline_over_detector_labels(
    detection_service: FoodDetectionService, label_detector: FakeLabelDetector
) -> None:
    result = asyncio.run(detection_service.detect(b"image-bytes"))

    assert label_detector.calls == [b"image-bytes"]
    assert [food.name for food in result.detected_foods] == ["Apple"]
    assert result.image_analysis.quality == ImageQuality.EXCELLENT
    assert result.processing_time_ms >= 0


def test_detect_wraps_detector_failures() -> None:
    service = FoodDetectionService(
        detector=FailingLabelDetector(), thresholds=_THRESHOLDS
    )

    with pytest.raises(FoodDetectionError) as exc_info:
        asyncio.run(service.detect(b"image-bytes"))

    assert isinstance(exc_info.value.__cause__, ConnectionError)


def test_detect_propagates_empty_batch() -> None:
    service = FoodDetectionService(
        detector=FakeLabelDetector(labels=[]), thresholds=_THRESHOLDS
    )

    with pytest.raises(EmptyLabelBatchError):
        asyncio.run(service.detect(b"image-bytes"))


@dataclass
class _NamedImageDetector(LabelDetector):
    """Detector labelling each image with its own bytes; slow images lag."""

    slow_images: frozenset[bytes] = frozenset()
    failing_images: frozenset[bytes] = frozenset()
    completed: list[bytes] = field(default_factory=list)

    async def detect_labels(self, image_bytes: bytes) -> DetectLabelsResponse:
        if image_bytes in self.slow_images:
            await asyncio.sleep(0.05)
        if image_bytes in self.failing_images:
            raise ConnectionError("detector unreachable")
        self.completed.append(image_bytes)
        label = make_label(image_bytes.decode(), 90)
        return DetectLabelsResponse(labels=(label,))


def test_batch_detect_keeps_input_order() -> None:
    detector = _NamedImageDetector(slow_images=frozenset({b"Rice"}))
    service = FoodDetectionService(detector=detector, thresholds=_THRESHOLDS)

    results = asyncio.run(service.batch_detect([b"Rice", b"Apple"]))

    assert detector.completed == [b"Apple", b"Rice"]
    assert [result.detected_foods[0].name for result in results] == [
        "Rice",
        "Apple",
    ]


def test_batch_detect_fails_whole_batch_on_first_error() -> None:
    detector = _NamedImageDetector(failing_images=frozenset({b"Apple"}))
    service = FoodDetectionService(detector=detector, thresholds=_THRESHOLDS)

    with pytest.raises(FoodDetectionError):
        asyncio.run(service.batch_detect([b"Rice", b"Apple", b"Bread"]))


def test_analyze_labels_sets_processing_time(
    detection_service: FoodDetectionService,
) -> None:
    result = detection_service.analyze_labels([make_label("Pizza", 97)])

    assert result.detected_foods[0].category == "Fast Food"
    assert result.processing_time_ms >= 0


def test_thresholds_and_configuration(
    detection_service: FoodDetectionService,
) -> None:
    assert detection_service.confidence_thresholds() == _THRESHOLDS
    assert detection_service.is_configured() is True


def test_debug_logging_summarizes_detection(caplog, monkeypatch) -> None:
    monkeypatch.setattr(logging.getLogger("food_recognition"), "propagate", True)
    service = FoodDetectionService(
        detector=FakeLabelDetector(), thresholds=_THRESHOLDS, debug=True
    )

    with caplog.at_level("INFO", logger="food_recognition"):
        asyncio.run(service.detect(b"image-bytes"))

    assert "Food detection: labels=4 foods=1" in caplog.text


def test_sample_detector_returns_canned_labels() -> None:
    response = asyncio.run(SampleLabelDetector().detect_labels(b"ignored"))

    assert response.label_model_version == "2.0"
    assert [label.name for label in response.labels] == [
        "Food",
        "Apple",
        "Fruit",
        "Plant",
    ]
    assert response.labels[1].parents == ("Food",)
    assert response.labels[1].bounding_box is not None
