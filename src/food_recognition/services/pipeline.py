"""Label interpretation pipeline."""

from collections.abc import Sequence

from food_recognition.domain.detection import FoodDetectionResult, ImageAnalysis
from food_recognition.domain.labels import Label
from food_recognition.services.assembler import (
    MIN_LABEL_CONFIDENCE,
    assemble_detections,
)
from food_recognition.services.classifier import is_food_relevant
from food_recognition.services.quality import assess_image_quality


def filter_food_labels(labels: Sequence[Label]) -> list[Label]:
    """Keep confident labels that are food-relevant."""
    return [
        label
        for label in labels
        if label.confidence > MIN_LABEL_CONFIDENCE and is_food_relevant(label)
    ]


def detect_food(labels: Sequence[Label]) -> FoodDetectionResult:
    """Classify a raw label batch into detected foods and a quality verdict.

    Raises ``EmptyLabelBatchError`` for an empty batch.
    """
    quality = assess_image_quality(labels)
    foods = assemble_detections(filter_food_labels(labels))
    confidence = max((food.confidence for food in foods), default=0.0)
    return FoodDetectionResult(
        detected_foods=foods,
        image_analysis=ImageAnalysis(
            quality=quality,
            has_food=bool(foods),
            confidence=confidence,
        ),
    )
