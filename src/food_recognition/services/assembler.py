"""Turn food-relevant labels into detected food records."""

from collections.abc import Sequence

from food_recognition.domain.categories import food_category
from food_recognition.domain.detection import DetectedFood, FoodBoundingBox
from food_recognition.domain.labels import Label
from food_recognition.services.classifier import (
    normalize_food_name,
    suppressed_generic_labels,
)

MIN_LABEL_CONFIDENCE = 70.0


def assemble_detections(labels: Sequence[Label]) -> list[DetectedFood]:
    """Normalize, dedupe, categorize and rank food-relevant labels.

    The first label to claim a canonical name wins, including a generic label
    that is then suppressed. The result is sorted by confidence, highest
    first, keeping input order for ties.
    """
    suppressed = suppressed_generic_labels(labels)
    seen_names: set[str] = set()
    foods: list[DetectedFood] = []
    for label, is_suppressed in zip(labels, suppressed, strict=True):
        if label.confidence <= MIN_LABEL_CONFIDENCE:
            continue
        name = normalize_food_name(label.name)
        if name in seen_names:
            continue
        seen_names.add(name)
        if is_suppressed:
            continue
        foods.append(
            DetectedFood(
                name=name,
                confidence=label.confidence / 100,
                category=food_category(name),
                bounding_box=_to_food_box(label),
            )
        )
    return sorted(foods, key=lambda food: food.confidence, reverse=True)


def _to_food_box(label: Label) -> FoodBoundingBox | None:
    box = label.bounding_box
    if box is None:
        return None
    return FoodBoundingBox(x=box.left, y=box.top, width=box.width, height=box.height)
