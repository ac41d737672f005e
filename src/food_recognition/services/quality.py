"""Image quality assessment over a raw label batch."""

from collections.abc import Sequence

from food_recognition.domain.detection import ImageQuality
from food_recognition.domain.errors import EmptyLabelBatchError
from food_recognition.domain.labels import Label
from food_recognition.services.classifier import is_food_relevant


def assess_image_quality(labels: Sequence[Label]) -> ImageQuality:
    """Grade a batch by its strongest label and its count of food labels."""
    if not labels:
        raise EmptyLabelBatchError
    max_confidence = max(label.confidence for label in labels)
    food_count = sum(1 for label in labels if is_food_relevant(label))

    if max_confidence > 90 and food_count >= 2:  # noqa: PLR2004
        return ImageQuality.EXCELLENT
    if max_confidence > 80 and food_count >= 1:  # noqa: PLR2004
        return ImageQuality.GOOD
    if max_confidence > 70:  # noqa: PLR2004
        return ImageQuality.FAIR
    return ImageQuality.POOR
