"""Label detector returning a canned detection response."""

import asyncio
from dataclasses import dataclass, field

from food_recognition.domain.labels import DetectLabelsResponse
from food_recognition.services.detection import LabelDetector


def _sample_payload() -> dict[str, object]:
    return {
        "Labels": [
            {"Name": "Food", "Confidence": 95.5, "Parents": []},
            {
                "Name": "Apple",
                "Confidence": 89.2,
                "Instances": [
                    {
                        "BoundingBox": {
                            "Width": 0.3,
                            "Height": 0.4,
                            "Left": 0.35,
                            "Top": 0.3,
                        },
                        "Confidence": 89.2,
                    }
                ],
                "Parents": [{"Name": "Food"}],
            },
            {"Name": "Fruit", "Confidence": 87.8, "Parents": [{"Name": "Food"}]},
            {"Name": "Plant", "Confidence": 82.1, "Parents": []},
        ],
        "LabelModelVersion": "2.0",
    }


@dataclass
class SampleLabelDetector(LabelDetector):
    """Detector used when no detection credentials are configured."""

    payload: dict[str, object] = field(default_factory=_sample_payload)
    delay_seconds: float = 0.0

    async def detect_labels(self, image_bytes: bytes) -> DetectLabelsResponse:
        """Return the sample response regardless of the image."""
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        return DetectLabelsResponse.model_validate(self.payload)
