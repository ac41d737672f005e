"""Models for food detection results."""

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, Field


class ImageQuality(StrEnum):
    """Coarse quality verdict for a whole label batch."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class FoodBoundingBox(BaseModel):
    """Bounding box attached to a detected food."""

    x: float = Field(ge=0.0, le=1.0)
    y: float = Field(ge=0.0, le=1.0)
    width: float = Field(ge=0.0, le=1.0)
    height: float = Field(ge=0.0, le=1.0)


class DetectedFood(BaseModel):
    """Single distinct food item found in a label batch."""

    name: str
    confidence: float = Field(ge=0.0, le=1.0)
    category: str
    bounding_box: FoodBoundingBox | None = None


class ImageAnalysis(BaseModel):
    """Batch-level summary of a detection."""

    quality: ImageQuality
    has_food: bool
    confidence: float = Field(ge=0.0, le=1.0)


class FoodDetectionResult(BaseModel):
    """Structured output of the label pipeline."""

    detected_foods: list[DetectedFood]
    image_analysis: ImageAnalysis
    processing_time_ms: float = Field(default=0.0, ge=0.0)


@dataclass(frozen=True)
class ConfidenceThresholds:
    """Recommended confidence cut-offs on the 0-1 scale."""

    high: float
    medium: float
    low: float
