"""Food detection API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from food_recognition.domain.detection import FoodDetectionResult
from food_recognition.domain.errors import EmptyLabelBatchError, FoodDetectionError
from food_recognition.domain.labels import DetectLabelsResponse  # noqa: TC001

if TYPE_CHECKING:
    from food_recognition.containers import AppContainer

router = APIRouter(prefix="/detections", tags=["detections"])


@router.post("")
async def detect_from_labels(
    batch: DetectLabelsResponse, request: Request
) -> FoodDetectionResult:
    """Classify a detector label batch into foods."""
    container: AppContainer = request.app.state.container
    try:
        return container.detection_service.analyze_labels(batch.labels)
    except EmptyLabelBatchError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc


@router.post("/batch")
async def detect_from_label_batches(
    batches: list[DetectLabelsResponse], request: Request
) -> list[FoodDetectionResult]:
    """Classify several label batches independently."""
    container: AppContainer = request.app.state.container
    try:
        return [
            container.detection_service.analyze_labels(batch.labels)
            for batch in batches
        ]
    except EmptyLabelBatchError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc


@router.post("/image")
async def detect_from_image(request: Request) -> FoodDetectionResult:
    """Run the configured detector over a raw image body."""
    container: AppContainer = request.app.state.container
    image_bytes = await request.body()
    if not image_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Empty image body"
        )
    try:
        return await container.detection_service.detect(image_bytes)
    except FoodDetectionError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
        ) from exc
    except EmptyLabelBatchError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc


@router.get("/thresholds")
async def thresholds(request: Request) -> dict[str, object]:
    """Return recommended confidence thresholds."""
    container: AppContainer = request.app.state.container
    service = container.detection_service
    cut_offs = service.confidence_thresholds()
    return {
        "high": cut_offs.high,
        "medium": cut_offs.medium,
        "low": cut_offs.low,
        "configured": service.is_configured(),
    }
