"""Errors raised by food recognition."""


class EmptyLabelBatchError(ValueError):
    """Raised when a label batch has no labels to assess."""

    def __init__(self) -> None:
        super().__init__("Label batch is empty; image quality is undefined")


class FoodDetectionError(RuntimeError):
    """Raised when the external label detector fails."""
