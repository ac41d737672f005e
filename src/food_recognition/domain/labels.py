"""Models for label detections produced by an external detector."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BoundingBox(BaseModel):
    """Spatial box as fractions of the image size."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    width: float = Field(alias="Width", ge=0.0, le=1.0)
    height: float = Field(alias="Height", ge=0.0, le=1.0)
    left: float = Field(alias="Left", ge=0.0, le=1.0)
    top: float = Field(alias="Top", ge=0.0, le=1.0)


class LabelInstance(BaseModel):
    """Single spatial occurrence of a label."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    bounding_box: BoundingBox = Field(alias="BoundingBox")
    confidence: float | None = Field(default=None, alias="Confidence", ge=0.0, le=100.0)


class Label(BaseModel):
    """Named detection with a 0-100 confidence score."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="Name")
    confidence: float = Field(alias="Confidence", ge=0.0, le=100.0)
    instances: tuple[LabelInstance, ...] = Field(default=(), alias="Instances")
    parents: tuple[str, ...] = Field(default=(), alias="Parents")

    @field_validator("instances", "parents", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return () if value is None else value

    @field_validator("parents", mode="before")
    @classmethod
    def _parent_names(cls, value: object) -> object:
        """Accept parents as plain names or as ``{"Name": ...}`` objects."""
        if not isinstance(value, list | tuple):
            return value
        names: list[object] = []
        for parent in value:
            if isinstance(parent, dict):
                names.append(parent.get("Name", parent.get("name")))
            else:
                names.append(parent)
        return tuple(names)

    @property
    def bounding_box(self) -> BoundingBox | None:
        """Return the first instance's box; further instances are ignored."""
        if not self.instances:
            return None
        return self.instances[0].bounding_box


class DetectLabelsResponse(BaseModel):
    """Label batch returned by one detection call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    labels: tuple[Label, ...] = Field(alias="Labels")
    label_model_version: str | None = Field(default=None, alias="LabelModelVersion")
