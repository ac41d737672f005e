"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from food_recognition.domain.detection import ConfidenceThresholds

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    aws_region: str = "us-east-1"
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    confidence_high: float = 0.85
    confidence_medium: float = 0.70
    confidence_low: float = 0.50
    sample_detector_delay_seconds: float = 0.0
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def has_detector_credentials(self) -> bool:
        """Return True when both AWS credentials are set."""
        return bool(self.aws_access_key_id and self.aws_secret_access_key)

    def confidence_thresholds(self) -> ConfidenceThresholds:
        """Build the recommended confidence thresholds."""
        return ConfidenceThresholds(
            high=self.confidence_high,
            medium=self.confidence_medium,
            low=self.confidence_low,
        )
