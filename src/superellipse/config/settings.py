"""Configuration settings for superellipse."""

from pathlib import Path

from pydantic import BaseModel, Field

from superellipse.core.path import recommended_steps
from superellipse.domain import SampleOptions


class SamplingConfig(BaseModel):
    """Configuration for path sampling and metric estimation."""

    steps: int = Field(
        default=360,
        ge=1,
        description="Angular steps for path output",
    )
    precision: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Decimal digits kept per path coordinate",
    )
    metrics_steps: int = Field(
        default=1000,
        ge=1,
        description="Angular steps for perimeter and area estimates",
    )
    adaptive_steps: bool = Field(
        default=True,
        description="Use large_shape_steps for shapes wider than large_shape_threshold",
    )
    large_shape_threshold: float = Field(
        default=500.0,
        gt=0,
        description="Width above which large_shape_steps is used",
    )
    large_shape_steps: int = Field(
        default=720,
        ge=1,
        description="Angular steps for wide shapes",
    )

    def options_for(self, width: float) -> SampleOptions:
        """Build path sample options for a shape of the given width.

        Args:
            width: Bounding box width of the shape

        Returns:
            SampleOptions with the configured precision and step count
        """
        steps = self.steps
        if self.adaptive_steps:
            steps = recommended_steps(
                width,
                threshold=self.large_shape_threshold,
                base_steps=self.steps,
                large_steps=self.large_shape_steps,
            )
        return SampleOptions(steps=steps, precision=self.precision)


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker processes (None = auto)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SuperellipseSettings(BaseModel):
    """Main application settings."""

    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SuperellipseSettings:
    """Get default application settings."""
    return SuperellipseSettings()
