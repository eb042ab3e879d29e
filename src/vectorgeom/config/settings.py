"""Configuration settings for Vectorgeom."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Configuration for sampling and boolean operations.

    Distances are in path units, the same units as path coordinates.
    """

    sample_resolution: float = Field(
        default=0.1,
        gt=0.0,
        description="Target distance between flattened samples",
    )
    max_sample_points: int | None = Field(
        default=200_000,
        ge=16,
        description="Upper bound on samples per flattened path (None = unbounded)",
    )
    svg_precision: int | None = Field(
        default=None,
        ge=0,
        le=12,
        description="Decimal places in exported path data (None = exact)",
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


class VectorGeomSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> VectorGeomSettings:
    """Get default application settings."""
    return VectorGeomSettings()
