"""Configuration management for vectorgeom.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Sampling resolution, sample budget and export precision
- LoggingConfig: Logging settings
- VectorGeomSettings: Main application settings
"""

from vectorgeom.config.settings import (
    GeometryConfig,
    LoggingConfig,
    VectorGeomSettings,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "VectorGeomSettings",
    "get_default_settings",
]
