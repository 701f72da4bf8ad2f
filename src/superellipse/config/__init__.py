"""Configuration management for superellipse.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults. The engine
functions never read settings; callers turn them into explicit arguments.

Key classes:
- SamplingConfig: Path and metrics sampling settings
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- SuperellipseSettings: Main application settings
"""

from superellipse.config.settings import (
    LoggingConfig,
    ProcessingConfig,
    SamplingConfig,
    SuperellipseSettings,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "ProcessingConfig",
    "SamplingConfig",
    "SuperellipseSettings",
    "get_default_settings",
]
