"""Utility functions for superellipse.

This module provides utility functions including:

- Logging setup and configuration
- Batch progress and statistics tracking
"""

from superellipse.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
