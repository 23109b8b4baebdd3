"""Utility functions for pathgeom.

This module provides utility functions including:

- Logging setup and configuration
- Edit tracking and statistics
"""

from pathgeom.utils.logging import (
    EditLogger,
    EditStats,
    configure_logging,
)

__all__ = [
    "EditLogger",
    "EditStats",
    "configure_logging",
]
