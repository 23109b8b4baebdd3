"""Configuration management for pathgeom.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SolverConfig: Root isolation and Newton refinement settings
- EditingConfig: Interactive editing settings
- LoggingConfig: Logging settings
- PathGeomSettings: Main application settings
"""

from pathgeom.config.settings import (
    EditingConfig,
    LoggingConfig,
    PathGeomSettings,
    SolverConfig,
    get_default_settings,
)

__all__ = [
    "EditingConfig",
    "LoggingConfig",
    "PathGeomSettings",
    "SolverConfig",
    "get_default_settings",
]
