"""Configuration settings for pathgeom."""

from pathlib import Path

from pydantic import BaseModel, Field


class SolverConfig(BaseModel):
    """Configuration for polynomial root finding.

    Used by Sturm sequence root isolation and Newton refinement, and through
    them by every nearest-point query on Bezier curves.
    """

    isolation_eps: float = Field(
        default=1e-3,
        gt=0.0,
        le=1.0,
        description="Maximum width of an emitted root-isolating interval",
    )
    isolation_max_iterations: int = Field(
        default=4096,
        ge=16,
        description="Maximum number of bisection tasks processed per isolation",
    )
    newton_max_iterations: int = Field(
        default=1024,
        ge=1,
        description="Maximum Newton-Raphson iterations per seed",
    )
    newton_seed_depth: int = Field(
        default=4,
        ge=0,
        le=12,
        description="Dyadic levels of interior Newton seeds (2**depth - 1 interior seeds)",
    )
    coefficient_epsilon: float = Field(
        default=1e-12,
        ge=0.0,
        le=1e-6,
        description="Relative magnitude below which a power-basis vector is snapped to zero",
    )


class EditingConfig(BaseModel):
    """Configuration for interactive shape editing."""

    default_handle_length: float = Field(
        default=10.0,
        ge=0.0,
        description="Handle length used when converting a point without controls to smooth",
    )
    snap_radius: float = Field(
        default=12.0,
        ge=0.0,
        description="Maximum distance for snapping a click onto a curve",
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


class PathGeomSettings(BaseModel):
    """Main application settings."""

    solver: SolverConfig = Field(default_factory=SolverConfig)
    editing: EditingConfig = Field(default_factory=EditingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PathGeomSettings:
    """Get default application settings."""
    return PathGeomSettings()
