"""Configuration settings for Curvebool."""

from pathlib import Path

from pydantic import BaseModel, Field


class SolverConfig(BaseModel):
    """Configuration for the curve-curve intersection solver.

    Distances are in model units, parameters in curve parameter units.
    """

    tolerance: float = Field(
        default=1e-9,
        gt=0.0,
        le=1e-2,
        description="Maximum distance between the two curve points at a converged crossing",
    )
    max_iterations: int = Field(
        default=32,
        ge=1,
        le=1000,
        description="Newton iteration budget per crossing candidate",
    )
    step_size_tolerance: float = Field(
        default=1e-14,
        ge=0.0,
        le=1e-3,
        description="Parameter step below which refinement is considered stalled",
    )
    minimum_distance: float = Field(
        default=1e-6,
        gt=0.0,
        le=1.0,
        description="Crossings closer than this are treated as duplicates",
    )
    tangent_tolerance: float = Field(
        default=1e-3,
        gt=0.0,
        lt=1.0,
        description="Minimum sine of the crossing angle for a transversal intersection",
    )
    knot_domain_division: int = Field(
        default=16,
        ge=2,
        le=512,
        description="Flattening segments per knot span (candidate search and containment)",
    )


class TraversalConfig(BaseModel):
    """Configuration for node graph traversal."""

    strict: bool = Field(
        default=False,
        description="Raise on inconsistent Enter/Exit pairs instead of dropping them",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int | None = Field(
        default=None,
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


class CurveboolSettings(BaseModel):
    """Main application settings."""

    solver: SolverConfig = Field(default_factory=SolverConfig)
    traversal: TraversalConfig = Field(default_factory=TraversalConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> CurveboolSettings:
    """Get default application settings."""
    return CurveboolSettings()
