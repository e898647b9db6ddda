"""Configuration management for curvebool.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SolverConfig: Intersection solver tolerances and budgets
- TraversalConfig: Node graph traversal settings
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- CurveboolSettings: Main application settings
"""

from curvebool.config.settings import (
    CurveboolSettings,
    LoggingConfig,
    ProcessingConfig,
    SolverConfig,
    TraversalConfig,
    get_default_settings,
)

__all__ = [
    "CurveboolSettings",
    "LoggingConfig",
    "ProcessingConfig",
    "SolverConfig",
    "TraversalConfig",
    "get_default_settings",
]
