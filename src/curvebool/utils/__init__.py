"""Utility functions for curvebool.

This module provides utility functions including:

- Logging setup and configuration
- Operation statistics for batch runs
"""

from curvebool.utils.logging import (
    OperationLogger,
    OperationStats,
    configure_logging,
)

__all__ = [
    "OperationLogger",
    "OperationStats",
    "configure_logging",
]
