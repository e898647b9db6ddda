"""Logging utilities for Curvebool."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class OperationStats:
    """Statistics from a batch of boolean operations."""

    processed_count: int = 0
    error_count: int = 0
    regions_produced: int = 0
    diagnostics_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None
    operation_timings_ms: list[float] = field(default_factory=list)
    was_cancelled: bool = False
    cancelled_count: int = 0

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_operation_time_ms(self) -> float | None:
        """Average time per operation, if any were timed."""
        if not self.operation_timings_ms:
            return None
        return sum(self.operation_timings_ms) / len(self.operation_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("curvebool")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class OperationLogger:
    """Logger for tracking boolean operation progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = OperationStats()

    def log_operation_start(self, task_name: str, operation: str) -> None:
        """Log start of a boolean operation."""
        self._logger.debug("Boolean operation started", task=task_name, operation=operation)

    def log_operation_complete(
        self,
        task_name: str,
        regions: int,
        diagnostics: int,
        duration_ms: float,
    ) -> None:
        """Log successful boolean operation."""
        self._logger.info(
            "Boolean operation complete",
            task=task_name,
            regions=regions,
            diagnostics=diagnostics,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.regions_produced += regions
        self._stats.diagnostics_count += diagnostics
        self._stats.operation_timings_ms.append(duration_ms)

    def log_operation_error(
        self,
        task_name: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log boolean operation error."""
        self._logger.error(
            "Boolean operation failed",
            task=task_name,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((task_name, str(error)))

    @property
    def stats(self) -> OperationStats:
        """Get current processing statistics."""
        return self._stats
