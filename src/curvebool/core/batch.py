"""Parallel processing of many independent boolean operations.

Boolean calls on distinct curve pairs share no state, so a batch can be
spread across worker processes with ProcessPoolExecutor. Inside one call the
pipeline stays sequential.

Key components:
- process_pair: Top-level picklable function for parallel execution
- BooleanTask: One named (subject, clip, operation) job
- BatchProcessor: Orchestrates a batch and collects statistics
"""

import time
import traceback
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any

import structlog

from curvebool.config import CurveboolSettings
from curvebool.core.boolean import BooleanOperation, CurveBoolean
from curvebool.domain import NurbsCurve
from curvebool.utils import OperationLogger, OperationStats


def process_pair(
    subject_dict: dict[str, Any],
    clip_dict: dict[str, Any],
    operation: str,
    settings_dict: dict[str, Any],
) -> dict[str, Any]:
    """Run one boolean operation on serialized curves.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        subject_dict: Serialized subject curve (from NurbsCurve.to_dict())
        clip_dict: Serialized clip curve
        operation: BooleanOperation value ("union", "intersection", "difference")
        settings_dict: Serialized CurveboolSettings

    Returns:
        Dictionary containing either:
        - Success: {"regions": [...], "intersection_count": int,
          "diagnostic_count": int, "duration_ms": float}
        - Error: {"error": str, "error_type": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        subject = NurbsCurve.from_dict(subject_dict)
        clip = NurbsCurve.from_dict(clip_dict)
        settings = CurveboolSettings(**settings_dict)

        result = CurveBoolean(settings).boolean(BooleanOperation(operation), subject, clip)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "regions": [region.to_dict() for region in result.regions],
            "intersection_count": len(result.intersections),
            "diagnostic_count": len(result.diagnostics),
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "error_type": type(e).__name__,
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


@dataclass
class BooleanTask:
    """A named boolean operation to run in a batch."""

    name: str
    subject: NurbsCurve
    clip: NurbsCurve
    operation: BooleanOperation


@dataclass
class BatchResult:
    """Per-task results keyed by task name, plus run statistics."""

    results: dict[str, dict[str, Any]] = field(default_factory=dict)
    stats: OperationStats = field(default_factory=OperationStats)


class BatchProcessor:
    """Runs many independent boolean operations in worker processes.

    Example:
        processor = BatchProcessor(CurveboolSettings())
        batch = processor.process(
            [BooleanTask("lens", a, b, BooleanOperation.INTERSECTION)],
            max_workers=4,
        )
    """

    def __init__(
        self,
        settings: CurveboolSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize batch processor.

        Args:
            settings: Settings forwarded to every worker
            logger: Logger (module logger if None)
        """
        self.settings = settings
        self.logger = logger if logger is not None else structlog.get_logger("curvebool")

    def process(
        self,
        tasks: list[BooleanTask],
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> BatchResult:
        """Process tasks in parallel.

        Args:
            tasks: Tasks to run; names must be unique
            max_workers: Maximum worker processes (None = settings, then auto)
            progress_callback: Optional callback(completed, total, task_name, success)

        Returns:
            BatchResult with raw per-task result dictionaries and statistics

        Raises:
            ValueError: If task names are not unique
            KeyboardInterrupt: If processing is cancelled by user
        """
        names = [task.name for task in tasks]
        if len(set(names)) != len(names):
            raise ValueError("Task names must be unique")

        if max_workers is None:
            max_workers = self.settings.processing.max_workers

        operation_logger = OperationLogger(self.logger)
        stats = operation_logger.stats
        stats.start_time = time.time()
        batch = BatchResult(stats=stats)

        settings_dict = self.settings.model_dump()

        self.logger.info(
            "Starting batch processing",
            task_count=len(tasks),
            max_workers=max_workers,
        )

        total = len(tasks)
        completed = 0
        pending_futures: dict = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for task in tasks:
                operation_logger.log_operation_start(task.name, task.operation.value)
                future = executor.submit(
                    process_pair,
                    task.subject.to_dict(),
                    task.clip.to_dict(),
                    task.operation.value,
                    settings_dict,
                )
                pending_futures[future] = task.name

            try:
                for future in as_completed(pending_futures):
                    task_name = pending_futures.pop(future)
                    success = False

                    try:
                        result = future.result()
                        batch.results[task_name] = result

                        if "error" in result:
                            operation_logger.log_operation_error(
                                task_name,
                                Exception(result["error"]),
                                traceback=result.get("traceback"),
                            )
                        else:
                            success = True
                            operation_logger.log_operation_complete(
                                task_name,
                                regions=len(result["regions"]),
                                diagnostics=result["diagnostic_count"],
                                duration_ms=result["duration_ms"],
                            )

                    except Exception as e:
                        # Executor-level error
                        batch.results[task_name] = {
                            "error": str(e),
                            "error_type": type(e).__name__,
                        }
                        operation_logger.log_operation_error(
                            task_name, e, traceback=traceback.format_exc()
                        )

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, task_name, success)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                stats.was_cancelled = True
                stats.cancelled_count = len(pending_futures)

                executor.shutdown(wait=True, cancel_futures=True)
                raise

        # Report in submission order
        batch.results = {name: batch.results[name] for name in names if name in batch.results}

        stats.end_time = time.time()
        self.logger.info(
            "Batch processing complete",
            processed=stats.processed_count,
            errors=stats.error_count,
            regions=stats.regions_produced,
            avg_operation_ms=(
                round(stats.avg_operation_time_ms, 2)
                if stats.avg_operation_time_ms is not None
                else None
            ),
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return batch
