"""Batch processing of path requests.

This module dispatches path requests to the generators and runs batches
of them in parallel using ProcessPoolExecutor.

Key components:
- build_path: Dispatch one PathRequest to the matching generator
- process_request: Top-level picklable function for parallel execution
- PathProcessor: Orchestrator class for batches of requests
"""

import time
import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import TYPE_CHECKING, Any

from superellipse.core.path import (
    generate_asymmetric_path,
    generate_per_corner_path,
    generate_symmetric_path,
)
from superellipse.domain import PathMode, PathRequest, PathResult
from superellipse.exceptions import ErrorCode, InvalidRequestError, SuperellipseError
from superellipse.utils import ProcessingLogger, ProcessingStats, configure_logging

if TYPE_CHECKING:
    from superellipse.config import SuperellipseSettings


def build_path(request: PathRequest) -> str:
    """Generate the path described by a request.

    Args:
        request: Path request with mode, dimensions and exponent fields

    Returns:
        Path descriptor string

    Raises:
        InvalidRequestError: If the mode's exponent fields are missing
        InvalidGeometryError: If any value is out of range
    """
    if request.mode == PathMode.SYMMETRIC:
        if request.exponent is None:
            raise InvalidRequestError("exponent required for symmetric path")
        return generate_symmetric_path(
            request.width, request.height, request.exponent, request.options
        )

    if request.mode == PathMode.ASYMMETRIC:
        if request.exponent_x is None or request.exponent_y is None:
            raise InvalidRequestError("both exponent_x and exponent_y required for asymmetric path")
        return generate_asymmetric_path(
            request.width,
            request.height,
            request.exponent_x,
            request.exponent_y,
            request.options,
        )

    if request.mode == PathMode.PER_CORNER:
        if request.corners is None:
            raise InvalidRequestError("corner exponents required for per-corner path")
        return generate_per_corner_path(
            request.width, request.height, request.corners, request.options
        )

    raise InvalidRequestError(f"unknown path mode {request.mode!r}")


def process_request(request_dict: dict[str, Any]) -> dict[str, Any]:
    """Process a single serialized path request.

    Top-level function designed to be picklable for use with
    ProcessPoolExecutor. Failures are reported in the result rather than
    raised, so one bad request never aborts a batch.

    Args:
        request_dict: Serialized request (from PathRequest.to_dict())

    Returns:
        Serialized PathResult: on success {"success": True, "path": str,
        ...}, on failure {"success": False, "error": str, "code": str, ...}
    """
    start_time = time.perf_counter()

    try:
        request = PathRequest.from_dict(request_dict)
        path = build_path(request)
        result = PathResult(
            success=True,
            path=path,
            calculation_time_ms=(time.perf_counter() - start_time) * 1000,
        )
    except SuperellipseError as e:
        result = PathResult(
            success=False,
            error=str(e),
            code=e.code.value,
            calculation_time_ms=(time.perf_counter() - start_time) * 1000,
        )
    except Exception as e:
        result = PathResult(
            success=False,
            error=f"{type(e).__name__}: {e}",
            code=ErrorCode.UNKNOWN.value,
            calculation_time_ms=(time.perf_counter() - start_time) * 1000,
        )

    return result.to_dict()


class PathProcessor:
    """Orchestrates parallel generation of many paths.

    Example:
        processor = PathProcessor(SuperellipseSettings())
        results, stats = processor.process(requests, max_workers=4)
    """

    def __init__(self, config: "SuperellipseSettings") -> None:
        """Initialize the processor with configuration.

        Args:
            config: Settings providing worker and logging configuration
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=False,
        )
        self.processing_logger = ProcessingLogger(self.logger)

    def process(
        self,
        requests: Sequence[PathRequest],
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, int, bool], None] | None = None,
    ) -> tuple[list[PathResult], ProcessingStats]:
        """Generate paths for a batch of requests in parallel.

        Args:
            requests: Requests to process
            max_workers: Maximum worker processes (None = config default)
            progress_callback: Optional callback(completed, total, index, success)

        Returns:
            Tuple of (results in request order, statistics)

        Raises:
            KeyboardInterrupt: If processing is cancelled by user
        """
        stats = self.processing_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        total = len(requests)
        results: list[PathResult | None] = [None] * total

        self.logger.info(
            "Starting batch processing",
            request_count=total,
            max_workers=max_workers,
        )

        if total:
            self._process_parallel(requests, results, max_workers, progress_callback)
        else:
            self.logger.info("No requests to process")

        stats.end_time = time.time()

        self.logger.info(
            "Processing complete",
            processed=stats.processed_count,
            errors=stats.error_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return [r for r in results if r is not None], stats

    def _process_parallel(
        self,
        requests: Sequence[PathRequest],
        results: list[PathResult | None],
        max_workers: int | None,
        progress_callback: Callable[[int, int, int, bool], None] | None,
    ) -> None:
        stats = self.processing_logger.stats
        total = len(requests)
        completed = 0
        pending_futures: dict = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for index, request in enumerate(requests):
                self.processing_logger.log_request_start(index, request.mode.value)
                future = executor.submit(process_request, request.to_dict())
                pending_futures[future] = index

            try:
                for future in as_completed(pending_futures):
                    index = pending_futures.pop(future)
                    mode = requests[index].mode.value

                    try:
                        result = PathResult.from_dict(future.result())
                    except Exception as e:
                        # Executor-level error, e.g. a crashed worker
                        self.logger.debug("Worker failure", traceback=traceback.format_exc())
                        result = PathResult(
                            success=False,
                            error=str(e),
                            code=ErrorCode.UNKNOWN.value,
                        )

                    if result.success:
                        self.processing_logger.log_request_complete(
                            index=index,
                            mode=mode,
                            path_length=len(result.path or ""),
                            duration_ms=result.calculation_time_ms,
                        )
                    else:
                        self.processing_logger.log_request_error(
                            index=index,
                            error=result.error or "unknown error",
                            code=result.code,
                        )

                    results[index] = result
                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, index, result.success)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                stats.was_cancelled = True
                stats.cancelled_count = len(pending_futures)

                executor.shutdown(wait=True, cancel_futures=True)
                raise
