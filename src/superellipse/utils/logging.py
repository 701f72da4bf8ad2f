"""Logging utilities for superellipse."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class ProcessingStats:
    """Statistics from a batch processing run."""

    processed_count: int = 0
    error_count: int = 0
    cancelled_count: int = 0
    was_cancelled: bool = False
    errors: list[tuple[int, str]] = field(default_factory=list)
    request_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_request_time_ms(self) -> float | None:
        """Average time per successful request."""
        if not self.request_timings_ms:
            return None
        return sum(self.request_timings_ms) / len(self.request_timings_ms)

    @property
    def min_request_time_ms(self) -> float | None:
        """Fastest successful request."""
        return min(self.request_timings_ms) if self.request_timings_ms else None

    @property
    def max_request_time_ms(self) -> float | None:
        """Slowest successful request."""
        return max(self.request_timings_ms) if self.request_timings_ms else None


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers from an earlier call instead of stacking them
    for handler in list(root_logger.handlers):
        if getattr(handler, "_superellipse", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._superellipse = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        console_handler._superellipse = True  # type: ignore[attr-defined]
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

    logger = structlog.get_logger("superellipse")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking batch progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_request_start(self, index: int, mode: str) -> None:
        """Log start of a request."""
        self._logger.debug("Processing request", index=index, mode=mode)

    def log_request_complete(
        self,
        index: int,
        mode: str,
        path_length: int,
        duration_ms: float,
    ) -> None:
        """Log a successfully generated path."""
        self._logger.info(
            "Path generated",
            index=index,
            mode=mode,
            path_length=path_length,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.request_timings_ms.append(duration_ms)

    def log_request_error(
        self,
        index: int,
        error: str,
        code: str | None = None,
    ) -> None:
        """Log a failed request."""
        self._logger.error(
            "Path request failed",
            index=index,
            error=error,
            code=code,
        )
        self._stats.error_count += 1
        self._stats.errors.append((index, error))

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
