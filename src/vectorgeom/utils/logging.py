"""Logging utilities for Vectorgeom."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class OperationStats:
    """Statistics from a run of path operations."""

    operation_count: int = 0
    error_count: int = 0
    input_segments: int = 0
    output_segments: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    durations_ms: list[float] = field(default_factory=list)

    @property
    def total_duration_ms(self) -> float:
        return sum(self.durations_ms)

    @property
    def avg_duration_ms(self) -> float | None:
        if not self.durations_ms:
            return None
        return self.total_duration_ms / len(self.durations_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and an optional file.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_vectorgeom", False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler._vectorgeom = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._vectorgeom = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

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

    logger = structlog.get_logger("vectorgeom")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class OperationLogger:
    """Logger for tracking path operations and their statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = OperationStats()

    def log_operation_start(self, operation: str, **details: object) -> None:
        """Log start of an operation."""
        self._logger.debug("Operation started", operation=operation, **details)

    def log_operation_complete(
        self,
        operation: str,
        input_segments: int,
        output_segments: int,
        duration_ms: float,
    ) -> None:
        """Log a successful operation."""
        self._logger.info(
            "Operation complete",
            operation=operation,
            input_segments=input_segments,
            output_segments=output_segments,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.operation_count += 1
        self._stats.input_segments += input_segments
        self._stats.output_segments += output_segments
        self._stats.durations_ms.append(duration_ms)

    def log_operation_error(self, operation: str, error: Exception) -> None:
        """Log a failed operation."""
        self._logger.error(
            "Operation failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((operation, str(error)))

    def log_sampling(self, path_id: str, resolution: float, point_count: int) -> None:
        """Log flattening details."""
        self._logger.debug(
            "Path sampled",
            path=path_id,
            resolution=resolution,
            points=point_count,
        )

    @property
    def stats(self) -> OperationStats:
        """Get current operation statistics."""
        return self._stats
