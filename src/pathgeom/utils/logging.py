"""Logging utilities for pathgeom."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class EditStats:
    """Statistics from an editing session."""

    inserted_on_curve: int = 0
    appended: int = 0
    removed: int = 0
    converted: int = 0
    close_toggles: int = 0
    snap_misses: int = 0
    actions: list[tuple[str, int]] = field(default_factory=list)

    @property
    def total_edits(self) -> int:
        """Number of edits that changed the shape."""
        return (
            self.inserted_on_curve
            + self.appended
            + self.removed
            + self.converted
            + self.close_toggles
        )


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

    logger = structlog.get_logger("pathgeom")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class EditLogger:
    """Logger for tracking shape edits and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("pathgeom.editing")
        self._stats = EditStats()

    def log_insert_on_curve(self, curve_index: int, t: float, point_count: int) -> None:
        """Log a point inserted by splitting a curve."""
        self._logger.debug(
            "Point inserted on curve",
            curve=curve_index,
            t=round(t, 6),
            points=point_count,
        )
        self._stats.inserted_on_curve += 1
        self._stats.actions.append(("insert_on_curve", curve_index))

    def log_append(self, x: float, y: float, point_count: int) -> None:
        """Log a corner point appended to an open shape."""
        self._logger.debug("Point appended", x=x, y=y, points=point_count)
        self._stats.appended += 1
        self._stats.actions.append(("append", point_count - 1))

    def log_remove(self, index: int, point_count: int) -> None:
        """Log a removed point."""
        self._logger.debug("Point removed", index=index, points=point_count)
        self._stats.removed += 1
        self._stats.actions.append(("remove", index))

    def log_conversion(self, index: int, kind: str) -> None:
        """Log a corner/smooth conversion."""
        self._logger.debug("Point converted", index=index, kind=kind)
        self._stats.converted += 1
        self._stats.actions.append((f"convert_to_{kind}", index))

    def log_toggle_close(self, closed: bool) -> None:
        """Log opening or closing the shape."""
        self._logger.info("Shape close toggled", closed=closed)
        self._stats.close_toggles += 1
        self._stats.actions.append(("toggle_close", int(closed)))

    def log_snap_miss(self, distance: float | None, radius: float) -> None:
        """Log a click that did not snap onto any curve."""
        self._logger.debug(
            "Snap missed",
            distance=round(distance, 4) if distance is not None else None,
            radius=radius,
        )
        self._stats.snap_misses += 1

    @property
    def stats(self) -> EditStats:
        """Get current editing statistics."""
        return self._stats
