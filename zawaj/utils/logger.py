"""
Logging infrastructure for matching and moderation tools.

Provides:
- Structured logging with millisecond timestamps
- key=value suffixes for structured data
- Console output, optional file output
- Warning/error tracking for end-of-run summaries
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(filename)s:%(lineno)d | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S,%f"


class MillisecondsFormatter(logging.Formatter):
    """Custom formatter that includes milliseconds and aligns log levels."""

    def formatTime(self, record, datefmt=None):  # noqa: N802 - must match parent class method name
        """Override formatTime to include milliseconds."""
        ct = datetime.fromtimestamp(record.created)
        if datefmt and "%f" in datefmt:
            s = ct.strftime(datefmt.replace(",%f", ""))
            return s + f",{int(record.msecs):03d}"
        elif datefmt:
            return ct.strftime(datefmt)
        else:
            return ct.strftime("%Y-%m-%d %H:%M:%S") + f",{int(record.msecs):03d}"


def _format_kwargs(message: str, kwargs: dict) -> str:
    if not kwargs:
        return message
    formatted_data = " ".join(f"{k}={v}" for k, v in kwargs.items())
    return f"{message} [{formatted_data}]"


class MatchingLogger:
    """
    Logger for CLI runs with structured output and issue tracking.
    """

    def __init__(
        self,
        name: str = "zawaj",
        log_level: str = "INFO",
        log_file: Optional[Path] = None,
    ):
        """
        Initialize the logger.

        Args:
            name: Logger name
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
            log_file: Optional path of a log file (all levels are written)
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, log_level.upper()))
        self.logger.propagate = False

        # Prevent duplicate handlers
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers.clear()

        formatter = MillisecondsFormatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

        # stderr keeps stdout clean for --json output
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, log_level.upper()))
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.info(f"Logging to file: {log_file}")

        self.errors = []
        self.warnings = []

    def debug(self, message: str, **kwargs):
        """Log debug message with optional structured data."""
        self.logger.debug(_format_kwargs(message, kwargs), stacklevel=2)

    def info(self, message: str, **kwargs):
        """Log info message with optional structured data."""
        self.logger.info(_format_kwargs(message, kwargs), stacklevel=2)

    def warning(self, message: str, **kwargs):
        """Log warning message and track for reporting."""
        message = _format_kwargs(message, kwargs)
        self.logger.warning(message, stacklevel=2)
        self.warnings.append(
            {
                "message": message,
                "timestamp": datetime.now().isoformat(),
                "data": kwargs,
            }
        )

    def error(self, message: str, exception: Optional[Exception] = None, **kwargs):
        """Log error message and track for reporting."""
        if exception:
            message = f"{message} | Exception: {str(exception)}"
        message = _format_kwargs(message, kwargs)
        self.logger.error(message, exc_info=exception is not None, stacklevel=2)
        self.errors.append(
            {
                "message": message,
                "exception": str(exception) if exception else None,
                "timestamp": datetime.now().isoformat(),
                "data": kwargs,
            }
        )

    def get_error_summary(self) -> dict:
        """Get summary of errors and warnings for reporting."""
        return {
            "total_errors": len(self.errors),
            "total_warnings": len(self.warnings),
            "errors": self.errors,
            "warnings": self.warnings,
        }


# ============================================================================
# Global Logger Instance
# ============================================================================

_default_logger: Optional[MatchingLogger] = None


def get_logger(
    name: str = "zawaj",
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    reconfigure: bool = False,
) -> MatchingLogger:
    """
    Get or create the default logger.

    Args:
        name: Logger name
        log_level: Logging level
        log_file: Optional log file
        reconfigure: Replace an existing default logger (new level, file
            and cleared issue tracking)

    Returns:
        MatchingLogger instance
    """
    global _default_logger

    if _default_logger is None or reconfigure:
        _default_logger = MatchingLogger(name=name, log_level=log_level, log_file=log_file)

    return _default_logger


def configure_global_logging(log_level: str = "INFO"):
    """
    Route the root logger (and so every zawaj.* module logger) through
    the unified format on stderr.

    Args:
        log_level: Logging level to apply globally (DEBUG, INFO, WARNING, ERROR)
    """
    formatter = MillisecondsFormatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))
    root_logger.handlers.clear()

    root_handler = logging.StreamHandler(sys.stderr)
    root_handler.setLevel(getattr(logging, log_level.upper()))
    root_handler.setFormatter(formatter)
    root_logger.addHandler(root_handler)

    # YAML and pydantic stay quiet below warnings
    for lib_name in ["yaml", "pydantic"]:
        logging.getLogger(lib_name).setLevel(max(logging.WARNING, root_logger.level))
