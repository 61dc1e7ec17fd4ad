"""Structured logging configuration for the RSVP core service"""

import json
import logging
import sys
import time
from datetime import datetime, timezone
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Callable, Optional

LOG_FILE_NAME = "rsvp_core.log"


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for the rotating log file"""

    def __init__(self, service: str = "rsvp_core"):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "service": self.service,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "source": f"{record.module}:{record.funcName}:{record.lineno}",
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Batch metrics passed through extra={"extra_data": {...}}
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        return json.dumps(log_data, ensure_ascii=False)


class ConsoleFormatter(logging.Formatter):
    """Single-line console output, coloured by level when attached to a terminal"""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        level = f"[{record.levelname}]"
        if self.use_color and record.levelname in self.COLORS:
            level = f"{self.COLORS[record.levelname]}{level}{self.RESET}"

        log_msg = f"{level} {record.name} - {record.getMessage()}"

        extra = getattr(record, "extra_data", None) or {}
        if "duration_ms" in extra:
            log_msg += f" ({extra['duration_ms']:.2f}ms)"

        if record.exc_info:
            log_msg += f"\n{self.formatException(record.exc_info)}"

        return log_msg


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[Path] = None,
    enable_console_logging: bool = True,
    service: str = "rsvp_core",
) -> None:
    """
    Setup logging configuration for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for rotating JSON log files; file logging is
            disabled when None.
        enable_console_logging: Enable logging to stderr
        service: Service name stamped on every JSON record
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    root_logger.handlers.clear()

    if enable_console_logging:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(ConsoleFormatter(use_color=sys.stderr.isatty()))
        root_logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"  # 10MB
        )
        file_handler.setFormatter(JSONFormatter(service))
        root_logger.addHandler(file_handler)

    # The tokenizer only logs per batch, but keep it quiet unless asked
    logging.getLogger("rsvp_core.services.tokenizer").setLevel(
        logging.DEBUG if log_level.upper() == "DEBUG" else logging.INFO
    )


def log_performance(operation_name: str, level: int = logging.DEBUG):
    """
    Decorator to log function execution time.

    Args:
        operation_name: Name of the operation for logging
        level: Log level used for the success record
    """

    def decorator(func: Callable) -> Callable:
        logger = logging.getLogger(func.__module__)

        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            start_time = time.perf_counter()

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.error(
                    f"{operation_name} failed: {e}",
                    exc_info=True,
                    extra={
                        "extra_data": {
                            "operation": operation_name,
                            "duration_ms": duration_ms,
                            "success": False,
                            "error_type": type(e).__name__,
                        }
                    },
                )
                raise

            if logger.isEnabledFor(level):
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.log(
                    level,
                    f"{operation_name} completed",
                    extra={
                        "extra_data": {
                            "operation": operation_name,
                            "duration_ms": duration_ms,
                            "success": True,
                        }
                    },
                )

            return result

        return wrapper

    return decorator
