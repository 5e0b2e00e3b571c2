"""
Logging Configuration Module

Sets up the "projecthub" logger hierarchy:
- readable: colored, human-oriented lines for local development
- json: one JSON object per line for log aggregation
"""
import json
import logging
import sys
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """JSON log formatter for production / log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        # Extra fields attached via logger.x(..., extra={...})
        for key in ("project_id", "milestone_id", "task_id", "user_id"):
            val = getattr(record, key, None)
            if val is not None:
                log_entry[key] = val
        return json.dumps(log_entry, ensure_ascii=False)


class ReadableFormatter(logging.Formatter):
    """Human-readable colored formatter for development."""

    COLORS = {
        "DEBUG": "\033[36m",      # cyan
        "INFO": "\033[32m",       # green
        "WARNING": "\033[33m",    # yellow
        "ERROR": "\033[31m",      # red
        "CRITICAL": "\033[35m",   # magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        ts = datetime.now().strftime("%H:%M:%S")
        base = f"{color}{ts} {record.levelname:<8}{self.RESET} {record.name}: {record.getMessage()}"
        if record.exc_info and record.exc_info[0] is not None:
            base += "\n" + self.formatException(record.exc_info)
        return base


def configure_logging(level_name: str = "INFO", fmt: str = "readable") -> logging.Logger:
    """
    Install a single stderr handler on the "projecthub" logger.

    Args:
        level_name: Standard logging level name (DEBUG, INFO, ...)
        fmt: "json" for JSONFormatter, anything else for ReadableFormatter

    Returns:
        logging.Logger: The configured package logger
    """
    level = getattr(logging, level_name.upper(), logging.INFO)
    formatter = JSONFormatter() if fmt == "json" else ReadableFormatter()

    logger = logging.getLogger("projecthub")
    # Remove existing handlers to prevent duplicates on reload
    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    # Quieten noisy libraries
    for noisy in ("sqlalchemy.engine", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logger.info("Logging configured: level=%s format=%s", level_name, fmt)
    return logger
