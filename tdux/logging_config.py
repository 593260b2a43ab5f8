"""
Structured logging configuration for tdux.

Provides JSON-formatted logs with trace_id support, so records from
several emitters in one process can be told apart.

Usage:
    from tdux.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="modal-store")
    logger.info("Registered reducers")
"""

import logging
import sys
from typing import Optional, TextIO

from pythonjsonlogger.json import JsonFormatter

from . import config


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures all logs have a trace_id field, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True


def setup_logging(
    settings: Optional["config.Settings"] = None,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """
    Configure root logger with structured logging.

    Args:
        settings: Settings to apply (default: Settings.from_env())
        stream: Where records are written (default: stdout)

    Returns:
        The stream handler installed on the root logger
    """
    settings = settings or config.Settings.from_env()
    level = getattr(logging, settings.log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    # Filter on the handler so records propagated from child loggers get a trace_id too
    handler.addFilter(TraceIDFilter())

    if settings.log_format == "json":
        formatter: logging.Formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    return handler


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID for correlating logs (typically the emitter name)

    Returns:
        LoggerAdapter with trace_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})
