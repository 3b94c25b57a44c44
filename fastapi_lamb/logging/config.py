"""Logging configuration with JSON formatting."""

import json
import logging
import os
import sys
from datetime import UTC, datetime
from typing import Any

from fastapi_lamb.config import settings

TRACE_ID_ENV = "_X_AMZN_TRACE_ID"

# Libraries that log every in-process dispatch at INFO
QUIET_LOGGERS = ("httpx", "httpcore")


class JSONFormatter(logging.Formatter):
    """
    Custom formatter that outputs logs as JSON.

    Each log record is formatted as a JSON object with the following fields:
    - timestamp: ISO 8601 timestamp in UTC
    - level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - logger: Logger name
    - message: Log message
    - function_name, function_version: Lambda function (when running on Lambda)
    - trace_id: X-Ray trace header of the current invocation, if set
    - correlation_id: Lambda request ID (if present in extra)
    - Additional fields from the `context` dict passed in extra
    """

    def __init__(self) -> None:
        super().__init__()
        self.function_name = os.getenv("AWS_LAMBDA_FUNCTION_NAME")
        self.function_version = os.getenv("AWS_LAMBDA_FUNCTION_VERSION")

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record as JSON.

        Args:
            record: The log record to format

        Returns:
            JSON string representation of the log record
        """
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if self.function_name:
            log_data["function_name"] = self.function_name
            log_data["function_version"] = self.function_version

        # The runtime sets this per invocation, so it is read per record
        trace_id = os.getenv(TRACE_ID_ENV)
        if trace_id:
            log_data["trace_id"] = trace_id

        if getattr(record, "correlation_id", None):
            log_data["correlation_id"] = record.correlation_id

        if hasattr(record, "context"):
            log_data.update(record.context)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # File location only at DEBUG level
        if record.levelno == logging.DEBUG:
            log_data["file"] = record.pathname
            log_data["line"] = record.lineno
            log_data["function"] = record.funcName

        return json.dumps(log_data, default=str)


def configure_logging() -> None:
    """
    Configure adapter logging with JSON formatter.

    Sets up the root logger to output structured JSON logs to stdout,
    replacing the plain handler the Lambda runtime installs. Log level is
    determined by the LAMB_LOG_LEVEL environment variable.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    root_logger.debug(
        "Logging configured",
        extra={"context": {"log_level": settings.log_level}},
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: The name of the logger (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
