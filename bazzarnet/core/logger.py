"""
Centralized logging configuration for the catalog service.

Provides a structured logger with:
- JSON output for production and colored console output for development
- Trace IDs taken from the W3C trace context of the current request
- Optional file logging (always JSON)
- Performance logging against a threshold
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from bazzarnet.core.config import config
from bazzarnet.middleware.trace_context import get_trace_id


class StructuredLogger:
    """
    Logger producing structured entries with service, environment and trace metadata.
    Every call accepts a ``metadata`` dict; by convention it carries an ``event`` key.
    """

    def __init__(self):
        self.service_name = config.service_name
        self.environment = config.environment
        self.log_format = config.log_format.lower()
        self.level = getattr(logging, config.log_level.upper(), logging.INFO)
        self._logger = logging.getLogger(self.service_name)
        self._setup_logging()

    def _setup_logging(self):
        """Configure handlers on the service logger"""
        self._logger.handlers.clear()
        self._logger.setLevel(self.level)
        self._logger.propagate = False

        if config.log_to_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(self.level)
            if self.log_format == "json":
                console_handler.setFormatter(JSONFormatter())
            else:
                console_handler.setFormatter(ConsoleFormatter())
            self._logger.addHandler(console_handler)

        if config.log_to_file:
            log_dir = os.path.dirname(config.log_file_path)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(config.log_file_path)
            file_handler.setLevel(self.level)
            file_handler.setFormatter(JSONFormatter())  # Always JSON for files
            self._logger.addHandler(file_handler)

    def _build_log_entry(
        self,
        level: str,
        message: str,
        user_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs
    ) -> Dict[str, Any]:
        """Build structured log entry"""
        entry = {
            "timestamp": self._get_timestamp(),
            "level": level.upper(),
            "service": self.service_name,
            "environment": self.environment,
            "message": message,
            "traceId": get_trace_id(),
        }

        if user_id:
            entry["userId"] = user_id

        if metadata:
            entry["metadata"] = metadata

        entry.update(kwargs)
        return entry

    def _log(
        self,
        level: str,
        message: str,
        user_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: bool = False,
        **kwargs
    ):
        log_entry = self._build_log_entry(level, message, user_id, metadata, **kwargs)
        log_method = getattr(self._logger, level.lower())

        if self.log_format == "json":
            log_method(json.dumps(log_entry, default=str), exc_info=exc_info)
        else:
            # 'message' would collide with the LogRecord attribute
            extra_data = {k: v for k, v in log_entry.items() if k != "message"}
            log_method(message, extra=extra_data, exc_info=exc_info)

    @staticmethod
    def _get_timestamp() -> str:
        return datetime.now(timezone.utc).isoformat()

    @staticmethod
    def _attach_error(metadata: Optional[Dict[str, Any]], error: Optional[Union[str, Exception]]) -> Dict[str, Any]:
        metadata = dict(metadata or {})
        if isinstance(error, Exception):
            metadata["error"] = {"type": type(error).__name__, "message": str(error)}
        elif error:
            metadata["error"] = {"message": str(error)}
        return metadata

    def debug(self, message: str, user_id: Optional[str] = None, metadata: Optional[Dict[str, Any]] = None, **kwargs):
        """Debug level logging"""
        self._log("DEBUG", message, user_id, metadata, **kwargs)

    def info(self, message: str, user_id: Optional[str] = None, metadata: Optional[Dict[str, Any]] = None, **kwargs):
        """Info level logging"""
        self._log("INFO", message, user_id, metadata, **kwargs)

    def warning(self, message: str, user_id: Optional[str] = None, metadata: Optional[Dict[str, Any]] = None, **kwargs):
        """Warning level logging"""
        self._log("WARNING", message, user_id, metadata, **kwargs)

    def error(
        self,
        message: str,
        user_id: Optional[str] = None,
        error: Optional[Union[str, Exception]] = None,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        """Error level logging"""
        self._log("ERROR", message, user_id, self._attach_error(metadata, error), **kwargs)

    def performance(
        self,
        operation: str,
        duration_ms: int,
        threshold_ms: Optional[int] = None,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        """Log the duration of an operation, as a warning when it exceeds the threshold"""
        metadata = dict(metadata or {})
        metadata.update({
            "operation": operation,
            "durationMs": duration_ms,
            "thresholdMs": threshold_ms,
        })
        level = "WARNING" if threshold_ms and duration_ms > threshold_ms else "INFO"
        self._log(level, f"Operation completed: {operation}", metadata=metadata, **kwargs)


_RESERVED_RECORD_KEYS = {
    "name", "msg", "args", "created", "filename", "funcName", "levelname", "levelno",
    "lineno", "module", "msecs", "message", "pathname", "process", "processName",
    "relativeCreated", "thread", "threadName", "exc_info", "exc_text", "stack_info",
    "taskName",
}


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record):
        message = record.getMessage()
        try:
            # Entries built by StructuredLogger in json mode are already serialized
            return json.dumps(json.loads(message), default=str)
        except ValueError:
            pass

        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": config.service_name,
            "message": message,
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS:
                log_data[key] = value
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


class ConsoleFormatter(logging.Formatter):
    """Colored console formatter for development"""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record):
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset = self.COLORS['RESET']
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')

        line = f"{color}[{timestamp}] {record.levelname}{reset} - {record.getMessage()}"
        metadata = getattr(record, "metadata", None)
        if metadata:
            line += f" {json.dumps(metadata, default=str)}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


# Create and export the logger instance
logger = StructuredLogger()
