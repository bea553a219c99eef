"""
Structured logging utilities for csv2jsonl

Provides JSON-formatted logging, performance metrics and the skipped-row
diagnostics channel used by the converter.
"""

import json
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Dict
from datetime import datetime, timezone

from csv2jsonl.config import get_config


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields if present
        if hasattr(record, 'extra_fields'):
            log_entry.update(record.extra_fields)

        # Add exception info if present
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


class Logger:
    """Centralized logger configuration"""

    _loggers: Dict[str, logging.Logger] = {}

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get or create a logger with the given name"""
        if name not in cls._loggers:
            cls._loggers[name] = cls._setup_logger(name)
        return cls._loggers[name]

    @classmethod
    def _setup_logger(cls, name: str) -> logging.Logger:
        """Set up a logger with appropriate handlers and formatters"""
        config = get_config()
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, config.logging.level.upper(), logging.INFO))

        # Remove existing handlers to avoid duplicates
        logger.handlers.clear()

        # stdout carries the conversion preview, diagnostics go to stderr
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(JSONFormatter())
        logger.addHandler(console_handler)

        # File handler with rotation if file path is specified
        if config.logging.file_path:
            file_path = Path(config.logging.file_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                file_path,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5
            )
            file_handler.setFormatter(JSONFormatter())
            logger.addHandler(file_handler)

        return logger


def log_performance(logger: logging.Logger, operation: str, duration: float,
                    records_processed: Optional[int] = None, **kwargs):
    """Log performance metrics for operations"""
    extra_fields = {
        "operation": operation,
        "duration_seconds": duration,
        "records_processed": records_processed,
        **kwargs
    }

    logger.info(f"Performance: {operation} completed in {duration:.2f}s",
                extra={"extra_fields": extra_fields})


def log_skipped_row(logger: logging.Logger, line_number: int, content: str,
                    reason: Optional[str] = None, **kwargs):
    """Report a malformed CSV line that was left out of the output"""
    extra_fields = {
        "line_number": line_number,
        "content": content,
        "reason": reason,
        **kwargs
    }

    logger.warning(f"Skipped malformed line {line_number}",
                   extra={"extra_fields": extra_fields})


# Convenience functions
def get_logger(name: str = "csv2jsonl") -> logging.Logger:
    """Get the default logger"""
    return Logger.get_logger(name)
