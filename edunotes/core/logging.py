import logging
import sys
import json
import time
from datetime import datetime, timezone
from typing import Optional
from contextlib import contextmanager

from edunotes.core.config import Settings, settings as default_settings


class EnhancedJSONFormatter(logging.Formatter):
    """JSON formatter with structured context"""

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

        # Add context information
        context_fields = [
            'collection', 'operation', 'execution_time_ms',
            'student_id', 'note_id', 'backend'
        ]

        for field in context_fields:
            if hasattr(record, field) and getattr(record, field) is not None:
                log_entry[field] = getattr(record, field)

        if record.exc_info:
            log_entry['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': self.formatException(record.exc_info).split('\n')
            }

        return json.dumps(log_entry, default=str)


class PerformanceLogger:
        def __init__(self, logger: logging.Logger):
            self.logger = logger

        @contextmanager
        def measure_time(self, operation: str, collection: Optional[str] = None):
            """Context manager to measure execution time"""
            start_time = time.perf_counter()

            try:
                yield

            finally:
                execution_time = (time.perf_counter() - start_time) * 1000

                extra_data = {
                    'operation': operation,
                    'execution_time_ms': execution_time,
                    'collection': collection
                }

                if execution_time > 1000:
                    self.logger.warning(
                        f"Slow operation: {operation} took {execution_time:.2f}ms",
                        extra=extra_data
                    )
                else:
                    self.logger.debug(
                        f"Operation completed: {operation} took {execution_time:.2f}ms",
                        extra=extra_data
                    )


def setup_logging(config: Optional[Settings] = None):
        """Setup logging configuration"""
        config = config or default_settings

        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))

        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        console_handler = logging.StreamHandler(sys.stdout)

        if config.ENVIRONMENT == "development" and not config.LOG_JSON:
            console_formatter = logging.Formatter(config.LOG_FORMAT)
        else:
            console_formatter = EnhancedJSONFormatter()

        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

        logging.getLogger("uvicorn").setLevel(logging.INFO)
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
        logging.getLogger("httpx").setLevel(logging.WARNING)

def get_logger(name: str) -> logging.Logger:
        """Get logger instance with proper configuration"""
        return logging.getLogger(name)

def get_performance_logger(name: str) -> PerformanceLogger:
        """Get performance logger instance"""
        return PerformanceLogger(get_logger(name))
