"""
Observability for the pagination engine.

Provides:
- Structured logging with JSON format and correlation IDs
- Request correlation ID (request_id) propagation via context variables
- Prometheus metrics for served and rejected pagination requests

Usage:
    from relay_pagination.core.observability import (
        configure_structured_logging,
        set_correlation_id,
        metrics,
    )
"""

import json
import logging
import uuid
from contextvars import ContextVar
from datetime import UTC, datetime

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest

from relay_pagination.core.config import settings

# ============================================================================
# Context Variables for Request Tracking
# ============================================================================

# Correlation ID - links pagination logs to the caller's request
_request_id_ctx: ContextVar[str] = ContextVar("request_id", default="")


def generate_request_id() -> str:
    """Generate a unique request ID for correlation."""
    return str(uuid.uuid4())


def get_request_id() -> str:
    """Get the current request ID from context."""
    return _request_id_ctx.get()


def set_correlation_id(request_id: str) -> None:
    """Set the correlation ID for the current request context."""
    _request_id_ctx.set(request_id)


# ============================================================================
# Structured Logging Configuration
# ============================================================================

_RESERVED_RECORD_KEYS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "getMessage",
        "message",
        "asctime",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs logs as JSON with standard fields:
    - timestamp: ISO 8601 format
    - level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - logger: Logger name
    - message: Log message
    - request_id: Correlation ID (if available)
    - extra: Any additional context from logging.extra
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = get_request_id()
        if request_id:
            log_entry["request_id"] = request_id

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
            }

        log_entry["file"] = record.pathname
        log_entry["line"] = record.lineno
        log_entry["function"] = record.funcName

        # These come from logger.info("msg", extra={"key": "value"})
        extra_keys = {
            k: v for k, v in record.__dict__.items() if k not in _RESERVED_RECORD_KEYS
        }
        if extra_keys:
            log_entry["extra"] = extra_keys

        return json.dumps(log_entry, default=str)


def configure_structured_logging(level: str = "INFO") -> None:
    """
    Configure root logger with structured JSON formatting.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    root_logger.addHandler(handler)


def configure_logging_from_settings() -> bool:
    """Install structured logging when enabled in settings; return whether it was."""
    if not settings.observability_structured_logs:
        return False
    configure_structured_logging(settings.app_log_level)
    return True


# ============================================================================
# Prometheus Metrics
# ============================================================================

# Use a custom registry to avoid conflicts with the host application's metrics
_registry = CollectorRegistry()


class Metrics:
    """
    Metrics collected by the pagination engine.

    Labels use the connection name given to each paginator, so cardinality
    is bounded by the number of paginators the caller defines.
    """

    def __init__(self, registry: CollectorRegistry) -> None:
        self.registry = registry

        self.pagination_requests_total = Counter(
            "pagination_requests_total",
            "Total pagination requests served",
            ["connection", "window"],
            registry=self.registry,
        )

        self.pagination_errors_total = Counter(
            "pagination_errors_total",
            "Total pagination requests rejected",
            ["connection", "error_type"],
            registry=self.registry,
        )

        self.pagination_page_size = Histogram(
            "pagination_page_size",
            "Number of edges returned per page",
            ["connection"],
            buckets=(0, 1, 5, 10, 25, 50, 100),
            registry=self.registry,
        )

        self.pagination_input_size = Histogram(
            "pagination_input_size",
            "Number of items handed to the paginator",
            ["connection"],
            buckets=(0, 10, 100, 1000, 10000, 100000),
            registry=self.registry,
        )

    def record_page(self, connection: str, window: str, page_size: int, total_count: int) -> None:
        if not settings.metrics_enabled:
            return
        self.pagination_requests_total.labels(connection=connection, window=window).inc()
        self.pagination_page_size.labels(connection=connection).observe(page_size)
        self.pagination_input_size.labels(connection=connection).observe(total_count)

    def record_error(self, connection: str, error: Exception) -> None:
        if not settings.metrics_enabled:
            return
        self.pagination_errors_total.labels(
            connection=connection, error_type=error.__class__.__name__
        ).inc()


# Global metrics instance
metrics = Metrics(_registry)


def render_metrics() -> bytes:
    """Return the metrics in Prometheus text exposition format."""
    return generate_latest(_registry)
