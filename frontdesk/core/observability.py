"""Observability setup for business metrics and structured logging."""

import logging

import structlog
from prometheus_client import CollectorRegistry, Counter, Gauge, generate_latest

from .config import settings

# Prometheus metrics
REGISTRY = CollectorRegistry()

BOOKINGS_CREATED = Counter(
    'frontdesk_bookings_created_total',
    'Total bookings created',
    registry=REGISTRY
)

BOOKINGS_REMOVED = Counter(
    'frontdesk_bookings_removed_total',
    'Total bookings removed',
    registry=REGISTRY
)

FIELD_EDITS_COMMITTED = Counter(
    'frontdesk_field_edits_committed_total',
    'Total in-place field edits committed',
    ['field'],
    registry=REGISTRY
)

LOOKUP_MISSES = Counter(
    'frontdesk_lookup_misses_total',
    'Lookups that resolved to a benign default',
    ['kind'],
    registry=REGISTRY
)

ROOM_STATUS_CHANGES = Counter(
    'frontdesk_room_status_changes_total',
    'Room status transitions',
    ['status'],
    registry=REGISTRY
)

ROOMS_OCCUPIED = Gauge(
    'frontdesk_rooms_occupied',
    'Number of rooms with a checked-in guest',
    registry=REGISTRY
)


def setup_structured_logging():
    """Configure structured logging with structlog."""

    def add_hotel(logger, method_name, event_dict):
        """Add the hotel name to log events."""
        event_dict.setdefault('hotel', settings.hotel_name)
        return event_dict

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_hotel,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer() if settings.debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level)
        ),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


class MetricsCollector:
    """Collector for business metrics."""

    @staticmethod
    def record_booking_created():
        """Record a booking creation."""
        BOOKINGS_CREATED.inc()

    @staticmethod
    def record_booking_removed():
        """Record a booking removal."""
        BOOKINGS_REMOVED.inc()

    @staticmethod
    def record_field_edit(field: str):
        """Record a committed field edit."""
        FIELD_EDITS_COMMITTED.labels(field=field).inc()

    @staticmethod
    def record_lookup_miss(kind: str):
        """Record a lookup that fell back to a default."""
        LOOKUP_MISSES.labels(kind=kind).inc()

    @staticmethod
    def record_room_status(status: str):
        """Record a room status transition."""
        ROOM_STATUS_CHANGES.labels(status=status).inc()

    @staticmethod
    def set_rooms_occupied(count: int):
        """Set the number of rooms with a checked-in guest."""
        ROOMS_OCCUPIED.set(count)


def get_prometheus_metrics() -> bytes:
    """Get Prometheus metrics in text exposition format."""
    return generate_latest(REGISTRY)


# Global metrics collector instance
metrics_collector = MetricsCollector()


class StructuredLogger:
    """Structured logger with business context."""

    def __init__(self, name_or_logger):
        if isinstance(name_or_logger, str):
            self.logger = structlog.get_logger(name_or_logger)
        else:
            self.logger = name_or_logger

    def info(self, message: str, **kwargs):
        """Log info message with context."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with context."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with context."""
        self.logger.error(message, **kwargs)

    def debug(self, message: str, **kwargs):
        """Log debug message with context."""
        self.logger.debug(message, **kwargs)

    def with_context(self, **kwargs):
        """Add context to logger."""
        return StructuredLogger(self.logger.bind(**kwargs))


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance."""
    return StructuredLogger(name)
