"""Monitoring and metrics instrumentation for trier.

Exports Prometheus counters for attempts, delays and exhausted invocations.
"""

from trier.monitoring.metrics import (
    attempts_total,
    delay_seconds_total,
    limit_exceeded_total,
    record_attempt,
    record_delay,
    record_limit_exceeded,
)

__all__ = [
    "attempts_total",
    "delay_seconds_total",
    "limit_exceeded_total",
    "record_attempt",
    "record_delay",
    "record_limit_exceeded",
]
