"""Prometheus metrics for trier.

Metrics are registered in the default prometheus_client registry, so an
application that already exposes ``/metrics`` picks them up for free.
Useful alert signals:
- trier_attempts_total{outcome="ignored_error"} (flaky dependency)
- trier_limit_exceeded_total (retries no longer mask the failure)
"""

from prometheus_client import Counter

from trier.config import settings

# === Attempt Metrics ===

attempts_total = Counter(
    "trier_attempts_total",
    "Total attempts by strategy and outcome",
    ["strategy", "outcome"],
)
"""
Attempts counter by strategy and outcome.

Labels:
- strategy: counter (CounterBasedTrier)
- outcome: success, ignored_error, ignored_result, fatal
"""

limit_exceeded_total = Counter(
    "trier_limit_exceeded_total",
    "Total invocations that ran out of attempts",
    ["strategy"],
)

# === Delay Metrics ===

delay_seconds_total = Counter(
    "trier_delay_seconds_total",
    "Total time requested from sleepers between attempts",
    ["strategy"],
)


def record_attempt(strategy: str, outcome: str) -> None:
    if settings.METRICS_ENABLED:
        attempts_total.labels(strategy=strategy, outcome=outcome).inc()


def record_delay(strategy: str, interval_ms: float) -> None:
    if settings.METRICS_ENABLED:
        delay_seconds_total.labels(strategy=strategy).inc(interval_ms / 1000)


def record_limit_exceeded(strategy: str) -> None:
    if settings.METRICS_ENABLED:
        limit_exceeded_total.labels(strategy=strategy).inc()
