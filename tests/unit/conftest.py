"""Unit test fixtures (metrics helpers and settings overrides)."""

import pytest
from prometheus_client import REGISTRY

from trier.config import settings


@pytest.fixture
def metric_value():
    """Read a sample from the default Prometheus registry (0.0 if absent).

    Usage:
        def test_something(metric_value):
            before = metric_value("trier_attempts_total", strategy="counter", outcome="success")
    """
    def _read(name: str, **labels: str) -> float:
        value = REGISTRY.get_sample_value(name, labels)
        return value if value is not None else 0.0

    return _read


@pytest.fixture
def metrics_disabled(monkeypatch):
    """Turn off metric recording for the duration of a test."""
    monkeypatch.setattr(settings, "METRICS_ENABLED", False)
