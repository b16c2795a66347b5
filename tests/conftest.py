"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import pytest

from trier.config import Settings


class RecordingSleeper:
    """Sleeper that records requested intervals instead of blocking."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def sleep(self, interval_ms: float) -> None:
        self.calls.append(interval_ms)


class FlakyAction:
    """Callable that raises ``error`` for the first ``failures`` calls, then returns ``result``."""

    def __init__(self, failures: int, error: type[BaseException], result):
        self.failures = failures
        self.error = error
        self.result = result
        self.calls = 0
        self.args: list[tuple] = []

    def __call__(self, *args):
        self.calls += 1
        self.args.append(args)
        if self.calls <= self.failures:
            raise self.error(f"failure #{self.calls}")
        return self.result


class NetworkError(Exception):
    """Transient failure used throughout the tests."""


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.DEFAULT_INTERVAL_MS = 10
    """
    return Settings(
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        DEFAULT_INTERVAL_MS=500,
        DEFAULT_ATTEMPTS=3,
        METRICS_ENABLED=True,
    )


@pytest.fixture
def sleeper() -> RecordingSleeper:
    """Fresh RecordingSleeper for each test."""
    return RecordingSleeper()


@pytest.fixture
def network_error() -> type[NetworkError]:
    """The transient exception type used in retry scenarios."""
    return NetworkError


@pytest.fixture
def create_flaky_action():
    """Factory fixture to create FlakyAction instances.

    Usage:
        def test_something(create_flaky_action):
            action = create_flaky_action(failures=2, result="ok")
    """
    def _create(
        failures: int = 0,
        error: type[BaseException] = NetworkError,
        result="ok",
    ) -> FlakyAction:
        return FlakyAction(failures, error, result)

    return _create
