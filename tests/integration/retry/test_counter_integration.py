"""
Integration tests for CounterBasedTrier.

These tests use the real sleeper, so they actually wait between attempts.
Intervals are kept to a few milliseconds.

Run with: pytest tests/integration/retry/test_counter_integration.py -v
"""

import time

import pytest

from trier import CounterBasedTrier, LimitExceededError, RealSleeper

pytestmark = pytest.mark.integration


def test_network_error_recovers_after_two_delays(create_flaky_action, network_error):
    """Test attempts=3, interval=10ms: two NetworkErrors, then success after ~20ms."""
    action = create_flaky_action(failures=2, error=network_error, result="payload")
    trier = CounterBasedTrier(3, interval=10).ignoring(network_error)

    started = time.monotonic()
    result = trier.get(action)
    elapsed = time.monotonic() - started

    assert result == "payload"
    assert action.calls == 3
    assert elapsed >= 0.02
    assert elapsed < 2.0


def test_no_sleep_after_last_attempt(create_flaky_action, network_error):
    """Test exhaustion waits only between attempts, not after the last one."""
    action = create_flaky_action(failures=10, error=network_error)
    trier = CounterBasedTrier(2, sleeper=RealSleeper(), interval=50).ignoring(network_error)

    started = time.monotonic()
    with pytest.raises(LimitExceededError) as exc_info:
        trier.run(action)
    elapsed = time.monotonic() - started

    assert action.calls == 2
    assert elapsed >= 0.05
    assert elapsed < 1.0
    assert isinstance(exc_info.value.__cause__, network_error)


def test_eventual_consistency_polling():
    """Test polling a value that becomes visible after a few reads."""
    store: dict[str, str] = {}
    reads = {"count": 0}

    def read(key):
        reads["count"] += 1
        if reads["count"] == 3:
            store[key] = "committed"
        return store.get(key)

    trier = CounterBasedTrier(5, interval=1).until(lambda value: value is not None)

    assert trier.apply(read, "order-42") == "committed"
    assert reads["count"] == 3
