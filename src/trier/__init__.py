"""
trier: retry an action until it succeeds or a limit is reached.

Masks transient failures (flaky calls, eventual-consistency polling) behind
a small call-and-retry contract:

    >>> from trier import CounterBasedTrier
    >>> CounterBasedTrier(3).ignoring(ConnectionError).get(fetch_status)

Architecture: Trier contract + CounterBasedTrier strategy + injectable Sleeper
"""

from trier.retry import (
    ConfigurationError,
    CounterBasedTrier,
    LimitExceededError,
    NoopSleeper,
    RealSleeper,
    Sleeper,
    Trier,
    TrierError,
)

__version__ = "0.1.0"

__all__ = [
    "Trier",
    "CounterBasedTrier",
    "Sleeper",
    "RealSleeper",
    "NoopSleeper",
    "TrierError",
    "ConfigurationError",
    "LimitExceededError",
]
