"""
Retry primitives.

Repeatedly invokes a callable until it succeeds, returns an acceptable
result, or the attempt limit is exhausted.

Main Components:
    - Trier: Base class holding the ignored-exception / ignored-result
      configuration and the four invocation shapes
    - CounterBasedTrier: Fixed number of attempts with a fixed interval
    - Sleeper: Protocol for the delay between attempts
    - LimitExceededError: Raised when all attempts are used up

Usage:
    >>> from trier.retry import CounterBasedTrier
    >>> trier = CounterBasedTrier(3, interval=10).ignoring(ConnectionError)
    >>> payload = trier.get(fetch_payload)
"""

from trier.retry.base import NON_MASKABLE_EXCEPTIONS, Trier
from trier.retry.counter import CounterBasedTrier
from trier.retry.exceptions import ConfigurationError, LimitExceededError, TrierError
from trier.retry.sleepers import NoopSleeper, RealSleeper, Sleeper

__all__ = [
    "Trier",
    "CounterBasedTrier",
    "Sleeper",
    "RealSleeper",
    "NoopSleeper",
    "TrierError",
    "ConfigurationError",
    "LimitExceededError",
    "NON_MASKABLE_EXCEPTIONS",
]
