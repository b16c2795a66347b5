"""
Counter-based retry strategy.

Attempts an action up to N times with a fixed pause between attempts:

    attempt 1 -> pause -> attempt 2 -> pause -> ... -> attempt N -> give up

No pause follows the final attempt. Exceptions that are not ignored abort
the loop immediately and propagate unwrapped. When all attempts are used
up, LimitExceededError is raised with the last ignored exception as its
cause. Rejected results are discarded without becoming the cause.

Usage:
    >>> trier = CounterBasedTrier(5, interval=100).ignoring(TimeoutError)
    >>> trier.run(flush_queue)
"""

from typing import Any, Callable

import structlog

from trier.config import settings
from trier.monitoring.metrics import record_attempt, record_delay, record_limit_exceeded
from trier.retry.base import Trier
from trier.retry.exceptions import LimitExceededError, describe_action
from trier.retry.sleepers import RealSleeper, Sleeper

logger = structlog.get_logger(__name__)


class CounterBasedTrier(Trier):
    """
    Retries an action a fixed number of times with a fixed interval.

    The instance holds no per-call state: every invocation keeps its own
    attempt counter, so one trier can be reused for any number of calls.

    Attributes:
        attempts: Maximum number of attempts (>= 1)
        interval: Pause between attempts in milliseconds (>= 0)
        sleeper: Delay mechanism used for the pause
    """

    name = "counter"

    def __init__(
        self,
        attempts: int,
        sleeper: Sleeper | None = None,
        interval: float | None = None,
    ):
        """
        Initialize counter-based trier.

        Args:
            attempts: Maximum number of attempts
            sleeper: Delay mechanism (defaults to RealSleeper)
            interval: Pause between attempts in milliseconds
                (defaults to settings.DEFAULT_INTERVAL_MS)

        Raises:
            ValueError: If attempts < 1 or interval < 0
            TypeError: If sleeper has no ``sleep`` method
        """
        super().__init__()

        if interval is None:
            interval = settings.DEFAULT_INTERVAL_MS
        if sleeper is None:
            sleeper = RealSleeper()

        if isinstance(attempts, bool) or not isinstance(attempts, int):
            raise TypeError(f"attempts must be an int, got {type(attempts).__name__}")
        if attempts < 1:
            raise ValueError("attempts must be >= 1")
        if interval < 0:
            raise ValueError("interval must be >= 0")
        if not callable(getattr(sleeper, "sleep", None)):
            raise TypeError(f"{sleeper!r} has no sleep() method")

        self.attempts = attempts
        self.interval = interval
        self.sleeper = sleeper

    @classmethod
    def times(cls, n: int | None = None) -> "CounterBasedTrier":
        """Trier making ``n`` attempts (settings.DEFAULT_ATTEMPTS if omitted)."""
        return cls(settings.DEFAULT_ATTEMPTS if n is None else n)

    def _attempt(self, call: Callable[[], Any], action: Callable[..., Any], check_result: bool) -> Any:
        last_error: BaseException | None = None

        for attempt in range(1, self.attempts + 1):
            try:
                result = call()
                # The predicate runs under the same guard as the action
                if not check_result or not self.is_result_ignored(result):
                    record_attempt(self.name, "success")
                    return result
                record_attempt(self.name, "ignored_result")
                logger.debug(
                    "Ignored result",
                    action=describe_action(action),
                    attempt=attempt,
                    attempts=self.attempts,
                )
            except BaseException as exc:
                if not self.is_exception_ignored(exc):
                    record_attempt(self.name, "fatal")
                    raise
                last_error = exc
                record_attempt(self.name, "ignored_error")
                logger.debug(
                    "Ignored exception",
                    action=describe_action(action),
                    attempt=attempt,
                    attempts=self.attempts,
                    error_type=type(exc).__name__,
                )

            if attempt < self.attempts:
                record_delay(self.name, self.interval)
                self.sleeper.sleep(self.interval)

        record_limit_exceeded(self.name)
        logger.warning(
            "Attempt limit exceeded",
            action=describe_action(action),
            attempts=self.attempts,
            interval_ms=self.interval,
            last_error_type=type(last_error).__name__ if last_error else None,
        )

        raise LimitExceededError(self.attempts, action, last_error) from last_error

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(attempts={self.attempts}, "
            f"sleeper={self.sleeper!r}, interval={self.interval})"
        )
