"""
Delay mechanisms used between attempts.

A trier never calls ``time.sleep`` directly: it asks its sleeper to pause,
so tests can inject a sleeper that returns immediately or records the
requested intervals. Intervals are expressed in milliseconds.
"""

import time
from typing import Protocol


class Sleeper(Protocol):
    """
    Protocol for delay mechanisms.

    Any exception raised by ``sleep`` (including ``KeyboardInterrupt``)
    propagates out of the trier as a fatal failure and is never retried.
    """

    def sleep(self, interval_ms: float) -> None:
        """
        Pause execution.

        Args:
            interval_ms: Pause duration in milliseconds
        """
        ...


class RealSleeper:
    """Blocks the calling thread with ``time.sleep``."""

    def sleep(self, interval_ms: float) -> None:
        if interval_ms > 0:
            time.sleep(interval_ms / 1000)

    def __repr__(self) -> str:
        return "RealSleeper()"


class NoopSleeper:
    """Returns immediately. Useful for tests and tight polling loops."""

    def sleep(self, interval_ms: float) -> None:
        return None

    def __repr__(self) -> str:
        return "NoopSleeper()"
