"""
Trier exceptions.

This module defines the errors raised by the retry primitives themselves.
Failures raised by the retried action are never wrapped here unless the
attempt limit is exhausted, in which case the last ignored failure becomes
the ``__cause__`` of :class:`LimitExceededError`.
"""

from typing import Any, Callable


class TrierError(Exception):
    """
    Base exception for all trier errors.

    Allows catching any misuse or exhaustion error with a single except
    clause, while failures of the retried action stay untouched.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(TrierError):
    """
    Raised when a trier is configured incorrectly.

    Examples:
    - Ignored exceptions declared twice
    - Result predicate declared twice (``ignoring_result`` and ``until``
      share the same slot)
    - Configuration changed after the first invocation

    Always raised synchronously by the configuration call, before any
    attempt runs.
    """

    def __init__(self, message: str, setting: str | None = None):
        details = {}
        if setting:
            details["setting"] = setting

        super().__init__(message, details)
        self.setting = setting

    def __reduce__(self):
        return type(self), (self.message, self.setting)


class LimitExceededError(TrierError):
    """
    Raised when all attempts are used up without an acceptable outcome.

    Attributes:
        attempts: Number of attempts that were made
        action: The callable that was retried
        last_error: Last ignored exception, or None if every attempt
            returned a rejected result
    """

    def __init__(
        self,
        attempts: int,
        action: Callable[..., Any],
        last_error: BaseException | None = None,
    ) -> None:
        self.attempts = attempts
        self.action = action
        self.last_error = last_error

        details: dict[str, Any] = {
            "attempts": attempts,
            "action": describe_action(action),
        }
        if last_error is not None:
            details["last_error_type"] = type(last_error).__name__

        super().__init__(
            f"Limit exceeded after {attempts} attempts to perform action "
            f"{describe_action(action)}",
            details,
        )

    def __reduce__(self):
        return type(self), (self.attempts, self.action, self.last_error)


def describe_action(action: Callable[..., Any]) -> str:
    """Human-readable name of a retried callable."""
    name = getattr(action, "__qualname__", None)
    if isinstance(name, str):
        return name
    return repr(action)
