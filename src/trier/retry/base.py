"""
Trier contract.

A trier holds the filtering configuration shared by every retry strategy:

- which exception types are tolerated (swallowed and retried)
- which results are unacceptable (discarded and retried)

and exposes four invocation shapes:

    run(action)             action()        -> result ignored
    get(producer)           producer()      -> result checked
    accept(consumer, arg)   consumer(arg)   -> result ignored
    apply(function, arg)    function(arg)   -> result checked

All four bind their argument into a zero-argument call and delegate to a
single ``_attempt`` loop implemented by the concrete strategy.

Usage:
    >>> trier = CounterBasedTrier(3).ignoring(ConnectionError).until(bool)
    >>> rows = trier.apply(fetch_rows, "orders")
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

import structlog

from trier.retry.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")

# Never tolerated, even under ignoring(BaseException)
NON_MASKABLE_EXCEPTIONS: tuple[type[BaseException], ...] = (
    KeyboardInterrupt,
    SystemExit,
    GeneratorExit,
    asyncio.CancelledError,
)


class Trier(ABC):
    """
    Base class for retry strategies.

    Configuration slots can be set once only, and only before the first
    invocation. After that the configuration is read-only, so a single
    trier may be shared by concurrent callers.
    """

    def __init__(self) -> None:
        self._ignored_exceptions: tuple[type[BaseException], ...] | None = None
        self._ignored_result: Callable[[Any], bool] | None = None
        self._frozen = False

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def ignoring(self, *exception_types: type[BaseException]) -> "Trier":
        """
        Declare exception types that should be swallowed and retried.

        Subclasses of the given types are ignored too.

        Raises:
            ConfigurationError: If ignored exceptions were already set
            TypeError: If an argument is not an exception class
        """
        self._check_not_frozen("ignored_exceptions")
        if self._ignored_exceptions is not None:
            raise ConfigurationError(
                "Ignored exceptions can be set once only",
                setting="ignored_exceptions",
            )

        for exc_type in exception_types:
            if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
                raise TypeError(f"{exc_type!r} is not an exception class")

        self._ignored_exceptions = tuple(exception_types)
        return self

    def ignoring_result(self, predicate: Callable[[Any], bool]) -> "Trier":
        """
        Treat results matching ``predicate`` as unacceptable and retry.

        Raises:
            ConfigurationError: If a result predicate was already set
        """
        self._set_ignored_result(predicate)
        return self

    def until(self, predicate: Callable[[Any], bool]) -> "Trier":
        """
        Retry until ``predicate`` holds for the result.

        Shares its slot with ``ignoring_result``.

        Raises:
            ConfigurationError: If a result predicate was already set
        """
        if not callable(predicate):
            raise TypeError(f"{predicate!r} is not callable")

        self._set_ignored_result(lambda result: not predicate(result))
        return self

    def _set_ignored_result(self, predicate: Callable[[Any], bool]) -> None:
        self._check_not_frozen("ignored_result")
        if self._ignored_result is not None:
            raise ConfigurationError(
                "Predicate to ignore unwanted results can be set once only",
                setting="ignored_result",
            )
        if not callable(predicate):
            raise TypeError(f"{predicate!r} is not callable")

        self._ignored_result = predicate

    def _check_not_frozen(self, setting: str) -> None:
        if self._frozen:
            raise ConfigurationError(
                "Trier configuration cannot be changed after first use",
                setting=setting,
            )

    # ------------------------------------------------------------------
    # Filtering (used by strategies)
    # ------------------------------------------------------------------

    def is_exception_ignored(self, exc: BaseException) -> bool:
        """True if ``exc`` should be swallowed and the action retried."""
        if isinstance(exc, NON_MASKABLE_EXCEPTIONS):
            return False
        if not self._ignored_exceptions:
            return False
        return isinstance(exc, self._ignored_exceptions)

    def is_result_ignored(self, result: Any) -> bool:
        """True if ``result`` is unacceptable and the action should be retried."""
        return self._ignored_result is not None and bool(self._ignored_result(result))

    # ------------------------------------------------------------------
    # Invocation
    # ------------------------------------------------------------------

    def run(self, action: Callable[[], Any]) -> None:
        """Call ``action()`` until it raises no ignored exception."""
        self._invoke(action, action, check_result=False)

    def get(self, producer: Callable[[], T]) -> T:
        """Call ``producer()`` until it returns an acceptable result."""
        return self._invoke(producer, producer, check_result=True)

    def accept(self, consumer: Callable[[T], Any], arg: T) -> None:
        """Call ``consumer(arg)`` until it raises no ignored exception."""
        self._invoke(lambda: consumer(arg), consumer, check_result=False)

    def apply(self, function: Callable[[T], R], arg: T) -> R:
        """Call ``function(arg)`` until it returns an acceptable result."""
        return self._invoke(lambda: function(arg), function, check_result=True)

    def _invoke(self, call: Callable[[], Any], action: Callable[..., Any], check_result: bool) -> Any:
        if not self._frozen:
            self._frozen = True
            logger.debug(
                "Trier configuration frozen",
                trier=type(self).__name__,
                ignored_exceptions=[t.__name__ for t in self._ignored_exceptions or ()],
                result_predicate=self._ignored_result is not None,
            )
        return self._attempt(call, action, check_result)

    @abstractmethod
    def _attempt(self, call: Callable[[], Any], action: Callable[..., Any], check_result: bool) -> Any:
        """
        Run the retry loop.

        Args:
            call: Zero-argument callable performing one attempt
            action: The caller's original callable (for diagnostics)
            check_result: Whether the returned value is subject to the
                result predicate

        Returns:
            The first acceptable result

        Raises:
            LimitExceededError: If the strategy gives up
        """
        ...
