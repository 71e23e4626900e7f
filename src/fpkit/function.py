"""Function combinators.

Small stateless helpers for building pipelines out of plain functions. They
are grouped on the ``Fn`` namespace and also exported individually.
"""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from functools import partial
from typing import Any, Generic, TypeVar

from fpkit.config import get_settings_or_defaults
from fpkit.pipe import Pipe

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")
I = TypeVar("I")  # noqa: E741
O = TypeVar("O")  # noqa: E741
N = TypeVar("N")
R = TypeVar("R")

# Detached tap tasks, held until done so they are not garbage collected mid-flight
_background_tasks: set["asyncio.Future[Any]"] = set()


class ComposableFunction(Generic[I, O]):
    """
    Unary function that can be extended with ``compose``.

    Calling the object applies the wrapped function. ``compose(next_func)``
    returns a new ComposableFunction that feeds this function's output into
    ``next_func``; the original is left untouched.
    """

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[I], O]):
        self._func = func

    def __call__(self, arg: I) -> O:
        return self._func(arg)

    def compose(self, next_func: Callable[[O], N]) -> "ComposableFunction[I, N]":
        """Chain ``next_func`` after this function (left to right)."""
        func = self._func
        return ComposableFunction(lambda arg: next_func(func(arg)))

    def __repr__(self) -> str:
        return f"ComposableFunction({self._func!r})"


def compose(func: Callable[[I], O]) -> ComposableFunction[I, O]:
    """
    Wrap a unary function so it can be composed with others.

    Example:
        >>> inc_then_double = compose(lambda x: x + 1).compose(lambda x: x * 2)
        >>> inc_then_double(3)
        8
    """
    return ComposableFunction(func)


def constant(value: A) -> Callable[..., A]:
    """
    Create a function that always returns ``value``.

    Example:
        >>> always_five = constant(5)
        >>> always_five(10, 20, key="ignored")
        5
    """

    def _constant(*args: Any, **kwargs: Any) -> A:
        return value

    return _constant


def identity(value: A) -> A:
    """Return the value passed in."""
    return value


def flip(func: Callable[[A, B], R]) -> Callable[[B, A], R]:
    """
    Swap the arguments of a binary function.

    Example:
        >>> divide = lambda numerator, denominator: numerator / denominator
        >>> flip(divide)(2, 10)
        5.0
    """

    def _flipped(first: B, second: A) -> R:
        return func(second, first)

    return _flipped


def tap(func: Callable[[A], None | Awaitable[None]], value: A) -> A:
    """
    Run a side effect on a value and return the value unchanged.

    Failures of ``func`` never reach the caller. A synchronous exception is
    caught and discarded. An awaitable result is scheduled on the running event
    loop without being awaited and its eventual failure is discarded; with no
    running loop a returned coroutine is closed unstarted. Discarded failures
    are logged at DEBUG when ``Settings.tap_log_failures`` is enabled.

    Args:
        func: Side effect, sync or async
        value: Value to observe

    Returns:
        ``value``, whatever ``func`` does
    """
    try:
        outcome = func(value)
    except Exception as e:
        _log_discarded(func, e)
        return value

    if inspect.isawaitable(outcome):
        _detach(func, outcome)

    return value


def pipe(value: A) -> Pipe[A]:
    """
    Start a lazy pipeline from a value.

    Example:
        >>> pipe(5).to(lambda x: x * 2).to(lambda x: x + 3).exec()
        13
    """
    return Pipe(value)


def _detach(func: Callable[..., Any], awaitable: Awaitable[Any]) -> None:
    if asyncio.isfuture(awaitable):
        # Already scheduled; only its outcome needs consuming
        awaitable.add_done_callback(partial(_settle, func))
        return

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        if inspect.iscoroutine(awaitable):
            awaitable.close()
        if get_settings_or_defaults().tap_log_failures:
            logger.debug("No running event loop, skipped awaitable from %s", _describe(func))
        return

    future = asyncio.ensure_future(awaitable)
    _background_tasks.add(future)
    future.add_done_callback(partial(_settle, func))


def _settle(func: Callable[..., Any], future: "asyncio.Future[Any]") -> None:
    _background_tasks.discard(future)
    if future.cancelled():
        return
    error = future.exception()
    if error is not None:
        _log_discarded(func, error)


def _log_discarded(func: Callable[..., Any], error: BaseException) -> None:
    if get_settings_or_defaults().tap_log_failures:
        logger.debug(
            "Discarded %s from tap side effect %s: %s", type(error).__name__, _describe(func), error
        )


def _describe(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


class Fn:
    """Namespace grouping the combinators, e.g. ``Fn.pipe(5)``."""

    compose = staticmethod(compose)
    constant = staticmethod(constant)
    identity = staticmethod(identity)
    flip = staticmethod(flip)
    tap = staticmethod(tap)
    pipe = staticmethod(pipe)
