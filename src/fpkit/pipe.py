"""Lazy value pipelines.

Usage:
    from fpkit.pipe import Pipe

    Pipe(5).to(lambda x: x * 2).to(lambda x: x + 3).exec()  # 13
"""

from collections.abc import Callable
from functools import partial
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

_Step = tuple[Callable[..., Any], tuple[Any, ...], dict[str, Any]]


class Pipe(Generic[T]):
    """
    Chain of transformations over a seed value.

    Steps are recorded by ``to`` and ``tap`` and only run when ``exec`` is
    called. Each call returns a new Pipe, so a partially built pipeline can be
    reused as the prefix of several others.
    """

    __slots__ = ("_value", "_steps")

    def __init__(self, value: Any, steps: tuple[_Step, ...] = ()):
        self._value = value
        self._steps = steps

    def to(self, func: Callable[..., U], *args: Any, **kwargs: Any) -> "Pipe[U]":
        """
        Append a transformation.

        Args:
            func: Called as ``func(value, *args, **kwargs)``
            *args: Extra positional arguments passed after the value
            **kwargs: Extra keyword arguments

        Returns:
            New Pipe whose value is the result of ``func``
        """
        return Pipe(self._value, self._steps + ((func, args, kwargs),))

    def tap(self, func: Callable[[T], Any]) -> "Pipe[T]":
        """Append a side effect that observes the value without changing it."""
        # Deferred: fpkit.function imports this module
        from fpkit.function import tap

        return self.to(partial(tap, func))

    def exec(self) -> T:
        """Run every step in order and return the final value."""
        value = self._value
        for func, args, kwargs in self._steps:
            value = func(value, *args, **kwargs)
        return value

    def __repr__(self) -> str:
        return f"Pipe({self._value!r}, steps={len(self._steps)})"
