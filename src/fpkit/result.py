"""Result type for functional error handling.

This module implements a Rust-style Result type that makes error handling
explicit in type signatures without relying on exceptions for control flow.
``Result[A, E]`` is either ``Ok(value)`` or ``Err(error)``; the error may be
any value, not only an exception.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from fpkit.errors import TryCatchError, UnwrapError

logger = logging.getLogger(__name__)

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Map target type
F = TypeVar("F")  # Error map target type
R = TypeVar("R")  # Match result type


class Result(ABC, Generic[T, E]):
    """Base of the two Result variants, plus their constructors."""

    _tag: ClassVar[str]

    @staticmethod
    def ok(value: T) -> "Ok[T]":
        """Create a success result."""
        return Ok(value)

    @staticmethod
    def err(error: E) -> "Err[E]":
        """Create an error result."""
        return Err(error)

    @staticmethod
    def try_(func: Callable[[], T]) -> "Result[T, TryCatchError]":
        """
        Call a function and capture any exception it raises.

        Only ``Exception`` subclasses are captured; ``KeyboardInterrupt``,
        ``SystemExit`` and cancellation propagate.

        Args:
            func: Zero-argument function to call

        Returns:
            Ok with the return value, or Err with a TryCatchError whose
            ``cause`` is the raised exception

        Example:
            >>> Result.try_(lambda: int("42"))
            Ok(42)
        """
        try:
            return Ok(func())
        except Exception as e:
            logger.debug("Captured %s from %s: %s", type(e).__name__, _describe(func), e)
            return Err(TryCatchError(cause=e))

    @staticmethod
    async def async_try(func: Callable[[], Awaitable[T]]) -> "Result[T, TryCatchError]":
        """
        Await an asynchronous function and capture any exception it raises.

        Resolves only after the awaitable returned by ``func`` settles. An
        exception raised while creating the awaitable is captured the same way.

        Args:
            func: Zero-argument function returning an awaitable

        Returns:
            Ok with the awaited value, or Err with a TryCatchError
        """
        try:
            return Ok(await func())
        except Exception as e:
            logger.debug("Captured %s from %s: %s", type(e).__name__, _describe(func), e)
            return Err(TryCatchError(cause=e))

    @abstractmethod
    def is_ok(self) -> bool:
        """Check if this is a success result."""

    @abstractmethod
    def is_err(self) -> bool:
        """Check if this is an error result."""

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> "Result[U, E]":
        """Transform the success value."""

    @abstractmethod
    def map_error(self, func: Callable[[E], F]) -> "Result[T, F]":
        """Transform the error value."""

    @abstractmethod
    def and_then(self, func: Callable[[T], "Result[U, F]"]) -> "Result[U, E | F]":
        """Chain a function that itself returns a Result."""

    @abstractmethod
    def match(self, *, ok: Callable[[T], R], err: Callable[[E], R]) -> R:
        """Call exactly one handler depending on the variant."""

    @abstractmethod
    def unwrap(self, message: str | None = None) -> T:
        """Get the value or raise UnwrapError."""

    @abstractmethod
    def unwrap_or(self, default: U) -> T | U:
        """Get the value or the given default."""

    @abstractmethod
    def unwrap_error(self) -> E:
        """Get the error or raise UnwrapError."""


@dataclass(frozen=True)
class Ok(Result[T, Any]):
    """Successful result containing a value."""

    value: T

    _tag: ClassVar[str] = "ok"

    def is_ok(self) -> bool:
        """Check if this is a success result."""
        return True

    def is_err(self) -> bool:
        """Check if this is an error result."""
        return False

    def map(self, func: Callable[[T], U]) -> "Ok[U]":
        """Transform the success value."""
        return Ok(func(self.value))

    def map_error(self, func: Callable[[Any], Any]) -> "Ok[T]":
        """Transform the error value (does nothing for Ok)."""
        return self

    def and_then(self, func: Callable[[T], Result[U, F]]) -> Result[U, F]:
        """Chain into ``func`` with the success value."""
        return func(self.value)

    def match(self, *, ok: Callable[[T], R], err: Callable[[Any], R]) -> R:
        return ok(self.value)

    def unwrap(self, message: str | None = None) -> T:
        """Get the value (safe because this is Ok)."""
        return self.value

    def unwrap_or(self, default: Any) -> T:
        """Get the value or default (returns value because this is Ok)."""
        return self.value

    def unwrap_error(self) -> Any:
        """Get the error (raises because this is Ok)."""
        raise UnwrapError(f"Result is ok: {self.value}")

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Result[Any, E]):
    """Error result containing an error value."""

    error: E

    _tag: ClassVar[str] = "err"

    def is_ok(self) -> bool:
        """Check if this is a success result."""
        return False

    def is_err(self) -> bool:
        """Check if this is an error result."""
        return True

    def map(self, func: Callable[[Any], Any]) -> "Err[E]":
        """Transform the success value (does nothing for Err)."""
        return self

    def map_error(self, func: Callable[[E], F]) -> "Err[F]":
        """Transform the error value."""
        return Err(func(self.error))

    def and_then(self, func: Callable[[Any], Result[Any, Any]]) -> "Err[E]":
        """Short-circuit: ``func`` is never called for Err."""
        return self

    def match(self, *, ok: Callable[[Any], R], err: Callable[[E], R]) -> R:
        return err(self.error)

    def unwrap(self, message: str | None = None) -> Any:
        """Get the value (raises because this is Err).

        Exceptions held as the error are chained as the UnwrapError's cause.
        """
        raise UnwrapError(
            message if message is not None else f"Result is error: {self.error}",
            cause=self.error,
        )

    def unwrap_or(self, default: U) -> U:
        """Get the value or default (returns default because this is Err)."""
        return default

    def unwrap_error(self) -> E:
        """Get the error (safe because this is Err)."""
        return self.error

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


def _describe(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", None) or repr(func)
