"""Option type for values that may be absent.

``Option[A]`` is either ``Some(value)`` holding a non-None value or
``Nothing()`` holding nothing. Both variants expose the same operations so
callers can chain transformations without checking for None at every step.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from fpkit.config import get_settings_or_defaults
from fpkit.errors import UnwrapError

A = TypeVar("A")  # Contained type
B = TypeVar("B")  # Map target type
R = TypeVar("R")  # Match result type


class Option(ABC, Generic[A]):
    """Base of the two Option variants, plus their constructors."""

    _tag: ClassVar[str]

    @staticmethod
    def some(value: A) -> "Some[A]":
        """Create a Some holding a non-None value."""
        return Some(value)

    @staticmethod
    def none() -> "Nothing":
        """Create an empty Option."""
        return Nothing()

    @staticmethod
    def from_nullable(value: A | None) -> "Option[A]":
        """
        Create an Option from a possibly absent value.

        Absence is decided by truthiness, so falsy values such as ``0``,
        ``""``, ``False`` and empty containers also produce Nothing.

        Args:
            value: Value to wrap

        Returns:
            Some(value) if the value is truthy, otherwise Nothing()
        """
        if value:
            return Some(value)

        return Nothing()

    @abstractmethod
    def is_some(self) -> bool:
        """Check if this Option holds a value."""

    @abstractmethod
    def is_none(self) -> bool:
        """Check if this Option is empty."""

    @abstractmethod
    def map(self, func: Callable[[A], B]) -> "Option[B]":
        """Transform the contained value."""

    @abstractmethod
    def and_then(self, func: Callable[[A], "Option[B]"]) -> "Option[B]":
        """Chain a function that itself returns an Option."""

    @abstractmethod
    def match(self, *, some: Callable[[A], R], none: Callable[[], R]) -> R:
        """Call exactly one handler depending on the variant."""

    @abstractmethod
    def unwrap(self, message: str | None = None) -> A:
        """Get the value or raise UnwrapError."""

    @abstractmethod
    def unwrap_or(self, default: B) -> A | B:
        """Get the value or the given default."""


@dataclass(frozen=True)
class Some(Option[A]):
    """Option holding a value."""

    value: A

    _tag: ClassVar[str] = "some"

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("Some cannot hold None; use Option.none()")

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def map(self, func: Callable[[A], B]) -> "Some[B]":
        """Apply ``func`` to the value; the result must not be None."""
        return Some(func(self.value))

    def and_then(self, func: Callable[[A], Option[B]]) -> Option[B]:
        return func(self.value)

    def match(self, *, some: Callable[[A], R], none: Callable[[], R]) -> R:
        return some(self.value)

    def unwrap(self, message: str | None = None) -> A:
        """Get the value (safe because this is Some)."""
        return self.value

    def unwrap_or(self, default: Any) -> A:
        """Get the value (the default is ignored because this is Some)."""
        return self.value

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True)
class Nothing(Option[Any]):
    """Empty Option."""

    _tag: ClassVar[str] = "none"

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def map(self, func: Callable[[Any], Any]) -> "Nothing":
        """Does nothing for Nothing."""
        return self

    def and_then(self, func: Callable[[Any], Option[Any]]) -> "Nothing":
        return self

    def match(self, *, some: Callable[[Any], R], none: Callable[[], R]) -> R:
        return none()

    def unwrap(self, message: str | None = None) -> Any:
        """Raise UnwrapError with ``message`` or the configured default text."""
        raise UnwrapError(message if message is not None else get_settings_or_defaults().option_none_message)

    def unwrap_or(self, default: B) -> B:
        return default

    def __repr__(self) -> str:
        return "Nothing()"
