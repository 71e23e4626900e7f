"""Tagged exceptions.

Every error raised by the library carries a ``_tag`` discriminant so callers
can tell error kinds apart by reading a string field instead of walking the
class hierarchy.
"""

from typing import Any, ClassVar


class TaggedError(Exception):
    """Base exception for errors identified by a ``_tag`` discriminant.

    Abstract: subclasses must define ``_tag`` as a class attribute.
    """

    _tag: ClassVar[str]

    def __init__(self, message: str = "", *, cause: Any = None):
        if not isinstance(getattr(type(self), "_tag", None), str):
            raise TypeError(f"{type(self).__name__} must define a string _tag")
        super().__init__(message)
        self.message = message
        self.cause = cause
        if isinstance(cause, BaseException):
            self.__cause__ = cause


class UnwrapError(TaggedError):
    """Raised when a container is unwrapped on the variant holding no payload."""

    _tag = "UnwrapError"


class TryCatchError(TaggedError):
    """Wraps an exception captured from caller-supplied code."""

    _tag = "TryCatchError"

    def __init__(self, cause: Any):
        super().__init__("TryCatchError", cause=cause)


def is_tagged_error(error: object, tag: str | None = None) -> bool:
    """
    Check whether a value is a TaggedError.

    Membership is decided by class (``isinstance``), so objects that merely
    carry a ``_tag`` attribute are rejected.

    Args:
        error: Any value, typically a caught exception
        tag: Optional discriminant the error must also carry

    Returns:
        True if ``error`` is a TaggedError (with a matching tag, when given)
    """
    if not isinstance(error, TaggedError):
        return False

    return tag is None or error._tag == tag
