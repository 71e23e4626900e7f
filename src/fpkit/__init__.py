"""
fpkit - functional programming utilities.

Option and Result containers, tagged errors and function combinators for
expressing optional values and fallible computations without using
exceptions for control flow.
"""

from fpkit.errors import TaggedError, TryCatchError, UnwrapError, is_tagged_error
from fpkit.function import ComposableFunction, Fn, compose, constant, flip, identity, pipe, tap
from fpkit.logging import configure_logging
from fpkit.option import Nothing, Option, Some
from fpkit.pipe import Pipe
from fpkit.result import Err, Ok, Result

__all__ = [
    "Option",
    "Some",
    "Nothing",
    "Result",
    "Ok",
    "Err",
    "TaggedError",
    "UnwrapError",
    "TryCatchError",
    "is_tagged_error",
    "Fn",
    "ComposableFunction",
    "compose",
    "constant",
    "identity",
    "flip",
    "tap",
    "pipe",
    "Pipe",
    "configure_logging",
]

__version__ = "0.1.0"
