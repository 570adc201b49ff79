"""
Error types raised by underline.

Misuse that the library does not guard explicitly (summing strings with
numbers, plucking a missing key) surfaces as the ordinary Python error at
the point of misuse and is never wrapped.
"""

from __future__ import annotations


class UnderlineError(Exception):
    """Base class for errors raised by underline itself."""


class ArityError(UnderlineError, TypeError):
    """A variadic operation was called with an unsupported argument count."""

    def __init__(self, name: str, received: int, minimum: int, maximum: int):
        self.name = name
        self.received = received
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"{name} called with {received} arguments, "
            f"expecting between {minimum} and {maximum}"
        )


class NotTraversableError(UnderlineError, TypeError):
    """Value is neither a mapping nor a sized, indexable sequence."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"object of type {type(value).__name__!r} is not traversable")
