"""
Zero-dependency value and shape helpers.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import Any, Callable


def identity(value: Any) -> Any:
    """Return the argument unchanged. In math, f(x) = x."""
    return value


def is_object(value: Any) -> bool:
    """Check if value is a keyed collection (any Mapping)."""
    return isinstance(value, Mapping)


def property(key) -> Callable[[Any], Any]:
    """
    Build a getter for `key`.

    The returned function subscripts whatever it is given, so a missing
    key raises the usual KeyError/IndexError.
    """
    def getter(obj):
        return obj[key]
    return getter


def positional_arity(fn: Callable, default: int = 1) -> int | None:
    """
    Count how many positional arguments `fn` accepts.

    Returns None when it takes *args. Callables without an introspectable
    signature (`max`, `min`, `str`) are assumed to take `default`.
    """
    try:
        sig = inspect.signature(fn)
    except (ValueError, TypeError):
        return default
    count = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def fit_arity(fn: Callable, minimum: int = 1) -> Callable:
    """
    Wrap a callback so surplus positional arguments are dropped.

    Combinators always offer `(item, position, collection)`; this lets
    callers pass `str`, `identity` or a one-argument lambda as well as a
    full three-argument function. `minimum` is how many arguments an
    opaque builtin gets; reductions need at least (memo, item).
    """
    arity = positional_arity(fn, default=minimum)
    if arity is None:
        return fn

    def fitted(*args):
        return fn(*args[:arity])

    return fitted
