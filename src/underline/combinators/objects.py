"""
Small object utilities that do not go through the traversal engine.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from functools import partial
from typing import Any, Callable


def extend(destination: MutableMapping, *sources: Mapping) -> MutableMapping:
    """
    Copy every key of each source into `destination`, in order.

    Later sources override earlier ones. `destination` is modified in
    place and returned.

    Example:
        extend({"name": "moe"}, {"age": 50}, {"hair": "black"})
        -> {"name": "moe", "age": 50, "hair": "black"}
    """
    for source in sources:
        for key, value in source.items():
            destination[key] = value
    return destination


def values(mapping: Mapping) -> list:
    """The mapping's values, in key order."""
    return list(mapping.values())


def bind(fn: Callable, context: Any, *bound_args) -> Callable:
    """
    Pre-fill `fn` with a context and some leading arguments.

    Python functions have no receiver to rebind, so `context` is passed
    as the first positional argument, followed by `bound_args` and then
    whatever the bound function is called with.
    """
    return partial(fn, context, *bound_args)
