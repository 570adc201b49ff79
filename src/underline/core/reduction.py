"""
Reduction engine.
"""

from __future__ import annotations

from typing import Any, Callable

from underline.core.helpers import fit_arity
from underline.core.traversal import each


def reduce(collection, callback: Callable[..., Any], memo: Any = None) -> Any:
    """
    Boil a collection down to a single value.

    `memo` is the initial state; each step calls
    `callback(memo, item, position, collection)` and the return value
    becomes the next memo. Returns the final memo, or the initial one
    untouched when the collection is empty.
    """
    callback = fit_arity(callback, minimum=2)

    def step(item, position, coll):
        nonlocal memo
        memo = callback(memo, item, position, coll)

    each(collection, step)
    return memo
