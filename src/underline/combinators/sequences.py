"""
Sequence combinators.

Every function here is a thin composition over `reduce`/`each`. They are
eager: each call returns a fresh list. Callbacks are offered
`(item, position, collection)` and may accept fewer arguments.
"""

from __future__ import annotations

import math
from typing import Any, Callable

from underline.core import fit_arity, property, reduce, traversable


def _append(items: list, item) -> list:
    # The memo list is created by the combinator itself, never by the caller.
    items.append(item)
    return items


def map(collection, callback: Callable) -> list:
    """Produce a new list by passing every entry through `callback`."""
    callback = fit_arity(callback)
    return reduce(
        collection,
        lambda mapped, item, position, coll: _append(mapped, callback(item, position, coll)),
        [],
    )


def filter(collection, predicate: Callable) -> list:
    """Return the entries that pass the truth test, in order."""
    predicate = fit_arity(predicate)
    return reduce(
        collection,
        lambda passed, item, position, coll: (
            _append(passed, item) if predicate(item, position, coll) else passed
        ),
        [],
    )


def reject(collection, predicate: Callable) -> list:
    """The opposite of filter: drop the entries that pass the truth test."""
    predicate = fit_arity(predicate)
    return filter(collection, lambda item, position, coll: not predicate(item, position, coll))


def _is_nan(value) -> bool:
    return isinstance(value, float) and math.isnan(value)


def compact(collection) -> list:
    """Copy of the collection with falsy values (None, False, 0, "", NaN, empties) removed."""
    return filter(collection, lambda item: bool(item) and not _is_nan(item))


def pluck(collection, key) -> list:
    """Extract the `key` entry of every item."""
    return map(collection, property(key))


def _is_nested(item) -> bool:
    return isinstance(item, (list, tuple))


def flatten(collection) -> list:
    """
    Flatten nested lists and tuples to any depth.

    Strings, mappings and scalars are kept as single items.
    """
    def step(flattened, item):
        if _is_nested(item):
            flattened.extend(flatten(item))
            return flattened
        return _append(flattened, item)

    return reduce(collection, step, [])


def _strictly_equal(a, b) -> bool:
    if a is b:
        return True
    return isinstance(a, bool) == isinstance(b, bool) and a == b


def contains(collection, item) -> bool:
    """
    Check whether `item` is one of the collection's values.

    Values match if they are the same object, or equal and either both
    or neither a bool, so `True` never matches `1`. Works for unhashable
    items too.
    """
    for value, _ in traversable(collection).entries():
        if _strictly_equal(value, item):
            return True
    return False


def unique(collection) -> list:
    """
    Duplicate-free copy of the collection; the first occurrence wins.

    Membership is checked with `contains` against the result built so far,
    which is quadratic but keeps equality semantics identical to
    `contains` and supports unhashable items.
    """
    return reduce(
        collection,
        lambda seen, item: seen if contains(seen, item) else _append(seen, item),
        [],
    )


def sum(collection) -> Any:
    """Add up the collection's values, starting from 0."""
    return reduce(collection, lambda total, number: total + number, 0)


def times(n: int, callback: Callable[[int], Any]) -> list:
    """
    Invoke `callback(i)` for i in 0..n-1 and collect the results.

    A negative `n` yields an empty list and never calls `callback`.
    """
    if n < 0:
        return []
    callback = fit_arity(callback)
    return map(range(n), lambda _, i: callback(i))


def without(collection, *values) -> list:
    """Copy of the collection with every occurrence of `values` removed."""
    return reject(collection, lambda item: contains(values, item))
