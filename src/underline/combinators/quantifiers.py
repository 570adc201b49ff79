"""
Short-circuiting quantifiers.

These walk the entries of a Traversable directly (rather than via `each`)
so they can stop as soon as the answer is known.
"""

from __future__ import annotations

from typing import Callable

from underline.core import fit_arity, identity, traversable


def every(collection, predicate: Callable = identity) -> bool:
    """True if every entry passes `predicate`. Stops at the first failure."""
    predicate = fit_arity(predicate)
    tagged = traversable(collection)
    for item, position in tagged.entries():
        if not predicate(item, position, tagged.collection):
            return False
    return True


def none(collection, predicate: Callable = identity) -> bool:
    """True if no entry passes `predicate`. Stops at the first pass."""
    predicate = fit_arity(predicate)
    tagged = traversable(collection)
    for item, position in tagged.entries():
        if predicate(item, position, tagged.collection):
            return False
    return True


def any(collection, predicate: Callable = identity) -> bool:
    """True if some entry passes `predicate`. Stops at the first pass."""
    predicate = fit_arity(predicate)
    tagged = traversable(collection)
    for item, position in tagged.entries():
        if predicate(item, position, tagged.collection):
            return True
    return False
