"""
Core primitives: value helpers, traversal and reduction.
"""

from underline.core.helpers import (
    identity,
    is_object,
    property,
    positional_arity,
    fit_arity,
)
from underline.core.traversal import (
    Traversable,
    IndexedSequence,
    KeyedCollection,
    traversable,
    each,
    keys,
    size,
)
from underline.core.reduction import reduce

__all__ = [
    # helpers
    "identity",
    "is_object",
    "property",
    "positional_arity",
    "fit_arity",
    # traversal
    "Traversable",
    "IndexedSequence",
    "KeyedCollection",
    "traversable",
    "each",
    "keys",
    "size",
    # reduction
    "reduce",
]
