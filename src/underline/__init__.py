"""
underline: a small functional collection-processing toolkit.

Everything is built from two primitives, `each` and `reduce`.
"""

__version__ = "0.1.0"

from underline.errors import ArityError, NotTraversableError, UnderlineError
from underline.core import (
    identity,
    is_object,
    property,
    Traversable,
    IndexedSequence,
    KeyedCollection,
    traversable,
    each,
    keys,
    size,
    reduce,
)
from underline.combinators import (
    map,
    filter,
    reject,
    compact,
    pluck,
    flatten,
    contains,
    unique,
    sum,
    times,
    without,
    every,
    none,
    any,
    extend,
    values,
    bind,
)
from underline.accessors import get
from underline.generators import RangeSpec, range, range_of

__all__ = [
    # errors
    "UnderlineError",
    "ArityError",
    "NotTraversableError",
    # core
    "identity",
    "is_object",
    "property",
    "Traversable",
    "IndexedSequence",
    "KeyedCollection",
    "traversable",
    "each",
    "keys",
    "size",
    "reduce",
    # combinators
    "map",
    "filter",
    "reject",
    "compact",
    "pluck",
    "flatten",
    "contains",
    "unique",
    "sum",
    "times",
    "without",
    "every",
    "none",
    "any",
    "extend",
    "values",
    "bind",
    # accessors
    "get",
    # generators
    "RangeSpec",
    "range",
    "range_of",
]
