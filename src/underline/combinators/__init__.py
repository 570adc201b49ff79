"""
Combinators derived from the traversal and reduction engines.
"""

from underline.combinators.sequences import (
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
)
from underline.combinators.quantifiers import (
    every,
    none,
    any,
)
from underline.combinators.objects import (
    extend,
    values,
    bind,
)

__all__ = [
    # sequences
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
    # quantifiers
    "every",
    "none",
    "any",
    # objects
    "extend",
    "values",
    "bind",
]
