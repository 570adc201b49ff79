"""
Traversal engine.

Every combinator in underline walks its input through `each` (or, when it
needs to stop early, through the entries of a `Traversable`). Inputs come
in two shapes:

- IndexedSequence: lists, tuples, strings and anything else that has a
  length and integer indexing. Visited by index, 0..len-1.
- KeyedCollection: any Mapping. Keys are snapshotted first, then each
  key's value is visited in that order.

`traversable()` is the single place where the shape is decided.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Iterator

from underline.core.helpers import fit_arity
from underline.errors import NotTraversableError

logger = logging.getLogger(__name__)


class Traversable(ABC):
    """An explicitly tagged collection the engine knows how to walk."""

    collection: Any

    @abstractmethod
    def keys(self) -> list:
        """Return the positions (indices or keys) visited, in order."""
        ...

    @abstractmethod
    def entries(self) -> Iterator[tuple[Any, Any]]:
        """Yield (value, position) pairs in traversal order."""
        ...

    def __len__(self) -> int:
        return len(self.keys())


@dataclass(frozen=True)
class IndexedSequence(Traversable):
    """A sized, integer-indexable collection."""
    collection: Any

    def keys(self) -> list[int]:
        return list(range(len(self.collection)))

    def entries(self) -> Iterator[tuple[Any, int]]:
        items = self.collection
        length = len(items)  # fixed for the whole walk
        i = 0
        while i < length:
            yield items[i], i
            i += 1

    def __len__(self) -> int:
        return len(self.collection)


@dataclass(frozen=True)
class KeyedCollection(Traversable):
    """A Mapping, walked in its own key order."""
    collection: Mapping

    def keys(self) -> list:
        return list(self.collection.keys())

    def entries(self) -> Iterator[tuple[Any, Any]]:
        mapping = self.collection
        for key in self.keys():
            yield mapping[key], key


def traversable(collection) -> Traversable:
    """
    Tag a collection with its traversal shape.

    Args:
        collection: A Mapping, a sized indexable sequence, or an
            already-tagged Traversable

    Returns:
        KeyedCollection or IndexedSequence wrapping the collection

    Raises:
        NotTraversableError: If the value has neither shape
    """
    if isinstance(collection, Traversable):
        return collection
    if isinstance(collection, Mapping):
        return KeyedCollection(collection)
    if hasattr(collection, "__len__") and hasattr(collection, "__getitem__"):
        return IndexedSequence(collection)
    logger.debug(f"Refusing to traverse {type(collection).__name__}")
    raise NotTraversableError(collection)


def each(collection, callback: Callable[[Any, Any, Any], Any]):
    """
    Call `callback(value, position, collection)` for every entry.

    Positions are indices for sequences and keys for mappings. All entries
    are visited; there is no early exit. Returns the collection unchanged
    so calls can be chained. Callbacks taking fewer arguments get only
    the leading ones.
    """
    tagged = traversable(collection)
    callback = fit_arity(callback)
    for value, position in tagged.entries():
        callback(value, position, tagged.collection)
    return collection


def keys(collection) -> list:
    """Retrieve the keys of a mapping, or the indices of a sequence."""
    return traversable(collection).keys()


def size(collection) -> int:
    """Number of entries `each` would visit."""
    return len(traversable(collection))
