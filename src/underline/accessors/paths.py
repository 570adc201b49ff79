"""
Null-safe deep property access.

    obj = {"response": {"data": {"users": [1, 2]}}}
    get(obj, "response.data")                -> {"users": [1, 2]}
    get(obj, "response.data.users.1")        -> 2
    get(obj, "response.test.does.not.exist") -> None
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

logger = logging.getLogger(__name__)

_MISSING = object()
_INDEX = re.compile(r"-?[0-9]+")


def split_path(path: str | Sequence[str], separator: str = ".") -> list[str]:
    """Turn a delimited path into its property names. Empty path -> []."""
    if isinstance(path, str):
        return path.split(separator) if path else []
    return list(path)


def _step(node: Any, name: str) -> Any:
    """Descend one level, or return _MISSING if `name` is not there."""
    if isinstance(node, Mapping):
        return node.get(name, _MISSING)
    if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
        if not _INDEX.fullmatch(str(name)):
            return _MISSING
        index = int(name)
        if -len(node) <= index < len(node):
            return node[index]
        return _MISSING
    return getattr(node, name, _MISSING)


def get(obj: Any, path: str | Sequence[str], default: Any = None, *, separator: str = ".") -> Any:
    """
    Get the value at `path` of `obj`.

    Walks the property names one at a time. As soon as a node is None or
    a name is missing, the walk stops and `default` is returned; nothing
    is raised for a broken chain.

    Args:
        obj: Root object (mapping, sequence or any object with attributes)
        path: Delimited property names, or an already-split sequence
        default: Value returned when the path does not resolve
        separator: Delimiter used to split a string path

    Returns:
        The value reached, or `default`
    """
    node = obj
    for depth, name in enumerate(split_path(path, separator)):
        if node is None:
            logger.debug(f"Path {path!r} hit None before {name!r} (depth {depth})")
            return default
        node = _step(node, name)
        if node is _MISSING:
            logger.debug(f"Path {path!r} has no {name!r} (depth {depth})")
            return default
    return node
