"""
Value tree model for repaired documents.

Repaired values are plain Python objects: ``None``, ``bool``, ``int``,
``float``, ``str``, ``list`` and insertion-ordered ``dict``. The helpers here
walk a tree with an explicit stack so that documents nested up to the depth
ceiling never touch the interpreter's recursion limit.
"""

import math
from typing import Any

# Type aliases for domain concepts - recursive definition
JsonValue = (
    str | int | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
)
Position = int

# More permissive type for caller-built trees
JsonValueLoose = Any


def _children(value: JsonValueLoose) -> list[JsonValueLoose]:
    if isinstance(value, dict):
        return list(value.values())
    if isinstance(value, list | tuple):
        return list(value)
    return []


def tree_depth(value: JsonValueLoose) -> int:
    """
    Returns the container nesting depth of a value tree.

    Scalars have depth 0, ``[]`` has depth 1 and ``{"a": [1]}`` depth 2.
    """
    deepest = 0
    stack: list[tuple[JsonValueLoose, int]] = [(value, 0)]

    while stack:
        node, depth = stack.pop()
        if isinstance(node, dict | list | tuple):
            depth += 1
            deepest = max(deepest, depth)
            stack.extend((child, depth) for child in _children(node))

    return deepest


def tree_size(value: JsonValueLoose) -> int:
    """Returns the number of value nodes in a tree, containers included."""
    count = 0
    stack: list[JsonValueLoose] = [value]

    while stack:
        node = stack.pop()
        count += 1
        stack.extend(_children(node))

    return count


def is_finite_tree(value: JsonValueLoose) -> bool:
    """Returns False when any float in the tree is NaN or infinite."""
    stack: list[JsonValueLoose] = [value]

    while stack:
        node = stack.pop()
        if isinstance(node, float) and not math.isfinite(node):
            return False
        stack.extend(_children(node))

    return True
