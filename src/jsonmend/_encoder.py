"""
JSON rendering of value trees.

Rendering walks the tree with an explicit work stack, so any tree the
parser accepts can be written out regardless of the interpreter's recursion
limit. Keys are written in insertion order; nothing is repaired here.
"""

import math
import re

from ._config import EncodeConfig
from ._profile import ProfileContext
from ._values import JsonValueLoose

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# Characters that force the slow path in _encode_string
_NEEDS_ESCAPE = re.compile(r'["\\\x00-\x1f\ud800-\udfff]')
_NEEDS_ESCAPE_ASCII = re.compile(r'[^\x20-\x21\x23-\x5b\x5d-\x7e]')

_PRINTABLE_ASCII_MAX = 0x7E

# Work items: (True, text chunk, level) or (False, value to render, level)
_WorkItem = tuple[bool, JsonValueLoose, int]


def _escape_code_point(code: int) -> str:
    if code > 0xFFFF:
        code -= 0x10000
        high = 0xD800 | (code >> 10)
        low = 0xDC00 | (code & 0x3FF)
        return f"\\u{high:04x}\\u{low:04x}"
    return f"\\u{code:04x}"


def _encode_string(s: str, ensure_ascii: bool) -> str:
    """Encode string with proper escape sequences."""
    pattern = _NEEDS_ESCAPE_ASCII if ensure_ascii else _NEEDS_ESCAPE
    if pattern.search(s) is None:
        return f'"{s}"'

    result = ['"']
    for char in s:
        if char in _ESCAPES:
            result.append(_ESCAPES[char])
            continue

        code = ord(char)
        if code < 0x20 or 0xD800 <= code <= 0xDFFF:
            # Control characters, and lone surrogates that cannot be encoded
            result.append(f"\\u{code:04x}")
        elif ensure_ascii and code > _PRINTABLE_ASCII_MAX:
            result.append(_escape_code_point(code))
        else:
            result.append(char)
    result.append('"')
    return "".join(result)


def _encode_number(n: int | float) -> str:
    """Encode numeric values; non-finite floats become null."""
    if isinstance(n, float):
        if not math.isfinite(n):
            return "null"
        return float.__repr__(n)
    return int.__repr__(n)


def _encode_key(key: object, ensure_ascii: bool) -> str:
    if isinstance(key, str):
        return _encode_string(key, ensure_ascii)
    if key is None:
        return '"null"'
    if isinstance(key, bool):
        return '"true"' if key else '"false"'
    if isinstance(key, int | float):
        return f'"{_encode_number(key)}"'
    kind = type(key).__name__
    msg = f"keys must be str, int, float, bool or None, not {kind}"
    raise TypeError(msg)


def _encode_scalar(obj: JsonValueLoose, ensure_ascii: bool) -> str:
    if obj is None:
        return "null"
    elif obj is True:
        return "true"
    elif obj is False:
        return "false"
    elif isinstance(obj, str):
        return _encode_string(obj, ensure_ascii)
    elif isinstance(obj, int | float):
        return _encode_number(obj)
    msg = f"Object of type {type(obj).__name__} is not JSON serializable"
    raise TypeError(msg)


def _container_items(
    obj: dict[object, JsonValueLoose] | list[JsonValueLoose] | tuple,
    level: int,
    config: EncodeConfig,
) -> list[_WorkItem]:
    """Lays out the chunks and children of a non-empty container in order."""
    closer = "}" if isinstance(obj, dict) else "]"

    indent = config.indent or 0
    if indent:
        inner_break = "\n" + " " * (indent * (level + 1))
        outer_break = "\n" + " " * (indent * level)
        key_separator = ": "
    else:
        inner_break = ""
        outer_break = ""
        key_separator = ":"

    items: list[_WorkItem] = []
    if isinstance(obj, dict):
        for i, (key, child) in enumerate(obj.items()):
            prefix = ("," if i else "") + inner_break
            encoded_key = _encode_key(key, config.ensure_ascii)
            items.append((True, prefix + encoded_key + key_separator, level))
            items.append((False, child, level + 1))
    else:
        for i, child in enumerate(obj):
            items.append((True, ("," if i else "") + inner_break, level))
            items.append((False, child, level + 1))

    items.append((True, outer_break + closer, level))
    return items


def encode(obj: JsonValueLoose, config: EncodeConfig | None = None) -> str:
    """
    Renders a value tree as JSON text.

    Compact output uses no whitespace at all; indented output puts one
    element or member per line and keeps empty containers as ``[]``/``{}``.
    """
    config = config or EncodeConfig()

    with ProfileContext("encode"):
        parts: list[str] = []
        work: list[_WorkItem] = [(False, obj, 0)]

        while work:
            is_chunk, item, level = work.pop()

            if is_chunk:
                parts.append(item)
            elif isinstance(item, dict | list | tuple):
                if not item:
                    parts.append("{}" if isinstance(item, dict) else "[]")
                    continue
                parts.append("{" if isinstance(item, dict) else "[")
                work.extend(reversed(_container_items(item, level, config)))
            else:
                parts.append(_encode_scalar(item, config.ensure_ascii))

        return "".join(parts)
