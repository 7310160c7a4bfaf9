"""
Repair of malformed, near-JSON text into valid JSON.

Recovers a best-effort value tree from broken documents such as LLM output
(single quotes, unquoted keys, Python literals, missing or doubled commas,
unterminated containers, bad escapes) and renders it back as JSON text.
Repair never raises for string input: unrecoverable documents become null.
"""

import logging
import re
from typing import Any

import orjson

from ._config import EncodeConfig
from ._config import ParseConfig
from ._config import RepairConfig
from ._depth import DEFAULT_MAX_DEPTH
from ._depth import DepthGuard
from ._depth import DepthLimitExceeded
from ._encoder import encode
from ._numbers import normalize_number
from ._parser import ParseState
from ._parser import RecoveryParser
from ._parser import parse_document
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import format_hot_path_stats
from ._profile import get_hot_path_stats
from ._scanner import Scanner
from ._scanner import Token
from ._scanner import TokenKind
from ._values import JsonValue
from ._values import JsonValueLoose
from ._values import is_finite_tree
from ._values import tree_depth
from ._values import tree_size

__version__ = "0.1.0"

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

# Literals orjson reads differently from the recovery parser: integers past
# 64 bits become floats and -0 loses its sign
_INEXACT_NUMBER = re.compile(
    r"(?<![\d.eE])-?\d{19,}|(?<![\d.eE])-0(?![\d.eE])"
)


def _strict_parse(text: str, config: RepairConfig) -> tuple[bool, JsonValue]:
    """
    Attempts a strict, non-repairing parse of already valid JSON.

    Returns ``(False, None)`` whenever the recovery parser has to run: the
    text is not strict JSON, has a number literal orjson reads inexactly,
    holds non-finite numbers, or nests deeper than the configured ceiling.
    """
    if _INEXACT_NUMBER.search(text):
        return False, None

    try:
        value = orjson.loads(text)
    except orjson.JSONDecodeError:
        return False, None

    if not is_finite_tree(value):
        return False, None
    if tree_depth(value) > config.max_depth:
        return False, None
    return True, value


def repair_json(text: str, **kwargs: Any) -> str | JsonValue:
    """
    Repairs near-JSON text.

    Keyword options mirror ``RepairConfig``: ``return_objects`` returns the
    repaired value tree instead of text, ``skip_json_loads`` bypasses the
    strict fast path, ``ensure_ascii`` escapes every non-ASCII character,
    ``indent`` selects pretty printing and ``max_depth`` caps nesting.

    Raises TypeError for non-string input; never raises for a string.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON text must be str, not {type(text).__name__}"
        )

    config = RepairConfig(**kwargs)

    if not text.strip():
        return None if config.return_objects else "null"

    parsed = False
    value: JsonValue = None
    if config.allows_fast_path:
        parsed, value = _strict_parse(text, config)
        if parsed:
            logger.debug("Input is already valid JSON, skipping repair")

    if not parsed:
        value = parse_document(text, config.parse_config)

    if config.return_objects:
        return value
    return encode(value, config.encode_config)


def loads(text: str, **kwargs: Any) -> JsonValue:
    """
    Repairs near-JSON text and returns the value tree.

    Convenience wrapper around ``repair_json`` with ``return_objects=True``.
    """
    kwargs["return_objects"] = True
    return repair_json(text, **kwargs)


def dumps(obj: JsonValueLoose, **kwargs: Any) -> str:
    """
    Serializes a value tree with the repair output rules.

    Accepts the ``EncodeConfig`` options ``ensure_ascii`` and ``indent``.
    """
    return encode(obj, EncodeConfig(**kwargs))


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DepthGuard",
    "DepthLimitExceeded",
    "EncodeConfig",
    "HotPathStats",
    "JsonValue",
    "ParseConfig",
    "ParseState",
    "RecoveryParser",
    "RepairConfig",
    "Scanner",
    "Token",
    "TokenKind",
    "clear_hot_path_stats",
    "dumps",
    "encode",
    "format_hot_path_stats",
    "get_hot_path_stats",
    "is_finite_tree",
    "loads",
    "normalize_number",
    "parse_document",
    "repair_json",
    "tree_depth",
    "tree_size",
]
