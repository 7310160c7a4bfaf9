"""Immutable configuration for parsing, encoding and the public entry points."""

import os
from dataclasses import dataclass

from ._depth import DEFAULT_MAX_DEPTH

# Strict orjson fast path - default enabled, disabled via environment variable
USE_STRICT_FAST_PATH = "JSONMEND_NO_FAST_PATH" not in os.environ


def _check_indent(indent: object) -> None:
    if indent is None:
        return
    if isinstance(indent, bool) or not isinstance(indent, int):
        raise TypeError("indent must be a non-negative integer or None")
    if indent < 0:
        raise ValueError("indent must be a non-negative integer or None")


def _check_max_depth(max_depth: object) -> None:
    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        raise TypeError("max_depth must be an integer")
    if max_depth < 1:
        raise ValueError("max_depth must be at least 1")


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures the recovery parser.

    ``max_depth`` caps container nesting; a deeper document degrades to
    null as a whole.
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        _check_max_depth(self.max_depth)


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures JSON rendering with immutable settings.

    ``indent`` of None or 0 renders compactly; a positive value puts one
    element per line, indented by that many spaces per level.
    """

    ensure_ascii: bool = True
    indent: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.ensure_ascii, bool):
            raise TypeError("ensure_ascii must be a boolean")
        _check_indent(self.indent)


@dataclass(frozen=True)
class RepairConfig:
    """
    Options accepted by ``repair_json``.

    Centralizes validation of caller-supplied options before any text is
    examined.
    """

    return_objects: bool = False
    skip_json_loads: bool = False
    ensure_ascii: bool = True
    indent: int | None = None
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not isinstance(self.return_objects, bool):
            raise TypeError("return_objects must be a boolean")
        if not isinstance(self.skip_json_loads, bool):
            raise TypeError("skip_json_loads must be a boolean")
        if not isinstance(self.ensure_ascii, bool):
            raise TypeError("ensure_ascii must be a boolean")
        _check_indent(self.indent)
        _check_max_depth(self.max_depth)

    @property
    def parse_config(self) -> ParseConfig:
        return ParseConfig(max_depth=self.max_depth)

    @property
    def encode_config(self) -> EncodeConfig:
        return EncodeConfig(ensure_ascii=self.ensure_ascii, indent=self.indent)

    @property
    def allows_fast_path(self) -> bool:
        """Strict parsing is only tried when no ASCII escaping is requested."""
        return (
            USE_STRICT_FAST_PATH
            and not self.skip_json_loads
            and not self.ensure_ascii
        )
