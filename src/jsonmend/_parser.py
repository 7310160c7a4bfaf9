"""
Error-tolerant recovery parser.

Builds a value tree from whatever the scanner produces, repairing quoting,
separators, unterminated containers and stray punctuation as it goes.
Nesting is tracked on an explicit frame stack rather than the Python call
stack, so the depth guard is the only limit on how deep a document may go.
"""

import logging
from dataclasses import dataclass
from dataclasses import field
from enum import Enum

from ._config import ParseConfig
from ._depth import DepthGuard
from ._depth import DepthLimitExceeded
from ._numbers import normalize_number
from ._profile import ProfileContext
from ._scanner import KEY_STOP
from ._scanner import VALUE_STOP
from ._scanner import Scanner
from ._scanner import Token
from ._scanner import TokenKind
from ._values import JsonValue
from ._values import Position

logger = logging.getLogger(__name__)

# Bareword constants accepted in value position, matched case-sensitively.
# Non-finite constants degrade to null.
LITERALS: dict[str, JsonValue] = {
    "true": True,
    "True": True,
    "false": False,
    "False": False,
    "null": None,
    "None": None,
    "NaN": None,
    "Infinity": None,
    "-Infinity": None,
    "+Infinity": None,
}

_OPENERS = (TokenKind.LBRACE, TokenKind.LBRACKET)
_CLOSERS = (TokenKind.RBRACE, TokenKind.RBRACKET)
_SCALARS = (TokenKind.STRING, TokenKind.NUMBER, TokenKind.WORD)


class ParseState(Enum):
    """Grammar position of an open container frame."""

    ARRAY_VALUE = "array_value"
    OBJECT_KEY = "object_key"
    OBJECT_VALUE = "object_value"


@dataclass(slots=True)
class _ArrayFrame:
    start: Position
    items: list[JsonValue] = field(default_factory=list)
    state: ParseState = ParseState.ARRAY_VALUE


@dataclass(slots=True)
class _ObjectFrame:
    start: Position
    members: dict[str, JsonValue] = field(default_factory=dict)
    state: ParseState = ParseState.OBJECT_KEY
    key: str | None = None


_Frame = _ArrayFrame | _ObjectFrame


class RecoveryParser:
    """
    Single-pass repairing parser for one document.

    Instances hold per-call state (scanner position, depth guard) and are
    not reused across documents.
    """

    def __init__(self, scanner: Scanner, config: ParseConfig):
        self.scanner = scanner
        self.config = config
        self.guard = DepthGuard(config.max_depth)

    def parse(self) -> JsonValue:
        """
        Parses the document, degrading to None instead of raising.

        Exceeding the depth ceiling anywhere discards the whole tree.
        """
        with ProfileContext("parse_document", self.scanner.length):
            try:
                return self._parse_document()
            except DepthLimitExceeded as exc:
                logger.debug("Discarding document: %s", exc)
                return None

    def _parse_document(self) -> JsonValue:
        first = self._next_value_start()
        if first is None:
            logger.debug("No JSON value found in %d chars", self.scanner.length)
            return None

        if first.kind in _OPENERS:
            return self._parse_container(first)

        # A leading scalar gives way to a container found later on,
        # e.g. "Result 1: {...}"
        scalar = self._scalar(first)
        container = self._next_value_start(containers_only=True)
        if container is None:
            return scalar
        return self._parse_container(container)

    def _next_value_start(self, containers_only: bool = False) -> Token | None:
        """Skips tokens that cannot begin a top-level value."""
        while (token := self.scanner.next_token()) is not None:
            if token.kind in _OPENERS:
                return token
            if containers_only:
                continue
            if token.kind in (TokenKind.STRING, TokenKind.NUMBER):
                return token
            if token.kind is TokenKind.WORD and token.value in LITERALS:
                return token
        return None

    def _scalar(self, token: Token) -> JsonValue:
        """Interprets a scalar token found in value position."""
        if token.kind is TokenKind.STRING:
            return token.value
        if token.kind is TokenKind.NUMBER:
            return normalize_number(token.value)
        if token.value in LITERALS:
            return LITERALS[token.value]
        return self.scanner.scan_bare_text(token, VALUE_STOP)

    def _open(self, token: Token) -> _Frame:
        self.guard.enter(token.start)
        if token.kind is TokenKind.LBRACE:
            return _ObjectFrame(token.start)
        return _ArrayFrame(token.start)

    def _finish(self, frame: _Frame) -> JsonValue:
        self.guard.leave()
        if isinstance(frame, _ArrayFrame):
            return frame.items
        if frame.key is not None:
            # Key without a value
            frame.members[frame.key] = None
        return frame.members

    def _parse_container(self, opener: Token) -> JsonValue:
        """Parses one array or object and everything nested inside it."""
        stack: list[_Frame] = [self._open(opener)]

        while True:
            token = self.scanner.next_token()

            if token is None:
                # Close whatever is still open, innermost first
                return self._unwind(stack, 0)

            if token.kind in _OPENERS:
                stack.append(self._open(token))
            elif token.kind in _CLOSERS:
                index = _matching_frame(stack, token.kind)
                if index is None:
                    continue
                if index == 0:
                    return self._unwind(stack, 0)
                self._unwind(stack, index)
            else:
                frame = stack[-1]
                if isinstance(frame, _ArrayFrame):
                    self._array_token(frame, token)
                else:
                    self._object_token(frame, token)

    def _unwind(self, stack: list[_Frame], index: int) -> JsonValue:
        """
        Closes frames down to and including ``stack[index]``.

        Each closed container is attached to its parent; the last one
        closed is returned.
        """
        value: JsonValue = None
        while len(stack) > index:
            value = self._finish(stack.pop())
            if stack:
                _attach(stack[-1], value)
        return value

    def _array_token(self, frame: _ArrayFrame, token: Token) -> None:
        # Commas are implied between elements and stray colons carry nothing
        if token.kind in _SCALARS:
            frame.items.append(self._scalar(token))

    def _object_token(self, frame: _ObjectFrame, token: Token) -> None:
        kind = token.kind

        if frame.state is ParseState.OBJECT_KEY:
            if kind is TokenKind.STRING:
                frame.key = token.value
                frame.state = ParseState.OBJECT_VALUE
            elif kind in (TokenKind.NUMBER, TokenKind.WORD):
                frame.key = self.scanner.scan_bare_text(token, KEY_STOP)
                frame.state = ParseState.OBJECT_VALUE
            return

        # Colons are optional, so any number of them may precede the value
        if kind is TokenKind.COMMA:
            _attach(frame, None)
        elif kind is not TokenKind.COLON:
            _attach(frame, self._scalar(token))


def _matching_frame(stack: list[_Frame], closer: TokenKind) -> int | None:
    """Returns the index of the innermost frame ``closer`` can close."""
    wanted = _ObjectFrame if closer is TokenKind.RBRACE else _ArrayFrame
    for index in range(len(stack) - 1, -1, -1):
        if isinstance(stack[index], wanted):
            return index
    return None


def _attach(frame: _Frame, value: JsonValue) -> None:
    """Stores a completed value in its parent container."""
    if isinstance(frame, _ArrayFrame):
        frame.items.append(value)
        return

    if frame.key is None:
        # Containers in key position have nowhere to go
        return

    frame.members[frame.key] = value
    frame.key = None
    frame.state = ParseState.OBJECT_KEY


def parse_document(text: str, config: ParseConfig | None = None) -> JsonValue:
    """
    Repairs ``text`` into a value tree.

    Never raises for string input; unrecoverable documents yield None.
    """
    parser = RecoveryParser(Scanner(text), config or ParseConfig())
    return parser.parse()
