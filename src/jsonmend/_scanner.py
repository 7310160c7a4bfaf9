"""
Lexical scanning for near-JSON text.

The scanner never rejects input. Strings may use either quote character and
may be unterminated; anything that is not punctuation or a quoted literal is
returned as a bare run and classified by the parser according to where it
appears.
"""

import re
from dataclasses import dataclass
from enum import Enum

from ._numbers import is_number_lexeme
from ._profile import ProfileContext
from ._values import Position


class TokenKind(Enum):
    """Lexical classes produced by the scanner."""

    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    COLON = ":"
    COMMA = ","
    STRING = "string"
    NUMBER = "number"
    WORD = "word"


@dataclass(frozen=True)
class Token:
    """
    A lexical unit with its source span.

    For strings ``value`` holds the decoded content and ``quote`` the
    delimiter that opened it; for bare runs ``value`` is the source text.
    """

    kind: TokenKind
    value: str
    start: Position
    end: Position
    quote: str = ""


QUOTES = "\"'"
STRUCTURAL = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
}

# Stop sets for Scanner.scan_bare_text
KEY_STOP = frozenset("{}[],:")
VALUE_STOP = frozenset("{}[],")

# Apostrophes between word characters stay inside a bare run (Here's, don't)
_BARE_RUN = re.compile(r"(?:[^\s{}\[\],:\"']|(?<=\w)'(?=\w))+")
_PLAIN_RUN = {
    '"': re.compile(r'[^"\\]+'),
    "'": re.compile(r"[^'\\]+"),
}
_HEX4 = re.compile(r"[0-9a-fA-F]{4}")
_WORD_CHAR = re.compile(r"\w")

_SIMPLE_ESCAPES = {
    '"': '"',
    "'": "'",
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class Scanner:
    """
    Pull-based tokenizer over a single document.

    Tokens are produced on demand by ``next_token`` so the parser can ask
    for context-dependent extensions of bare text without re-scanning.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.length = len(text)

    def skip_whitespace(self) -> None:
        """Skips any Unicode whitespace."""
        while self.pos < self.length and self.text[self.pos].isspace():
            self.pos += 1

    def next_token(self) -> Token | None:
        """Returns the next token or None at end of input."""
        self.skip_whitespace()

        if self.pos >= self.length:
            return None

        char = self.text[self.pos]
        start = self.pos

        if char in STRUCTURAL:
            self.pos += 1
            return Token(STRUCTURAL[char], char, start, self.pos)

        if char in QUOTES:
            return self.scan_string()

        match = _BARE_RUN.match(self.text, self.pos)
        self.pos = match.end() if match else self.pos + 1
        lexeme = self.text[start : self.pos]
        kind = TokenKind.NUMBER if is_number_lexeme(lexeme) else TokenKind.WORD
        return Token(kind, lexeme, start, self.pos)

    def scan_string(self) -> Token:
        """
        Scans a quoted string opened by either quote character.

        The string runs to the next unescaped copy of its own delimiter, or
        to end of input when it is never closed. A single quote between two
        word characters is an apostrophe and does not close the string.
        """
        with ProfileContext("scan_string"):
            start = self.pos
            quote = self.text[start]
            plain_run = _PLAIN_RUN[quote]
            chunks: list[str] = []
            self.pos += 1

            while self.pos < self.length:
                char = self.text[self.pos]
                if char == quote:
                    self.pos += 1
                    if _is_apostrophe(self.text, self.pos - 1):
                        # 'it's' keeps going
                        chunks.append(char)
                        continue
                    break
                if char == "\\":
                    chunks.append(self._scan_escape())
                    continue

                match = plain_run.match(self.text, self.pos)
                run_end = match.end() if match else self.pos + 1
                chunks.append(self.text[self.pos : run_end])
                self.pos = run_end

            return Token(
                TokenKind.STRING, "".join(chunks), start, self.pos, quote
            )

    def _scan_escape(self) -> str:
        """Decodes the escape sequence at the current backslash."""
        text = self.text
        pos = self.pos

        if pos + 1 >= self.length:
            self.pos = self.length
            return "\\"

        marker = text[pos + 1]
        if marker in _SIMPLE_ESCAPES:
            self.pos = pos + 2
            return _SIMPLE_ESCAPES[marker]

        if marker != "u":
            # Unknown escape: keep the character, drop the backslash
            self.pos = pos + 2
            return marker

        if not _HEX4.fullmatch(text, pos + 2, pos + 6):
            # Incomplete or invalid \u escape is kept verbatim
            self.pos = pos + 2
            return "\\u"

        code_point = int(text[pos + 2 : pos + 6], 16)
        self.pos = pos + 6

        if 0xD800 <= code_point <= 0xDBFF:
            low = self._peek_low_surrogate()
            if low is not None:
                self.pos += 6
                code_point = 0x10000 + ((code_point - 0xD800) << 10)
                code_point += low - 0xDC00

        return chr(code_point)

    def _peek_low_surrogate(self) -> int | None:
        """Returns an escaped low surrogate directly at pos, if any."""
        pos = self.pos
        if self.text[pos : pos + 2] != "\\u":
            return None
        if not _HEX4.fullmatch(self.text, pos + 2, pos + 6):
            return None
        code_point = int(self.text[pos + 2 : pos + 6], 16)
        if 0xDC00 <= code_point <= 0xDFFF:
            return code_point
        return None

    def scan_bare_text(self, token: Token, stop: frozenset[str]) -> str:
        """
        Extends a bare token through the rest of its line.

        Consumes characters after ``token`` until a character in ``stop``, a
        quote or a line break, and returns the whitespace-trimmed text from
        the start of ``token``. Used for unquoted keys and values that
        contain spaces.
        """
        pos = token.end
        text = self.text

        while pos < self.length:
            char = text[pos]
            if char in stop or char in "\r\n":
                break
            if char in QUOTES and not _is_apostrophe(text, pos):
                break
            pos += 1

        self.pos = pos
        return text[token.start : pos].strip()


def _is_apostrophe(text: str, pos: int) -> bool:
    """Returns True for a single quote between two word characters."""
    return (
        text[pos] == "'"
        and 0 < pos < len(text) - 1
        and _WORD_CHAR.match(text, pos - 1) is not None
        and _WORD_CHAR.match(text, pos + 1) is not None
    )
