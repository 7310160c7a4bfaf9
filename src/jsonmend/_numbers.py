"""Interpretation of bare numeric lexemes."""

import math
import re

from ._profile import ProfileContext

# Lenient superset of the JSON number grammar: optional '+', leading zeros,
# a bare trailing '.', and a fraction without integer digits are tolerated.
NUMBER_RE = re.compile(
    r"[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?"
)


def is_number_lexeme(text: str) -> bool:
    """Returns True when the whole text is a numeric lexeme."""
    return NUMBER_RE.fullmatch(text) is not None


def normalize_number(lexeme: str) -> int | float | None:
    """
    Converts a numeric lexeme into a Python number.

    Integer lexemes stay ``int`` and everything else becomes ``float``.
    Values whose magnitude overflows a double degrade to ``None``, and
    ``-0`` is kept as ``-0.0`` so the sign is not lost.
    """
    with ProfileContext("normalize_number", len(lexeme)):
        if not is_number_lexeme(lexeme):
            return None

        as_float = float(lexeme)
        if not math.isfinite(as_float):
            return None

        if any(c in lexeme for c in ".eE"):
            return as_float

        if as_float == 0 and lexeme.startswith("-"):
            return -0.0

        try:
            return int(lexeme)
        except ValueError:
            # Past the interpreter's int string conversion limit
            return as_float
