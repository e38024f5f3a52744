"""Semantic tokens of an errorformat template and their pattern fragments.

Every token, bound to a record field or not, is rendered as exactly one
capturing group. Group N+1 of a match therefore always belongs to token N.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from errfmt.record import KindVocabulary


class Placeholder(Enum):
    """Percent placeholders with a special meaning."""

    FILE = "%f"
    LINE = "%l"
    COLUMN = "%c"
    KIND = "%k"
    MESSAGE = "%m"
    WHITESPACE = "%."
    WILDCARD = "%*"

    def __str__(self) -> str:
        """Render back as template text."""
        return self.value


@dataclass(frozen=True)
class Literal:
    """Text that must appear verbatim in the input."""

    text: str

    def __str__(self) -> str:
        """Render as plain text, without escaping."""
        return self.text


Token: TypeAlias = Placeholder | Literal


def token_from_raw(raw: str) -> Token:
    """Convert a raw token from the tokenizer, never fails.

    Unknown percent sequences are literal text. "%%" is a literal "%".
    """
    if raw == "%%":
        return Literal("%")
    try:
        return Placeholder(raw)
    except ValueError:
        return Literal(raw)


def token_pattern(token: Token, kinds: KindVocabulary | None = None) -> str:
    """Regex fragment matching the token, wrapped in one capturing group."""
    match token:
        case Placeholder.FILE:
            # Lazy, so that a following delimiter like ":" is not eaten
            fragment = r"[^\x00\n]+?"
        case Placeholder.LINE | Placeholder.COLUMN:
            fragment = r"\d+"
        case Placeholder.KIND:
            words = (kinds or KindVocabulary()).pattern()
            fragment = rf"\b(?i:{words})\b"
        case Placeholder.MESSAGE:
            fragment = r"[^\n]+"
        case Placeholder.WHITESPACE:
            fragment = r"\s+"
        case Placeholder.WILDCARD:
            fragment = r"[^\n]*?"
        case Literal(text):
            fragment = re.escape(text)
    return f"({fragment})"

