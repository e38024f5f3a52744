"""Normalized diagnostic records.

A record is a location compatible with the ``file:line:column: kind:
message`` format that editors such as kakoune and vim read from linters.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from types import MappingProxyType

from errfmt.errors import UnknownKindError


class Kind(StrEnum):
    """Severity of a diagnostic."""

    WARNING = auto()
    ERROR = auto()


WORD_EDGES_REGEX = re.compile(r"\w(?:.*\w)?", re.DOTALL)

DEFAULT_KIND_WORDS: Mapping[str, Kind] = MappingProxyType(
    {"warning": Kind.WARNING, "error": Kind.ERROR}
)


@dataclass(frozen=True)
class KindVocabulary:
    """Closed list of words recognized as a diagnostic kind.

    Words are matched case-insensitively. Anything else is an error rather
    than a guessed default, so that a misconfigured template does not hide
    a linter's messages.
    """

    words: Mapping[str, Kind] = field(
        default_factory=lambda: DEFAULT_KIND_WORDS
    )

    def __post_init__(self) -> None:  # noqa: D105
        words = {word.lower(): kind for word, kind in self.words.items()}
        if not words or not all(words):
            msg = "Kind vocabulary must contain non-empty words"
            raise ValueError(msg)
        for word in words:
            # Kind words are matched between word boundaries
            if not WORD_EDGES_REGEX.fullmatch(word):
                msg = (
                    "Kind word must start and end with a word character:"
                    f" {word!r}"
                )
                raise ValueError(msg)
        object.__setattr__(self, "words", MappingProxyType(words))

    def with_synonyms(self, synonyms: Mapping[str, Kind]) -> KindVocabulary:
        """Return a vocabulary extended with additional words."""
        return KindVocabulary({**self.words, **synonyms})

    def parse(self, word: str, matched: str = "") -> Kind:
        """Return the kind for word, raise UnknownKindError if unknown."""
        try:
            return self.words[word.lower()]
        except KeyError:
            raise UnknownKindError(word, matched) from None

    def pattern(self) -> str:
        """Regex alternation of the vocabulary, longest words first."""
        words = sorted(self.words, key=lambda word: (-len(word), word))
        return "|".join(re.escape(word) for word in words)


def parse_synonym(value: str) -> tuple[str, Kind]:
    """Parse a WORD=KIND synonym definition, like ``note=warning``."""
    word, sep, kind = value.partition("=")
    word, kind = word.strip(), kind.strip().lower()
    if not sep or not word:
        msg = f"Expected WORD=KIND, received: {value!r}"
        raise ValueError(msg)
    try:
        return word, Kind(kind)
    except ValueError:
        choices = ", ".join(Kind)
        msg = (
            f"Unknown kind {kind!r} in {value!r}, expected one of: {choices}"
        )
        raise ValueError(msg) from None


@dataclass(frozen=True)
class Record:
    """Normalized diagnostic, one per match.

    Defaults let partial templates, without line or column placeholders,
    still produce usable locations.
    """

    file: str = ""
    line: int = 1
    column: int = 1
    kind: Kind = Kind.ERROR
    message: str = ""

    def __str__(self) -> str:
        """Render in the format expected by editors, like lint.kak."""
        return (
            f"{self.file}:{self.line}:{self.column}: {self.kind}: "
            f"{self.message}"
        )
