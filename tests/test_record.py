"""Tests for records and kinds."""

import pytest

from errfmt.errors import UnknownKindError
from errfmt.record import Kind, KindVocabulary, Record, parse_synonym


def test_default_record_values() -> None:
    """Defaults still render a usable location."""
    assert str(Record()) == ":1:1: error: "


def test_arbitrary_record_values() -> None:
    """Records render as file:line:column: kind: message."""
    record = Record(
        file="/tmp/foo",
        line=2,
        column=3,
        kind=Kind.WARNING,
        message="syntax error",
    )
    assert str(record) == "/tmp/foo:2:3: warning: syntax error"


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("error", Kind.ERROR),
        ("Error", Kind.ERROR),
        ("ERROR", Kind.ERROR),
        ("warning", Kind.WARNING),
        ("Warning", Kind.WARNING),
    ],
)
def test_parse_kind_ignores_case(word: str, expected: Kind) -> None:
    """Kind words are recognized case-insensitively."""
    assert KindVocabulary().parse(word) is expected


def test_unknown_kind_is_an_error() -> None:
    """Unknown words are not silently mapped to a default."""
    with pytest.raises(UnknownKindError) as exc_info:
        KindVocabulary().parse("note", "foo.c:1: note: here")
    assert exc_info.value.word == "note"
    assert exc_info.value.matched == "foo.c:1: note: here"
    assert "'note'" in str(exc_info.value)


def test_synonyms_extend_vocabulary() -> None:
    """Template authors can add words to the closed vocabulary."""
    kinds = KindVocabulary().with_synonyms(
        {"Note": Kind.WARNING, "fatal": Kind.ERROR}
    )
    assert kinds.parse("note") is Kind.WARNING
    assert kinds.parse("FATAL") is Kind.ERROR
    assert kinds.parse("error") is Kind.ERROR
    # The default vocabulary is left unchanged
    with pytest.raises(UnknownKindError):
        KindVocabulary().parse("note")


def test_vocabulary_pattern_longest_first() -> None:
    """Longer words come first in the alternation."""
    kinds = KindVocabulary({"err": Kind.ERROR, "error": Kind.ERROR})
    assert kinds.pattern() == "error|err"


def test_empty_vocabulary_is_rejected() -> None:
    """A vocabulary must recognize at least one word."""
    with pytest.raises(ValueError, match="non-empty"):
        KindVocabulary({})


@pytest.mark.parametrize("word", ["c++", "-Werror", "note:", "a b "])
def test_vocabulary_rejects_non_word_edges(word: str) -> None:
    """Words must start and end with a word character to match at all."""
    with pytest.raises(ValueError, match="word character"):
        KindVocabulary().with_synonyms({word: Kind.ERROR})


def test_vocabulary_accepts_inner_punctuation() -> None:
    """Only the edges of a word are restricted."""
    kinds = KindVocabulary().with_synonyms({"error-prone": Kind.WARNING})
    assert kinds.parse("Error-Prone") is Kind.WARNING


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("note=warning", ("note", Kind.WARNING)),
        (" fatal = Error ", ("fatal", Kind.ERROR)),
    ],
)
def test_parse_synonym(value: str, expected: tuple[str, Kind]) -> None:
    """Synonyms are given as WORD=KIND."""
    assert parse_synonym(value) == expected


@pytest.mark.parametrize("value", ["note", "=warning", "note=info"])
def test_parse_synonym_invalid(value: str) -> None:
    """Malformed synonyms raise ValueError."""
    with pytest.raises(ValueError, match=r"note|warning|WORD=KIND"):
        parse_synonym(value)


def test_kind_renders_lowercase() -> None:
    """Kinds render as their canonical lowercase word."""
    assert str(Kind.WARNING) == "warning"
    assert f"{Kind.ERROR}" == "error"
