"""Errfmt: re-shape compiler and linter output into editor locations."""

from errfmt.extractor import Extractor, ParseResult, run
from errfmt.record import Kind, KindVocabulary, Record

__all__ = [
    "Extractor",
    "Kind",
    "KindVocabulary",
    "ParseResult",
    "Record",
    "run",
]
