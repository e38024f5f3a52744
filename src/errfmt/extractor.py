"""Extract normalized records from tool output.

The extractor compiles an errorformat template once, then every match of the
compiled pattern in the input becomes one record. Capture groups are walked
in template order: group N+1 holds the text of token N.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from rich.markup import escape

from errfmt.console import is_verbose, print_verbose, print_warning
from errfmt.errors import ExtractionError, InvalidNumberError
from errfmt.record import KindVocabulary, Record
from errfmt.template import Template
from errfmt.tokens import Placeholder

if TYPE_CHECKING:
    import re
    from collections.abc import Iterator

    from errfmt.tokens import Token


@dataclass
class ParseResult:
    """Records extracted from an input, and the matches that failed."""

    records: list[Record] = field(default_factory=list)
    errors: list[ExtractionError] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.records or self.errors)


class Extractor:
    """Build records from the matches of an errorformat template."""

    def __init__(
        self,
        template: str,
        file_override: str = "",
        *,
        kinds: KindVocabulary | None = None,
    ) -> None:
        """Tokenize and compile the template.

        Args:
            template: Errorformat string, like "%f:%l:%c: %k: %m"
            file_override: If not empty, file name of every record
            kinds: Recognized kind words, "warning" and "error" by default

        Raises:
            TemplateCompileError: If the template does not compile
        """
        self.template = Template.from_string(template)
        self.file_override = file_override
        self.kinds = kinds or KindVocabulary()
        self.pattern = self.template.compile(self.kinds)
        # Groups of the tokens that always capture text when they match
        self.anchor_groups = [
            index
            for index, token in enumerate(self.template, start=1)
            if token not in (Placeholder.WHITESPACE, Placeholder.WILDCARD)
        ]
        print_verbose("  pattern:", escape(self.pattern.pattern))

    def records(self, text: str) -> Iterator[Record]:
        """Yield one record per match, in input order.

        Raises:
            ExtractionError: At the first match that is not a valid record
        """
        for item in self.records_or_errors(text):
            if isinstance(item, ExtractionError):
                raise item
            yield item

    def parse(self, text: str) -> ParseResult:
        """Extract all records, collecting failures instead of stopping."""
        result = ParseResult()
        for item in self.records_or_errors(text):
            if isinstance(item, ExtractionError):
                result.errors.append(item)
            else:
                result.records.append(item)
        return result

    def records_or_errors(
        self, text: str
    ) -> Iterator[Record | ExtractionError]:
        """Yield a record, or the extraction error, for each match."""
        for match in self.pattern.finditer(text):
            # Only whitespace and wildcards matched, that is no message
            if not any(match.group(index) for index in self.anchor_groups):
                continue
            try:
                record = self._build_record(match)
            except ExtractionError as error:
                print_verbose("    !", escape(str(error)))
                yield error
            else:
                _report_record(record)
                yield record

    def render(self, text: str, *, strict: bool = False) -> list[str]:
        """Render records as "file:line:column: kind: message" strings.

        Malformed matches are reported as warnings and skipped, unless
        strict, in which case the first one is raised.
        """
        if strict:
            return [str(record) for record in self.records(text)]
        result = self.parse(text)
        for error in result.errors:
            print_warning("Skipped match:", escape(str(error)))
        return [str(record) for record in result.records]

    def _build_record(self, match: re.Match[str]) -> Record:
        """Walk tokens and capture groups together, filling a record."""
        record = Record()
        for index, token in enumerate(self.template, start=1):
            # Group 0 is the whole match
            value = match.group(index)
            record = self._update_record(record, token, value, match.group())
        if self.file_override:
            record = replace(record, file=self.file_override)
        return record

    def _update_record(
        self, record: Record, token: Token, value: str, matched: str
    ) -> Record:
        """Store the value of a bound token in the matching record field."""
        match token:
            case Placeholder.FILE:
                return replace(record, file=value)
            case Placeholder.LINE:
                line = _parse_number("line", value, matched)
                return replace(record, line=line)
            case Placeholder.COLUMN:
                column = _parse_number("column", value, matched)
                return replace(record, column=column)
            case Placeholder.KIND:
                return replace(record, kind=self.kinds.parse(value, matched))
            case Placeholder.MESSAGE:
                return replace(record, message=value)
            case _:
                # Whitespace, wildcard and literal text are not stored
                return record


def _parse_number(field_name: str, value: str, matched: str) -> int:
    """Parse a line or column number, which must be a positive integer."""
    try:
        number = int(value)
    except ValueError:
        raise InvalidNumberError(field_name, value, matched) from None
    if number < 1:
        raise InvalidNumberError(field_name, value, matched)
    return number


def _report_record(record: Record) -> None:
    if is_verbose():
        words = [
            f"f={record.file!r}",
            f"l={record.line!r}",
            f"c={record.column!r}",
            f"k={record.kind!s}",
            f"#={len(record.message)!r}",
        ]
        print_verbose("    >", escape(" ".join(words)))


def run(
    input: str,  # noqa: A002
    template: str,
    file_override: str = "",
    *,
    kinds: KindVocabulary | None = None,
    strict: bool = False,
) -> list[str]:
    """Re-shape tool output into normalized records.

    Args:
        input: Complete tool output
        template: Errorformat string describing the tool messages
        file_override: If not empty, replaces the file of every record
        kinds: Recognized kind words
        strict: Raise at the first malformed match instead of skipping it

    Returns:
        One "file:line:column: kind: message" string per record

    Raises:
        TemplateCompileError: If the template does not compile
        ExtractionError: If strict and a match is not a valid record
    """
    extractor = Extractor(template, file_override, kinds=kinds)
    return extractor.render(input, strict=strict)
