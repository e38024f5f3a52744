"""Errorformat template: the shape of an error message as a token sequence."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from errfmt.errors import PatternTooLargeError, TemplateCompileError
from errfmt.tokenizer import tokenize
from errfmt.tokens import token_from_raw, token_pattern

if TYPE_CHECKING:
    from collections.abc import Iterator

    from errfmt.record import KindVocabulary
    from errfmt.tokens import Token

# The pattern comes from user input, limit the size of what we compile
MAX_PATTERN_SIZE = 128 * 1024

# Empty templates match nothing, not the empty string at every position
NEVER_MATCH = "(?!)"


class Template:
    """Ordered sequence of tokens, built once and read many times."""

    def __init__(self, tokens: list[Token] | None = None) -> None:
        """Initialize a template, empty by default."""
        self.tokens: list[Token] = list(tokens or [])

    @classmethod
    def from_string(cls, template: str) -> Template:
        """Tokenize an errorformat string into a template."""
        result = cls()
        for raw in tokenize(template):
            result.push(token_from_raw(raw))
        return result

    def push(self, token: Token) -> Template:
        """Append a token at the end of the template."""
        self.tokens.append(token)
        return self

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __str__(self) -> str:
        return "".join(str(token) for token in self.tokens)

    def __repr__(self) -> str:
        return f"Template({self.tokens!r})"

    def pattern(self, kinds: KindVocabulary | None = None) -> str:
        """Concatenate token fragments into the whole-message pattern."""
        if not self.tokens:
            return NEVER_MATCH
        return "".join(token_pattern(token, kinds) for token in self.tokens)

    def compile(self, kinds: KindVocabulary | None = None) -> re.Pattern[str]:
        """Compile the template into a multi-line regular expression.

        Raises:
            PatternTooLargeError: If the pattern exceeds MAX_PATTERN_SIZE
            TemplateCompileError: If the pattern is not a valid regex
        """
        pattern = self.pattern(kinds)
        size = len(pattern.encode())
        if size > MAX_PATTERN_SIZE:
            raise PatternTooLargeError(str(self), size, MAX_PATTERN_SIZE)
        try:
            compiled = re.compile(pattern, re.MULTILINE)
        except re.error as error:
            raise TemplateCompileError(str(self), str(error)) from error
        if compiled.groups != len(self.tokens):
            msg = (
                f"pattern has {compiled.groups} groups"
                f" for {len(self.tokens)} tokens"
            )
            raise TemplateCompileError(str(self), msg)
        return compiled
