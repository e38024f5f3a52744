"""Exceptions raised while compiling templates and extracting records."""


class ErrfmtError(Exception):
    """Base class for errfmt errors."""


class TemplateCompileError(ErrfmtError):
    """The errorformat template does not produce a usable pattern."""

    def __init__(self, template: str, reason: str) -> None:
        """Initialize with the offending template and the failure reason."""
        self.template = template
        self.reason = reason
        super().__init__(f"Invalid errorformat {template!r}: {reason}")


class PatternTooLargeError(TemplateCompileError):
    """The compiled pattern exceeds the size ceiling."""

    def __init__(self, template: str, size: int, limit: int) -> None:
        """Initialize with the pattern size and the ceiling it exceeds."""
        self.size = size
        self.limit = limit
        super().__init__(
            template, f"pattern is {size} bytes, limit is {limit} bytes"
        )


class ExtractionError(ErrfmtError):
    """A match could not be converted into a record."""

    def __init__(self, message: str, matched: str) -> None:
        """Initialize with a description and the matched input text."""
        self.matched = matched
        super().__init__(f"{message} in {matched!r}")


class UnknownKindError(ExtractionError):
    """Kind word outside of the recognized vocabulary."""

    def __init__(self, word: str, matched: str = "") -> None:  # noqa: D107
        self.word = word
        super().__init__(f"Unexpected kind: {word!r}", matched or word)


class InvalidNumberError(ExtractionError):
    """Line or column is not a positive integer."""

    def __init__(  # noqa: D107
        self, field: str, value: str, matched: str = ""
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"Invalid {field} number: {value!r}", matched or value
        )


class UnknownPresetError(KeyError):
    """Preset name not found in the preset catalog."""

    def __str__(self) -> str:
        """Plain message, KeyError would show its repr."""
        return str(self.args[0]) if self.args else ""
