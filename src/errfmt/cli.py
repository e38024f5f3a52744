"""Errfmt command line interface.

Errfmt reads the output of a compiler or checker on stdin, and writes the
diagnostics it finds as "file:line:column: kind: message" lines on stdout.
"""

import sys

import typer
from rich.markup import escape

from errfmt.ansi import strip_ansi
from errfmt.console import print_error, print_verbose, set_verbose
from errfmt.errors import (
    ExtractionError,
    TemplateCompileError,
    UnknownPresetError,
)
from errfmt.extractor import Extractor
from errfmt.presets import PRESETS, get_default_errfmt, get_preset
from errfmt.record import KindVocabulary, parse_synonym

app = typer.Typer()


# ruff: noqa: FBT001 FBT003 Typer API uses boolean arguments for flags
# ruff: noqa: B008 function-call-in-default-argument


def _select_errfmt(errfmt: str | None, preset: str) -> str:
    """Choose the errorformat from CLI options, with validation.

    Raises:
        typer.Exit: If options are conflicting or the preset is unknown
    """
    if errfmt is not None and preset:
        print_error(
            None, "Options -e/--errfmt and -p/--preset are mutually exclusive"
        )
        raise typer.Exit(1)
    if errfmt is not None:
        # An explicit empty template is legal, it matches nothing
        return errfmt
    try:
        return get_preset(preset) if preset else get_default_errfmt()
    except UnknownPresetError as error:
        print_error(None, escape(str(error)))
        raise typer.Exit(1) from error


def _build_vocabulary(synonyms: list[str] | None) -> KindVocabulary:
    """Extend the default kind words with WORD=KIND definitions."""
    vocabulary = KindVocabulary()
    if not synonyms:
        return vocabulary
    try:
        pairs = dict(parse_synonym(value) for value in synonyms)
        return vocabulary.with_synonyms(pairs)
    except ValueError as error:
        print_error(None, escape(str(error)))
        raise typer.Exit(1) from error


def list_presets() -> None:
    """Print preset names and their errorformat."""
    width = max(len(name) for name in PRESETS)
    for name, errfmt in PRESETS.items():
        sys.stdout.write(f"{name:<{width}}  {errfmt}\n")


@app.command()
def main(  # noqa: PLR0913
    errfmt: str | None = typer.Option(
        None,
        "-e",
        "--errfmt",
        help="Errorformat describing the tool output",
    ),
    preset: str = typer.Option(
        "", "-p", "--preset", help="Use the errorformat of a known tool"
    ),
    file: str = typer.Option(
        "", "-f", "--file", help="Force the file name of every diagnostic"
    ),
    kind: list[str] | None = typer.Option(
        None,
        "-k",
        "--kind",
        help="Extra kind word, as WORD=KIND (e.g. note=warning)",
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Fail at the first malformed diagnostic"
    ),
    strip: bool = typer.Option(
        True, "--strip-ansi/--keep-ansi", help="Remove ANSI escape codes"
    ),
    presets: bool = typer.Option(
        False, "--list-presets", help="List known presets and exit"
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Show verbose output"
    ),
) -> None:
    """Errfmt: normalize compiler and checker diagnostics."""
    if verbose:
        set_verbose()
    if presets:
        list_presets()
        return

    template = _select_errfmt(errfmt, preset)
    kinds = _build_vocabulary(kind)
    print_verbose("errorformat:", escape(template))

    # Fail on a bad template before waiting for the whole tool output
    try:
        extractor = Extractor(template, file, kinds=kinds)
    except TemplateCompileError as error:
        print_error(None, escape(str(error)))
        raise typer.Exit(1) from error

    text = sys.stdin.read()
    if strip:
        text = strip_ansi(text)

    try:
        lines = extractor.render(text, strict=strict)
    except ExtractionError as error:
        print_error(None, escape(str(error)))
        raise typer.Exit(1) from error

    print_verbose("records:", len(lines))
    if lines:
        sys.stdout.write("\n".join(lines) + "\n")


if __name__ == "__main__":
    app()
