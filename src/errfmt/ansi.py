"""ANSI escape code utilities.

Compilers and linters colorize their output when they believe they write to
a terminal, or when forced to. Escape codes would otherwise end up inside
extracted file names and messages.
"""

import re

ANSI_REGEX = re.compile(
    r"""
    \x1b              # ESC character (0x1b)
    (?:
        \]            # OSC - Operating System Command (hyperlinks, titles)
        [^\x07\x1b]*  # Payload, up to the string terminator
        (?:\x07|\x1b\\)  # BEL or ST terminator
        |
        \[            # CSI - Control Sequence Introducer
        [0-?]*        # Parameter bytes: 0-9 : ; < = > ?
        [ -/]*        # Intermediate bytes: space through /
        [@-~]         # Final byte: m for colors, K for erase line...
        |
        [()]          # SCS - Select Character Set, G0 or G1
        [B0UK]
        |
        [@-Z\\-_]     # Fe sequences: two-byte escapes
    )
    """,
    re.VERBOSE,
)


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_REGEX.sub("", text)
