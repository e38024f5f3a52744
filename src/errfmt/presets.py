"""Errorformat presets for known tools."""

import os

from errfmt.errors import UnknownPresetError

# Already normalized input, useful to filter and validate
PASSTHROUGH_ERRFMT = "%f:%l:%c: %k: %m"

# PHP Parse error:  syntax error, unexpected ... in /tmp/test.php on line 4
PHP_ERRFMT = "%k: %m in %f on line %l"

# error[E0425]: cannot find value `x` in this scope
#   --> src/main.rs:2:5
RUST_ERRFMT = "%k%*: %m%.--> %f:%l:%c"

# eslint --format compact
# /tmp/foo.js: line 1, col 10, Error - Missing semicolon. (semi)
ESLINT_ERRFMT = "%f: line %l, col %c, %k - %m"

PRESETS: dict[str, str] = {
    "passthrough": PASSTHROUGH_ERRFMT,
    "php": PHP_ERRFMT,
    "rust": RUST_ERRFMT,
    "eslint": ESLINT_ERRFMT,
}

# Tool names that should use another preset
PRESET_ALIASES: dict[str, str] = {
    "cargo": "rust",
    "rustc": "rust",
    "php-cli": "php",
}

# Environment variable naming the default preset
ERRFMT_PRESET = "ERRFMT_PRESET"


def resolve_preset_name(name: str) -> str:
    """Resolve aliases, ignoring case and surrounding whitespace."""
    name = name.strip().lower()
    return PRESET_ALIASES.get(name, name)


def get_preset(name: str) -> str:
    """Return the errorformat of a preset, by name or alias."""
    try:
        return PRESETS[resolve_preset_name(name)]
    except KeyError:
        known = ", ".join(sorted(PRESETS))
        msg = f"Unknown preset {name!r}, expected one of: {known}"
        raise UnknownPresetError(msg) from None


def get_default_errfmt() -> str:
    """Errorformat used when none is given on the command line."""
    name = os.environ.get(ERRFMT_PRESET)
    if name:
        return get_preset(name)
    return PASSTHROUGH_ERRFMT
