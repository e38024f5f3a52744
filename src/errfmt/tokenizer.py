"""Split an errorformat template into raw tokens.

A raw token is either a known placeholder (``%f``, ``%l``, ``%c``, ``%k``,
``%m``, ``%.``, ``%*`` or ``%%``) or a run of literal text. Joining the raw
tokens gives back the template.
"""

PLACEHOLDER_SELECTORS = frozenset("flckm.*%")


def tokenize(template: str) -> list[str]:
    """Stream the template characters and group them into raw tokens."""
    tokens: list[str] = []
    for char in template:
        if _starts_token(tokens, char):
            tokens.append(char)
        else:
            tokens[-1] += char
    return tokens


def _starts_token(tokens: list[str], char: str) -> bool:
    """Guess if char starts a new token or extends the ongoing one."""
    if not tokens:
        return True
    last = tokens[-1]
    if char == "%":
        # "%%" is a single placeholder, do not split it
        return last != "%"
    return is_known_placeholder(last)


def is_known_placeholder(value: str) -> bool:
    """Check if value is a complete percent placeholder like %f or %%."""
    return (
        len(value) == 2
        and value[0] == "%"
        and value[1] in PLACEHOLDER_SELECTORS
    )
