"""Search query normalization.

Turns free text into a POSIX regex alternation ("token1|token2") that the
storage layer matches case-insensitively against title and description.
"""

import re

# Anything that is not a (Unicode) word character, whitespace, hyphen or pipe.
_DISALLOWED_RE = re.compile(r"[^\w\s|-]+")
# Separators between tokens; "|" is included so normalizing twice is a no-op.
_SEPARATOR_RE = re.compile(r"[\s|-]+")

ALTERNATION = "|"


def normalize_query(raw: str) -> str:
    """Strip special characters and join tokens with "|".

    E.g. 'Красная  площадь, Москва!' -> 'Красная|площадь|Москва'.
    Leading/trailing separators are dropped so the pattern never contains an
    empty alternative (which would match every row). The result may be empty
    when the input had no word characters.
    """
    cleaned = _DISALLOWED_RE.sub("", raw)
    return _SEPARATOR_RE.sub(ALTERNATION, cleaned).strip(ALTERNATION)


def query_tokens(pattern: str) -> list[str]:
    """Split a normalized pattern back into its tokens (empty pattern -> [])."""
    return [token for token in pattern.split(ALTERNATION) if token]
