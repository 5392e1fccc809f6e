"""Sentence-level removal of matches inside special notations."""

import re
from collections.abc import Callable

from spellfuge.core.types import RuleMatch

# "Jurist:innenausbildung", "Kolleg*innen"
GENDER_STAR_PATTERN = re.compile(r"[A-ZÖÄÜ][a-zöäüß]{1,25}[*:_][a-zöäüß]{1,25}")
FILE_UNDERLINE_PATTERN = re.compile(r"[a-zA-Z0-9-]{1,25}_[a-zA-Z0-9-]{1,25}\.[a-zA-Z]{1,5}")
MENTION_UNDERLINE_PATTERN = re.compile(r"@[a-zA-Z0-9-]{1,25}_[a-zA-Z0-9_-]{1,25}")


def remove_notation_matches(
    text: str, matches: list[RuleMatch], is_misspelled: Callable[[str], bool]
) -> list[RuleMatch]:
    """Drop matches that belong to gender notation, file names or @-mentions.

    The tokenizer splits "Jurist:innenausbildung" at the colon, so the
    trailing part gets flagged on its own. It is removed when the notation
    with its marker removed is a valid word. Matches inside underscore file
    names and mentions are always removed.

    Args:
        text: The checked sentence
        matches: Matches found in text
        is_misspelled: Word-level check used for gender notation

    Returns:
        The remaining matches in their original order
    """
    remaining = list(matches)

    for notation in GENDER_STAR_PATTERN.finditer(text):
        if is_misspelled(re.sub(r"[*:_]", "", notation.group(), count=1)):
            continue
        remaining = [
            m for m in remaining if not (notation.start() < m.start and notation.end() == m.end)
        ]

    for pattern in (FILE_UNDERLINE_PATTERN, MENTION_UNDERLINE_PATTERN):
        for span in pattern.finditer(text):
            remaining = [m for m in remaining if not m.covers(span.start(), span.end())]

    return remaining
