"""Word tokenization for the speller."""

import re

from spellfuge.core.types import Token
from spellfuge.utils.constants import Constants

_EXTENSIONS = "|".join(Constants.FILE_EXTENSIONS)

# Words (letters with inner or trailing hyphens), file suffixes, numbers and commas
_TOKEN_PATTERN = re.compile(
    rf"(?<=\w)\.(?:{_EXTENSIONS})\b"
    r"|[^\W\d_](?:[^\W\d_]|-)*"
    r"|\d+"
    r"|,"
)


def tokenize(text: str) -> list[Token]:
    """Split text into tokens with their character offsets."""
    return [Token(text=m.group(), start=m.start(), end=m.end()) for m in _TOKEN_PATTERN.finditer(text)]


def to_words(tokens: list[Token]) -> list[str]:
    """Token texts as the classifier expects them.

    A number directly followed by another token becomes an empty string,
    so "100stel" reads as ["", "stel"].
    """
    words = []
    for i, token in enumerate(tokens):
        glued = i + 1 < len(tokens) and tokens[i + 1].start == token.end
        if token.text.isdigit() and glued:
            words.append("")
        else:
            words.append(token.text)
    return words
