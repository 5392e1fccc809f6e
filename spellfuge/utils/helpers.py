"""Shared utility functions for the speller."""

import functools
import os

from wordfreq import word_frequency as _word_frequency


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


@functools.lru_cache(maxsize=None)
def cached_word_frequency(text: str, lang: str = "de") -> float:
    """Cached wrapper for wordfreq's word_frequency.

    Multi-word strings are tokenized by wordfreq and their frequencies
    combined, so this also serves phrase lookups.

    Args:
        text: The word or phrase to look up
        lang: Language code (default: "de")

    Returns:
        Frequency as a float (0.0 for unknown text)
    """
    return _word_frequency(text, lang)


def starts_with_uppercase(word: str) -> bool:
    """Check whether the first character of word is an uppercase letter."""
    return bool(word) and word[0].isupper()


def uppercase_first(word: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    return word[:1].upper() + word[1:]


def lowercase_first(word: str) -> str:
    """Lowercase the first character, leaving the rest untouched."""
    return word[:1].lower() + word[1:]


def is_all_uppercase(word: str) -> bool:
    """Check whether every cased character of word is uppercase."""
    letters = [c for c in word if c.isalpha()]
    return bool(letters) and all(c.isupper() for c in letters)


def is_all_lowercase(word: str) -> bool:
    """Check whether word is non-empty and consists of lowercase letters only."""
    return bool(word) and all(c.isalpha() and c.islower() for c in word)
