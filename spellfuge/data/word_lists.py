"""Ignore, prohibited and dictionary word list loading."""

import os
from dataclasses import dataclass

from loguru import logger

from spellfuge.core.errors import ResourceLoadError
from spellfuge.core.types import IgnoreScope
from spellfuge.utils.constants import Constants
from spellfuge.utils.helpers import expand_file_path


class LineExpander:
    """Expand "word/FLAGS" lines of spelling lists into full forms.

    Flags append inflectional endings to the base form:
    A (adjective endings), S, N, E and F (feminine "-in"/"-innen").
    """

    SUFFIXES = {
        "A": ("e", "er", "es", "en", "em"),
        "S": ("s",),
        "N": ("n",),
        "E": ("e",),
        "F": ("in", "innen"),
    }

    def expand_line(self, line: str) -> list[str]:
        if "/" not in line:
            return [line]
        word, flags = line.split("/", 1)
        result = [word]
        for flag in flags:
            for suffix in self.SUFFIXES.get(flag, ()):
                result.append(word + suffix)
        return result


@dataclass(frozen=True)
class IgnoreListStore:
    """Immutable snapshot of words accepted without a dictionary entry.

    Attributes:
        words: Globally accepted words
        compound_only: Words accepted only inside hyphenated compounds
    """

    words: frozenset[str] = frozenset()
    compound_only: frozenset[str] = frozenset()

    def __len__(self) -> int:
        return len(self.words) + len(self.compound_only)

    def contains(self, word: str) -> bool:
        return word in self.words

    def scope_of(self, word: str) -> IgnoreScope | None:
        if word in self.words:
            return IgnoreScope.GLOBAL
        if word in self.compound_only:
            return IgnoreScope.COMPOUND_ONLY
        return None

    def starts_with_ignored_word(self, word: str, case_sensitive: bool = True) -> int:
        """Return the length of the longest ignored word that word starts with, or 0.

        Only ignored words of at least four characters are considered.
        """
        if len(word) < 4:
            return 0
        if case_sensitive:
            probe, candidates = word, self.words
        else:
            probe, candidates = word.lower(), {w.lower() for w in self.words}
        for end in range(len(probe), 3, -1):
            if probe[:end] in candidates:
                return end
        return 0


def _read_lines(filepath: str, what: str) -> list[str]:
    path = expand_file_path(filepath)
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise ResourceLoadError(f"{what} {path}", str(e)) from e

    return [
        line.strip()
        for line in lines
        if line.strip() and not line.strip().startswith(Constants.COMMENT_PREFIX)
    ]


def load_ignore_list(
    filepath: str | None, variant: str = "de-DE", verbose: bool = False
) -> IgnoreListStore:
    """Load a spelling list into an IgnoreListStore.

    Lines ending in "-*" are only valid inside hyphenated compounds. For the
    Swiss variant, "ß" is replaced by "ss" before storage so that words
    spelled with "ß" are still flagged.

    Raises:
        ResourceLoadError: If the file cannot be read
    """
    if not filepath:
        return IgnoreListStore()

    expander = LineExpander()
    words: set[str] = set()
    compound_only: set[str] = set()
    marker = Constants.COMPOUND_ONLY_MARKER

    for line in _read_lines(filepath, "ignore list"):
        if variant == Constants.SWISS_VARIANT:
            line = line.replace("ß", "ss")
        if line.endswith(marker):
            compound_only.add(line[: -len(marker)])
            continue
        words.update(expander.expand_line(line))

    if verbose:
        logger.info(
            f"Loaded {len(words)} ignored words and {len(compound_only)} compound-only words "
            f"from {os.path.basename(filepath)}"
        )

    return IgnoreListStore(frozenset(words), frozenset(compound_only))


def load_prohibited_list(filepath: str | None, verbose: bool = False) -> frozenset[str]:
    """Load prohibited entries: exact words, "prefix.*" and ".*suffix" rules.

    Raises:
        ResourceLoadError: If the file cannot be read
    """
    if not filepath:
        return frozenset()

    entries = frozenset(_read_lines(filepath, "prohibited list"))

    if verbose:
        logger.info(f"Loaded {len(entries)} prohibited entries from {os.path.basename(filepath)}")

    return entries


def load_word_list(filepath: str | None, verbose: bool = False) -> list[str]:
    """Load a plain word list, expanding "word/FLAGS" lines.

    Raises:
        ResourceLoadError: If the file cannot be read
    """
    if not filepath:
        return []

    expander = LineExpander()
    words = []
    invalid_count = 0

    for line in _read_lines(filepath, "word list"):
        if any(c in line for c in ["\t", "\\", " "]):
            invalid_count += 1
            continue
        words.extend(expander.expand_line(line))

    if verbose:
        logger.info(f"Loaded {len(words)} words from {os.path.basename(filepath)}")
        if invalid_count > 0:
            logger.info(f"Skipped {invalid_count} lines with invalid characters")

    return words
