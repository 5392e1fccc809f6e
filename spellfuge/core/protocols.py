"""Capability interfaces of the linguistic collaborators.

Any backend can be plugged in behind these protocols; the speller only
relies on the methods listed here.
"""

from typing import Protocol, runtime_checkable

from spellfuge.core.types import Reading, SplitResult


@runtime_checkable
class DictionaryEngine(Protocol):
    """Atomic word validity and similarity-based suggestions."""

    def spell(self, word: str) -> bool:
        """Return True if word is a valid word form."""
        ...

    def suggest(self, word: str) -> list[str]:
        """Return similar valid words, best first."""
        ...


@runtime_checkable
class CompoundSplitter(Protocol):
    """Decomposition of words into dictionary-valid parts."""

    def split(self, word: str) -> list[SplitResult]:
        """Return all plausible decompositions, preferred first.

        Raises:
            InputTooLongError: If word is too long to process
        """
        ...


@runtime_checkable
class Tagger(Protocol):
    """Morphological analysis of single tokens."""

    def tag(self, word: str) -> list[Reading]:
        """Return all readings of word; an empty list means unknown."""
        ...


@runtime_checkable
class Synthesizer(Protocol):
    """Generation of inflected forms."""

    def synthesize(self, lemma: str, tag_pattern: str) -> list[str]:
        """Return surface forms of lemma whose tag matches tag_pattern."""
        ...


@runtime_checkable
class LanguageModel(Protocol):
    """Relative likelihood of token sequences."""

    def pseudo_probability(self, words: list[str]) -> float:
        """Return a score comparable between sequences; 0.0 means unseen."""
        ...
