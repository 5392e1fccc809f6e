"""DictionaryEngine backed by pyspellchecker."""

from loguru import logger
from spellchecker import SpellChecker

from spellfuge.core.errors import ResourceLoadError
from spellfuge.utils.helpers import starts_with_uppercase, uppercase_first

# Words longer than this only get distance-1 candidates; distance 2 explodes combinatorially
_LONG_WORD_LENGTH = 12


class SpellCheckerDictionary:
    """Word validity and edit-distance suggestions from pyspellchecker.

    With a custom word list the lookup is case-sensitive, which German needs
    to tell nouns from other words. The bundled German frequency list is
    lowercase, so without a word list lookups ignore case and suggestions
    for capitalized input are capitalized again.
    """

    def __init__(self, words: list[str] | None = None, distance: int = 2):
        try:
            if words:
                self._checker = SpellChecker(language=None, case_sensitive=True, distance=distance)
                self._checker.word_frequency.load_words(words)
            else:
                self._checker = SpellChecker(language="de", distance=distance)
        except (OSError, ValueError) as e:
            raise ResourceLoadError("pyspellchecker dictionary", str(e)) from e
        self.case_sensitive = bool(words)
        logger.debug(f"Dictionary backend ready with {self._checker.word_frequency.unique_words} words")

    def spell(self, word: str) -> bool:
        if not word:
            return False
        return word in self._checker

    def suggest(self, word: str) -> list[str]:
        if not word:
            return []
        if len(word) > _LONG_WORD_LENGTH:
            candidates = self._checker.known(self._checker.edit_distance_1(word))
        else:
            candidates = self._checker.candidates(word)
        if not candidates:
            return []

        ranked = sorted(candidates, key=lambda c: (-self._checker[c], c))
        if not self.case_sensitive and starts_with_uppercase(word):
            ranked = [uppercase_first(c) for c in ranked]
        return [c for c in ranked if c != word]
