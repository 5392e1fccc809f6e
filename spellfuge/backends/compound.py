"""DictionaryEngine that also accepts closed compounds of known words."""

from spellfuge.core.errors import InputTooLongError
from spellfuge.core.protocols import CompoundSplitter, DictionaryEngine
from spellfuge.utils.helpers import starts_with_uppercase, uppercase_first

# Heads with these endings only join the next part through a linking-s ("Einzahlungsschein")
_LINKING_S_REQUIRED = ("tum", "ling", "heit", "keit", "schaft", "sicht", "ung", "ion", "tät")


class CompoundDictionary:
    """Wrap a word-list engine so that compounds of its words spell.

    A word the base engine rejects is accepted when some split of it has
    lowercase inner parts, no head that is missing its linking-s and a last
    part that spells in the case of the whole word: capitalized compounds
    need a noun as their last part ("Haustür"), lowercase ones a lowercase
    word. The splitter must consult the base engine, not this wrapper.

    Suggestions come from the base engine unchanged.
    """

    def __init__(self, base: DictionaryEngine, splitter: CompoundSplitter):
        self.base = base
        self.splitter = splitter

    def spell(self, word: str) -> bool:
        if self.base.spell(word):
            return True
        try:
            splits = self.splitter.split(word)
        except InputTooLongError:
            return False
        return any(self._is_valid_split(word, parts) for parts in splits)

    def suggest(self, word: str) -> list[str]:
        return self.base.suggest(word)

    def _is_valid_split(self, word: str, parts: tuple[str, ...]) -> bool:
        if any(not part[:1].islower() for part in parts[1:]):
            return False
        for part in parts[:-1]:
            bare_word = self.base.spell(part) or self.base.spell(uppercase_first(part))
            if bare_word and part.endswith(_LINKING_S_REQUIRED):
                return False
        last = parts[-1]
        if starts_with_uppercase(word):
            return self.base.spell(uppercase_first(last))
        return self.base.spell(last)
