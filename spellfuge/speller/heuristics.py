"""Part-of-speech tests and morphological suggestion heuristics."""

from spellfuge.core.protocols import DictionaryEngine, Synthesizer, Tagger
from spellfuge.core.types import Pos, TagPattern
from spellfuge.utils.constants import Constants


class Morphology:
    """Coarse part-of-speech queries and inflection-based suggestions.

    A word without readings counts as unknown.
    """

    def __init__(self, tagger: Tagger, synthesizer: Synthesizer, dictionary: DictionaryEngine):
        self.tagger = tagger
        self.synthesizer = synthesizer
        self.dictionary = dictionary

    def _categories(self, word: str) -> set[Pos]:
        readings = self.tagger.tag(word)
        if not readings:
            return {Pos.UNKNOWN}
        return {reading.pos for reading in readings}

    def is_noun_or_unknown(self, word: str) -> bool:
        return bool(self._categories(word) & {Pos.NOUN, Pos.UNKNOWN})

    def is_adj_or_noun_or_unknown(self, word: str) -> bool:
        return bool(self._categories(word) & {Pos.NOUN, Pos.ADJECTIVE, Pos.UNKNOWN})

    def is_noun_or_proper_noun(self, word: str) -> bool:
        return bool(self._categories(word) & {Pos.NOUN, Pos.PROPER_NOUN})

    def is_only_noun(self, word: str) -> bool:
        """Check that word is known and every reading is a common noun."""
        return self._categories(word) == {Pos.NOUN}

    def past_tense_suggestion(self, word: str) -> str | None:
        """Suggest the past tense for regularized forms like "greifte" or "denkte".

        The word minus its final "e" must read as a third person singular
        present form; the first synthesized past form of its lemma wins.
        """
        if not word.endswith("e"):
            return None
        stem = word[:-1]
        for reading in self.tagger.tag(stem):
            if reading.has_tag_prefix(TagPattern.VERB_PRESENT_3SG) and reading.lemma:
                forms = self.synthesizer.synthesize(reading.lemma, TagPattern.VERB_PAST_3SG)
                return forms[0] if forms else None
        return None

    def participle_suggestion(self, word: str) -> str | None:
        """Suggest the participle for forms like "geschwimmt" or "geruft"."""
        if not (word.startswith("ge") and word.endswith("t")):
            return None
        infinitive = word[2:-1] + "en"
        forms = self.synthesizer.synthesize(infinitive, TagPattern.VERB_PAST_PARTICIPLE)
        if forms and self.dictionary.spell(forms[0]):
            return forms[0]
        return None

    def abbreviation_suggestion(self, word: str) -> str | None:
        """Append the period to short known abbreviations ("bspw" -> "bspw.")."""
        if len(word) > Constants.ABBREVIATION_MAX_LENGTH:
            return None
        if any(reading.pos == Pos.ABBREVIATION for reading in self.tagger.tag(word)):
            return word + "."
        return None
