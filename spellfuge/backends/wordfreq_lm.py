"""LanguageModel backed by wordfreq frequencies."""

from spellfuge.utils.constants import Constants
from spellfuge.utils.helpers import cached_word_frequency


class WordfreqLanguageModel:
    """Pseudo-probabilities from wordfreq's German frequency list.

    A sequence is scored as a phrase, so an unseen word anywhere in the
    sequence yields 0.0.
    """

    def __init__(self, language: str = Constants.WORDFREQ_LANGUAGE):
        self.language = language

    def pseudo_probability(self, words: list[str]) -> float:
        if not words:
            return 0.0
        return cached_word_frequency(" ".join(words), self.language)
