"""Suggestion generation, filtering and ranking for flagged words."""

from itertools import zip_longest

from spellfuge.core.protocols import DictionaryEngine, LanguageModel
from spellfuge.matching.overrides import OverrideTables
from spellfuge.speller.candidates import CandidateList
from spellfuge.speller.classifier import split_hyphens
from spellfuge.speller.ranking import (
    accept_suggestion,
    filter_for_variant,
    filter_phrases,
    fold_for_variant,
    is_denied,
    is_single_letter_split,
    sort_suggestions_by_quality,
)
from spellfuge.utils.constants import Constants
from spellfuge.utils.debug import log_if_debug_word
from spellfuge.utils.helpers import lowercase_first, starts_with_uppercase, uppercase_first

_EMAIL_PREFIX = "Email"
_EMAIL_COMPOUND_MIN_LENGTH = 10


def interleave(*lists: list[str]) -> list[str]:
    """Take one item from each list in turn until all are exhausted."""
    result = []
    for group in zip_longest(*lists):
        result.extend(item for item in group if item is not None)
    return result


class SuggestionPipeline:
    """Produce ranked, duplicate-free suggestions for a misspelled word.

    Order of precedence:
    exclusive table, then curated corrections (derived table, "Email"
    compounds, pattern table), then one morphological heuristic, then the
    general candidates from compound splits and the dictionary. Curated
    corrections replace the general candidates; heuristic results are put
    in front of them.
    """

    def __init__(
        self,
        dictionary: DictionaryEngine,
        classifier,
        compounds,
        morphology,
        tables: OverrideTables,
        variant: str = "de-DE",
        language_model: LanguageModel | None = None,
        debug_words: frozenset[str] = frozenset(),
    ):
        self.dictionary = dictionary
        self.classifier = classifier
        self.compounds = compounds
        self.morphology = morphology
        self.tables = tables
        self.variant = variant
        self.language_model = language_model
        self.debug_words = debug_words

    def _trace(self, word: str, message: str) -> None:
        log_if_debug_word(word, message, "suggestions", self.debug_words)

    def get_suggestions(self, word: str) -> list[str]:
        """Return the final suggestion list for word.

        The list never contains word itself or duplicates.
        """
        exclusive = self.tables.exclusive.lookup(word, self.dictionary.spell)
        if exclusive is not None:
            self._trace(word, f"Exclusive suggestions: {exclusive}")
            return self.finalize(word, exclusive)

        generated = self.generate(word)
        top, curated = self.top_suggestions(word, generated)
        combined = top if curated else top + generated
        result = self.finalize(word, combined)
        self._trace(word, f"Final suggestions: {result}")
        return result

    def _is_correct(self, candidate: str) -> bool:
        return all(self.dictionary.spell(w) for w in candidate.split())

    def generate(self, word: str) -> list[str]:
        """General candidates: validated compound candidates and dictionary suggestions.

        Compound candidates, direct suggestions and (for capitalized words)
        suggestions for the uncapitalized form are interleaved, then
        filtered and ranked.
        """
        if not word:
            return []
        compound = [c for c in self.compounds.get_candidates(word) if self._is_correct(c)]
        direct = self.dictionary.suggest(word)
        uncapitalized = self.dictionary.suggest(lowercase_first(word)) if starts_with_uppercase(word) else []

        candidates = CandidateList(word, interleave(compound, direct, uncapitalized)).to_list()
        candidates = filter_for_variant(candidates, self.variant)
        candidates = sort_suggestions_by_quality(word, candidates, self.language_model)
        candidates = filter_phrases(candidates, self.morphology)
        return [c for c in candidates if accept_suggestion(c)]

    def _email_compound(self, word: str) -> list[str] | None:
        """Turn "Emailadresse" into "E-Mail-Adresse", correcting the remainder if needed."""
        if len(word) < _EMAIL_COMPOUND_MIN_LENGTH or not word.startswith(_EMAIL_PREFIX):
            return None
        rest = word[len(_EMAIL_PREFIX) :]
        if not self.dictionary.spell(rest):
            suggestions = self.dictionary.suggest(uppercase_first(rest))
            if suggestions:
                rest = suggestions[0]
        return [f"E-Mail-{uppercase_first(rest)}"]

    def top_suggestions(self, word: str, generated: list[str]) -> tuple[list[str], bool]:
        """Curated corrections and heuristic suggestions for word.

        Args:
            word: The misspelled word
            generated: General candidates already found for word

        Returns:
            The suggestions and whether they came from a curated table
        """
        derived = self.tables.derived.lookup(word, self.dictionary.spell)
        if derived:
            self._trace(word, f"Derived correction: {derived}")
            return derived, True
        if derived is None:
            email = self._email_compound(word)
            if email is not None:
                self._trace(word, f"E-Mail compound: {email}")
                return email, True
            curated = self.tables.patterns.lookup(word, self.dictionary.spell)
            if curated is not None:
                self._trace(word, f"Pattern correction: {curated}")
                return curated, True

        if not starts_with_uppercase(word):
            capitalized = uppercase_first(word)
            if capitalized not in generated and self.dictionary.spell(capitalized) and not capitalized.endswith("."):
                return [capitalized], False

        for heuristic in (
            self.morphology.past_tense_suggestion,
            self.morphology.participle_suggestion,
            self.morphology.abbreviation_suggestion,
        ):
            suggestion = heuristic(word)
            if suggestion is not None:
                self._trace(word, f"{heuristic.__name__}: {suggestion}")
                return [suggestion], False

        if not generated and "-" in word:
            return self.recombine_hyphenated(word), False
        return [], False

    def recombine_hyphenated(self, word: str) -> list[str]:
        """Correct the segments of a hyphenated word separately ("Netflix-Flm").

        Ignored leading or trailing segment pairs ("Au-pair") are kept as they
        are. Words with more than three segment lists are not recombined.
        """
        segments = split_hyphens(word)
        if len(segments) < 2:
            return []

        lists: list[list[str]] = []
        start, stop = 0, len(segments)
        head = f"{segments[0]}-{segments[1]}"
        if self.classifier.is_ignored_in_compound(head):
            # "Au-pair-Agentr"
            start = 2
            lists.append([head])
        tail = f"{segments[-2]}-{segments[-1]}"
        if self.classifier.is_ignored_in_compound(tail):
            # "Seniren-Au-pair"
            stop = len(segments) - 2

        for segment in segments[start:stop]:
            if self.dictionary.spell(segment):
                lists.append([segment])
            else:
                lists.append(sort_suggestions_by_quality(segment, self.generate(segment), self.language_model))
        if stop < len(segments) - 1:
            lists.append([tail])

        if len(lists) > Constants.MAX_HYPHEN_SEGMENT_LISTS:
            return []
        combinations = lists[0]
        for options in lists[1:]:
            combinations = [f"{left}-{right}" for left in combinations for right in options]
        return combinations[: Constants.MAX_HYPHEN_COMBINATIONS]

    def finalize(self, word: str, suggestions: list[str]) -> list[str]:
        """Apply the filters every suggestion list goes through."""
        result = CandidateList(word)
        for suggestion in suggestions:
            if word.endswith(".") and not suggestion.endswith("."):
                # keep the sentence-final period
                suggestion += "."
            if suggestion.endswith("-") and not word.endswith("-"):
                continue
            if is_single_letter_split(suggestion) or is_denied(suggestion):
                continue
            result.add(fold_for_variant(suggestion, self.variant))
        return result.to_list()
