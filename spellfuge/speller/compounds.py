"""Correction candidates built from compound splits."""

import re

from loguru import logger

from spellfuge.core.errors import InputTooLongError
from spellfuge.core.protocols import CompoundSplitter, DictionaryEngine
from spellfuge.core.types import SplitResult
from spellfuge.utils.debug import log_if_debug_word
from spellfuge.utils.helpers import lowercase_first, starts_with_uppercase, uppercase_first

# "Direkt-weg", "direkt- Weg"
_MIXED_CASE_HYPHEN = re.compile(r"[A-ZÖÄÜ][a-zöäüß]+-[\-\s]?[a-zöäüß]+")
_LOOSE_HYPHEN = re.compile(r"[a-zöäüß]+-[\-\s][A-ZÖÄÜa-zöäüß]+")


class CompoundCandidateGenerator:
    """Recover wrong compound boundaries and missing or extra linking-s.

    Every split of the word is corrected part by part with the dictionary;
    two-part splits additionally yield the parts as separate words and the
    parts joined with a linking-s ("Einzahlungschein" -> "Einzahlungsschein").
    """

    def __init__(
        self,
        dictionary: DictionaryEngine,
        splitter: CompoundSplitter,
        classifier,
        morphology,
        debug_words: frozenset[str] = frozenset(),
    ):
        self.dictionary = dictionary
        self.splitter = splitter
        self.classifier = classifier
        self.morphology = morphology
        self.debug_words = debug_words

    def _splits(self, word: str) -> list[SplitResult]:
        try:
            return self.splitter.split(word)
        except InputTooLongError as e:
            logger.debug(f"No compound candidates for over-long word ({e})")
            return []

    def part_candidates(self, parts: SplitResult) -> list[str]:
        """Replace one misspelled part at a time with dictionary suggestions.

        Parts after the first are looked up as nouns first. A joined result is
        kept only when it is not misspelled itself.
        """
        candidates = []
        for i, part in enumerate(parts):
            if self.dictionary.spell(part):
                continue
            as_noun = i > 0 and not starts_with_uppercase(part)
            suggestions = self.dictionary.suggest(uppercase_first(part) if as_noun else part)
            if not suggestions and as_noun:
                suggestions = self.dictionary.suggest(lowercase_first(part))

            for suggestion in suggestions:
                if i > 0 and not starts_with_uppercase(part):
                    suggestion = lowercase_first(suggestion)
                joined = list(parts)
                joined[i] = suggestion
                candidate = "".join(joined)
                if not self.classifier.is_misspelled(candidate):
                    candidates.append(candidate)
                if i < len(parts) - 1 and part.endswith("s") and suggestion.endswith("-"):
                    # "Arbeidszimmer" -> "Arbeitszimmer"
                    joined[i] = suggestion[:-1]
                    candidate = "".join(joined)
                    if not self.classifier.is_misspelled(candidate):
                        candidates.append(candidate)
        return candidates

    def _keep(self, word: str, candidate: str) -> bool:
        if _MIXED_CASE_HYPHEN.fullmatch(candidate) or _LOOSE_HYPHEN.fullmatch(candidate):
            return False
        if "-s-" in candidate:
            # "Geheimnis-s-voll"
            return False
        return word.endswith("-") or not candidate.endswith("-")

    def get_candidates(self, word: str) -> list[str]:
        """Return unvalidated candidates for word in generation order.

        Args:
            word: A word not found in the dictionary

        Returns:
            Candidates, possibly with duplicates and multi-word entries
        """
        candidates: list[str] = []
        for parts in self._splits(word):
            candidates.extend(c for c in self.part_candidates(parts) if self._keep(word, c))
            if len(parts) != 2:
                continue

            first, second = parts
            # "inneremedizin" -> "innere Medizin", "gleichgroß" -> "gleich groß"
            candidates.append(f"{first} {second}")
            if self.morphology.is_noun_or_proper_noun(uppercase_first(second)):
                candidates.append(f"{first} {uppercase_first(second)}")
            if not first.endswith("s"):
                candidates.append(f"{first}s{second}")
            if second.startswith("s"):
                # "Ordnungshütter" is split as "Ordnung" + "shütter"
                candidates.extend(self.part_candidates((first + "s", second[1:])))

        log_if_debug_word(word, f"Compound candidates: {candidates}", "compounds", self.debug_words)
        return candidates
