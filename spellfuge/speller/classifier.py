"""Token-level decision whether a word is misspelled."""

import re

from spellfuge.core.errors import InputTooLongError
from spellfuge.core.protocols import CompoundSplitter, DictionaryEngine
from spellfuge.core.types import IgnoreScope
from spellfuge.data.word_lists import IgnoreListStore
from spellfuge.matching.prohibited import ProhibitedMatcher
from spellfuge.utils.constants import Constants
from spellfuge.utils.debug import log_if_debug_word
from spellfuge.utils.helpers import (
    is_all_lowercase,
    is_all_uppercase,
    lowercase_first,
    starts_with_uppercase,
    uppercase_first,
)

_CAPITALIZED_WORD = re.compile(r"[A-ZÖÄÜ][a-zöäüß-]+")

# Known-good words of prefix families the dictionary accepts too generously
_SPIELZUG_FORMS = re.compile(
    r"Spielzugs?|Spielzugangs?|Spielzuganges|Spielzugbuchs?|Spielzugbüchern?|Spielzuges|"
    r"Spielzugverluste?|Spielzugverluste[ns]"
)
_CAPITALIZED_SCHAFTE = re.compile(r"[A-ZÖÄÜ][a-zöäß-]+schafte")

_ADJ_SUFFIX = (
    "(basiert|konform|widrig|fähig|haltig|bedingt|gerecht|würdig|relevant|"
    "übergreifend|tauglich|artig|bezogen|orientiert|berechtigt|fremd|liebend|bildend|hemmend|abhängig|zentriert|"
    "förmig|mäßig|pflichtig|ähnlich|spezifisch|verträglich|technisch|typisch|frei|arm|freundlicher|gemäß|neutral|seitig)"
)
_MISSING_ADJ = re.compile(f"[a-zöäüß]{{3,25}}{_ADJ_SUFFIX}(er|es|en|em|e)?")
_ADJ_ENDING = re.compile(f"{_ADJ_SUFFIX}(er|es|en|em|e)?$")
# Stems that do not form such adjectives ("Heizungbasiert")
_ABSTRACT_NOUN = re.compile(r".{3,25}(tum|ing|ling|heit|keit|schaft|ung|ion|tät|at|um)")
_ABSTRACT_NOUN_WITH_S = re.compile(r".{3,25}(tum|ing|ling|heit|keit|schaft|ung|ion|tät|at|um)s")

_ELATIVE_STARTS = (
    "bitter", "dunkel", "erz", "extra", "früh", "gemein", "hyper", "lau", "mega",
    "minder", "stock", "super", "tod", "ultra", "ur",
)
_ELATIVE_PREFIX = re.compile(
    r"^(bitter|dunkel|erz|extra|früh|gemein|grund|hyper|lau|mega|minder|stock|super|tod|ultra|ur|voll)"
)

_LINKING_S_ENDINGS = ("tum", "ling", "ion", "tät", "keit", "schaft", "sicht", "ung", "en")
_ENUMERATION_WORDS = frozenset([",", "und", "oder", "sowie"])
_DERIVED_NOUN = re.compile(r"[A-ZÖÄÜ][a-zöäüß]{2,}(ei|öl)$")
_DIRECTION_PREFIXES = ("nord", "west", "ost", "süd")

_NUMBER_GLUED = frozenset(["sat", "stel", "tel", "stels", "tels"])
_NUMBER_GLUED_COMPOUND = ("stel-", "tel-")

_EXTENSIONS = "|".join(Constants.FILE_EXTENSIONS)
FILE_SUFFIX = re.compile(rf"\.({_EXTENSIONS})")


def split_hyphens(word: str) -> list[str]:
    """Split on hyphens, dropping trailing empty segments ("Stil-" -> ["Stil"])."""
    segments = word.split("-")
    while len(segments) > 1 and not segments[-1]:
        segments.pop()
    return segments


def needs_linking_s(word: str) -> bool:
    """Check whether word takes a linking-s as the head of a compound ("Einzahlung" + "s")."""
    return word.endswith(_LINKING_S_ENDINGS)


class MisspellingClassifier:
    """Decide whether a token should be flagged.

    Tokens are passed as a list of strings in which numbers glued to the
    following word are represented by an empty string ("100stel" becomes
    ["", "stel"]).
    """

    def __init__(
        self,
        dictionary: DictionaryEngine,
        splitter: CompoundSplitter,
        morphology,
        ignore_list: IgnoreListStore | None = None,
        prohibited: ProhibitedMatcher | None = None,
        max_token_length: int = Constants.MAX_TOKEN_LENGTH,
        debug_words: frozenset[str] = frozenset(),
    ):
        self.dictionary = dictionary
        self.splitter = splitter
        self.morphology = morphology
        self.ignore_list = ignore_list or IgnoreListStore()
        self.prohibited = prohibited or ProhibitedMatcher()
        self.max_token_length = max_token_length
        self.debug_words = debug_words

    # Word-level checks

    def is_ignored_no_case(self, word: str) -> bool:
        """Check the ignore list, also accepting capitalized forms of lowercase entries."""
        if self.ignore_list.contains(word):
            return True
        if _CAPITALIZED_WORD.fullmatch(word) and self.ignore_list.contains(word.lower()):
            return True
        return len(word) <= Constants.IGNORE_WORDS_WITH_LENGTH

    def is_ignored(self, word: str) -> bool:
        """Ignore-list check that also tolerates a sentence-final period."""
        if word.endswith(".") and not self.ignore_list.contains(word):
            return self.is_ignored_no_case(word[:-1])
        return self.is_ignored_no_case(word)

    def is_ignored_in_compound(self, word: str) -> bool:
        return self.is_ignored(word) or self.ignore_list.scope_of(word) is IgnoreScope.COMPOUND_ONLY

    def is_prohibited(self, word: str) -> bool:
        return self.prohibited.is_prohibited(word)

    def is_forced_misspelling(self, word: str) -> bool:
        """Prefix families that are flagged even though the dictionary accepts them."""
        if word.startswith("Spielzug") and not _SPIELZUG_FORMS.fullmatch(word):
            return True
        if word.startswith("Standart") and not (
            word in ("Standarte", "Standarten")
            or word.startswith(("Standartenträger", "Standartenführer"))
        ):
            return True
        return word.endswith("schafte") and _CAPITALIZED_SCHAFTE.fullmatch(word) is not None

    def is_misspelled(self, word: str) -> bool:
        """Check a single word against the overrides, prohibitions, dictionary and ignore list."""
        if self.is_forced_misspelling(word):
            log_if_debug_word(word, "Flagged by prefix family rule", "classifier", self.debug_words)
            return True
        if self.is_prohibited(word):
            log_if_debug_word(word, "Flagged as prohibited", "classifier", self.debug_words)
            return True
        if len(word) == 1 and not word.isalpha():
            return False
        if word == "--" or self.dictionary.spell(word):
            return False
        if _CAPITALIZED_WORD.fullmatch(word) and self.dictionary.spell(lowercase_first(word)):
            # sentence-initial "Schön"
            return False
        return not self.is_ignored(word)

    # Context-dependent checks

    def ignore_word(self, words: list[str], idx: int) -> bool:
        """Check whether words[idx] is accepted despite a failed dictionary lookup.

        Args:
            words: Tokens of the sentence
            idx: Position of the token to check

        Returns:
            True if any acceptance heuristic applies
        """
        word = words[idx]
        if len(word) > self.max_token_length:
            log_if_debug_word(word, "Ignored: longer than token limit", "classifier", self.debug_words)
            return True

        ignore = self.is_ignored(word)
        ignore_uncapitalized = not ignore and idx == 0 and self.is_ignored(lowercase_first(word))
        ignore_by_hyphen = False
        ignore_hyphenated_compound = False

        if not ignore and not ignore_uncapitalized:
            if "-" in word:
                if idx > 0 and words[idx - 1] == "" and word.startswith(_NUMBER_GLUED_COMPOUND):
                    # "100stel-Millimeter", "5tel-Gramm"
                    return not self.is_misspelled(word.split("-", 1)[1])
                ignore_by_hyphen = word.endswith("-") and self.ignore_by_hanging_hyphen(words, idx)
            ignore_hyphenated_compound = not ignore_by_hyphen and self.ignore_compound_with_ignored_word(word)

        if FILE_SUFFIX.fullmatch(word):
            return True
        if self.accepts_missing_adjective(word):
            log_if_debug_word(word, "Ignored: derived adjective of a noun", "classifier", self.debug_words)
            return True
        if idx > 0 and words[idx - 1] == "" and word in _NUMBER_GLUED:
            # "3sat", "100stel", "5tel"
            return True

        result = (
            ignore
            or ignore_uncapitalized
            or ignore_by_hyphen
            or ignore_hyphenated_compound
            or self.ignore_elative(word)
        )
        if result:
            log_if_debug_word(
                word,
                f"Ignored (list={ignore}, uncapitalized={ignore_uncapitalized}, "
                f"hanging hyphen={ignore_by_hyphen}, compound={ignore_hyphenated_compound})",
                "classifier",
                self.debug_words,
            )
        return result

    def should_flag(self, words: list[str], idx: int) -> bool:
        """Flag words[idx] if it is misspelled and no acceptance heuristic applies."""
        word = words[idx]
        return self.is_misspelled(word) and not self.ignore_word(words, idx)

    # Heuristics

    def ignore_elative(self, word: str) -> bool:
        """Accept intensified words like "superschnell" when the rest is valid."""
        if not word.startswith(_ELATIVE_STARTS):
            return False
        rest = _ELATIVE_PREFIX.sub("", word, count=1)
        return len(rest) >= Constants.ELATIVE_MIN_REMAINDER and not self.is_misspelled(rest)

    def accepts_missing_adjective(self, word: str) -> bool:
        """Accept adjectives derived from plain nouns, e.g. "kaffeehaltig" from "Kaffee"."""
        if not _MISSING_ADJ.fullmatch(word) or not self.is_misspelled(word):
            return False
        stem = uppercase_first(_ADJ_ENDING.sub("", word, count=1))

        # stem + "test" must spell as a compound, so a required linking-s is present
        if not self.is_misspelled(stem):
            return (
                not _ABSTRACT_NOUN.fullmatch(stem)
                and self.morphology.is_only_noun(stem)
                and not self.is_misspelled(stem + "test")
            )
        if stem.endswith("s") and _ABSTRACT_NOUN_WITH_S.fullmatch(stem):
            # "handlungsartig"
            head = stem[:-1]
            return (
                not self.is_misspelled(head)
                and self.morphology.is_only_noun(head)
                and not self.is_misspelled(stem + "test")
            )
        return False

    def _is_compound(self, word: str) -> bool:
        try:
            if self.splitter.split(word):
                return True
        except InputTooLongError:
            pass
        return word.find("-") > 0 or _DERIVED_NOUN.search(word) is not None

    def ignore_by_hanging_hyphen(self, words: list[str], idx: int) -> bool:
        """Accept "Stil-" in "Stil- und Grammatikprüfung".

        The next word after the enumeration must be a compound and the word
        without its hyphen must be valid, allowing for a linking-s
        ("Vertuschungs- und Bespitzelungsmaßnahmen").
        """
        next_word = self.word_after_enumeration(words, idx + 1)
        if next_word is None:
            return False
        if next_word.endswith("."):
            next_word = next_word[:-1]
        if not self._is_compound(next_word):
            return False

        word = words[idx][:-1] if words[idx].endswith("-") else words[idx]
        misspelled = not self.dictionary.spell(word)
        if misspelled and self.is_ignored_in_compound(word):
            misspelled = False
        elif misspelled and word.endswith("s") and needs_linking_s(word[:-1]):
            misspelled = not self.dictionary.spell(word[:-1])
        return not misspelled

    @staticmethod
    def word_after_enumeration(words: list[str], idx: int) -> str | None:
        """Skip hanging-hyphen words, commas and conjunctions starting at idx."""
        for word in words[idx:]:
            if not (word.endswith("-") or word in _ENUMERATION_WORDS or not word.strip()):
                return word
        return None

    def ignore_compound_with_ignored_word(self, word: str) -> bool:
        """Accept compounds that contain an ignore-list word.

        "Feynmandiagramm" starts with the ignored "Feynman" followed by a
        valid word; in "Feynman-Diagramm" the other hyphen segments must be
        valid.
        """
        if not starts_with_uppercase(word) and not word.startswith(_DIRECTION_PREFIXES):
            # otherwise "rumfangreichen" would be accepted
            return False

        segments = split_hyphens(word)
        if len(segments) < 2:
            return self._ignore_closed_compound(word)

        strip_first = word[len(segments[0]) + 1 :]
        strip_last = word[: len(word) - len(segments[-1]) - 1]
        to_check = []
        has_ignored = False

        if self.is_ignored_in_compound(strip_first):
            # "Senioren-Au-pair"
            has_ignored = True
            if not self.is_ignored(segments[0]):
                to_check.append(segments[0])
        elif self.is_ignored_in_compound(strip_last):
            # "Au-pair-Agentur"
            has_ignored = True
            if not self.is_ignored(segments[-1]):
                to_check.append(segments[-1])
        else:
            for segment in segments:
                if self.is_ignored_in_compound(segment):
                    has_ignored = True
                else:
                    to_check.append(segment)

        return has_ignored and all(self.dictionary.spell(w) for w in to_check)

    def _ignore_closed_compound(self, word: str) -> bool:
        end = self.ignore_list.starts_with_ignored_word(word, case_sensitive=True)
        if end < 3:
            # "westperuanische", "südukrainische"
            if word.startswith(("ost", "süd")):
                end = 3
            elif word.startswith(("west", "nord")):
                end = 4
            else:
                return False

        head = word[:end]
        rest = word[end:]
        if rest.endswith("."):
            rest = rest[:-1]
        if is_all_uppercase(head) or len(rest) <= 2:
            return False
        if not (is_all_lowercase(rest) or head.endswith("-")):
            return False
        if needs_linking_s(head) and rest.startswith("s"):
            rest = rest[1:]
        return self.dictionary.spell(rest) or self.dictionary.spell(uppercase_first(rest))
