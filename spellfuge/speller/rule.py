"""The German spelling rule: classification plus suggestions for a sentence."""

import threading

from loguru import logger

from spellfuge.backends import (
    CompoundDictionary,
    DictionarySplitter,
    Lexicon,
    SpellCheckerDictionary,
    WordfreqLanguageModel,
)
from spellfuge.core.config import Config
from spellfuge.core.protocols import CompoundSplitter, DictionaryEngine, LanguageModel, Synthesizer, Tagger
from spellfuge.core.types import RuleMatch, Token
from spellfuge.data.word_lists import IgnoreListStore, load_ignore_list, load_prohibited_list, load_word_list
from spellfuge.matching.overrides import OverrideTables, load_override_tables
from spellfuge.matching.prohibited import ProhibitedMatcher
from spellfuge.speller.tokenizer import to_words, tokenize
from spellfuge.speller.classifier import MisspellingClassifier
from spellfuge.speller.cleanup import remove_notation_matches
from spellfuge.speller.compounds import CompoundCandidateGenerator
from spellfuge.speller.heuristics import Morphology
from spellfuge.speller.suggestions import SuggestionPipeline


class GermanSpeller:
    """Compound-aware German spell checker.

    Collaborators not passed in are built from the configuration on first
    use. Initialization runs once, guarded by a lock, so one instance can be
    shared between threads; checking itself does not mutate state.

    Args:
        config: Runtime configuration (defaults apply when None)
        dictionary: Word validity and suggestions; when None, a word-list
            engine wrapped in a CompoundDictionary is built
        splitter: Compound splitter
        tagger: Part-of-speech readings
        synthesizer: Inflected form generation
        language_model: Optional model for ranking two-word suggestions
        ignore_list: Words accepted without a dictionary entry
        prohibited: Words always flagged
        overrides: Curated correction tables
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        dictionary: DictionaryEngine | None = None,
        splitter: CompoundSplitter | None = None,
        tagger: Tagger | None = None,
        synthesizer: Synthesizer | None = None,
        language_model: LanguageModel | None = None,
        ignore_list: IgnoreListStore | None = None,
        prohibited: ProhibitedMatcher | None = None,
        overrides: OverrideTables | None = None,
    ):
        self.config = config or Config()
        self._dictionary = dictionary
        self._splitter = splitter
        self._tagger = tagger
        self._synthesizer = synthesizer
        self._language_model = language_model
        self._ignore_list = ignore_list
        self._prohibited = prohibited
        self._overrides = overrides

        self._lock = threading.Lock()
        self._initialized = False
        self.classifier: MisspellingClassifier | None = None
        self.pipeline: SuggestionPipeline | None = None

    def _load_resources(self) -> None:
        config = self.config
        verbose = config.verbose

        if self._dictionary is None:
            base = SpellCheckerDictionary(load_word_list(config.dictionary, verbose) or None)
            if self._splitter is None:
                self._splitter = DictionarySplitter(base, max_input_length=config.max_split_length)
            self._dictionary = CompoundDictionary(base, self._splitter)
        elif self._splitter is None:
            self._splitter = DictionarySplitter(self._dictionary, max_input_length=config.max_split_length)
        if self._tagger is None or self._synthesizer is None:
            lexicon = Lexicon.from_file(config.lexicon, verbose) if config.lexicon else Lexicon()
            self._tagger = self._tagger or lexicon
            self._synthesizer = self._synthesizer or lexicon
        if self._language_model is None and config.use_language_model:
            self._language_model = WordfreqLanguageModel()
        if self._ignore_list is None:
            self._ignore_list = load_ignore_list(config.ignore, config.variant, verbose)
        if self._prohibited is None:
            self._prohibited = ProhibitedMatcher(load_prohibited_list(config.prohibit, verbose))
        if self._overrides is None:
            self._overrides = load_override_tables(config.overrides, verbose)

    def initialize(self) -> None:
        """Load resources and wire the components; later calls do nothing.

        Raises:
            ResourceLoadError: If a word list, lexicon or dictionary cannot be loaded
            OverridePatternError: If the override table is malformed
        """
        with self._lock:
            if self._initialized:
                return
            self._load_resources()

            debug_words = self.config.debug_words
            morphology = Morphology(self._tagger, self._synthesizer, self._dictionary)
            classifier = MisspellingClassifier(
                self._dictionary,
                self._splitter,
                morphology,
                ignore_list=self._ignore_list,
                prohibited=self._prohibited,
                max_token_length=self.config.max_token_length,
                debug_words=debug_words,
            )
            compounds = CompoundCandidateGenerator(
                self._dictionary, self._splitter, classifier, morphology, debug_words=debug_words
            )
            self.pipeline = SuggestionPipeline(
                self._dictionary,
                classifier,
                compounds,
                morphology,
                self._overrides,
                variant=self.config.variant,
                language_model=self._language_model,
                debug_words=debug_words,
            )
            self.classifier = classifier
            self._initialized = True
            logger.debug(
                f"Speller initialized ({self.config.variant}, {len(self._ignore_list)} ignored words, "
                f"{len(self._prohibited)} prohibited entries)"
            )

    def is_misspelled(self, word: str) -> bool:
        self.initialize()
        return self.classifier.is_misspelled(word)

    def get_suggestions(self, word: str) -> list[str]:
        self.initialize()
        return self.pipeline.get_suggestions(word)

    def match(self, text: str, tokens: list[Token] | None = None) -> list[RuleMatch]:
        """Check a sentence and return a match for every misspelled token.

        Args:
            text: The sentence
            tokens: Tokens of text; the built-in tokenizer is used when None

        Returns:
            Matches in token order, each with its ranked suggestions
        """
        self.initialize()
        if tokens is None:
            tokens = tokenize(text)
        words = to_words(tokens)

        matches = []
        for idx, token in enumerate(tokens):
            if not any(c.isalpha() for c in token.text):
                continue
            if not self.classifier.should_flag(words, idx):
                continue
            suggestions = self.pipeline.get_suggestions(token.text)
            matches.append(RuleMatch(word=token.text, start=token.start, end=token.end, suggestions=suggestions))

        return remove_notation_matches(text, matches, self.classifier.is_misspelled)
