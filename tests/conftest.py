"""Shared fixtures: in-memory collaborators for the speller."""

import pytest

from spellfuge.backends import CompoundDictionary, DictionarySplitter, Lexicon
from spellfuge.core import Config
from spellfuge.data import IgnoreListStore
from spellfuge.matching import OverrideTable, OverrideTables, ProhibitedMatcher
from spellfuge.speller import GermanSpeller

WORDS = {
    "Das", "das", "ist", "eine", "Frage", "und", "oder", "sehr", "schön", "normale",
    "Stil", "Text", "Grammatik", "Prüfung", "Grammatikprüfung",
    "Einzahlung", "Schein", "Einzahlungsschein",
    "Diagramm", "Impfpflicht", "Pflicht",
    "Vertuschung", "Bespitzelung", "Maßnahmen",
    "Kaffee", "Handlung", "Heizung", "schnell", "Senioren", "peruanische",
    "Millimeter", "Haus", "Tür", "Haustür", "Netflix", "Film",
    "greift", "griff", "geschwommen", "Straße", "Maße",
    "Die", "Jurist", "Juristinnenausbildung", "Siehe", "bitte",
    "Adresse", "Agentur", "Qualitätsstandard", "Mayonnaise",
}

# No compounds: these are accepted only through CompoundDictionary
SIMPLE_WORDS = {
    "Das", "das", "ist", "ein", "eine", "und", "Stil", "Grammatik", "Prüfung",
    "Einzahlung", "Schein", "Haus", "Tür", "Kaffee", "Handlung", "Heizung",
    "Aussicht", "Test", "schnell",
}

LEXICON_ENTRIES = [
    ("Frage", "Frage", "NOUN"),
    ("Schein", "Schein", "NOUN"),
    ("Einzahlung", "Einzahlung", "NOUN"),
    ("Kaffee", "Kaffee", "NOUN"),
    ("Handlung", "Handlung", "NOUN"),
    ("Heizung", "Heizung", "NOUN"),
    ("Haus", "Haus", "NOUN"),
    ("Tür", "Tür", "NOUN"),
    ("schön", "schön", "ADJ"),
    ("schnell", "schnell", "ADJ"),
    ("greift", "greifen", "VERB:PRES:3SG"),
    ("griff", "greifen", "VERB:PAST:3SG"),
    ("schwimmen", "schwimmen", "VERB:INF"),
    ("geschwommen", "schwimmen", "VERB:PART2"),
    ("bspw", "beispielsweise", "ABBR"),
    ("Berlin", "Berlin", "PROPN"),
    ("Aussicht", "Aussicht", "NOUN"),
]


class FakeDictionary:
    """Case-sensitive word set with canned suggestions."""

    def __init__(self, words=None, suggestions=None):
        self.words = set(WORDS if words is None else words)
        self.suggestions = dict(suggestions or {})

    def spell(self, word: str) -> bool:
        return word in self.words

    def suggest(self, word: str) -> list[str]:
        return list(self.suggestions.get(word, []))


class FakeLanguageModel:
    """Phrase probabilities from a dict; unknown phrases score 0.0."""

    def __init__(self, probabilities=None):
        self.probabilities = dict(probabilities or {})

    def pseudo_probability(self, words: list[str]) -> float:
        return self.probabilities.get(" ".join(words), 0.0)


def make_tables(exclusive=(), derived=(), patterns=()) -> OverrideTables:
    """Build override tables from raw entry dicts."""
    return OverrideTables(
        exclusive=OverrideTable.from_specs("exclusive", list(exclusive)),
        derived=OverrideTable.from_specs("derived", list(derived)),
        patterns=OverrideTable.from_specs("patterns", list(patterns)),
    )


@pytest.fixture
def dictionary():
    return FakeDictionary(
        suggestions={
            "nromale": ["normale"],
            "Flm": ["Film"],
            "Adrese": ["Adresse"],
            "Agentr": ["Agentur"],
        }
    )


@pytest.fixture
def lexicon():
    return Lexicon(LEXICON_ENTRIES)


@pytest.fixture
def make_speller(dictionary, lexicon):
    """Factory for a speller wired to the in-memory collaborators."""

    def factory(
        config=None,
        ignore=(),
        compound_only=(),
        prohibited=(),
        tables=None,
        language_model=None,
        words=None,
        suggestions=None,
        compounds=False,
    ):
        dict_backend = dictionary
        if words is not None or suggestions is not None:
            dict_backend = FakeDictionary(words, suggestions)
        splitter = DictionarySplitter(dict_backend)
        if compounds:
            dict_backend = CompoundDictionary(dict_backend, splitter)
        return GermanSpeller(
            config or Config(),
            dictionary=dict_backend,
            splitter=splitter,
            tagger=lexicon,
            synthesizer=lexicon,
            language_model=language_model,
            ignore_list=IgnoreListStore(frozenset(ignore), frozenset(compound_only)),
            prohibited=ProhibitedMatcher(set(prohibited)),
            overrides=tables or make_tables(),
        )

    return factory


@pytest.fixture
def speller(make_speller):
    speller = make_speller(ignore={"Feynman", "Au-pair"})
    speller.initialize()
    return speller


@pytest.fixture
def compound_speller(make_speller):
    """Speller whose dictionary knows only simple words and accepts their compounds."""
    speller = make_speller(words=SIMPLE_WORDS, compounds=True)
    speller.initialize()
    return speller
