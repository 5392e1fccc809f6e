"""End-to-end checks of whole sentences through GermanSpeller."""

import pytest
from conftest import SIMPLE_WORDS, WORDS, make_tables

from spellfuge.backends import CompoundDictionary, DictionarySplitter, SpellCheckerDictionary
from spellfuge.core.config import Config
from spellfuge.core.errors import ResourceLoadError
from spellfuge.core.types import Token
from spellfuge.data.word_lists import IgnoreListStore
from spellfuge.matching.overrides import load_override_tables
from spellfuge.matching.prohibited import ProhibitedMatcher
from spellfuge.speller.rule import GermanSpeller


@pytest.mark.slow
def test_exact_override_from_packaged_table(make_speller) -> None:
    speller = make_speller(tables=load_override_tables())
    assert speller.get_suggestions("Impflicht") == ["Impfpflicht"]


class TestSentenceMatches:
    """Tests for flagging words in sentences."""

    def test_misspelled_word_in_sentence(self, speller) -> None:
        text = "Das ist eine nromale Frage."
        matches = speller.match(text)

        assert len(matches) == 1
        match = matches[0]
        assert match.word == "nromale"
        assert text[match.start : match.end] == "nromale"
        assert "normale" in match.suggestions

    def test_correct_sentence_has_no_matches(self, speller) -> None:
        assert speller.match("Das ist eine normale Frage.") == []

    def test_sentence_initial_capitalization(self, speller) -> None:
        """A capitalized adjective at the start of a sentence is accepted."""
        assert speller.match("Schön ist das") == []

    def test_missing_linking_s(self, speller) -> None:
        matches = speller.match("Das ist ein Einzahlungschein")
        flagged = {m.word: m.suggestions for m in matches}
        assert "Einzahlungsschein" in flagged["Einzahlungschein"]

    def test_compound_with_ignored_word_is_accepted(self, speller) -> None:
        assert speller.match("Das Feynmandiagramm") == []
        assert not speller.classifier.should_flag(["Feynmandiagramm"], 0)

    def test_hanging_hyphen_enumeration(self, speller) -> None:
        assert speller.match("Stil- und Grammatikprüfung") == []

    def test_hanging_hyphen_needs_a_compound(self, speller) -> None:
        matches = speller.match("Stil- und Haus")
        assert [m.word for m in matches] == ["Stil-"]

    def test_overlong_token_is_ignored(self, speller) -> None:
        token = "XYZ" * 70
        assert speller.match(token) == []
        assert speller.match(token, tokens=[Token(text=token + "123456", start=0, end=len(token) + 6)]) == []

    def test_prohibited_word_is_flagged(self, make_speller) -> None:
        speller = make_speller(prohibited={"Frage"})
        assert [m.word for m in speller.match("Das ist eine Frage")] == ["Frage"]

    def test_gender_notation_is_accepted(self, speller) -> None:
        assert speller.match("Die Jurist:innenausbildung") == []

    def test_file_name_is_accepted(self, speller) -> None:
        assert speller.match("Siehe datei_name.txt bitte") == []

    def test_classification_is_stable(self, speller) -> None:
        """Checking the same sentence twice gives the same result."""
        first = speller.match("Das ist eine nromale Frage.")
        assert speller.match("Das ist eine nromale Frage.") == first


class TestPySpellCheckerBackend:
    """Tests with the real pyspellchecker backend over a small word list."""

    @pytest.fixture
    def real_speller(self, lexicon) -> GermanSpeller:
        dictionary = SpellCheckerDictionary(sorted(WORDS))
        return GermanSpeller(
            Config(),
            dictionary=dictionary,
            splitter=DictionarySplitter(dictionary),
            tagger=lexicon,
            synthesizer=lexicon,
            ignore_list=IgnoreListStore(frozenset({"Feynman"})),
            prohibited=ProhibitedMatcher(),
            overrides=make_tables(),
        )

    def test_misspelled_word(self, real_speller) -> None:
        matches = real_speller.match("Das ist eine nromale Frage.")
        assert [m.word for m in matches] == ["nromale"]
        assert "normale" in matches[0].suggestions

    def test_missing_linking_s(self, real_speller) -> None:
        assert "Einzahlungsschein" in real_speller.get_suggestions("Einzahlungschein")


class TestCompoundAwareBackend:
    """Tests with a word list of simple words, so every compound is built by splitting."""

    @pytest.fixture
    def simple_speller(self, tmp_path) -> GermanSpeller:
        words = tmp_path / "words.txt"
        words.write_text("\n".join(sorted(SIMPLE_WORDS)), encoding="utf-8")
        speller = GermanSpeller(Config(dictionary=str(words)))
        speller.initialize()
        return speller

    def test_default_dictionary_accepts_compounds(self, simple_speller) -> None:
        assert isinstance(simple_speller.classifier.dictionary, CompoundDictionary)
        assert not simple_speller.is_misspelled("Grammatikprüfung")
        assert not simple_speller.is_misspelled("Einzahlungsschein")
        assert simple_speller.is_misspelled("Einzahlungschein")

    def test_hanging_hyphen_enumeration(self, simple_speller) -> None:
        assert simple_speller.match("Stil- und Grammatikprüfung") == []

    def test_missing_linking_s(self, simple_speller) -> None:
        matches = simple_speller.match("Das ist ein Einzahlungschein")
        assert [m.word for m in matches] == ["Einzahlungschein"]
        assert "Einzahlungsschein" in matches[0].suggestions

    def test_noun_capitalization(self, simple_speller) -> None:
        assert "Haustür" in simple_speller.get_suggestions("haustür")


class TestInitialization:
    """Tests for loading resources from the configuration."""

    def test_resources_from_files(self, tmp_path) -> None:
        words = tmp_path / "words.txt"
        words.write_text("\n".join(sorted(WORDS)), encoding="utf-8")
        ignore = tmp_path / "ignore.txt"
        ignore.write_text("Feynman\n", encoding="utf-8")
        lexicon = tmp_path / "lexicon.tsv"
        lexicon.write_text("Frage\tFrage\tNOUN\n", encoding="utf-8")

        config = Config(dictionary=str(words), ignore=str(ignore), lexicon=str(lexicon))
        speller = GermanSpeller(config)

        assert speller.match("Das Feynmandiagramm ist eine nromale Frage")[0].word == "nromale"
        assert not speller.is_misspelled("Frage")

    def test_missing_ignore_list_fails_initialization(self, tmp_path, dictionary) -> None:
        config = Config(ignore=str(tmp_path / "missing.txt"))
        speller = GermanSpeller(config, dictionary=dictionary)
        with pytest.raises(ResourceLoadError):
            speller.initialize()

    def test_initialize_runs_once(self, speller) -> None:
        classifier = speller.classifier
        speller.initialize()
        assert speller.classifier is classifier
