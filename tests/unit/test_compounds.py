"""Unit tests for compound candidate generation."""

from conftest import WORDS, FakeDictionary

from spellfuge.backends import DictionarySplitter, Lexicon
from spellfuge.speller.classifier import MisspellingClassifier
from spellfuge.speller.compounds import CompoundCandidateGenerator
from spellfuge.speller.heuristics import Morphology


class StubSplitter:
    """Returns fixed splits for every word."""

    def __init__(self, splits):
        self.splits = splits

    def split(self, word):
        return list(self.splits)


def _generator(dictionary, splitter=None, lexicon=None):
    lexicon = lexicon or Lexicon([("Schein", "Schein", "NOUN"), ("Medizin", "Medizin", "NOUN")])
    splitter = splitter or DictionarySplitter(dictionary)
    morphology = Morphology(lexicon, lexicon, dictionary)
    classifier = MisspellingClassifier(dictionary, splitter, morphology)
    return CompoundCandidateGenerator(dictionary, splitter, classifier, morphology)


class TestTwoPartSplits:
    """Tests for the extra candidates of two-part splits."""

    def test_missing_linking_s(self) -> None:
        """A missing linking-s is inserted between the two parts."""
        generator = _generator(FakeDictionary())
        candidates = generator.get_candidates("Einzahlungschein")
        assert "Einzahlungsschein" in candidates

    def test_separate_words(self) -> None:
        """The parts are offered as separate words, capitalized when the second is a noun."""
        generator = _generator(FakeDictionary())
        candidates = generator.get_candidates("Einzahlungschein")
        assert "Einzahlung schein" in candidates
        assert "Einzahlung Schein" in candidates

    def test_no_linking_s_after_s(self) -> None:
        """No extra "s" is inserted when the first part already ends in one."""
        generator = _generator(FakeDictionary(), StubSplitter([("Haus", "tür")]))
        candidates = generator.get_candidates("Haustür")
        assert "Haustür" not in candidates
        assert "Hausstür" not in candidates

    def test_s_moved_to_first_part(self) -> None:
        """A second part starting with "s" is re-split with the "s" on the first part."""
        dictionary = FakeDictionary(
            WORDS | {"Ordnung", "Ordnungshüter"},
            suggestions={"Hütter": ["Hüter"]},
        )
        generator = _generator(dictionary, StubSplitter([("Ordnung", "shütter")]))
        assert "Ordnungshüter" in generator.get_candidates("Ordnungshütter")


class TestPartCandidates:
    """Tests for correcting single parts of a split."""

    def test_misspelled_part_replaced(self) -> None:
        """A misspelled later part is looked up as a noun and lowercased again."""
        dictionary = FakeDictionary(suggestions={"Tühr": ["Tür"]})
        generator = _generator(dictionary)
        assert generator.part_candidates(("Haus", "tühr")) == ["Haustür"]

    def test_invalid_result_dropped(self) -> None:
        """Joined candidates that are still misspelled are discarded."""
        dictionary = FakeDictionary(suggestions={"Tühr": ["Tor"]})
        generator = _generator(dictionary)
        assert generator.part_candidates(("Haus", "tühr")) == []

    def test_valid_parts_untouched(self) -> None:
        """Parts that spell correctly are not replaced."""
        generator = _generator(FakeDictionary(suggestions={"Haus": ["Maus"]}))
        assert generator.part_candidates(("Haus", "Tür")) == []


class TestFilters:
    """Tests for the hyphenation artifact filters."""

    def test_mixed_case_hyphen_dropped(self) -> None:
        """Mixed-case hyphen forms like "Direkt-weg" are not kept."""
        generator = _generator(FakeDictionary())
        assert not generator._keep("Direktweg", "Direkt-weg")
        assert not generator._keep("direktweg", "direkt- Weg")

    def test_stray_linking_s_dropped(self) -> None:
        """Candidates with a "-s-" infix are not kept."""
        generator = _generator(FakeDictionary())
        assert not generator._keep("Geheimnissvoll", "Geheimnis-s-voll")

    def test_trailing_hyphen_only_for_hyphenated_input(self) -> None:
        """A trailing hyphen is kept only when the input ends in one."""
        generator = _generator(FakeDictionary())
        assert not generator._keep("Stiel", "Stil-")
        assert generator._keep("Stiel-", "Stil-")


def test_overlong_word_has_no_candidates() -> None:
    """A splitter length failure means no compound candidates."""
    dictionary = FakeDictionary()
    generator = _generator(dictionary, DictionarySplitter(dictionary, max_input_length=10))
    assert generator.get_candidates("Einzahlungschein") == []
