"""Unit tests for tokenization and removal of matches inside notations."""

from spellfuge.core.types import RuleMatch
from spellfuge.speller.cleanup import remove_notation_matches
from spellfuge.speller.tokenizer import to_words, tokenize


class TestTokenize:
    """Tests for the word tokenizer."""

    def test_words_numbers_and_commas(self) -> None:
        tokens = tokenize("Stil- und Grammatikprüfung, 100 Punkte.")
        assert [t.text for t in tokens] == ["Stil-", "und", "Grammatikprüfung", ",", "100", "Punkte"]

    def test_offsets(self) -> None:
        tokens = tokenize("Das ist")
        assert [(t.start, t.end) for t in tokens] == [(0, 3), (4, 7)]
        assert tokens[0].is_capitalized
        assert not tokens[1].is_capitalized

    def test_inner_hyphen_stays_in_word(self) -> None:
        assert [t.text for t in tokenize("Au-pair-Agentur")] == ["Au-pair-Agentur"]

    def test_file_suffix_is_a_token(self) -> None:
        assert [t.text for t in tokenize("Siehe bericht.pdf")] == ["Siehe", "bericht", ".pdf"]

    def test_sentence_period_is_dropped(self) -> None:
        assert [t.text for t in tokenize("Ende. Anfang")] == ["Ende", "Anfang"]


def test_glued_number_becomes_empty_word() -> None:
    assert to_words(tokenize("ein 100stel")) == ["ein", "", "stel"]
    assert to_words(tokenize("100 Punkte")) == ["100", "Punkte"]


class TestRemoveNotationMatches:
    """Tests for gender notation, file name and mention cleanup."""

    @staticmethod
    def _match(text: str, word: str) -> RuleMatch:
        start = text.index(word)
        return RuleMatch(word=word, start=start, end=start + len(word))

    def test_gender_notation_with_valid_word_is_removed(self) -> None:
        text = "Die Jurist:innenausbildung"
        matches = [self._match(text, "innenausbildung")]
        assert remove_notation_matches(text, matches, lambda w: w != "Juristinnenausbildung") == []

    def test_gender_notation_with_misspelled_word_is_kept(self) -> None:
        text = "Die Jurist:innenausbldung"
        matches = [self._match(text, "innenausbldung")]
        assert remove_notation_matches(text, matches, lambda w: True) == matches

    def test_file_name_matches_are_removed(self) -> None:
        text = "Siehe datei_name.txt bitte"
        matches = [self._match(text, "datei"), self._match(text, "name"), self._match(text, "bitte")]
        assert [m.word for m in remove_notation_matches(text, matches, lambda w: True)] == ["bitte"]

    def test_mention_matches_are_removed(self) -> None:
        text = "Hallo @max_muster"
        matches = [self._match(text, "max"), self._match(text, "muster")]
        assert remove_notation_matches(text, matches, lambda w: True) == []
