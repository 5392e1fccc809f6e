"""Unit tests for writing matches."""

import yaml

from spellfuge.core.types import RuleMatch
from spellfuge.reports.output import format_match, write_matches


def _results():
    return [
        (1, [RuleMatch(word="nromale", start=13, end=20, suggestions=["normale"])]),
        (3, [RuleMatch(word="Xyzzy", start=0, end=5)]),
    ]


class TestWriteMatches:
    """Tests for YAML and text output."""

    def test_yaml_file(self, tmp_path) -> None:
        output = tmp_path / "out" / "matches.yaml"
        total = write_matches(_results(), str(output), "yaml")

        assert total == 2
        data = yaml.safe_load(output.read_text(encoding="utf-8"))
        assert data["matches"][0] == {
            "line": 1,
            "word": "nromale",
            "start": 13,
            "end": 20,
            "suggestions": ["normale"],
        }
        assert data["matches"][1]["suggestions"] == []

    def test_yaml_keeps_umlauts(self, tmp_path) -> None:
        output = tmp_path / "matches.yaml"
        write_matches([(1, [RuleMatch(word="Tür", start=0, end=3)])], str(output))
        assert "Tür" in output.read_text(encoding="utf-8")

    def test_text_file(self, tmp_path) -> None:
        output = tmp_path / "matches.txt"
        write_matches(_results(), str(output), "text")
        assert output.read_text(encoding="utf-8").splitlines() == [
            "1:13-20 nromale -> normale",
            "3:0-5 Xyzzy -> (no suggestions)",
        ]

    def test_stdout(self, capsys) -> None:
        assert write_matches(_results(), None, "text") == 2
        assert "nromale -> normale" in capsys.readouterr().out


def test_format_match_joins_suggestions() -> None:
    match = RuleMatch(word="Flm", start=4, end=7, suggestions=["Film", "Filme"])
    assert format_match(2, match) == "2:4-7 Flm -> Film, Filme"
