"""Type definitions for spellfuge."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# A decomposition of a word into 2+ dictionary-valid parts, e.g. ("Einzahlung", "schein")
SplitResult = tuple[str, ...]


class Pos(Enum):
    """Coarse part-of-speech categories understood by the speller."""

    NOUN = "NOUN"
    PROPER_NOUN = "PROPN"
    ADJECTIVE = "ADJ"
    VERB = "VERB"
    ABBREVIATION = "ABBR"
    UNKNOWN = "UNKNOWN"


class TagPattern:
    """Tag strings and wildcarded tag patterns of the coarse tag vocabulary.

    Tags are colon-separated, starting with a Pos value, e.g. "VERB:PRES:3SG".
    Patterns are regular expressions matched against the whole tag.
    """

    VERB_PRESENT_3SG = "VERB:PRES:3SG"
    VERB_PAST_3SG = "VERB:PAST:3SG.*"
    VERB_PAST_PARTICIPLE = "VERB:PART2.*"


class Reading(BaseModel):
    """One morphological reading of a token as returned by a Tagger."""

    model_config = ConfigDict(frozen=True)

    tag: str | None = None
    lemma: str | None = None

    @property
    def pos(self) -> Pos:
        """Coarse category derived from the tag prefix."""
        if not self.tag:
            return Pos.UNKNOWN
        head = self.tag.split(":", 1)[0]
        try:
            return Pos(head)
        except ValueError:
            return Pos.UNKNOWN

    def has_tag_prefix(self, prefix: str) -> bool:
        return self.tag is not None and self.tag.startswith(prefix)


class Token(BaseModel):
    """A contiguous character sequence of the source sentence."""

    model_config = ConfigDict(frozen=True)

    text: str
    start: int
    end: int

    @property
    def is_capitalized(self) -> bool:
        return bool(self.text) and self.text[0].isupper()


class IgnoreScope(Enum):
    """Where an ignore-list entry is accepted."""

    GLOBAL = "global"  # accepted anywhere
    COMPOUND_ONLY = "compound_only"  # only as part of a hyphenated compound


class RuleMatch(BaseModel):
    """A flagged token together with its ranked suggestions."""

    word: str
    start: int
    end: int
    suggestions: list[str] = Field(default_factory=list)

    def covers(self, start: int, end: int) -> bool:
        """Check whether this match lies within [start, end]."""
        return start <= self.start and self.end <= end
