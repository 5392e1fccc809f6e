"""Curated override tables: ordered (pattern -> replacement) entries.

A table is tried in insertion order and the first entry whose pattern
matches the whole word wins. Tables are built once from the versioned YAML
configuration shipped in ``spellfuge/data/overrides.yaml``.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from spellfuge.core.errors import OverridePatternError, ResourceLoadError
from spellfuge.utils.helpers import uppercase_first

DEFAULT_OVERRIDES_PATH = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data", "overrides.yaml")

_REGEX_METACHARACTERS = frozenset(".^$*+?{}[]\\|()")

Replacement = Callable[[str], list[str]]


class Substitution(BaseModel):
    """Replace the first occurrence of a regex in the matched word."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    find: str
    with_: str = Field(alias="with")
    capitalize: bool = False


class EntrySpec(BaseModel):
    """One table entry as written in the YAML file."""

    model_config = ConfigDict(extra="forbid")

    match: str
    literal: bool = False
    ignore_case: bool = False
    validate_: bool = Field(default=False, alias="validate")
    suggest: list[str | Substitution] | None = None
    replace: Substitution | None = None

    @model_validator(mode="after")
    def check_replacement(self) -> "EntrySpec":
        if (self.suggest is None) == (self.replace is None):
            raise ValueError("exactly one of 'suggest' or 'replace' is required")
        return self

    def items(self) -> list[str | Substitution]:
        return [self.replace] if self.replace is not None else list(self.suggest or [])


class WordMatcher:
    """Whole-word predicate: a literal, a case-insensitive literal or a regex."""

    def __init__(self, pattern: str, literal: bool = False, ignore_case: bool = False):
        self.pattern = pattern
        self._literal: str | None = None
        self._regex: re.Pattern[str] | None = None

        if literal or not (_REGEX_METACHARACTERS & set(pattern)):
            self._literal = pattern.lower() if ignore_case else pattern
            self._ignore_case = ignore_case
        else:
            self._regex = re.compile(pattern, re.IGNORECASE if ignore_case else 0)
            self._ignore_case = ignore_case

    def matches(self, word: str) -> bool:
        if self._literal is not None:
            return (word.lower() if self._ignore_case else word) == self._literal
        assert self._regex is not None
        return self._regex.fullmatch(word) is not None

    def __repr__(self) -> str:
        return f"WordMatcher({self.pattern!r})"


def _compile_item(item: str | Substitution) -> Replacement:
    if isinstance(item, str):
        return lambda _word: [item]

    regex = re.compile(item.find)
    text = item.with_

    def substitute(word: str) -> list[str]:
        result = regex.sub(lambda _m: text, word, count=1)
        return [uppercase_first(result) if item.capitalize else result]

    return substitute


def _compile_replacement(items: list[str | Substitution]) -> Replacement:
    parts = [_compile_item(item) for item in items]

    def replacement(word: str) -> list[str]:
        result: list[str] = []
        for part in parts:
            result.extend(part(word))
        return result

    return replacement


@dataclass(frozen=True)
class OverrideEntry:
    """A compiled (pattern, replacement-function) pair."""

    matcher: WordMatcher
    replacement: Replacement
    validate: bool = False


class OverrideTable:
    """Ordered collection of override entries with first-match-wins lookup."""

    def __init__(self, entries: list[OverrideEntry] | tuple[OverrideEntry, ...] = ()):
        self._entries = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    @classmethod
    def from_specs(cls, section: str, raw_entries: list[Any]) -> "OverrideTable":
        """Compile raw YAML entries, rejecting malformed ones.

        Raises:
            OverridePatternError: If an entry is malformed or its regexes do not compile
        """
        entries = []
        for index, raw in enumerate(raw_entries or []):
            try:
                spec = EntrySpec.model_validate(raw)
                matcher = WordMatcher(spec.match, literal=spec.literal, ignore_case=spec.ignore_case)
                replacement = _compile_replacement(spec.items())
            except ValidationError as e:
                raise OverridePatternError(section, index, str(e)) from e
            except re.error as e:
                raise OverridePatternError(section, index, f"bad regular expression ({e})") from e
            entries.append(OverrideEntry(matcher, replacement, validate=spec.validate_))
        return cls(entries)

    def find(self, word: str) -> OverrideEntry | None:
        """Return the first entry matching word, or None."""
        for entry in self._entries:
            if entry.matcher.matches(word):
                return entry
        return None

    def lookup(self, word: str, spell: Callable[[str], bool] | None = None) -> list[str] | None:
        """Apply the first matching entry to word.

        Args:
            word: The word to look up
            spell: Dictionary check used for entries marked "validate"

        Returns:
            None if no entry matches; otherwise the entry's suggestions
            (possibly empty when validation rejected all of them)
        """
        entry = self.find(word)
        if entry is None:
            return None
        suggestions = entry.replacement(word)
        if entry.validate and spell is not None:
            suggestions = [s for s in suggestions if spell(s)]
        return suggestions


@dataclass(frozen=True)
class OverrideTables:
    """The three curated tables consulted by the suggestion pipeline."""

    exclusive: OverrideTable
    derived: OverrideTable
    patterns: OverrideTable

    @classmethod
    def empty(cls) -> "OverrideTables":
        return cls(OverrideTable(), OverrideTable(), OverrideTable())


def load_override_tables(filepath: str | None = None, verbose: bool = False) -> OverrideTables:
    """Load and compile the override tables from YAML.

    Args:
        filepath: YAML file; the bundled table when None
        verbose: Whether to log table sizes

    Raises:
        ResourceLoadError: If the file cannot be read or parsed
        OverridePatternError: If an entry is malformed
    """
    path = filepath or DEFAULT_OVERRIDES_PATH
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ResourceLoadError(f"override table {path}", str(e)) from e
    except yaml.YAMLError as e:
        raise ResourceLoadError(f"override table {path}", f"invalid YAML ({e})") from e

    if not isinstance(data, dict):
        raise ResourceLoadError(f"override table {path}", "top level must be a mapping")

    tables = OverrideTables(
        exclusive=OverrideTable.from_specs("exclusive", data.get("exclusive", [])),
        derived=OverrideTable.from_specs("derived", data.get("derived", [])),
        patterns=OverrideTable.from_specs("patterns", data.get("patterns", [])),
    )

    if verbose:
        logger.info(
            f"Loaded override tables: {len(tables.exclusive)} exclusive, "
            f"{len(tables.derived)} derived, {len(tables.patterns)} pattern entries"
        )

    return tables
