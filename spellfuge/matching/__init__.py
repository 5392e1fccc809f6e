"""Override and prohibited-word matching for spellfuge."""

from .overrides import (
    OverrideEntry,
    OverrideTable,
    OverrideTables,
    WordMatcher,
    load_override_tables,
)
from .prohibited import ProhibitedMatcher

__all__ = [
    "OverrideEntry",
    "OverrideTable",
    "OverrideTables",
    "WordMatcher",
    "load_override_tables",
    "ProhibitedMatcher",
]
