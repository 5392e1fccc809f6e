"""Prohibited word matching."""

from spellfuge.utils.constants import Constants


class ProhibitedMatcher:
    """Words that must be flagged even when the dictionary accepts them.

    Entries are exact words, prefix rules ("Neger.*") or suffix rules
    (".*neger"). The three kinds are checked independently; matching any
    one of them prohibits the word.
    """

    def __init__(self, entries: set[str] | frozenset[str] | None = None):
        exact = set()
        prefixes = set()
        suffixes = set()

        wildcard = Constants.PROHIBITED_WILDCARD
        for entry in entries or ():
            if entry.startswith(wildcard):
                suffixes.add(entry[len(wildcard):])
            elif entry.endswith(wildcard):
                prefixes.add(entry[: -len(wildcard)])
            else:
                exact.add(entry)

        self.exact = frozenset(exact)
        self.prefixes = tuple(sorted(p for p in prefixes if p))
        self.suffixes = tuple(sorted(s for s in suffixes if s))

    def __len__(self) -> int:
        return len(self.exact) + len(self.prefixes) + len(self.suffixes)

    def is_prohibited(self, word: str) -> bool:
        """Check if word matches an exact, prefix or suffix rule."""
        if word in self.exact:
            return True
        if self.prefixes and word.startswith(self.prefixes):
            return True
        if self.suffixes and word.endswith(self.suffixes):
            return True
        return False
