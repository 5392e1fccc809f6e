"""Ordered, duplicate-free suggestion collection."""

from collections.abc import Iterable, Iterator


class CandidateList:
    """Suggestions for one misspelled word, in insertion order.

    Empty strings, duplicates and the misspelled word itself are never
    stored.
    """

    def __init__(self, word: str, items: Iterable[str] = ()):
        self.word = word
        self._items: list[str] = []
        self._seen: set[str] = set()
        self.extend(items)

    def add(self, suggestion: str) -> bool:
        """Append suggestion unless it is rejected; return whether it was added."""
        if not suggestion or suggestion == self.word or suggestion in self._seen:
            return False
        self._items.append(suggestion)
        self._seen.add(suggestion)
        return True

    def extend(self, suggestions: Iterable[str]) -> None:
        for suggestion in suggestions:
            self.add(suggestion)

    def __contains__(self, suggestion: object) -> bool:
        return suggestion in self._seen

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> list[str]:
        return list(self._items)
