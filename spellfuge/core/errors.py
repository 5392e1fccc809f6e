"""Exception types raised by spellfuge."""


class SpellfugeError(Exception):
    """Base class for all spellfuge errors."""


class ResourceLoadError(SpellfugeError):
    """A word list, dictionary, lexicon or override table could not be loaded.

    Raised during checker initialization; the checker is unusable afterwards.
    """

    def __init__(self, resource: str, reason: str) -> None:
        super().__init__(f"Could not load {resource}: {reason}")
        self.resource = resource
        self.reason = reason


class InputTooLongError(SpellfugeError):
    """The compound splitter refused a word because it is too long to process."""

    def __init__(self, word: str, limit: int) -> None:
        super().__init__(f"Word of length {len(word)} exceeds splitter limit of {limit}")
        self.word = word
        self.limit = limit


class OverridePatternError(SpellfugeError):
    """An override table entry is malformed (bad regex or missing suggestions)."""

    def __init__(self, section: str, index: int, reason: str) -> None:
        super().__init__(f"Invalid override entry {section}[{index}]: {reason}")
        self.section = section
        self.index = index
        self.reason = reason
