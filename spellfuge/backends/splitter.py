"""CompoundSplitter over a DictionaryEngine."""

from spellfuge.core.errors import InputTooLongError
from spellfuge.core.protocols import DictionaryEngine
from spellfuge.core.types import SplitResult
from spellfuge.utils.constants import Constants
from spellfuge.utils.helpers import lowercase_first, uppercase_first


class DictionarySplitter:
    """Enumerate decompositions of a word into dictionary-valid parts.

    Parts keep the spelling they have inside the word ("Einzahlung",
    "schein"), so joining a split reproduces the input. A part is valid when
    it spells in its written, capitalized or uncapitalized form; a non-final
    part may additionally carry a linking-s ("Einzahlungs").

    Splits with fewer parts come first; among equal part counts, longer
    leading parts come first.
    """

    def __init__(
        self,
        dictionary: DictionaryEngine,
        min_part_length: int = Constants.MIN_SPLIT_PART_LENGTH,
        max_input_length: int = Constants.MAX_SPLIT_INPUT_LENGTH,
        max_splits: int = 20,
    ):
        self.dictionary = dictionary
        self.min_part_length = min_part_length
        self.max_input_length = max_input_length
        self.max_splits = max_splits

    def _is_part(self, part: str, final: bool) -> bool:
        spell = self.dictionary.spell
        if spell(part) or spell(uppercase_first(part)) or spell(lowercase_first(part)):
            return True
        if not final and part.endswith("s") and len(part) > self.min_part_length:
            stem = part[:-1]
            return spell(stem) or spell(uppercase_first(stem))
        return False

    def split(self, word: str) -> list[SplitResult]:
        """Return all decompositions of word into 2+ valid parts.

        Raises:
            InputTooLongError: If word is longer than max_input_length
        """
        if len(word) > self.max_input_length:
            raise InputTooLongError(word, self.max_input_length)
        if len(word) < 2 * self.min_part_length:
            return []

        memo: dict[int, list[tuple[str, ...]]] = {}

        def tails(start: int) -> list[tuple[str, ...]]:
            if start in memo:
                return memo[start]
            result = []
            for end in range(len(word), start + self.min_part_length - 1, -1):
                part = word[start:end]
                final = end == len(word)
                if not final and len(word) - end < self.min_part_length:
                    continue
                if not self._is_part(part, final):
                    continue
                if final:
                    result.append((part,))
                else:
                    result.extend((part,) + rest for rest in tails(end))
            memo[start] = result
            return result

        splits = [s for s in tails(0) if len(s) >= 2]
        splits.sort(key=len)
        return splits[: self.max_splits]
