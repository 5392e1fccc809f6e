"""Tagger and Synthesizer over a tab-separated full-form lexicon."""

import functools
import re
from collections import defaultdict

from loguru import logger

from spellfuge.core.errors import ResourceLoadError
from spellfuge.core.types import Reading
from spellfuge.utils.constants import Constants
from spellfuge.utils.helpers import expand_file_path


@functools.lru_cache(maxsize=None)
def compile_tag_pattern(tag_pattern: str) -> re.Pattern[str]:
    """Compile a tag pattern once per process."""
    return re.compile(tag_pattern)


class Lexicon:
    """Full-form lexicon with lines of the form "form<TAB>lemma<TAB>tag".

    Tags use the coarse vocabulary NOUN, PROPN, ADJ, VERB and ABBR, with
    optional colon-separated features such as "VERB:PAST:3SG".
    """

    def __init__(self, entries: list[tuple[str, str, str]] | None = None):
        self._by_form: dict[str, list[Reading]] = defaultdict(list)
        self._by_lemma: dict[str, list[tuple[str, str]]] = defaultdict(list)
        for form, lemma, tag in entries or []:
            self.add(form, lemma, tag)

    def __len__(self) -> int:
        return sum(len(readings) for readings in self._by_form.values())

    def add(self, form: str, lemma: str, tag: str) -> None:
        self._by_form[form].append(Reading(tag=tag, lemma=lemma))
        self._by_lemma[lemma].append((form, tag))

    def tag(self, word: str) -> list[Reading]:
        return list(self._by_form.get(word, ()))

    def synthesize(self, lemma: str, tag_pattern: str) -> list[str]:
        pattern = compile_tag_pattern(tag_pattern)
        return [form for form, tag in self._by_lemma.get(lemma, ()) if pattern.fullmatch(tag)]

    @classmethod
    def from_file(cls, filepath: str, verbose: bool = False) -> "Lexicon":
        """Read a lexicon file, skipping blank lines, comments and malformed rows.

        Raises:
            ResourceLoadError: If the file cannot be read
        """
        path = expand_file_path(filepath)
        lexicon = cls()
        skipped = 0
        try:
            with open(path, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.rstrip("\n")
                    if not line.strip() or line.startswith(Constants.COMMENT_PREFIX):
                        continue
                    fields = line.split("\t")
                    if len(fields) != 3 or not all(fields):
                        skipped += 1
                        continue
                    lexicon.add(*fields)
        except OSError as e:
            raise ResourceLoadError(f"lexicon {path}", str(e)) from e

        if verbose:
            logger.info(f"Loaded {len(lexicon)} lexicon readings")
            if skipped:
                logger.info(f"Skipped {skipped} malformed lexicon lines")
        return lexicon
