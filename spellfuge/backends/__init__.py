"""Concrete linguistic backends behind the collaborator protocols."""

from .compound import CompoundDictionary
from .lexicon import Lexicon
from .spellchecker import SpellCheckerDictionary
from .splitter import DictionarySplitter
from .wordfreq_lm import WordfreqLanguageModel

__all__ = [
    "CompoundDictionary",
    "Lexicon",
    "SpellCheckerDictionary",
    "DictionarySplitter",
    "WordfreqLanguageModel",
]
