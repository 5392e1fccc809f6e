"""Core types, configuration and collaborator interfaces for spellfuge."""

from .config import Config, load_config
from .errors import InputTooLongError, OverridePatternError, ResourceLoadError, SpellfugeError
from .protocols import CompoundSplitter, DictionaryEngine, LanguageModel, Synthesizer, Tagger
from .types import IgnoreScope, Pos, Reading, RuleMatch, SplitResult, TagPattern, Token

__all__ = [
    "Config",
    "load_config",
    "InputTooLongError",
    "OverridePatternError",
    "ResourceLoadError",
    "SpellfugeError",
    "CompoundSplitter",
    "DictionaryEngine",
    "LanguageModel",
    "Synthesizer",
    "Tagger",
    "IgnoreScope",
    "Pos",
    "Reading",
    "RuleMatch",
    "SplitResult",
    "TagPattern",
    "Token",
]
