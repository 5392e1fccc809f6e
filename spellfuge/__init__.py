"""spellfuge - compound-aware German spell checking."""

from spellfuge.core import Config, RuleMatch, SpellfugeError, load_config
from spellfuge.speller import GermanSpeller

__version__ = "0.3.0"

__all__ = ["Config", "GermanSpeller", "RuleMatch", "SpellfugeError", "load_config", "__version__"]
