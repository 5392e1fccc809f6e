"""Utility functions for spellfuge."""

from spellfuge.utils.constants import Constants
from spellfuge.utils.debug import is_debug_word, log_debug_word, log_if_debug_word
from spellfuge.utils.helpers import (
    cached_word_frequency,
    expand_file_path,
    is_all_lowercase,
    is_all_uppercase,
    lowercase_first,
    starts_with_uppercase,
    uppercase_first,
)
from spellfuge.utils.logging import setup_logger

__all__ = [
    "Constants",
    "is_debug_word",
    "log_debug_word",
    "log_if_debug_word",
    "cached_word_frequency",
    "expand_file_path",
    "is_all_lowercase",
    "is_all_uppercase",
    "lowercase_first",
    "starts_with_uppercase",
    "uppercase_first",
    "setup_logger",
]
