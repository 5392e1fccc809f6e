"""Word list loading and bundled data files."""

from .word_lists import (
    IgnoreListStore,
    LineExpander,
    load_ignore_list,
    load_prohibited_list,
    load_word_list,
)

__all__ = [
    "IgnoreListStore",
    "LineExpander",
    "load_ignore_list",
    "load_prohibited_list",
    "load_word_list",
]
