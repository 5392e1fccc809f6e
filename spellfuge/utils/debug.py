"""Debug tracing for selected words."""

from loguru import logger


def is_debug_word(word: str, debug_words: frozenset[str]) -> bool:
    """Check whether decisions about word should be traced.

    Matching is case-insensitive so that "Stil" also traces "stil".
    """
    if not debug_words:
        return False
    lowered = word.lower()
    return any(w.lower() == lowered for w in debug_words)


def log_debug_word(word: str, message: str, stage: str) -> None:
    """Log a decision about a traced word."""
    logger.debug(f"[DEBUG WORD: '{word}'] [{stage}] {message}")


def log_if_debug_word(word: str, message: str, stage: str, debug_words: frozenset[str]) -> None:
    """Log message only when word is being traced."""
    if is_debug_word(word, debug_words):
        log_debug_word(word, message, stage)
