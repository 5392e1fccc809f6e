"""Constants used throughout the spellfuge codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Token limits
    MAX_TOKEN_LENGTH = 200
    """Tokens longer than this are treated as non-words (URLs, ids) and never flagged."""

    IGNORE_WORDS_WITH_LENGTH = 1
    """Tokens of this length or shorter are never flagged."""

    # Compound splitting
    MIN_SPLIT_PART_LENGTH = 3
    """Shortest part the compound splitter will produce."""

    MAX_SPLIT_INPUT_LENGTH = 100
    """Longest word the compound splitter accepts before reporting it as too long."""

    # Suggestion limits
    MAX_HYPHEN_SEGMENT_LISTS = 3
    """Hyphenated words with more segment lists than this are not recombined."""

    MAX_HYPHEN_COMBINATIONS = 5
    """Number of recombined hyphenated suggestions kept."""

    ABBREVIATION_MAX_LENGTH = 4
    """Longest word the abbreviation heuristic looks at."""

    ELATIVE_MIN_REMAINDER = 3
    """Shortest remainder accepted after stripping an intensifying prefix."""

    # Word list markers
    COMPOUND_ONLY_MARKER = "-*"
    """Trailing marker restricting an ignore-list entry to hyphenated compounds."""

    PROHIBITED_WILDCARD = ".*"
    """Leading or trailing marker turning a prohibited entry into a suffix or prefix rule."""

    COMMENT_PREFIX = "#"
    """Lines starting with this are skipped in word lists."""

    # Locale variants
    SWISS_VARIANT = "de-CH"
    """Variant that never uses 'ß'."""

    VARIANTS = ("de-DE", "de-AT", "de-CH")
    """Supported locale variants."""

    # Language model
    WORDFREQ_LANGUAGE = "de"
    """Language code passed to wordfreq."""

    # File names
    FILE_EXTENSIONS = (
        "pdf", "docx?", "xlsx?", "pptx?", "odt", "ods", "txt", "csv", "rtf",
        "jpe?g", "png", "gif", "svg", "bmp", "tiff?", "webp",
        "mp3", "mp4", "wav", "ogg", "flac", "avi", "mov", "mkv",
        "zip", "rar", "gz", "tar", "7z",
        "html?", "xml", "json", "ya?ml", "exe", "dmg", "apk", "iso",
        "py", "js", "ts", "css", "woff2?",
    )
    """Regex alternatives of common file suffixes; ".pdf"-like tokens are never flagged."""
