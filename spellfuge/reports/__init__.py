"""Output of spelling matches."""

from .output import format_match, match_to_dict, write_matches

__all__ = ["format_match", "match_to_dict", "write_matches"]
