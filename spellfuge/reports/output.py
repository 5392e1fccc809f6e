"""YAML and plain-text output of spelling matches."""

import os
import sys
from typing import TextIO

import yaml
from loguru import logger

from spellfuge.core.types import RuleMatch

LineMatches = tuple[int, list[RuleMatch]]


def match_to_dict(line_number: int, match: RuleMatch) -> dict:
    """Convert a match to the dict written to YAML."""
    return {
        "line": line_number,
        "word": match.word,
        "start": match.start,
        "end": match.end,
        "suggestions": list(match.suggestions),
    }


def format_match(line_number: int, match: RuleMatch) -> str:
    """Format a match as "line:start-end word -> suggestions"."""
    suggestions = ", ".join(match.suggestions) if match.suggestions else "(no suggestions)"
    return f"{line_number}:{match.start}-{match.end} {match.word} -> {suggestions}"


def _write_yaml(results: list[LineMatches], stream: TextIO) -> None:
    yaml_output = {"matches": [match_to_dict(n, m) for n, matches in results for m in matches]}
    yaml.safe_dump(
        yaml_output,
        stream,
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
        width=float("inf"),
    )


def _write_text(results: list[LineMatches], stream: TextIO) -> None:
    for line_number, matches in results:
        for match in matches:
            stream.write(format_match(line_number, match) + "\n")


def write_matches(
    results: list[LineMatches], output: str | None, output_format: str = "yaml", verbose: bool = False
) -> int:
    """Write matches to a file, or to stdout when output is None.

    Args:
        results: (line number, matches) pairs
        output: Output file path
        output_format: "yaml" or "text"
        verbose: Whether to log where the matches went

    Returns:
        Number of matches written
    """
    writer = _write_yaml if output_format == "yaml" else _write_text
    total = sum(len(matches) for _, matches in results)

    if output:
        output = os.path.expanduser(output)
        parent = os.path.dirname(output)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            writer(results, f)
        if verbose:
            logger.info(f"Wrote {total} matches to {output}")
    else:
        writer(results, sys.stdout)

    return total
