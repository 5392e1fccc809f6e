"""Checking a whole text file line by line."""

import sys
import time

from loguru import logger
from tqdm import tqdm

from spellfuge.core.config import Config
from spellfuge.core.errors import ResourceLoadError
from spellfuge.reports.output import LineMatches, write_matches
from spellfuge.speller.rule import GermanSpeller


def read_lines(input_path: str | None) -> list[str]:
    """Read the input file, or stdin when no path is given.

    Raises:
        ResourceLoadError: If the input file cannot be read
    """
    if not input_path:
        return sys.stdin.read().splitlines()
    try:
        with open(input_path, "r", encoding="utf-8") as f:
            return f.read().splitlines()
    except OSError as e:
        raise ResourceLoadError(f"input file {input_path}", str(e)) from e


def check_lines(speller: GermanSpeller, lines: list[str], verbose: bool = False) -> list[LineMatches]:
    """Run the speller on every non-empty line; line numbers start at 1."""
    lines_iter = enumerate(lines, start=1)
    if verbose:
        lines_iter = tqdm(lines_iter, total=len(lines), desc="Checking lines", unit="line")

    results = []
    for line_number, line in lines_iter:
        if not line.strip():
            continue
        matches = speller.match(line)
        if matches:
            results.append((line_number, matches))
    return results


def run_pipeline(config: Config, speller: GermanSpeller | None = None) -> int:
    """Check the configured input and write the matches.

    Args:
        config: Runtime configuration
        speller: Speller to use; built from config when None

    Returns:
        Number of matches found
    """
    start_time = time.time()
    verbose = config.verbose

    if speller is None:
        speller = GermanSpeller(config)
    if verbose:
        logger.info("Loading speller resources...")
    speller.initialize()

    lines = read_lines(config.input)
    if verbose:
        logger.info(f"Checking {len(lines)} lines")

    results = check_lines(speller, lines, verbose)
    total = write_matches(results, config.output, config.output_format, verbose)

    if verbose:
        elapsed = time.time() - start_time
        logger.info(f"Found {total} misspellings on {len(results)} lines in {elapsed:.2f}s")

    return total
