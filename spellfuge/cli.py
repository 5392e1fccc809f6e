"""Command-line interface."""

import argparse


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Check German text for misspellings, with compound-aware suggestions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check a file, print YAML matches to stdout
  %(prog)s -i brief.txt

  # Using JSON config
  %(prog)s --config config.json

  # Mix both (CLI overrides JSON)
  %(prog)s --config config.json -i brief.txt --format text -v

  # Swiss spelling with a custom ignore list
  %(prog)s --variant de-CH --ignore spelling.txt -i brief.txt

  # Trace every decision about selected words
  %(prog)s -i brief.txt --debug --debug-words "Stil,Feynmandiagramm"

Example config.json:
{
  "variant": "de-DE",
  "dictionary": "~/lists/de_words.txt",
  "ignore": "~/lists/spelling.txt",
  "prohibit": "~/lists/prohibit.txt",
  "lexicon": "~/lists/lexicon.tsv",
  "use_language_model": true,
  "output_format": "yaml",
  "verbose": true
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Input / output
    parser.add_argument("-i", "--input", type=str, help="Text file to check (default: stdin)")
    parser.add_argument("-o", "--output", type=str, help="Output file (default: stdout)")
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["yaml", "text"],
        help="Output format (default: yaml)",
    )

    # Language and resources
    parser.add_argument("--variant", choices=["de-DE", "de-AT", "de-CH"], help="Language variant")
    parser.add_argument("--dictionary", type=str, help="Word list for the dictionary backend")
    parser.add_argument("--ignore", type=str, help="Words accepted without a dictionary entry")
    parser.add_argument("--prohibit", type=str, help="Words that are always flagged")
    parser.add_argument("--overrides", type=str, help="YAML table of curated corrections")
    parser.add_argument("--lexicon", type=str, help="Tab-separated full-form lexicon (form, lemma, tag)")
    parser.add_argument(
        "--language-model",
        dest="use_language_model",
        action="store_true",
        help="Rank two-word suggestions with wordfreq frequencies",
    )

    # Limits
    parser.add_argument("--max-token-length", type=int, help="Longer tokens are never flagged")
    parser.add_argument("--max-split-length", type=int, help="Longer words are not split into compounds")

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug logging (implies --verbose)")
    parser.add_argument(
        "--debug-words",
        type=str,
        help="Comma-separated words whose checking is traced (requires --debug)",
    )

    return parser
