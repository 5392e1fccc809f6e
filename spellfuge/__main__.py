"""Main entry point for spellfuge."""

import sys

from loguru import logger

from spellfuge.cli import create_parser
from spellfuge.core import SpellfugeError, load_config
from spellfuge.processing import run_pipeline
from spellfuge.utils.logging import setup_logger


def _print_startup_banner(verbose: bool) -> None:
    """Print startup banner if verbose."""
    if verbose:
        logger.info("=" * 60)
        logger.info("spellfuge - German Compound-Aware Spell Checker")
        logger.info("=" * 60)
        logger.info("")


def _print_config_summary(config) -> None:
    """Print configuration summary if verbose."""
    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Variant: {config.variant}")
        logger.info(f"  Input: {config.input or 'stdin'}")
        if config.dictionary:
            logger.info(f"  Dictionary: {config.dictionary}")
        if config.ignore:
            logger.info(f"  Ignore list: {config.ignore}")
        if config.prohibit:
            logger.info(f"  Prohibited list: {config.prohibit}")
        if config.lexicon:
            logger.info(f"  Lexicon: {config.lexicon}")
        logger.info(f"  Language model: {'wordfreq' if config.use_language_model else 'off'}")
        if config.debug_words:
            logger.info(f"  Debug words: {', '.join(sorted(config.debug_words))}")
        logger.info("")


def _run_pipeline_with_error_handling(config) -> None:
    """Run pipeline with proper error handling."""
    try:
        run_pipeline(config)
        if config.verbose:
            logger.info("")
            logger.info("=" * 60)
            logger.info("✓ Checking completed successfully")
            logger.info("=" * 60)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Checking interrupted by user")
        raise
    except SpellfugeError as e:
        logger.error(f"✗ {e}")
        sys.exit(1)
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error("✗ Checking failed")
            logger.error("=" * 60)
        raise


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Load configuration
    try:
        config = load_config(args.config, args, parser)
    except SpellfugeError as e:
        parser.error(str(e))

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    # Print startup banner
    _print_startup_banner(config.verbose)

    # Print configuration summary
    _print_config_summary(config)

    # Run pipeline
    _run_pipeline_with_error_handling(config)


if __name__ == "__main__":
    main()
