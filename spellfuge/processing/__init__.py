"""Text processing pipeline."""

from .pipeline import check_lines, read_lines, run_pipeline

__all__ = ["check_lines", "read_lines", "run_pipeline"]
