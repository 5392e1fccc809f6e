"""Misspelling classification and suggestion generation."""

from .candidates import CandidateList
from .classifier import MisspellingClassifier
from .compounds import CompoundCandidateGenerator
from .heuristics import Morphology
from .rule import GermanSpeller
from .suggestions import SuggestionPipeline

__all__ = [
    "CandidateList",
    "MisspellingClassifier",
    "CompoundCandidateGenerator",
    "Morphology",
    "GermanSpeller",
    "SuggestionPipeline",
]
