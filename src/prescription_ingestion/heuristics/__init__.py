"""
Deterministic pattern-based extraction (last cascade tier).
"""

from .heuristic_extractor import HeuristicExtractor, extract_heuristic
from .rules import ExtractionRule

__all__ = ["HeuristicExtractor", "extract_heuristic", "ExtractionRule"]
