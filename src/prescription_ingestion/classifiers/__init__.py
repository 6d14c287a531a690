"""
Upload format classification.
"""

from .format_classifier import FormatClassifier, classify

__all__ = ["FormatClassifier", "classify"]
