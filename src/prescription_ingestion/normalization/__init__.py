"""
Record normalization onto the canonical schema.
"""

from .normalizer import normalize, has_schema_keys

__all__ = ["normalize", "has_schema_keys"]
