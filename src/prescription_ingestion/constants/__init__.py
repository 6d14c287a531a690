# ============================================================================
# src/prescription_ingestion/constants/__init__.py
# ============================================================================
"""
Static reference data: formats, sentinels, known interactions.
"""

from .format_types import (
    FormatKind,
    MIME_TYPE_MAPPING,
    EXTENSION_MAPPING,
    SUPPORTED_EXTENSIONS,
    DOCX_MIME_TYPE,
)
from .interaction_db import KnownInteraction, KNOWN_INTERACTIONS

__all__ = [
    "FormatKind",
    "MIME_TYPE_MAPPING",
    "EXTENSION_MAPPING",
    "SUPPORTED_EXTENSIONS",
    "DOCX_MIME_TYPE",
    "KnownInteraction",
    "KNOWN_INTERACTIONS",
]
