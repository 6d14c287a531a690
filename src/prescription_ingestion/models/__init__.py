# ============================================================================
# src/prescription_ingestion/models/__init__.py
# ============================================================================
"""
Data models: canonical record schema and provenance containers.
"""

from .prescription import (
    Severity,
    Medication,
    Interaction,
    PrescriptionRecord,
    RECORD_FIELDS,
)
from .results import (
    ExtractionSource,
    ExtractionAttempt,
    CascadeResult,
    AnalysisResult,
)

__all__ = [
    "Severity",
    "Medication",
    "Interaction",
    "PrescriptionRecord",
    "RECORD_FIELDS",
    "ExtractionSource",
    "ExtractionAttempt",
    "CascadeResult",
    "AnalysisResult",
]
