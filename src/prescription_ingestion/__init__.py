"""
Prescription Ingestion Engine

Turns uploaded prescriptions (plain text, PDF, DOCX, scanned images)
into a normalized structured record using hosted text-generation models,
with a rule-based fallback when the models are unavailable.

Usage:
    from prescription_ingestion import analyze

    result = await analyze(pdf_bytes, mime_type="application/pdf", file_name="rx.pdf")
    result.record.to_dict()   # camelCase record
    result.source             # primary-model / fallback-model / heuristic
"""

__version__ = "0.1.0"

from .core import PrescriptionPipeline, analyze
from .models import (
    AnalysisResult,
    ExtractionSource,
    Interaction,
    Medication,
    PrescriptionRecord,
    Severity,
)
from .normalization import normalize

__all__ = [
    "__version__",
    "PrescriptionPipeline",
    "analyze",
    "AnalysisResult",
    "ExtractionSource",
    "Interaction",
    "Medication",
    "PrescriptionRecord",
    "Severity",
    "normalize",
]
