# ============================================================================
# src/prescription_ingestion/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the prescription ingestion engine.

Only the document-stage errors (UnsupportedFormatError, ExtractionError)
ever reach a caller of analyze(). Model and parse errors are absorbed by
the inference cascade.
"""

from typing import Optional


class PrescriptionIngestionError(Exception):
    """Base exception for all prescription ingestion errors."""
    pass


class DocumentProcessingError(PrescriptionIngestionError):
    """Error while turning an uploaded document into text."""
    pass


class UnsupportedFormatError(DocumentProcessingError):
    """Document format is not one of the recognised kinds."""

    def __init__(self, message: str, format: str = ""):
        super().__init__(message)
        self.format = format


class ExtractionError(DocumentProcessingError):
    """A decoder collaborator (PDF, DOCX, OCR) failed."""

    def __init__(self, message: str, cause: str):
        super().__init__(message)
        self.cause = cause


class ModelError(PrescriptionIngestionError):
    """Error with a remote inference model."""
    pass


class InferenceError(ModelError):
    """Inference request failed or returned an unusable body."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ParseError(PrescriptionIngestionError):
    """No JSON object could be recovered from model output."""
    pass


class ConfigurationError(PrescriptionIngestionError):
    """Invalid configuration."""
    pass
