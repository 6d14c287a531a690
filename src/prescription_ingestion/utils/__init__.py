# ============================================================================
# src/prescription_ingestion/utils/__init__.py
# ============================================================================
"""
Utility modules for the prescription ingestion engine.
"""

from .exceptions import (
    PrescriptionIngestionError,
    DocumentProcessingError,
    UnsupportedFormatError,
    ExtractionError,
    ModelError,
    InferenceError,
    ParseError,
    ConfigurationError,
)

from .logging import (
    setup_logging,
    setup_logging_from_settings,
    JsonFormatter,
    log_performance,
)

__all__ = [
    # Exceptions
    'PrescriptionIngestionError',
    'DocumentProcessingError',
    'UnsupportedFormatError',
    'ExtractionError',
    'ModelError',
    'InferenceError',
    'ParseError',
    'ConfigurationError',
    # Logging
    'setup_logging',
    'setup_logging_from_settings',
    'JsonFormatter',
    'log_performance',
]
