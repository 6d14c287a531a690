# ============================================================================
# src/prescription_ingestion/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .inference_config import InferenceSettings, inference_settings
from .extraction_config import ExtractionSettings, extraction_settings
from .logging_config import LoggingSettings, logging_settings

__all__ = [
    "InferenceSettings",
    "inference_settings",
    "ExtractionSettings",
    "extraction_settings",
    "LoggingSettings",
    "logging_settings",
]
