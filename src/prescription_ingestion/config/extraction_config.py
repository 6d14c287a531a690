# ============================================================================
# src/prescription_ingestion/config/extraction_config.py
# ============================================================================
"""
Text Extraction Settings
- OCR language model and binary location
- PDF page limit
- Plain-text decoding fallback
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExtractionSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    OCR_LANGUAGE: str = Field(
        default="eng",
        description="Tesseract language model used for image OCR"
    )
    TESSERACT_CMD: Optional[str] = Field(
        default=None,
        description="Explicit path to the tesseract binary (defaults to PATH lookup)"
    )
    PDF_MAX_PAGES: int = Field(
        default=50,
        gt=0,
        description="Pages read from a PDF text layer before truncating"
    )
    TEXT_ENCODING_FALLBACK: bool = Field(
        default=True,
        description="Decode non-UTF-8 plain text as latin-1 instead of failing"
    )


extraction_settings = ExtractionSettings()
