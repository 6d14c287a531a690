# ============================================================================
# src/prescription_ingestion/constants/format_types.py
# ============================================================================
"""
Document Formats and Extractor Mappings
- Supported upload formats
- MIME type → format
- File extension → format
"""

from enum import Enum


class FormatKind(str, Enum):
    """
    Upload formats the pipeline can turn into text.
    Each kind routes to one TextExtractor variant.
    """
    PLAIN_TEXT = "plain_text"
    PDF = "pdf"
    DOCX = "docx"
    IMAGE = "image"
    UNSUPPORTED = "unsupported"


DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

MIME_TYPE_MAPPING = {
    "text/plain": FormatKind.PLAIN_TEXT,
    "application/pdf": FormatKind.PDF,
    DOCX_MIME_TYPE: FormatKind.DOCX,
}

# Any image/* subtype is routed to OCR
IMAGE_MIME_PREFIX = "image/"

# MIME types that say nothing about the content; fall through to the extension
GENERIC_MIME_TYPES = {
    "",
    "application/octet-stream",
    "binary/octet-stream",
    "application/unknown",
}

EXTENSION_MAPPING = {
    ".txt": FormatKind.PLAIN_TEXT,
    ".pdf": FormatKind.PDF,
    ".docx": FormatKind.DOCX,
    ".jpg": FormatKind.IMAGE,
    ".jpeg": FormatKind.IMAGE,
    ".png": FormatKind.IMAGE,
    ".bmp": FormatKind.IMAGE,
    ".tiff": FormatKind.IMAGE,
}

SUPPORTED_EXTENSIONS = sorted(EXTENSION_MAPPING)
