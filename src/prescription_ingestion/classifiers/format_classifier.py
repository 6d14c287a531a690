# ============================================================================
# src/prescription_ingestion/classifiers/format_classifier.py
# ============================================================================
"""
Upload Format Classification

Decides which TextExtractor variant handles an uploaded file:

1. DECLARED MIME TYPE (primary)
   - text/plain, application/pdf, DOCX, image/*
   - Parameters (charset=...) and case are ignored

2. FILE EXTENSION (fallback)
   - Only consulted when the MIME type is empty, generic
     (application/octet-stream) or unknown
   - Case-insensitive: .txt .pdf .docx .jpg .jpeg .png .bmp .tiff

3. UNSUPPORTED
   - Neither signal matched

When both signals are present and disagree, the MIME type wins.
"""

import logging
from pathlib import PurePath
from typing import Optional

from ..constants.format_types import (
    EXTENSION_MAPPING,
    GENERIC_MIME_TYPES,
    IMAGE_MIME_PREFIX,
    MIME_TYPE_MAPPING,
    SUPPORTED_EXTENSIONS,
    FormatKind,
)
from ..utils.exceptions import UnsupportedFormatError


class FormatClassifier:
    """Selects an extraction strategy from a file's declared type and name."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def classify(self, declared_mime_type: str, file_name: str) -> FormatKind:
        """
        Classify an upload.

        Args:
            declared_mime_type: MIME type reported by the client (may be empty)
            file_name: Original file name (may be empty)

        Returns:
            FormatKind, FormatKind.UNSUPPORTED if nothing matched
        """
        kind = self._classify_by_mime(declared_mime_type or "")
        if kind is not None:
            self.logger.debug(f"Classified '{file_name}' as {kind.value} from MIME type")
            return kind

        kind = self._classify_by_extension(file_name or "")
        if kind is not None:
            self.logger.debug(f"Classified '{file_name}' as {kind.value} from extension")
            return kind

        self.logger.info(
            f"Unsupported upload: mime='{declared_mime_type}', name='{file_name}'"
        )
        return FormatKind.UNSUPPORTED

    def require_supported(self, declared_mime_type: str, file_name: str) -> FormatKind:
        """
        Classify an upload, raising for unsupported formats.

        Raises:
            UnsupportedFormatError: carrying the offending format
        """
        kind = self.classify(declared_mime_type, file_name)
        if kind == FormatKind.UNSUPPORTED:
            offending = declared_mime_type or PurePath(file_name or "").suffix or "unknown"
            raise UnsupportedFormatError(
                f"Unsupported file format '{offending}'. Please upload PDF, DOCX, TXT, "
                f"or image files ({', '.join(SUPPORTED_EXTENSIONS)}).",
                format=offending,
            )
        return kind

    def _classify_by_mime(self, mime_type: str) -> Optional[FormatKind]:
        mime = mime_type.split(";", 1)[0].strip().lower()
        if mime in GENERIC_MIME_TYPES:
            return None
        if mime in MIME_TYPE_MAPPING:
            return MIME_TYPE_MAPPING[mime]
        if mime.startswith(IMAGE_MIME_PREFIX):
            return FormatKind.IMAGE
        return None

    def _classify_by_extension(self, file_name: str) -> Optional[FormatKind]:
        suffix = PurePath(file_name.strip()).suffix.lower()
        return EXTENSION_MAPPING.get(suffix)


def classify(declared_mime_type: str, file_name: str) -> FormatKind:
    """Module-level shortcut for FormatClassifier().classify()."""
    return FormatClassifier().classify(declared_mime_type, file_name)
