# src/prescription_ingestion/extractors/plain_text.py
"""
Plain text "extraction": decode the bytes verbatim.
"""

from ..config import extraction_settings
from ..constants.format_types import FormatKind
from .base import BaseTextExtractor


class PlainTextExtractor(BaseTextExtractor):
    """UTF-8 decoding (BOM tolerated), latin-1 fallback when enabled."""

    failure_cause = "text-decode-failed"

    def __init__(self, config=None):
        super().__init__(config)
        self.encoding_fallback = self.config.get(
            'text_encoding_fallback', extraction_settings.TEXT_ENCODING_FALLBACK
        )

    @property
    def format_kind(self) -> FormatKind:
        return FormatKind.PLAIN_TEXT

    def extract(self, data: bytes) -> str:
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            if not self.encoding_fallback:
                raise self._fail("Text file is not valid UTF-8", e) from e
            self.logger.warning(f"Text file is not valid UTF-8, decoding as latin-1: {e}")
            return data.decode("latin-1")
