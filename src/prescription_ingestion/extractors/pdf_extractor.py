# ============================================================================
# src/prescription_ingestion/extractors/pdf_extractor.py
# ============================================================================
"""
PDF text-layer extraction.

Extraction cascade (in order of preference):
1. pypdfium2: Fast, good Unicode support, best for modern PDFs
2. PyPDF2: Fallback, widely compatible

Only the embedded text layer is read. A PDF whose pages carry no text
(a scan saved as PDF) fails with cause "pdf-parse-failed"; such files
should be uploaded as images instead.
"""

import io
from typing import List

import pypdfium2
import PyPDF2

from ..config import extraction_settings
from ..constants.format_types import FormatKind
from .base import BaseTextExtractor


class PDFTextExtractor(BaseTextExtractor):
    """
    Text-layer extraction with a decoder fallback.

    Primary: pypdfium2
    Fallback: PyPDF2
    """

    failure_cause = "pdf-parse-failed"

    def __init__(self, config=None):
        super().__init__(config)
        self.max_pages = self.config.get('pdf_max_pages', extraction_settings.PDF_MAX_PAGES)

    @property
    def format_kind(self) -> FormatKind:
        return FormatKind.PDF

    def extract(self, data: bytes) -> str:
        try:
            pages = self._extract_with_pypdfium2(data)
            method = "pypdfium2"
        except Exception as e:
            self.logger.warning(f"pypdfium2 failed, trying PyPDF2: {e}")
            try:
                pages = self._extract_with_pypdf2(data)
                method = "pypdf2"
            except Exception as e2:
                raise self._fail(
                    "Failed to parse PDF file. Please ensure it contains readable text.", e2
                ) from e2

        text = "\n\n".join(page for page in pages if page)
        if not text.strip():
            raise self._fail(
                "PDF contains no extractable text. Scanned documents should be uploaded as images."
            )

        self.logger.info(f"{method} extracted {len(text)} chars from {len(pages)} pages")
        return text

    def _extract_with_pypdfium2(self, data: bytes) -> List[str]:
        pdf = pypdfium2.PdfDocument(data)
        try:
            pages = []
            for page_num in range(min(len(pdf), self.max_pages)):
                page = pdf[page_num]
                textpage = page.get_textpage()
                try:
                    text = textpage.get_text_range() or ""
                finally:
                    textpage.close()
                    page.close()
                pages.append(text.strip())
            return pages
        finally:
            pdf.close()

    def _extract_with_pypdf2(self, data: bytes) -> List[str]:
        reader = PyPDF2.PdfReader(io.BytesIO(data))

        if reader.is_encrypted:
            # Try empty password
            try:
                reader.decrypt("")
            except Exception as e:
                raise RuntimeError("PDF is encrypted and requires a password") from e

        pages = []
        for page_num, page in enumerate(reader.pages):
            if page_num >= self.max_pages:
                break
            pages.append((page.extract_text() or "").strip())
        return pages
