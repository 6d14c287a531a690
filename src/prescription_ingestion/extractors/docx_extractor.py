# src/prescription_ingestion/extractors/docx_extractor.py
"""
Word (OOXML .docx) text extraction via python-docx.

Paragraph text first, then table cells row by row, one line each.
"""

import io

import docx

from ..constants.format_types import FormatKind
from .base import BaseTextExtractor


class DocxTextExtractor(BaseTextExtractor):

    failure_cause = "docx-parse-failed"

    @property
    def format_kind(self) -> FormatKind:
        return FormatKind.DOCX

    def extract(self, data: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(data))
            lines = [paragraph.text for paragraph in document.paragraphs]
            for table in document.tables:
                for row in table.rows:
                    cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                    if cells:
                        lines.append(" | ".join(cells))
        except Exception as e:
            raise self._fail("Failed to parse DOCX file", e) from e

        text = "\n".join(lines).strip()
        if not text:
            raise self._fail("DOCX file contains no text")

        self.logger.info(f"Extracted {len(text)} chars from DOCX")
        return text
