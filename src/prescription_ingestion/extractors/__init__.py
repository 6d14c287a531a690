# src/prescription_ingestion/extractors/__init__.py
"""
Text Extraction Module

One extractor per upload format:
- Plain text (verbatim decode)
- PDF text layer (pypdfium2, PyPDF2)
- Word documents (python-docx)
- Images (Tesseract OCR)
"""

import asyncio
from typing import Any, Dict, Optional

from ..constants.format_types import FormatKind
from ..utils.exceptions import UnsupportedFormatError
from .base import BaseTextExtractor
from .docx_extractor import DocxTextExtractor
from .ocr_extractor import OCRExtractor
from .pdf_extractor import PDFTextExtractor
from .plain_text import PlainTextExtractor

EXTRACTORS = {
    FormatKind.PLAIN_TEXT: PlainTextExtractor,
    FormatKind.PDF: PDFTextExtractor,
    FormatKind.DOCX: DocxTextExtractor,
    FormatKind.IMAGE: OCRExtractor,
}


def get_extractor(kind: FormatKind, config: Optional[Dict[str, Any]] = None) -> BaseTextExtractor:
    """
    Build the extractor for a format.

    Raises:
        UnsupportedFormatError: for FormatKind.UNSUPPORTED
    """
    extractor_cls = EXTRACTORS.get(kind)
    if extractor_cls is None:
        raise UnsupportedFormatError(f"No extractor for format '{kind.value}'", format=kind.value)
    return extractor_cls(config)


async def extract_text(
    data: bytes,
    kind: FormatKind,
    config: Optional[Dict[str, Any]] = None
) -> str:
    """
    Extract text without blocking the event loop.

    Decoding (OCR in particular) can take seconds, so it runs in a worker
    thread and the caller awaits it like any other I/O.
    """
    extractor = get_extractor(kind, config)
    return await asyncio.to_thread(extractor.extract, data)


__all__ = [
    "BaseTextExtractor",
    "PlainTextExtractor",
    "PDFTextExtractor",
    "DocxTextExtractor",
    "OCRExtractor",
    "EXTRACTORS",
    "get_extractor",
    "extract_text",
]
