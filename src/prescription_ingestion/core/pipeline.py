# ============================================================================
# src/prescription_ingestion/core/pipeline.py
# ============================================================================
"""
Prescription Pipeline

This is the MAIN entry point for prescription analysis.

Flow:
1. Classify the upload (MIME type first, then file extension)
2. Extract text with the matching extractor (worker thread)
3. Run the inference cascade (primary -> fallback -> heuristic)
4. Return the normalized record with its provenance

Only document-stage failures reach the caller: UnsupportedFormatError
and ExtractionError. Model and parse failures degrade the result
instead (see AnalysisResult.source / degraded).
"""

import logging
from typing import Any, Dict, Optional

from ..classifiers.format_classifier import FormatClassifier
from ..extractors import extract_text
from ..inference.cascade import InferenceCascade
from ..models.results import AnalysisResult
from ..utils.logging import log_performance

logger = logging.getLogger(__name__)


class PrescriptionPipeline:
    """
    Wires classifier, extractors and the inference cascade together.

    The config dict is handed to both the extractors and the cascade
    (their option names do not overlap).
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        cascade: Optional[InferenceCascade] = None,
        classifier: Optional[FormatClassifier] = None,
    ):
        self.config = config or {}
        self.logger = logging.getLogger(__name__)
        self.classifier = classifier or FormatClassifier()
        self.cascade = cascade or InferenceCascade(self.config)

    @log_performance(logger, "Prescription analysis")
    async def analyze(
        self,
        data: Optional[bytes] = None,
        *,
        text: Optional[str] = None,
        mime_type: str = "",
        file_name: str = "",
    ) -> AnalysisResult:
        """
        Analyze an uploaded document or pasted text.

        Args:
            data: Raw file bytes (ignored when text is given)
            text: Direct text input; skips classification and extraction
            mime_type: Declared MIME type of the upload
            file_name: Original file name (extension is the fallback signal)

        Returns:
            AnalysisResult with a fully populated record

        Raises:
            UnsupportedFormatError: upload is not text, PDF, DOCX or an image
            ExtractionError: the decoder for the format failed
        """
        format_kind = None

        if text is None:
            format_kind = self.classifier.require_supported(mime_type, file_name)
            self.logger.info(
                f"Extracting text from '{file_name or '<upload>'}' as {format_kind.value} "
                f"({len(data or b'')} bytes)"
            )
            text = await extract_text(data or b"", format_kind, self.config)
        else:
            self.logger.info(f"Analyzing direct text input ({len(text)} chars)")

        cascade_result = await self.cascade.run(text)

        return AnalysisResult(
            record=cascade_result.record,
            source=cascade_result.source,
            format_kind=format_kind,
            text_length=len(text),
            attempts=cascade_result.attempts,
        )


async def analyze(
    data: Optional[bytes] = None,
    *,
    text: Optional[str] = None,
    mime_type: str = "",
    file_name: str = "",
    config: Optional[Dict[str, Any]] = None,
) -> AnalysisResult:
    """Convenience wrapper: one pipeline per call."""
    pipeline = PrescriptionPipeline(config)
    return await pipeline.analyze(data, text=text, mime_type=mime_type, file_name=file_name)
