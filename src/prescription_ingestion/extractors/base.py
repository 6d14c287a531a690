# ============================================================================
# src/prescription_ingestion/extractors/base.py
# ============================================================================
"""
Base Text Extractor Interface

Every upload format has one extractor that turns raw bytes into plain
text. Heavy lifting is delegated to decoder libraries; extractors only
adapt their inputs and translate their failures into ExtractionError.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
import logging

from ..constants.format_types import FormatKind
from ..utils.exceptions import ExtractionError


class BaseTextExtractor(ABC):
    """
    Abstract base class for format-specific text extractors.

    All variants must implement:
    - format_kind: the FormatKind they handle
    - extract(): bytes -> text, raising ExtractionError on decoder failure
    """

    # Cause string carried by ExtractionError for this variant
    failure_cause: str = "extraction-failed"

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    @abstractmethod
    def format_kind(self) -> FormatKind:
        """Return the format this extractor handles."""
        pass

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """
        Convert raw document bytes into plain text.

        Blocking: callers in async code should run it through
        extractors.extract_text(), which offloads to a worker thread.

        Raises:
            ExtractionError: when the decoder fails or finds no text
        """
        pass

    def _fail(self, message: str, error: Optional[BaseException] = None) -> ExtractionError:
        """Build the ExtractionError for this variant and log it."""
        if error is not None:
            self.logger.error(f"{message}: {error}")
        else:
            self.logger.error(message)
        return ExtractionError(message, cause=self.failure_cause)
