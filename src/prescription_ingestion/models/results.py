# ============================================================================
# src/prescription_ingestion/models/results.py
# ============================================================================
"""
Provenance and result containers

- ExtractionSource: which cascade tier produced a record
- ExtractionAttempt: one tier's try, kept only for the current invocation
- CascadeResult: record + provenance returned by the inference cascade
- AnalysisResult: what analyze() hands back to callers
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..constants.format_types import FormatKind
from .prescription import PrescriptionRecord


class ExtractionSource(str, Enum):
    PRIMARY_MODEL = "primary-model"
    FALLBACK_MODEL = "fallback-model"
    HEURISTIC = "heuristic"


@dataclass
class ExtractionAttempt:
    source: ExtractionSource
    raw_output: str = ""
    succeeded: bool = False
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source.value,
            "succeeded": self.succeeded,
            "error": self.error,
            "raw_output_chars": len(self.raw_output),
        }


@dataclass
class CascadeResult:
    record: PrescriptionRecord
    source: ExtractionSource
    attempts: List[ExtractionAttempt] = field(default_factory=list)

    @property
    def degraded(self) -> bool:
        """True when a lower-quality tier produced the record."""
        return self.source != ExtractionSource.PRIMARY_MODEL


@dataclass
class AnalysisResult:
    """
    Outcome of one analyze() invocation.

    The record is always fully populated. source/degraded tell the caller
    whether a fallback or heuristic tier was used.
    """
    record: PrescriptionRecord
    source: ExtractionSource
    format_kind: Optional[FormatKind] = None
    text_length: int = 0
    attempts: List[ExtractionAttempt] = field(default_factory=list)

    @property
    def degraded(self) -> bool:
        return self.source != ExtractionSource.PRIMARY_MODEL

    def to_dict(self) -> Dict[str, Any]:
        return {
            "record": self.record.to_dict(),
            "source": self.source.value,
            "degraded": self.degraded,
            "format": self.format_kind.value if self.format_kind else None,
            "text_length": self.text_length,
            "attempts": [a.to_dict() for a in self.attempts],
        }
