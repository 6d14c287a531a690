# ============================================================================
# src/prescription_ingestion/heuristics/heuristic_extractor.py
# ============================================================================
"""
Heuristic Extractor - last tier of the inference cascade

Reads the few fields that have reliable surface patterns straight from
the text and fills everything else with fixed placeholder content:

- Patient name:  "Patient:" / "Patient Name:" / "Name:" label
- Age:           "<n> years old" / "<n> y.o."
- Diagnosis:     "Diagnosis:" segments, else dash-bullet lines
- Medications:   "[1.] <Word> <n>mg" tokens
- Allergies:     "Allergies:" segments
- History, interactions, recommendations: placeholders only

Every value in the result is traceable to a literal match or an
explicit placeholder. extract() never raises.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..constants import placeholders
from ..models.prescription import PrescriptionRecord
from ..normalization.normalizer import normalize
from .rules import (
    AGE_RULE,
    ALLERGY_LABEL_RULE,
    BULLET_LINE_RULE,
    DIAGNOSIS_LABEL_RULE,
    MEDICATION_RULE,
    NAME_LABEL_RULE,
    PATIENT_LABEL_RULE,
    ExtractionRule,
)


class HeuristicExtractor:
    """
    Composes extraction rules per field.

    Single-valued fields take the first rule that matches; list fields
    take all matches of the first rule that matches at all.
    """

    SCALAR_RULES: Dict[str, Sequence[ExtractionRule]] = {
        "patientName": (PATIENT_LABEL_RULE, NAME_LABEL_RULE),
        "age": (AGE_RULE,),
    }

    LIST_RULES: Dict[str, Sequence[ExtractionRule]] = {
        "diagnosis": (DIAGNOSIS_LABEL_RULE, BULLET_LINE_RULE),
        "medications": (MEDICATION_RULE,),
        "allergies": (ALLERGY_LABEL_RULE,),
    }

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def extract(self, text: Optional[str]) -> PrescriptionRecord:
        """
        Best-effort record from raw text.

        Args:
            text: Document text (None and "" are accepted)

        Returns:
            Fully populated PrescriptionRecord
        """
        text = text or ""
        partial: Dict[str, Any] = {}

        for field_name, rules in self.SCALAR_RULES.items():
            value = self._first_match(rules, text)
            if value is not None:
                partial[field_name] = value

        for field_name, rules in self.LIST_RULES.items():
            partial[field_name] = self._all_matches(rules, text)

        partial["medications"] = [
            {
                **med,
                "frequency": placeholders.HEURISTIC_FREQUENCY,
                "duration": placeholders.HEURISTIC_DURATION,
                "instructions": placeholders.HEURISTIC_INSTRUCTIONS,
            }
            for med in partial["medications"]
        ]
        partial["medicalHistory"] = list(placeholders.HEURISTIC_MEDICAL_HISTORY)
        partial["interactions"] = [dict(placeholders.HEURISTIC_INTERACTION)]
        partial["recommendations"] = list(placeholders.HEURISTIC_RECOMMENDATIONS)

        self.logger.info(
            f"Heuristic extraction: name={'patientName' in partial}, age={'age' in partial}, "
            f"{len(partial['diagnosis'])} diagnoses, {len(partial['medications'])} medications, "
            f"{len(partial['allergies'])} allergies"
        )
        return normalize(partial)

    def _first_match(self, rules: Sequence[ExtractionRule], text: str):
        for rule in rules:
            value = rule.first(text)
            if value is not None:
                self.logger.debug(f"Rule '{rule.name}' matched: {value!r}")
                return value
        return None

    def _all_matches(self, rules: Sequence[ExtractionRule], text: str) -> List:
        for rule in rules:
            values = rule.all(text)
            if values:
                self.logger.debug(f"Rule '{rule.name}' matched {len(values)} time(s)")
                return values
        return []


def extract_heuristic(text: Optional[str]) -> PrescriptionRecord:
    """Module-level shortcut for HeuristicExtractor().extract()."""
    return HeuristicExtractor().extract(text)
