# ============================================================================
# src/prescription_ingestion/heuristics/rules.py
# ============================================================================
"""
Pattern-based extraction rules.

Each rule is independent and total: it never raises, and returns None
(or an empty list) when its pattern does not match. The heuristic
extractor composes them per field.
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

# Labels that open a new section; a labelled value stops in front of them
SECTION_LABELS = (
    r"(?:patient(?:\s+name)?|name|age|sex|gender|date|diagnos[ie]s|medications?|rx|"
    r"prescription|allergies|allergy|medical\s+history|history|recommendations?|"
    r"instructions|notes?)"
)

# End of a labelled value: sentence period, line break, next label, end of text
_VALUE_END = rf"(?=\.(?:\s|$)|\n|\s*\b{SECTION_LABELS}\s*:|$)"

# End of a name: comma, line break, next label, end of text
_NAME_END = rf"(?=\s*,|\n|\s*\b{SECTION_LABELS}\s*:|$)"

LEADING_PUNCTUATION = re.compile(r"^[\s\-:;,.*•]+")


def strip_leading_punctuation(value: str) -> str:
    return LEADING_PUNCTUATION.sub("", value).strip()


@dataclass(frozen=True)
class ExtractionRule:
    """
    A named regular expression with a value post-processor.

    Attributes:
        name: Rule identifier used in debug logs
        pattern: Compiled pattern; group 1 carries the value unless
            extract_value says otherwise
        extract_value: Turns a match into a value (default: stripped group 1)
    """
    name: str
    pattern: re.Pattern
    extract_value: Optional[Callable[[re.Match], Optional[object]]] = None

    def _value(self, match: re.Match):
        if self.extract_value is not None:
            return self.extract_value(match)
        value = strip_leading_punctuation(match.group(1))
        return value or None

    def first(self, text: str):
        """Value of the first match, or None."""
        for match in self.pattern.finditer(text or ""):
            value = self._value(match)
            if value:
                return value
        return None

    def all(self, text: str) -> List:
        """Values of every match, in document order."""
        values = []
        for match in self.pattern.finditer(text or ""):
            value = self._value(match)
            if value:
                values.append(value)
        return values


def _age_value(match: re.Match) -> str:
    return f"{int(match.group(1))} years old"


def _medication_value(match: re.Match) -> Dict[str, str]:
    return {
        "name": match.group("name").strip(),
        "dosage": re.sub(r"\s+", "", match.group("dosage")),
    }


PATIENT_LABEL_RULE = ExtractionRule(
    name="patient_label",
    pattern=re.compile(rf"\bPatient(?:\s+Name)?\s*:\s*([^,\n]+?){_NAME_END}", re.IGNORECASE),
)

NAME_LABEL_RULE = ExtractionRule(
    name="name_label",
    pattern=re.compile(rf"\bName\s*:\s*([^,\n]+?){_NAME_END}", re.IGNORECASE),
)

AGE_RULE = ExtractionRule(
    name="age",
    pattern=re.compile(r"\b(\d{1,3})\s*(?:years?[\s-]*old|y\.?\s?o\b\.?)", re.IGNORECASE),
    extract_value=_age_value,
)

DIAGNOSIS_LABEL_RULE = ExtractionRule(
    name="diagnosis_label",
    pattern=re.compile(rf"\bDiagnos[ie]s\s*:\s*(.+?){_VALUE_END}", re.IGNORECASE),
)

BULLET_LINE_RULE = ExtractionRule(
    name="bullet_line",
    pattern=re.compile(r"^[ \t]*-[ \t]*([^.\n]+)", re.MULTILINE),
)

MEDICATION_RULE = ExtractionRule(
    name="medication_dosage",
    pattern=re.compile(
        r"(?:\b\d+\.\s*)?\b(?P<name>[A-Za-z]+)\s+(?P<dosage>\d+(?:\.\d+)?\s*mg)\b",
        re.IGNORECASE,
    ),
    extract_value=_medication_value,
)

ALLERGY_LABEL_RULE = ExtractionRule(
    name="allergy_label",
    pattern=re.compile(rf"\bAllerg(?:y|ies)\s*:\s*(.+?){_VALUE_END}", re.IGNORECASE),
)
