# ============================================================================
# src/prescription_ingestion/normalization/normalizer.py
# ============================================================================
"""
Record Normalization

Maps whatever an extractor produced (model JSON, heuristic dict, an
existing record) onto the canonical PrescriptionRecord:
- Accepts camelCase or snake_case keys
- Coerces scalars to stripped strings, bare strings to one-item lists
- Drops blank list entries
- Substitutes sentinels for missing/empty fields

normalize() never raises and normalize(normalize(x)) == normalize(x).
"""

import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Union

from ..constants import placeholders
from ..models.prescription import (
    Interaction,
    Medication,
    PrescriptionRecord,
    RECORD_FIELDS,
    Severity,
)

logger = logging.getLogger(__name__)

SEVERITY_ALIASES = {
    "high": Severity.HIGH,
    "severe": Severity.HIGH,
    "major": Severity.HIGH,
    "medium": Severity.MEDIUM,
    "moderate": Severity.MEDIUM,
    "low": Severity.LOW,
    "minor": Severity.LOW,
    "mild": Severity.LOW,
}

PartialRecord = Union[PrescriptionRecord, Mapping[str, Any], None]


def _snake(key: str) -> str:
    return re.sub(r'(?<!^)(?=[A-Z])', '_', key).lower()


def _get(data: Mapping[str, Any], key: str) -> Any:
    """Look up a camelCase wire key, accepting its snake_case spelling too."""
    if key in data:
        return data[key]
    return data.get(_snake(key))


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (list, tuple)):
        return ", ".join(t for t in (_as_text(v) for v in value) if t)
    return ""


def _as_text_list(value: Any) -> List[str]:
    if value is None or isinstance(value, Mapping):
        return []
    if isinstance(value, (list, tuple)):
        items = [_as_text(v) for v in value]
    else:
        items = [_as_text(value)]
    return [item for item in items if item]


def _as_items(value: Any) -> List[Any]:
    """Sequence-valued fields sometimes arrive as a single object."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _normalize_medication(item: Any) -> Optional[Medication]:
    if isinstance(item, Medication):
        item = item.model_dump(by_alias=True)
    if isinstance(item, str):
        item = {"name": item}
    if not isinstance(item, Mapping):
        return None

    name = _as_text(item.get("name"))
    dosage = _as_text(item.get("dosage"))
    frequency = _as_text(item.get("frequency"))
    duration = _as_text(item.get("duration"))
    instructions = _as_text(item.get("instructions"))

    if not any((name, dosage, frequency, duration, instructions)):
        return None

    return Medication(
        name=name or placeholders.MEDICATION_NAME_SENTINEL,
        dosage=dosage or placeholders.DOSAGE_SENTINEL,
        frequency=frequency or placeholders.FREQUENCY_SENTINEL,
        duration=duration or placeholders.DURATION_SENTINEL,
        instructions=instructions,
    )


def _normalize_severity(value: Any) -> Severity:
    if isinstance(value, Severity):
        return value
    text = _as_text(value).lower()
    severity = SEVERITY_ALIASES.get(text)
    if severity is None:
        if text:
            logger.debug(f"Unrecognised interaction severity '{text}', using default")
        severity = Severity(placeholders.DEFAULT_INTERACTION_SEVERITY)
    return severity


def _normalize_interaction(item: Any) -> Optional[Interaction]:
    if isinstance(item, Interaction):
        item = item.model_dump(by_alias=True)
    if isinstance(item, str):
        item = {"description": item}
    if not isinstance(item, Mapping):
        return None

    description = _as_text(item.get("description"))
    drugs = _as_text_list(item.get("drugs"))
    if not description and not drugs:
        return None

    return Interaction(
        severity=_normalize_severity(item.get("severity")),
        description=description or placeholders.INTERACTION_DESCRIPTION_SENTINEL,
        drugs=drugs,
    )


def normalize(partial: PartialRecord) -> PrescriptionRecord:
    """
    Build a fully populated PrescriptionRecord from a partial one.

    Args:
        partial: Mapping (wire or snake_case keys), existing record, or None

    Returns:
        PrescriptionRecord with every field present
    """
    if isinstance(partial, PrescriptionRecord):
        data: Mapping[str, Any] = partial.to_dict()
    elif isinstance(partial, Mapping):
        data = partial
    else:
        data = {}

    medications = [
        med for med in (_normalize_medication(m) for m in _as_items(_get(data, "medications")))
        if med is not None
    ]
    interactions = [
        inter for inter in (_normalize_interaction(i) for i in _as_items(_get(data, "interactions")))
        if inter is not None
    ]

    return PrescriptionRecord(
        patient_name=_as_text(_get(data, "patientName")) or placeholders.PATIENT_NAME_SENTINEL,
        age=_as_text(_get(data, "age")) or placeholders.AGE_SENTINEL,
        diagnosis=_as_text_list(_get(data, "diagnosis")) or placeholders.DIAGNOSIS_SENTINEL,
        medications=medications,
        medical_history=(
            _as_text_list(_get(data, "medicalHistory")) or placeholders.MEDICAL_HISTORY_SENTINEL
        ),
        allergies=_as_text_list(_get(data, "allergies")) or placeholders.ALLERGIES_SENTINEL,
        interactions=interactions,
        recommendations=(
            _as_text_list(_get(data, "recommendations")) or placeholders.RECOMMENDATIONS_SENTINEL
        ),
    )


def has_schema_keys(data: Mapping[str, Any]) -> bool:
    """True if the mapping carries at least one canonical record field."""
    return any(key in data or _snake(key) in data for key in RECORD_FIELDS)
