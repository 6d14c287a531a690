# ============================================================================
# src/prescription_ingestion/models/prescription.py
# ============================================================================
"""
Canonical prescription schema.

Field names are snake_case in Python and camelCase on the wire
(patientName, medicalHistory, ...), matching the JSON shape the models
are prompted to produce. Records are frozen and sequences are tuples, so
a record cannot change after construction.
"""

from enum import Enum
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class _SchemaModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Medication(_SchemaModel):
    name: str
    dosage: str
    frequency: str
    duration: str
    instructions: str = ""


class Interaction(_SchemaModel):
    severity: Severity
    description: str
    drugs: Tuple[str, ...] = Field(default_factory=tuple)


class PrescriptionRecord(_SchemaModel):
    """Fully populated prescription record. Build through normalize()."""

    patient_name: str
    age: str
    diagnosis: Tuple[str, ...]
    medications: Tuple[Medication, ...]
    medical_history: Tuple[str, ...]
    allergies: Tuple[str, ...]
    interactions: Tuple[Interaction, ...]
    recommendations: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation with camelCase keys and plain lists."""
        return self.model_dump(by_alias=True, mode="json")

    def to_json(self, indent: int = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)


# Wire keys of the canonical schema, in prompt order
RECORD_FIELDS = (
    "patientName",
    "age",
    "diagnosis",
    "medications",
    "medicalHistory",
    "allergies",
    "interactions",
    "recommendations",
)
