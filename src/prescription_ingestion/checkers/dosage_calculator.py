# ============================================================================
# src/prescription_ingestion/checkers/dosage_calculator.py
# ============================================================================
"""
Age- and weight-based dosage estimate.

Base dose is 10 mg/kg, reduced to 8 mg/kg for children (< 12 years) and
6 mg/kg for older adults (> 65 years). The result is an illustration,
not clinical guidance.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

BASE_DOSE_MG_PER_KG = 10.0
PEDIATRIC_DOSE_MG_PER_KG = 8.0
GERIATRIC_DOSE_MG_PER_KG = 6.0
PEDIATRIC_AGE_LIMIT = 12
GERIATRIC_AGE_LIMIT = 65
DEFAULT_FREQUENCY = "twice daily"

PEDIATRIC_WARNING = "Pediatric dosing - monitor closely"
GERIATRIC_WARNING = "Geriatric dosing - reduced dose due to age"


@dataclass
class DosageResult:
    medication: str
    age: int
    weight: float
    recommended_dose: str
    frequency: str
    max_daily: str
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "medication": self.medication,
            "age": self.age,
            "weight": self.weight,
            "recommendedDose": self.recommended_dose,
            "frequency": self.frequency,
            "maxDaily": self.max_daily,
            "warnings": list(self.warnings),
        }


def _format_mg(value: float) -> str:
    return f"{value:.1f} mg"


class DosageCalculator:

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def calculate(self, medication: str, age: int, weight_kg: float) -> DosageResult:
        """
        Estimate a single dose and the daily maximum.

        Raises:
            ValueError: medication is blank, or age/weight is not positive
        """
        if not medication or not medication.strip():
            raise ValueError("Medication is required")
        if age is None or age <= 0:
            raise ValueError(f"Age must be a positive number of years, got {age!r}")
        if weight_kg is None or weight_kg <= 0:
            raise ValueError(f"Weight must be a positive number of kilograms, got {weight_kg!r}")

        dose_per_kg = BASE_DOSE_MG_PER_KG
        warnings = []
        if age < PEDIATRIC_AGE_LIMIT:
            dose_per_kg = PEDIATRIC_DOSE_MG_PER_KG
            warnings.append(PEDIATRIC_WARNING)
        elif age > GERIATRIC_AGE_LIMIT:
            dose_per_kg = GERIATRIC_DOSE_MG_PER_KG
            warnings.append(GERIATRIC_WARNING)

        dose = dose_per_kg * weight_kg
        result = DosageResult(
            medication=medication.strip(),
            age=int(age),
            weight=float(weight_kg),
            recommended_dose=_format_mg(dose),
            frequency=DEFAULT_FREQUENCY,
            max_daily=_format_mg(dose * 2),
            warnings=warnings,
        )
        self.logger.info(
            f"Dosage for {result.medication}: {result.recommended_dose} "
            f"(age={result.age}, weight={result.weight}kg)"
        )
        return result


def calculate_dosage(medication: str, age: int, weight_kg: float) -> DosageResult:
    return DosageCalculator().calculate(medication, age, weight_kg)
