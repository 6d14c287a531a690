# ============================================================================
# src/prescription_ingestion/constants/placeholders.py
# ============================================================================
"""
Sentinel and placeholder values

Every PrescriptionRecord field is always populated. These are the fixed
values substituted when a field could not be extracted, plus the fixed
content the heuristic tier emits for fields it does not try to read.
"""

# Scalar identity fields
PATIENT_NAME_SENTINEL = "Unable to extract"
AGE_SENTINEL = "Not specified"

# List fields that must never be empty
DIAGNOSIS_SENTINEL = ["None detected"]
MEDICAL_HISTORY_SENTINEL = ["No medical history reported"]
ALLERGIES_SENTINEL = ["None specified"]
RECOMMENDATIONS_SENTINEL = ["Please review manually"]

# Medication sub-fields
MEDICATION_NAME_SENTINEL = "Unknown medication"
DOSAGE_SENTINEL = "As prescribed"
FREQUENCY_SENTINEL = "As directed"
DURATION_SENTINEL = "As prescribed"

# Interaction sub-fields
INTERACTION_DESCRIPTION_SENTINEL = "No description provided"
DEFAULT_INTERACTION_SEVERITY = "medium"

# ----------------------------------------------------------------------------
# Heuristic tier fixed content
# ----------------------------------------------------------------------------

HEURISTIC_FREQUENCY = "As directed"
HEURISTIC_DURATION = "As prescribed"
HEURISTIC_INSTRUCTIONS = "Follow doctor's instructions"

HEURISTIC_MEDICAL_HISTORY = ["Medical history not assessed; review the source document"]

HEURISTIC_INTERACTION = {
    "severity": "medium",
    "description": "Standard drug interaction monitoring recommended",
    "drugs": ["All prescribed medications"],
}

HEURISTIC_RECOMMENDATIONS = [
    "Follow prescribed dosage instructions",
    "Monitor for any adverse reactions",
    "Consult healthcare provider for questions",
    "Keep follow-up appointments",
]
