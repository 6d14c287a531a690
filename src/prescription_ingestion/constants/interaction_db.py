# ============================================================================
# src/prescription_ingestion/constants/interaction_db.py
# ============================================================================
"""
Known drug-drug interaction pairs used by the interaction checker.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class KnownInteraction:
    drug1: str
    drug2: str
    severity: str  # high / medium / low
    description: str


KNOWN_INTERACTIONS = [
    KnownInteraction(
        drug1="warfarin",
        drug2="aspirin",
        severity="high",
        description="Increased risk of bleeding when taken together",
    ),
    KnownInteraction(
        drug1="metformin",
        drug2="alcohol",
        severity="medium",
        description="May increase risk of lactic acidosis",
    ),
]
