"""
Supplementary checkers: known drug interactions and dosage estimates.
"""

from .dosage_calculator import DosageCalculator, DosageResult, calculate_dosage
from .interaction_checker import DrugInteractionChecker, check_interactions

__all__ = [
    "DosageCalculator",
    "DosageResult",
    "calculate_dosage",
    "DrugInteractionChecker",
    "check_interactions",
]
